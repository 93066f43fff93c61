# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Resource operations described as data, and the generic call entry point."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from pydantic.alias_generators import to_camel

from ..errors import validation_error
from ..http.models import HEADER_ACCEPT, HEADER_CONTENT_TYPE, ApiResponse
from ..http.url import expand_path_template, path_placeholders
from ..serialization import select_header_accept, select_header_content_type, to_path_value, to_query_value

if TYPE_CHECKING:
    from ..dispatcher import Dispatcher

ParameterLocation = Literal["query", "path", "header", "body"]

JSON_UTF8 = "application/json;charset=utf-8"


@dataclass(frozen=True)
class Parameter:
    name: str
    location: ParameterLocation = "query"
    required: bool = False
    wire_name: str | None = None
    description: str = ""

    @property
    def wire(self) -> str:
        return self.wire_name or to_camel(self.name)


@dataclass(frozen=True)
class Operation:
    name: str
    method: str
    path: str
    params: tuple[Parameter, ...] = ()
    response_type: str | None = None
    accepts: tuple[str, ...] = (JSON_UTF8,)
    content_types: tuple[str, ...] = (JSON_UTF8,)
    description: str = ""

    def __post_init__(self) -> None:
        declared = {p.wire for p in self.params if p.location == "path"}
        missing = [name for name in path_placeholders(self.path) if name not in declared]
        if missing:
            raise ValueError(f"{self.name}: path placeholders without parameters: {', '.join(missing)}")
        if sum(1 for p in self.params if p.location == "body") > 1:
            raise ValueError(f"{self.name}: at most one body parameter is allowed")

    def parameter(self, name: str) -> Parameter | None:
        for param in self.params:
            if param.name == name:
                return param
        return None


@dataclass(frozen=True)
class Resource:
    name: str
    operations: dict[str, Operation] = field(default_factory=dict)
    description: str = ""

    def operation(self, name: str) -> Operation:
        op = self.operations.get(name) or self.operations.get(name.replace("-", "_"))
        if op is None:
            known = ", ".join(sorted(self.operations))
            raise validation_error(f"Unknown operation {name!r} for resource {self.name!r}; known operations: {known}")
        return op


@dataclass(frozen=True)
class PreparedCall:
    """Everything :meth:`Dispatcher.call_api` needs for one operation call."""

    resource_path: str
    method: str
    query_params: dict[str, str]
    body: Any
    header_params: dict[str, str]
    response_type: str | None


def prepare_call(operation: Operation, arguments: Mapping[str, Any]) -> PreparedCall:
    """
    Validate ``arguments`` against ``operation`` and split them by location.

    Runs before any network activity; every problem is a VALIDATION failure.
    """
    known = {p.name for p in operation.params}
    unexpected = sorted(set(arguments) - known)
    if unexpected:
        raise validation_error(f"Unexpected parameter(s) {', '.join(unexpected)} when calling {operation.name}")

    query_params: dict[str, str] = {}
    path_params: dict[str, str] = {}
    header_params: dict[str, str] = {}
    body: Any = None

    for param in operation.params:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                raise validation_error(f"Missing the required parameter ${param.name} when calling {operation.name}")
            continue
        if param.location == "query":
            query_params[param.wire] = to_query_value(value)
        elif param.location == "path":
            path_params[param.wire] = to_path_value(value)
        elif param.location == "header":
            header_params[param.wire] = to_query_value(value)
        else:
            body = value

    accept = select_header_accept(operation.accepts)
    if accept is not None:
        header_params[HEADER_ACCEPT] = accept
    header_params[HEADER_CONTENT_TYPE] = select_header_content_type(operation.content_types)

    return PreparedCall(
        resource_path=expand_path_template(operation.path, path_params),
        method=operation.method,
        query_params=query_params,
        body=body,
        header_params=header_params,
        response_type=operation.response_type,
    )


def call_operation(
    dispatcher: Dispatcher,
    resource: Resource | str,
    operation: Operation | str,
    *,
    timeout: float | None = None,
    **arguments: Any,
) -> ApiResponse:
    """Execute a catalog operation and return the full response envelope."""
    if isinstance(resource, str):
        from .catalog import get_resource

        resource = get_resource(resource)
    op = resource.operation(operation) if isinstance(operation, str) else operation
    call = prepare_call(op, arguments)
    return dispatcher.call_api(
        call.resource_path,
        call.method,
        call.query_params,
        call.body,
        call.header_params,
        call.response_type,
        timeout,
    )


def invoke(
    dispatcher: Dispatcher,
    resource: Resource | str,
    operation: Operation | str,
    *,
    timeout: float | None = None,
    **arguments: Any,
) -> Any:
    """Execute a catalog operation and return only the decoded payload."""
    return call_operation(dispatcher, resource, operation, timeout=timeout, **arguments).data
