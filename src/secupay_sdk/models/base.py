# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Base classes for wire models.

Models are pydantic models with snake_case attributes and camelCase aliases on the
wire. Enum-typed fields are declared with :func:`open_enum` so a value added by a
newer server stays a plain string instead of failing validation.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, TypeVar, Union

from pydantic import BaseModel, ConfigDict, PlainValidator
from pydantic.alias_generators import to_camel

from ..errors import validation_error

T = TypeVar("T")

_TYPE_REGISTRY: dict[str, type] = {}


def register_type(cls: type[T]) -> type[T]:
    """Make ``cls`` resolvable by name from response type tags."""
    _TYPE_REGISTRY[cls.__name__] = cls
    return cls


def resolve_type(name: str) -> type | None:
    # Tags may carry a namespace prefix (``\\Vendor\\Model\\Transaction`` / ``models.Transaction``).
    short = name.replace("\\", ".").rsplit(".", 1)[-1]
    return _TYPE_REGISTRY.get(short)


class ClosedEnum(str, Enum):
    """String enumeration with an explicit, exhaustive value set."""

    @classmethod
    def allowable_values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def validate(cls, value: Any) -> ClosedEnum:
        """Return the member for ``value`` or raise a validation failure."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value))
        except ValueError:
            allowed = ", ".join(cls.allowable_values())
            raise validation_error(f"Invalid value {value!r} for {cls.__name__}, must be one of: {allowed}") from None

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return isinstance(value, cls) or str(value) in cls.allowable_values()


def open_enum(enum_cls: type[Enum]) -> Any:
    """Field type holding a member of ``enum_cls``, or the raw value when it is not one."""

    def _member_or_raw(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            return value

    return Annotated[Union[enum_cls, str], PlainValidator(_member_or_raw)]


def to_wire(value: Any) -> Any:
    """Convert models, enums and timestamps (nested in mappings or sequences) into JSON-ready values."""
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_wire(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple, set)):
        return [to_wire(item) for item in value]
    return value


class Model(BaseModel):
    """Base for wire models: camelCase aliases, construction by attribute name allowed."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Wire form: camelCase keys, ``None`` fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "ClosedEnum",
    "Model",
    "open_enum",
    "register_type",
    "resolve_type",
    "to_wire",
]
