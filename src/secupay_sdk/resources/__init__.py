# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Table-driven API resources."""

from .catalog import RESOURCES, entity_resource, get_resource
from .operation import Operation, Parameter, PreparedCall, Resource, call_operation, invoke, prepare_call

__all__ = [
    "RESOURCES",
    "Operation",
    "Parameter",
    "PreparedCall",
    "Resource",
    "call_operation",
    "entity_resource",
    "get_resource",
    "invoke",
    "prepare_call",
]
