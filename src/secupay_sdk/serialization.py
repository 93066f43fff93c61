# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Wire serialization.

Response type tags understood by :func:`deserialize`:

- ``None``: no conversion
- ``"int"``, ``"float"``, ``"bool"``, ``"string"``/``"str"``, ``"object"``
- ``"date"``, ``"datetime"``
- ``"bytes"``/``"file"``: raw body, never decoded
- any registered model or enum name (``"Transaction"``)
- ``"T[]"``: JSON array whose elements are each deserialized as ``T``
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from .models.base import Model, resolve_type, to_wire

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
RAW_RESPONSE_TYPES = frozenset({"bytes", "file", "string", "str", "\\SplFileObject"})

_JSON_MIME_RE = re.compile(r"application/json", re.IGNORECASE)

_DATETIME_ADAPTER = TypeAdapter(datetime)
_TEMPORAL_ADAPTERS: dict[str, TypeAdapter] = {
    "datetime": _DATETIME_ADAPTER,
    "DateTime": _DATETIME_ADAPTER,
    "\\DateTime": _DATETIME_ADAPTER,
    "date": TypeAdapter(date),
}


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def to_query_value(value: Any) -> str:
    """Render a scalar, enum constant or list (comma joined) for the query string or a header."""
    if isinstance(value, (list, tuple, set)):
        return ",".join(_scalar_text(item) for item in value)
    return _scalar_text(value)


def to_path_value(value: Any) -> str:
    """Render a single path segment, percent-encoded (a "/" in the value is escaped)."""
    return quote(_scalar_text(value), safe="")


def serialize_body(value: Any) -> bytes | None:
    """
    Render a request body.

    Raw ``bytes`` and ``str`` bodies pass through unchanged (strings UTF-8 encoded);
    everything else is JSON encoded.
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    return json.dumps(to_wire(value), separators=(",", ":")).encode("utf-8")


def decode_body(text: str) -> Any:
    """
    Parse a response body as JSON, falling back to the raw text.

    Never raises. A blank body is not JSON, so it comes back unchanged.
    """
    if text is None:
        return None
    if not text.strip():
        return text
    try:
        return json.loads(text)
    except ValueError:
        return text


def _coerce_scalar(data: Any, type_tag: str) -> Any:
    try:
        if type_tag == "int":
            return int(data)
        if type_tag == "float":
            return float(data)
        if type_tag == "bool":
            if isinstance(data, str):
                return data.strip().lower() in {"1", "true"}
            return bool(data)
    except (TypeError, ValueError):
        logger.debug("Could not coerce %r to %s; returning it unchanged", data, type_tag)
    return data


def _validate_or_raw(target: Any, data: Any) -> Any:
    """Validate ``data`` as a model (class) or through a TypeAdapter; keep it unchanged when it does not fit."""
    try:
        if isinstance(target, TypeAdapter):
            return target.validate_python(data)
        return target.model_validate(data)
    except ValidationError as exc:
        logger.debug("Could not decode %r: %s; returning it unchanged", data, exc.errors(include_url=False))
        return data


def deserialize(data: Any, type_tag: str | None, headers: Mapping[str, str] | None = None) -> Any:  # noqa: ARG001
    """Convert decoded wire data into the shape named by ``type_tag``."""
    if type_tag is None or data is None:
        return data

    tag = type_tag.strip()
    if tag.endswith("[]"):
        inner = tag[:-2]
        if isinstance(data, str):
            data = decode_body(data)
        if not isinstance(data, list):
            return data
        return [deserialize(item, inner, headers) for item in data]

    if tag in RAW_RESPONSE_TYPES:
        if tag in {"string", "str"} and not isinstance(data, (str, bytes)):
            return json.dumps(data) if isinstance(data, (dict, list)) else str(data)
        return data
    if tag in {"int", "float", "bool"}:
        return _coerce_scalar(data, tag)
    if tag in {"object", "mixed", "dict"}:
        return data
    if tag in _TEMPORAL_ADAPTERS:
        return _validate_or_raw(_TEMPORAL_ADAPTERS[tag], data)

    target = resolve_type(tag)
    if target is None:
        return data
    if isinstance(data, str) and not issubclass(target, Enum):
        data = decode_body(data)
    if issubclass(target, Model) and isinstance(data, Mapping):
        return _validate_or_raw(target, data)
    if issubclass(target, Enum):
        try:
            return target(data)
        except ValueError:
            return data
    return data


def select_header_accept(candidates: Sequence[str] | None) -> str | None:
    """Prefer JSON; otherwise join all candidates. No candidates means no Accept header."""
    if not candidates or not candidates[0]:
        return None
    if any(_JSON_MIME_RE.search(candidate or "") for candidate in candidates):
        return JSON_MIME
    return ",".join(candidates)


def select_header_content_type(candidates: Sequence[str] | None) -> str:
    """Prefer JSON; otherwise join all candidates. No candidates means JSON."""
    if not candidates or not candidates[0]:
        return JSON_MIME
    if any(_JSON_MIME_RE.search(candidate or "") for candidate in candidates):
        return JSON_MIME
    return ",".join(candidates)


__all__ = [
    "JSON_MIME",
    "RAW_RESPONSE_TYPES",
    "decode_body",
    "deserialize",
    "select_header_accept",
    "select_header_content_type",
    "serialize_body",
    "to_path_value",
    "to_query_value",
]
