# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Case-insensitive header helpers.

Request headers are assembled from several layers (SDK meta headers, dispatcher
defaults, operation headers, auth headers); field names are case-insensitive
(RFC 9110), so a later layer replaces an earlier one whatever the casing.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any


def _header_items(headers: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, value)`` pairs from dicts, httpx.Headers, CaseInsensitiveDict or pair lists."""
    if not headers:
        return
    pairs = headers.items() if hasattr(headers, "items") else headers
    for key, value in pairs:
        if key is None:
            continue
        name = str(key).strip()
        if name:
            yield name, value


def normalize_headers(headers: Mapping[str, Any] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    return {name.lower(): "" if value is None else str(value) for name, value in _header_items(headers)}


def header_value(headers: Mapping[str, Any] | None, name: str, default: str = "") -> str:
    """Return the stripped value of header ``name``, or ``default``."""
    wanted = str(name or "").lower()
    for key, value in _header_items(headers):
        if key.lower() == wanted:
            return default if value is None else str(value).strip()
    return default


def merge_headers(*layers: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Merge header layers, lowest precedence first.

    The winning layer's casing is kept. ``None`` values drop the header.
    """
    merged: dict[str, tuple[str, str]] = {}
    for layer in layers:
        for name, value in _header_items(layer):
            if value is None:
                merged.pop(name.lower(), None)
            else:
                merged[name.lower()] = (name, str(value))
    return dict(merged.values())


__all__ = ["header_value", "merge_headers", "normalize_headers"]
