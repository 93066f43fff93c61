# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for building API request targets."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode, urlsplit

_PATH_PARAM_RE = re.compile(r"\{([^{}]+)\}")


def build_request_url(base_path: str, resource_path: str, query_params: Mapping[str, Any] | None = None) -> str:
    """
    Join the base path and resource path and append the encoded query string.

    Query parameters keep the mapping's insertion order; they are never sorted.

    Example:
      ("https://host/api", "/x/read", {"spaceId": 42, "id": 7}) -> https://host/api/x/read?spaceId=42&id=7
    """
    url = f"{str(base_path or '').rstrip('/')}{resource_path}"
    if query_params:
        url = f"{url}?{urlencode([(str(k), '' if v is None else str(v)) for k, v in query_params.items()])}"
    return url


def request_path(url: str) -> str:
    """Return the path component of ``url`` (no query string, no fragment)."""
    return urlsplit(str(url or "")).path or "/"


def expand_path_template(template: str, path_params: Mapping[str, Any] | None = None) -> str:
    """
    Substitute ``{name}`` placeholders with already-encoded segment values.

    Raises KeyError for a placeholder without a value.
    """
    params = path_params or {}

    def _replace(match: re.Match[str]) -> str:
        return str(params[match.group(1)])

    return _PATH_PARAM_RE.sub(_replace, template)


def path_placeholders(template: str) -> list[str]:
    return _PATH_PARAM_RE.findall(template)


__all__ = ["build_request_url", "expand_path_template", "path_placeholders", "request_path"]
