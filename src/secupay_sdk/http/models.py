# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across the SDK."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from ..errors import categorize_exception
from .headers import header_value

Headers = dict[str, str]

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")

HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"


def generate_request_token() -> str:
    """Return a fresh 8-4-4-4-12 hex token identifying one call."""
    return str(uuid.uuid4()).upper()


def decode_text(content: bytes, encoding: str | None) -> str:
    try:
        return content.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return content.decode("utf-8", errors="replace")


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None
    allow_redirects: bool = True
    token: str = field(default_factory=generate_request_token)
    resource_path: str | None = None


@dataclass
class HttpResponse:
    """Normalized transport response; ``ok`` is False only when no HTTP response was obtained."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)

    @classmethod
    def from_exception(cls, exc: BaseException, url: str | None = None) -> HttpResponse:
        """Transport failure: no status, error details and category in ``meta``."""
        return cls(
            ok=False,
            url=url,
            error_message=str(exc),
            error_type=type(exc).__name__,
            meta={"error_category": categorize_exception(exc)},
        )

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code <= 299


@dataclass(frozen=True)
class ApiResponse:
    """Successful call result: status in [200, 299], response headers and decoded payload."""

    status_code: int
    headers: Headers = field(default_factory=dict)
    data: Any = None

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)
