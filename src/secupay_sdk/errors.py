# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx
import requests


class FailureKind(str, Enum):
    VALIDATION = "VALIDATION"
    VERSIONING = "VERSIONING"
    API = "API"
    TRANSPORT = "TRANSPORT"


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


@dataclass(frozen=True)
class Failure:
    """
    Outcome of a call that did not produce a 2xx response.

    ``kind`` is decided once, when the response (or its absence) is classified. The
    remaining fields are filled according to the kind:

    - VALIDATION: ``message``
    - VERSIONING: ``resource_path`` (and ``status_code`` 409)
    - API: ``status_code``, ``headers``, ``body``, ``raw_body``, ``url``, ``message``
    - TRANSPORT: ``category``, ``error_type``, ``url``, ``message``
    """

    kind: FailureKind
    message: str = ""
    status_code: int | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    raw_body: str = ""
    url: str | None = None
    resource_path: str | None = None
    category: ErrorCategory = ErrorCategory.NONE
    error_type: str | None = None
    token: str | None = None

    @classmethod
    def validation(cls, message: str) -> Failure:
        return cls(kind=FailureKind.VALIDATION, message=message)

    @classmethod
    def versioning(cls, resource_path: str, *, url: str | None = None, token: str | None = None) -> Failure:
        return cls(
            kind=FailureKind.VERSIONING,
            message=f"The object has been modified in the meantime ({resource_path}); reload it and retry.",
            status_code=409,
            resource_path=resource_path,
            url=url,
            token=token,
        )

    @property
    def reason(self) -> str:
        """Short user-facing summary."""
        if self.kind == FailureKind.TRANSPORT:
            return error_category_to_reason(self.category)
        return self.message


class SdkError(Exception):
    """Raised when a call ends in a :class:`Failure`."""

    def __init__(self, failure: Failure):
        super().__init__(failure.message or failure.reason)
        self.failure = failure

    @property
    def kind(self) -> FailureKind:
        return self.failure.kind

    @property
    def status_code(self) -> int | None:
        return self.failure.status_code

    @property
    def body(self) -> Any:
        return self.failure.body


def validation_error(message: str) -> SdkError:
    """Build the error raised for missing/invalid caller input (before any network activity)."""
    return SdkError(Failure.validation(message))


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx/requests exceptions to ErrorCategory.
    """
    if isinstance(exc, (httpx.TimeoutException, requests.Timeout, socket.timeout, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, requests.exceptions.SSLError):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, requests.ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout while calling the API",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNKNOWN_ERROR: "Network error while calling the API",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Call failed due to network error")


__all__ = [
    "ErrorCategory",
    "Failure",
    "FailureKind",
    "SdkError",
    "categorize_exception",
    "error_category_to_reason",
    "validation_error",
]
