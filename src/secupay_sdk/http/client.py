# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport abstraction and factory."""

import os
from typing import Protocol

from ..config import ClientSettings, load_client_settings
from ..errors import validation_error
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """Minimal protocol for issuing HTTP requests."""

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


HTTP_CLIENT_TYPES = ("httpx", "requests")


def create_http_client(settings: ClientSettings | None = None) -> HttpClient:
    """Build the transport named by ``settings.http_client_type``."""
    settings = settings or load_client_settings()
    if settings.certificate_authority and not os.path.isfile(settings.certificate_authority):
        raise validation_error(f"The certificate authority file does not exist: {settings.certificate_authority}")

    client_type = (settings.http_client_type or "httpx").strip().lower()
    if client_type == "httpx":
        from .httpx_client import HttpxClient

        return HttpxClient(settings)
    if client_type == "requests":
        from .requests_client import RequestsClient

        return RequestsClient(settings)
    raise validation_error(f"Unknown HTTP client type {client_type!r}; expected one of {', '.join(HTTP_CLIENT_TYPES)}")
