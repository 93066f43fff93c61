# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-process HttpClient implementations."""

from __future__ import annotations

from .client import HttpClient
from .models import HttpRequest, HttpResponse
from .url import request_path


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are keyed by request path (``/api/x/read``) or by full URL; full URLs win.
    """

    def __init__(self, responses: dict[str, HttpResponse] | None = None, default: HttpResponse | None = None):
        self._responses = responses or {}
        self._default = default
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, key: str, response: HttpResponse) -> None:
        self._responses[key] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if request.url in self._responses:
            return self._responses[request.url]
        path = request_path(request.url)
        if path in self._responses:
            return self._responses[path]
        if self._default is not None:
            return self._default
        return HttpResponse(ok=False, status_code=None, url=request.url, error_message="No stubbed response configured")

    @property
    def last_request(self) -> HttpRequest | None:
        return self.requests[-1] if self.requests else None

    def close(self) -> None:
        self.closed = True
