# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation (the default transport)."""

from __future__ import annotations

import httpx

from ..config import ClientSettings, load_client_settings
from .client import HttpClient
from .headers import header_value
from .models import HEADER_USER_AGENT, HttpRequest, HttpResponse, decode_text


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper; TLS verification comes from the settings."""

    def __init__(self, settings: ClientSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_client_settings()
        self._client = client or httpx.Client(timeout=self.settings.timeout, verify=self.settings.verify)

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        if not header_value(headers, HEADER_USER_AGENT):
            headers[HEADER_USER_AGENT] = self.settings.user_agent
        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=request.timeout or self.settings.timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                content = b"".join(resp.iter_bytes())
                return HttpResponse(
                    ok=True,
                    status_code=resp.status_code,
                    headers=dict(resp.headers),
                    text=decode_text(content, resp.encoding),
                    content=content,
                    url=str(resp.url),
                )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.from_exception(exc, url=request.url)

    def close(self) -> None:
        self._client.close()
