# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""requests-backed HttpClient implementation."""

from __future__ import annotations

import requests

from ..config import ClientSettings, load_client_settings
from .client import HttpClient
from .headers import header_value
from .models import HEADER_USER_AGENT, HttpRequest, HttpResponse, decode_text


class RequestsClient(HttpClient):
    """Synchronous transport on a shared ``requests.Session``."""

    def __init__(self, settings: ClientSettings | None = None, session: requests.Session | None = None):
        self.settings = settings or load_client_settings()
        self._session = session or requests.Session()

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        if not header_value(headers, HEADER_USER_AGENT):
            headers[HEADER_USER_AGENT] = self.settings.user_agent
        try:
            resp = self._session.request(
                request.method,
                request.url,
                headers=headers,
                data=request.body,
                timeout=request.timeout or self.settings.timeout,
                verify=self.settings.verify,
                allow_redirects=request.allow_redirects,
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse.from_exception(exc, url=request.url)

        content = resp.content or b""
        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            headers=dict(resp.headers),
            text=decode_text(content, resp.encoding),
            content=content,
            url=resp.url or request.url,
        )

    def close(self) -> None:
        self._session.close()
