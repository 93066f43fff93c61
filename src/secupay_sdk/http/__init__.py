# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubHttpClient
from .client import HTTP_CLIENT_TYPES, HttpClient, create_http_client
from .headers import header_value, merge_headers, normalize_headers
from .httpx_client import HttpxClient
from .models import ApiResponse, Headers, HttpRequest, HttpResponse, generate_request_token
from .requests_client import RequestsClient
from .url import build_request_url, expand_path_template, request_path

__all__ = [
    "HTTP_CLIENT_TYPES",
    "ApiResponse",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "RequestsClient",
    "StubHttpClient",
    "build_request_url",
    "create_http_client",
    "expand_path_template",
    "generate_request_token",
    "header_value",
    "merge_headers",
    "normalize_headers",
    "request_path",
]
