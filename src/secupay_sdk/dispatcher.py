# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Authenticated request dispatch.

The :class:`Dispatcher` turns one logical API call (resource path, method, query and
body parameters, expected response type) into a signed HTTP request, sends it through
an injected :class:`~secupay_sdk.http.client.HttpClient`, and classifies the outcome:

- 2xx: :class:`~secupay_sdk.http.models.ApiResponse`
- 409: ``Failure(kind=VERSIONING)``
- any other status: ``Failure(kind=API)`` with the best-effort decoded error body
- no status at all: ``Failure(kind=TRANSPORT)``

The dispatcher holds only read-only configuration, so one instance can serve
independent calls from several threads. It never retries.
"""

from __future__ import annotations

import logging
import platform
from collections.abc import Mapping
from typing import Any

from .auth import ClientIdentity, sign
from .config import ClientSettings, load_client_settings
from .errors import ErrorCategory, Failure, FailureKind, SdkError, validation_error
from .http.client import HttpClient, create_http_client
from .http.headers import merge_headers
from .http.models import HTTP_METHODS, HEADER_USER_AGENT, ApiResponse, HttpRequest, HttpResponse
from .http.url import build_request_url, request_path
from .models.api_errors import ERROR_BODY_TYPES
from .serialization import RAW_RESPONSE_TYPES, decode_body, deserialize, serialize_body, to_query_value
from .version import __version__

logger = logging.getLogger(__name__)

SDK_PROVIDER = "Secupay"
SDK_LANGUAGE = "python"
VERSION_CONFLICT_STATUS = 409

CallOutcome = ApiResponse | Failure


def sdk_meta_headers() -> dict[str, str]:
    """Process-wide headers sent with every request (lowest precedence)."""
    return {
        "x-meta-sdk-version": __version__,
        "x-meta-sdk-language": SDK_LANGUAGE,
        "x-meta-sdk-provider": SDK_PROVIDER,
        "x-meta-sdk-language-version": platform.python_version(),
    }


class Dispatcher:
    """Issues authenticated calls against the API and classifies the responses."""

    def __init__(
        self,
        identity: ClientIdentity,
        *,
        settings: ClientSettings | None = None,
        http_client: HttpClient | None = None,
        default_headers: Mapping[str, str] | None = None,
    ):
        if identity is None:
            raise validation_error("The client identity is required.")
        self.identity = identity
        self.settings = settings or load_client_settings()
        self.http_client = http_client or create_http_client(self.settings)
        self._default_headers = dict(default_headers or {})

    @property
    def base_path(self) -> str:
        return self.settings.base_path

    def build_request(
        self,
        resource_path: str,
        method: str,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
        header_params: Mapping[str, Any] | None = None,
        timeout: float | None = None,
        *,
        timestamp: int | None = None,
    ) -> HttpRequest:
        """Assemble the signed request for one call without sending it."""
        if not resource_path:
            raise validation_error("The resource path cannot be empty.")
        verb = str(method or "").upper()
        if verb not in HTTP_METHODS:
            raise validation_error(f"Unsupported HTTP method {method!r}; expected one of {', '.join(HTTP_METHODS)}")
        if timeout is not None and timeout <= 0:
            raise validation_error("Timeout value must be a positive number.")

        # None query values are left out; None header values drop the header.
        query = {name: to_query_value(value) for name, value in (query_params or {}).items() if value is not None}
        caller_headers = {
            name: None if value is None else to_query_value(value) for name, value in (header_params or {}).items()
        }

        url = build_request_url(self.base_path, resource_path, query)
        auth = sign(self.identity, verb, request_path(url), timestamp)
        headers = merge_headers(
            sdk_meta_headers(),
            {HEADER_USER_AGENT: self.settings.user_agent},
            self._default_headers,
            caller_headers,
            auth.as_headers(),
        )
        return HttpRequest(
            url=url,
            method=verb,
            headers=headers,
            body=serialize_body(body),
            timeout=timeout if timeout is not None else self.settings.timeout,
            resource_path=resource_path,
        )

    def dispatch(
        self,
        resource_path: str,
        method: str,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
        header_params: Mapping[str, Any] | None = None,
        response_type: str | None = None,
        timeout: float | None = None,
    ) -> CallOutcome:
        """
        Send one call and return its classified outcome.

        Caller input problems still raise (``SdkError`` with kind VALIDATION) because they
        are detected before any network activity.
        """
        request = self.build_request(resource_path, method, query_params, body, header_params, timeout)
        if self.settings.debug:
            logger.debug("%s %s token=%s timeout=%s", request.method, request.url, request.token, request.timeout)

        try:
            response = self.http_client.request(request)
        except Exception as exc:  # noqa: BLE001
            response = HttpResponse.from_exception(exc, url=request.url)

        if self.settings.debug:
            logger.debug(
                "token=%s status=%s bytes=%d error=%s",
                request.token,
                response.status_code,
                len(response.content or b""),
                response.error_message,
            )
        return classify_response(request, response, response_type)

    def call_api(
        self,
        resource_path: str,
        method: str,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
        header_params: Mapping[str, Any] | None = None,
        response_type: str | None = None,
        timeout: float | None = None,
    ) -> ApiResponse:
        """Like :meth:`dispatch`, but raises :class:`SdkError` for every failure kind."""
        outcome = self.dispatch(resource_path, method, query_params, body, header_params, response_type, timeout)
        if isinstance(outcome, Failure):
            raise SdkError(outcome)
        return outcome

    def close(self) -> None:
        if hasattr(self.http_client, "close"):
            self.http_client.close()

    def __enter__(self) -> Dispatcher:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


def _transport_failure(request: HttpRequest, response: HttpResponse) -> Failure:
    try:
        category = ErrorCategory(response.meta.get("error_category") or ErrorCategory.UNKNOWN_ERROR)
    except ValueError:
        category = ErrorCategory.UNKNOWN_ERROR
    detail = response.error_message or "no response received"
    return Failure(
        kind=FailureKind.TRANSPORT,
        message=f"Could not connect to the API ({request.url}): {detail}",
        url=request.url,
        resource_path=request.resource_path,
        category=category,
        error_type=response.error_type,
        token=request.token,
    )


def _decode_error_body(status_code: int, data: Any, headers: Mapping[str, str]) -> Any:
    model = ERROR_BODY_TYPES.get(status_code)
    if model is None:
        return data
    return deserialize(data, model.__name__, headers)


def classify_response(request: HttpRequest, response: HttpResponse, response_type: str | None = None) -> CallOutcome:
    """Map a transport response to an :class:`ApiResponse` or a tagged :class:`Failure`."""
    if not response.ok or response.status_code is None:
        return _transport_failure(request, response)

    status = response.status_code
    headers = dict(response.headers or {})

    if response.is_success:
        if response_type in RAW_RESPONSE_TYPES:
            payload: Any = response.content if response_type in {"bytes", "file", "\\SplFileObject"} else response.text
            return ApiResponse(status_code=status, headers=headers, data=payload)
        data = decode_body(response.text)
        return ApiResponse(status_code=status, headers=headers, data=deserialize(data, response_type, headers))

    if status == VERSION_CONFLICT_STATUS:
        return Failure.versioning(request.resource_path or request_path(request.url), url=request.url, token=request.token)

    data = decode_body(response.text)
    return Failure(
        kind=FailureKind.API,
        message=f"Error {status} connecting to the API ({request.url}): {response.text}",
        status_code=status,
        headers=headers,
        body=_decode_error_body(status, data, headers),
        raw_body=response.text,
        url=request.url,
        resource_path=request.resource_path,
        token=request.token,
    )


__all__ = ["CallOutcome", "Dispatcher", "classify_response", "sdk_meta_headers"]
