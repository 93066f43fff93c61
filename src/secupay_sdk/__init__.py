# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Secupay SDK package entrypoint.

Client library for the Secupay payment-processing API. Every call goes through a
:class:`Dispatcher`, which signs the request (HMAC-SHA512 over version, user id,
timestamp, method and path), sends it through an injectable transport and classifies
the response into an :class:`ApiResponse` or a tagged :class:`Failure`. API resources
are described as data in :mod:`secupay_sdk.resources` rather than generated classes.
"""

from .auth import AuthHeaders, ClientIdentity, load_identity_from_env, sign
from .config import ClientSettings, load_client_settings
from .dispatcher import Dispatcher, classify_response
from .errors import ErrorCategory, Failure, FailureKind, SdkError
from .http import (
    ApiResponse,
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    RequestsClient,
    StubHttpClient,
    create_http_client,
)
from .log import setup_logging
from .resources import RESOURCES, call_operation, get_resource, invoke
from .serialization import (
    deserialize,
    select_header_accept,
    select_header_content_type,
    serialize_body,
    to_query_value,
)
from .version import __version__

__all__ = [
    "RESOURCES",
    "ApiResponse",
    "AuthHeaders",
    "ClientIdentity",
    "ClientSettings",
    "Dispatcher",
    "ErrorCategory",
    "Failure",
    "FailureKind",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "RequestsClient",
    "SdkError",
    "StubHttpClient",
    "call_operation",
    "classify_response",
    "create_http_client",
    "deserialize",
    "get_resource",
    "invoke",
    "load_client_settings",
    "load_identity_from_env",
    "select_header_accept",
    "select_header_content_type",
    "serialize_body",
    "setup_logging",
    "sign",
    "to_query_value",
    "__version__",
]
