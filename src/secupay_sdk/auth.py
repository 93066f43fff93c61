# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request authentication.

Every request carries four ``x-mac-*`` headers. The ``x-mac-value`` header is a
base64 HMAC-SHA512 over the canonical string::

    version|user_id|timestamp|METHOD|path

keyed with the base64-decoded application key. Query string and body are not part
of the canonical string.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import os
import re
import time
from dataclasses import dataclass

from .errors import validation_error

MAC_VERSION = 1
CANONICAL_SEPARATOR = "|"

HEADER_MAC_VERSION = "x-mac-version"
HEADER_MAC_USER_ID = "x-mac-userid"
HEADER_MAC_TIMESTAMP = "x-mac-timestamp"
HEADER_MAC_VALUE = "x-mac-value"


_NON_B64_RE = re.compile(r"[^A-Za-z0-9+/]")


def _lenient_b64decode(value: str) -> bytes:
    # Malformed keys still produce a signature; the server rejects it.
    cleaned = _NON_B64_RE.sub("", value)
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    return base64.b64decode(cleaned + "=" * (-len(cleaned) % 4))


@dataclass(frozen=True)
class ClientIdentity:
    """Application user id and its base64-encoded secret key."""

    user_id: int
    application_key: str

    def __post_init__(self) -> None:
        if self.user_id is None or str(self.user_id).strip() == "":
            raise validation_error("The user id cannot be empty or null.")
        if isinstance(self.user_id, bool):
            raise validation_error(f"The user id must be numeric, got {self.user_id!r}.")
        try:
            object.__setattr__(self, "user_id", int(str(self.user_id).strip()))
        except ValueError:
            raise validation_error(f"The user id must be numeric, got {self.user_id!r}.") from None
        if not self.application_key:
            raise validation_error("The application key cannot be empty or null.")

    @property
    def decoded_key(self) -> bytes:
        try:
            return base64.b64decode(self.application_key, validate=True)
        except (binascii.Error, ValueError):
            return _lenient_b64decode(self.application_key)

    def __repr__(self) -> str:
        return f"ClientIdentity(user_id={self.user_id!r}, application_key='***')"


def load_identity_from_env() -> ClientIdentity:
    """Read ``SECUPAY_USER_ID`` / ``SECUPAY_APPLICATION_KEY``."""
    raw_user_id = (os.getenv("SECUPAY_USER_ID") or "").strip()
    if not raw_user_id:
        raise validation_error("SECUPAY_USER_ID is not set.")
    try:
        user_id = int(raw_user_id)
    except ValueError:
        raise validation_error(f"SECUPAY_USER_ID must be numeric, got {raw_user_id!r}.") from None
    return ClientIdentity(user_id=user_id, application_key=os.getenv("SECUPAY_APPLICATION_KEY", ""))


@dataclass(frozen=True)
class AuthHeaders:
    version: int
    user_id: int
    timestamp: int
    signature: str

    def as_headers(self) -> dict[str, str]:
        return {
            HEADER_MAC_VERSION: str(self.version),
            HEADER_MAC_USER_ID: str(self.user_id),
            HEADER_MAC_TIMESTAMP: str(self.timestamp),
            HEADER_MAC_VALUE: self.signature,
        }


def canonical_string(user_id: int, timestamp: int, method: str, path: str, version: int = MAC_VERSION) -> str:
    return CANONICAL_SEPARATOR.join([str(version), str(user_id), str(timestamp), method.upper(), path])


def compute_signature(decoded_key: bytes, secured_data: str) -> str:
    digest = hmac.new(decoded_key, secured_data.encode("utf-8"), hashlib.sha512).digest()
    return base64.b64encode(digest).decode("ascii")


def sign(identity: ClientIdentity, method: str, path: str, timestamp: int | None = None) -> AuthHeaders:
    """Compute the auth headers for one request; ``timestamp`` defaults to now (whole seconds)."""
    if timestamp is None:
        timestamp = int(time.time())
    secured_data = canonical_string(identity.user_id, timestamp, method, path)
    return AuthHeaders(
        version=MAC_VERSION,
        user_id=identity.user_id,
        timestamp=timestamp,
        signature=compute_signature(identity.decoded_key, secured_data),
    )


__all__ = [
    "AuthHeaders",
    "ClientIdentity",
    "canonical_string",
    "compute_signature",
    "load_identity_from_env",
    "sign",
]
