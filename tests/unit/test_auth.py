# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import base64
import hashlib
import hmac

import pytest

from secupay_sdk.auth import (
    AuthHeaders,
    ClientIdentity,
    canonical_string,
    load_identity_from_env,
    sign,
)
from secupay_sdk.errors import FailureKind, SdkError

SECRET_KEY = base64.b64encode(b"secret").decode("ascii")


def _expected_signature(key: bytes, data: str) -> str:
    return base64.b64encode(hmac.new(key, data.encode("utf-8"), hashlib.sha512).digest()).decode("ascii")


def test_canonical_string_and_signature_for_known_request():
    identity = ClientIdentity(user_id=1001, application_key=SECRET_KEY)
    auth = sign(identity, "GET", "/shopify-subscription-suspension/read", timestamp=1700000000)

    canonical = "1|1001|1700000000|GET|/shopify-subscription-suspension/read"
    assert canonical_string(1001, 1700000000, "GET", "/shopify-subscription-suspension/read") == canonical
    assert auth.signature == _expected_signature(b"secret", canonical)
    assert auth == AuthHeaders(version=1, user_id=1001, timestamp=1700000000, signature=auth.signature)


def test_sign_is_deterministic_for_fixed_timestamp():
    identity = ClientIdentity(user_id=7, application_key=SECRET_KEY)
    first = sign(identity, "POST", "/api/token/create", timestamp=1234)
    second = sign(identity, "POST", "/api/token/create", timestamp=1234)
    assert first == second
    assert sign(identity, "POST", "/api/token/create", timestamp=1235).signature != first.signature
    assert sign(identity, "GET", "/api/token/create", timestamp=1234).signature != first.signature


def test_sign_uses_current_time_when_timestamp_omitted(monkeypatch):
    monkeypatch.setattr("secupay_sdk.auth.time.time", lambda: 1700000123.9)
    auth = sign(ClientIdentity(user_id=1, application_key=SECRET_KEY), "GET", "/x")
    assert auth.timestamp == 1700000123


def test_auth_headers_use_mac_header_names():
    auth = sign(ClientIdentity(user_id=1001, application_key=SECRET_KEY), "get", "/x/read", timestamp=42)
    headers = auth.as_headers()
    assert headers == {
        "x-mac-version": "1",
        "x-mac-userid": "1001",
        "x-mac-timestamp": "42",
        "x-mac-value": auth.signature,
    }
    # Method is upper-cased in the canonical string.
    assert auth.signature == _expected_signature(b"secret", "1|1001|42|GET|/x/read")


def test_identity_requires_application_key():
    with pytest.raises(SdkError) as excinfo:
        ClientIdentity(user_id=1, application_key="")
    assert excinfo.value.kind == FailureKind.VALIDATION

    with pytest.raises(SdkError):
        ClientIdentity(user_id=None, application_key=SECRET_KEY)  # type: ignore[arg-type]


def test_identity_user_id_must_be_numeric():
    assert ClientIdentity(user_id=" 1001 ", application_key=SECRET_KEY).user_id == 1001  # type: ignore[arg-type]

    for bad in ("abc", "12a", True):
        with pytest.raises(SdkError) as excinfo:
            ClientIdentity(user_id=bad, application_key=SECRET_KEY)  # type: ignore[arg-type]
        assert excinfo.value.kind == FailureKind.VALIDATION
        assert "numeric" in str(excinfo.value)


def test_identity_repr_hides_key():
    identity = ClientIdentity(user_id=5, application_key=SECRET_KEY)
    assert SECRET_KEY not in repr(identity)


def test_malformed_key_still_produces_a_signature():
    identity = ClientIdentity(user_id=5, application_key="not base64!!")
    auth = sign(identity, "GET", "/x", timestamp=1)
    assert base64.b64decode(auth.signature)


def test_load_identity_from_env(monkeypatch):
    monkeypatch.setenv("SECUPAY_USER_ID", "1001")
    monkeypatch.setenv("SECUPAY_APPLICATION_KEY", SECRET_KEY)
    identity = load_identity_from_env()
    assert identity.user_id == 1001
    assert identity.decoded_key == b"secret"

    monkeypatch.setenv("SECUPAY_USER_ID", "abc")
    with pytest.raises(SdkError):
        load_identity_from_env()

    monkeypatch.delenv("SECUPAY_USER_ID")
    with pytest.raises(SdkError):
        load_identity_from_env()
