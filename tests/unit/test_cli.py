# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import base64
import json

import pytest

from secupay_sdk.cli import main as cli_main
from secupay_sdk.cli.main import EXIT_FAILURE, EXIT_OK, EXIT_VALIDATION, _parse_params, _truncate_text_bytes, build_parser
from secupay_sdk.errors import SdkError
from secupay_sdk.http.adapters import StubHttpClient
from secupay_sdk.http.models import HttpResponse


@pytest.fixture
def stub(monkeypatch):
    monkeypatch.setenv("SECUPAY_USER_ID", "1001")
    monkeypatch.setenv("SECUPAY_APPLICATION_KEY", base64.b64encode(b"secret").decode())
    monkeypatch.setenv("SECUPAY_BASE_PATH", "https://api.example.test/api")
    monkeypatch.delenv("SECUPAY_DEBUG", raising=False)
    monkeypatch.delenv("SECUPAY_HTTP_CLIENT", raising=False)
    monkeypatch.setattr(cli_main, "setup_logging", lambda *_, **__: None)

    client = StubHttpClient()
    monkeypatch.setattr("secupay_sdk.dispatcher.create_http_client", lambda _settings: client)
    return client


def test_build_parser():
    parser = build_parser()
    args = parser.parse_args(["call", "transaction", "read", "-p", "space_id=1", "--param", "id=2", "--json"])
    assert args.command == "call"
    assert args.resource == "transaction"
    assert args.operation == "read"
    assert args.param == ["space_id=1", "id=2"]
    assert args.json is True
    assert parser.parse_args(["resources"]).command == "resources"


def test_parse_params():
    assert _parse_params(["space-id=1", "note=hello=world", "id=abc"]) == {
        "space_id": 1,
        "note": "hello=world",
        "id": "abc",
    }
    with pytest.raises(SdkError):
        _parse_params(["novalue"])


def test_truncate_text_bytes():
    assert _truncate_text_bytes("short", 100) == "short"
    truncated = _truncate_text_bytes("x" * 100, 20)
    assert truncated.endswith("...[truncated]")
    assert len(truncated.encode()) <= 20


def test_resources_command(capsys):
    assert cli_main.main(["resources"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "shopify-subscription-suspension" in out
    assert "/shopify-subscription-suspension/reactivate" in out


def test_call_prints_decoded_model(stub, capsys):
    stub.add("/api/shopify-subscription-suspension/read", HttpResponse(ok=True, status_code=200, text='{"id": 7, "state": "ACTIVE"}'))

    code = cli_main.main(["call", "shopify-subscription-suspension", "read", "-p", "space_id=42", "-p", "id=7"])

    assert code == EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"id": 7, "state": "ACTIVE"}
    request = stub.last_request
    assert request.url == "https://api.example.test/api/shopify-subscription-suspension/read?spaceId=42&id=7"
    assert request.headers["x-mac-userid"] == "1001"
    assert stub.closed is True


def test_call_json_envelope_and_body(stub, capsys):
    stub.add("/api/shopify-subscription-suspension/suspend", HttpResponse(ok=True, status_code=200, text='{"id": 3}'))

    code = cli_main.main(
        [
            "call",
            "shopify-subscription-suspension",
            "suspend",
            "-p",
            "space_id=1",
            "--body",
            '{"subscription": 9}',
            "--json",
        ]
    )

    assert code == EXIT_OK
    payload = json.loads(capsys.readouterr().out)
    assert payload["status_code"] == 200
    assert payload["data"] == {"id": 3}
    assert json.loads(stub.last_request.body) == {"subscription": 9}


def test_call_plain_text_response(stub, capsys):
    stub.add("/api/payment/transactions/5/payment-page-url", HttpResponse(ok=True, status_code=200, text="https://pay/x"))
    code = cli_main.main(["call", "payment-transactions", "payment_page_url", "-p", "id=5", "-p", "space=2"])
    assert code == EXIT_OK
    assert capsys.readouterr().out.strip() == "https://pay/x"
    assert stub.last_request.headers["Space"] == "2"


def test_call_blank_response_prints_status(stub, capsys):
    stub.add("/api/shopify-subscription-suspension/reactivate", HttpResponse(ok=True, status_code=204, text=""))
    code = cli_main.main(
        ["call", "shopify-subscription-suspension", "reactivate", "-p", "space_id=1", "-p", "subscription_id=9"]
    )
    assert code == EXIT_OK
    assert capsys.readouterr().out.strip() == "[204]"


def test_call_validation_failure_exit_code(stub, capsys):
    code = cli_main.main(["call", "shopify-subscription-suspension", "read", "-p", "space_id=42"])
    assert code == EXIT_VALIDATION
    assert "Missing the required parameter $id" in capsys.readouterr().err
    assert stub.requests == []

    assert cli_main.main(["call", "nope", "read"]) == EXIT_VALIDATION
    assert cli_main.main(["call", "token", "read", "--body", "{}", "-p", "space_id=1", "-p", "id=1"]) == EXIT_VALIDATION
    assert cli_main.main(["call", "token", "create", "--body", "{oops", "-p", "space_id=1"]) == EXIT_VALIDATION


def test_call_api_failure_exit_code(stub, capsys):
    stub.add(
        "/api/transaction/update",
        HttpResponse(ok=True, status_code=409, text=""),
    )
    code = cli_main.main(["call", "transaction", "update", "-p", "space_id=1", "--body", '{"id": 1, "version": 2}'])
    assert code == EXIT_FAILURE
    assert "[VERSIONING]" in capsys.readouterr().err

    stub.add("/api/transaction/read", HttpResponse(ok=True, status_code=500, text='{"detail": "down"}'))
    code = cli_main.main(["call", "transaction", "read", "-p", "space_id=1", "-p", "id=1", "--json"])
    captured = capsys.readouterr()
    assert code == EXIT_FAILURE
    assert "[API] Error 500" in captured.err
    assert json.loads(captured.out) == {"detail": "down"}


def test_call_missing_identity(monkeypatch, stub, capsys):
    monkeypatch.delenv("SECUPAY_USER_ID")
    code = cli_main.main(["call", "transaction", "read", "-p", "space_id=1", "-p", "id=1"])
    assert code == EXIT_VALIDATION
    assert "SECUPAY_USER_ID" in capsys.readouterr().err
