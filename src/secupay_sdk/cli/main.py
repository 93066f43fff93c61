# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Secupay SDK CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..auth import load_identity_from_env
from ..config import ClientSettings, load_client_settings
from ..dispatcher import Dispatcher
from ..errors import FailureKind, SdkError, validation_error
from ..log import setup_logging
from ..models.base import to_wire
from ..resources import RESOURCES, call_operation, get_resource

CLI_TEXT_TRUNCATION_BYTES = 4096

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_VALIDATION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="secupay-sdk", description="Signed calls against the Secupay payment API")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("resources", help="List resources and their operations")

    call = sub.add_parser("call", help="Call a resource operation (identity from SECUPAY_USER_ID/SECUPAY_APPLICATION_KEY)")
    call.add_argument("resource", help="Resource name, e.g. shopify-subscription-suspension")
    call.add_argument("operation", help="Operation name, e.g. read")
    call.add_argument(
        "--param",
        "-p",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Operation parameter (repeatable); integers are passed as numbers",
    )
    call.add_argument("--body", help="JSON document for the operation's body parameter")
    call.add_argument("--json", action="store_true", help="Output the full response as JSON")
    call.add_argument("--timeout", type=float, help="Per-call timeout in seconds")
    call.add_argument("--base-path", help="Override the API base path")
    call.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed endpoints)",
    )
    call.add_argument("--debug", action="store_true", help="Log request/response lines")
    return parser


def _truncate_text_bytes(text: str, max_bytes: int) -> str:
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    suffix = "...[truncated]"
    keep = max_bytes - len(suffix.encode("utf-8"))
    if keep <= 0:
        return suffix.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore")
    return raw[:keep].decode("utf-8", errors="ignore") + suffix


def _parse_scalar(raw: str) -> Any:
    try:
        return int(raw)
    except ValueError:
        return raw


def _parse_params(pairs: list[str]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            raise validation_error(f"Invalid parameter {pair!r}; expected NAME=VALUE")
        params[name.strip().replace("-", "_")] = _parse_scalar(value)
    return params


def _truncate_for_cli(value: Any, *, max_bytes: int) -> Any:
    if isinstance(value, str):
        return _truncate_text_bytes(value, max_bytes)
    if isinstance(value, dict):
        return {k: _truncate_for_cli(v, max_bytes=max_bytes) for k, v in value.items()}
    if isinstance(value, list):
        return [_truncate_for_cli(v, max_bytes=max_bytes) for v in value]
    return value


def _print_json(data: Any) -> None:
    payload = _truncate_for_cli(to_wire(data), max_bytes=CLI_TEXT_TRUNCATION_BYTES)
    json.dump(payload, sys.stdout, indent=2, sort_keys=True, default=str)
    sys.stdout.write("\n")


def _print_resources() -> None:
    for name in sorted(RESOURCES):
        resource = RESOURCES[name]
        print(name)
        for op_name in sorted(resource.operations):
            op = resource.operations[op_name]
            params = ", ".join(f"{p.name}{'' if p.required else '?'}" for p in op.params)
            print(f"  {op_name:<32} {op.method:<6} {op.path}  ({params})")


def _run_call(args: argparse.Namespace, settings: ClientSettings) -> int:
    if args.base_path:
        settings.base_path = args.base_path.rstrip("/")
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.debug:
        settings.debug = True

    resource = get_resource(args.resource)
    params = _parse_params(args.param)
    if args.body is not None:
        operation = resource.operation(args.operation)
        body_params = [p.name for p in operation.params if p.location == "body"]
        if not body_params:
            raise validation_error(f"Operation {operation.name} does not take a body")
        try:
            params[body_params[0]] = json.loads(args.body)
        except ValueError as exc:
            raise validation_error(f"--body is not valid JSON: {exc}") from None

    with Dispatcher(load_identity_from_env(), settings=settings) as dispatcher:
        response = call_operation(dispatcher, resource, args.operation, timeout=args.timeout, **params)

    if args.json:
        _print_json({"status_code": response.status_code, "headers": response.headers, "data": response.data})
    elif response.data is None or (isinstance(response.data, (str, bytes)) and not response.data.strip()):
        print(f"[{response.status_code}]")
    elif isinstance(response.data, (str, bytes)):
        print(response.data)
    else:
        _print_json(response.data)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_client_settings()
    debug = settings.debug or getattr(args, "debug", False)
    setup_logging("DEBUG" if debug else None, debug_file=settings.debug_file if debug else None)

    if args.command == "resources":
        _print_resources()
        return EXIT_OK

    try:
        return _run_call(args, settings)
    except SdkError as exc:
        failure = exc.failure
        print(f"[{failure.kind.value}] {failure.message or failure.reason}", file=sys.stderr)
        if failure.kind == FailureKind.API and failure.body is not None and getattr(args, "json", False):
            _print_json(failure.body)
        return EXIT_VALIDATION if failure.kind == FailureKind.VALIDATION else EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
