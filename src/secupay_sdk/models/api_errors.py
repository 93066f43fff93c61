# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error bodies returned by the API (442 client errors, 542 server errors)."""

from __future__ import annotations

from datetime import datetime

from .base import Model, open_enum, register_type
from .enums import ClientErrorType


@register_type
class ClientError(Model):
    date: datetime | None = None
    default_message: str | None = None
    id: str | None = None
    message: str | None = None
    type: open_enum(ClientErrorType) | None = None


@register_type
class ServerError(Model):
    date: datetime | None = None
    id: str | None = None
    message: str | None = None


ERROR_BODY_TYPES: dict[int, type[Model]] = {
    442: ClientError,
    542: ServerError,
}
