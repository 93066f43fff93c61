# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Transaction, refund and token models (the fields the SDK itself reads)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .base import Model, open_enum, register_type
from .enums import CreationEntityState, RefundState, RefundType, TransactionState


@register_type
class Transaction(Model):
    id: int | None = None
    authorization_amount: float | None = None
    completed_amount: float | None = None
    created_on: datetime | None = None
    currency: str | None = None
    customer_email_address: str | None = None
    customer_id: str | None = None
    language: str | None = None
    line_items: list[dict[str, Any]] | None = None
    linked_space_id: int | None = None
    merchant_reference: str | None = None
    state: open_enum(TransactionState) | None = None
    version: int | None = None


@register_type
class TransactionPending(Model):
    version: int | None = None
    merchant_reference: str | None = None
    currency: str | None = None
    customer_id: str | None = None


@register_type
class Refund(Model):
    id: int | None = None
    amount: float | None = None
    created_on: datetime | None = None
    external_id: str | None = None
    linked_space_id: int | None = None
    merchant_reference: str | None = None
    state: open_enum(RefundState) | None = None
    transaction: Transaction | None = None
    type: open_enum(RefundType) | None = None
    version: int | None = None


@register_type
class RefundCreate(Model):
    amount: float | None = None
    external_id: str | None = None
    merchant_reference: str | None = None
    transaction: int | None = None
    type: open_enum(RefundType) | None = None


@register_type
class Token(Model):
    id: int | None = None
    created_on: datetime | None = None
    customer_email_address: str | None = None
    customer_id: str | None = None
    enabled_for_one_click_payment: bool | None = None
    external_id: str | None = None
    linked_space_id: int | None = None
    state: open_enum(CreationEntityState) | None = None
    token_reference: str | None = None
    version: int | None = None
