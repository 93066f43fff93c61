# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shopify subscription suspension models."""

from __future__ import annotations

from datetime import datetime

from .base import Model, open_enum, register_type
from .enums import (
    ShopifySubscriptionSuspensionAction,
    ShopifySubscriptionSuspensionInitiator,
    ShopifySubscriptionSuspensionState,
    ShopifySubscriptionSuspensionType,
)


@register_type
class ShopifySubscriptionSuspension(Model):
    id: int | None = None
    created_on: datetime | None = None
    end_action: open_enum(ShopifySubscriptionSuspensionAction) | None = None
    ended_on: datetime | None = None
    initiator: open_enum(ShopifySubscriptionSuspensionInitiator) | None = None
    linked_space_id: int | None = None
    note: str | None = None
    planned_end_date: datetime | None = None
    state: open_enum(ShopifySubscriptionSuspensionState) | None = None
    subscription: int | None = None
    type: open_enum(ShopifySubscriptionSuspensionType) | None = None
    version: int | None = None


@register_type
class ShopifySubscriptionSuspensionCreate(Model):
    end_action: open_enum(ShopifySubscriptionSuspensionAction) | None = None
    note: str | None = None
    planned_end_date: datetime | None = None
    subscription: int | None = None
