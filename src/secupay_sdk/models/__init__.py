# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Model and enumeration exports."""

from .api_errors import ERROR_BODY_TYPES, ClientError, ServerError
from .base import ClosedEnum, Model, open_enum, register_type, resolve_type
from .enums import (
    ChargeAttemptEnvironment,
    ClientErrorType,
    CreationEntityState,
    CriteriaOperator,
    EntityQueryFilterType,
    EntityQueryOrderByType,
    InvoiceReconciliationRecordState,
    RefundState,
    RefundType,
    ShopifyIntegrationPaymentAppVersion,
    ShopifySubscriptionSuspensionAction,
    ShopifySubscriptionSuspensionInitiator,
    ShopifySubscriptionSuspensionState,
    ShopifySubscriptionSuspensionType,
    TransactionState,
)
from .payment import Refund, RefundCreate, Token, Transaction, TransactionPending
from .query import EntityQuery, EntityQueryFilter, EntityQueryOrderBy
from .shopify import ShopifySubscriptionSuspension, ShopifySubscriptionSuspensionCreate

__all__ = [
    "ERROR_BODY_TYPES",
    "ChargeAttemptEnvironment",
    "ClientError",
    "ClientErrorType",
    "ClosedEnum",
    "CreationEntityState",
    "CriteriaOperator",
    "EntityQuery",
    "EntityQueryFilter",
    "EntityQueryFilterType",
    "EntityQueryOrderBy",
    "EntityQueryOrderByType",
    "InvoiceReconciliationRecordState",
    "Model",
    "Refund",
    "RefundCreate",
    "RefundState",
    "RefundType",
    "ServerError",
    "ShopifyIntegrationPaymentAppVersion",
    "ShopifySubscriptionSuspension",
    "ShopifySubscriptionSuspensionAction",
    "ShopifySubscriptionSuspensionCreate",
    "ShopifySubscriptionSuspensionInitiator",
    "ShopifySubscriptionSuspensionState",
    "ShopifySubscriptionSuspensionType",
    "Token",
    "Transaction",
    "TransactionPending",
    "TransactionState",
    "open_enum",
    "register_type",
    "resolve_type",
]
