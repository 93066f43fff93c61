# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Enumerated constants used by the API models."""

from .base import ClosedEnum, register_type


@register_type
class ChargeAttemptEnvironment(ClosedEnum):
    PRODUCTION = "PRODUCTION"
    TEST = "TEST"


@register_type
class InvoiceReconciliationRecordState(ClosedEnum):
    CREATE = "CREATE"
    PENDING = "PENDING"
    UNRESOLVED = "UNRESOLVED"
    RESOLVED = "RESOLVED"
    DISCARDED = "DISCARDED"


@register_type
class ShopifyIntegrationPaymentAppVersion(ClosedEnum):
    API_2019_07 = "API_2019_07"


@register_type
class ShopifySubscriptionSuspensionState(ClosedEnum):
    ACTIVE = "ACTIVE"
    ENDED = "ENDED"


@register_type
class ShopifySubscriptionSuspensionInitiator(ClosedEnum):
    MERCHANT = "MERCHANT"
    CUSTOMER = "CUSTOMER"


@register_type
class ShopifySubscriptionSuspensionAction(ClosedEnum):
    REACTIVATE = "REACTIVATE"
    TERMINATE = "TERMINATE"


@register_type
class ShopifySubscriptionSuspensionType(ClosedEnum):
    MANUAL = "MANUAL"
    FAILED_CHARGE = "FAILED_CHARGE"


@register_type
class ClientErrorType(ClosedEnum):
    END_USER_ERROR = "END_USER_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    DEVELOPER_ERROR = "DEVELOPER_ERROR"


@register_type
class EntityQueryFilterType(ClosedEnum):
    LEAF = "LEAF"
    OR = "OR"
    AND = "AND"


@register_type
class CriteriaOperator(ClosedEnum):
    EQUALS = "EQUALS"
    GREATER_THAN = "GREATER_THAN"
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN = "LESS_THAN"
    LESS_THAN_OR_EQUAL = "LESS_THAN_OR_EQUAL"
    CONTAINS = "CONTAINS"
    NOT_EQUALS = "NOT_EQUALS"
    NOT_CONTAINS = "NOT_CONTAINS"
    IS_NULL = "IS_NULL"
    IS_NOT_NULL = "IS_NOT_NULL"


@register_type
class EntityQueryOrderByType(ClosedEnum):
    DESC = "DESC"
    ASC = "ASC"


@register_type
class CreationEntityState(ClosedEnum):
    CREATE = "CREATE"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETING = "DELETING"
    DELETED = "DELETED"


@register_type
class TransactionState(ClosedEnum):
    CREATE = "CREATE"
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PROCESSING = "PROCESSING"
    FAILED = "FAILED"
    AUTHORIZED = "AUTHORIZED"
    VOIDED = "VOIDED"
    COMPLETED = "COMPLETED"
    FULFILL = "FULFILL"
    DECLINE = "DECLINE"


@register_type
class RefundState(ClosedEnum):
    CREATE = "CREATE"
    SCHEDULED = "SCHEDULED"
    PENDING = "PENDING"
    MANUAL_CHECK = "MANUAL_CHECK"
    FAILED = "FAILED"
    SUCCESSFUL = "SUCCESSFUL"


@register_type
class RefundType(ClosedEnum):
    CUSTOMER_INITIATED_AUTOMATIC = "CUSTOMER_INITIATED_AUTOMATIC"
    CUSTOMER_INITIATED_MANUAL = "CUSTOMER_INITIATED_MANUAL"
    MERCHANT_INITIATED_ONLINE = "MERCHANT_INITIATED_ONLINE"
    MERCHANT_INITIATED_OFFLINE = "MERCHANT_INITIATED_OFFLINE"


__all__ = [
    "ChargeAttemptEnvironment",
    "ClientErrorType",
    "CreationEntityState",
    "CriteriaOperator",
    "EntityQueryFilterType",
    "EntityQueryOrderByType",
    "InvoiceReconciliationRecordState",
    "RefundState",
    "RefundType",
    "ShopifyIntegrationPaymentAppVersion",
    "ShopifySubscriptionSuspensionAction",
    "ShopifySubscriptionSuspensionInitiator",
    "ShopifySubscriptionSuspensionState",
    "ShopifySubscriptionSuspensionType",
    "TransactionState",
]
