# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Resource catalog.

Each API resource is a table of operations. Most entity resources share the same
count/create/read/search/update/delete shapes, so they are built from the helpers
below; resources with extra actions list them explicitly.
"""

from __future__ import annotations

from ..errors import validation_error
from .operation import Operation, Parameter, Resource

SPACE_ID = Parameter("space_id", "query", required=True)
SPACE_HEADER = Parameter("space", "header", required=True, wire_name="Space")


def count_op(prefix: str) -> Operation:
    return Operation(
        "count",
        "POST",
        f"{prefix}/count",
        (SPACE_ID, Parameter("filter", "body", description="Restricts the entities used to calculate the count.")),
        response_type="int",
        description="Counts the entities matching the filter.",
    )


def create_op(prefix: str, model: str, body: str = "entity") -> Operation:
    return Operation(
        "create",
        "POST",
        f"{prefix}/create",
        (SPACE_ID, Parameter(body, "body", required=True)),
        response_type=model,
        description="Creates the entity with the given properties.",
    )


def read_op(prefix: str, model: str) -> Operation:
    return Operation(
        "read",
        "GET",
        f"{prefix}/read",
        (SPACE_ID, Parameter("id", "query", required=True)),
        response_type=model,
        content_types=("*/*",),
        description="Reads the entity with the given id.",
    )


def search_op(prefix: str, model: str) -> Operation:
    return Operation(
        "search",
        "POST",
        f"{prefix}/search",
        (SPACE_ID, Parameter("query", "body", required=True)),
        response_type=f"{model}[]",
        description="Searches for the entities matching the query.",
    )


def update_op(prefix: str, model: str) -> Operation:
    return Operation(
        "update",
        "POST",
        f"{prefix}/update",
        (SPACE_ID, Parameter("entity", "body", required=True)),
        response_type=model,
        description="Updates the entity; the version must match the current one.",
    )


def delete_op(prefix: str) -> Operation:
    return Operation(
        "delete",
        "POST",
        f"{prefix}/delete",
        (SPACE_ID, Parameter("id", "body", required=True)),
        description="Deletes the entity with the given id.",
    )


def entity_resource(
    name: str,
    model: str,
    *,
    operations: tuple[str, ...] = ("count", "create", "read", "search", "update", "delete"),
    extra: tuple[Operation, ...] = (),
    prefix: str | None = None,
    description: str = "",
) -> Resource:
    path = prefix or f"/{name}"
    builders = {
        "count": lambda: count_op(path),
        "create": lambda: create_op(path, model),
        "read": lambda: read_op(path, model),
        "search": lambda: search_op(path, model),
        "update": lambda: update_op(path, model),
        "delete": lambda: delete_op(path),
    }
    ops = {op_name: builders[op_name]() for op_name in operations}
    ops.update({op.name: op for op in extra})
    return Resource(name=name, operations=ops, description=description)


SHOPIFY_SUBSCRIPTION_SUSPENSION = entity_resource(
    "shopify-subscription-suspension",
    "ShopifySubscriptionSuspension",
    operations=("count", "read", "search"),
    extra=(
        Operation(
            "reactivate",
            "POST",
            "/shopify-subscription-suspension/reactivate",
            (SPACE_ID, Parameter("subscription_id", "query", required=True)),
            content_types=(),
            description="Reactivates a suspended Shopify subscription.",
        ),
        Operation(
            "suspend",
            "POST",
            "/shopify-subscription-suspension/suspend",
            (SPACE_ID, Parameter("suspension", "body", required=True)),
            response_type="ShopifySubscriptionSuspension",
            description="Suspends a Shopify subscription.",
        ),
    ),
)

TRANSACTION = entity_resource(
    "transaction",
    "Transaction",
    operations=("count", "create", "read", "search", "update"),
    extra=(
        Operation(
            "confirm",
            "POST",
            "/transaction/confirm",
            (SPACE_ID, Parameter("transaction_model", "body", required=True)),
            response_type="Transaction",
            description="Marks the pending transaction as confirmed; no further changes are possible.",
        ),
        Operation(
            "process_without_user_interaction",
            "POST",
            "/transaction/processWithoutUserInteraction",
            (SPACE_ID, Parameter("id", "query", required=True)),
            response_type="Transaction",
        ),
    ),
)

_PAYMENT_TRANSACTION_ID = Parameter("id", "path", required=True)

PAYMENT_TRANSACTIONS = Resource(
    name="payment-transactions",
    description="Transactions addressed by id in the path; the space travels in the Space header.",
    operations={
        op.name: op
        for op in (
            Operation(
                "get",
                "GET",
                "/payment/transactions/{id}",
                (_PAYMENT_TRANSACTION_ID, SPACE_HEADER),
                response_type="Transaction",
                content_types=(),
            ),
            Operation(
                "create",
                "POST",
                "/payment/transactions",
                (SPACE_HEADER, Parameter("transaction", "body", required=True)),
                response_type="Transaction",
            ),
            Operation(
                "confirm",
                "POST",
                "/payment/transactions/{id}/confirm",
                (_PAYMENT_TRANSACTION_ID, SPACE_HEADER, Parameter("transaction_pending", "body", required=True)),
                response_type="Transaction",
            ),
            Operation(
                "charge_flow_apply",
                "POST",
                "/payment/transactions/{id}/charge-flow/apply",
                (_PAYMENT_TRANSACTION_ID, SPACE_HEADER),
                response_type="Transaction",
                content_types=(),
            ),
            Operation(
                "charge_flow_cancel",
                "POST",
                "/payment/transactions/{id}/charge-flow/cancel",
                (_PAYMENT_TRANSACTION_ID, SPACE_HEADER),
                response_type="Transaction",
                content_types=(),
            ),
            Operation(
                "payment_page_url",
                "GET",
                "/payment/transactions/{id}/payment-page-url",
                (_PAYMENT_TRANSACTION_ID, SPACE_HEADER),
                response_type="string",
                accepts=("text/plain",),
                content_types=(),
            ),
            Operation(
                "charge_flow_payment_page_url",
                "GET",
                "/payment/transactions/{id}/charge-flow/payment-page-url",
                (_PAYMENT_TRANSACTION_ID, SPACE_HEADER),
                response_type="string",
                accepts=("text/plain",),
                content_types=(),
            ),
        )
    },
)

REFUND = entity_resource(
    "refund",
    "Refund",
    operations=("count", "read", "search"),
    extra=(
        Operation(
            "refund",
            "POST",
            "/refund/refund",
            (SPACE_ID, Parameter("refund", "body", required=True)),
            response_type="Refund",
            description="Creates and executes a refund for a completed transaction.",
        ),
    ),
)

TOKEN = entity_resource("token", "Token")
WEBHOOK_LISTENER = entity_resource("webhook-listener", "WebhookListener")
WEBHOOK_URL = entity_resource("webhook-url", "WebhookUrl")
CUSTOMER = entity_resource("customer", "Customer")
MANUAL_TASK = entity_resource("manual-task", "ManualTask", operations=("count", "read", "search"))
CHARGE_ATTEMPT = entity_resource("charge-attempt", "ChargeAttempt", operations=("count", "read", "search"))

RESOURCES: dict[str, Resource] = {
    resource.name: resource
    for resource in (
        CHARGE_ATTEMPT,
        CUSTOMER,
        MANUAL_TASK,
        PAYMENT_TRANSACTIONS,
        REFUND,
        SHOPIFY_SUBSCRIPTION_SUSPENSION,
        TOKEN,
        TRANSACTION,
        WEBHOOK_LISTENER,
        WEBHOOK_URL,
    )
}


def get_resource(name: str) -> Resource:
    resource = RESOURCES.get(name)
    if resource is None:
        raise validation_error(f"Unknown resource {name!r}; known resources: {', '.join(sorted(RESOURCES))}")
    return resource


__all__ = [
    "RESOURCES",
    "count_op",
    "create_op",
    "delete_op",
    "entity_resource",
    "get_resource",
    "read_op",
    "search_op",
    "update_op",
]
