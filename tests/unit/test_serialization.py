# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json
from datetime import date, datetime, timezone

from secupay_sdk.models import (
    ClientError,
    ClientErrorType,
    EntityQuery,
    EntityQueryFilter,
    ShopifySubscriptionSuspension,
    ShopifySubscriptionSuspensionState,
    TransactionState,
)
from secupay_sdk.serialization import (
    decode_body,
    deserialize,
    select_header_accept,
    select_header_content_type,
    serialize_body,
    to_path_value,
    to_query_value,
)


def test_select_header_accept():
    assert select_header_accept([]) is None
    assert select_header_accept(None) is None
    assert select_header_accept([""]) is None
    assert select_header_accept(["text/plain", "Application/JSON;charset=utf-8"]) == "application/json"
    assert select_header_accept(["text/plain", "text/csv"]) == "text/plain,text/csv"


def test_select_header_content_type():
    assert select_header_content_type([]) == "application/json"
    assert select_header_content_type(["application/json;charset=utf-8"]) == "application/json"
    assert select_header_content_type(["multipart/form-data"]) == "multipart/form-data"
    assert select_header_content_type(["*/*"]) == "*/*"


def test_to_query_value():
    assert to_query_value(True) == "true"
    assert to_query_value(False) == "false"
    assert to_query_value(42) == "42"
    assert to_query_value(None) == ""
    assert to_query_value(TransactionState.PENDING) == "PENDING"
    assert to_query_value(date(2024, 1, 2)) == "2024-01-02"
    assert to_query_value([1, 2, 3]) == "1,2,3"
    assert to_query_value(datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)) == "2024-01-02T03:04:05+00:00"


def test_to_path_value_encodes_one_segment():
    assert to_path_value(55) == "55"
    assert to_path_value("a/b") == "a%2Fb"
    assert to_path_value("x y?") == "x%20y%3F"
    assert to_path_value(TransactionState.PENDING) == "PENDING"
    assert to_path_value(True) == "true"


def test_serialize_body_json_and_passthrough():
    query = EntityQuery(filter=EntityQueryFilter.leaf("state", TransactionState.FULFILL), number_of_entities=5)
    payload = json.loads(serialize_body(query))
    assert payload == {
        "filter": {"type": "LEAF", "fieldName": "state", "operator": "EQUALS", "value": "FULFILL"},
        "numberOfEntities": 5,
    }
    assert serialize_body(None) is None
    assert serialize_body(b"raw") == b"raw"
    assert serialize_body("text") == b"text"
    assert serialize_body({"a": [1, None]}) == b'{"a":[1,null]}'


def test_decode_body_falls_back_to_raw_text():
    assert decode_body('{"id": 1}') == {"id": 1}
    assert decode_body("not json{") == "not json{"
    assert decode_body(None) is None
    # Blank bodies are not JSON and come back unchanged.
    assert decode_body("") == ""
    assert decode_body("  ") == "  "


def test_deserialize_scalars_and_dates():
    assert deserialize("5", "int") == 5
    assert deserialize("abc", "int") == "abc"
    assert deserialize(1, "float") == 1.0
    assert deserialize("true", "bool") is True
    assert deserialize({"a": 1}, "object") == {"a": 1}
    assert deserialize("2024-01-02T03:04:05Z", "datetime") == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert deserialize("2024-01-02", "date") == date(2024, 1, 2)
    assert deserialize({"x": 1}, None) == {"x": 1}
    assert deserialize(None, "ShopifySubscriptionSuspension") is None
    assert deserialize("yesterday", "datetime") == "yesterday"


def test_deserialize_keeps_data_that_does_not_fit_the_model():
    data = {"id": "abc", "state": "ACTIVE"}
    assert deserialize(data, "ShopifySubscriptionSuspension") == data


def test_deserialize_raw_types_are_untouched():
    assert deserialize(b"\x00\x01", "bytes") == b"\x00\x01"
    assert deserialize("https://pay.example/page", "string") == "https://pay.example/page"
    assert deserialize({"a": 1}, "string") == '{"a": 1}'


def test_deserialize_models_and_arrays():
    data = [
        {"id": 1, "state": "ACTIVE", "plannedEndDate": "2024-05-01T00:00:00Z", "linkedSpaceId": 9},
        {"id": 2, "state": "SOMETHING_NEW"},
    ]
    result = deserialize(data, "ShopifySubscriptionSuspension[]")
    assert [type(item) for item in result] == [ShopifySubscriptionSuspension, ShopifySubscriptionSuspension]
    assert result[0].state is ShopifySubscriptionSuspensionState.ACTIVE
    assert result[0].linked_space_id == 9
    assert result[0].planned_end_date.year == 2024
    # Unknown enum values are kept as plain strings.
    assert result[1].state == "SOMETHING_NEW"

    error = deserialize({"id": "e1", "type": "DEVELOPER_ERROR", "defaultMessage": "x"}, "\\Secupay\\Sdk\\Model\\ClientError")
    assert isinstance(error, ClientError)
    assert error.type is ClientErrorType.DEVELOPER_ERROR
    assert error.default_message == "x"


def test_deserialize_enum_and_unknown_tags():
    assert deserialize("PENDING", "TransactionState") is TransactionState.PENDING
    assert deserialize("NOPE", "TransactionState") == "NOPE"
    assert deserialize({"k": "v"}, "UnregisteredThing") == {"k": "v"}
    assert deserialize("not json{", "ShopifySubscriptionSuspension") == "not json{"
    assert deserialize("[1, 2]", "int[]") == [1, 2]
