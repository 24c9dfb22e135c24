"""Order payload validation tests."""

from typing import Any, Dict

import pytest

from order_api.core.exceptions import ValidationError
from order_api.services.order_validator import validate_order_payload


def with_changes(payload: Dict[str, Any], **changes: Any) -> Dict[str, Any]:
    data = dict(payload)
    for key, value in changes.items():
        if value is None:
            data.pop(key, None)
        else:
            data[key] = value
    return data


class TestRules:
    """Each rule reports its own message."""

    @pytest.mark.parametrize(
        "changes, message",
        [
            ({"productId": None}, "Missing productId"),
            ({"productId": "   "}, "Missing productId"),
            ({"productName": ""}, "Missing productName"),
            ({"name": None}, "Missing customer name"),
            ({"phone": " "}, "Missing phone"),
            ({"address": None}, "Missing address"),
            ({"qty": -1}, "Invalid qty"),
            ({"qty": "abc"}, "Invalid qty"),
            ({"qty": 1.5}, "Invalid qty"),
            ({"unitPrice": 0}, "Invalid unitPrice"),
            ({"unitPrice": None}, "Invalid unitPrice"),
            ({"unitPrice": "-5"}, "Invalid unitPrice"),
            ({"unitPrice": "Infinity"}, "Invalid unitPrice"),
            ({"unitPrice": [1]}, "Invalid unitPrice"),
            ({"area": "chittagong"}, "Invalid area. Use dhaka / outside"),
            ({"area": None}, "Invalid area. Use dhaka / outside"),
        ],
    )
    def test_rejects(self, valid_payload, changes, message) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_order_payload(with_changes(valid_payload, **changes))
        assert exc_info.value.message == message
        assert exc_info.value.status_code == 400

    def test_first_failing_rule_wins(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_order_payload({"unitPrice": 0, "area": "mars", "productName": "x"})
        assert exc_info.value.message == "Missing productId"

    def test_total_must_be_finite(self, valid_payload) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_order_payload(dict(valid_payload, qty=1e308, unitPrice=2.5))
        assert exc_info.value.message == "Invalid total"

    @pytest.mark.parametrize(
        "changes, message",
        [
            ({"qty": "1_000"}, "Invalid qty"),
            ({"qty": "\u0661\u0662"}, "Invalid qty"),
            ({"unitPrice": "0x10"}, "Invalid unitPrice"),
            ({"unitPrice": "12abc"}, "Invalid unitPrice"),
            ({"unitPrice": "nan"}, "Invalid unitPrice"),
        ],
    )
    def test_only_plain_decimal_strings(self, valid_payload, changes, message) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_order_payload(dict(valid_payload, **changes))
        assert exc_info.value.message == message

    def test_non_object_payload_is_treated_as_empty(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_order_payload(["not", "an", "object"])
        assert exc_info.value.message == "Missing productId"


class TestNormalization:
    @pytest.mark.parametrize(
        "raw, area, shipping",
        [
            ("dhaka", "dhaka", 70),
            ("  DHAKA ", "dhaka", 70),
            ("outside", "outside", 130),
            ("Outside Dhaka", "outside", 130),
        ],
    )
    def test_area_and_shipping(self, valid_payload, raw, area, shipping) -> None:
        fields = validate_order_payload(with_changes(valid_payload, area=raw))
        assert fields["area"] == area
        assert fields["shipping"] == shipping

    def test_total(self, valid_payload) -> None:
        fields = validate_order_payload(valid_payload)
        assert fields["shipping"] == 70
        assert fields["total"] == 1070
        assert isinstance(fields["total"], int)

    def test_numeric_strings(self, valid_payload) -> None:
        fields = validate_order_payload(with_changes(valid_payload, qty=" 3 ", unitPrice="99.5", area="outside"))
        assert fields["qty"] == 3
        assert fields["unitPrice"] == 99.5
        assert fields["total"] == 3 * 99.5 + 130

    def test_exponent_and_signed_strings(self, valid_payload) -> None:
        fields = validate_order_payload(dict(valid_payload, qty="1e1", unitPrice="+.5"))
        assert fields["qty"] == 10
        assert fields["unitPrice"] == 0.5
        assert fields["total"] == 75

    @pytest.mark.parametrize("qty", [None, 0, ""])
    def test_qty_defaults_to_one(self, valid_payload, qty) -> None:
        fields = validate_order_payload(with_changes(valid_payload, qty=qty))
        assert fields["qty"] == 1
        assert fields["total"] == 500 + 70

    def test_strings_are_trimmed(self, valid_payload) -> None:
        fields = validate_order_payload(dict(valid_payload, productId=" p1 ", name="  Rahim  "))
        assert fields["productId"] == "p1"
        assert fields["customer"]["name"] == "Rahim"

    def test_optional_fields(self, valid_payload) -> None:
        fields = validate_order_payload(valid_payload)
        assert fields["productLink"] == ""
        assert fields["size"] == ""

        fields = validate_order_payload(dict(valid_payload, productLink="https://shop.example/p1", size=42))
        assert fields["productLink"] == "https://shop.example/p1"
        assert fields["size"] == "42"

    def test_nested_customer_is_accepted(self, valid_payload) -> None:
        payload = {k: v for k, v in valid_payload.items() if k not in ("name", "phone", "address")}
        payload["customer"] = {"name": "B", "phone": "018", "address": "Y"}
        fields = validate_order_payload(payload)
        assert fields["customer"] == {"name": "B", "phone": "018", "address": "Y"}

    def test_result_has_no_identity_fields(self, valid_payload) -> None:
        fields = validate_order_payload(valid_payload)
        assert "orderId" not in fields
        assert "createdAt" not in fields
        assert "status" not in fields
