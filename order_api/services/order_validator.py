"""
Validation of inbound order payloads

Checks run in a fixed order and the first failure is reported. Numeric fields
may arrive as strings; values that do not parse simply fail their rule.
"""
import math
import re
from typing import Any, Dict, Optional, Union

from order_api.core.exceptions import ValidationError

SHIPPING_DHAKA = 70
SHIPPING_OUTSIDE = 130

# Plain ASCII decimal notation, optionally signed, with an optional exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

AREA_ALIASES = {
    "dhaka": "dhaka",
    "outside": "outside",
    "outside dhaka": "outside",
}

Number = Union[int, float]


def _text(value: Any) -> str:
    if not value:
        return ""
    return str(value).strip()


def _to_number(value: Any, default: Number) -> float:
    if not value:
        value = default
    if isinstance(value, (bool, int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf
    if isinstance(value, str):
        text = value.strip()
        if not DECIMAL_PATTERN.fullmatch(text):
            return math.nan
        return float(text)
    return math.nan


def _compact(number: float) -> Number:
    """Keep integral values as ints so they serialize as ``500`` not ``500.0``."""
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def normalize_area(value: Any) -> Optional[str]:
    return AREA_ALIASES.get(_text(value).lower())


def shipping_for(area: str) -> int:
    return SHIPPING_DHAKA if area == "dhaka" else SHIPPING_OUTSIDE


def validate_order_payload(payload: Any) -> Dict[str, Any]:
    """Turn an untrusted payload into the validated fields of a new order.

    Raises ``ValidationError`` naming the first rule that failed. The result
    has no ``orderId``/``createdAt``/``status``; the service adds those.
    """
    body = payload if isinstance(payload, dict) else {}
    nested = body.get("customer") if isinstance(body.get("customer"), dict) else {}

    product_id = _text(body.get("productId"))
    product_name = _text(body.get("productName"))
    name = _text(body.get("name") or nested.get("name"))
    phone = _text(body.get("phone") or nested.get("phone"))
    address = _text(body.get("address") or nested.get("address"))
    qty = _to_number(body.get("qty"), 1)
    unit_price = _to_number(body.get("unitPrice"), 0)
    area = normalize_area(body.get("area"))

    if not product_id:
        raise ValidationError("Missing productId")
    if not product_name:
        raise ValidationError("Missing productName")
    if not name:
        raise ValidationError("Missing customer name")
    if not phone:
        raise ValidationError("Missing phone")
    if not address:
        raise ValidationError("Missing address")
    if not math.isfinite(qty) or qty < 1 or not qty.is_integer():
        raise ValidationError("Invalid qty")
    if not math.isfinite(unit_price) or unit_price <= 0:
        raise ValidationError("Invalid unitPrice")
    if area is None:
        raise ValidationError("Invalid area. Use dhaka / outside")

    quantity = int(qty)
    price = _compact(unit_price)
    shipping = shipping_for(area)
    total = quantity * price + shipping
    if isinstance(total, float) and not math.isfinite(total):
        raise ValidationError("Invalid total")

    return {
        "productId": product_id,
        "productName": product_name,
        "productLink": str(body["productLink"]) if body.get("productLink") else "",
        "unitPrice": price,
        "qty": quantity,
        "size": str(body["size"]) if body.get("size") else "",
        "area": area,
        "shipping": shipping,
        "total": _compact(total),
        "customer": {"name": name, "phone": phone, "address": address},
    }
