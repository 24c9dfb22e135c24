# Order services
from .id_generator import make_order_id
from .order_service import OrderService
from .order_validator import validate_order_payload

__all__ = ["OrderService", "make_order_id", "validate_order_payload"]
