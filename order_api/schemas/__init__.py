# Pydantic schemas
from .order import Customer, Order, OrderCreatedResponse, OrderListResponse, DeleteResponse
from .common import SuccessResponse, ErrorResponse, HealthResponse, DebugResponse

__all__ = [
    "Customer", "Order", "OrderCreatedResponse", "OrderListResponse", "DeleteResponse",
    "SuccessResponse", "ErrorResponse", "HealthResponse", "DebugResponse",
]
