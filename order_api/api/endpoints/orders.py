"""
Order endpoints
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends
import structlog

from order_api.api.deps import get_order_service, require_admin
from order_api.services.order_service import OrderService
from order_api.schemas.order import OrderCreatedResponse, OrderListResponse, DeleteResponse
from order_api.schemas.common import ErrorResponse, SuccessResponse

logger = structlog.get_logger()

router = APIRouter()

BAD_REQUEST = {400: {"model": ErrorResponse}}
UNAUTHORIZED = {401: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}
SERVER_ERROR = {500: {"model": ErrorResponse}}


@router.post("/order", response_model=OrderCreatedResponse, responses={**BAD_REQUEST, **SERVER_ERROR})
def create_order(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    order_service: OrderService = Depends(get_order_service),
):
    """Place a new order"""
    logger.info("Create order request", product_id=(payload or {}).get("productId"))

    order = order_service.create_order(payload or {})
    return OrderCreatedResponse(orderId=order["orderId"])


@router.get("/orders", response_model=OrderListResponse, responses={**UNAUTHORIZED})
def get_orders(
    _: bool = Depends(require_admin),
    order_service: OrderService = Depends(get_order_service),
):
    """List every order, newest first"""
    orders = order_service.get_all_orders()
    logger.info("Get orders request", count=len(orders))
    return OrderListResponse(orders=orders)


@router.post(
    "/orders/bulk-delete",
    response_model=DeleteResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED},
)
def bulk_delete_orders(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    _: bool = Depends(require_admin),
    order_service: OrderService = Depends(get_order_service),
):
    """Delete several orders at once"""
    deleted = order_service.bulk_delete((payload or {}).get("orderIds"))
    return DeleteResponse(deleted=deleted)


@router.patch(
    "/orders/{order_id}",
    response_model=SuccessResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED, **NOT_FOUND},
)
def update_order_status(
    order_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    _: bool = Depends(require_admin),
    order_service: OrderService = Depends(get_order_service),
):
    """Change an order's status"""
    logger.info("Update order status", order_id=order_id)

    order_service.update_order_status(order_id, (payload or {}).get("status"))
    return SuccessResponse()


@router.delete(
    "/orders/{order_id}",
    response_model=DeleteResponse,
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
def delete_order(
    order_id: str,
    _: bool = Depends(require_admin),
    order_service: OrderService = Depends(get_order_service),
):
    """Delete one order"""
    logger.info("Delete order request", order_id=order_id)

    deleted = order_service.delete_order(order_id)
    return DeleteResponse(deleted=deleted)
