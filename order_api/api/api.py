"""
API router
"""
from fastapi import APIRouter

from order_api.api.endpoints import orders, system

api_router = APIRouter()

api_router.include_router(system.router, tags=["system"])
api_router.include_router(orders.router, tags=["orders"])
