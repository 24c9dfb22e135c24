"""
Request-scoped dependencies

Everything is read from ``app.state`` so each application instance has its
own settings and store.
"""
from typing import Optional

from fastapi import Depends, Header, Query, Request
import structlog

from order_api.core.config import Settings
from order_api.core.exceptions import AuthorizationError
from order_api.core.security import is_authorized
from order_api.services.order_service import OrderService
from order_api.store.document_store import DocumentStore

logger = structlog.get_logger()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_order_service(
    store: DocumentStore = Depends(get_store),
    app_settings: Settings = Depends(get_settings),
) -> OrderService:
    return OrderService(store, max_id_attempts=app_settings.ORDER_ID_MAX_ATTEMPTS)


def require_admin(
    x_admin_token: Optional[str] = Header(default=None),
    token: Optional[str] = Query(default=None),
    app_settings: Settings = Depends(get_settings),
) -> bool:
    """Guard for admin routes."""
    presented = x_admin_token or token
    if not is_authorized(presented, app_settings):
        logger.warning("Rejected admin request", token_presented=bool(presented))
        raise AuthorizationError()
    return True
