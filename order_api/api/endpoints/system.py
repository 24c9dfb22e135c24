"""
Health and diagnostics endpoints
"""
from fastapi import APIRouter, Depends, Request

from order_api.api.deps import get_settings, get_store
from order_api.core.config import Settings
from order_api.schemas.common import DebugResponse, ErrorResponse, HealthResponse
from order_api.services.order_service import utc_timestamp
from order_api.store.document_store import DocumentStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check(app_settings: Settings = Depends(get_settings)):
    return HealthResponse(time=utc_timestamp(), tokenRequired=app_settings.auth_required)


@router.get("/debug", response_model=DebugResponse, responses={500: {"model": ErrorResponse}})
def debug_info(request: Request, store: DocumentStore = Depends(get_store)):
    """Where the orders file lives and how big it is"""
    info = store.stat()
    return DebugResponse(
        ordersFile=info.path,
        fileSizeBytes=info.size_bytes,
        ordersCount=info.orders_count,
        serverInstance=request.app.state.instance_id,
    )
