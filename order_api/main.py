"""
Order Intake API - application entry point
"""
import secrets
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from order_api.api.api import api_router
from order_api.core.config import Settings, settings
from order_api.core.exceptions import OrderAPIError, StorageError
from order_api.core.log import configure_logging
from order_api.store.document_store import DocumentStore

logger = structlog.get_logger()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Every failure leaves as ``{"ok": false, "error": ...}``."""

    @app.exception_handler(OrderAPIError)
    async def order_api_error_handler(request: Request, exc: OrderAPIError):
        if isinstance(exc, StorageError):
            logger.error("Storage failure", path=request.url.path, error=exc.message)
            return _error(exc.status_code, exc.public_message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected malformed request", path=request.url.path, errors=len(exc.errors()))
        return _error(400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error", path=request.url.path)
        return _error(500, "Server error")


def create_application(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build a FastAPI application with its own store."""
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL, app_settings.LOG_JSON)

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="Order intake and administration API",
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
    )
    app.state.settings = app_settings
    app.state.store = DocumentStore(
        app_settings.ORDERS_FILE,
        backup_corrupt=app_settings.BACKUP_CORRUPT_FILE,
        fsync=app_settings.FSYNC_WRITES,
    )
    app.state.instance_id = "srv-" + secrets.token_hex(4)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    def root():
        return {"ok": True, "name": app_settings.APP_NAME, "version": app_settings.APP_VERSION}

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting Order Intake API", version=app_settings.APP_VERSION,
                    orders_file=app_settings.ORDERS_FILE)
        if not app_settings.auth_required:
            logger.warning("ADMIN_TOKEN is not set; admin endpoints are open to everyone")
        elif not app_settings.admin_token:
            logger.warning("REQUIRE_AUTH is on but ADMIN_TOKEN is empty; admin endpoints will reject every request")

        try:
            orders = app.state.store.load()
            logger.info("Orders file ready", orders_count=len(orders))
        except StorageError as e:
            logger.error("Failed to initialize orders file", error=e.message)
            raise

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Order Intake API")

    return app


app = create_application()
