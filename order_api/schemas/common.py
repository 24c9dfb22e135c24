"""
Shared response schemas
"""
from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Plain success response"""
    ok: bool = True


class ErrorResponse(BaseModel):
    """Error response"""
    ok: bool = False
    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    ok: bool = True
    time: str = Field(..., description="Server time (ISO-8601, UTC)")
    tokenRequired: bool = Field(..., description="Whether admin endpoints need a token")


class DebugResponse(BaseModel):
    ok: bool = True
    ordersFile: str
    fileSizeBytes: int
    ordersCount: int
    serverInstance: str
