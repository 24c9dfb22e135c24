"""
Application settings
"""
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "Order Intake API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # Storage
    ORDERS_FILE: str = Field(
        default="orders.json",
        description="Path of the JSON document holding every order"
    )
    BACKUP_CORRUPT_FILE: bool = Field(
        default=True,
        description="Move an unreadable orders file aside instead of discarding it"
    )
    FSYNC_WRITES: bool = True
    ORDER_ID_MAX_ATTEMPTS: int = Field(default=5, ge=1)

    # Admin access
    ADMIN_TOKEN: str = Field(default="", description="Shared secret for admin endpoints")
    REQUIRE_AUTH: bool = Field(
        default=False,
        description="Enforce the admin token even when ADMIN_TOKEN is empty"
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def admin_token(self) -> str:
        return self.ADMIN_TOKEN.strip()

    @property
    def auth_required(self) -> bool:
        """Admin endpoints are gated when forced or when a token is configured."""
        return self.REQUIRE_AUTH or bool(self.admin_token)


# Process-wide settings instance
settings = Settings()
