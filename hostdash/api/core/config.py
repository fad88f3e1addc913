"""
API Configuration for the hosting dashboard

SECURITY NOTE:
- JWT_SECRET_KEY is loaded from environment variables (no default)
- Application will fail to start if required secrets are not set
"""
from functools import lru_cache
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


# Known insecure values that should never be used in production
INSECURE_SECRET_VALUES = [
    "your-secret-key-change-in-production",
    "dev-secret-key",
    "change-me-in-production",
    "secret",
    "password",
    "test",
]


class APISettings(BaseSettings):
    """API-specific settings with secure defaults"""

    # Application
    APP_NAME: str = "Hosting Dashboard API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = Field(default=False, description="Debug mode")
    APP_ENV: str = Field(default="production", description="Application environment")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    WORKERS: int = 4

    # CORS - Configurable via environment
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # JWT identity tokens - NO DEFAULT for secret key
    JWT_SECRET_KEY: str = Field(
        ...,  # Required, no default
        description="JWT secret key (REQUIRED, min 32 characters)"
    )
    JWT_ALGORITHM: str = "HS256"

    # Dashboard aggregation
    DASHBOARD_FETCH_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        gt=0,
        description="Per-channel timeout for dashboard data retrieval"
    )
    DASHBOARD_ALERT_LIMIT: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Maximum number of alerts fetched for the dashboard"
    )
    DEMO_DATA_ENABLED: Optional[bool] = Field(
        default=None,
        description="Allow seeding demo dashboard data (defaults to on outside production)"
    )

    @field_validator('JWT_SECRET_KEY')
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        """Validate JWT secret key for security requirements"""
        if not v:
            raise ValueError(
                "JWT_SECRET_KEY is required. "
                "Set it via environment variable or .env file."
            )
        if len(v) < 32:
            raise ValueError(
                f"JWT_SECRET_KEY must be at least 32 characters (got {len(v)}). "
                "Generate a secure key with: openssl rand -base64 32"
            )
        if v.lower() in [s.lower() for s in INSECURE_SECRET_VALUES]:
            raise ValueError(
                "JWT_SECRET_KEY contains an insecure default value. "
                "Generate a secure key with: openssl rand -base64 32"
            )
        return v

    @field_validator('APP_ENV')
    @classmethod
    def validate_app_env(cls, v: str) -> str:
        """Validate and normalize application environment"""
        normalized = v.lower()
        if normalized in ["dev", "development"]:
            return "development"
        if normalized in ["prod", "production"]:
            return "production"
        if normalized in ["test", "testing"]:
            return "testing"
        return normalized

    @property
    def demo_data_enabled(self) -> bool:
        """Demo seeding is on unless explicitly disabled or running in production"""
        if self.DEMO_DATA_ENABLED is not None:
            return self.DEMO_DATA_ENABLED
        return self.APP_ENV != "production"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_api_settings() -> APISettings:
    """Get cached API settings"""
    return APISettings()


api_settings = get_api_settings()
