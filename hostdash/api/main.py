"""
Hosting Dashboard API Main Application
Customer dashboard metrics for the hosting storefront
"""
import argparse
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import api_settings
from .core.app_mode import get_app_mode_manager, AppMode
from .core.logging_framework import get_logger, LogCategory
from .core.logging_middleware import setup_logging_middleware
from .core.exceptions import register_exception_handlers

# Import routers
from .routers import dashboard, health


# Initialize mode manager and logger
mode_manager = get_app_mode_manager()
logger = get_logger("hostdash.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(
        f"Starting {api_settings.APP_NAME} v{api_settings.APP_VERSION}",
        category=LogCategory.BUSINESS,
        extra_data={
            "mode": mode_manager.mode.value,
            "log_level": mode_manager.get_log_level(),
            "fetch_timeout_s": api_settings.DASHBOARD_FETCH_TIMEOUT_SECONDS,
            "demo_data": api_settings.demo_data_enabled
        }
    )
    yield
    logger.info("Shutting down application", category=LogCategory.BUSINESS)


app = FastAPI(
    title=api_settings.APP_NAME,
    description="""
## Hosting Dashboard API

Per-customer dashboard for the hosting storefront.

- **Dashboard API**: order, service and alert statistics for a reporting range
- **Alerts**: mark alerts as read
- **Demo data**: seed sample records outside production
- **Health API**: liveness
    """,
    version=api_settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Setup logging middleware (mode-aware)
setup_logging_middleware(app)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=api_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# Include routers with /api/v1 prefix
API_PREFIX = "/api/v1"

app.include_router(dashboard.router, prefix=API_PREFIX)
app.include_router(health.router, prefix=API_PREFIX)


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint"""
    return {
        "name": api_settings.APP_NAME,
        "version": api_settings.APP_VERSION,
        "mode": mode_manager.mode.value,
        "docs": "/docs",
        "health": "/api/v1/health"
    }


# For running directly with: python -m hostdash.api.main
if __name__ == "__main__":
    import uvicorn

    parser = argparse.ArgumentParser(description="Hosting Dashboard API Server")
    parser.add_argument(
        "--mode", "-m",
        type=str,
        choices=["develop", "product", "dev", "prod"],
        default=None,
        help="Application mode (develop/product)"
    )
    parser.add_argument("--host", type=str, default=api_settings.HOST, help="Host to bind")
    parser.add_argument("--port", type=int, default=api_settings.PORT, help="Port to bind")

    args = parser.parse_args()

    if args.mode:
        mode_manager.set_mode(AppMode.from_string(args.mode))

    uvicorn.run(
        "hostdash.api.main:app",
        host=args.host,
        port=args.port,
        reload=mode_manager.is_develop,
        workers=1 if mode_manager.is_develop else api_settings.WORKERS,
        log_level=mode_manager.get_log_level().lower()
    )
