"""Delivery Option Service - runs the DIY Label pickup generator over HTTP."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

# Add shared package and parent to path
_root = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(_root))

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from packages.shared.errors.middleware import register_error_handlers
from packages.shared.monitoring import HealthChecker, DependencyStatus, health_router
from packages.shared.monitoring.health import DependencyCheck
from packages.shared.monitoring.logging import configure_logging

from config import settings
from db import check_connection
from api.delivery_options import router as delivery_options_router

SERVICE_NAME = "delivery-option-service"
VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(
        service_name=SERVICE_NAME,
        level=settings.log_level,
        json_format=settings.is_production,
    )
    yield


app = FastAPI(
    title="Delivery Option Service",
    description="DIY Label local print shop pickup option generator",
    version=VERSION,
    lifespan=lifespan,
)

origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
register_error_handlers(app)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=bool(origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(delivery_options_router)

health_checker = HealthChecker(SERVICE_NAME, VERSION)


async def check_database() -> DependencyCheck:
    """Store settings lookup is optional; the generator runs without it."""
    if not settings.supabase_configured:
        return DependencyCheck(
            name="database",
            status=DependencyStatus.DEGRADED,
            message="Supabase not configured (SUPABASE_URL, SUPABASE_SECRET_KEY)",
        )
    ok = await check_connection()
    return DependencyCheck(
        name="database",
        status=DependencyStatus.HEALTHY if ok else DependencyStatus.UNHEALTHY,
        message="Connected" if ok else "Connection failed",
    )


health_checker.add_check("database", check_database)
app.include_router(health_router(health_checker))


@app.get("/")
async def root():
    """Service info."""
    return {
        "service": SERVICE_NAME,
        "module": "Local Print Shop Pickup",
        "version": VERSION,
        "endpoints": {
            "run": "POST /api/v1/delivery-options/run?shop=<optional>&gate_on_product_tags=<optional>",
            "config": "GET /api/v1/delivery-options/config?shop=<optional>",
            "health": "GET /health",
            "ready": "GET /ready",
        },
    }
