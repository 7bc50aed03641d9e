"""
SLA Calculator - Main Application
==================================

HTTP service computing SLA deadlines and progress milestones.

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Calculator, entities and value objects
- Infrastructure: YAML configuration provider
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from sla_service.config import settings
from sla_service.core import ApplicationException
from sla_service.sla.application import SLAService
from sla_service.sla.infrastructure import YAMLConfigProvider
from sla_service.sla.interfaces import sla_router
from sla_service.shared.api.middleware import (
    CorrelationIDMiddleware,
    MetricsMiddleware,
    LoggingMiddleware,
    application_exception_handler,
    global_exception_handler,
    validation_exception_handler,
)
from sla_service.shared.infrastructure.logging import setup_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Load SLA tier table and working calendar
    3. Build the SLA service

    SHUTDOWN:
    1. Log shutdown (the service holds no external resources)
    """
    # === STARTUP ===
    setup_logging(level=settings.log_level, environment=settings.environment)
    logger.info("Starting SLA Calculator", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    logger.info("Loading SLA configuration", extra={"path": str(settings.sla_config_path)})
    config_provider = YAMLConfigProvider(settings.sla_config_path)
    app.state.sla_service = SLAService(config_provider)

    logger.info("SLA Calculator started successfully", extra={
        "tiers": app.state.sla_service.tier_table.as_dict()
    })

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("SLA Calculator shutdown complete")


app = FastAPI(
    title="SLA Calculator API",
    description="""
    ## SLA Deadline Calculator

    Computes SLA deadlines and business-day progress for support tickets.

    **Endpoints:**
    - `POST /calculate-sla` - Calculate the SLA breakdown for a ticket
    - `GET /sla/tiers` - List the SLA tier table and working calendar

    **SLA Tiers (hours):**

    | Tier | Hours |
    |------|-------|
    | A    | 24    |
    | B    | 72    |
    | C    | 144   |

    **Working calendar (UTC):** Monday-Friday, 09:00-18:00, break 12:00-13:00.
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)
app.state.settings = settings

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# === Custom Middleware (from shared) ===
# Last added runs first: the correlation ID must be set before request logging
app.add_middleware(MetricsMiddleware)
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(ApplicationException, application_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# === Include Module Routers ===
app.include_router(sla_router)


# === Health Check Endpoint ===

@app.get("/health", tags=["Health"], responses={
    200: {
        "description": "Service is healthy",
        "content": {
            "application/json": {
                "example": {
                    "status": "healthy",
                    "version": "1.0.0",
                    "environment": "development",
                    "checks": {
                        "sla_config": "loaded (3 tiers)"
                    }
                }
            }
        }
    }
})
async def health_check(request: Request):
    """
    Health check endpoint for load balancers and orchestrators.

    Returns service health status including SLA configuration state.
    """
    service = getattr(request.app.state, "sla_service", None)
    checks = {
        "sla_config": (
            f"loaded ({len(service.tier_table.tiers)} tiers)" if service else "not_loaded"
        )
    }

    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "checks": checks
    }


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "service": "SLA Calculator",
        "version": settings.app_version,
        "docs": "/docs",
        "health": "/health",
        "endpoints": [
            "POST /calculate-sla - Calculate SLA breakdown",
            "GET /sla/tiers - List SLA tiers"
        ]
    }


# === Development Entry Point ===

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sla_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level="info"
    )
