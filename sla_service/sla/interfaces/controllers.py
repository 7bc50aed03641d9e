"""
SLA Controllers (API Routes)
=============================

FastAPI routes for the SLA calculator.

Controllers are thin - they delegate to the application service.
"""

import threading

from fastapi import APIRouter, Depends, Request

from sla_service.config import settings
from sla_service.sla.application import (
    SLAService,
    SLACalculateRequest,
    SLACalculateResponse,
    SLATiersResponse,
    WorkingCalendarResponse,
)
from sla_service.sla.infrastructure import YAMLConfigProvider
from sla_service.shared.infrastructure.logging import get_context_logger, get_logger

logger = get_logger(__name__)
router = APIRouter(tags=["SLA Calculator"])

_service_lock = threading.Lock()


# ========== Example payloads for Swagger ==========

SLA_CALCULATE_REQUEST_EXAMPLE = {
    "create_time": "2024-03-04T08:00:00Z",
    "sla_ref": "A"
}

SLA_CALCULATE_RESPONSE_EXAMPLE = {
    "sla_50_percentage": 100.0,
    "sla_75_percentage": 100.0,
    "sla_100_percentage": 100.0,
    "details": {
        "04_Mar_24": 8,
        "05_Mar_24": -1
    }
}

SLA_TIERS_RESPONSE_EXAMPLE = {
    "tiers": {"A": 24, "B": 72, "C": 144},
    "calendar": {
        "work_start_hour": 9,
        "work_end_hour": 18,
        "break_start_hour": 12,
        "break_end_hour": 13,
        "weekend_days": [5, 6]
    }
}


# ========== Dependencies ==========

def get_sla_service(request: Request) -> SLAService:
    """
    Get SLA service instance.

    The app lifespan normally creates it; when lifespan is disabled
    (serverless) it is built on first use from the configured YAML path.
    """
    service = getattr(request.app.state, "sla_service", None)
    if service is not None:
        return service

    with _service_lock:
        service = getattr(request.app.state, "sla_service", None)
        if service is None:
            logger.info(
                "Building SLA service on first request",
                extra={"config_path": str(settings.sla_config_path)}
            )
            service = SLAService(YAMLConfigProvider(settings.sla_config_path))
            request.app.state.sla_service = service
    return service


# ========== Route Handlers ==========

@router.post(
    "/calculate-sla",
    response_model=SLACalculateResponse,
    summary="Calculate SLA deadline progress",
    description="""
    Calculate the SLA breakdown for a ticket from its creation time and tier.

    **SLA Tiers** (hours): `A` = 24, `B` = 72, `C` = 144.
    Unknown tiers are treated as a 0-hour SLA.

    **Working calendar** (UTC): Monday-Friday, 09:00-18:00 with a
    12:00-13:00 break.

    **Response**:
    - `details`: worked hours per weekday between creation and deadline
    - `sla_50_percentage` / `sla_75_percentage` / `sla_100_percentage`:
      working days elapsed over working days required for each milestone

    **Example Request**:
    ```json
    {
        "create_time": "2024-03-04T08:00:00Z",
        "sla_ref": "A"
    }
    ```
    """,
    responses={
        200: {
            "description": "SLA calculated",
            "content": {
                "application/json": {
                    "example": SLA_CALCULATE_RESPONSE_EXAMPLE
                }
            }
        },
        400: {
            "description": "Request body could not be parsed"
        }
    }
)
def calculate_sla(
    payload: SLACalculateRequest,
    request: Request,
    sla_service: SLAService = Depends(get_sla_service)
):
    correlation_id = getattr(request.state, "correlation_id", None)
    log = get_context_logger(__name__, correlation_id)

    result = sla_service.compute(payload.create_time, payload.sla_ref, log=log)

    return SLACalculateResponse.from_domain(result)


@router.get(
    "/sla/tiers",
    response_model=SLATiersResponse,
    summary="List SLA tiers",
    description="Get the loaded SLA tier table and working calendar.",
    responses={
        200: {
            "description": "Tier table",
            "content": {
                "application/json": {
                    "example": SLA_TIERS_RESPONSE_EXAMPLE
                }
            }
        }
    }
)
def list_sla_tiers(sla_service: SLAService = Depends(get_sla_service)):
    return SLATiersResponse(
        tiers=sla_service.tier_table.as_dict(),
        calendar=WorkingCalendarResponse(**sla_service.calendar.to_dict())
    )


# Export router for inclusion in main app
sla_router = router
