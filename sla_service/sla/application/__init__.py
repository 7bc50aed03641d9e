"""
SLA Application Layer
======================

Application layer for the SLA calculator module.

Contains:
- Services: Coordinate the domain calculator with its configuration
- DTOs: Data transfer objects for API serialization

This layer depends on the domain layer and provider interfaces,
but not on concrete infrastructure implementations.
"""

from sla_service.sla.application.dto import (
    SLACalculateRequest,
    SLACalculateResponse,
    SLATiersResponse,
    WorkingCalendarResponse,
)
from sla_service.sla.application.services import (
    SLAService,
    ISLAConfigProvider,
)

__all__ = [
    # DTOs
    "SLACalculateRequest",
    "SLACalculateResponse",
    "SLATiersResponse",
    "WorkingCalendarResponse",
    # Services
    "SLAService",
    # Provider Interfaces
    "ISLAConfigProvider",
]
