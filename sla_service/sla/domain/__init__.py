"""
SLA Domain Layer
================

Domain layer for the SLA calculator module.

Contains:
- Entities: SLAResult
- Value Objects: SLATierTable, WorkingCalendar, TimeWindow, SLAConfig
- Domain Services: SLACalculator (business-day arithmetic)

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from sla_service.sla.domain.entities import SLAResult
from sla_service.sla.domain.value_objects import (
    SLATierTable,
    WorkingCalendar,
    WorkingCalendarConfig,
    TimeWindow,
    SLAConfig,
)
from sla_service.sla.domain.calculator import (
    SLACalculator,
    format_day_key,
    to_utc,
)

__all__ = [
    # Entities
    "SLAResult",
    # Value Objects
    "SLATierTable",
    "WorkingCalendar",
    "WorkingCalendarConfig",
    "TimeWindow",
    "SLAConfig",
    # Domain Services
    "SLACalculator",
    "format_day_key",
    "to_utc",
]
