"""
SLA Application DTOs
=====================

Data Transfer Objects for the SLA API layer.

These Pydantic models handle serialization/deserialization and validation
for API requests and responses.
"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel, Field


# ========== Request DTOs ==========

class SLACalculateRequest(BaseModel):
    """Request model for an SLA calculation."""
    create_time: datetime = Field(
        ...,
        description="Ticket creation timestamp (RFC3339); naive values are read as UTC"
    )
    sla_ref: str = Field(
        ...,
        description="SLA tier code, e.g. A, B or C. Unknown codes give a 0-hour SLA"
    )


# ========== Response DTOs ==========

class SLACalculateResponse(BaseModel):
    """Response model for an SLA calculation."""
    sla_50_percentage: float = Field(..., description="Progress towards the 50% milestone")
    sla_75_percentage: float = Field(..., description="Progress towards the 75% milestone")
    sla_100_percentage: float = Field(..., description="Progress towards the 100% milestone")
    details: Dict[str, int] = Field(
        default_factory=dict,
        description="Worked hours per weekday, keyed DD_Mon_YY (values may be negative)"
    )

    @classmethod
    def from_domain(cls, result) -> "SLACalculateResponse":
        """Create from an SLAResult entity."""
        return cls(**result.to_dict())


class WorkingCalendarResponse(BaseModel):
    """Working calendar exposed to API clients."""
    work_start_hour: int
    work_end_hour: int
    break_start_hour: int
    break_end_hour: int
    weekend_days: List[int] = Field(..., description="Non-working weekdays (Monday=0)")


class SLATiersResponse(BaseModel):
    """Response model for the loaded tier table."""
    tiers: Dict[str, int] = Field(..., description="SLA hours by tier code")
    calendar: WorkingCalendarResponse
