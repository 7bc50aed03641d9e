"""
SLA Domain Entities
====================

Result objects produced by the SLA calculator.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict


@dataclass
class SLAResult:
    """
    Outcome of one SLA calculation.

    `details` maps "DD_Mon_YY" date keys to worked hours, in date order.
    Percentages are not clamped and the detail values may be negative.
    """

    sla_ref: str
    sla_hours: int
    create_time: datetime
    deadline: datetime

    sla_50_percentage: float
    sla_75_percentage: float
    sla_100_percentage: float

    details: Dict[str, int] = field(default_factory=dict)

    @property
    def working_days(self) -> int:
        """Number of weekday entries in the breakdown."""
        return len(self.details)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "sla_50_percentage": self.sla_50_percentage,
            "sla_75_percentage": self.sla_75_percentage,
            "sla_100_percentage": self.sla_100_percentage,
            "details": dict(self.details),
        }
