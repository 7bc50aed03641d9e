"""
SLA Application Services
=========================

Application services orchestrate business logic between the domain
calculator and the configuration that feeds it.

Following SOLID principles:
- Single Responsibility: the service only coordinates a calculation
- Dependency Inversion: depends on a config provider abstraction
"""

from abc import ABC, abstractmethod
from datetime import datetime

from sla_service.core import ValidationException
from sla_service.sla.domain import (
    SLACalculator, SLAResult, SLATierTable, WorkingCalendar
)
from sla_service.shared.infrastructure.logging import get_logger, log_latency

logger = get_logger(__name__)


# ========== Provider Interfaces (Dependency Inversion) ==========

class ISLAConfigProvider(ABC):
    """Interface for SLA configuration access."""

    @abstractmethod
    def get_tier_table(self) -> SLATierTable:
        """Get the immutable tier table."""

    @abstractmethod
    def get_calendar(self) -> WorkingCalendar:
        """Get the working calendar."""


# ========== Application Services ==========

class SLAService:
    """
    Service for SLA calculations.

    Builds the calculator from the configured tier table and calendar
    and runs one calculation per request.
    """

    def __init__(self, config_provider: ISLAConfigProvider):
        self._config_provider = config_provider
        self._calculator = SLACalculator(
            config_provider.get_tier_table(),
            config_provider.get_calendar()
        )

    @property
    def tier_table(self) -> SLATierTable:
        return self._calculator.tier_table

    @property
    def calendar(self) -> WorkingCalendar:
        return self._calculator.calendar

    def compute(self, create_time: datetime, sla_ref: str, log=None) -> SLAResult:
        """
        Calculate deadline, daily breakdown and milestone percentages.

        Args:
            create_time: Ticket creation timestamp
            sla_ref: SLA tier code
            log: Optional logger (e.g. carrying a correlation ID)

        Returns:
            SLAResult for the ticket

        Raises:
            ValidationException: the timestamp or its deadline falls outside
                the supported date range
        """
        log = log or logger

        if sla_ref not in self.tier_table:
            log.warning(
                "Unknown SLA tier, using 0-hour SLA",
                extra={"sla_ref": sla_ref, "known_tiers": sorted(self.tier_table.tiers)}
            )

        try:
            with log_latency(log, "sla_calculation", sla_ref=sla_ref):
                result = self._calculator.compute(create_time, sla_ref)
        except OverflowError as e:
            # UTC conversion or the SLA span left the supported date range
            raise ValidationException(
                "create_time is out of the supported date range for this SLA tier",
                details={
                    "create_time": create_time.isoformat(),
                    "sla_ref": sla_ref,
                    "sla_hours": self.tier_table.hours_for(sla_ref)
                }
            ) from e

        log.info(
            "SLA calculated",
            extra={
                "sla_ref": sla_ref,
                "sla_hours": result.sla_hours,
                "create_time": result.create_time.isoformat(),
                "deadline": result.deadline.isoformat(),
                "working_days": result.working_days,
                "sla_100_percentage": result.sla_100_percentage
            }
        )

        return result
