"""
SLA Value Objects
==================

Immutable value objects for the SLA domain.

Value objects are defined by their attributes rather than an identity.
They are immutable and can be freely shared between requests.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from sla_service.config import (
    DEFAULT_SLA_TIERS, WEEKEND_DAYS,
    WORK_START_HOUR, WORK_END_HOUR, BREAK_START_HOUR, BREAK_END_HOUR,
)

ONE_HOUR = timedelta(hours=1)


@dataclass(frozen=True)
class TimeWindow:
    """A [start, end) pair of UTC instants."""
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def whole_hours(self) -> int:
        """Whole hours in the window, truncated toward zero."""
        return int(self.duration / ONE_HOUR)


@dataclass(frozen=True)
class SLATierTable:
    """
    Read-only mapping of tier code to SLA hours.

    Built once at startup and shared by every calculation. Lookups of
    unknown codes return 0 hours instead of failing, so an unknown tier
    yields a zero-length SLA span (deadline == creation time).
    """
    tiers: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_SLA_TIERS))
    )

    def __post_init__(self):
        # Freeze whatever mapping was passed in
        if not isinstance(self.tiers, MappingProxyType):
            object.__setattr__(self, "tiers", MappingProxyType(dict(self.tiers)))

    def hours_for(self, code: str) -> int:
        """Get SLA hours for a tier code (0 when the code is unknown)."""
        return self.tiers.get(code, 0)

    def __contains__(self, code: object) -> bool:
        return code in self.tiers

    def as_dict(self) -> Dict[str, int]:
        return dict(self.tiers)


@dataclass(frozen=True)
class WorkingCalendar:
    """
    Weekly working calendar in UTC.

    Every weekday shares the same work window and break window;
    Saturday and Sunday are non-working days.
    """
    work_start_hour: int = WORK_START_HOUR
    work_end_hour: int = WORK_END_HOUR
    break_start_hour: int = BREAK_START_HOUR
    break_end_hour: int = BREAK_END_HOUR
    weekend_days: frozenset = WEEKEND_DAYS

    def is_working_day(self, day: date) -> bool:
        return day.weekday() not in self.weekend_days

    def windows_for(self, day: date) -> Tuple[TimeWindow, TimeWindow]:
        """Get (work window, break window) for a calendar date."""
        midnight = datetime.combine(day, time.min, tzinfo=timezone.utc)
        work = TimeWindow(
            midnight + timedelta(hours=self.work_start_hour),
            midnight + timedelta(hours=self.work_end_hour),
        )
        pause = TimeWindow(
            midnight + timedelta(hours=self.break_start_hour),
            midnight + timedelta(hours=self.break_end_hour),
        )
        return work, pause

    def iter_days(self, start: datetime, end: datetime) -> Iterator[datetime]:
        """
        Walk the calendar days overlapping [start, end).

        Yields the start instant of each day: `start` itself for the first
        day, then 00:00 UTC of every following date. A day is yielded only
        while its start is strictly before `end`, so an empty span yields
        nothing.
        """
        day_start = start
        while day_start < end:
            yield day_start
            next_date = day_start.date() + timedelta(days=1)
            day_start = datetime.combine(next_date, time.min, tzinfo=timezone.utc)

    def to_dict(self) -> dict:
        return {
            "work_start_hour": self.work_start_hour,
            "work_end_hour": self.work_end_hour,
            "break_start_hour": self.break_start_hour,
            "break_end_hour": self.break_end_hour,
            "weekend_days": sorted(self.weekend_days),
        }


class WorkingCalendarConfig(BaseModel):
    """Working calendar section of the SLA YAML file."""
    work_start_hour: int = Field(default=WORK_START_HOUR, ge=0, le=24)
    work_end_hour: int = Field(default=WORK_END_HOUR, ge=0, le=24)
    break_start_hour: int = Field(default=BREAK_START_HOUR, ge=0, le=24)
    break_end_hour: int = Field(default=BREAK_END_HOUR, ge=0, le=24)

    @model_validator(mode="after")
    def validate_ordering(self) -> "WorkingCalendarConfig":
        """Break must sit inside the work window."""
        if not (self.work_start_hour < self.break_start_hour
                < self.break_end_hour <= self.work_end_hour):
            raise ValueError(
                "expected work_start_hour < break_start_hour < "
                "break_end_hour <= work_end_hour"
            )
        return self


class SLAConfig(BaseModel):
    """
    SLA configuration loaded from YAML.

    Converted once into the immutable SLATierTable and WorkingCalendar
    used by the calculator.
    """
    sla_tiers: Dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_SLA_TIERS),
        description="SLA hours by tier code"
    )
    working_calendar: WorkingCalendarConfig = Field(
        default_factory=WorkingCalendarConfig,
        description="Daily work and break windows (UTC hours)"
    )

    @field_validator("sla_tiers")
    @classmethod
    def validate_sla_tiers(cls, v: Dict[str, int]) -> Dict[str, int]:
        """Tier hours must be non-negative."""
        for code, hours in v.items():
            if hours < 0:
                raise ValueError(f"tier {code!r} has negative hours: {hours}")
        return v

    def to_tier_table(self) -> SLATierTable:
        return SLATierTable(self.sla_tiers)

    def to_calendar(self) -> WorkingCalendar:
        cal = self.working_calendar
        return WorkingCalendar(
            work_start_hour=cal.work_start_hour,
            work_end_hour=cal.work_end_hour,
            break_start_hour=cal.break_start_hour,
            break_end_hour=cal.break_end_hour,
        )
