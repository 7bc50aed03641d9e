"""
SLA Calculator
==============

Business-day arithmetic for SLA deadlines and progress milestones.

Pure, stateless functions over a tier table and a working calendar.
All instants are handled in UTC.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from sla_service.config import MILESTONE_FRACTIONS, MONTH_ABBREVIATIONS
from sla_service.sla.domain.entities import SLAResult
from sla_service.sla.domain.value_objects import (
    ONE_HOUR, SLATierTable, TimeWindow, WorkingCalendar,
)


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_day_key(day: datetime) -> str:
    """Format a date as DD_Mon_YY, e.g. 05_Mar_24."""
    return f"{day.day:02d}_{MONTH_ABBREVIATIONS[day.month - 1]}_{day.year % 100:02d}"


class SLACalculator:
    """
    SLA deadline and milestone calculations.

    Holds only read-only collaborators, so one instance can serve
    any number of concurrent requests.
    """

    def __init__(
        self,
        tier_table: Optional[SLATierTable] = None,
        calendar: Optional[WorkingCalendar] = None
    ):
        self.tier_table = tier_table or SLATierTable()
        self.calendar = calendar or WorkingCalendar()

    def resolve_deadline(self, create_time: datetime, tier_code: str) -> datetime:
        """
        Calculate the SLA deadline as a plain wall-clock offset.

        Unknown tier codes resolve to 0 hours (deadline == create_time).
        """
        hours = self.tier_table.hours_for(tier_code)
        return create_time + timedelta(hours=hours)

    @staticmethod
    def clamped_worked_hours(
        start_time: datetime,
        end_time: datetime,
        work_start: datetime,
        work_end: datetime,
        break_start: datetime,
        break_end: datetime
    ) -> int:
        """
        Whole hours worked inside one day's work window.

        The span is narrowed to the work window, the hour difference is
        truncated toward zero, and the break is subtracted only when the
        narrowed span fully contains it. The result is negative when the
        narrowed end precedes the narrowed start.
        """
        if start_time < work_start:
            start_time = work_start
        if end_time > work_end:
            end_time = work_end

        hours = TimeWindow(start_time, end_time).whole_hours

        if start_time < break_start and end_time > break_end:
            hours -= TimeWindow(break_start, break_end).whole_hours

        return hours

    def compute_daily_details(
        self,
        start_time: datetime,
        end_time: datetime
    ) -> Dict[str, int]:
        """
        Per-day worked hours between start_time and end_time.

        Weekend dates are omitted. Every day is clamped against the same
        outer start_time/end_time, so days at the edges of the span can
        carry zero or negative values.
        """
        details: Dict[str, int] = {}

        for day_start in self.calendar.iter_days(start_time, end_time):
            if not self.calendar.is_working_day(day_start):
                continue

            work, pause = self.calendar.windows_for(day_start.date())
            details[format_day_key(day_start)] = self.clamped_worked_hours(
                start_time, end_time,
                work.start, work.end,
                pause.start, pause.end,
            )

        return details

    def compute_milestone_percentage(
        self,
        start_time: datetime,
        end_time: datetime,
        target_fraction: float
    ) -> float:
        """
        Working days elapsed over working days required for a milestone.

        target_days = floor(total_hours / 24 * target_fraction) + 1, so it is
        never below 1. The walk stops once target_days working days were
        counted or the span is exhausted. Not clamped to 100.
        """
        total_hours = max((end_time - start_time) / ONE_HOUR, 0.0)
        target_days = math.floor(total_hours / 24.0 * target_fraction) + 1

        days_in_range = 0
        for day_start in self.calendar.iter_days(start_time, end_time):
            if self.calendar.is_working_day(day_start):
                days_in_range += 1
            if days_in_range >= target_days:
                break

        return days_in_range / target_days * 100.0

    def compute(self, create_time: datetime, tier_code: str) -> SLAResult:
        """Run the full calculation for one ticket."""
        start_time = to_utc(create_time)
        deadline = self.resolve_deadline(start_time, tier_code)

        pct_50, pct_75, pct_100 = (
            self.compute_milestone_percentage(start_time, deadline, fraction)
            for fraction in MILESTONE_FRACTIONS
        )

        return SLAResult(
            sla_ref=tier_code,
            sla_hours=self.tier_table.hours_for(tier_code),
            create_time=start_time,
            deadline=deadline,
            sla_50_percentage=pct_50,
            sla_75_percentage=pct_75,
            sla_100_percentage=pct_100,
            details=self.compute_daily_details(start_time, deadline),
        )
