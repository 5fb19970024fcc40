"""
Domain models and value objects.

Contains date period models used by the calendar functions and the work schedule.
"""

from src.core.domain.date_period import (
    SCHEDULE_DATE_FORMAT,
    SCHEDULE_DATE_PATTERN,
    IsoDatePeriod,
    ScheduleDatePeriod,
)

__all__ = [
    # Formats
    "SCHEDULE_DATE_FORMAT",
    "SCHEDULE_DATE_PATTERN",
    # Period models
    "IsoDatePeriod",
    "ScheduleDatePeriod",
]
