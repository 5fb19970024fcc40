"""
Core calendar modules

Чистые функции календарной арифметики: разбор и форматирование дат,
месяцы, недели, периоды.
"""

# Parsing
from src.core.calendar.parsing import (
    EPOCH_UTC,
    NOT_A_DATE,
    ONE_DAY,
    as_utc,
    date_to_timestamp,
    is_valid_instant,
    parse_instant,
)

# Formatting
from src.core.calendar.formatting import (
    WEEKDAY_NAMES,
    format_date,
    get_day_name,
    get_time,
)

# Months
from src.core.calendar.months import (
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_quarter,
    is_leap,
    is_leap_year,
)

# Weeks
from src.core.calendar.weeks import (
    FRIDAY,
    MAX_MONTHS_TO_SCAN,
    get_next_friday,
    get_next_friday_the_13th,
    get_week_number_by_date,
)

# Periods
from src.core.calendar.periods import (
    get_count_days_on_period,
    is_date_in_period,
)

__all__ = [
    # Parsing: Constants
    "EPOCH_UTC",
    "NOT_A_DATE",
    "ONE_DAY",
    # Parsing: Functions
    "as_utc",
    "date_to_timestamp",
    "is_valid_instant",
    "parse_instant",
    # Formatting
    "WEEKDAY_NAMES",
    "format_date",
    "get_day_name",
    "get_time",
    # Months
    "get_count_days_in_month",
    "get_count_weekends_in_month",
    "get_quarter",
    "is_leap",
    "is_leap_year",
    # Weeks
    "FRIDAY",
    "MAX_MONTHS_TO_SCAN",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_week_number_by_date",
    # Periods
    "get_count_days_on_period",
    "is_date_in_period",
]
