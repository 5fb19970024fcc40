"""
Months: Календарная арифметика месяцев и годов

- is_leap / is_leap_year: григорианское правило високосного года
- get_count_days_in_month: число дней в месяце
- get_count_weekends_in_month: число суббот и воскресений в месяце
- get_quarter: квартал года (1-4)

Месяцы нумеруются с 1 (1 = январь).
"""

import math
from datetime import date, timedelta
from typing import Final, Tuple

# Дни в месяцах невисокосного года
_DAYS_IN_MONTH: Final[Tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# date.weekday(): 5 = Saturday, 6 = Sunday
_SATURDAY: Final[int] = 5


def is_leap(year: int) -> bool:
    """
    Григорианское правило: делится на 4 и (не делится на 100 или делится на 400).

    Examples:
        >>> is_leap(2000), is_leap(1900), is_leap(2024), is_leap(2023)
        (True, False, True, False)
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_leap_year(instant: date) -> bool:
    """
    Является ли год момента времени високосным.

    Args:
        instant: date или datetime

    Returns:
        True если год високосный
    """
    return is_leap(instant.year)


def get_count_days_in_month(month: int, year: int) -> int:
    """
    Число дней в месяце.

    Args:
        month: Месяц (1 = январь, ..., 12 = декабрь)
        year: Год (четыре цифры)

    Returns:
        28, 29, 30 или 31

    Raises:
        ValueError: Если month вне диапазона [1, 12]

    Examples:
        >>> get_count_days_in_month(1, 2024)
        31
        >>> get_count_days_in_month(2, 2024)
        29
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in [1, 12], got {month}")

    if month == 2 and is_leap(year):
        return 29

    return _DAYS_IN_MONTH[month - 1]


def get_count_weekends_in_month(month: int, year: int) -> int:
    """
    Число выходных дней (суббот и воскресений) в месяце.

    Examples:
        >>> get_count_weekends_in_month(5, 2022)
        9
        >>> get_count_weekends_in_month(12, 2023)
        10
    """
    days_in_month = get_count_days_in_month(month, year)
    first_day = date(year, month, 1)

    counter = 0
    for offset in range(days_in_month):
        if (first_day + timedelta(days=offset)).weekday() >= _SATURDAY:
            counter += 1

    return counter


def get_quarter(instant: date) -> int:
    """
    Квартал года: ceil(month / 3).

    Examples:
        >>> get_quarter(date(2024, 2, 13))
        1
        >>> get_quarter(date(2024, 11, 10))
        4
    """
    return math.ceil(instant.month / 3)
