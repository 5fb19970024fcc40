"""
Weeks: Недели и пятницы

- get_next_friday: ближайшая следующая пятница (пятница → +7 дней)
- get_week_number_by_date: номер недели в году
- get_next_friday_the_13th: ближайшая пятница 13-е не раньше даты

Неделя начинается с понедельника. Первая неделя года содержит 1 января.

Все функции возвращают новые объекты: входной datetime не изменяется.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Final

from src.core.calendar.parsing import as_utc

logger = logging.getLogger(__name__)


# date.weekday(): 0 = Monday, 4 = Friday
FRIDAY: Final[int] = 4

# Пятница 13-е встречается минимум раз в 14 месяцев
MAX_MONTHS_TO_SCAN: Final[int] = 28


def get_next_friday(instant: datetime) -> datetime:
    """
    Дата следующей пятницы.

    День недели определяется в UTC. Если instant уже пятница или позже
    (суббота), результатом будет пятница следующей недели.

    Examples:
        >>> get_next_friday(datetime(2024, 2, 3))
        datetime.datetime(2024, 2, 9, 0, 0)
        >>> get_next_friday(datetime(2024, 2, 16))
        datetime.datetime(2024, 2, 23, 0, 0)
    """
    weekday = as_utc(instant).weekday()
    shift = (FRIDAY - weekday) % 7 or 7

    return instant + timedelta(days=shift)


def get_week_number_by_date(instant: datetime) -> int:
    """
    Номер недели года.

    shift: число дней недели, прошедших до 1 января,
    понедельник → 0, вторник → 1, ..., воскресенье → 6.

    Examples:
        >>> get_week_number_by_date(datetime(2024, 1, 3))
        1
        >>> get_week_number_by_date(datetime(2024, 2, 23))
        8
    """
    current = as_utc(instant)
    year_start = current.replace(month=1, day=1)

    diff_in_days = (current - year_start).days
    shift = year_start.weekday()

    return math.ceil((diff_in_days + shift + 1) / 7)


def get_next_friday_the_13th(instant: datetime) -> datetime:
    """
    Ближайшая пятница 13-е, не раньше instant.

    Поиск идёт помесячно начиная с месяца instant и переходит через
    границу года. Время суток instant сохраняется.

    Args:
        instant: Дата начала поиска

    Returns:
        datetime 13-го числа, приходящегося на пятницу

    Examples:
        >>> get_next_friday_the_13th(datetime(2024, 1, 13))
        datetime.datetime(2024, 9, 13, 0, 0)
        >>> get_next_friday_the_13th(datetime(2023, 2, 1))
        datetime.datetime(2023, 10, 13, 0, 0)
    """
    year, month = instant.year, instant.month

    for _ in range(MAX_MONTHS_TO_SCAN):
        candidate = instant.replace(year=year, month=month, day=13)

        if candidate >= instant and candidate.weekday() == FRIDAY:
            return candidate

        logger.debug("No Friday the 13th in %04d-%02d", year, month)
        month += 1
        if month > 12:
            month = 1
            year += 1

    raise RuntimeError(
        f"No Friday the 13th within {MAX_MONTHS_TO_SCAN} months of {instant.isoformat()}"
    )
