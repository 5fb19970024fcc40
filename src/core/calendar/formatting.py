"""
Formatting: Строковые представления дат

Точные строковые форматы являются контрактом:
- get_time: locale-default представление времени (strftime '%X')
- get_day_name: английское название дня недели (UTC)
- format_date: 'M/D/YYYY, h:mm:ss AM/PM' (UTC, 12-часовой формат)

Ошибка разбора входной строки → None.
"""

from datetime import datetime, timezone
from typing import Final, Optional, Tuple

from src.core.calendar.parsing import parse_instant


# Индексация как у getUTCDay: 0 = Sunday
WEEKDAY_NAMES: Final[Tuple[str, ...]] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def get_time(instant: datetime) -> str:
    """
    Время суток из момента времени в формате текущей локали.

    В C/POSIX локали (default для Python процесса) результат 'hh:mm:ss'.

    Examples:
        >>> get_time(datetime(2023, 5, 1, 8, 20, 55))
        '08:20:55'
        >>> get_time(datetime(2015, 10, 20, 23, 15, 1))
        '23:15:01'
    """
    return instant.strftime("%X")


def get_day_name(value: str) -> Optional[str]:
    """
    Название дня недели для строки даты (в UTC).

    Args:
        value: Строка даты/времени

    Returns:
        Одно из WEEKDAY_NAMES или None, если строка не разбирается

    Examples:
        >>> get_day_name('01 Jan 1970 00:00:00 UTC')
        'Thursday'
        >>> get_day_name('2024-01-30T00:00:00.000Z')
        'Tuesday'
    """
    instant = parse_instant(value)
    if instant is None:
        return None

    utc = instant.astimezone(timezone.utc)
    return WEEKDAY_NAMES[utc.isoweekday() % 7]


def format_date(value: str) -> Optional[str]:
    """
    Форматирование даты в 'M/D/YYYY, h:mm:ss AM/PM' (UTC).

    Месяц, день и час без ведущего нуля. Минуты и секунды с ведущим нулём.
    Полдень: '12:..:.. PM', полночь: '12:..:.. AM'.

    Args:
        value: Дата в ISO 8601 (например, 'YYYY-MM-DDTHH:mm:ss.sssZ')

    Returns:
        Отформатированная строка или None, если строка не разбирается

    Examples:
        >>> format_date('2024-02-01T15:00:00.000Z')
        '2/1/2024, 3:00:00 PM'
        >>> format_date('1999-01-05T02:20:00.000Z')
        '1/5/1999, 2:20:00 AM'
    """
    instant = parse_instant(value)
    if instant is None:
        return None

    utc = instant.astimezone(timezone.utc)
    hour_12 = utc.hour % 12 or 12
    day_part = "AM" if utc.hour < 12 else "PM"

    return (
        f"{utc.month}/{utc.day}/{utc.year}, "
        f"{hour_12}:{utc.minute:02d}:{utc.second:02d} {day_part}"
    )
