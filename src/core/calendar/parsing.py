"""
Parsing: Разбор моментов времени и timestamp конверсия

Модуль является единственной точкой входа для строк с датой/временем:
- parse_instant: строка → aware datetime (или None при ошибке разбора)
- date_to_timestamp: строка → миллисекунды с 1970-01-01T00:00:00Z
- as_utc: взгляд на момент времени в UTC

ПРАВИЛА РАЗБОРА:
1. Формат 'YYYY-MM-DD' (только дата) трактуется как полночь UTC
2. Строка без смещения трактуется как локальное время хоста
3. Недостающие компоненты берутся из 1970-01-01, а не из текущей даты
4. Ошибка разбора НЕ бросает исключение: возвращается sentinel
   (None для parse_instant, NOT_A_DATE для числовых результатов)
"""

import logging
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Final, Optional, Union

from dateutil import parser

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Sentinel "не дата" для числовых результатов (аналог NaN-даты)
NOT_A_DATE: Final[float] = math.nan

# Начало эпохи Unix
EPOCH_UTC: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)

ONE_DAY: Final[timedelta] = timedelta(days=1)
ONE_MILLISECOND: Final[timedelta] = timedelta(milliseconds=1)

# Значения по умолчанию для компонентов, отсутствующих в строке.
# Фиксированная дата вместо "сегодня" сохраняет детерминизм.
_PARSE_DEFAULT: Final[datetime] = datetime(1970, 1, 1)

_ISO_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")

Instant = Union[datetime, date]


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_instant(value: str) -> Optional[datetime]:
    """
    Разбор строки с датой/временем в aware datetime.

    Args:
        value: Строка даты, например '2024-01-30T00:00:00.000Z'
            или '04 Dec 1995 00:12:00 UTC'

    Returns:
        Aware datetime или None, если строку разобрать нельзя

    Examples:
        >>> parse_instant('1970-01-01')
        datetime.datetime(1970, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
        >>> parse_instant('not a date') is None
        True
    """
    if not isinstance(value, str) or not value.strip():
        logger.debug("Empty or non-string date value: %r", value)
        return None

    text = value.strip()

    try:
        parsed = parser.parse(text, default=_PARSE_DEFAULT)
        if _ISO_DATE_ONLY.match(text):
            # ISO date-only → UTC midnight
            return parsed.replace(tzinfo=timezone.utc)
        if parsed.tzinfo is None:
            # Нет смещения → локальное время хоста
            parsed = parsed.astimezone()
    except (ValueError, OverflowError, OSError) as e:
        logger.debug("Unparsable date value %r: %s", value, e)
        return None

    return parsed


def is_valid_instant(value: str) -> bool:
    """Проверка, что строка разбирается в момент времени."""
    return parse_instant(value) is not None


def as_utc(instant: Instant) -> Instant:
    """
    Взгляд на момент времени в UTC.

    Naive datetime и date возвращаются без изменений (их поля уже
    считаются "локальными" и читаются напрямую).
    """
    if isinstance(instant, datetime) and instant.tzinfo is not None:
        return instant.astimezone(timezone.utc)
    return instant


# =============================================================================
# TIMESTAMP
# =============================================================================


def date_to_timestamp(value: str) -> Union[int, float]:
    """
    Количество миллисекунд, прошедших с 1970-01-01T00:00:00Z.

    Args:
        value: Строка даты/времени

    Returns:
        Целое число миллисекунд или NOT_A_DATE (NaN), если строка
        не разбирается

    Examples:
        >>> date_to_timestamp('01 Jan 1970 00:00:00 UTC')
        0
        >>> date_to_timestamp('04 Dec 1995 00:12:00 UTC')
        818035920000
    """
    instant = parse_instant(value)
    if instant is None:
        return NOT_A_DATE

    return (instant - EPOCH_UTC) // ONE_MILLISECOND
