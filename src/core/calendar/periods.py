"""
Periods: Периоды дат в ISO 8601

- get_count_days_on_period: число дней в периоде, включая обе границы
- is_date_in_period: попадание даты в период (включительно)
"""

from typing import Mapping, Union

from src.core.calendar.parsing import NOT_A_DATE, ONE_DAY, parse_instant
from src.core.domain.date_period import IsoDatePeriod


def get_count_days_on_period(date_start: str, date_end: str) -> Union[int, float]:
    """
    Число дней между двумя датами, включая обе границы.

    Args:
        date_start: Начало периода (ISO 8601)
        date_end: Конец периода (ISO 8601)

    Returns:
        (end - start) / 1 day + 1; целое число для границ с одинаковым
        временем суток. NOT_A_DATE (NaN), если одна из дат не разбирается.

    Examples:
        >>> get_count_days_on_period('2024-02-01T00:00:00.000Z', '2024-02-02T00:00:00.000Z')
        2
        >>> get_count_days_on_period('2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z')
        12
    """
    start = parse_instant(date_start)
    end = parse_instant(date_end)
    if start is None or end is None:
        return NOT_A_DATE

    days = (end - start) / ONE_DAY
    if days.is_integer():
        return int(days) + 1

    return days + 1


def is_date_in_period(
    value: str, period: Union[IsoDatePeriod, Mapping[str, str]]
) -> bool:
    """
    Попадает ли дата в период [start, end] включительно.

    Args:
        value: Проверяемая дата (ISO 8601)
        period: IsoDatePeriod или mapping {'start': ..., 'end': ...}

    Returns:
        True если start <= value <= end. False, если дата вне периода
        или любая из трёх дат не разбирается.

    Examples:
        >>> is_date_in_period('2024-02-01', {'start': '2024-02-02', 'end': '2024-03-02'})
        False
        >>> is_date_in_period('2024-02-02', {'start': '2024-02-02', 'end': '2024-03-02'})
        True
    """
    if not isinstance(period, IsoDatePeriod):
        period = IsoDatePeriod.model_validate(period)

    instant = parse_instant(value)
    start = parse_instant(period.start)
    end = parse_instant(period.end)

    if instant is None or start is None or end is None:
        return False

    return start <= instant <= end
