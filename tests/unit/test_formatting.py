"""
Тесты для модуля Formatting

Проверяет точные строковые форматы:
1. get_time: '%X' (hh:mm:ss в C локали)
2. get_day_name: английские названия дней недели (UTC)
3. format_date: 'M/D/YYYY, h:mm:ss AM/PM' (UTC)
"""

from datetime import datetime

import pytest

from src.core.calendar.formatting import (
    WEEKDAY_NAMES,
    format_date,
    get_day_name,
    get_time,
)


class TestGetTime:
    """Тесты get_time"""

    def test_morning_time_zero_padded(self) -> None:
        """Часы с ведущим нулём"""
        assert get_time(datetime(2023, 5, 1, 8, 20, 55)) == "08:20:55"

    def test_evening_time(self) -> None:
        """24-часовое представление в C локали"""
        assert get_time(datetime(2015, 10, 20, 23, 15, 1)) == "23:15:01"

    def test_midnight(self) -> None:
        """Полночь"""
        assert get_time(datetime(2024, 1, 1)) == "00:00:00"


class TestGetDayName:
    """Тесты get_day_name"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("01 Jan 1970 00:00:00 UTC", "Thursday"),
            ("03 Dec 1995 00:12:00 UTC", "Sunday"),
            ("2024-01-30T00:00:00.000Z", "Tuesday"),
            ("2024-02-23", "Friday"),
        ],
    )
    def test_known_dates(self, value: str, expected: str) -> None:
        """Дни недели для известных дат"""
        assert get_day_name(value) == expected

    def test_computed_in_utc(self) -> None:
        """День недели определяется в UTC, а не по локальному смещению"""
        # 2024-01-30 23:30 -05:00 == 2024-01-31 04:30 UTC (среда)
        assert get_day_name("2024-01-30T23:30:00-05:00") == "Wednesday"

    def test_invalid_returns_none(self) -> None:
        """Ошибка разбора → None"""
        assert get_day_name("not a date") is None

    def test_names_sunday_first(self) -> None:
        """WEEKDAY_NAMES индексируется с воскресенья"""
        assert len(WEEKDAY_NAMES) == 7
        assert WEEKDAY_NAMES[0] == "Sunday"
        assert WEEKDAY_NAMES[5] == "Friday"


class TestFormatDate:
    """Тесты format_date"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2024-02-01T15:00:00.000Z", "2/1/2024, 3:00:00 PM"),
            ("1999-01-05T02:20:00.000Z", "1/5/1999, 2:20:00 AM"),
            ("2010-12-15T22:59:00.000Z", "12/15/2010, 10:59:00 PM"),
        ],
    )
    def test_documented_examples(self, value: str, expected: str) -> None:
        """Примеры из документации"""
        assert format_date(value) == expected

    def test_noon_is_12_pm(self) -> None:
        """Полдень → 12 PM"""
        assert format_date("2024-06-10T12:00:00.000Z") == "6/10/2024, 12:00:00 PM"

    def test_midnight_is_12_am(self) -> None:
        """Полночь → 12 AM"""
        assert format_date("2024-06-10T00:05:09.000Z") == "6/10/2024, 12:05:09 AM"

    def test_minutes_and_seconds_zero_padded(self) -> None:
        """Минуты и секунды с ведущим нулём, месяц и день без"""
        assert format_date("2024-03-04T09:01:02.000Z") == "3/4/2024, 9:01:02 AM"

    def test_converted_to_utc(self) -> None:
        """Смещение переводится в UTC до форматирования"""
        assert format_date("2024-02-01T18:00:00+03:00") == "2/1/2024, 3:00:00 PM"

    def test_invalid_returns_none(self) -> None:
        """Ошибка разбора → None"""
        assert format_date("garbage") is None
