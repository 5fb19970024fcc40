"""
Tests for DatePeriod Pydantic models

Покрывает:
- Создание и валидация моделей
- Формат DD-MM-YYYY и календарная корректность
- Immutability (frozen=True)
- Длина периода (end - start, без +1)
"""

from datetime import date

import pytest
from pydantic import ValidationError

from src.core.domain import IsoDatePeriod, ScheduleDatePeriod


class TestIsoDatePeriod:
    """Тесты IsoDatePeriod"""

    def test_create(self) -> None:
        """Создание из строк ISO"""
        period = IsoDatePeriod(start="2024-02-02", end="2024-03-02")
        assert period.start == "2024-02-02"
        assert period.end == "2024-03-02"

    def test_empty_bound_accepted(self) -> None:
        """Пустая граница не отклоняется моделью, её разбирает потребитель"""
        period = IsoDatePeriod(start="", end="2024-03-02")
        assert period.start == ""

    def test_frozen(self) -> None:
        """Модель неизменяема"""
        period = IsoDatePeriod(start="2024-02-02", end="2024-03-02")
        with pytest.raises(ValidationError):
            period.start = "2024-01-01"


class TestScheduleDatePeriod:
    """Тесты ScheduleDatePeriod"""

    def test_create_and_dates(self) -> None:
        """Границы доступны как date"""
        period = ScheduleDatePeriod(start="01-01-2024", end="15-01-2024")
        assert period.start_date == date(2024, 1, 1)
        assert period.end_date == date(2024, 1, 15)

    def test_length_days_excludes_plus_one(self) -> None:
        """Длина периода равна разности дат без +1"""
        assert ScheduleDatePeriod(start="01-01-2024", end="15-01-2024").length_days() == 14
        assert ScheduleDatePeriod(start="01-01-2024", end="01-01-2024").length_days() == 0

    def test_reversed_period_allowed(self) -> None:
        """end < start допустим, длина отрицательна"""
        period = ScheduleDatePeriod(start="10-01-2024", end="01-01-2024")
        assert period.length_days() == -9

    @pytest.mark.parametrize("value", ["2024-01-01", "1-1-2024", "01/01/2024", "01-01-24"])
    def test_wrong_format_rejected(self, value: str) -> None:
        """Формат, отличный от DD-MM-YYYY → ValidationError"""
        with pytest.raises(ValidationError):
            ScheduleDatePeriod(start=value, end="15-01-2024")

    @pytest.mark.parametrize("value", ["30-02-2024", "29-02-2023", "00-01-2024", "01-13-2024"])
    def test_nonexistent_date_rejected(self, value: str) -> None:
        """Несуществующая дата → ValidationError"""
        with pytest.raises(ValidationError, match="not a valid DD-MM-YYYY calendar date"):
            ScheduleDatePeriod(start="01-01-2024", end=value)

    def test_leap_day_accepted(self) -> None:
        """29 февраля високосного года допустимо"""
        period = ScheduleDatePeriod(start="29-02-2024", end="01-03-2024")
        assert period.length_days() == 1

    def test_model_validate_from_dict(self) -> None:
        """Создание из mapping"""
        period = ScheduleDatePeriod.model_validate({"start": "01-01-2024", "end": "10-01-2024"})
        assert period.end_date == date(2024, 1, 10)

    def test_frozen(self) -> None:
        """Модель неизменяема"""
        period = ScheduleDatePeriod(start="01-01-2024", end="10-01-2024")
        with pytest.raises(ValidationError):
            period.end = "11-01-2024"
