"""
DatePeriod: Модели периодов дат

Замкнутый интервал [start, end], обе границы включительно.

Два текстовых формата границ:
- IsoDatePeriod: ISO 8601 ('YYYY-MM-DD[THH:mm:ss.sssZ]')
- ScheduleDatePeriod: 'DD-MM-YYYY' (графики работы)

Immutable Pydantic модели.
"""

from datetime import date, datetime
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ФОРМАТЫ
# =============================================================================

# strftime/strptime формат дат графика работы
SCHEDULE_DATE_FORMAT: Final[str] = "%d-%m-%Y"

# Regex того же формата (для Field/JSON Schema)
SCHEDULE_DATE_PATTERN: Final[str] = r"^\d{2}-\d{2}-\d{4}$"


# =============================================================================
# ISO PERIOD
# =============================================================================


class IsoDatePeriod(BaseModel):
    """
    Период с границами в ISO 8601.

    Строки границ не разбираются при создании модели: некорректная дата
    обрабатывается потребителем (sentinel), а не ValidationError.
    """

    start: str = Field(..., description="Начало периода (ISO 8601)")
    end: str = Field(..., description="Конец периода (ISO 8601)")

    model_config = {"frozen": True}


# =============================================================================
# SCHEDULE PERIOD
# =============================================================================


class ScheduleDatePeriod(BaseModel):
    """
    Период графика работы с границами в формате 'DD-MM-YYYY'.

    end < start допустим (пустой график), формат и календарная
    корректность границ проверяются при создании.
    """

    start: str = Field(
        ..., pattern=SCHEDULE_DATE_PATTERN, description="Начало периода (DD-MM-YYYY)"
    )
    end: str = Field(
        ..., pattern=SCHEDULE_DATE_PATTERN, description="Конец периода (DD-MM-YYYY)"
    )

    model_config = {"frozen": True}

    @field_validator("start", "end")
    @classmethod
    def validate_calendar_date(cls, v: str) -> str:
        """Проверка существования даты (например, 30-02-2024 отклоняется)."""
        try:
            datetime.strptime(v, SCHEDULE_DATE_FORMAT)
        except ValueError:
            raise ValueError(f"{v!r} is not a valid DD-MM-YYYY calendar date")
        return v

    @property
    def start_date(self) -> date:
        return datetime.strptime(self.start, SCHEDULE_DATE_FORMAT).date()

    @property
    def end_date(self) -> date:
        return datetime.strptime(self.end, SCHEDULE_DATE_FORMAT).date()

    def length_days(self) -> int:
        """
        Длина периода в целых днях: end - start (без +1).

        Отрицательна, если end < start.
        """
        return (self.end_date - self.start_date).days
