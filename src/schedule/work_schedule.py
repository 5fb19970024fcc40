"""Work Schedule: генерация графика работы по циклу "N рабочих / M выходных".

Цикл начинается в день start периода:
- первые count_work_days календарных дней рабочие
- следующие count_off_days выходные
- цикл повторяется до конца периода

Длина периода считается как end - start в целых днях (без +1).
Граница end включается за счёт условия offset <= length.

ИНВАРИАНТЫ:
1. Результат упорядочен по возрастанию дат
2. Ни одна дата не выходит за [start, end]
3. count_work_days, count_off_days: целые >= 1 (иначе ScheduleParameterError)
4. end < start → пустой график
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from src.core.contracts import validate_work_schedule_request
from src.core.domain.date_period import SCHEDULE_DATE_FORMAT, ScheduleDatePeriod

logger = logging.getLogger(__name__)


PeriodLike = Union[ScheduleDatePeriod, Mapping[str, str]]


class ScheduleParameterError(ValueError):
    """Недопустимые параметры цикла графика работы."""


@dataclass(frozen=True)
class WorkScheduleConfig:
    """Конфигурация генератора графика.

    - date_format: формат дат в результате
    - max_period_days: верхняя граница длины периода (None: без ограничения)
    """
    date_format: str = SCHEDULE_DATE_FORMAT
    max_period_days: Optional[int] = None


def _validate_count(name: str, value: int) -> None:
    # bool является подклассом int
    if isinstance(value, bool) or not isinstance(value, int):
        raise ScheduleParameterError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise ScheduleParameterError(f"{name} must be >= 1, got {value}")


class WorkScheduleGenerator:
    """Генератор графика работы.

    Usage:
        generator = WorkScheduleGenerator()
        generator.generate({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
        # ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """

    def __init__(self, config: Optional[WorkScheduleConfig] = None):
        """
        Args:
            config: конфигурация генератора (default: WorkScheduleConfig())
        """
        self.config = config or WorkScheduleConfig()

    def iter_work_days(
        self,
        period: PeriodLike,
        count_work_days: int,
        count_off_days: int,
    ) -> Iterator[date]:
        """Рабочие дни периода в порядке возрастания.

        Параметры проверяются сразу, при вызове, а не при первой итерации.

        Args:
            period: ScheduleDatePeriod или mapping {'start': 'DD-MM-YYYY', 'end': ...}
            count_work_days: число подряд идущих рабочих дней
            count_off_days: число подряд идущих выходных дней

        Returns:
            Итератор по datetime.date

        Raises:
            ScheduleParameterError: недопустимые счётчики или слишком длинный период
            pydantic.ValidationError: некорректный формат границ периода
        """
        if not isinstance(period, ScheduleDatePeriod):
            period = ScheduleDatePeriod.model_validate(period)

        _validate_count("count_work_days", count_work_days)
        _validate_count("count_off_days", count_off_days)

        length_days = period.length_days()

        if length_days < 0:
            logger.warning(
                "Period end %s is before start %s, schedule is empty", period.end, period.start
            )
            return iter(())

        max_period_days = self.config.max_period_days
        if max_period_days is not None and length_days > max_period_days:
            raise ScheduleParameterError(
                f"Period length {length_days} days exceeds max_period_days={max_period_days}"
            )

        return self._cycle(period.start_date, length_days, count_work_days, count_off_days)

    @staticmethod
    def _cycle(
        start: date, length_days: int, count_work_days: int, count_off_days: int
    ) -> Iterator[date]:
        offset = 0

        while offset <= length_days:
            for _ in range(count_work_days):
                yield start + timedelta(days=offset)

                offset += 1
                if offset > length_days:
                    break

            offset += count_off_days

    def generate(
        self,
        period: PeriodLike,
        count_work_days: int,
        count_off_days: int,
    ) -> List[str]:
        """График работы как список дат в формате config.date_format.

        Args:
            period: период графика (границы включительно)
            count_work_days: число подряд идущих рабочих дней
            count_off_days: число подряд идущих выходных дней

        Returns:
            Список строк дат ('DD-MM-YYYY' по умолчанию)
        """
        work_days = self.iter_work_days(period, count_work_days, count_off_days)
        schedule = [day.strftime(self.config.date_format) for day in work_days]

        logger.debug(
            "Work schedule %s/%s: %d work days", count_work_days, count_off_days, len(schedule)
        )
        return schedule


_DEFAULT_GENERATOR = WorkScheduleGenerator()


def get_work_schedule(
    period: PeriodLike, count_work_days: int, count_off_days: int
) -> List[str]:
    """График работы сотрудника в пределах периода.

    Examples:
        >>> get_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
        ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']
    """
    return _DEFAULT_GENERATOR.generate(period, count_work_days, count_off_days)


def get_work_schedule_from_request(data: Dict[str, Any]) -> List[str]:
    """График работы по JSON запросу (контракт work_schedule_request).

    Счётчики вида 1.0 проходят контракт ("integer" в JSON Schema) и
    приводятся к int.

    Raises:
        jsonschema.ValidationError: запрос не соответствует контракту
    """
    validate_work_schedule_request(data)

    return get_work_schedule(
        data["period"], int(data["count_work_days"]), int(data["count_off_days"])
    )
