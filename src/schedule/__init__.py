"""Schedule: генерация графиков работы.

- Цикл "N рабочих / M выходных" начиная с первого дня периода
- Границы периода включительно, формат дат DD-MM-YYYY
"""

from .work_schedule import (
    ScheduleParameterError,
    WorkScheduleConfig,
    WorkScheduleGenerator,
    get_work_schedule,
    get_work_schedule_from_request,
)

__all__ = [
    "ScheduleParameterError",
    "WorkScheduleConfig",
    "WorkScheduleGenerator",
    "get_work_schedule",
    "get_work_schedule_from_request",
]
