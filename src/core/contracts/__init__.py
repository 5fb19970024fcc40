"""
Contract Validation Module

Модуль для валидации JSON контрактов входных данных (запрос графика работы).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    WorkScheduleRequestValidator,
    validate_work_schedule_request,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "WorkScheduleRequestValidator",
    # Functions
    "validate_work_schedule_request",
]
