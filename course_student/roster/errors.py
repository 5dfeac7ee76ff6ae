# roster/errors.py
"""Модуль для определения пользовательских исключений приложения."""
from typing import Any, Optional

from . import config


class StudentAppError(Exception):
    """Базовый класс для всех исключений в этом приложении."""
    pass


class ValidationError(StudentAppError):
    """Некорректная оценка при создании студента (вне диапазона или не число)."""

    def __init__(self, field: str, value: Any, message: Optional[str] = None):
        self.field = field
        self.value = value
        if message is None:
            message = f"{field} must be between {config.MIN_MARK} and {config.MAX_MARK}, got {value!r}."
        super().__init__(message)


class CalculationError(StudentAppError):
    """Непредвиденный сбой при расчёте итоговой оценки.

    Исходное исключение хранится в ``cause`` (и в ``__cause__``) только для диагностики.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause
