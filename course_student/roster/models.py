# roster/models.py
"""Модуль, определяющий основные модели данных: CourseStudent и Result."""
import logging
import math
from numbers import Real
from typing import Any, NamedTuple, Optional

from . import config
from .errors import CalculationError, ValidationError

logger = logging.getLogger(__name__)


def _validate_mark(field: str, value: Any) -> float:
    """Проверяет, что оценка - число в диапазоне 0-100, и возвращает её как float."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(field, value, f"{field} must be a number, got {value!r}.")
    # NaN не проходит ни одно сравнение, поэтому тоже отсекается здесь
    if not config.MIN_MARK <= value <= config.MAX_MARK:
        raise ValidationError(field, value)
    return float(value)


def _format_mark(value: Any) -> str:
    """Оценка с двумя знаками; значение, не являющееся числом, выводится как nan."""
    if isinstance(value, bool) or not isinstance(value, Real):
        value = math.nan
    return f"{value:.2f}"


class CourseStudent:
    """Представляет студента курса с оценкой за задание и за экзамен."""
    def __init__(self, full_name: str, assignment_mark: float, exam_mark: float):
        # Сначала проверяем обе оценки, объект создаётся целиком или не создаётся вовсе
        assignment_mark = _validate_mark("assignment_mark", assignment_mark)
        exam_mark = _validate_mark("exam_mark", exam_mark)

        self.full_name = full_name
        self.assignment_mark = assignment_mark
        self.exam_mark = exam_mark

    def final_mark(self) -> float:
        """Рассчитывает итоговую оценку: 40% задание + 60% экзамен."""
        try:
            result = (self.assignment_mark * config.ASSIGNMENT_WEIGHT
                      + self.exam_mark * config.EXAM_WEIGHT)
        except (TypeError, ArithmeticError) as e:
            raise CalculationError(
                "Failed to calculate final mark. An unexpected error occurred.", e
            ) from e
        if not math.isfinite(result):
            raise CalculationError(f"Final mark for {self.full_name!r} is not finite: {result}.")
        return result

    def try_final_mark(self) -> Optional[float]:
        """Возвращает итоговую оценку или None, если её невозможно рассчитать."""
        try:
            return self.final_mark()
        except CalculationError as e:
            logger.warning("Final mark unavailable for %r: %s", self.full_name, e)
            return None

    def render(self) -> str:
        """Строка для отчёта; при сбое расчёта итоговая оценка выводится как nan."""
        final = self.try_final_mark()
        if final is None:
            final = math.nan
        return (f"Full Name: {self.full_name}, "
                f"Assignment Mark: {_format_mark(self.assignment_mark)}, "
                f"Exam Mark: {_format_mark(self.exam_mark)}, "
                f"Final Mark: {_format_mark(final)}")

    def __repr__(self) -> str:
        """Возвращает строковое представление объекта для отладки."""
        return (f"CourseStudent(full_name='{self.full_name}', "
                f"assignment_mark={self.assignment_mark}, exam_mark={self.exam_mark})")

    def __str__(self) -> str:
        return self.render()


class Result(NamedTuple):
    """Результат создания студента: либо value, либо error."""
    value: Optional[CourseStudent] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def create_student(full_name: str, assignment_mark: float, exam_mark: float) -> Result:
    """Создаёт студента, возвращая ошибку валидации как значение, а не исключение."""
    try:
        return Result(value=CourseStudent(full_name, assignment_mark, exam_mark))
    except ValidationError as e:
        logger.warning("Rejected student %r: %s", full_name, e)
        return Result(error=e)
