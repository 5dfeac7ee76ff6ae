# roster/processing.py
"""Модуль для обработки данных: фильтры, статистика, пакетное добавление студентов."""
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from . import config
from .models import CourseStudent, create_student
from .errors import ValidationError

logger = logging.getLogger(__name__)

# Предикат получает только рассчитанную (конечную) итоговую оценку
MarkPredicate = Callable[[float], bool]


def above(threshold: float) -> MarkPredicate:
    """Предикат: итоговая оценка строго больше threshold."""
    return lambda mark: mark > threshold


def between(low: float, high: float) -> MarkPredicate:
    """Предикат: итоговая оценка в диапазоне [low, high] включительно."""
    return lambda mark: low <= mark <= high


def _computable_marks(students: Sequence[CourseStudent]) -> List[Tuple[CourseStudent, float]]:
    """Пары (студент, итоговая оценка) только для студентов с рассчитанной оценкой."""
    pairs = []
    for s in students:
        mark = s.try_final_mark()
        if mark is not None:
            pairs.append((s, mark))
    return pairs


def add_students(students: List[CourseStudent],
                 candidates: Iterable[Tuple[str, float, float]]) -> Optional[ValidationError]:
    """Добавляет студентов пакетом; останавливается на первой ошибке валидации и возвращает её."""
    added = 0
    for full_name, assignment_mark, exam_mark in candidates:
        result = create_student(full_name, assignment_mark, exam_mark)
        if not result.ok:
            # Оставшиеся кандидаты пакета не добавляются
            logger.info("Batch stopped after %d student(s): %s", added, result.error)
            return result.error
        students.append(result.value)
        added += 1
    logger.info("Batch added %d student(s).", added)
    return None


def filter_students(students: Sequence[CourseStudent], predicate: MarkPredicate) -> List[CourseStudent]:
    """Возвращает студентов, чья итоговая оценка удовлетворяет предикату, сохраняя порядок."""
    return [s for s, mark in _computable_marks(students) if predicate(mark)]


def count_students_above_average(students: Sequence[CourseStudent]) -> int:
    """Считает студентов, чья итоговая оценка строго выше средней по группе."""
    if not students:
        return 0

    pairs = _computable_marks(students)
    # Нет ни одной рассчитанной оценки - среднее не определено, выше него никто не может быть
    if not pairs:
        return 0

    average = sum(mark for _, mark in pairs) / len(pairs)
    count = sum(1 for _, mark in pairs if mark > average)
    logger.debug("Average final mark %.4f, %d student(s) above it.", average, count)
    return count


def count_students_below(students: Sequence[CourseStudent], threshold: float) -> int:
    """Считает студентов с итоговой оценкой строго ниже threshold."""
    return sum(1 for _, mark in _computable_marks(students) if mark < threshold)


def count_students_below_fifty(students: Sequence[CourseStudent]) -> int:
    """Считает студентов с итоговой оценкой ниже 50%."""
    return count_students_below(students, config.PASS_THRESHOLD)


def sort_students(students: Sequence[CourseStudent], by: str) -> List[CourseStudent]:
    """Сортирует список студентов по заданному критерию."""
    if by == 'name':
        return sorted(students, key=lambda s: s.full_name)
    elif by == 'final':
        # По убыванию итоговой оценки, затем по имени; нерассчитанные оценки в конце
        def key(s: CourseStudent):
            mark = s.try_final_mark()
            return (mark is None, -(mark or 0.0), s.full_name)
        return sorted(students, key=key)
    else:
        raise ValueError("Invalid sort key. Available: 'name', 'final'.")


def get_group_statistics(students: Sequence[CourseStudent]) -> Optional[Dict[str, Any]]:
    """Рассчитывает статистику по группе студентов."""
    if not students:
        return None

    pairs = _computable_marks(students)
    if pairs:
        average = sum(mark for _, mark in pairs) / len(pairs)
        best_student = max(pairs, key=lambda p: p[1])[0]
        worst_student = min(pairs, key=lambda p: p[1])[0]
    else:
        average = best_student = worst_student = None

    return {
        "total_students": len(students),
        "graded_students": len(pairs),
        "average_final_mark": average,
        "best_student": best_student,
        "worst_student": worst_student,
    }
