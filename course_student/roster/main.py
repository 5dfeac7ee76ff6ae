# roster/main.py
"""Главный модуль: собирает список студентов и выводит отчёт в консоль."""
import logging
import sys
import traceback
from typing import Iterable, List, Optional, Sequence, Tuple

from . import config, errors, processing
from .models import CourseStudent

logger = logging.getLogger(__name__)

SAMPLE_STUDENTS: List[Tuple[str, float, float]] = [
    ("Alice Smith", 85.0, 90.0),
    ("Bob Johnson", 70.0, 65.0),
    ("Charlie Brown", 92.5, 88.0),
    ("Diana Prince", 45.0, 52.0),
    ("Eve Adams", 78.0, 82.0),
    # Дополнительный студент, чтобы проверить подсчёт "ниже 50%"
    ("Frank Miller", 30.0, 40.0),
]


def build_roster(candidates: Iterable[Tuple[str, float, float]]) -> List[CourseStudent]:
    """Создаёт список студентов; при ошибке валидации печатает её и возвращает добавленных до неё."""
    students: List[CourseStudent] = []
    error = processing.add_students(students, candidates)
    if error is not None:
        print(f"Error creating student: {error}")
    return students


def print_section(title: str, students: Sequence[CourseStudent]):
    """Печатает заголовок раздела и студентов по одному в строке."""
    print(f"--- {title} ---")
    for s in students:
        print(s.render())
    print()


def print_report(students: Sequence[CourseStudent]):
    """Выводит полный отчёт по группе."""
    print_section("All Student Details", students)

    print_section(
        f"Students with Final Mark Above {config.HIGH_ACHIEVER_THRESHOLD}%",
        processing.filter_students(students, processing.above(config.HIGH_ACHIEVER_THRESHOLD)),
    )

    print("--- Static Method Usage ---")
    print(f"Number of students above average: {processing.count_students_above_average(students)}")
    print(f"Number of students below 50%: {processing.count_students_below_fifty(students)}")
    print()

    low, high = config.MID_BAND
    print_section(
        f"Delegate Usage: Students with Final Mark between {low}% and {high}%",
        processing.filter_students(students, processing.between(low, high)),
    )

    stats = processing.get_group_statistics(students)
    print("--- Group Statistics ---")
    if not stats:
        print("The student list is empty, statistics are unavailable.")
    else:
        print(f"Total students: {stats['total_students']}")
        print(f"Students with a final mark: {stats['graded_students']}")
        if stats['average_final_mark'] is not None:
            print(f"Average final mark: {stats['average_final_mark']:.2f}")
            print(f"Best student: {stats['best_student'].full_name}")
            print(f"Worst student: {stats['worst_student'].full_name}")
    print()


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа: строит отчёт по встроенному списку студентов."""
    if argv is None:
        argv = sys.argv[1:]
    wait = '--no-wait' not in argv

    try:
        logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
        students = build_roster(SAMPLE_STUDENTS)
        print_report(students)
    except KeyboardInterrupt:
        print("\nProgram interrupted.")
    except errors.StudentAppError as e:
        print(f"Logic error: {e}")
    except Exception:
        print("\n!!! UNEXPECTED ERROR !!!")
        traceback.print_exc()
    finally:
        print("Press any key to exit.")
        if wait:
            try:
                input()
            except EOFError:
                # stdin закрыт (запуск в конвейере) - ждать нечего
                pass
    return 0


if __name__ == '__main__':
    sys.exit(main())
