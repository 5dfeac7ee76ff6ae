# tests/conftest.py
import pytest
from typing import List
from roster.models import CourseStudent

@pytest.fixture
def sample_students() -> List[CourseStudent]:
    """Фикстура с шестью студентами: итоговые оценки 88.0, 67.0, 90.2, 49.2, 80.4, 36.0."""
    return [
        CourseStudent("Alice Smith", 85.0, 90.0),
        CourseStudent("Bob Johnson", 70.0, 65.0),
        CourseStudent("Charlie Brown", 92.5, 88.0),
        CourseStudent("Diana Prince", 45.0, 52.0),
        CourseStudent("Eve Adams", 78.0, 82.0),
        CourseStudent("Frank Miller", 30.0, 40.0),
    ]

@pytest.fixture
def broken_student() -> CourseStudent:
    """Студент, у которого оценка испорчена после создания, в обход валидации."""
    s = CourseStudent("Broken Record", 50.0, 50.0)
    s.exam_mark = float("nan")
    return s
