# tests/test_processing.py
import pytest
from roster.models import CourseStudent
from roster.errors import ValidationError
from roster.processing import (
    above, between, add_students, filter_students, count_students_above_average,
    count_students_below, count_students_below_fifty, sort_students, get_group_statistics,
)

def names(students):
    return [s.full_name for s in students]

def test_filter_above_80(sample_students):
    result = filter_students(sample_students, above(80))
    assert names(result) == ["Alice Smith", "Charlie Brown", "Eve Adams"]

def test_filter_between_60_and_70(sample_students):
    result = filter_students(sample_students, between(60, 70))
    assert names(result) == ["Bob Johnson"]

def test_between_is_inclusive():
    students = [CourseStudent("Low", 60, 60), CourseStudent("High", 70, 70), CourseStudent("Out", 70.1, 70.1)]
    assert names(filter_students(students, between(60, 70))) == ["Low", "High"]

def test_filter_does_not_mutate(sample_students):
    before = list(sample_students)
    filter_students(sample_students, above(80))
    assert sample_students == before

def test_count_above_average(sample_students):
    # Среднее 68.4666..., выше него 88.0, 90.2, 80.4
    assert count_students_above_average(sample_students) == 3

def test_count_below_fifty(sample_students):
    assert count_students_below_fifty(sample_students) == 2
    assert count_students_below_fifty([CourseStudent("D", 45, 52), CourseStudent("F", 30, 40)]) == 2

def test_count_below_is_strict():
    assert count_students_below([CourseStudent("Exactly", 50, 50)], 50.0) == 0

def test_empty_roster():
    assert count_students_above_average([]) == 0
    assert count_students_below_fifty([]) == 0
    assert filter_students([], above(0)) == []
    assert get_group_statistics([]) is None

def test_non_computable_marks_are_excluded(broken_student):
    roster = [broken_student]
    assert count_students_above_average(roster) == 0
    assert count_students_below_fifty(roster) == 0
    assert filter_students(roster, above(-1)) == []
    assert filter_students(roster, lambda mark: mark < 1000) == []

def test_non_computable_ignored_in_average(sample_students, broken_student):
    roster = sample_students + [broken_student]
    assert count_students_above_average(roster) == 3
    assert count_students_below_fifty(roster) == 2

def test_add_students_stops_at_first_failure():
    students = []
    error = add_students(students, [
        ("Alice Smith", 85.0, 90.0),
        ("Bad Marks", 150.0, 50.0),
        ("Never Added", 70.0, 70.0),
    ])
    assert isinstance(error, ValidationError)
    assert error.field == "assignment_mark"
    assert names(students) == ["Alice Smith"]

def test_add_students_all_valid():
    students = []
    assert add_students(students, [("A", 1, 2), ("B", 3, 4)]) is None
    assert names(students) == ["A", "B"]

def test_sort_students_by_name(sample_students):
    assert names(sort_students(sample_students, 'name'))[0] == "Alice Smith"

def test_sort_students_by_final(sample_students, broken_student):
    result = sort_students([broken_student] + sample_students, 'final')
    assert names(result) == ["Charlie Brown", "Alice Smith", "Eve Adams", "Bob Johnson",
                             "Diana Prince", "Frank Miller", "Broken Record"]

def test_sort_students_bad_key(sample_students):
    with pytest.raises(ValueError):
        sort_students(sample_students, 'id')

def test_get_group_statistics(sample_students):
    stats = get_group_statistics(sample_students)
    assert stats["total_students"] == 6
    assert stats["graded_students"] == 6
    assert stats["best_student"].full_name == "Charlie Brown"
    assert stats["worst_student"].full_name == "Frank Miller"
    assert stats["average_final_mark"] == pytest.approx(68.4667, abs=0.001)

def test_get_group_statistics_without_marks(broken_student):
    stats = get_group_statistics([broken_student])
    assert stats["total_students"] == 1
    assert stats["graded_students"] == 0
    assert stats["average_final_mark"] is None
    assert stats["best_student"] is None
