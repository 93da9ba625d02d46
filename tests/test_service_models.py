from datetime import datetime

import pytest

from netlab.service_errors import InvalidInput
from netlab.service_models import (
    Course,
    CreateCourse,
    CreateTeacher,
    Teacher,
    UpdateCourse,
    UpdateTeacher,
)


def _course_row(**overrides):
    row = {
        "id": 1,
        "teacher_id": 1,
        "name": "Test course",
        "time": "2024-03-01T10:30:00",
        "description": "This is a course",
        "format": None,
        "structure": None,
        "duration": None,
        "price": None,
        "language": "English",
        "level": "Beginner",
    }
    row.update(overrides)
    return row


def test_create_course_from_dict_with_optionals_missing():
    course = CreateCourse.from_dict(
        {
            "teacher_id": 1,
            "name": "Test course",
            "description": "This is a course",
            "language": "English",
            "level": "Beginner",
        }
    )
    assert course == CreateCourse(
        teacher_id=1,
        name="Test course",
        description="This is a course",
        language="English",
        level="Beginner",
    )
    assert course.price is None and course.format is None


@pytest.mark.parametrize(
    "data",
    [
        {"name": "Test course"},
        {"teacher_id": 1},
        {"teacher_id": "1", "name": "Test course"},
        {"teacher_id": True, "name": "Test course"},
        {"teacher_id": 1, "name": "Test course", "price": "free"},
        {"teacher_id": 2**31, "name": "Test course"},
        {"teacher_id": 1, "name": None},
        ["teacher_id", 1],
    ],
)
def test_create_course_rejects_bad_input(data):
    with pytest.raises(InvalidInput):
        CreateCourse.from_dict(data)


def test_update_course_empty_means_no_changes():
    assert UpdateCourse.from_dict({}) == UpdateCourse()


def test_update_course_reads_fields():
    update = UpdateCourse.from_dict({"name": "Renamed", "price": 300})
    assert update.name == "Renamed"
    assert update.price == 300
    assert update.level is None


def test_update_course_rejects_wrong_type():
    with pytest.raises(InvalidInput):
        UpdateCourse.from_dict({"price": "300"})


def test_course_from_row_parses_time():
    course = Course.from_row(_course_row())
    assert course.time == datetime.fromisoformat("2024-03-01T10:30:00")
    assert course.language == "English"


def test_course_to_dict_round_trips_through_row():
    course = Course.from_row(_course_row())
    assert Course.from_row(course.to_dict()) == course
    assert course.to_dict()["time"] == "2024-03-01T10:30:00"


def test_course_without_time():
    course = Course.from_row(_course_row(time=None))
    assert course.time is None
    assert course.to_dict()["time"] is None


def test_teacher_to_dict():
    teacher = Teacher(id=2, name="Third Teacher", picture_url="https://phy.xyz", profile=None)
    assert teacher.to_dict() == {
        "id": 2,
        "name": "Third Teacher",
        "picture_url": "https://phy.xyz",
        "profile": None,
    }


def test_create_teacher_from_dict():
    teacher = CreateTeacher.from_dict(
        {"name": "Third Teacher", "picture_url": "https://phy.xyz", "profile": "This is a test profile"}
    )
    assert teacher.profile == "This is a test profile"
    assert teacher.name == "Third Teacher"


def test_create_teacher_requires_all_fields():
    with pytest.raises(InvalidInput):
        CreateTeacher.from_dict({"name": "Third Teacher", "picture_url": "https://phy.xyz"})


def test_update_teacher_optional_fields():
    update = UpdateTeacher.from_dict({"profile": "New profile"})
    assert update == UpdateTeacher(profile="New profile")


def test_update_teacher_rejects_non_string():
    with pytest.raises(InvalidInput):
        UpdateTeacher.from_dict({"name": 5})