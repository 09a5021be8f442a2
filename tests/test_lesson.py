from datetime import datetime, timedelta

import pytest

from tutoring.client import Client
from tutoring.client_type import PrimarySchool, SecondarySchool
from tutoring.lesson import AmountOfMembers, GroupCourse, Individual, Lesson, format_time
from tutoring.teacher import Teacher


@pytest.fixture
def begin():
    return datetime.now().replace(microsecond=0) + timedelta(hours=2)


@pytest.fixture
def lesson(begin):
    return Lesson(1, begin, 1, "Math", None, None)


def test_constructor():
    t = datetime(2024, 6, 26, 14, 20)
    lesson = Lesson(1, t, 1, "Math", None, None)
    assert lesson.lesson_id == 1
    assert lesson.begin == t
    assert lesson.duration == 1
    assert lesson.subject == "Math"


def test_set_begin_good_value(lesson, begin):
    new_begin = begin + timedelta(hours=3)
    lesson.begin = new_begin
    assert lesson.begin == new_begin


def test_set_begin_bad_value(lesson, begin):
    lesson.begin = begin - timedelta(hours=2)
    assert lesson.begin == begin


def test_set_begin_exactly_one_hour_later_is_ignored(lesson, begin):
    lesson.begin = begin + timedelta(hours=1)
    assert lesson.begin == begin


def test_set_duration_new_value(lesson):
    lesson.duration = 2
    assert lesson.duration == 2


def test_set_duration_bad_value(lesson):
    lesson.duration = 0.3
    assert lesson.duration == 1


def test_set_subject_new_value(lesson):
    lesson.subject = "Physic"
    assert lesson.subject == "Physic"


def test_set_subject_empty_string(lesson):
    previous = lesson.subject
    lesson.subject = ""
    assert lesson.subject == previous


def test_primary_school_individual_lessons(begin):
    client = Client("Jan", 1, 6, PrimarySchool())
    teacher = Teacher("Artur", 80, 1)
    individual1 = Individual(1, begin, 1, "Math", client, teacher, False, False)
    individual2 = Individual(2, begin, 1, "Math", client, teacher, True, False)
    individual3 = Individual(3, begin, 1, "Math", client, teacher, True, True)
    individual4 = Individual(4, begin, 1, "Math", client, teacher, False, True)
    assert individual1.lesson_price == pytest.approx(60)
    assert individual2.lesson_price == pytest.approx(30)
    assert individual3.lesson_price == pytest.approx(33)
    assert individual4.lesson_price == pytest.approx(66)


def test_primary_school_group_course_lesson(begin):
    client = Client("Jan", 1, 6, PrimarySchool())
    teacher = Teacher("Artur", 80, 1)
    course1 = GroupCourse(1, begin, 1, "Math", client, teacher, AmountOfMembers.TWO)
    course2 = GroupCourse(2, begin, 1, "Math", client, teacher, AmountOfMembers.THREE)
    course3 = GroupCourse(3, begin, 1, "Math", client, teacher, AmountOfMembers.FOUR)
    assert course1.lesson_price == pytest.approx(48)
    assert course2.lesson_price == pytest.approx(42)
    assert course3.lesson_price == pytest.approx(36)


def test_secondary_school_group_course_lesson(begin):
    client1 = Client("Jan", 1, 3, SecondarySchool())
    client2 = Client("Jan", 2, 3, SecondarySchool(), True)
    teacher = Teacher("Artur", 80, 1)
    course1 = GroupCourse(1, begin, 1, "Math", client1, teacher, AmountOfMembers.TWO)
    course2 = GroupCourse(2, begin, 1, "Math", client2, teacher, AmountOfMembers.TWO)
    assert course1.lesson_price == pytest.approx(64)
    assert course2.lesson_price == pytest.approx(80)


@pytest.mark.parametrize(
    "amount, text",
    [(AmountOfMembers.TWO, "2"), (AmountOfMembers.THREE, "3"), (AmountOfMembers.FOUR, "4")],
)
def test_amount_of_members_str(amount, text):
    assert str(amount) == text


def test_format_time():
    assert format_time(datetime(2024, 6, 26, 14, 20)) == "2024-Jun-26 14:20:00"


def test_format_time_with_fraction():
    assert format_time(datetime(2024, 6, 26, 14, 20, 5, 250000)) == "2024-Jun-26 14:20:05.250000"


def test_describe_without_participants(lesson):
    assert lesson.describe() == "Lesson ID: 1\n"


def test_describe_with_participants():
    client = Client("Jan", 1, 3, SecondarySchool())
    teacher = Teacher("Artur", 60, 1)
    lesson = Lesson(1, datetime(2024, 6, 26, 14, 20), 1, "Math", client, teacher)
    assert lesson.describe() == (
        "Lesson ID: 1\nBegin time: 2024-Jun-26 14:20:00, duration: 1.000000 hours, "
        "subject: Math, client: Jan, teacher: Artur"
    )


def test_individual_describe():
    client = Client("Jan", 1, 6, PrimarySchool())
    teacher = Teacher("Artur", 80, 1)
    t = datetime(2024, 6, 26, 14, 20)
    individual = Individual(1, t, 1, "Math", client, teacher, True, False)
    assert individual.describe() == (
        Lesson(1, t, 1, "Math", client, teacher).describe()
        + "Type: Individual\nFirst lesson: Yes\nAt client's home: No\n"
        + "Lesson price: 30.000000"
    )


def test_group_course_describe():
    client = Client("Jan", 1, 6, PrimarySchool())
    teacher = Teacher("Artur", 80, 1)
    t = datetime(2024, 6, 26, 14, 20)
    course = GroupCourse(1, t, 1, "Math", client, teacher, AmountOfMembers.TWO)
    assert course.describe() == (
        Lesson(1, t, 1, "Math", client, teacher).describe()
        + ", type: group courseLesson price: 48.000000"
    )


def test_individual_flags_change_price(begin):
    client = Client("Jan", 1, 3, SecondarySchool())
    teacher = Teacher("Artur", 80, 1)
    individual = Individual(1, begin, 1, "Math", client, teacher, False, False)
    regular = individual.lesson_price
    individual.first_lesson = True
    assert individual.lesson_price == pytest.approx(regular * 0.5)