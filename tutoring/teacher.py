"""Teachers who give lessons."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tutoring.lesson import Lesson


class Teacher:
    """A teacher with an hourly base price and a list of planned lessons."""

    def __init__(self, first_name: str, base_price: int, teacher_id: int) -> None:
        self._first_name = first_name
        self._base_price = base_price
        self.teacher_id = teacher_id
        self._planned_lessons: list[Lesson] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        if value:
            self._first_name = value

    @property
    def base_price(self) -> int:
        """Price of one hour of lessons."""
        return self._base_price

    @base_price.setter
    def base_price(self, value: int) -> None:
        if value > 0:
            self._base_price = value

    @property
    def planned_lessons(self) -> list[Lesson]:
        """A copy of the teacher's planned lessons."""
        return list(self._planned_lessons)

    def describe(self) -> str:
        return (
            f"  First name: {self._first_name}  Base price per hour: {self._base_price}"
            f" Teacher ID: {self.teacher_id}"
        )

    def add_lesson(self, lesson: Lesson) -> None:
        self._planned_lessons.append(lesson)

    def remove_planned_lesson(self, lesson: Lesson) -> None:
        """Remove every occurrence of the given lesson object."""
        self._planned_lessons = [item for item in self._planned_lessons if item is not lesson]

    def __repr__(self) -> str:
        return (
            f"Teacher(first_name={self._first_name!r}, base_price={self._base_price!r}, "
            f"teacher_id={self.teacher_id!r})"
        )