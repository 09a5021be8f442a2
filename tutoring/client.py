"""Pupils who book lessons."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tutoring.client_type import ClientType

if TYPE_CHECKING:
    from tutoring.lesson import Lesson


class Client:
    """A pupil with a school level and a list of planned lessons."""

    def __init__(
        self,
        first_name: str,
        client_id: int,
        school_class: int,
        client_type: ClientType,
        extension_level: bool = False,
    ) -> None:
        self._first_name = first_name
        self.client_id = client_id
        self.school_class = school_class
        self._client_type = client_type
        self.extension_level = extension_level
        self._planned_lessons: list[Lesson] = []

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        if value:
            self._first_name = value

    @property
    def client_type(self) -> ClientType:
        return self._client_type

    @client_type.setter
    def client_type(self, value: ClientType | None) -> None:
        if value is not None:
            self._client_type = value

    @property
    def planned_lessons(self) -> list[Lesson]:
        """A copy of the client's planned lessons."""
        return list(self._planned_lessons)

    def describe(self) -> str:
        """Return a multi-line description of the client and their lessons."""
        info = (
            f"\nClient:\n First name: {self._first_name}, client ID: {self.client_id}, "
            f"school class: {self.school_class}, client type: {self._client_type.describe()}"
        )
        if self._planned_lessons:
            info += "\nthis client's planned lessons:\n"
            info += "".join(f"{lesson.describe()}\n" for lesson in self._planned_lessons)
        else:
            info += "\nNo planned lessons."
        return info

    def add_lesson(self, lesson: Lesson) -> None:
        self._planned_lessons.append(lesson)

    def remove_planned_lesson(self, lesson: Lesson) -> None:
        """Remove every occurrence of the given lesson object."""
        self._planned_lessons = [item for item in self._planned_lessons if item is not lesson]

    def apply_discount(self, price: float) -> float:
        """Adjust the price according to the client's type."""
        return self._client_type.apply_discount(price)

    def __repr__(self) -> str:
        return (
            f"Client(first_name={self._first_name!r}, client_id={self.client_id!r}, "
            f"school_class={self.school_class!r}, client_type={self._client_type!r}, "
            f"extension_level={self.extension_level!r})"
        )