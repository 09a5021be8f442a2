"""Lessons: the common base, individual lessons and group courses."""

from __future__ import annotations

from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tutoring.client import Client
    from tutoring.teacher import Teacher

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_time(moment: datetime) -> str:
    """Format a moment as 'YYYY-Mon-DD HH:MM:SS[.ffffff]'."""
    text = (
        f"{moment.year:04d}-{_MONTHS[moment.month - 1]}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += f".{moment.microsecond:06d}"
    return text


def _fixed(value: float) -> str:
    return f"{value:.6f}"


class Lesson:
    """A lesson of a given length, held by a teacher for a client."""

    def __init__(
        self,
        lesson_id: int,
        begin: datetime,
        duration: float,
        subject: str,
        client: Client | None,
        teacher: Teacher | None,
    ) -> None:
        self.lesson_id = lesson_id
        self._begin = begin
        self._duration = duration
        self._subject = subject
        self.client = client
        self.teacher = teacher

    @property
    def begin(self) -> datetime:
        return self._begin

    @begin.setter
    def begin(self, value: datetime) -> None:
        # A lesson may only be moved to more than an hour later.
        if value > self._begin + timedelta(hours=1):
            self._begin = value

    @property
    def duration(self) -> float:
        """Length of the lesson in hours."""
        return self._duration

    @duration.setter
    def duration(self, value: float) -> None:
        if value >= 0.5:
            self._duration = value

    @property
    def subject(self) -> str:
        return self._subject

    @subject.setter
    def subject(self, value: str) -> None:
        if value:
            self._subject = value

    def describe(self) -> str:
        info = f"Lesson ID: {self.lesson_id}\n"
        if self.client is not None and self.teacher is not None:
            info += (
                f"Begin time: {format_time(self._begin)}"
                f", duration: {_fixed(self._duration)} hours"
                f", subject: {self._subject}"
                f", client: {self.client.first_name}"
                f", teacher: {self.teacher.first_name}"
            )
        return info

    def _adjusted_base_price(self) -> float:
        price = self.teacher.base_price * self._duration
        price = self.client.apply_discount(price)
        if self.client.extension_level:
            price *= 1.25
        return price

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(lesson_id={self.lesson_id!r}, begin={self._begin!r}, "
            f"duration={self._duration!r}, subject={self._subject!r})"
        )


class Individual(Lesson):
    """A one-to-one lesson."""

    def __init__(
        self,
        lesson_id: int,
        begin: datetime,
        duration: float,
        subject: str,
        client: Client | None,
        teacher: Teacher | None,
        first_lesson: bool,
        at_client_home: bool,
    ) -> None:
        super().__init__(lesson_id, begin, duration, subject, client, teacher)
        self.first_lesson = first_lesson
        self.at_client_home = at_client_home

    @property
    def lesson_price(self) -> float:
        price = self._adjusted_base_price()
        if self.at_client_home:
            price *= 1.1
        if self.first_lesson:
            price *= 0.5
        return price

    def describe(self) -> str:
        return (
            super().describe()
            + "Type: Individual\n"
            + f"First lesson: {'Yes' if self.first_lesson else 'No'}\n"
            + f"At client's home: {'Yes' if self.at_client_home else 'No'}\n"
            + f"Lesson price: {_fixed(self.lesson_price)}"
        )


class AmountOfMembers(Enum):
    """Size of a group course."""

    TWO = 2
    THREE = 3
    FOUR = 4

    def __str__(self) -> str:
        return str(self.value)


_GROUP_FACTORS = {
    AmountOfMembers.TWO: 0.8,
    AmountOfMembers.THREE: 0.7,
    AmountOfMembers.FOUR: 0.6,
}


class GroupCourse(Lesson):
    """A lesson shared by a small group; larger groups pay less each."""

    def __init__(
        self,
        lesson_id: int,
        begin: datetime,
        duration: float,
        subject: str,
        client: Client | None,
        teacher: Teacher | None,
        amount_of_members: AmountOfMembers,
    ) -> None:
        super().__init__(lesson_id, begin, duration, subject, client, teacher)
        self.amount_of_members = amount_of_members

    @property
    def lesson_price(self) -> float:
        return self._adjusted_base_price() * _GROUP_FACTORS.get(self.amount_of_members, 1.0)

    def describe(self) -> str:
        return (
            super().describe()
            + ", type: group course"
            + f"Lesson price: {_fixed(self.lesson_price)}"
        )