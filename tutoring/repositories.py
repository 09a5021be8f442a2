"""In-memory repositories of clients, teachers and lessons."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, Protocol, TypeVar

from tutoring.client import Client
from tutoring.lesson import Lesson
from tutoring.teacher import Teacher


class _Describable(Protocol):
    def describe(self) -> str: ...


T = TypeVar("T", bound=_Describable)


class Repository(Generic[T]):
    """An ordered collection of objects, kept in insertion order."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def get(self, index: int) -> T | None:
        """Return the item at the given position, or None if there is none."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def add(self, item: T | None) -> None:
        """Append an item; None is ignored."""
        if item is not None:
            self._items.append(item)

    def remove(self, item: T | None) -> None:
        """Remove every occurrence of the given object; None is ignored."""
        if item is not None:
            self._items = [stored for stored in self._items if stored is not item]

    def report(self) -> str:
        """Return the descriptions of all items, one per line."""
        return "".join(f"{item.describe()}\n" for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def find_by(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return the items for which the predicate holds, in order."""
        return [item for item in self._items if item is not None and predicate(item)]

    def find_all(self) -> list[T]:
        """Return a copy of all items."""
        return list(self._items)


class ClientRepository(Repository[Client]):
    """Repository of clients."""


class TeacherRepository(Repository[Teacher]):
    """Repository of teachers."""


class LessonRepository(Repository[Lesson]):
    """Repository of lessons."""