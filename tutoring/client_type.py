"""Kinds of pupils and the price adjustment each one receives."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ClientType(ABC):
    """The school level of a pupil, which decides the price adjustment."""

    @abstractmethod
    def apply_discount(self, price: float) -> float:
        """Return the price after this type's adjustment."""

    @abstractmethod
    def describe(self) -> str:
        """Return a human-readable name of the type."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PrimarySchool(ClientType):
    """Primary school pupils pay 25% less."""

    def apply_discount(self, price: float) -> float:
        return price * 0.75

    def describe(self) -> str:
        return "Primary School"


class SecondarySchool(ClientType):
    """Secondary school pupils pay the base price."""

    def apply_discount(self, price: float) -> float:
        return price

    def describe(self) -> str:
        return "Secondary School"


class Student(ClientType):
    """University students pay 50% more."""

    def apply_discount(self, price: float) -> float:
        return price * 1.5

    def describe(self) -> str:
        return "Student"