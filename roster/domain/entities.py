"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass, replace
from datetime import date
from typing import Any

from .constants import CLASS_LABEL, REQUIRED_TEXT_FIELDS, UNKNOWN_BREED
from .exceptions import InvalidFieldError


def validate_required_text(value: Any, field: str) -> None:
    """Validate a required text field.

    Only the literal empty string (or a missing value) is rejected. Values are
    not trimmed, so whitespace-only text passes.

    Args:
        value: The value about to be stored
        field: Name of the field being written (for the error)

    Raises:
        InvalidFieldError: If value is None, not a string, or empty
    """
    if value is None or not isinstance(value, str) or value == "":
        raise InvalidFieldError(field, value)


@dataclass
class Student:
    """Core business entity representing a student of a class.

    ``name`` and ``surname`` are checked on every assignment, including the
    ones made by ``__init__``, so an instance with an empty name or surname
    can never be observed.
    """

    name: str
    surname: str
    group: str
    track: str
    date_of_birth: date

    def __setattr__(self, key: str, value: Any) -> None:
        if key in REQUIRED_TEXT_FIELDS:
            validate_required_text(value, key)
        super().__setattr__(key, value)

    @classmethod
    def enroll(
        cls,
        name: str,
        surname: str,
        group: str = "",
        track: str = "",
        date_of_birth: date | None = None,
    ) -> "Student":
        """Create a student, filling in defaults for the optional fields."""
        return cls(
            name=name,
            surname=surname,
            group=group,
            track=track,
            date_of_birth=date_of_birth or date.today(),
        )

    def set_name(self, value: str) -> None:
        """Replace the name, leaving it untouched if value is invalid."""
        self.name = value

    def set_surname(self, value: str) -> None:
        """Replace the surname, leaving it untouched if value is invalid."""
        self.surname = value

    def format(self) -> str:
        """Render the canonical display string of the student."""
        return (
            f"{self.name} {self.surname} ({self.date_of_birth}), "
            f"{CLASS_LABEL} {self.group}{self.track}"
        )

    def __str__(self) -> str:
        return self.format()


class Animal:
    """An animal whose missing values are normalized instead of rejected."""

    def __init__(self, kind: str, breed: str) -> None:
        self.kind = kind
        self.breed = breed or UNKNOWN_BREED
        self._age = 0

    @classmethod
    def with_age(cls, kind: str, breed: str, age: int) -> "Animal":
        animal = cls(kind, breed)
        animal._set_age(age)
        return animal

    @classmethod
    def of_kind(cls, kind: str) -> "Animal":
        return cls(kind, "")

    @property
    def age(self) -> int:
        return self._age

    def _set_age(self, value: int) -> None:
        # Non-positive ages are stored as 0
        self._age = value if value > 0 else 0

    def __repr__(self) -> str:
        return f"Animal(kind={self.kind!r}, breed={self.breed!r}, age={self._age})"


@dataclass(frozen=True)
class Person:
    """A person whose attributes cannot change after creation."""

    given_name: str
    family_name: str
    date_of_birth: date


@dataclass(frozen=True)
class User:
    """Immutable value record holding a user's name and age."""

    name: str
    age: int

    def copy(self, **changes: Any) -> "User":
        """Return a new user with the given fields replaced."""
        return replace(self, **changes)
