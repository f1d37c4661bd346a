"""Domain-specific exceptions."""

from typing import Any


class DomainError(Exception):
    """Base exception for domain errors."""

    pass


class InvalidFieldError(DomainError):
    """Raised when a required text field would become empty."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"invalid {field}: {value}")


class UnknownFieldError(DomainError):
    """Raised when an update names a field the record does not have."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"unknown field: {field}")
