from dataclasses import fields
from datetime import date
from typing import Any, Final

from ..domain.constants import REQUIRED_TEXT_FIELDS
from ..domain.entities import Student
from ..domain.exceptions import InvalidFieldError, UnknownFieldError
from ..logging_config import get_logger
from ..logging_utils import log_record_change, log_validation_error
from .validation import validate_required_text_with_logging

logger: Final = get_logger(__name__)

STUDENT_FIELDS: Final = tuple(f.name for f in fields(Student))


def create_student(
    name: str,
    surname: str,
    group: str = "",
    track: str = "",
    date_of_birth: date | None = None,
) -> Student:
    """Create a student, logging the rejected field if validation fails.

    Raises:
        InvalidFieldError: If name or surname is empty
    """
    try:
        student = Student.enroll(
            name=name,
            surname=surname,
            group=group,
            track=track,
            date_of_birth=date_of_birth,
        )
    except InvalidFieldError as e:
        logger.warning(
            "Student creation failed",
            field=e.field,
            attempted_value=repr(e.value),
        )
        log_validation_error(e.field, e.value, str(e))
        raise

    return student


def update_student(student: Student, **changes: Any) -> list[str]:
    """Apply several field changes to a student as one update.

    Every validated field is checked before anything is written, so an
    invalid value leaves the whole record as it was.

    Args:
        student: The student to modify
        **changes: New values keyed by field name

    Returns:
        Names of the fields whose value actually changed, in field order

    Raises:
        UnknownFieldError: If a change names a field Student does not have
        InvalidFieldError: If name or surname would become empty
    """
    for field_name in changes:
        if field_name not in STUDENT_FIELDS:
            log_validation_error(field_name, changes[field_name], "unknown field")
            raise UnknownFieldError(field_name)

    for field_name in sorted(REQUIRED_TEXT_FIELDS & changes.keys()):
        validate_required_text_with_logging(changes[field_name], field_name)

    changed: list[str] = []
    for field_name in STUDENT_FIELDS:
        if field_name not in changes:
            continue
        if getattr(student, field_name) != changes[field_name]:
            setattr(student, field_name, changes[field_name])
            changed.append(field_name)

    if changed:
        log_record_change("student", changed, student=student.format())

    return changed


def describe_student(student: Student) -> str:
    """Return the canonical display string of a student."""
    return student.format()
