"""Shared validation utilities for the application layer.

Wraps the pure domain rules with structured logging so that rejected writes
show up in the logs before the error reaches the caller.
"""

from typing import Any

from ..domain.entities import validate_required_text
from ..domain.exceptions import InvalidFieldError
from ..logging_config import get_logger
from ..logging_utils import log_validation_error

logger = get_logger(__name__)


def validate_required_text_with_logging(value: Any, field: str) -> None:
    """Validate a required text field with logging for the application layer.

    Args:
        value: The value to validate
        field: Name of the field being written

    Raises:
        InvalidFieldError: If value is missing or empty
    """
    try:
        validate_required_text(value, field)
    except InvalidFieldError as e:
        logger.warning(
            f"Rejected empty value for {field}",
            attempted_value=repr(value),
            field=field,
        )
        log_validation_error(field, value, str(e))
        raise
