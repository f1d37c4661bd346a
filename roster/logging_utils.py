import logging
from datetime import UTC, datetime
from typing import Any

from .constants import MAX_LOGGED_VALUE_LENGTH


def log_record_change(
    record_type: str,
    changed_fields: list[str],
    logger_name: str = "records",
    **kwargs: Any,
) -> None:
    """Log a change made to a record with consistent structure.

    Args:
        record_type: Kind of record that changed (e.g., 'student')
        changed_fields: Names of the fields whose value changed
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    log_data = {
        "record_type": record_type,
        "changed_fields": changed_fields,
        "timestamp": datetime.now(UTC).isoformat(),
        **kwargs,
    }

    logger.info(
        f"Updated {record_type}: {', '.join(changed_fields)}", extra=log_data
    )


def log_validation_error(
    field: str, value: Any, error_message: str, logger_name: str = "validation"
) -> None:
    """Log validation errors with context.

    Args:
        field: Field name that failed validation
        value: The invalid value (will be sanitized)
        error_message: Validation error message
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    # Sanitize sensitive values
    safe_value = (
        repr(value)[:MAX_LOGGED_VALUE_LENGTH]
        if not _is_sensitive_field(field)
        else "[REDACTED]"
    )

    logger.warning(
        f"Validation failed for field '{field}': {error_message}",
        extra={"field": field, "value": safe_value, "error": error_message},
    )


def _is_sensitive_field(field_name: str) -> bool:
    """Check if a field contains sensitive data that should not be logged."""
    sensitive_fields = {
        "password",
        "secret",
        "key",
        "token",
        "credential",
        "auth",
        "session",
        "cookie",
    }

    field_lower = field_name.lower()
    return any(sensitive in field_lower for sensitive in sensitive_fields)
