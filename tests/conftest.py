import logging
from datetime import date

import pytest
import structlog

from roster.domain.entities import Student


@pytest.fixture(scope="function")
def birth_date() -> date:
    return date(2024, 1, 1)


@pytest.fixture(name="student")
def student_fixture(birth_date: date) -> Student:
    return Student("Pippo", "VanWoof", "5", "A", birth_date)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test applied."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
