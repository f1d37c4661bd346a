"""Infrastructure and technical constants."""

from typing import Final

# Logging configuration constants
LOG_FILE_NAME: Final = "roster.log"
MAX_LOGGED_VALUE_LENGTH: Final = 100
VALID_LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
