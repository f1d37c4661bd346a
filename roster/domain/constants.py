"""Domain business rules and constants."""

from typing import Final

# Fields that must never hold an empty string
REQUIRED_TEXT_FIELDS: Final = frozenset({"name", "surname"})

# Display format
CLASS_LABEL: Final = "classe"

# Sentinel used when an animal is created without a breed
UNKNOWN_BREED: Final = "unknown"
