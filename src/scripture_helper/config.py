"""Configuration settings for Scripture Helper."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass
class Settings:
    """Application settings."""

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("SCRIPTURE_HELPER_LOG_LEVEL", "WARNING")
    )

    # Output
    json_indent: int = 2

    # Input files
    encoding: str = "utf-8"


# Ordinal prefixes that may precede a book name ("II Cor", "First John")
ORDINAL_DIGITS = {
    "i": "1",
    "ii": "2",
    "iii": "3",
    "iv": "4",
    "first": "1",
    "second": "2",
    "third": "3",
    "fourth": "4",
}
