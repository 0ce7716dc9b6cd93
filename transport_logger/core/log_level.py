"""
Log level enumeration

Ordered severities with fixed-width labels and terminal colours.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Members compare by severity, so a threshold check is a plain ``>=``.
    """

    DEBUG = 0
    NOTICE = 1
    INFO = 2
    SUCCESS = 3
    WARNING = 4
    ERROR = 5

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        key = LEVEL_ALIASES.get(key, key)
        if key in cls.__members__:
            return cls[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def label(self) -> str:
        """Fixed-width display label, seven characters for every level."""
        return LEVEL_LABELS[self]

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.DEBUG: "\033[90m",     # Gray
            LogLevel.NOTICE: "\033[101m",   # Bright red background
            LogLevel.INFO: "\033[34m",      # Blue
            LogLevel.SUCCESS: "\033[92m",   # Bright green
            LogLevel.WARNING: "\033[93m",   # Bright yellow
            LogLevel.ERROR: "\033[91m",     # Bright red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"

    def colorize(self, text: str) -> str:
        """Wrap text in this level's colour."""
        return f"{self.color_code}{text}{self.reset_code}"

    def meets(self, minimum: "LogLevel") -> bool:
        """Return True when this level satisfies the given threshold."""
        return self >= minimum


LEVEL_LABELS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: " debug ",
    LogLevel.NOTICE: "notice ",
    LogLevel.INFO: " info  ",
    LogLevel.SUCCESS: "success",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: " error ",
}

LEVEL_ALIASES: Dict[str, str] = {
    "WARN": "WARNING",
}
