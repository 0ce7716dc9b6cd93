"""
Log record data structure

A log call resolves its content, call site and timestamp once. Each
transport that accepts the call then gets its own record, because the raw
and formatted lines are rendered from that transport's template and time
pattern. Records are discarded once the transport has consumed them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from transport_logger.core.log_level import LogLevel


@dataclass(frozen=True)
class LogRecord:
    """
    Log record handed to a transport.

    Attributes:
        name: Name of the emitting logger
        level: Severity of the call
        time: Instant of the call, shared by every transport
        raw: Rendered line without colour codes (files, plain sinks)
        formatted: Rendered line with a colour-wrapped level label (terminals)
    """

    name: str
    level: LogLevel
    time: datetime
    raw: str
    formatted: str

    def __post_init__(self):
        """Validate log record after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "name": self.name,
            "level": self.level.name,
            "time": self.time.isoformat(),
            "raw": self.raw,
            "formatted": self.formatted,
        }

    def __str__(self) -> str:
        return self.raw
