"""
Transport configuration management

Each transport owns one configuration value. Changing a setting replaces the
value as a whole, so a record that is already being rendered never sees a
half-updated configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from transport_logger.core.log_level import LogLevel

PathLike = Union[str, Path]

DEFAULT_LOG_FORMAT = "{time} | {level} | {name} | {content}"
DEFAULT_TIME_FORMAT = "%m/%d/%Y %H:%M:%S"
DEBUG_LOG_FORMAT = (
    "{time} | {level} | {name} | {fileName}:{lineNumber}:{columnNumber} "
    "{functionName} | {content}"
)


def _default_log_path() -> Path:
    return Path.cwd() / "logs"


@dataclass(frozen=True)
class TransportConfig:
    """
    Transport configuration.

    Attributes:
        log_format: Line template. Supported tokens are ``{time}``,
            ``{level}``, ``{name}``, ``{content}``, ``{fileName}``,
            ``{lineNumber}``, ``{functionName}`` and ``{columnNumber}``.
        time_format: ``strftime`` pattern used for ``{time}``
        minimum_level: Lowest level the transport emits
    """

    log_format: str = DEFAULT_LOG_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    minimum_level: LogLevel = LogLevel.INFO

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.log_format, str):
            raise TypeError("log_format must be a string")
        if not isinstance(self.time_format, str):
            raise TypeError("time_format must be a string")

        # Accept level names, e.g. from a settings file
        if isinstance(self.minimum_level, str):
            object.__setattr__(
                self, "minimum_level", LogLevel.from_string(self.minimum_level)
            )
        elif not isinstance(self.minimum_level, LogLevel):
            raise TypeError("minimum_level must be LogLevel enum")

    @classmethod
    def default(cls) -> "TransportConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "TransportConfig":
        """Create configuration for debugging, with call-site details."""
        return cls(
            log_format=DEBUG_LOG_FORMAT,
            time_format="%H:%M:%S",
            minimum_level=LogLevel.DEBUG,
        )

    @classmethod
    def production_config(cls) -> "TransportConfig":
        """Create configuration for production."""
        return cls(
            time_format="%Y-%m-%d %H:%M:%S",
            minimum_level=LogLevel.WARNING,
        )


@dataclass(frozen=True)
class FileTransportConfig(TransportConfig):
    """
    File transport configuration.

    Attributes:
        log_path: Directory holding the log files (default: ``./logs``)
        file_retention: Number of archived files to keep per logger name,
            negative for unlimited
    """

    log_path: Path = field(default_factory=_default_log_path)
    file_retention: int = -1

    def __post_init__(self):
        super().__post_init__()
        if isinstance(self.log_path, str):
            object.__setattr__(self, "log_path", Path(self.log_path))
        elif not isinstance(self.log_path, Path):
            raise TypeError("log_path must be a str or Path")
        if isinstance(self.file_retention, bool) or not isinstance(self.file_retention, int):
            raise TypeError("file_retention must be an integer")

    @property
    def retention_enabled(self) -> bool:
        """Whether archived files are pruned on rollover."""
        return self.file_retention >= 0

