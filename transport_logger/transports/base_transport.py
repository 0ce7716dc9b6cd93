"""
Base transport interface

A transport is an output destination for log records.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional, Union

from transport_logger.core.log_level import LogLevel
from transport_logger.core.log_record import LogRecord
from transport_logger.core.transport_config import TransportConfig


class BaseTransport(ABC):
    """
    Abstract base class for transports.

    Subclasses implement :meth:`log` and :meth:`time`. The only state shared
    by every transport is its configuration: line template, time pattern and
    minimum level. ``log`` may be a coroutine function; the logger then
    schedules it without waiting for it.
    """

    config_class = TransportConfig

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        **options: Any,
    ):
        """
        Initialize transport.

        Args:
            config: Complete configuration (default: ``config_class()``)
            **options: Individual configuration fields overriding ``config``;
                ``None`` values are ignored

        Example:
            ConsoleTransport(minimum_level=LogLevel.DEBUG)
            ConsoleTransport(TransportConfig.debug_config())
        """
        if config is None:
            config = self.config_class()
        elif not isinstance(config, self.config_class):
            raise TypeError(f"config must be {self.config_class.__name__}")
        overrides = {key: value for key, value in options.items() if value is not None}
        self._config = dataclasses.replace(config, **overrides) if overrides else config

    @abstractmethod
    def log(self, record: LogRecord) -> Any:
        """
        Emit a fully rendered record.

        Args:
            record: Record to write
        """
        pass

    @abstractmethod
    def time(self, timestamp: datetime) -> str:
        """
        Render a timestamp with this transport's time pattern.

        Args:
            timestamp: Instant of the log call

        Returns:
            Text used for the ``{time}`` token
        """
        pass

    @property
    def config(self) -> TransportConfig:
        """Current configuration value."""
        return self._config

    def configure(self, **changes: Any) -> "BaseTransport":
        """
        Replace the configuration with a copy carrying ``changes``.

        Only records logged afterwards are affected.

        Returns:
            Self for method chaining
        """
        self._config = dataclasses.replace(self._config, **changes)
        return self

    def accepts(self, level: LogLevel) -> bool:
        """Whether a record at ``level`` passes this transport's threshold."""
        return level.meets(self._config.minimum_level)

    @property
    def log_format(self) -> str:
        return self._config.log_format

    @log_format.setter
    def log_format(self, value: str) -> None:
        self.configure(log_format=value)

    @property
    def time_format(self) -> str:
        return self._config.time_format

    @time_format.setter
    def time_format(self, value: str) -> None:
        self.configure(time_format=value)

    @property
    def minimum_level(self) -> LogLevel:
        return self._config.minimum_level

    @minimum_level.setter
    def minimum_level(self, value: Union[LogLevel, str]) -> None:
        self.configure(minimum_level=value)

    def set_log_format(self, log_format: str) -> "BaseTransport":
        """Set line template."""
        return self.configure(log_format=log_format)

    def set_time_format(self, time_format: str) -> "BaseTransport":
        """Set ``strftime`` pattern for ``{time}``."""
        return self.configure(time_format=time_format)

    def set_minimum_level(self, level: Union[LogLevel, str]) -> "BaseTransport":
        """Set minimum level."""
        return self.configure(minimum_level=level)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"{type(self).__name__}(minimum_level={self.minimum_level}, "
            f"log_format='{self.log_format}')"
        )
