"""Logger builder pattern"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

from transport_logger.core.log_level import LogLevel
from transport_logger.core.logger import Logger
from transport_logger.core.transport_config import PathLike
from transport_logger.transports.base_transport import BaseTransport
from transport_logger.transports.console_transport import ConsoleTransport
from transport_logger.transports.file_transport import PlainFileTransport


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = "logger"
        self._defaults: Dict[str, Any] = {}
        self._console_options: Optional[Dict[str, Any]] = None
        self._file_options: Optional[Dict[str, Any]] = None
        self._custom_transports: List[BaseTransport] = []
        self._clock: Optional[Callable[[], datetime]] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum level for the built-in transports."""
        self._defaults["minimum_level"] = level
        return self

    def with_log_format(self, log_format: str) -> "LoggerBuilder":
        """Set line template for the built-in transports."""
        self._defaults["log_format"] = log_format
        return self

    def with_time_format(self, time_format: str) -> "LoggerBuilder":
        """Set time pattern for the built-in transports."""
        self._defaults["time_format"] = time_format
        return self

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Use ``clock`` instead of the local wall clock for timestamps."""
        self._clock = clock
        return self

    def with_console(self, colored: bool = True, **options: Any) -> "LoggerBuilder":
        """
        Enable console output.

        Args:
            colored: Write colour-formatted lines
            **options: ConsoleTransport keyword arguments, taking precedence
                over the builder-wide format and level settings
        """
        self._console_options = dict(options, colored=colored)
        return self

    def with_file(
        self,
        log_path: Optional[PathLike] = None,
        file_retention: int = -1,
        **options: Any,
    ) -> "LoggerBuilder":
        """
        Enable file output.

        Args:
            log_path: Log directory (default: ``./logs``)
            file_retention: Archives to keep, negative for unlimited
            **options: PlainFileTransport keyword arguments

        Example:
            logger = (LoggerBuilder()
                .with_name("api")
                .with_level(LogLevel.DEBUG)
                .with_console()
                .with_file("/var/log/api", file_retention=7)
                .build())
        """
        self._file_options = dict(options, log_path=log_path, file_retention=file_retention)
        return self

    def add_transport(self, transport: BaseTransport) -> "LoggerBuilder":
        """
        Add a custom transport.

        Args:
            transport: Transport instance

        Returns:
            Self for method chaining
        """
        self._custom_transports.append(transport)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self._name, clock=self._clock)

        if self._console_options is not None:
            logger.add_transport(ConsoleTransport(**{**self._defaults, **self._console_options}))

        if self._file_options is not None:
            logger.add_transport(PlainFileTransport(**{**self._defaults, **self._file_options}))

        for transport in self._custom_transports:
            logger.add_transport(transport)

        return logger
