"""Console transport with ANSI colors"""

import sys
from datetime import datetime
from typing import Optional, TextIO

from transport_logger.core.log_level import LogLevel
from transport_logger.core.log_record import LogRecord
from transport_logger.core.transport_config import TransportConfig
from transport_logger.transports.base_transport import BaseTransport


class ConsoleTransport(BaseTransport):
    """Write records to stdout, or to stderr for warnings and errors."""

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        *,
        log_format: Optional[str] = None,
        time_format: Optional[str] = None,
        minimum_level: Optional[LogLevel] = None,
        colored: bool = True,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ):
        """
        Initialize console transport.

        Args:
            config: Transport configuration
            log_format: Line template override
            time_format: Time pattern override
            minimum_level: Threshold override
            colored: Write the colour-formatted line (False writes the raw one)
            stream: Output stream below WARNING (default: sys.stdout)
            error_stream: Output stream for WARNING and ERROR (default: sys.stderr)
        """
        super().__init__(
            config,
            log_format=log_format,
            time_format=time_format,
            minimum_level=minimum_level,
        )
        self.colored = colored
        self.stream = stream
        self.error_stream = error_stream

    def _stream_for(self, level: LogLevel) -> TextIO:
        # Looked up per call so redirected sys streams are honoured
        if level >= LogLevel.WARNING:
            return self.error_stream or sys.stderr
        return self.stream or sys.stdout

    def log(self, record: LogRecord) -> None:
        """Write record to console."""
        msg = record.formatted if self.colored else record.raw
        stream = self._stream_for(record.level)
        stream.write(msg + "\n")
        stream.flush()

    def time(self, timestamp: datetime) -> str:
        return timestamp.strftime(self.time_format)
