"""Transports module - Log output destinations"""

from transport_logger.transports.base_transport import BaseTransport
from transport_logger.transports.console_transport import ConsoleTransport
from transport_logger.transports.file_transport import PlainFileTransport

__all__ = ["BaseTransport", "ConsoleTransport", "PlainFileTransport"]
