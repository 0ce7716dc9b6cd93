"""
Transport Logger - named loggers with per-destination formatting

Each logger fans its calls out to console and file transports, every
transport with its own template, time pattern and minimum level.
"""

__version__ = "1.0.0"

from transport_logger.core.log_level import LogLevel
from transport_logger.core.log_record import LogRecord
from transport_logger.core.transport_config import FileTransportConfig, TransportConfig
from transport_logger.core.call_site import CallSite, CallSiteResolver
from transport_logger.core.logger import Logger
from transport_logger.core.logger_builder import LoggerBuilder
from transport_logger.transports import BaseTransport, ConsoleTransport, PlainFileTransport

# Import submodules (not all classes by default)
from transport_logger import formatters

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogRecord",
    "LogLevel",
    "TransportConfig",
    "FileTransportConfig",
    "CallSite",
    "CallSiteResolver",
    "BaseTransport",
    "ConsoleTransport",
    "PlainFileTransport",
    "formatters",
]
