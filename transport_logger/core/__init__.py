"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Dispatches log calls to transports
- LoggerBuilder: Builder pattern for logger construction
- LogRecord: Record handed to a transport
- LogLevel: Log level enumeration
- TransportConfig / FileTransportConfig: Transport configuration
- CallSiteResolver: Call-site capture
"""

from transport_logger.core.call_site import CallSite, CallSiteResolver
from transport_logger.core.log_level import LogLevel
from transport_logger.core.log_record import LogRecord
from transport_logger.core.transport_config import FileTransportConfig, TransportConfig
from transport_logger.core.logger import Logger
from transport_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "CallSite",
    "CallSiteResolver",
    "LogLevel",
    "LogRecord",
    "TransportConfig",
    "FileTransportConfig",
    "Logger",
    "LoggerBuilder",
]
