"""
Main Logger class - fans each log call out to its transports
"""

from __future__ import annotations

import asyncio
import inspect
from datetime import datetime
from typing import TYPE_CHECKING, Any, Awaitable, Callable, List, Optional, Set, Union

from transport_logger.core.call_site import CallSiteResolver
from transport_logger.core.log_level import LogLevel
from transport_logger.core.log_record import LogRecord
from transport_logger.formatters.template_formatter import TemplateFormatter, build_tokens
from transport_logger.formatters.value_formatter import format_values

if TYPE_CHECKING:
    from transport_logger.transports.base_transport import BaseTransport


def local_now() -> datetime:
    """Current instant in the local timezone."""
    return datetime.now().astimezone()


class Logger:
    """
    Named logger with zero or more transports.

    Each call renders the message once, captures the call site once and reads
    the clock once; every transport whose threshold is met then receives its
    own record built from its own template.
    """

    def __init__(
        self,
        name: str,
        transports: Optional[List["BaseTransport"]] = None,
        clock: Optional[Callable[[], datetime]] = None,
        call_site_resolver: Optional[CallSiteResolver] = None,
    ):
        if not isinstance(name, str):
            raise TypeError("name must be a string")
        self._name = name
        self.transports: List["BaseTransport"] = list(transports or [])
        self._clock = clock or local_now
        self._call_site_resolver = call_site_resolver or CallSiteResolver()
        self._pending: Set[asyncio.Future] = set()

    @classmethod
    def create_instance(cls, name: str) -> "Logger":
        """Create a logger without transports."""
        return cls(name)

    @property
    def name(self) -> str:
        return self._name

    def add_transport(self, transport: "BaseTransport") -> "Logger":
        """
        Add a transport.

        Returns:
            Self for method chaining
        """
        self.transports.append(transport)
        return self

    def set_minimum_level(self, level: Union[LogLevel, str]) -> "Logger":
        """Set the minimum level on every attached transport."""
        for transport in self.transports:
            transport.set_minimum_level(level)
        return self

    def log(self, level: LogLevel, *values: Any, stacklevel: int = 1) -> None:
        """
        Log values at ``level``.

        Args:
            level: Severity of the call
            *values: Message parts, joined with single spaces
            stacklevel: Frames above this method reported as the call site
        """
        if not isinstance(level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not self.transports:
            return

        content = format_values(values)
        call_site = self._call_site_resolver.resolve(stacklevel)
        timestamp = self._clock()

        for transport in list(self.transports):
            if not transport.accepts(level):
                continue

            config = transport.config
            tokens = build_tokens(
                time=transport.time(timestamp),
                name=self._name,
                content=content,
                call_site=call_site,
            )
            raw, formatted = TemplateFormatter(config.log_format).render_pair(level, tokens)
            record = LogRecord(
                name=self._name,
                level=level,
                time=timestamp,
                raw=raw,
                formatted=formatted,
            )
            result = transport.log(record)
            if inspect.isawaitable(result):
                self._dispatch_async(transport, result)

    def _dispatch_async(self, transport: "BaseTransport", awaitable: Awaitable) -> None:
        """Start an awaitable transport write without waiting for it."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop to hand the write to: finish it here, errors propagate
            asyncio.run(_await(awaitable))
            return

        future = asyncio.ensure_future(awaitable)
        self._pending.add(future)

        def _done(fut: asyncio.Future) -> None:
            self._pending.discard(fut)
            if fut.cancelled():
                return
            exc = fut.exception()
            if exc is not None:
                loop.call_exception_handler({
                    "message": f"Transport {transport!r} failed for logger '{self._name}'",
                    "exception": exc,
                    "future": fut,
                })

        future.add_done_callback(_done)

    def debug(self, *values: Any) -> None:
        """Log debug message."""
        self.log(LogLevel.DEBUG, *values, stacklevel=2)

    def notice(self, *values: Any) -> None:
        """Log notice message."""
        self.log(LogLevel.NOTICE, *values, stacklevel=2)

    def info(self, *values: Any) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, *values, stacklevel=2)

    def success(self, *values: Any) -> None:
        """Log success message."""
        self.log(LogLevel.SUCCESS, *values, stacklevel=2)

    def warning(self, *values: Any) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, *values, stacklevel=2)

    def error(self, *values: Any) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, *values, stacklevel=2)

    async def drain(self) -> None:
        """Wait for asynchronous transport writes started by this logger."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def __repr__(self) -> str:
        return f"Logger(name='{self._name}', transports={len(self.transports)})"


async def _await(awaitable: Awaitable) -> Any:
    return await awaitable
