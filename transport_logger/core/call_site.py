"""
Call-site capture

Resolves the source location of a log call from the interpreter stack.
"""

from __future__ import annotations

import inspect
import os
import sys
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CallSite:
    """Source location of a log call."""

    file_name: str
    line_number: int
    function_name: str
    column_number: Optional[int] = None


class CallSiteResolver:
    """
    Resolve the caller of a logging method.

    ``offset`` counts the frames between :meth:`resolve` and the method that
    asked for the call site; ``stacklevel`` then walks further up, the same way
    :func:`logging.Logger.findCaller` does. Resolution never raises: when the
    stack is shorter than requested, or the interpreter does not expose
    frames, ``None`` is returned.
    """

    def __init__(self, offset: int = 1):
        if offset < 0:
            raise ValueError("offset cannot be negative")
        self.offset = offset

    def resolve(self, stacklevel: int = 1) -> Optional[CallSite]:
        """
        Return the call site ``stacklevel`` frames above the requesting method.

        Args:
            stacklevel: 1 for the direct caller of the requesting method

        Returns:
            CallSite, or None if the frame is unavailable
        """
        getframe = getattr(sys, "_getframe", None)
        if getframe is None:
            return None
        try:
            frame = getframe(self.offset + stacklevel)
        except ValueError:
            return None

        try:
            info = inspect.getframeinfo(frame, context=0)
        finally:
            del frame

        column = None
        positions = getattr(info, "positions", None)
        if positions is not None and positions.col_offset is not None:
            column = positions.col_offset + 1

        return CallSite(
            file_name=os.path.basename(info.filename),
            line_number=info.lineno,
            function_name=info.function,
            column_number=column,
        )

    def __repr__(self) -> str:
        return f"CallSiteResolver(offset={self.offset})"
