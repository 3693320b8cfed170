# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Metadata producers for decorating errors.

Each producer takes no arguments and returns a ``(key, value)`` pair, so it can
be handed to ``constructor`` or splatted into ``Error.add_info``:

    err.add_info(*print_line())
"""
import inspect
import os
import traceback
from datetime import datetime, timezone
from types import FrameType
from typing import Any, Optional, Tuple

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def utc_now_iso() -> str:
    """Return current UTC time as ISO format string."""
    return datetime.now(timezone.utc).isoformat()


def _caller_frame() -> Optional[FrameType]:
    """Return the nearest frame whose code lives outside this package."""
    frame = inspect.currentframe()
    while frame is not None:
        filename = os.path.abspath(frame.f_code.co_filename)
        if os.path.dirname(filename) != _PACKAGE_DIR:
            return frame
        frame = frame.f_back
    return None


def capture_stack(limit: Optional[int] = None) -> str:
    """Format the stack leading to the current call site.

    Args:
        limit: Maximum number of frames to include (None = all)

    Returns:
        Stack text in the usual traceback format
    """
    return "".join(traceback.format_stack(_caller_frame(), limit=limit))


def print_date() -> Tuple[str, Any]:
    """Return the UTC time at which the error occurred."""
    return "date", utc_now_iso()


def print_line() -> Tuple[str, Any]:
    """Return the line number on which the error occurred."""
    frame = _caller_frame()
    return "line", frame.f_lineno if frame is not None else 0


def print_file() -> Tuple[str, Any]:
    """Return the source file in which the error occurred."""
    frame = _caller_frame()
    return "file", frame.f_code.co_filename if frame is not None else ""


def print_func() -> Tuple[str, Any]:
    """Return the qualified name of the function in which the error occurred."""
    frame = _caller_frame()
    if frame is None:
        return "fn", ""
    module = frame.f_globals.get("__name__", "")
    return "fn", f"{module}.{frame.f_code.co_name}"


def print_trace() -> Tuple[str, Any]:
    """Return the stack trace leading to the error."""
    return "trace", capture_stack()
