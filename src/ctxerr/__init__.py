# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Structured, decoratable errors with pluggable encoding."""
from .__about__ import __version__
from .codec import (
    CODE_KEY,
    JSON_CODEC,
    MAX_CHAIN_DEPTH,
    SOURCE_KEY,
    Codec,
    ErrorDocument,
    from_json,
    new_codec,
    to_json,
)
from .config import DEBUG, DebugConfig
from .constructor import constructor, new
from .errlist import ErrorList
from .error import Error, as_error, has_code
from .util import capture_stack, print_date, print_file, print_func, print_line, print_trace

__all__ = [
    "CODE_KEY",
    "DEBUG",
    "JSON_CODEC",
    "MAX_CHAIN_DEPTH",
    "SOURCE_KEY",
    "Codec",
    "DebugConfig",
    "Error",
    "ErrorDocument",
    "ErrorList",
    "__version__",
    "as_error",
    "capture_stack",
    "constructor",
    "from_json",
    "has_code",
    "new",
    "new_codec",
    "print_date",
    "print_file",
    "print_func",
    "print_line",
    "print_trace",
    "to_json",
]
