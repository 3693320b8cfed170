# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Factories producing pre-decorated errors."""
from typing import Any, Callable, Tuple

from .codec import JSON_CODEC, Codec
from .config import DEBUG, DebugConfig
from .error import Error
from .util import print_file, print_func, print_line

InfoProducer = Callable[[], Tuple[str, Any]]


def constructor(
    codec: Codec,
    *producers: InfoProducer,
    config: DebugConfig = DEBUG,
) -> Callable[[str], Error]:
    """Create an error factory bound to a codec and a set of info producers.

    Every producer is called once per created error and its (key, value) pair
    is stored in that error's info. Errors share the codec and config but never
    their info dicts.

    Args:
        codec: Codec used to render created errors
        *producers: Zero-argument callables returning (key, value)
        config: Debug configuration shared by created errors

    Returns:
        Function taking a message and returning a new Error
    """

    def create(message: str) -> Error:
        err = Error(message, codec=codec, config=config)
        for producer in producers:
            err.add_info(*producer())
        return err

    return create


new = constructor(JSON_CODEC, print_file, print_func, print_line)
