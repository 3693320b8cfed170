# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Structured error value with pluggable rendering."""
import copy
import logging
from typing import Any, Dict, Iterator, Optional

from .codec import CODE_KEY, JSON_CODEC, Codec
from .config import DEBUG, DebugConfig
from .util import capture_stack

logger = logging.getLogger(__name__)

_TRACE_BANNER = "TRACE" + "=" * 43


class Error(Exception):
    """Exception carrying contextual metadata and an optional wrapped cause.

    ``str(err)`` returns the rendering produced by the bound codec, while
    ``err.cause()`` returns the bare message. Decoration and wrapping mutate the
    error in place and return it, so calls can be chained:

        err = new("disk full").add_info("retry", 3).set_code(507)
    """

    def __init__(
        self,
        message: str = "",
        *,
        info: Optional[Dict[str, Any]] = None,
        code: str = "",
        underlying: Optional["Error"] = None,
        codec: Optional[Codec] = None,
        config: Optional[DebugConfig] = None,
    ):
        """Initialize an error.

        Args:
            message: Human-readable cause
            info: Contextual metadata (None until first decoration)
            code: Opaque error code
            underlying: Wrapped predecessor
            codec: Codec used by render (defaults to JSON_CODEC)
            config: Debug configuration read at render time (defaults to DEBUG)
        """
        super().__init__(message)
        self.message = message
        self.info = info
        self.code = code
        self.codec = codec if codec is not None else JSON_CODEC
        self.config = config if config is not None else DEBUG
        self.underlying = underlying

    @property
    def underlying(self) -> Optional["Error"]:
        """The wrapped predecessor, mirrored onto ``__cause__``."""
        return self._underlying

    @underlying.setter
    def underlying(self, value: Optional["Error"]) -> None:
        self._underlying = value
        self.__cause__ = value

    def set_code(self, code: Any) -> "Error":
        """Set the error code and record it in info under CODE_KEY."""
        self.code = str(code)
        self.add_info(CODE_KEY, code)
        return self

    def add_info(self, key: str, value: Any) -> "Error":
        """Insert or overwrite an info entry."""
        if self.info is None:
            self.info = {}
        self.info[key] = value
        return self

    def matches_code(self, code: Any) -> bool:
        """Return True if the error code equals ``str(code)``."""
        return bool(self.code) and self.code == str(code)

    def cause(self) -> str:
        """Return the bare message without metadata."""
        return self.message

    def render(self) -> str:
        """Render the error through its codec.

        Encoding failures never propagate: the failure's own text is rendered
        instead. When debug is enabled a stack trace is appended, which is for
        humans only.
        """
        try:
            encoded = self.codec.encode(self)
        except Exception as e:
            logger.debug("Error encoding failed, rendering failure text: %s", e)
            rendered = str(e)
            if self.config.enabled:
                rendered = rendered + "\n\n" + capture_stack(self.config.trace_limit)
            return rendered

        if isinstance(encoded, (bytes, bytearray)):
            rendered = encoded.decode("utf-8", errors="replace")
        else:
            rendered = str(encoded)
        if self.config.enabled:
            trace = capture_stack(self.config.trace_limit)
            rendered = rendered + "\n\n" + _TRACE_BANNER + "\n" + trace + "\n\n"
        return rendered

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, code={self.code!r})"

    def __copy__(self) -> "Error":
        # Subclasses may not accept (message) alone, so skip __init__
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        return clone

    def unwrap(self, exc: Optional[BaseException]) -> Optional["Error"]:
        """Normalize an arbitrary exception into an Error.

        Errors are returned as-is. Anything else has its text decoded with this
        error's codec.

        Args:
            exc: Exception to normalize

        Returns:
            The normalized Error, or None if exc is None
        """
        if exc is None:
            return None
        if isinstance(exc, Error):
            return exc

        try:
            text = str(exc)
        except Exception as e:
            logger.debug("str() of %s raised %s", type(exc).__name__, type(e).__name__)
            text = f"<unprintable {type(exc).__name__} object>"
        data = text.encode("utf-8", errors="surrogatepass")
        try:
            return self.codec.decode(data)
        except Exception as e:
            # decode is required to be total; keep the raw text if it is not
            logger.warning("Error codec decode raised %s, keeping raw text", type(e).__name__)
            return Error(text, codec=self.codec, config=self.config)

    def wrap(self, exc: Optional[BaseException]) -> "Error":
        """Record exc, normalized, as the cause of this error.

        Wrapping an error into itself, or into anything whose chain already
        contains it, is a no-op. Wrapping None clears the cause.
        """
        normalized = copy.copy(self).unwrap(exc)
        if normalized is self:
            return self
        if normalized is not None and any(link is self for link in normalized.chain()):
            logger.debug("Refusing to wrap %r: it would form a cycle", normalized)
            return self
        self.underlying = normalized
        return self

    def chain(self) -> Iterator["Error"]:
        """Iterate over this error and its wrapped predecessors, newest first."""
        seen = set()
        err: Optional[Error] = self
        while err is not None and id(err) not in seen:
            seen.add(id(err))
            yield err
            err = err.underlying


def as_error(exc: Optional[BaseException]) -> Optional[Error]:
    """Return exc if it is an Error, otherwise None."""
    if isinstance(exc, Error):
        return exc
    return None


def has_code(exc: Optional[BaseException], code: Any) -> bool:
    """Return True if exc is an Error carrying the given code.

    Safe to call with None or with exceptions of any other type.
    """
    err = as_error(exc)
    return err is not None and err.matches_code(code)
