# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Debug configuration for error rendering."""
import os
from dataclasses import dataclass
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class DebugConfig:
    """Verbosity switch read by every render.

    Errors keep a reference to the config they were created with, so toggling
    a shared instance affects all future renders of those errors. Reads are not
    synchronized; the flag only changes diagnostic output.

    Usage example:
        cfg = DebugConfig.from_env()
        cfg.enable()
    """

    enabled: bool = False
    trace_limit: Optional[int] = None
    env_prefix: str = "CTXERR_"

    def enable(self) -> None:
        """Append stack traces to rendered errors."""
        self.enabled = True

    def disable(self) -> None:
        """Stop appending stack traces."""
        self.enabled = False

    def load_env(self) -> "DebugConfig":
        """Update this config from variables named with ``env_prefix``.

        Supported variables:
        - <PFX>DEBUG: "1", "true", "yes" or "on" enables traces
        - <PFX>TRACE_LIMIT: maximum number of frames to capture

        Unset variables and unparsable limits leave the current values alone.

        Usage example:
            DEBUG.load_env()
        """
        enabled_raw = os.getenv(f"{self.env_prefix}DEBUG")
        if enabled_raw is not None:
            self.enabled = enabled_raw.strip().lower() in _TRUTHY

        trace_limit_raw = os.getenv(f"{self.env_prefix}TRACE_LIMIT", "").strip()
        if trace_limit_raw:
            try:
                self.trace_limit = int(trace_limit_raw)
            except ValueError:
                pass
        return self

    @classmethod
    def from_env(cls, prefix: str = "CTXERR_") -> "DebugConfig":
        """Create a config from environment variables.

        Args:
            prefix: Environment variable prefix

        Returns:
            A new DebugConfig
        """
        return cls(env_prefix=prefix).load_env()


# Process-wide default shared by the default constructor and decoded errors.
DEBUG = DebugConfig()
