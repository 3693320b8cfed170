# SPDX-FileCopyrightText: 2026-present r3fresh <support@r3fresh.dev>
#
# SPDX-License-Identifier: MIT
"""Flat aggregation of arbitrary errors."""
from typing import Iterator, List, Optional


class ErrorList(Exception):
    """Append-only list of errors of any type.

    Usage example:
        errs = ErrorList()
        for item in items:
            try:
                process(item)
            except ValueError as e:
                errs.add(e)
        if not errs.is_empty():
            raise errs
    """

    def __init__(self) -> None:
        super().__init__()
        self.values: Optional[List[BaseException]] = None

    def add(self, *errors: BaseException) -> None:
        """Append errors in order."""
        if self.values is None:
            self.values = []
        self.values.extend(errors)

    def is_empty(self) -> bool:
        """Return True if no error has been added."""
        return not self.values

    def render(self) -> str:
        """Concatenate the text of every error, one per line."""
        return "".join(f"{e}\n" for e in self)

    def __str__(self) -> str:
        return self.render()

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self.values or ())
