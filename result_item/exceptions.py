"""Errors raised by :mod:`result_item`."""

from __future__ import annotations

from typing import Iterable


class UnknownFieldError(AttributeError):
    """A producer supplied field names that a :class:`ResultItem` does not have.

    ``field_names`` holds the offending names in the order they were given.
    """

    def __init__(self, field_names: Iterable[str]) -> None:
        self.field_names = tuple(field_names)
        names = ", ".join(repr(name) for name in self.field_names)
        super().__init__(f"Unknown ResultItem field(s): {names}")
