from __future__ import annotations

from typing import Any


class CharsCounterError(Exception):
    """Base class for errors raised by chars_counter."""


class _ArgumentError(CharsCounterError, ValueError):
    reason = "invalid argument"

    def __init__(self, param: str, value: Any = None) -> None:
        self.param = param
        self.value = value
        super().__init__(param, value)

    def __str__(self) -> str:
        return self._format()

    def _format(self) -> str:
        return f"{self.param}: {self.reason}"


class NullArgumentError(_ArgumentError):
    """A required argument was None."""

    reason = "must not be None"


class OutOfRangeError(_ArgumentError):
    """An index, limit or size argument violates its precondition."""

    reason = "out of range"

    def _format(self) -> str:
        return f"{self.param}={self.value!r}: {self.reason}"
