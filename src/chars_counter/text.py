from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .counter import check_bounds, count_all, count_in_range, count_in_range_limited
from .errors import NullArgumentError, OutOfRangeError


@dataclass(frozen=True)
class Window:
    """Validated inclusive index range ``[start, end]`` spanning two or more indices."""

    start: int
    end: int

    @classmethod
    def of(cls, text: str, start: int, end: int) -> "Window":
        if text is None:
            raise NullArgumentError("text")
        check_bounds(text, start, end)
        return cls(start=start, end=end)

    def __len__(self) -> int:
        return self.end - self.start + 1


@dataclass(frozen=True)
class CharText:
    """Immutable text with character counting helpers."""

    text: str

    @classmethod
    def from_text(cls, text: str) -> "CharText":
        if text is None:
            raise NullArgumentError("text")
        return cls(text=text)

    def len_chars(self) -> int:
        return len(self.text)

    def count(self, targets: Sequence[str]) -> int:
        return count_all(self.text, targets)

    def count_range(self, targets: Sequence[str], start: int, end: int) -> int:
        return count_in_range(self.text, targets, start, end)

    def count_limited(
        self, targets: Sequence[str], start: int, end: int, limit: int
    ) -> int:
        return count_in_range_limited(self.text, targets, start, end, limit)

    def count_window(
        self, targets: Sequence[str], window: Window, *, limit: int | None = None
    ) -> int:
        if limit is None:
            return self.count_range(targets, window.start, window.end)
        return self.count_limited(targets, window.start, window.end, limit)

    def windows(self, size: int) -> List[Window]:
        """Split the text into consecutive windows of ``size`` indices.

        The last window may be shorter. A trailing single index cannot form a
        window of its own and is folded into the previous one, which then
        spans ``size + 1`` indices.
        """
        if size < 2:
            raise OutOfRangeError("size", size)

        windows: List[Window] = []
        length = len(self.text)
        if length < 2:
            return windows
        start = 0
        while start < length:
            end = min(length, start + size) - 1
            if length - 1 - end == 1:
                end = length - 1
            windows.append(Window(start=start, end=end))
            start = end + 1
        return windows
