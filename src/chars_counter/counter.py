from __future__ import annotations

import logging
from typing import NoReturn, Sequence

from .errors import NullArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)


def count_all(text: str, targets: Sequence[str]) -> int:
    """Count every position of ``text`` equal to a character of ``targets``.

    Duplicate targets are counted once per occurrence, so ``["a", "a"]``
    doubles the count of ``"a"``. Empty text or empty targets yield 0.
    """
    _check_not_none(text, targets)
    count = 0
    for index in range(len(text)):
        count += _matches_at(text, targets, index)
    return count


def count_in_range(text: str, targets: Sequence[str], start: int, end: int) -> int:
    """Like :func:`count_all`, restricted to the inclusive window ``start..end``.

    The window must span at least two indices; ``start == end`` is rejected.
    """
    _check_not_none(text, targets)
    check_bounds(text, start, end)
    count = 0
    for index in range(start, end + 1):
        count += _matches_at(text, targets, index)
    return count


def count_in_range_limited(
    text: str, targets: Sequence[str], start: int, end: int, limit: int
) -> int:
    """Count over ``start..end`` and stop once the running total equals ``limit``.

    The limit is checked after each index has been compared against every
    target, so index ``start`` is always scanned, even for ``limit == 0``.
    A single index that jumps past the limit (duplicate targets) does not
    stop the scan.
    """
    _check_not_none(text, targets)
    check_bounds(text, start, end)
    if limit < 0:
        _reject(OutOfRangeError("limit", limit))

    count = 0
    for index in range(start, end + 1):
        count += _matches_at(text, targets, index)
        if count == limit:
            logger.debug("limit %d reached at index %d", limit, index)
            return count
    return count


def check_bounds(text: str, start: int, end: int) -> None:
    """Validate the inclusive window ``start..end`` against ``text``.

    Checks run in a fixed order and each failure names one parameter:
    ``start`` past the end (or negative), ``end`` past the end, ``start``
    after ``end``, then a single-index window reported against ``end``.
    """
    last = len(text) - 1
    if start < 0 or start > last:
        _reject(OutOfRangeError("start", start))
    if end > last:
        _reject(OutOfRangeError("end", end))
    if start > end:
        _reject(OutOfRangeError("start", start))
    if start == end:
        _reject(OutOfRangeError("end", end))


def _check_not_none(text: str, targets: Sequence[str]) -> None:
    if text is None:
        _reject(NullArgumentError("text"))
    if targets is None:
        _reject(NullArgumentError("targets"))


def _reject(error: NullArgumentError | OutOfRangeError) -> NoReturn:
    logger.debug("rejected argument %s=%r", error.param, error.value)
    raise error


def _matches_at(text: str, targets: Sequence[str], index: int) -> int:
    char = text[index]
    matches = 0
    for target in targets:
        if target == char:
            matches += 1
    return matches
