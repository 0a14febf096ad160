"""Circular next/previous lookup over ordered record identifiers."""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterable
from operator import attrgetter
from typing import Any

from core.exceptions import EmptyCollectionError


class SequenceNavigator:
    """Pages through identifiers in ascending order, wrapping at both ends.

    Example:
        >>> nav = SequenceNavigator([7, 1, 3])
        >>> nav.next(7), nav.prev(1), nav.next(3), nav.prev(3)
        (1, 7, 7, 1)
    """

    def __init__(self, identifiers: Iterable[Any]) -> None:
        self._ids = sorted(set(identifiers))

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[Any],
        key: Callable[[Any], Any] = attrgetter("id"),
    ) -> SequenceNavigator:
        return cls(key(entry) for entry in entries)

    def __len__(self) -> int:
        return len(self._ids)

    def _require_entries(self) -> None:
        if not self._ids:
            msg = "Cannot navigate an empty collection"
            raise EmptyCollectionError(msg)

    def next(self, current: Any) -> Any:
        """Smallest identifier greater than ``current``, else the smallest overall."""
        self._require_entries()
        idx = bisect.bisect_right(self._ids, current)
        return self._ids[idx] if idx < len(self._ids) else self._ids[0]

    def prev(self, current: Any) -> Any:
        """Largest identifier less than ``current``, else the largest overall."""
        self._require_entries()
        idx = bisect.bisect_left(self._ids, current)
        return self._ids[idx - 1] if idx > 0 else self._ids[-1]
