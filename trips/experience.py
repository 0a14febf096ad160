"""Ride experience labels and their total order.

Labels are ranked worst to best::

    very bad (0) < bad (1) < neutral (2) < good (3) < very good (4)

Comparisons always go through the explicit rank table, never through the
string values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from core.exceptions import UnknownLabelError

logger = logging.getLogger(__name__)


class Experience(str, Enum):
    """Quality of a single ride."""

    VERY_BAD = "very bad"
    BAD = "bad"
    NEUTRAL = "neutral"
    GOOD = "good"
    VERY_GOOD = "very good"

    def __str__(self) -> str:
        return self.value


_RANKS: dict[Experience, int] = {
    Experience.VERY_BAD: 0,
    Experience.BAD: 1,
    Experience.NEUTRAL: 2,
    Experience.GOOD: 3,
    Experience.VERY_GOOD: 4,
}

POSITIVE: frozenset[Experience] = frozenset({Experience.GOOD, Experience.VERY_GOOD})
NEGATIVE: frozenset[Experience] = frozenset({Experience.BAD, Experience.VERY_BAD})


def parse(label: Experience | str) -> Experience:
    """Return the Experience for a label, raising UnknownLabelError otherwise."""
    if isinstance(label, Experience):
        return label
    try:
        return Experience(label)
    except ValueError:
        logger.warning("Rejecting unknown experience label %r", label)
        msg = f"Unknown experience label: {label!r}"
        raise UnknownLabelError(msg, {"label": label}) from None


def rank(label: Experience | str) -> int:
    """Position of the label on the scale, 0 being the worst."""
    return _RANKS[parse(label)]


def worst_of(labels: Iterable[Experience | str]) -> Experience:
    """Label with the minimum rank.

    Raises:
        ValueError: If ``labels`` is empty.
        UnknownLabelError: If any label is outside the scale.
    """
    parsed = [parse(label) for label in labels]
    if not parsed:
        msg = "worst_of() requires at least one label"
        raise ValueError(msg)
    return min(parsed, key=_RANKS.__getitem__)


__all__ = ["NEGATIVE", "POSITIVE", "Experience", "parse", "rank", "worst_of"]
