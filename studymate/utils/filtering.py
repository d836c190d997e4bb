"""
Text and difficulty matching helpers shared by the Progress context.

All comparisons are case-insensitive and never raise on empty or missing
values: a missing title simply fails to match a non-empty query.
"""

from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")

# Sentinel accepted wherever a difficulty filter is expected
ALL_DIFFICULTIES = "all"


def normalize_text(value: Optional[str]) -> str:
    """Lowercase a possibly-missing string for comparison."""
    if value is None:
        return ""
    return str(value).lower()


def matches_query(text: Optional[str], query: Optional[str]) -> bool:
    """
    Check whether text contains query, ignoring case.

    An empty (or None) query matches everything, including a missing text.

    Examples:
        matches_query("Google", "goo")   # True
        matches_query("Google", "")      # True
        matches_query("Google", "amaz")  # False
    """
    needle = normalize_text(query)
    if not needle:
        return True
    return needle in normalize_text(text)


def normalize_difficulty_label(value: Any) -> str:
    """
    Normalize a difficulty (enum member or string) to a lowercase label.

    Enum members are reduced to their value first, so Difficulty.EASY and
    "EASY" both normalize to "easy".
    """
    if isinstance(value, Enum):
        value = value.value
    return normalize_text(value).strip()


def is_all_difficulties(value: Any) -> bool:
    """True when the difficulty filter should not restrict results."""
    if value is None:
        return True
    return normalize_difficulty_label(value) == ALL_DIFFICULTIES


def has_difficulty(difficulties: Iterable[Any], wanted: Any) -> bool:
    """True if any of the given difficulties equals wanted (case-insensitive)."""
    target = normalize_difficulty_label(wanted)
    return any(normalize_difficulty_label(d) == target for d in difficulties)


def stable_filter(items: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return the items satisfying predicate, preserving input order."""
    return [item for item in items if predicate(item)]
