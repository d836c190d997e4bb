"""Unit tests for shared text and difficulty matching helpers."""

import pytest

from studymate.contexts.catalog import Difficulty
from studymate.utils.filtering import (
    has_difficulty,
    is_all_difficulties,
    matches_query,
    normalize_difficulty_label,
    stable_filter,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,query,expected",
    [
        ("Google", "goo", True),
        ("Google", "GOO", True),
        ("Google", "", True),
        ("Google", None, True),
        (None, "", True),
        ("Google", "amazon", False),
        (None, "goo", False),
    ],
)
def test_matches_query(text, query, expected):
    assert matches_query(text, query) is expected


@pytest.mark.unit
def test_normalize_difficulty_label():
    assert normalize_difficulty_label(Difficulty.MEDIUM) == "medium"
    assert normalize_difficulty_label(" HARD ") == "hard"
    assert normalize_difficulty_label(None) == ""


@pytest.mark.unit
def test_is_all_difficulties():
    assert is_all_difficulties("all")
    assert is_all_difficulties("All")
    assert is_all_difficulties(None)
    assert not is_all_difficulties("easy")
    assert not is_all_difficulties(Difficulty.EASY)


@pytest.mark.unit
def test_has_difficulty():
    difficulties = [Difficulty.EASY, Difficulty.HARD]

    assert has_difficulty(difficulties, "hard")
    assert has_difficulty(difficulties, Difficulty.EASY)
    assert not has_difficulty(difficulties, "medium")
    assert not has_difficulty([], "easy")


@pytest.mark.unit
def test_stable_filter_preserves_order():
    assert stable_filter([5, 2, 8, 1, 6], lambda n: n > 4) == [5, 8, 6]
