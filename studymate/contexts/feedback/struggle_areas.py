"""
Struggle-area taxonomy, suggestion rules and experience levels.

The taxonomy is closed: eight tags whose declaration order is also their
priority order when suggestions are listed. SUGGESTION_RULES maps a subset of
them to one advisory message each; suggestion_for makes that a total mapping.
"""

from enum import Enum
from typing import Any, Dict, Optional


class StruggleArea(str, Enum):
    """Difficulty a learner reports after attempting a problem."""

    ALGORITHM_LOGIC = "Algorithm Logic"
    DATA_STRUCTURE_CHOICE = "Data Structure Choice"
    EDGE_CASES = "Edge Cases"
    TIME_COMPLEXITY = "Time Complexity"
    SPACE_COMPLEXITY = "Space Complexity"
    IMPLEMENTATION = "Implementation"
    UNDERSTANDING_PROBLEM = "Understanding Problem"
    DEBUGGING = "Debugging"

    @classmethod
    def coerce(cls, value: Any) -> Optional["StruggleArea"]:
        """
        Resolve a member, its display value, or its name, ignoring case.

        Returns None for anything outside the taxonomy.

        Examples:
            StruggleArea.coerce("Edge Cases")       # StruggleArea.EDGE_CASES
            StruggleArea.coerce("edge_cases")       # StruggleArea.EDGE_CASES
            StruggleArea.coerce("Recursion")        # None
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        label = value.strip().lower()
        for member in cls:
            if label in (member.value.lower(), member.name.lower()):
                return member
        return None


SUGGESTION_RULES: Dict[StruggleArea, str] = {
    StruggleArea.ALGORITHM_LOGIC: "💡 Break down the problem into smaller steps before coding",
    StruggleArea.DATA_STRUCTURE_CHOICE: "📚 Review common data structures and their use cases",
    StruggleArea.EDGE_CASES: (
        "🔍 Always consider empty inputs, single elements, and boundary conditions"
    ),
    StruggleArea.TIME_COMPLEXITY: "⚡ Practice analyzing time complexity with Big O notation",
}


def suggestion_for(area: StruggleArea) -> Optional[str]:
    """Advisory message for a tag, or None if the tag has no rule."""
    return SUGGESTION_RULES.get(area)


class ExperienceLevel(str, Enum):
    """How hard a learner found a problem, easiest first."""

    VERY_EASY = "very-easy"
    EASY = "easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"
    VERY_HARD = "very-hard"

    @property
    def label(self) -> str:
        """Display label, e.g. "Very Easy"."""
        return self.value.replace("-", " ").title()
