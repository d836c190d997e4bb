"""
Personalized learning suggestions and feedback submissions.

suggestions_for is a pure projection of a selection onto the fixed rule
table: the output order follows StruggleArea declaration order, never the
order in which the caller collected its selection.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, List, Optional, Set

from studymate.contexts.catalog.catalog_data_structure import Difficulty
from studymate.contexts.feedback.exceptions import (
    FeedbackValidationError,
    UnknownStruggleAreaError,
)
from studymate.contexts.feedback.logger import _log_debug, _log_info
from studymate.contexts.feedback.struggle_areas import (
    ExperienceLevel,
    StruggleArea,
    suggestion_for,
)


def _known_areas(selected: Iterable[Any]) -> Set[StruggleArea]:
    known = set()
    for value in selected:
        area = StruggleArea.coerce(value)
        if area is None:
            _log_debug(f"Ignoring unknown struggle area {value!r}")
            continue
        known.add(area)
    return known


def suggestions_for(selected: Iterable[Any]) -> List[str]:
    """
    Ordered advisory messages for a selection of struggle areas.

    Args:
        selected: StruggleArea members or their display strings, in any order;
            unknown tags are ignored

    Returns:
        One message per selected tag that has a rule, in taxonomy order

    Example:
        suggestions_for({"Edge Cases", "Algorithm Logic"})
        # ["💡 Break down the problem ...", "🔍 Always consider empty inputs, ..."]
    """
    chosen = _known_areas(selected)
    suggestions = []
    for area in StruggleArea:
        if area not in chosen:
            continue
        message = suggestion_for(area)
        if message is not None:
            suggestions.append(message)
    return suggestions


def toggle_struggle_area(selected: Iterable[Any], area: Any) -> FrozenSet[StruggleArea]:
    """
    Return a new selection with area added if absent, removed if present.

    The caller's selection is never mutated.

    Raises:
        UnknownStruggleAreaError: If area is outside the taxonomy
    """
    resolved = StruggleArea.coerce(area)
    if resolved is None:
        raise UnknownStruggleAreaError(area)

    current = _known_areas(selected)
    if resolved in current:
        current.discard(resolved)
    else:
        current.add(resolved)
    return frozenset(current)


@dataclass(frozen=True)
class FeedbackSubmission:
    """
    Feedback a learner gives after attempting a problem.

    Attributes:
        problem_name: Problem the feedback is about
        difficulty: The problem's difficulty
        company: Company whose problem set the problem belongs to
        experience: How hard it felt; required before submitting
        struggle_areas: Selected struggle areas
        details: Free-text comments
    """

    problem_name: str
    difficulty: Difficulty
    company: str
    experience: Optional[ExperienceLevel] = None
    struggle_areas: FrozenSet[StruggleArea] = field(default_factory=frozenset)
    details: str = ""

    @property
    def suggestions(self) -> List[str]:
        """Suggestions for this submission's struggle areas."""
        return suggestions_for(self.struggle_areas)


def validate_feedback(submission: FeedbackSubmission) -> FeedbackSubmission:
    """
    Check a submission is complete before it is handed to the sender.

    Returns:
        The same submission, for chaining

    Raises:
        FeedbackValidationError: If no experience level was selected
    """
    if submission.experience is None:
        raise FeedbackValidationError(
            "Please select your experience level", field_name="experience"
        )
    _log_info(
        f"Feedback for '{submission.problem_name}' ({submission.company}): "
        f"{submission.experience.label}, {len(submission.struggle_areas)} struggle areas"
    )
    return submission
