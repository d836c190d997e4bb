"""
Feedback Context

Responsibilities:
- Defines the closed struggle-area taxonomy and its priority order
- Maps selected struggle areas to ordered learning suggestions
- Models and validates problem feedback submissions

Owns: Struggle-area taxonomy, suggestion rules, feedback validation
Never: Sends feedback anywhere or stores selections between calls
"""

from studymate.contexts.feedback.exceptions import (
    FeedbackValidationError,
    UnknownStruggleAreaError,
)
from studymate.contexts.feedback.struggle_areas import (
    SUGGESTION_RULES,
    ExperienceLevel,
    StruggleArea,
    suggestion_for,
)
from studymate.contexts.feedback.suggestions import (
    FeedbackSubmission,
    suggestions_for,
    toggle_struggle_area,
    validate_feedback,
)

__all__ = [
    "SUGGESTION_RULES",
    "ExperienceLevel",
    "StruggleArea",
    "suggestion_for",
    "suggestions_for",
    "toggle_struggle_area",
    "FeedbackSubmission",
    "validate_feedback",
    "FeedbackValidationError",
    "UnknownStruggleAreaError",
]
