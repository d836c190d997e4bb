"""
Profile strength scoring.

The score is a weighted sum of section-presence indicators. Presence is
boolean: a non-blank string or a non-empty list counts, regardless of length
or quality. Weights sum to 100, so the score is always in [0, 100] and never
drops when a section is filled in.

The score is a projection of the profile snapshot it is given. Callers should
recompute it after every edit rather than store it alongside the profile.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

from studymate.contexts.profile.profile_data_structure import ProfileData


def _skills_programming(profile: Any) -> Any:
    skills = getattr(profile, "skills", None)
    return getattr(skills, "programming", None) if skills is not None else None


def _field(name: str) -> Callable[[Any], Any]:
    return lambda profile: getattr(profile, name, None)


# (section, weight, accessor) in display order
PROFILE_WEIGHTS: Tuple[Tuple[str, int, Callable[[Any], Any]], ...] = (
    ("name", 10, _field("name")),
    ("email", 10, _field("email")),
    ("phone", 5, _field("phone")),
    ("summary", 15, _field("summary")),
    ("experience", 20, _field("experience")),
    ("projects", 15, _field("projects")),
    ("education", 10, _field("education")),
    ("skills.programming", 10, _skills_programming),
    ("certifications", 5, _field("certifications")),
)

MAX_SCORE = sum(weight for _, weight, _ in PROFILE_WEIGHTS)


@dataclass(frozen=True)
class SectionScore:
    """Contribution of one profile section to the score."""

    section: str
    weight: int
    present: bool
    points: int


def is_present(value: Any) -> bool:
    """
    True for a non-blank string or a non-empty collection.

    None and whitespace-only strings are absent.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    try:
        return len(value) > 0
    except TypeError:
        return bool(value)


def score_breakdown(profile: ProfileData) -> List[SectionScore]:
    """
    Per-section contributions, in PROFILE_WEIGHTS order.

    Missing sections (None or absent attributes) contribute 0.
    """
    breakdown = []
    for section, weight, accessor in PROFILE_WEIGHTS:
        present = is_present(accessor(profile))
        breakdown.append(
            SectionScore(section=section, weight=weight, present=present, points=weight if present else 0)
        )
    return breakdown


def score(profile: ProfileData) -> int:
    """
    Profile strength in [0, 100].

    Examples:
        score(ProfileData())                                   # 0
        score(ProfileData(name="Ada", email="ada@example.com"))  # 20
    """
    return sum(entry.points for entry in score_breakdown(profile))


def missing_sections(profile: ProfileData) -> List[str]:
    """Sections that currently contribute nothing, in PROFILE_WEIGHTS order."""
    return [entry.section for entry in score_breakdown(profile) if not entry.present]
