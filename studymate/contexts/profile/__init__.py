"""
Profile Context

Responsibilities:
- Represents the learner profile edited in the profile builder
- Loads profiles from YAML/JSON and applies skill edits as copies
- Scores profile strength as a weighted sum of populated sections

Owns: Profile record shape, profile-strength weights and scoring
Never: Persists profiles or parses resumes
"""

from studymate.contexts.profile.exceptions import InvalidProfileStructureError
from studymate.contexts.profile.profile_data_structure import (
    SKILL_CATEGORIES,
    EducationEntry,
    ExperienceEntry,
    ProfileData,
    ProjectEntry,
    SkillSet,
    add_skill,
    remove_skill,
)
from studymate.contexts.profile.scorer import (
    MAX_SCORE,
    PROFILE_WEIGHTS,
    SectionScore,
    is_present,
    missing_sections,
    score,
    score_breakdown,
)

__all__ = [
    # Data structures
    "ProfileData",
    "ExperienceEntry",
    "ProjectEntry",
    "EducationEntry",
    "SkillSet",
    "SKILL_CATEGORIES",
    # Edits
    "add_skill",
    "remove_skill",
    # Scoring
    "PROFILE_WEIGHTS",
    "MAX_SCORE",
    "SectionScore",
    "is_present",
    "score",
    "score_breakdown",
    "missing_sections",
    "InvalidProfileStructureError",
]
