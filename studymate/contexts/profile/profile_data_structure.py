"""
Profile data structures for the Profile context.

ProfileData is owned and edited by the caller (profile builder form, resume
import). Edits offered here return modified copies so a scored snapshot is
never changed behind the caller's back.
"""

import copy
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, List, Mapping

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from studymate.contexts.profile.exceptions import InvalidProfileStructureError
from studymate.contexts.profile.logger import _log_debug, _log_info

SKILL_CATEGORIES = ("programming", "web", "databases", "tools")


@dataclass
class ExperienceEntry:
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


@dataclass
class ProjectEntry:
    name: str = ""
    description: str = ""
    technologies: List[str] = field(default_factory=list)


@dataclass
class EducationEntry:
    degree: str = ""
    institution: str = ""
    duration: str = ""
    grade: str = ""


@dataclass
class SkillSet:
    """
    Categorized skills.

    Attributes:
        programming: Languages (e.g., "Python")
        web: Web frameworks and APIs
        databases: Database systems
        tools: Tooling (e.g., "Git")
    """

    programming: List[str] = field(default_factory=list)
    web: List[str] = field(default_factory=list)
    databases: List[str] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)


@dataclass
class ProfileData:
    """
    A learner's profile as edited in the profile builder.

    Factory methods:
        from_dict(data) - Build from a possibly partial mapping
        from_file(path) - Load a YAML (or JSON) profile file
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    github: str = ""
    linkedin: str = ""
    summary: str = ""
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: SkillSet = field(default_factory=SkillSet)
    certifications: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProfileData":
        """
        Build a profile from a mapping.

        Missing or null sections become empty. Unknown keys are ignored.

        Raises:
            InvalidProfileStructureError: If data or one of its sections has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise InvalidProfileStructureError(
                f"Profile must be a mapping, got {type(data).__name__}", payload=data
            )

        skills = data.get("skills") or {}
        if not isinstance(skills, Mapping):
            raise InvalidProfileStructureError(
                "Skills must be a mapping of category to list", section="skills", payload=skills
            )

        return cls(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            github=_text(data.get("github")),
            linkedin=_text(data.get("linkedin")),
            summary=_text(data.get("summary")),
            experience=_entries(data, "experience", ExperienceEntry),
            projects=_entries(data, "projects", ProjectEntry),
            education=_entries(data, "education", EducationEntry),
            skills=SkillSet(
                **{
                    category: _string_list(skills.get(category), f"skills.{category}")
                    for category in SKILL_CATEGORIES
                }
            ),
            certifications=_string_list(data.get("certifications"), "certifications"),
        )

    @classmethod
    def from_file(cls, file_path: Path) -> "ProfileData":
        """
        Load a profile file with OmegaConf.

        Values are taken literally: "${...}" in profile text is never
        interpolated.

        Raises:
            FileNotFoundError: If the file doesn't exist
            InvalidProfileStructureError: If the file isn't valid YAML or the contents are malformed
        """
        file_path = Path(file_path)
        try:
            conf = OmegaConf.load(file_path)
            data = OmegaConf.to_container(conf, resolve=False)
        except FileNotFoundError:
            raise
        except (yaml.YAMLError, OmegaConfBaseException, OSError) as e:
            # OmegaConf.load raises OSError for a numeric or boolean top-level document
            raise InvalidProfileStructureError(
                f"Could not parse {file_path.name}: {type(e).__name__}: {e}"
            ) from e
        profile = cls.from_dict(data)
        _log_info(f"Loaded profile '{profile.name or file_path.stem}' from {file_path.name}")
        return profile


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _string_list(value: Any, section: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise InvalidProfileStructureError("Expected a list", section=section, payload=value)
    return [str(item) for item in value]


def _entries(data: Mapping[str, Any], section: str, entry_cls) -> list:
    raw = data.get(section)
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        raise InvalidProfileStructureError("Expected a list", section=section, payload=raw)

    known = {f.name for f in fields(entry_cls)}
    entries = []
    for item in raw:
        if not isinstance(item, Mapping):
            raise InvalidProfileStructureError(
                "Expected a mapping per entry", section=section, payload=item
            )
        values = {}
        for key, value in item.items():
            if key not in known:
                continue
            if key == "technologies":
                values[key] = _string_list(value, f"{section}.technologies")
            else:
                values[key] = _text(value)
        entries.append(entry_cls(**values))
    return entries


def _check_category(category: str) -> None:
    if category not in SKILL_CATEGORIES:
        raise InvalidProfileStructureError(
            f"Unknown skill category '{category}' (expected one of {', '.join(SKILL_CATEGORIES)})",
            section="skills",
        )


def _copy_with_skills(profile: ProfileData, category: str, skills: List[str]) -> ProfileData:
    new_skills = replace(copy.deepcopy(profile.skills), **{category: skills})
    return replace(copy.deepcopy(profile), skills=new_skills)


def add_skill(profile: ProfileData, category: str, skill: str) -> ProfileData:
    """
    Return a copy of profile with skill appended to a category.

    The skill is trimmed; a blank skill leaves the profile unchanged (a copy
    is still returned).

    Raises:
        InvalidProfileStructureError: If category is not a skill category
    """
    _check_category(category)
    trimmed = (skill or "").strip()
    if not trimmed:
        _log_debug(f"Ignoring blank skill for {category}")
        return copy.deepcopy(profile)
    return _copy_with_skills(profile, category, [*getattr(profile.skills, category), trimmed])


def remove_skill(profile: ProfileData, category: str, index: int) -> ProfileData:
    """
    Return a copy of profile without the skill at index in a category.

    An out-of-range index leaves the skills unchanged.

    Raises:
        InvalidProfileStructureError: If category is not a skill category
    """
    _check_category(category)
    current = getattr(profile.skills, category)
    remaining = [skill for i, skill in enumerate(current) if i != index]
    return _copy_with_skills(profile, category, remaining)
