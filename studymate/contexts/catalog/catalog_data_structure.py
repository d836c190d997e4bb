"""
Catalog record data structures.

Topics and companies are read-only snapshots supplied by the external content
catalog. They are frozen so that no core function can mutate the caller's data.

Keys may arrive in the catalog's camelCase form (totalProblems) or in
snake_case (total_problems); from_dict accepts both.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from studymate.contexts.catalog.exceptions import InvalidCatalogStructureError


class Difficulty(str, Enum):
    """Problem difficulty. Declaration order is easiest first."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: Any) -> "Difficulty":
        """
        Parse a difficulty case-insensitively.

        Raises:
            ValueError: If value names no known difficulty
        """
        if isinstance(value, cls):
            return value
        label = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == label:
                return member
        raise ValueError(f"Unknown difficulty: {value!r}")


# snake_case attribute -> accepted source keys
_KEY_ALIASES = {
    "total_problems": ("total_problems", "totalProblems"),
    "solved_problems": ("solved_problems", "solvedProblems"),
}


def _get(data: Mapping[str, Any], attr: str, default: Any = None) -> Any:
    for key in _KEY_ALIASES.get(attr, (attr,)):
        if key in data:
            return data[key]
    return default


def _require(data: Mapping[str, Any], attr: str, kind: str, index: Optional[int]) -> Any:
    value = _get(data, attr)
    if value is None:
        raise InvalidCatalogStructureError(
            f"Missing required field '{attr}'",
            record_kind=kind,
            index=index,
            key=attr,
            payload=dict(data),
        )
    return value


def _require_count(data: Mapping[str, Any], attr: str, kind: str, index: Optional[int]) -> int:
    value = _require(data, attr, kind, index)
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool):
        raise InvalidCatalogStructureError(
            f"Field '{attr}' must be an integer", record_kind=kind, index=index, key=attr
        )
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise InvalidCatalogStructureError(
            f"Field '{attr}' must be an integer, got {value!r}",
            record_kind=kind,
            index=index,
            key=attr,
        ) from e


def _require_mapping(data: Any, kind: str, index: Optional[int]) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidCatalogStructureError(
            f"Expected a mapping, got {type(data).__name__}",
            record_kind=kind,
            index=index,
            payload=data,
        )
    return data


@dataclass(frozen=True)
class Problem:
    """
    A single practice problem. Only the fields needed for filtering are kept.

    Attributes:
        difficulty: Problem difficulty
        title: Optional display title
    """

    difficulty: Difficulty
    title: Optional[str] = None

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        index: Optional[int] = None,
        company_index: Optional[int] = None,
    ) -> "Problem":
        """
        Build a problem record.

        Errors name the owning company when company_index is given,
        e.g. "company[2].problem[0]".
        """
        kind = "problem" if company_index is None else f"company[{company_index}].problem"
        data = _require_mapping(data, kind, index)
        raw = _require(data, "difficulty", kind, index)
        try:
            difficulty = Difficulty.parse(raw)
        except ValueError as e:
            raise InvalidCatalogStructureError(
                str(e), record_kind=kind, index=index, key="difficulty"
            ) from e
        return cls(difficulty=difficulty, title=data.get("title"))


@dataclass(frozen=True)
class Topic:
    """
    A DSA topic with its problem counts.

    Attributes:
        id: Catalog identifier
        title: Display title (e.g., "Arrays")
        total_problems: Number of problems in the topic (>= 0)
        solved_problems: Number solved; expected 0 <= solved <= total
        icon: Optional icon name used by the UI
    """

    id: str
    title: str
    total_problems: int
    solved_problems: int
    icon: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: Optional[int] = None) -> "Topic":
        data = _require_mapping(data, "topic", index)
        return cls(
            id=str(_require(data, "id", "topic", index)),
            title=str(_require(data, "title", "topic", index)),
            total_problems=_require_count(data, "total_problems", "topic", index),
            solved_problems=_require_count(data, "solved_problems", "topic", index),
            icon=str(data.get("icon") or ""),
        )


@dataclass(frozen=True)
class Company:
    """
    A company-specific problem set.

    Attributes:
        id: Catalog identifier
        title: Company name (matched by text search)
        total_problems: Number of problems listed for the company
        solved_problems: Number solved
        problems: Ordered problems (matched by difficulty filter)
        icon: Optional icon name used by the UI
    """

    id: str
    title: str
    total_problems: int
    solved_problems: int
    problems: Tuple[Problem, ...] = field(default_factory=tuple)
    icon: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: Optional[int] = None) -> "Company":
        data = _require_mapping(data, "company", index)
        raw_problems = data.get("problems") or []
        if not isinstance(raw_problems, (list, tuple)):
            raise InvalidCatalogStructureError(
                "Field 'problems' must be a list",
                record_kind="company",
                index=index,
                key="problems",
            )
        return cls(
            id=str(_require(data, "id", "company", index)),
            title=str(_require(data, "title", "company", index)),
            total_problems=_require_count(data, "total_problems", "company", index),
            solved_problems=_require_count(data, "solved_problems", "company", index),
            problems=tuple(
                Problem.from_dict(p, index=i, company_index=index)
                for i, p in enumerate(raw_problems)
            ),
            icon=str(data.get("icon") or ""),
        )

    @property
    def difficulties(self) -> Tuple[Difficulty, ...]:
        """Difficulties of this company's problems, in problem order."""
        return tuple(problem.difficulty for problem in self.problems)
