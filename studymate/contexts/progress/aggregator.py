"""
Progress aggregation over catalog snapshots.

Computes per-entity and roll-up completion percentages for topics and
companies, and filters company collections by text and difficulty.

Any object exposing integer `total_problems` and `solved_problems` attributes
counts as an entity, so topics and companies can be mixed freely.

Percentages are floored integers in [0, 100]. Roll-ups are sum-weighted:
floor(100 * sum(solved) / sum(total)), never the mean of per-entity percents,
which would overweight small entities.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from studymate.contexts.catalog.catalog_data_structure import Company
from studymate.utils.filtering import (
    ALL_DIFFICULTIES,
    has_difficulty,
    is_all_difficulties,
    matches_query,
    stable_filter,
)


@dataclass(frozen=True)
class ProgressSummary:
    """
    Additive roll-up of a collection of entities.

    Attributes:
        solved: Sum of solved problems
        total: Sum of total problems
        percent: floor(100 * solved / total), 0 when total is 0
        count: Number of entities rolled up
    """

    solved: int
    total: int
    percent: int
    count: int


@dataclass(frozen=True)
class ActivityEntry:
    """One row of the dashboard's recent-activity list."""

    kind: str  # "topic" or "company"
    id: str
    name: str
    solved: int
    total: int
    progress: int


def _percent(solved: int, total: int) -> int:
    if total <= 0:
        return 0
    return min(max((100 * solved) // total, 0), 100)


def entity_progress(entity: Any) -> int:
    """
    Completion percentage of a single topic or company.

    Returns 0 for entities with no problems instead of dividing by zero.

    Examples:
        entity_progress(Topic("arrays", "Arrays", total_problems=3, solved_problems=1))  # 33
        entity_progress(Topic("graphs", "Graphs", total_problems=0, solved_problems=0))  # 0
    """
    return _percent(entity.solved_problems, entity.total_problems)


def summarize_progress(entities: Iterable[Any]) -> ProgressSummary:
    """
    Roll up a collection into solved/total sums and their percentage.

    Args:
        entities: Topics and/or companies

    Returns:
        ProgressSummary whose percent equals overall_progress(entities)
    """
    solved = 0
    total = 0
    count = 0
    for entity in entities:
        solved += entity.solved_problems
        total += entity.total_problems
        count += 1
    return ProgressSummary(solved=solved, total=total, percent=_percent(solved, total), count=count)


def overall_progress(entities: Iterable[Any]) -> int:
    """
    Sum-weighted completion percentage of a collection.

    Topics with totals 1 and 99, solved 1/1 and 0/99, give 1 (not the
    50 an average of per-topic percentages would give).
    """
    return summarize_progress(entities).percent


def dashboard_progress(topics: Iterable[Any], companies: Iterable[Any]) -> ProgressSummary:
    """
    Combined progress across topic and company problem sets.

    This is the single "overall DSA progress" figure of the dashboard:
    both collections are pooled before the percentage is taken.
    """
    topic_summary = summarize_progress(topics)
    company_summary = summarize_progress(companies)
    solved = topic_summary.solved + company_summary.solved
    total = topic_summary.total + company_summary.total
    return ProgressSummary(
        solved=solved,
        total=total,
        percent=_percent(solved, total),
        count=topic_summary.count + company_summary.count,
    )


def recent_activity(
    topics: Sequence[Any],
    companies: Sequence[Any],
    topic_limit: int = 2,
    company_limit: int = 1,
) -> List[ActivityEntry]:
    """
    Build the dashboard's recent-activity list.

    Takes the first topic_limit topics followed by the first company_limit
    companies, each annotated with its own entity_progress.
    """
    entries = []
    for kind, entities, limit in (
        ("topic", topics, topic_limit),
        ("company", companies, company_limit),
    ):
        for entity in list(entities)[: max(limit, 0)]:
            entries.append(
                ActivityEntry(
                    kind=kind,
                    id=entity.id,
                    name=entity.title,
                    solved=entity.solved_problems,
                    total=entity.total_problems,
                    progress=entity_progress(entity),
                )
            )
    return entries


def filter_companies(
    companies: Iterable[Company],
    query: Optional[str] = "",
    difficulty: Any = ALL_DIFFICULTIES,
) -> List[Company]:
    """
    Filter companies by title text and problem difficulty.

    A company is kept when its title contains query (case-insensitive) and,
    unless difficulty is "all", at least one of its problems has that
    difficulty. Input order is preserved. An empty query matches every title;
    a difficulty that names no problem's difficulty matches no company.

    Args:
        companies: Company snapshots
        query: Search text; empty matches everything
        difficulty: Difficulty member, its label in any case, or "all"

    Returns:
        Matching companies, possibly empty

    Example:
        filter_companies(companies, "goo", "easy")
    """
    check_difficulty = not is_all_difficulties(difficulty)

    def keep(company: Company) -> bool:
        if not matches_query(company.title, query):
            return False
        if not check_difficulty:
            return True
        return has_difficulty(company.difficulties, difficulty)

    return stable_filter(companies, keep)
