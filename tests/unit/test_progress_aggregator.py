"""Unit tests for progress aggregation and company filtering."""

import pytest

from studymate.contexts.catalog import Company, Difficulty, Problem, Topic
from studymate.contexts.progress import (
    ActivityEntry,
    dashboard_progress,
    entity_progress,
    filter_companies,
    overall_progress,
    recent_activity,
    summarize_progress,
)


def _topic(id, total, solved):
    return Topic(id=id, title=id.title(), total_problems=total, solved_problems=solved)


def _company(title, *difficulties, total=None, solved=0):
    problems = tuple(Problem(difficulty=d) for d in difficulties)
    return Company(
        id=title.lower(),
        title=title,
        total_problems=len(problems) if total is None else total,
        solved_problems=solved,
        problems=problems,
    )


# ============================================================================
# entity_progress
# ============================================================================


@pytest.mark.unit
def test_entity_progress_floors_percentage():
    """1 of 3 solved is 33%, not 33.3 or 34."""
    assert entity_progress(_topic("arrays", 3, 1)) == 33
    assert entity_progress(_topic("arrays", 3, 2)) == 66


@pytest.mark.unit
def test_entity_progress_zero_total_is_zero():
    """Empty entities report 0% instead of dividing by zero."""
    assert entity_progress(_topic("graphs", 0, 0)) == 0


@pytest.mark.unit
@pytest.mark.parametrize("total,solved", [(1, 0), (1, 1), (7, 3), (99, 98), (100, 100)])
def test_entity_progress_bounds(total, solved):
    """Well-formed entities always land in [0, 100]."""
    assert 0 <= entity_progress(_topic("t", total, solved)) <= 100


@pytest.mark.unit
def test_entity_progress_solved_above_total_does_not_crash():
    """Precondition violations are tolerated and stay within bounds."""
    assert entity_progress(_topic("broken", 2, 5)) == 100


@pytest.mark.unit
def test_entity_progress_works_for_companies():
    """Companies expose the same counts as topics."""
    assert entity_progress(_company("Google", Difficulty.EASY, total=4, solved=1)) == 25


# ============================================================================
# overall_progress / summarize_progress
# ============================================================================


@pytest.mark.unit
def test_overall_progress_is_sum_weighted_not_averaged():
    """1/1 and 0/99 roll up to 1%, where averaging would give 50%."""
    topics = [_topic("small", 1, 1), _topic("large", 99, 0)]

    assert overall_progress(topics) == 1
    average = sum(entity_progress(t) for t in topics) // len(topics)
    assert average == 50


@pytest.mark.unit
def test_overall_progress_empty_collection():
    assert overall_progress([]) == 0
    assert overall_progress([_topic("a", 0, 0), _topic("b", 0, 0)]) == 0


@pytest.mark.unit
def test_summarize_progress_is_additive():
    """Roll-up counts are the sums of the children."""
    topics = [_topic("a", 10, 4), _topic("b", 5, 5), _topic("c", 0, 0)]

    summary = summarize_progress(topics)

    assert summary.solved == 9
    assert summary.total == 15
    assert summary.count == 3
    assert summary.percent == 60
    assert summary.percent == overall_progress(topics)


@pytest.mark.unit
def test_summarize_progress_accepts_generators():
    summary = summarize_progress(_topic(str(i), 2, 1) for i in range(4))
    assert (summary.solved, summary.total, summary.count) == (4, 8, 4)


@pytest.mark.unit
def test_progress_is_idempotent():
    """Repeated calls with equal input give identical output."""
    topics = [_topic("a", 7, 3), _topic("b", 11, 2)]

    assert entity_progress(topics[0]) == entity_progress(topics[0])
    assert overall_progress(topics) == overall_progress(list(topics))
    assert summarize_progress(topics) == summarize_progress(topics)


# ============================================================================
# dashboard_progress / recent_activity
# ============================================================================


@pytest.mark.unit
def test_dashboard_progress_pools_topics_and_companies():
    """Combined figure pools both collections before taking the percentage."""
    topics = [_topic("a", 50, 10)]
    companies = [_company("Google", total=50, solved=40)]

    summary = dashboard_progress(topics, companies)

    assert summary.solved == 50
    assert summary.total == 100
    assert summary.percent == 50
    assert summary.count == 2


@pytest.mark.unit
def test_dashboard_progress_with_no_data():
    assert dashboard_progress([], []).percent == 0


@pytest.mark.unit
def test_recent_activity_takes_first_topics_then_first_company():
    topics = [_topic("a", 4, 1), _topic("b", 4, 2), _topic("c", 4, 3)]
    companies = [_company("Google", total=2, solved=1), _company("Amazon", total=2, solved=2)]

    entries = recent_activity(topics, companies)

    assert [(e.kind, e.id) for e in entries] == [
        ("topic", "a"),
        ("topic", "b"),
        ("company", "google"),
    ]
    assert entries[0] == ActivityEntry(kind="topic", id="a", name="A", solved=1, total=4, progress=25)
    assert entries[2].progress == 50


@pytest.mark.unit
def test_recent_activity_limits():
    topics = [_topic("a", 4, 1)]
    companies = [_company("Google", total=2, solved=1)]

    assert recent_activity(topics, companies, topic_limit=0, company_limit=0) == []
    assert recent_activity(topics, companies, topic_limit=-1, company_limit=5)[0].kind == "company"
    assert len(recent_activity(topics, companies, topic_limit=10, company_limit=10)) == 2


# ============================================================================
# filter_companies
# ============================================================================


@pytest.mark.unit
def test_filter_companies_matches_title_and_difficulty():
    """The canonical search: "goo" with easy problems finds Google."""
    google = _company("Google", Difficulty.EASY)

    assert filter_companies([google], "goo", "easy") == [google]


@pytest.mark.unit
def test_filter_companies_no_match_is_empty():
    google = _company("Google", Difficulty.EASY)

    assert filter_companies([google], "amazon", "hard") == []
    assert filter_companies([google], "goo", "hard") == []


@pytest.mark.unit
def test_filter_companies_empty_query_matches_all():
    companies = [_company("Google", Difficulty.EASY), _company("Amazon", Difficulty.HARD)]

    assert filter_companies(companies, "", "all") == companies
    assert filter_companies(companies, None) == companies


@pytest.mark.unit
def test_filter_companies_is_case_insensitive():
    companies = [_company("Google", Difficulty.MEDIUM)]

    assert filter_companies(companies, "GOOGLE", "MEDIUM") == companies
    assert filter_companies(companies, "oOg", Difficulty.MEDIUM) == companies
    assert filter_companies(companies, "goo", "ALL") == companies


@pytest.mark.unit
def test_filter_companies_is_stable():
    """Matches keep their relative input order."""
    companies = [
        _company("Zeta Goods", Difficulty.HARD),
        _company("Amazon", Difficulty.HARD),
        _company("Alpha Goods", Difficulty.HARD),
        _company("Goodyear", Difficulty.EASY),
    ]

    result = filter_companies(companies, "good", "hard")

    assert [c.title for c in result] == ["Zeta Goods", "Alpha Goods"]


@pytest.mark.unit
def test_filter_companies_requires_a_problem_of_that_difficulty():
    no_problems = _company("Google", total=5)
    mixed = _company("Meta", Difficulty.EASY, Difficulty.HARD)

    assert filter_companies([no_problems, mixed], "", "hard") == [mixed]
    assert filter_companies([no_problems, mixed], "", "medium") == []


@pytest.mark.unit
def test_filter_companies_unknown_difficulty_matches_nothing():
    companies = [_company("Google", Difficulty.EASY)]

    assert filter_companies(companies, "", "impossible") == []


@pytest.mark.unit
def test_filter_companies_does_not_mutate_input():
    companies = [_company("Google", Difficulty.EASY), _company("Amazon", Difficulty.HARD)]
    snapshot = list(companies)

    filter_companies(companies, "amazon", "hard")

    assert companies == snapshot
