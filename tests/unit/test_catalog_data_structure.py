"""Unit tests for catalog records and Catalog.from_dict."""

import dataclasses

import pytest

from studymate.contexts.catalog import (
    Catalog,
    Company,
    Difficulty,
    InvalidCatalogStructureError,
    Problem,
    Topic,
)


@pytest.mark.unit
@pytest.mark.parametrize("value", ["Easy", "easy", "EASY", " easy ", Difficulty.EASY])
def test_difficulty_parse_is_case_insensitive(value):
    assert Difficulty.parse(value) is Difficulty.EASY


@pytest.mark.unit
def test_difficulty_parse_unknown_raises():
    with pytest.raises(ValueError, match="Unknown difficulty"):
        Difficulty.parse("Impossible")


@pytest.mark.unit
def test_topic_from_dict_accepts_camel_and_snake_case():
    camel = Topic.from_dict({"id": "arrays", "title": "Arrays", "totalProblems": 5, "solvedProblems": 2})
    snake = Topic.from_dict({"id": "arrays", "title": "Arrays", "total_problems": 5, "solved_problems": 2})

    assert camel == snake
    assert camel.total_problems == 5
    assert camel.icon == ""


@pytest.mark.unit
def test_topic_is_immutable():
    topic = Topic(id="arrays", title="Arrays", total_problems=5, solved_problems=2)

    with pytest.raises(dataclasses.FrozenInstanceError):
        topic.solved_problems = 3


@pytest.mark.unit
def test_company_from_dict_parses_problems():
    company = Company.from_dict(
        {
            "id": "google",
            "title": "Google",
            "totalProblems": 2,
            "solvedProblems": 1,
            "problems": [{"title": "Two Sum", "difficulty": "easy"}, {"difficulty": "Hard"}],
        }
    )

    assert company.problems == (
        Problem(difficulty=Difficulty.EASY, title="Two Sum"),
        Problem(difficulty=Difficulty.HARD),
    )
    assert company.difficulties == (Difficulty.EASY, Difficulty.HARD)


@pytest.mark.unit
def test_company_without_problems():
    company = Company.from_dict({"id": "meta", "title": "Meta", "totalProblems": 0, "solvedProblems": 0})
    assert company.problems == ()


@pytest.mark.unit
def test_missing_field_reports_record_and_key():
    with pytest.raises(InvalidCatalogStructureError) as exc_info:
        Catalog.from_dict(
            {
                "topics": [
                    {"id": "arrays", "title": "Arrays", "totalProblems": 1, "solvedProblems": 0},
                    {"id": "strings", "title": "Strings", "solvedProblems": 3},
                ]
            }
        )

    error = exc_info.value
    assert error.record_kind == "topic"
    assert error.index == 1
    assert error.key == "total_problems"
    assert "topic[1]" in str(error)


@pytest.mark.unit
@pytest.mark.parametrize("count", ["many", True, None, [3]])
def test_non_integer_counts_are_rejected(count):
    with pytest.raises(InvalidCatalogStructureError):
        Topic.from_dict({"id": "a", "title": "A", "totalProblems": count, "solvedProblems": 0})


@pytest.mark.unit
def test_unknown_problem_difficulty_is_rejected():
    with pytest.raises(InvalidCatalogStructureError) as exc_info:
        Company.from_dict(
            {
                "id": "google",
                "title": "Google",
                "totalProblems": 1,
                "solvedProblems": 0,
                "problems": [{"difficulty": "Impossible"}],
            }
        )
    assert exc_info.value.key == "difficulty"


@pytest.mark.unit
def test_problem_error_names_owning_company():
    with pytest.raises(InvalidCatalogStructureError) as exc_info:
        Catalog.from_dict(
            {
                "companies": [
                    {"id": "meta", "title": "Meta", "totalProblems": 0, "solvedProblems": 0},
                    {
                        "id": "google",
                        "title": "Google",
                        "totalProblems": 2,
                        "solvedProblems": 0,
                        "problems": [{"difficulty": "Easy"}, {"difficulty": "Impossible"}],
                    },
                ]
            }
        )

    error = exc_info.value
    assert error.record_kind == "company[1].problem"
    assert error.index == 1
    assert "Record: company[1].problem[1]" in str(error)


@pytest.mark.unit
def test_catalog_from_dict_missing_list_is_empty():
    catalog = Catalog.from_dict({"topics": []})

    assert catalog.topics == ()
    assert catalog.companies == ()


@pytest.mark.unit
@pytest.mark.parametrize("data", [{}, {"just a string": None}, {"chapters": []}])
def test_catalog_from_dict_rejects_mapping_without_lists(data):
    with pytest.raises(InvalidCatalogStructureError, match="neither"):
        Catalog.from_dict(data)


@pytest.mark.unit
def test_catalog_from_dict_rejects_non_mapping():
    with pytest.raises(InvalidCatalogStructureError):
        Catalog.from_dict([{"id": "arrays"}])

    with pytest.raises(InvalidCatalogStructureError):
        Catalog.from_dict({"topics": {"id": "arrays"}})


@pytest.mark.unit
def test_catalog_keeps_overcounted_records():
    """solved > total is a catalog precondition violation, loaded unchanged."""
    catalog = Catalog.from_dict(
        {"topics": [{"id": "odd", "title": "Odd", "totalProblems": 1, "solvedProblems": 4}]}
    )
    assert catalog.topics[0].solved_problems == 4
