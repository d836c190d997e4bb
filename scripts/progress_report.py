#!/usr/bin/env python3
"""
DSA Progress Report CLI

Prints per-topic and per-company progress for a catalog file, plus the
sum-weighted overall figures shown on the dashboard.

Examples:\n

    progress_report.py data/catalog.yaml                      # Full report

    progress_report.py data/catalog.yaml --query goo          # Companies matching "goo"

    progress_report.py data/catalog.yaml -d hard --log        # Hard problems only, log session
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from studymate.contexts.catalog import Catalog, Difficulty, InvalidCatalogStructureError
from studymate.contexts.progress import (
    dashboard_progress,
    entity_progress,
    filter_companies,
    recent_activity,
    summarize_progress,
)
from studymate.contexts.progress.logger import _log_info, setup_progress_logger
from studymate.utils.filtering import ALL_DIFFICULTIES
from studymate.utils.logger import session_dir
from studymate.utils.report_formatter import Column, TableFormatter, progress_bar

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
CATALOG_PATH = Path(os.getenv("CATALOG_PATH", "data/catalog.yaml"))

COLUMNS = [
    Column("Title", 24),
    Column("Solved", 7, ">"),
    Column("Total", 6, ">"),
    Column("Progress", 8, ">"),
    Column("", 22),
]

app = typer.Typer(help="Report DSA progress for a catalog file.", add_completion=False)


def _add_entities(report: TableFormatter, title: str, entities) -> None:
    report.add_section_header(title).add_table_header().add_separator()
    if not entities:
        report.add_text("  (none)")
    for entity in entities:
        percent = entity_progress(entity)
        report.add_row(
            [
                entity.title,
                entity.solved_problems,
                entity.total_problems,
                f"{percent}%",
                progress_bar(percent),
            ]
        )
    summary = summarize_progress(entities)
    report.add_separator()
    report.add_text(f"Overall: {summary.solved}/{summary.total} solved ({summary.percent}%)")
    report.add_blank_line()


@app.command()
def main(
    catalog_path: Annotated[
        Optional[Path],
        typer.Argument(help="Catalog YAML/JSON file (default: $CATALOG_PATH)"),
    ] = None,
    query: Annotated[str, typer.Option("--query", "-q", help="Company title search text")] = "",
    difficulty: Annotated[
        str,
        typer.Option("--difficulty", "-d", help="Easy, Medium, Hard or all"),
    ] = ALL_DIFFICULTIES,
    log: Annotated[bool, typer.Option("--log", help="Write a session log under $LOGS_PATH")] = False,
):
    """Print topic, company and dashboard progress."""
    catalog_path = catalog_path or CATALOG_PATH

    if difficulty.lower() != ALL_DIFFICULTIES:
        try:
            difficulty = Difficulty.parse(difficulty).value
        except ValueError as e:
            typer.echo(f"ERROR: {e}", err=True)
            raise typer.Exit(1)

    if log:
        log_dir = session_dir(LOGS_PATH, "progress")
        setup_progress_logger(log_dir, catalog_path=catalog_path)

    try:
        catalog = Catalog.from_file(catalog_path)
    except FileNotFoundError:
        typer.echo(f"ERROR: Catalog not found: {catalog_path}", err=True)
        raise typer.Exit(1)
    except InvalidCatalogStructureError as e:
        typer.echo(f"ERROR: Invalid catalog {catalog_path}:\n{e}", err=True)
        raise typer.Exit(1)

    companies = filter_companies(catalog.companies, query, difficulty)

    report = TableFormatter(COLUMNS)
    _add_entities(report, "DSA Topics", catalog.topics)
    _add_entities(
        report,
        f"Companies (query={query!r}, difficulty={difficulty}): {len(companies)} shown",
        companies,
    )

    dashboard = dashboard_progress(catalog.topics, catalog.companies)
    report.add_section_header("Dashboard")
    report.add_text(
        f"Overall DSA progress: {dashboard.solved}/{dashboard.total} solved ({dashboard.percent}%)"
    )
    for entry in recent_activity(catalog.topics, catalog.companies):
        report.add_text(f"  [{entry.kind}] {entry.name}: {entry.solved}/{entry.total} ({entry.progress}%)")

    typer.echo(report.render())
    _log_info(f"Reported {len(catalog.topics)} topics, {len(companies)} companies ({dashboard.percent}% overall)")


if __name__ == "__main__":
    app()
