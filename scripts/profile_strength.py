#!/usr/bin/env python3
"""
Profile Strength CLI

Scores a profile file and shows which sections contribute to the score.

Examples:\n

    profile_strength.py data/profile.yaml            # Score and breakdown

    profile_strength.py data/profile.yaml --log      # Also write a session log
"""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from studymate.contexts.profile import (
    InvalidProfileStructureError,
    ProfileData,
    missing_sections,
    score,
    score_breakdown,
)
from studymate.contexts.profile.logger import _log_info, setup_profile_logger
from studymate.utils.logger import session_dir
from studymate.utils.report_formatter import Column, TableFormatter, progress_bar

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Score profile strength.", add_completion=False)


@app.command()
def main(
    profile_path: Annotated[Path, typer.Argument(help="Profile YAML/JSON file")],
    log: Annotated[bool, typer.Option("--log", help="Write a session log under $LOGS_PATH")] = False,
):
    """Print the profile strength score and per-section breakdown."""
    if log:
        log_dir = session_dir(LOGS_PATH, "profile")
        setup_profile_logger(log_dir, profile_path=profile_path)

    try:
        profile = ProfileData.from_file(profile_path)
    except FileNotFoundError:
        typer.echo(f"ERROR: Profile not found: {profile_path}", err=True)
        raise typer.Exit(1)
    except InvalidProfileStructureError as e:
        typer.echo(f"ERROR: Invalid profile {profile_path}:\n{e}", err=True)
        raise typer.Exit(1)

    strength = score(profile)

    report = TableFormatter([Column("Section", 20), Column("Weight", 7, ">"), Column("Points", 7, ">")])
    report.add_section_header(f"Profile Strength: {strength}% {progress_bar(strength)}")
    report.add_table_header().add_separator()
    for entry in score_breakdown(profile):
        report.add_row([entry.section, entry.weight, entry.points])

    missing = missing_sections(profile)
    report.add_separator()
    report.add_text(f"Missing: {', '.join(missing)}" if missing else "All sections complete")

    typer.echo(report.render())
    _log_info(f"Scored {profile_path}: {strength}%")


if __name__ == "__main__":
    app()
