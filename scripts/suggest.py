#!/usr/bin/env python3
"""
Learning Suggestions CLI

Prints personalized learning suggestions for the struggle areas given.

Examples:\n

    suggest.py "Edge Cases" "Algorithm Logic"

    suggest.py --list                       # Show the struggle-area taxonomy
"""

from typing import List, Optional

import typer
from typing_extensions import Annotated

from studymate.contexts.feedback import StruggleArea, suggestion_for, suggestions_for

app = typer.Typer(help="Suggest learning steps for struggle areas.", add_completion=False)


@app.command()
def main(
    areas: Annotated[Optional[List[str]], typer.Argument(help="Struggle areas")] = None,
    list_areas: Annotated[bool, typer.Option("--list", help="List known struggle areas")] = False,
):
    """Print suggestions in taxonomy order."""
    if list_areas:
        for area in StruggleArea:
            marker = "*" if suggestion_for(area) else " "
            typer.echo(f"{marker} {area.value}")
        return

    areas = areas or []
    unknown = [a for a in areas if StruggleArea.coerce(a) is None]
    for area in unknown:
        typer.echo(f"WARNING: Unknown struggle area ignored: {area}", err=True)

    suggestions = suggestions_for(areas)
    if not suggestions:
        typer.echo("No suggestions for the selected areas")
        return

    for suggestion in suggestions:
        typer.echo(suggestion)


if __name__ == "__main__":
    app()
