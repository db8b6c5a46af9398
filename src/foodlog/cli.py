"""Command-line interface for the food-log normalizer."""

from __future__ import annotations

import json
import sys
from typing import Optional

import typer

from foodlog.config import get_settings
from foodlog.integrations.food_diary import FoodDiaryError, build_food_diary_client
from foodlog.normalize import (
    NormalizationError,
    extract_best_effort,
    find_follow_up_questions,
    normalize_items,
    serialize_items,
)

app = typer.Typer(help="Normalize model nutrition breakdowns into food-diary entries.")


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read()


@app.command()
def normalize(
    path: str = typer.Argument(..., help="File holding the model response ('-' for stdin)."),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON."),
) -> None:
    """
    Strictly validate a model response and print the canonical diary text.
    """
    try:
        records = normalize_items(_read_text(path))
    except NormalizationError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps([record.model_dump() for record in records], indent=2))
    else:
        typer.echo(serialize_items(records))


@app.command()
def extract(
    path: str = typer.Argument(..., help="File holding the model response ('-' for stdin)."),
    description: str = typer.Option("", "--description", help="The user's meal description."),
    entry_date: Optional[str] = typer.Option(None, "--date", help="Diary date (MM/DD)."),
    meal: Optional[str] = typer.Option(None, "--meal", help="Breakfast, Lunch, Dinner or Snacks."),
    brand: Optional[str] = typer.Option(None, "--brand", help="Restaurant or product brand."),
    as_json: bool = typer.Option(False, "--json", help="Print records as JSON."),
) -> None:
    """
    Best-effort extraction. Output is provisional and may contain placeholder nutrition.
    """
    text = _read_text(path)
    settings = get_settings()
    records = extract_best_effort(
        text,
        description=description,
        entry_date=entry_date,
        meal=meal,
        brand=brand,
        icon_threshold=settings.icon_match_threshold,
    )
    questions = find_follow_up_questions(text)

    if as_json:
        payload = {
            "provisional": True,
            "items": [record.model_dump() for record in records],
            "questions": questions,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.secho(
        "PROVISIONAL: best-effort values, not validated nutrition data.",
        fg=typer.colors.YELLOW,
        err=True,
    )
    for question in questions:
        typer.secho(f"Model asked: {question}", fg=typer.colors.YELLOW, err=True)
    typer.echo(serialize_items(records))


@app.command("log")
def log_food(
    path: str = typer.Argument(..., help="File holding the model response ('-' for stdin)."),
    log_water: bool = typer.Option(False, "--log-water", help="Also log hydration."),
) -> None:
    """Strictly normalize a model response and submit it to the food diary."""

    client = build_food_diary_client()
    if client is None:
        typer.secho("FOODLOG_DIARY_BASE_URL is not configured.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    try:
        records = normalize_items(_read_text(path))
    except NormalizationError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    try:
        result = client.log_records(records, log_water=log_water)
    except FoodDiaryError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(result.message)
    if not result.success:
        typer.echo(json.dumps(result.verification, indent=2))
        raise typer.Exit(code=1)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for the ``foodlog`` script."""
    app(prog_name="foodlog", args=argv)


if __name__ == "__main__":
    main()
