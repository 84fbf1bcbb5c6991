"""Typer CLI running the pattern illustrations."""

from __future__ import annotations

import json
import logging

import typer
from pydantic import ValidationError

from patternbook.domain import HotDog, MissingAttributeError, PrototypeNotFoundError, Workout

from .deps import get_container

app = typer.Typer(help="patternbook command-line interface")
workout_app = typer.Typer(help="Prototype cloning with workouts")
app.add_typer(workout_app, name="workout")


@app.callback()
def configure() -> None:
    """Configure logging from the resolved settings."""

    settings = get_container().settings
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Log Level:\t" + settings.log_level)
    typer.echo(f"Echo Construction:\t{settings.echo_construction}")
    typer.echo("Default Bread:\t" + settings.default_bread)


@app.command("hotdog")
def hotdog(
    bread: str | None = typer.Argument(None, help="Bread to build on"),
    ketchup: bool = typer.Option(False, "--ketchup", help="Add ketchup"),
    mustard: bool = typer.Option(False, "--mustard", help="Add mustard"),
    kraut: bool = typer.Option(False, "--kraut", help="Add kraut"),
) -> None:
    """Build a hot dog step by step and print it as JSON."""

    container = get_container()
    try:
        item = HotDog.create(bread if bread is not None else container.settings.default_bread)
    except MissingAttributeError as exc:
        typer.echo(f"Cannot build hot dog: {exc}")
        raise typer.Exit(code=1) from exc

    if ketchup:
        item.add_ketchup()
    if mustard:
        item.add_mustard()
    if kraut:
        item.add_kraut()
    typer.echo(json.dumps(item.snapshot()))


def _render(workout: Workout) -> str:
    payload = workout.model_dump(mode="json")
    payload["start"] = workout.start_workout()
    return json.dumps(payload, sort_keys=True)


@workout_app.command("list")
def workout_list() -> None:
    """List registered workout prototypes."""

    registry = get_container().prototype_registry
    for name, prototype in registry.items():
        typer.echo(f"{name}\t{prototype.name or '(unnamed)'}\tincline={prototype.incline}")


@workout_app.command("clone")
def workout_clone(
    prototype: str,
    name: str | None = typer.Option(None, help="Override the workout name"),
    incline: bool | None = typer.Option(None, "--incline/--no-incline", help="Override incline"),
    note: list[str] | None = typer.Option(None, "--note", help="Replace notes (repeatable)"),
) -> None:
    """Clone a registered prototype, overlaying the given attributes."""

    registry = get_container().prototype_registry
    overlay: dict[str, object] = {}
    if name is not None:
        overlay["name"] = name
    if incline is not None:
        overlay["incline"] = incline
    if note:
        overlay["notes"] = tuple(note)

    try:
        workout = registry.clone(prototype, **overlay)
    except PrototypeNotFoundError as exc:
        choices = ", ".join(registry.names()) or "none"
        typer.echo(f"{exc}. Available: {choices}")
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        typer.echo(f"Invalid overlay: {exc.errors()[0]['msg']}")
        raise typer.Exit(code=1) from exc

    typer.echo(_render(workout))
