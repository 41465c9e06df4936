"""floornav CLI.

Usage:
    python -m floornav <command> <site.json> <building> <floor> [options]

Every command loads a site file into in-memory repositories, runs one
service and prints JSON to stdout: {"ok": true, ...} on success,
{"ok": false, "error": ...} with exit code 1 otherwise.
"""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from floornav.config import DEFAULT_SETTINGS, Settings
from floornav.models.floor import Floor
from floornav.models.ids import is_valid_id
from floornav.repos.site import Site, load_site
from floornav.services.floor_map import FloorMapGenerator
from floornav.services.floor_plan_validator import FloorPlanJSONValidator
from floornav.services.position import CompositePositionChecker

app = typer.Typer(
    name="floornav",
    help="floornav: floor maps and position checks for indoor navigation.",
    no_args_is_help=True,
)

_state: dict = {"settings": DEFAULT_SETTINGS}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(error: str) -> None:
    _output({"ok": False, "error": error})
    raise typer.Exit(1)


def _load(site_path: Path, building: str, floor_number: int) -> tuple[Site, Floor]:
    """Load the site file and look up one floor of it."""
    if not site_path.exists():
        _fail(f"Site file not found: {site_path}")
    try:
        site = asyncio.run(load_site(site_path, _state["settings"]))
    except (ValidationError, ValueError) as e:
        _fail(f"Invalid site file: {e}")
    floor = asyncio.run(site.find_floor(building, floor_number))
    if floor is None:
        _fail(f"Floor {floor_number} of building '{building}' not found")
    return site, floor


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings JSON file"),
):
    """Configure logging and settings for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if config is not None:
        if not config.exists():
            _fail(f"Config file not found: {config}")
        try:
            _state["settings"] = Settings.load(config)
        except ValidationError as e:
            _fail(f"Invalid config file: {e}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command("map")
def map_cmd(
    site_path: Path = typer.Argument(..., help="Site JSON file"),
    building: str = typer.Argument(..., help="Building code"),
    floor_number: int = typer.Argument(..., help="Floor number"),
):
    """Generate the tile map of a floor."""
    site, floor = _load(site_path, building, floor_number)
    generator = FloorMapGenerator(site.rooms, site.elevators, site.passages)
    floor_map = asyncio.run(generator.calculate_floor_map(floor))
    _output({"ok": True, "floorMap": floor_map.to_wire()})


@app.command("check-position")
def check_position(
    site_path: Path = typer.Argument(..., help="Site JSON file"),
    building: str = typer.Argument(..., help="Building code"),
    floor_number: int = typer.Argument(..., help="Floor number"),
    x: int = typer.Argument(..., help="Cell x"),
    y: int = typer.Argument(..., help="Cell y"),
    exclude: Optional[str] = typer.Option(None, "--exclude", "-e", help="Element id to ignore"),
):
    """Check whether a cell is free of rooms, elevators and passages."""
    if exclude is not None and not is_valid_id(exclude):
        _fail(f"Invalid element id: {exclude}")
    site, floor = _load(site_path, building, floor_number)
    checker = CompositePositionChecker.from_repos(site.rooms, site.elevators, site.passages)
    available = asyncio.run(checker.is_position_available(x, y, floor, exclude))
    _output({"ok": True, "x": x, "y": y, "available": available})


@app.command("validate-plan")
def validate_plan(
    site_path: Path = typer.Argument(..., help="Site JSON file"),
    building: str = typer.Argument(..., help="Building code"),
    floor_number: int = typer.Argument(..., help="Floor number"),
    plan_path: Path = typer.Argument(..., help="Floor plan JSON file"),
):
    """Check a floor plan document against its floor and building."""
    _, floor = _load(site_path, building, floor_number)
    if not plan_path.exists():
        _fail(f"Floor plan not found: {plan_path}")
    validator = FloorPlanJSONValidator(_state["settings"])
    valid = validator.is_floor_plan_valid(plan_path.read_text(), floor)
    _output({"ok": True, "valid": valid})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app()
