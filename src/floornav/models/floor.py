"""Floor aggregate."""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from floornav.config import DEFAULT_SETTINGS, Settings
from floornav.models.building import Building
from floornav.models.geometry import Coordinates
from floornav.models.ids import generate_id
from floornav.models.result import Result


class Floor(BaseModel):
    """A floor of a building.

    The floor number is unique within its building; that uniqueness is
    checked by whoever saves floors, not here. The floor plan is the raw
    JSON document handed to the client renderer.
    """

    id: str = Field(default_factory=generate_id, description="Domain id")
    building: Building
    floor_number: int = Field(strict=True)
    description: str | None = None
    floor_plan: str | None = None

    @field_validator("description")
    @classmethod
    def valid_description(cls, v: str | None, info: ValidationInfo) -> str | None:
        settings = (info.context or {}).get("settings", DEFAULT_SETTINGS)
        return _check_description(v, settings)

    @field_validator("floor_plan")
    @classmethod
    def valid_plan(cls, v: str | None, info: ValidationInfo) -> str | None:
        settings = (info.context or {}).get("settings", DEFAULT_SETTINGS)
        return _check_plan(v, settings)

    # ── Mutators ──────────────────────────────────────────────────────

    def update_number(self, floor_number: int) -> Result[None]:
        if isinstance(floor_number, bool) or not isinstance(floor_number, int):
            return Result.fail("Floor Number must be an integer value.")
        self.floor_number = floor_number
        return Result.ok()

    def update_description(
        self, description: str, settings: Settings = DEFAULT_SETTINGS
    ) -> Result[None]:
        try:
            self.description = _check_description(description, settings)
        except ValueError as e:
            return Result.fail(str(e))
        return Result.ok()

    def update_plan(self, floor_plan: str, settings: Settings = DEFAULT_SETTINGS) -> Result[None]:
        try:
            self.floor_plan = _check_plan(floor_plan, settings)
        except ValueError as e:
            return Result.fail(str(e))
        return Result.ok()

    # ── Queries ───────────────────────────────────────────────────────

    def are_coordinates_in_border(self, first: Coordinates, last: Coordinates) -> bool:
        """True if both cells lie on the building's outer ring."""
        return self.building.is_coordinate_in_border(
            first
        ) and self.building.is_coordinate_in_border(last)


def _check_description(v: str | None, settings: Settings) -> str | None:
    if v is None:
        return v
    if not isinstance(v, str) or not v.strip():
        raise ValueError("Floor Description cannot be empty.")
    if len(v) > settings.floor_max_description_length:
        raise ValueError(
            f"Floor Description must be at most {settings.floor_max_description_length} characters."
        )
    return v


def _check_plan(v: str | None, settings: Settings) -> str | None:
    if v is None:
        return v
    if not isinstance(v, str):
        raise ValueError("Floor Plan is not a string.")
    if len(v) < settings.min_floor_plan_length:
        raise ValueError("Floor Plan is empty")
    return v
