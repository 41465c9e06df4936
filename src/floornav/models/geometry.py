"""Grid primitives for floor-relative positions.

All coordinates are integer cell indices on a floor: x runs along the
building width (columns), y along the building length (rows), with (0, 0)
the top-left cell.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from floornav.config import DEFAULT_SETTINGS


class Orientation(Enum):
    """Facing direction of an elevator or a room door."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"

    @classmethod
    def from_wire(cls, value: str) -> Orientation:
        """Parse the wire form ("north", "NORTH", ...)."""
        if not isinstance(value, str):
            raise ValueError(f"Invalid orientation: {value!r}")
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid orientation: {value!r}") from None

    def to_wire(self) -> str:
        return self.value

    def door_cell(self, x: int, y: int) -> tuple[int, int]:
        """The cell directly in front of (x, y) when facing this way."""
        dx, dy = _DOOR_OFFSETS[self]
        return x + dx, y + dy


_DOOR_OFFSETS: dict[Orientation, tuple[int, int]] = {
    Orientation.NORTH: (0, -1),
    Orientation.SOUTH: (0, 1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}


class Coordinates(BaseModel):
    """A single cell on a floor. Used for passage endpoints."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0, strict=True)
    y: int = Field(ge=0, strict=True)

    def equals(self, other: Coordinates) -> bool:
        return self.x == other.x and self.y == other.y

    def as_list(self) -> list[int]:
        return [self.x, self.y]


class Position(BaseModel):
    """A room corner or door cell."""

    model_config = ConfigDict(frozen=True)

    x_position: int = Field(ge=0, strict=True)
    y_position: int = Field(ge=0, strict=True)


class ElevatorPosition(BaseModel):
    """Cell occupied by an elevator shaft.

    The lower bound for each axis comes from the settings passed in the
    validation context, falling back to the package defaults:

        ElevatorPosition.model_validate(data, context={"settings": s})
    """

    model_config = ConfigDict(frozen=True)

    xposition: int = Field(strict=True)
    yposition: int = Field(strict=True)

    @field_validator("xposition", "yposition")
    @classmethod
    def above_minimum(cls, v: int, info: ValidationInfo) -> int:
        settings = (info.context or {}).get("settings", DEFAULT_SETTINGS)
        minimum = (
            settings.elevator_min_x_position
            if info.field_name == "xposition"
            else settings.elevator_min_y_position
        )
        if v < minimum:
            raise ValueError(f"Elevator positions must be greater than or equal to {minimum}")
        return v

    def door_cell(self, orientation: Orientation) -> tuple[int, int]:
        return orientation.door_cell(self.xposition, self.yposition)
