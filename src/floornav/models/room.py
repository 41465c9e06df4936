"""Room aggregate.

A room is an axis-aligned rectangle of cells on a floor, closed by walls
on every side except for a single door cell on its border.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from floornav.config import DEFAULT_SETTINGS
from floornav.models.floor import Floor
from floornav.models.geometry import Orientation, Position
from floornav.models.ids import generate_id

_ALPHANUMERIC_AND_SPACES = re.compile(r"^[A-Za-z0-9 ]+$")


class RoomCategory(str, Enum):
    """Room usage."""

    OFFICE = "OFFICE"
    AMPHITHEATER = "AMPHITHEATER"
    LABORATORY = "LABORATORY"
    OTHER = "OTHER"


class RoomDimensions(BaseModel):
    """Top-left and bottom-right cells of a room, both inclusive."""

    model_config = ConfigDict(frozen=True)

    initial_position: Position
    final_position: Position

    @model_validator(mode="after")
    def ordered_corners(self) -> RoomDimensions:
        i, f = self.initial_position, self.final_position
        if i.x_position == f.x_position and i.y_position == f.y_position:
            raise ValueError("Initial position cannot be equal to final position.")
        if i.x_position > f.x_position or i.y_position > f.y_position:
            raise ValueError("Initial position cannot be greater than final position.")
        return self

    def contains(self, x: int, y: int) -> bool:
        return (
            self.initial_position.x_position <= x <= self.final_position.x_position
            and self.initial_position.y_position <= y <= self.final_position.y_position
        )


class Room(BaseModel):
    id: str = Field(default_factory=generate_id, description="Domain id")
    name: str
    description: str = ""
    category: RoomCategory = RoomCategory.OTHER
    dimensions: RoomDimensions
    door_position: Position
    door_orientation: Orientation
    floor: Floor

    @field_validator("name")
    @classmethod
    def valid_name(cls, v: str, info: ValidationInfo) -> str:
        max_length = (info.context or {}).get("settings", DEFAULT_SETTINGS).room_name_max_length
        if not 1 <= len(v) <= max_length:
            raise ValueError(f"Room name must be between 1 and {max_length} characters.")
        if not _ALPHANUMERIC_AND_SPACES.match(v):
            raise ValueError("Room name must be alphanumeric.")
        if not v.strip():
            raise ValueError("Room name must contain at least one alphanumeric character.")
        return v.strip()

    @field_validator("description")
    @classmethod
    def valid_description(cls, v: str, info: ValidationInfo) -> str:
        max_length = (info.context or {}).get(
            "settings", DEFAULT_SETTINGS
        ).room_max_description_length
        if len(v) > max_length:
            raise ValueError(f"Room description must be at most {max_length} characters.")
        return v

    @model_validator(mode="after")
    def inside_building(self) -> Room:
        dims = self.floor.building.dimensions
        final = self.dimensions.final_position
        if final.x_position > dims.width - 1 or final.y_position > dims.length - 1:
            raise ValueError("Room dimensions are out of bounds.")
        return self
