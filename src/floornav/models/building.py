"""Building aggregate.

A building fixes the grid every one of its floors is drawn on: floor
maps are (length + 1) rows by (width + 1) columns.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from floornav.config import DEFAULT_SETTINGS
from floornav.models.geometry import Coordinates
from floornav.models.ids import generate_id

_ALPHANUMERIC_AND_SPACES = re.compile(r"^[A-Za-z0-9 ]+$")


def _settings(info: ValidationInfo):
    return (info.context or {}).get("settings", DEFAULT_SETTINGS)


class BuildingDimensions(BaseModel):
    """Building footprint in grid cells."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=1, strict=True, description="Cells along x")
    length: int = Field(ge=1, strict=True, description="Cells along y")


class Building(BaseModel):
    """A building on the campus, identified by a short code (e.g. 'B')."""

    id: str = Field(default_factory=generate_id, description="Domain id")
    code: str = Field(description="Short human-readable building code")
    dimensions: BuildingDimensions
    name: str | None = None
    description: str | None = None

    @field_validator("code")
    @classmethod
    def valid_code(cls, v: str, info: ValidationInfo) -> str:
        if not v.strip():
            raise ValueError("Building Code cannot be empty.")
        max_length = _settings(info).building_max_code_length
        if len(v) > max_length:
            raise ValueError(f"Building Code must be between 1 and {max_length} characters.")
        if not _ALPHANUMERIC_AND_SPACES.match(v):
            raise ValueError("Building Code must only contain alphanumerics and spaces.")
        return v

    @field_validator("name")
    @classmethod
    def valid_name(cls, v: str | None, info: ValidationInfo) -> str | None:
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Building Name cannot be empty.")
        max_length = _settings(info).building_max_name_length
        if len(v) > max_length:
            raise ValueError(f"Building Name must be between 1 and {max_length} characters.")
        if not _ALPHANUMERIC_AND_SPACES.match(v):
            raise ValueError("Building Name must only contain alphanumerics and spaces.")
        return v

    @field_validator("description")
    @classmethod
    def valid_description(cls, v: str | None, info: ValidationInfo) -> str | None:
        if v is not None and len(v) > _settings(info).building_max_description_length:
            raise ValueError("Building Description is too long.")
        return v

    def is_coordinate_in_border(self, coordinate: Coordinates) -> bool:
        """True if the cell lies on the outermost ring of the building."""
        width, length = self.dimensions.width, self.dimensions.length
        if coordinate.x > width - 1 or coordinate.y > length - 1:
            return False
        return (
            coordinate.x == 0
            or coordinate.x == width - 1
            or coordinate.y == 0
            or coordinate.y == length - 1
        )
