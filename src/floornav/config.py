"""Configurable values shared by the models and services.

Defaults match the values the navigation backend ships with. A JSON file
with any subset of the fields can override them:

    settings = Settings.load("floornav.json")
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Range limits and floor plan conventions."""

    building_max_name_length: int = Field(default=50, ge=1)
    building_max_description_length: int = Field(default=255, ge=1)
    building_max_code_length: int = Field(default=5, ge=1)
    room_name_max_length: int = Field(default=50, ge=1)
    room_max_description_length: int = Field(default=250, ge=1)
    floor_max_description_length: int = Field(default=250, ge=1)
    min_floor_plan_length: int = Field(default=1, ge=0)
    elevator_min_x_position: int = 0
    elevator_min_y_position: int = 0
    elevator_max_brand_length: int = Field(default=50, ge=1)
    elevator_max_model_length: int = Field(default=50, ge=1)
    elevator_max_serial_number_length: int = Field(default=50, ge=1)
    elevator_max_description_length: int = Field(default=250, ge=1)
    # A floor plan grid is one cell larger than the building on each axis
    floor_plan_width_increment: int = 1
    floor_plan_length_increment: int = 1
    texture_prefix: str = "./textures"
    texture_suffixes: tuple[str, ...] = (".jpg", ".png", ".jpeg")

    @classmethod
    def load(cls, path: str | Path) -> Settings:
        """Load settings overrides from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())


DEFAULT_SETTINGS = Settings()
