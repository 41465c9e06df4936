"""Consistency checks for a client-supplied floor plan document."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from floornav.config import DEFAULT_SETTINGS, Settings
from floornav.models.floor import Floor

logger = logging.getLogger(__name__)


class PlanFloorSize(BaseModel):
    width: int
    height: int


class FloorPlanPayload(BaseModel):
    """The parts of a floor plan document that must agree with the floor."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    plan_floor_number: int = Field(alias="planFloorNumber")
    plan_floor_size: PlanFloorSize = Field(alias="planFloorSize")
    floor_wall_texture: str = Field(alias="floorWallTexture")
    floor_elevator_texture: str = Field(alias="floorElevatorTexture")
    floor_door_texture: str = Field(alias="floorDoorTexture")


class FloorPlanJSONValidator:
    def __init__(self, settings: Settings = DEFAULT_SETTINGS) -> None:
        self.settings = settings

    def is_floor_plan_valid(self, plan: dict | str, floor: Floor) -> bool:
        """True if the plan matches the floor's number and building size.

        The plan grid must be the building grid grown by the configured
        increments, and every texture must be a packaged image path.
        """
        try:
            if isinstance(plan, str):
                payload = FloorPlanPayload.model_validate_json(plan)
            else:
                payload = FloorPlanPayload.model_validate(plan)
        except ValidationError as e:
            logger.warning("Malformed floor plan: %d error(s)", e.error_count())
            return False

        if payload.plan_floor_number != floor.floor_number:
            return False

        dims = floor.building.dimensions
        if (
            payload.plan_floor_size.width != dims.width + self.settings.floor_plan_width_increment
            or payload.plan_floor_size.height
            != dims.length + self.settings.floor_plan_length_increment
        ):
            return False

        return all(
            self._is_texture_path(texture)
            for texture in (
                payload.floor_wall_texture,
                payload.floor_elevator_texture,
                payload.floor_door_texture,
            )
        )

    def _is_texture_path(self, texture: str) -> bool:
        return texture.startswith(self.settings.texture_prefix) and texture.endswith(
            self.settings.texture_suffixes
        )
