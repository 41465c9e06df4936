"""Room door placement rules."""

from __future__ import annotations

import logging

from floornav.models.floor import Floor
from floornav.models.geometry import Orientation
from floornav.models.result import FailureType, Result
from floornav.repos.base import BuildingRepo
from floornav.services.position import PositionChecker

logger = logging.getLogger(__name__)


class DoorPositionChecker:
    """Decides whether a door can go at a given cell of a room.

    A valid door sits on the room's border, opens away from the room, opens
    onto a cell inside the building, and that cell is not taken by a room,
    elevator or passage.
    """

    def __init__(self, position_checker: PositionChecker, building_repo: BuildingRepo) -> None:
        self.position_checker = position_checker
        self.building_repo = building_repo

    async def is_position_valid(
        self,
        initial_x: int,
        initial_y: int,
        final_x: int,
        final_y: int,
        door_x: int,
        door_y: int,
        door_orientation: Orientation | str,
        floor: Floor,
    ) -> Result[bool]:
        on_vertical_edge = door_x in (initial_x, final_x) and initial_y <= door_y <= final_y
        on_horizontal_edge = door_y in (initial_y, final_y) and initial_x <= door_x <= final_x
        if not (on_vertical_edge or on_horizontal_edge):
            logger.error("Door is not in the border of the room.")
            return Result.fail("Door is not in the border of the room.")

        if isinstance(door_orientation, str):
            try:
                door_orientation = Orientation.from_wire(door_orientation)
            except ValueError:
                return Result.fail("Invalid Door Orientation.")

        out_x, out_y = door_orientation.door_cell(door_x, door_y)

        if initial_x <= out_x <= final_x and initial_y <= out_y <= final_y:
            return Result.fail("Invalid door orientation, it should face the outside of the room.")

        building = await self.building_repo.find_by_domain_id(floor.building.id)
        if building is None:
            return Result.fail("Building not found.", FailureType.ENTITY_DOES_NOT_EXIST)
        if not (0 <= out_x < building.dimensions.width and 0 <= out_y < building.dimensions.length):
            logger.error("Door is facing the outside of the building.")
            return Result.fail("Door is facing the outside of the building.")

        if not await self.position_checker.is_position_available(out_x, out_y, floor, None):
            logger.error("Door is facing a room, passage or elevator.")
            return Result.fail("Door is facing a room, passage or elevator.")

        return Result.ok(True)
