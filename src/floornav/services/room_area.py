"""Area checks for placing a new room."""

from __future__ import annotations

from floornav.models.floor import Floor
from floornav.models.geometry import Orientation
from floornav.models.result import Result
from floornav.repos.base import ElevatorRepo, PassageRepo, RoomRepo


class RoomAreaChecker:
    def __init__(
        self, room_repo: RoomRepo, elevator_repo: ElevatorRepo, passage_repo: PassageRepo
    ) -> None:
        self.room_repo = room_repo
        self.elevator_repo = elevator_repo
        self.passage_repo = passage_repo

    async def check_if_area_is_available_for_room(
        self,
        initial_x: int,
        initial_y: int,
        final_x: int,
        final_y: int,
        door_x: int,
        door_y: int,
        door_orientation: Orientation,
        floor: Floor,
    ) -> Result[bool]:
        """Fail if the area overlaps another element or blocks a door.

        The new room may not overlap any room, elevator or passage, may not
        cover the cell in front of an existing room's door, and its own door
        may not open onto the same cell as an existing door.
        """
        area = (initial_x, initial_y, final_x, final_y, floor)
        if await self.room_repo.check_if_room_exist_in_area(*area):
            return Result.fail("A room already exists in the given area.")
        if await self.elevator_repo.check_if_elevator_exist_in_area(*area):
            return Result.fail("An elevator already exists in the given area.")
        if await self.passage_repo.check_if_passage_exist_in_area(*area):
            return Result.fail("A passage already exists in the given area.")

        new_out_cell = door_orientation.door_cell(door_x, door_y)

        for room in await self.room_repo.find_by_floor_id(floor.id):
            door = room.door_position
            out_x, out_y = room.door_orientation.door_cell(door.x_position, door.y_position)
            if initial_x <= out_x <= final_x and initial_y <= out_y <= final_y:
                return Result.fail("The room is blocking another's door.")
            if new_out_cell == (out_x, out_y):
                return Result.fail("The room is blocking another's door.")

        return Result.ok(True)
