"""Cell occupancy checks for placing elements on a floor.

Every checker answers the same question: is cell (x, y) of this floor free
of the kind of element it knows about? exclude_id names an element to
ignore, so an element being moved does not collide with itself.

CompositePositionChecker ANDs the room, elevator and passage checkers and
is what the placement rules call.
"""

from __future__ import annotations

import logging
from typing import Protocol

from floornav.models.floor import Floor
from floornav.models.geometry import Orientation
from floornav.models.result import Result
from floornav.repos.base import ElevatorRepo, PassageRepo, RoomRepo

logger = logging.getLogger(__name__)


class PositionChecker(Protocol):
    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool: ...


class RoomPositionChecker:
    """Free unless some room's rectangle covers the cell. Rooms are never excluded."""

    def __init__(self, room_repo: RoomRepo) -> None:
        self.room_repo = room_repo

    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool:
        return await self.room_repo.check_cell_availability(x, y, floor)


class PassagePositionChecker:
    """Free unless the cell is an end cell of another passage on this floor."""

    def __init__(self, passage_repo: PassageRepo) -> None:
        self.passage_repo = passage_repo

    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool:
        return not await self.passage_repo.is_there_a_passage_in_floor_coordinates(
            x, y, floor.id, exclude_id
        )


class ElevatorPositionChecker:
    """Free unless the cell is an elevator shaft or the cell in front of its door."""

    def __init__(self, elevator_repo: ElevatorRepo) -> None:
        self.elevator_repo = elevator_repo

    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool:
        elevators = await self.elevator_repo.find_all_by_floor_id(floor.id)
        elevators = [e for e in elevators if e.id != exclude_id]

        for elevator in elevators:
            own = (elevator.position.xposition, elevator.position.yposition)
            if (x, y) == own or (x, y) == elevator.door_cell():
                return False
        return True


class CompositePositionChecker:
    """A cell is available only if every delegate says so."""

    def __init__(
        self,
        room_checker: PositionChecker,
        elevator_checker: PositionChecker,
        passage_checker: PositionChecker,
    ) -> None:
        self.room_checker = room_checker
        self.elevator_checker = elevator_checker
        self.passage_checker = passage_checker

    @classmethod
    def from_repos(
        cls, room_repo: RoomRepo, elevator_repo: ElevatorRepo, passage_repo: PassageRepo
    ) -> CompositePositionChecker:
        return cls(
            RoomPositionChecker(room_repo),
            ElevatorPositionChecker(elevator_repo),
            PassagePositionChecker(passage_repo),
        )

    async def is_position_available(
        self, x: int, y: int, floor: Floor, exclude_id: str | None
    ) -> bool:
        return (
            await self.room_checker.is_position_available(x, y, floor, exclude_id)
            and await self.elevator_checker.is_position_available(x, y, floor, exclude_id)
            and await self.passage_checker.is_position_available(x, y, floor, exclude_id)
        )


async def check_elevator_placement(
    checker: PositionChecker,
    x: int,
    y: int,
    orientation: Orientation,
    floor: Floor,
    exclude_id: str | None = None,
) -> Result[bool]:
    """Check both the shaft cell and the door cell of an elevator placement."""
    if not await checker.is_position_available(x, y, floor, exclude_id):
        logger.info("Elevator cell (%d, %d) is taken on floor %s", x, y, floor.id)
        return Result.fail("The position is not available in the floor.")

    door_x, door_y = orientation.door_cell(x, y)
    if not await checker.is_position_available(door_x, door_y, floor, exclude_id):
        logger.info("Elevator door cell (%d, %d) is taken on floor %s", door_x, door_y, floor.id)
        return Result.fail("Position not available using this orientation.")

    return Result.ok(True)
