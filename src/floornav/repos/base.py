"""Repository contracts consumed by the services.

Storage is somebody else's problem: services only see these async
interfaces, and get concrete repositories through their constructors.
"""

from __future__ import annotations

from typing import Protocol

from floornav.models.building import Building
from floornav.models.elevator import Elevator
from floornav.models.floor import Floor
from floornav.models.passage import Passage
from floornav.models.room import Room


class BuildingRepo(Protocol):
    async def save(self, building: Building) -> Building: ...

    async def find_by_domain_id(self, building_id: str) -> Building | None: ...

    async def find_by_code(self, code: str) -> Building | None: ...

    async def find_all(self) -> list[Building]: ...


class FloorRepo(Protocol):
    async def save(self, floor: Floor) -> Floor: ...

    async def find_by_domain_id(self, floor_id: str) -> Floor | None: ...

    async def find_by_building_id(self, building_id: str) -> list[Floor]: ...

    async def find_by_building_and_number(
        self, building_id: str, floor_number: int
    ) -> Floor | None: ...


class RoomRepo(Protocol):
    async def save(self, room: Room) -> Room: ...

    async def find_by_domain_id(self, room_id: str) -> Room | None: ...

    async def find_by_name(self, name: str) -> Room | None: ...

    async def find_all(self) -> list[Room]: ...

    async def find_by_floor_id(self, floor_id: str) -> list[Room]: ...

    async def check_cell_availability(self, x: int, y: int, floor: Floor) -> bool:
        """True if no room on the floor covers the cell."""
        ...

    async def check_if_room_exist_in_area(
        self, initial_x: int, initial_y: int, final_x: int, final_y: int, floor: Floor
    ) -> bool:
        """True if some room on the floor overlaps the area."""
        ...


class ElevatorRepo(Protocol):
    async def save(self, elevator: Elevator) -> Elevator: ...

    async def find_all(self) -> list[Elevator]: ...

    async def find_by_domain_id(self, elevator_id: str) -> Elevator | None: ...

    async def find_by_building_id(self, building_id: str) -> list[Elevator]: ...

    async def find_all_by_floor_id(self, floor_id: str) -> list[Elevator]:
        """Elevators serving the floor. The returned list is the caller's to mutate."""
        ...

    async def find_by_unique_number_in_building(
        self, unique_number: int, building_id: str
    ) -> Elevator | None: ...

    async def check_if_elevator_exist_in_area(
        self, initial_x: int, initial_y: int, final_x: int, final_y: int, floor: Floor
    ) -> bool: ...


class PassageRepo(Protocol):
    async def save(self, passage: Passage) -> Passage: ...

    async def find_all(self) -> list[Passage]: ...

    async def find_by_domain_id(self, passage_id: str) -> Passage | None: ...

    async def find_passages_by_floor_id(self, floor_id: str) -> list[Passage]: ...

    async def is_there_a_passage_in_floor_coordinates(
        self, x: int, y: int, floor_id: str, passage_id: str | None
    ) -> bool:
        """True if a passage other than passage_id has an end cell at (x, y) on the floor."""
        ...

    async def check_if_passage_exist_in_area(
        self, initial_x: int, initial_y: int, final_x: int, final_y: int, floor: Floor
    ) -> bool: ...
