"""In-memory repositories.

Dictionary-backed implementations of the repository contracts, used by
the CLI (through a site file) and by tests. Query methods reproduce the
semantics of the document-store queries the services were written against.
"""

from __future__ import annotations

from floornav.models.building import Building
from floornav.models.elevator import Elevator
from floornav.models.floor import Floor
from floornav.models.passage import Passage, PassagePoint
from floornav.models.room import Room


class InMemoryBuildingRepo:
    def __init__(self) -> None:
        self._items: dict[str, Building] = {}

    async def save(self, building: Building) -> Building:
        self._items[building.id] = building
        return building

    async def find_by_domain_id(self, building_id: str) -> Building | None:
        return self._items.get(building_id)

    async def find_by_code(self, code: str) -> Building | None:
        return next((b for b in self._items.values() if b.code == code), None)

    async def find_all(self) -> list[Building]:
        return list(self._items.values())


class InMemoryFloorRepo:
    def __init__(self) -> None:
        self._items: dict[str, Floor] = {}

    async def save(self, floor: Floor) -> Floor:
        self._items[floor.id] = floor
        return floor

    async def find_by_domain_id(self, floor_id: str) -> Floor | None:
        return self._items.get(floor_id)

    async def find_by_building_id(self, building_id: str) -> list[Floor]:
        return [f for f in self._items.values() if f.building.id == building_id]

    async def find_by_building_and_number(
        self, building_id: str, floor_number: int
    ) -> Floor | None:
        return next(
            (
                f
                for f in self._items.values()
                if f.building.id == building_id and f.floor_number == floor_number
            ),
            None,
        )


class InMemoryRoomRepo:
    def __init__(self) -> None:
        self._items: dict[str, Room] = {}

    async def save(self, room: Room) -> Room:
        self._items[room.id] = room
        return room

    async def find_by_domain_id(self, room_id: str) -> Room | None:
        return self._items.get(room_id)

    async def find_by_name(self, name: str) -> Room | None:
        return next((r for r in self._items.values() if r.name == name), None)

    async def find_all(self) -> list[Room]:
        return list(self._items.values())

    async def find_by_floor_id(self, floor_id: str) -> list[Room]:
        return [r for r in self._items.values() if r.floor.id == floor_id]

    async def check_cell_availability(self, x: int, y: int, floor: Floor) -> bool:
        rooms = await self.find_by_floor_id(floor.id)
        return not any(r.dimensions.contains(x, y) for r in rooms)

    async def check_if_room_exist_in_area(
        self, initial_x: int, initial_y: int, final_x: int, final_y: int, floor: Floor
    ) -> bool:
        for room in await self.find_by_floor_id(floor.id):
            dims = room.dimensions
            # Either corner of the area inside the room, or the room inside the area
            if dims.contains(initial_x, initial_y) or dims.contains(final_x, final_y):
                return True
            if (
                dims.initial_position.x_position >= initial_x
                and dims.final_position.x_position <= final_x
                and dims.initial_position.y_position >= initial_y
                and dims.final_position.y_position <= final_y
            ):
                return True
        return False


class InMemoryElevatorRepo:
    def __init__(self) -> None:
        self._items: dict[str, Elevator] = {}

    async def save(self, elevator: Elevator) -> Elevator:
        self._items[elevator.id] = elevator
        return elevator

    async def find_all(self) -> list[Elevator]:
        return list(self._items.values())

    async def find_by_domain_id(self, elevator_id: str) -> Elevator | None:
        return self._items.get(elevator_id)

    async def find_by_building_id(self, building_id: str) -> list[Elevator]:
        return [e for e in self._items.values() if e.building.id == building_id]

    async def find_all_by_floor_id(self, floor_id: str) -> list[Elevator]:
        return [e for e in self._items.values() if any(f.id == floor_id for f in e.floors)]

    async def find_by_unique_number_in_building(
        self, unique_number: int, building_id: str
    ) -> Elevator | None:
        return next(
            (
                e
                for e in self._items.values()
                if e.unique_number == unique_number and e.building.id == building_id
            ),
            None,
        )

    async def check_if_elevator_exist_in_area(
        self, initial_x: int, initial_y: int, final_x: int, final_y: int, floor: Floor
    ) -> bool:
        return any(
            initial_x <= e.position.xposition <= final_x
            and initial_y <= e.position.yposition <= final_y
            for e in await self.find_all_by_floor_id(floor.id)
        )


class InMemoryPassageRepo:
    def __init__(self) -> None:
        self._items: dict[str, Passage] = {}

    async def save(self, passage: Passage) -> Passage:
        self._items[passage.id] = passage
        return passage

    async def find_all(self) -> list[Passage]:
        return list(self._items.values())

    async def find_by_domain_id(self, passage_id: str) -> Passage | None:
        return self._items.get(passage_id)

    async def find_passages_by_floor_id(self, floor_id: str) -> list[Passage]:
        return [
            p
            for p in self._items.values()
            if p.start_point.floor.id == floor_id or p.end_point.floor.id == floor_id
        ]

    async def is_there_a_passage_in_floor_coordinates(
        self, x: int, y: int, floor_id: str, passage_id: str | None
    ) -> bool:
        for passage in await self.find_passages_by_floor_id(floor_id):
            if passage.id == passage_id:
                continue
            if any(
                point.floor.id == floor_id and point.occupies(x, y)
                for point in (passage.start_point, passage.end_point)
            ):
                return True
        return False

    async def check_if_passage_exist_in_area(
        self, initial_x: int, initial_y: int, final_x: int, final_y: int, floor: Floor
    ) -> bool:
        def in_area(point: PassagePoint) -> bool:
            return any(
                initial_x <= c.x <= final_x and initial_y <= c.y <= final_y
                for c in (point.first_coordinates, point.last_coordinates)
            )

        return any(
            point.floor.id == floor.id and in_area(point)
            for passage in await self.find_passages_by_floor_id(floor.id)
            for point in (passage.start_point, passage.end_point)
        )
