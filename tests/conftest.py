"""Shared fixtures: building A (floors 1 and 2) and building B (floor 1), both 10x10."""

import asyncio

import pytest

from floornav.models.building import Building, BuildingDimensions
from floornav.models.elevator import Elevator
from floornav.models.floor import Floor
from floornav.models.geometry import Coordinates, ElevatorPosition, Orientation, Position
from floornav.models.passage import Passage, PassagePoint
from floornav.models.room import Room, RoomDimensions
from floornav.repos.memory import (
    InMemoryBuildingRepo,
    InMemoryElevatorRepo,
    InMemoryPassageRepo,
    InMemoryRoomRepo,
)


@pytest.fixture
def building() -> Building:
    return Building(code="A", name="Main", dimensions=BuildingDimensions(width=10, length=10))


@pytest.fixture
def other_building() -> Building:
    return Building(code="B", dimensions=BuildingDimensions(width=10, length=10))


@pytest.fixture
def floor(building) -> Floor:
    return Floor(building=building, floor_number=1)


@pytest.fixture
def upper_floor(building) -> Floor:
    return Floor(building=building, floor_number=2)


@pytest.fixture
def other_floor(other_building) -> Floor:
    return Floor(building=other_building, floor_number=1)


@pytest.fixture
def room_repo() -> InMemoryRoomRepo:
    return InMemoryRoomRepo()


@pytest.fixture
def elevator_repo() -> InMemoryElevatorRepo:
    return InMemoryElevatorRepo()


@pytest.fixture
def passage_repo() -> InMemoryPassageRepo:
    return InMemoryPassageRepo()


@pytest.fixture
def building_repo(building, other_building) -> InMemoryBuildingRepo:
    repo = InMemoryBuildingRepo()
    asyncio.run(repo.save(building))
    asyncio.run(repo.save(other_building))
    return repo


@pytest.fixture
def make_room():
    """Factory: make_room(floor, "Name", (x0, y0), (x1, y1), (dx, dy), "EAST")."""

    def _make(floor, name, initial, final, door, orientation):
        return Room(
            name=name,
            floor=floor,
            dimensions=RoomDimensions(
                initial_position=Position(x_position=initial[0], y_position=initial[1]),
                final_position=Position(x_position=final[0], y_position=final[1]),
            ),
            door_position=Position(x_position=door[0], y_position=door[1]),
            door_orientation=Orientation.from_wire(orientation),
        )

    return _make


@pytest.fixture
def make_elevator():
    """Factory: make_elevator(building, [floors], (x, y), "NORTH", number=1)."""

    def _make(building, floors, cell, orientation, number=1):
        return Elevator(
            unique_number=number,
            building=building,
            floors=floors,
            position=ElevatorPosition(xposition=cell[0], yposition=cell[1]),
            orientation=Orientation.from_wire(orientation),
        )

    return _make


@pytest.fixture
def make_passage():
    """Factory: make_passage((floor, first, last), (floor, first, last))."""

    def _point(floor, first, last):
        return PassagePoint(
            floor=floor,
            first_coordinates=Coordinates(x=first[0], y=first[1]),
            last_coordinates=Coordinates(x=last[0], y=last[1]),
        )

    def _make(start, end):
        return Passage(start_point=_point(*start), end_point=_point(*end))

    return _make
