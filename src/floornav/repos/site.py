"""Site files: a whole campus described in one JSON document.

Buildings are referenced by code and floors by (building code, floor
number), so a site file can be written by hand:

    {
      "buildings": [{"code": "A", "dimensions": {"width": 10, "length": 10}}],
      "floors": [{"building": "A", "floor_number": 1}],
      "rooms": [{"name": "A101", "building": "A", "floor": 1,
                 "initial": [0, 0], "final": [3, 3],
                 "door": [3, 1], "door_orientation": "EAST"}],
      "elevators": [{"unique_number": 1, "building": "A", "floors": [1, 2],
                     "position": [5, 5], "orientation": "NORTH"}],
      "passages": [{"start": {"building": "A", "floor": 1, "first": [9, 4], "last": [9, 5]},
                    "end": {"building": "B", "floor": 1, "first": [0, 4], "last": [0, 5]}}]
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field

from floornav.config import DEFAULT_SETTINGS, Settings
from floornav.models.building import Building
from floornav.models.elevator import Elevator
from floornav.models.floor import Floor
from floornav.models.passage import Passage
from floornav.models.room import Room
from floornav.repos.memory import (
    InMemoryBuildingRepo,
    InMemoryElevatorRepo,
    InMemoryFloorRepo,
    InMemoryPassageRepo,
    InMemoryRoomRepo,
)

logger = logging.getLogger(__name__)


# ── Document schema ───────────────────────────────────────────────────


class BuildingEntry(BaseModel):
    code: str
    dimensions: dict[str, int]
    name: str | None = None
    description: str | None = None


class FloorEntry(BaseModel):
    building: str
    floor_number: int
    description: str | None = None
    floor_plan: str | None = None


class RoomEntry(BaseModel):
    name: str
    building: str
    floor: int
    initial: tuple[int, int]
    final: tuple[int, int]
    door: tuple[int, int]
    door_orientation: str
    category: str = "OTHER"
    description: str = ""


class ElevatorEntry(BaseModel):
    unique_number: int
    building: str
    floors: list[int]
    position: tuple[int, int]
    orientation: str
    brand: str | None = None
    model: str | None = None
    serial_number: str | None = None
    description: str | None = None


class PassageEndEntry(BaseModel):
    building: str
    floor: int
    first: tuple[int, int]
    last: tuple[int, int]


class PassageEntry(BaseModel):
    start: PassageEndEntry
    end: PassageEndEntry


class SiteDocument(BaseModel):
    buildings: list[BuildingEntry] = Field(default_factory=list)
    floors: list[FloorEntry] = Field(default_factory=list)
    rooms: list[RoomEntry] = Field(default_factory=list)
    elevators: list[ElevatorEntry] = Field(default_factory=list)
    passages: list[PassageEntry] = Field(default_factory=list)


# ── Loaded site ───────────────────────────────────────────────────────


@dataclass
class Site:
    """A set of populated in-memory repositories."""

    buildings: InMemoryBuildingRepo = field(default_factory=InMemoryBuildingRepo)
    floors: InMemoryFloorRepo = field(default_factory=InMemoryFloorRepo)
    rooms: InMemoryRoomRepo = field(default_factory=InMemoryRoomRepo)
    elevators: InMemoryElevatorRepo = field(default_factory=InMemoryElevatorRepo)
    passages: InMemoryPassageRepo = field(default_factory=InMemoryPassageRepo)

    async def find_floor(self, building_code: str, floor_number: int) -> Floor | None:
        building = await self.buildings.find_by_code(building_code)
        if building is None:
            return None
        return await self.floors.find_by_building_and_number(building.id, floor_number)


async def load_site(path: str | Path, settings: Settings = DEFAULT_SETTINGS) -> Site:
    """Read a site file and populate a fresh set of repositories.

    Raises:
        FileNotFoundError: if the file does not exist.
        pydantic.ValidationError: if the document or any entity is invalid.
        ValueError: if an entry references an unknown building or floor.
    """
    path = Path(path)
    document = SiteDocument.model_validate_json(path.read_text())
    return await build_site(document, settings)


async def build_site(document: SiteDocument, settings: Settings = DEFAULT_SETTINGS) -> Site:
    site = Site()
    context = {"settings": settings}
    buildings: dict[str, Building] = {}
    floors: dict[tuple[str, int], Floor] = {}

    def require_floor(code: str, number: int) -> Floor:
        floor = floors.get((code, number))
        if floor is None:
            raise ValueError(f"Floor {number} of building '{code}' not found")
        return floor

    for entry in document.buildings:
        building = Building.model_validate(entry.model_dump(), context=context)
        buildings[building.code] = await site.buildings.save(building)

    for entry in document.floors:
        building = buildings.get(entry.building)
        if building is None:
            raise ValueError(f"Building '{entry.building}' not found")
        floor = Floor.model_validate(
            {**entry.model_dump(exclude={"building"}), "building": building},
            context=context,
        )
        floors[(building.code, floor.floor_number)] = await site.floors.save(floor)

    for entry in document.rooms:
        room = Room.model_validate(
            {
                "name": entry.name,
                "description": entry.description,
                "category": entry.category,
                "dimensions": {
                    "initial_position": _position(entry.initial),
                    "final_position": _position(entry.final),
                },
                "door_position": _position(entry.door),
                "door_orientation": entry.door_orientation.upper(),
                "floor": require_floor(entry.building, entry.floor),
            },
            context=context,
        )
        await site.rooms.save(room)

    for entry in document.elevators:
        building = buildings.get(entry.building)
        if building is None:
            raise ValueError(f"Building '{entry.building}' not found")
        elevator = Elevator.model_validate(
            {
                **entry.model_dump(exclude={"building", "floors", "position", "orientation"}),
                "building": building,
                "floors": [require_floor(entry.building, n) for n in entry.floors],
                "position": {"xposition": entry.position[0], "yposition": entry.position[1]},
                "orientation": entry.orientation.upper(),
            },
            context=context,
        )
        await site.elevators.save(elevator)

    for entry in document.passages:
        passage = Passage.model_validate(
            {
                "start_point": _passage_point(entry.start, require_floor),
                "end_point": _passage_point(entry.end, require_floor),
            },
            context=context,
        )
        await site.passages.save(passage)

    logger.debug(
        "Loaded site: %d buildings, %d floors, %d rooms, %d elevators, %d passages",
        len(document.buildings),
        len(document.floors),
        len(document.rooms),
        len(document.elevators),
        len(document.passages),
    )
    return site


def _position(cell: tuple[int, int]) -> dict[str, int]:
    return {"x_position": cell[0], "y_position": cell[1]}


def _passage_point(entry: PassageEndEntry, require_floor) -> dict:
    return {
        "floor": require_floor(entry.building, entry.floor),
        "first_coordinates": {"x": entry.first[0], "y": entry.first[1]},
        "last_coordinates": {"x": entry.last[0], "y": entry.last[1]},
    }
