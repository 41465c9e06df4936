"""Domain models."""

from floornav.models.ids import generate_id, is_valid_id
from floornav.models.geometry import Coordinates, ElevatorPosition, Orientation, Position
from floornav.models.result import FailureType, Result
from floornav.models.building import Building, BuildingDimensions
from floornav.models.floor import Floor
from floornav.models.room import Room, RoomCategory, RoomDimensions
from floornav.models.elevator import Elevator
from floornav.models.passage import Passage, PassagePoint
from floornav.models.floor_map import (
    Connection,
    ConnectionType,
    FloorElement,
    FloorMap,
    MapSize,
)

__all__ = [
    "generate_id",
    "is_valid_id",
    "Coordinates",
    "ElevatorPosition",
    "Orientation",
    "Position",
    "FailureType",
    "Result",
    "Building",
    "BuildingDimensions",
    "Floor",
    "Room",
    "RoomCategory",
    "RoomDimensions",
    "Elevator",
    "Passage",
    "PassagePoint",
    "Connection",
    "ConnectionType",
    "FloorElement",
    "FloorMap",
    "MapSize",
]
