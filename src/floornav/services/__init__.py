"""Floor services.

- position: cell occupancy checkers (room, elevator, passage, composite)
- door_position: room door placement rules
- room_area: room area availability
- floor_map: tile grid generation with connections and labels
- floor_plan_validator: client floor plan consistency checks
"""

from floornav.services.door_position import DoorPositionChecker
from floornav.services.floor_map import (
    FloorMapGenerator,
    calculate_elevator_direction,
    calculate_passage_direction,
)
from floornav.services.floor_plan_validator import FloorPlanJSONValidator
from floornav.services.position import (
    CompositePositionChecker,
    ElevatorPositionChecker,
    PassagePositionChecker,
    PositionChecker,
    RoomPositionChecker,
    check_elevator_placement,
)
from floornav.services.room_area import RoomAreaChecker

__all__ = [
    "DoorPositionChecker",
    "FloorMapGenerator",
    "calculate_elevator_direction",
    "calculate_passage_direction",
    "FloorPlanJSONValidator",
    "CompositePositionChecker",
    "ElevatorPositionChecker",
    "PassagePositionChecker",
    "PositionChecker",
    "RoomPositionChecker",
    "check_elevator_placement",
    "RoomAreaChecker",
]
