"""Repository contracts and their in-memory implementations."""

from floornav.repos.base import (
    BuildingRepo,
    ElevatorRepo,
    FloorRepo,
    PassageRepo,
    RoomRepo,
)
from floornav.repos.memory import (
    InMemoryBuildingRepo,
    InMemoryElevatorRepo,
    InMemoryFloorRepo,
    InMemoryPassageRepo,
    InMemoryRoomRepo,
)
from floornav.repos.site import Site, build_site, load_site

__all__ = [
    "BuildingRepo",
    "ElevatorRepo",
    "FloorRepo",
    "PassageRepo",
    "RoomRepo",
    "InMemoryBuildingRepo",
    "InMemoryElevatorRepo",
    "InMemoryFloorRepo",
    "InMemoryPassageRepo",
    "InMemoryRoomRepo",
    "Site",
    "build_site",
    "load_site",
]
