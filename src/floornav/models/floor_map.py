"""Floor map output: tile grid plus connections and labelled elements.

Built fresh on every map request and never stored. Field aliases give
the camelCase names the client expects; use FloorMap.to_wire() to get
the payload.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ConnectionType(str, Enum):
    PASSAGE = "passage"
    ELEVATOR = "elevator"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Connection(_WireModel):
    """A cell pair (or single cell) that moves the player to another floor.

    dest_floor_id maps destination floor number to the code of the building
    that floor belongs to; floor numbers repeat across buildings, so the
    pair is what identifies the floor.
    """

    connection_type: ConnectionType = Field(alias="connectionType")
    connection_coords: list[int] = Field(alias="connectionCoords")
    dest_floor_id: dict[int, str] = Field(alias="destFloorId")
    dest_floor_init_coords: list[int] = Field(alias="destFloorInitiCoords")
    dest_floor_init_direction: int | None = Field(alias="destFloorInitiDirection")


class FloorElement(_WireModel):
    """Labelled span used by the client for anchors and highlights."""

    init_coords: list[int] = Field(alias="initCoords")
    final_coords: list[int] = Field(alias="finalCoords")
    display_name: str = Field(alias="displayName")


class MapSize(BaseModel):
    width: int
    length: int


class FloorMap(_WireModel):
    size: MapSize
    map: list[list[int]]
    connections: list[Connection] = Field(default_factory=list)
    floor_elements: list[FloorElement] = Field(default_factory=list, alias="floorElements")

    def to_wire(self) -> dict:
        """JSON-ready payload with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
