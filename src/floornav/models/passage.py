"""Passage aggregate: a walkway linking floors of two different buildings.

Each end of a passage is two adjacent cells on the outer ring of its floor.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from floornav.models.floor import Floor
from floornav.models.geometry import Coordinates
from floornav.models.ids import generate_id
from floornav.models.result import Result


class PassagePoint(BaseModel):
    """One end of a passage on a given floor."""

    model_config = ConfigDict(frozen=True)

    floor: Floor
    first_coordinates: Coordinates = Field(description="Left or top cell")
    last_coordinates: Coordinates = Field(description="Right or bottom cell")

    @model_validator(mode="after")
    def adjacent_border_cells(self) -> PassagePoint:
        first, last = self.first_coordinates, self.last_coordinates
        if first.equals(last):
            raise ValueError("Coordinates must be different.")
        if abs(first.x - last.x) != 1 and abs(first.y - last.y) != 1:
            raise ValueError("Coordinates must be next to each other.")
        if not self.floor.are_coordinates_in_border(first, last):
            raise ValueError("Coordinates must be in the border of the floor.")
        return self

    def occupies(self, x: int, y: int) -> bool:
        return (self.first_coordinates.x == x and self.first_coordinates.y == y) or (
            self.last_coordinates.x == x and self.last_coordinates.y == y
        )


class Passage(BaseModel):
    id: str = Field(default_factory=generate_id, description="Domain id")
    start_point: PassagePoint
    end_point: PassagePoint

    @model_validator(mode="after")
    def different_buildings(self) -> Passage:
        if self.start_point.floor.building.id == self.end_point.floor.building.id:
            raise ValueError("You can't create a passage between floors of the same building.")
        return self

    def point_on(self, floor_id: str) -> PassagePoint | None:
        """The end of this passage lying on the given floor, if any."""
        if self.start_point.floor.id == floor_id:
            return self.start_point
        if self.end_point.floor.id == floor_id:
            return self.end_point
        return None

    def update_start_point(
        self, floor: Floor, first_x: int, first_y: int, last_x: int, last_y: int
    ) -> Result[None]:
        point = _build_point(floor, first_x, first_y, last_x, last_y)
        if point.is_failure:
            return Result.fail(point.error)
        self.start_point = point.value
        return Result.ok()

    def update_end_point(
        self, floor: Floor, first_x: int, first_y: int, last_x: int, last_y: int
    ) -> Result[None]:
        point = _build_point(floor, first_x, first_y, last_x, last_y)
        if point.is_failure:
            return Result.fail(point.error)
        self.end_point = point.value
        return Result.ok()


def _build_point(
    floor: Floor, first_x: int, first_y: int, last_x: int, last_y: int
) -> Result[PassagePoint]:
    try:
        point = PassagePoint(
            floor=floor,
            first_coordinates=Coordinates(x=first_x, y=first_y),
            last_coordinates=Coordinates(x=last_x, y=last_y),
        )
    except ValidationError as e:
        return Result.fail(_first_message(e))
    return Result.ok(point)


def _first_message(error: ValidationError) -> str:
    msg = error.errors()[0]["msg"]
    # pydantic prefixes messages raised from validators
    return msg.removeprefix("Value error, ")
