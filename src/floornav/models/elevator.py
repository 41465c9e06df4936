"""Elevator aggregate.

An elevator occupies one cell on every floor it serves and opens towards
its orientation. The cell in front of the door must be kept clear, which
is what ElevatorPositionChecker enforces.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, model_validator

from floornav.config import DEFAULT_SETTINGS, Settings
from floornav.models.building import Building
from floornav.models.floor import Floor
from floornav.models.geometry import ElevatorPosition, Orientation
from floornav.models.ids import generate_id
from floornav.models.result import Result


class Elevator(BaseModel):
    id: str = Field(default_factory=generate_id, description="Domain id")
    unique_number: int = Field(ge=1, strict=True, description="Sequential within the building")
    position: ElevatorPosition
    orientation: Orientation
    building: Building
    floors: list[Floor] = Field(default_factory=list, description="Floors served")
    brand: str | None = None
    model: str | None = None
    serial_number: str | None = None
    description: str | None = None

    @model_validator(mode="after")
    def consistent(self, info: ValidationInfo) -> Elevator:
        settings = (info.context or {}).get("settings", DEFAULT_SETTINGS)
        if self.brand is not None and self.model is None:
            raise ValueError("Model is required when brand is provided.")
        for message in _check_optional_fields(
            settings,
            brand=self.brand,
            model=self.model,
            serial_number=self.serial_number,
            description=self.description,
        ):
            raise ValueError(message)
        if not self._floors_in_building(self.floors):
            raise ValueError("Floor is not from the same building.")
        return self

    def _floors_in_building(self, floors: list[Floor]) -> bool:
        return all(f.building.id == self.building.id for f in floors)

    def serves(self, floor: Floor) -> bool:
        return any(f.id == floor.id for f in self.floors)

    def door_cell(self) -> tuple[int, int]:
        """Cell in front of the elevator door."""
        return self.position.door_cell(self.orientation)

    # ── Mutators ──────────────────────────────────────────────────────

    def update_position(
        self, xposition: int, yposition: int, settings: Settings = DEFAULT_SETTINGS
    ) -> Result[None]:
        """Replace the position with a freshly validated one."""
        try:
            position = ElevatorPosition.model_validate(
                {"xposition": xposition, "yposition": yposition},
                context={"settings": settings},
            )
        except ValidationError:
            return Result.fail("Elevator position is invalid.")
        self.position = position
        return Result.ok()

    def update_orientation(self, orientation: Orientation | str) -> Result[None]:
        if isinstance(orientation, str):
            try:
                orientation = Orientation.from_wire(orientation)
            except ValueError:
                return Result.fail("Invalid Door Orientation.")
        if not isinstance(orientation, Orientation):
            return Result.fail("Invalid Door Orientation.")
        self.orientation = orientation
        return Result.ok()

    def update_floors(self, floors: list[Floor]) -> Result[None]:
        if not self._floors_in_building(floors):
            return Result.fail("Floor is not from the same building.")
        self.floors = list(floors)
        return Result.ok()

    def update_brand(self, brand: str, settings: Settings = DEFAULT_SETTINGS) -> Result[None]:
        if self.model is None:
            return Result.fail("Model is required when brand is provided.")
        return self._update_field("brand", brand, settings)

    def update_model(self, model: str, settings: Settings = DEFAULT_SETTINGS) -> Result[None]:
        return self._update_field("model", model, settings)

    def update_serial_number(
        self, serial_number: str, settings: Settings = DEFAULT_SETTINGS
    ) -> Result[None]:
        return self._update_field("serial_number", serial_number, settings)

    def update_description(
        self, description: str, settings: Settings = DEFAULT_SETTINGS
    ) -> Result[None]:
        return self._update_field("description", description, settings)

    def _update_field(self, name: str, value: str, settings: Settings) -> Result[None]:
        errors = _check_optional_fields(settings, **{name: value})
        if errors:
            return Result.fail(errors[0])
        setattr(self, name, value)
        return Result.ok()


def _check_optional_fields(settings: Settings, **fields: str | None) -> list[str]:
    """Length checks for the free-text elevator fields that are set."""
    limits = {
        "brand": ("Elevator brand", settings.elevator_max_brand_length),
        "model": ("Elevator model", settings.elevator_max_model_length),
        "serial_number": ("Elevator serial number", settings.elevator_max_serial_number_length),
        "description": ("Elevator description", settings.elevator_max_description_length),
    }
    errors = []
    for name, value in fields.items():
        if value is None:
            continue
        label, max_length = limits[name]
        if not isinstance(value, str) or not value.strip() or len(value) > max_length:
            errors.append(f"{label} is invalid.")
    return errors
