"""Floor map generation.

Rasterizes a floor onto a tile grid for the client renderer and collects
the connections (elevators, passages) that lead to other floors, plus
labelled elements for the UI.

The grid has (length + 1) rows and (width + 1) columns: one extra row and
column hold the building's right and bottom walls. Cells are indexed
grid[y, x]. Elements are painted in a fixed order (rooms, then elevators,
then passages) and later painters overwrite earlier ones on shared cells.

No bounds checking is done here. Entities are validated against their
building when created, and a stray out-of-range cell raises IndexError.
"""

from __future__ import annotations

import logging

import numpy as np

from floornav.models.elevator import Elevator
from floornav.models.floor import Floor
from floornav.models.floor_map import (
    Connection,
    ConnectionType,
    FloorElement,
    FloorMap,
    MapSize,
)
from floornav.models.geometry import Coordinates, Orientation
from floornav.models.passage import Passage
from floornav.models.room import Room
from floornav.repos.base import ElevatorRepo, PassageRepo, RoomRepo
from floornav.tiles import Tile

logger = logging.getLogger(__name__)

# Heading the player faces after arriving through an elevator
ELEVATOR_ARRIVAL_DIRECTION: dict[Orientation, int] = {
    Orientation.NORTH: 180,
    Orientation.SOUTH: 0,
    Orientation.EAST: 90,
    Orientation.WEST: 270,
}

ELEVATOR_TILES: dict[Orientation, Tile] = {
    Orientation.NORTH: Tile.ELEVATOR_NORTH,
    Orientation.SOUTH: Tile.ELEVATOR_SOUTH,
    Orientation.EAST: Tile.ELEVATOR_EAST,
    Orientation.WEST: Tile.ELEVATOR_WEST,
}


class FloorMapGenerator:
    def __init__(
        self, room_repo: RoomRepo, elevator_repo: ElevatorRepo, passage_repo: PassageRepo
    ) -> None:
        self.room_repo = room_repo
        self.elevator_repo = elevator_repo
        self.passage_repo = passage_repo

    async def calculate_floor_map(self, floor: Floor) -> FloorMap:
        """Build the tile grid, connections and floor elements of a floor."""
        width = floor.building.dimensions.width
        length = floor.building.dimensions.length

        grid = initialize_map_grid(width, length)
        connections: list[Connection] = []
        floor_elements: list[FloorElement] = []

        rooms = await self.room_repo.find_by_floor_id(floor.id)
        paint_rooms(grid, floor_elements, rooms, width, length)

        elevators = await self.elevator_repo.find_all_by_floor_id(floor.id)
        paint_elevators(grid, connections, floor_elements, floor, elevators)

        passages = await self.passage_repo.find_passages_by_floor_id(floor.id)
        paint_passages(grid, connections, floor_elements, passages, floor, width, length)

        logger.debug(
            "Floor %s: %d rooms, %d elevators, %d passages on a %dx%d grid",
            floor.id,
            len(rooms),
            len(elevators),
            len(passages),
            width + 1,
            length + 1,
        )
        return FloorMap(
            size=MapSize(width=width, length=length),
            map=grid.tolist(),
            connections=connections,
            floor_elements=floor_elements,
        )


# ── Grid ──────────────────────────────────────────────────────────────


def initialize_map_grid(width: int, length: int) -> np.ndarray:
    """Empty floor enclosed by the building's outer walls.

    Precedence where the border lines meet: the right column beats the
    top row, the bottom row beats the left column, the bottom-right cell
    is left open and the top-left cell is a corner.
    """
    grid = np.full((length + 1, width + 1), Tile.OPEN, dtype=np.int64)
    grid[0, :] = Tile.HORIZONTAL_WALL
    grid[:, 0] = Tile.VERTICAL_WALL
    grid[length, :] = Tile.HORIZONTAL_WALL
    grid[:, width] = Tile.VERTICAL_WALL
    grid[length, width] = Tile.OPEN
    grid[0, 0] = Tile.CORNER
    return grid


# ── Rooms ─────────────────────────────────────────────────────────────


def paint_rooms(
    grid: np.ndarray,
    floor_elements: list[FloorElement],
    rooms: list[Room],
    width: int,
    length: int,
) -> None:
    """Paint each room's interior, walls and door.

    Walls go on the room's top row and left column, and one cell past its
    right and bottom edges.
    """
    for room in rooms:
        initial_x = room.dimensions.initial_position.x_position
        initial_y = room.dimensions.initial_position.y_position
        final_x = room.dimensions.final_position.x_position
        final_y = room.dimensions.final_position.y_position
        door_x = room.door_position.x_position
        door_y = room.door_position.y_position

        for y in range(initial_y, final_y + 1):
            for x in range(initial_x, final_x + 1):
                grid[y, x] = Tile.OPEN

                if x == final_x:
                    grid[y, x + 1] = Tile.VERTICAL_WALL
                if y == final_y:
                    grid[y + 1, x] = Tile.HORIZONTAL_WALL
                if x == initial_x:
                    grid[y, x] = Tile.VERTICAL_WALL
                if y == initial_y:
                    grid[y, x] = Tile.HORIZONTAL_WALL
                if x == initial_x and y == initial_y:
                    grid[y, x] = Tile.CORNER

                # Room wall meeting the building's top or left wall
                if x == final_x and y == 0 and x != width - 1:
                    grid[y, x + 1] = Tile.CORNER
                if y == final_y and x == 0 and y != length - 1:
                    grid[y + 1, x] = Tile.CORNER

                if x == door_x and y == door_y:
                    cell_x, cell_y = _paint_door(grid, x, y, room.door_orientation)
                    floor_elements.append(
                        FloorElement(
                            init_coords=[cell_x, cell_y],
                            final_coords=[cell_x, cell_y],
                            display_name=room.name,
                        )
                    )


def _paint_door(grid: np.ndarray, x: int, y: int, orientation: Orientation) -> tuple[int, int]:
    """Paint a door tile for a door at (x, y); returns the painted cell.

    North and west doors sit on the room's own top/left wall; south and
    east doors sit on the wall drawn one cell outside the room.
    """
    if orientation is Orientation.NORTH:
        cell, tile = (x, y), Tile.DOOR_NORTH_SOUTH
    elif orientation is Orientation.SOUTH:
        cell, tile = (x, y + 1), Tile.DOOR_NORTH_SOUTH
    elif orientation is Orientation.EAST:
        cell, tile = (x + 1, y), Tile.DOOR_EAST_WEST
    else:
        cell, tile = (x, y), Tile.DOOR_EAST_WEST
    grid[cell[1], cell[0]] = tile
    return cell


# ── Elevators ─────────────────────────────────────────────────────────


def calculate_elevator_direction(orientation: Orientation) -> int:
    """Heading applied to the player when arriving through an elevator."""
    return ELEVATOR_ARRIVAL_DIRECTION[orientation]


def paint_elevators(
    grid: np.ndarray,
    connections: list[Connection],
    floor_elements: list[FloorElement],
    floor: Floor,
    elevators: list[Elevator],
) -> None:
    for elevator in elevators:
        x = elevator.position.xposition
        y = elevator.position.yposition

        dest_floor_id = {
            served.floor_number: served.building.code
            for served in elevator.floors
            if served.id != floor.id
        }
        # The shaft is at the same cell on every floor it serves
        connections.append(
            Connection(
                connection_type=ConnectionType.ELEVATOR,
                connection_coords=[x, y],
                dest_floor_id=dest_floor_id,
                dest_floor_init_coords=[x, y],
                dest_floor_init_direction=calculate_elevator_direction(elevator.orientation),
            )
        )
        floor_elements.append(
            FloorElement(
                init_coords=[x, y],
                final_coords=[x, y],
                display_name=str(elevator.unique_number),
            )
        )
        grid[y, x] = ELEVATOR_TILES[elevator.orientation]


# ── Passages ──────────────────────────────────────────────────────────


def calculate_passage_direction(
    first_x: int, first_y: int, last_x: int, last_y: int, width: int, length: int
) -> int | None:
    """Heading applied to the player when arriving through a passage.

    Depends on which outer wall of the destination building the passage
    end lies on: left 90, top 0, right 270, bottom 180. Ends that lie on
    none of them have no heading.
    """
    if first_x == 0 and last_x == 0:
        return 90
    if first_y == 0 and last_y == 0:
        return 0
    if first_x == width - 1 and last_x == width - 1:
        return 270
    if first_y == length - 1 and last_y == length - 1:
        return 180
    return None


def paint_passages(
    grid: np.ndarray,
    connections: list[Connection],
    floor_elements: list[FloorElement],
    passages: list[Passage],
    floor: Floor,
    width: int,
    length: int,
) -> None:
    for passage in passages:
        if passage.start_point.floor.id == floor.id:
            here, there = passage.start_point, passage.end_point
            # Only the start side gets a highlight region
            floor_elements.append(
                FloorElement(
                    init_coords=here.first_coordinates.as_list(),
                    final_coords=here.last_coordinates.as_list(),
                    display_name="",
                )
            )
        else:
            here, there = passage.end_point, passage.start_point

        dest_floor_id = {there.floor.floor_number: there.floor.building.code}
        dest_dims = there.floor.building.dimensions
        direction = calculate_passage_direction(
            there.first_coordinates.x,
            there.first_coordinates.y,
            there.last_coordinates.x,
            there.last_coordinates.y,
            dest_dims.width,
            dest_dims.length,
        )
        if direction is None:
            logger.warning(
                "Passage %s ends off the outer walls of floor %s; no arrival heading",
                passage.id,
                there.floor.id,
            )

        for local, remote in (
            (here.first_coordinates, there.first_coordinates),
            (here.last_coordinates, there.last_coordinates),
        ):
            connections.append(
                Connection(
                    connection_type=ConnectionType.PASSAGE,
                    connection_coords=local.as_list(),
                    dest_floor_id=dest_floor_id,
                    dest_floor_init_coords=remote.as_list(),
                    dest_floor_init_direction=direction,
                )
            )

        _paint_passage_tiles(grid, here.first_coordinates, here.last_coordinates, width, length)


def _paint_passage_tiles(
    grid: np.ndarray, first: Coordinates, last: Coordinates, width: int, length: int
) -> None:
    """Paint the two end cells of a passage on the wall it opens through.

    Wall membership is tested in a fixed order, corner cases first. Within
    each case, the endpoint that comes first along the wall gets the lower
    tile. Right and bottom wall passages are drawn on the outer wall one
    cell past the end cells.
    """
    fx, fy, lx, ly = first.x, first.y, last.x, last.y

    if (fx, lx) in ((0, 1), (1, 0)) and fy == 0:
        low, high = Tile.PASSAGE_TOP_LEFT_CORNER, Tile.PASSAGE_TOP_UPPER
        first_tile, last_tile = (low, high) if fx < lx else (high, low)
        grid[fy, fx], grid[ly, lx] = first_tile, last_tile
    elif (fy, ly) in ((0, 1), (1, 0)) and fx == 0:
        low, high = Tile.PASSAGE_LEFT_TOP_CORNER, Tile.PASSAGE_LEFT_UPPER
        first_tile, last_tile = (low, high) if fy < ly else (high, low)
        grid[fy, fx], grid[ly, lx] = first_tile, last_tile
    elif fy == 0 and ly == 0:
        low, high = Tile.PASSAGE_TOP_LOWER, Tile.PASSAGE_TOP_UPPER
        first_tile, last_tile = (low, high) if fx < lx else (high, low)
        grid[fy, fx], grid[ly, lx] = first_tile, last_tile
    elif fx == 0 and lx == 0:
        low, high = Tile.PASSAGE_LEFT_LOWER, Tile.PASSAGE_LEFT_UPPER
        first_tile, last_tile = (low, high) if fy < ly else (high, low)
        grid[fy, fx], grid[ly, lx] = first_tile, last_tile
    elif fx == width - 1:
        low, high = Tile.PASSAGE_RIGHT_LOWER, Tile.PASSAGE_RIGHT_UPPER
        first_tile, last_tile = (low, high) if fy < ly else (high, low)
        grid[fy, fx + 1], grid[ly, lx + 1] = first_tile, last_tile
    elif fy == length - 1:
        low, high = Tile.PASSAGE_BOTTOM_LOWER, Tile.PASSAGE_BOTTOM_UPPER
        first_tile, last_tile = (low, high) if fx < lx else (high, low)
        grid[fy + 1, fx], grid[ly + 1, lx] = first_tile, last_tile
