"""Tile codes written into floor map cells.

Clients render the map straight from these integers, so the values are
part of the wire format.
"""

from __future__ import annotations

from enum import IntEnum


class Tile(IntEnum):
    OPEN = 0
    VERTICAL_WALL = 1
    HORIZONTAL_WALL = 2
    CORNER = 3
    DOOR_EAST_WEST = 4
    DOOR_NORTH_SOUTH = 5
    ELEVATOR_NORTH = 6
    ELEVATOR_SOUTH = 7
    ELEVATOR_EAST = 8
    ELEVATOR_WEST = 9
    PASSAGE_TOP_LOWER = 12
    PASSAGE_TOP_UPPER = 13
    PASSAGE_LEFT_LOWER = 14
    PASSAGE_LEFT_UPPER = 15
    PASSAGE_RIGHT_LOWER = 16
    PASSAGE_RIGHT_UPPER = 17
    PASSAGE_BOTTOM_LOWER = 18
    PASSAGE_BOTTOM_UPPER = 19
    PASSAGE_TOP_LEFT_CORNER = 20
    PASSAGE_LEFT_TOP_CORNER = 21
