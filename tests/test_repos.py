"""Tests for the in-memory repositories and site loading."""

import asyncio
import json

import pytest
from pydantic import ValidationError

from floornav.config import Settings
from floornav.repos.memory import InMemoryFloorRepo
from floornav.repos.site import SiteDocument, build_site, load_site

SITE = {
    "buildings": [
        {"code": "A", "name": "Main", "dimensions": {"width": 10, "length": 10}},
        {"code": "B", "dimensions": {"width": 8, "length": 6}},
    ],
    "floors": [
        {"building": "A", "floor_number": 1},
        {"building": "A", "floor_number": 2},
        {"building": "B", "floor_number": 1},
    ],
    "rooms": [
        {
            "name": "Office 1",
            "building": "A",
            "floor": 1,
            "initial": [0, 0],
            "final": [3, 3],
            "door": [3, 1],
            "door_orientation": "east",
            "category": "OFFICE",
        }
    ],
    "elevators": [
        {
            "unique_number": 1,
            "building": "A",
            "floors": [1, 2],
            "position": [5, 5],
            "orientation": "NORTH",
            "brand": "Otis",
            "model": "Gen2",
        }
    ],
    "passages": [
        {
            "start": {"building": "A", "floor": 1, "first": [9, 4], "last": [9, 5]},
            "end": {"building": "B", "floor": 1, "first": [0, 2], "last": [0, 3]},
        }
    ],
}


class TestRoomRepo:
    def test_find_by_floor_and_name(self, floor, upper_floor, room_repo, make_room):
        room = make_room(floor, "R1", (0, 0), (2, 2), (2, 1), "EAST")
        asyncio.run(room_repo.save(room))
        asyncio.run(room_repo.save(make_room(upper_floor, "R2", (0, 0), (2, 2), (2, 1), "EAST")))
        assert asyncio.run(room_repo.find_by_floor_id(floor.id)) == [room]
        assert asyncio.run(room_repo.find_by_name("R1")) is room
        assert asyncio.run(room_repo.find_by_domain_id(room.id)) is room
        assert len(asyncio.run(room_repo.find_all())) == 2

    def test_save_replaces_by_id(self, floor, room_repo, make_room):
        room = make_room(floor, "R1", (0, 0), (2, 2), (2, 1), "EAST")
        asyncio.run(room_repo.save(room))
        asyncio.run(room_repo.save(room))
        assert len(asyncio.run(room_repo.find_all())) == 1

    @pytest.mark.parametrize(
        "area, expected",
        [
            ((1, 1, 5, 5), True),
            ((5, 5, 8, 8), False),
            ((4, 0, 6, 6), False),
            ((0, 0, 9, 9), True),
        ],
    )
    def test_room_in_area(self, floor, room_repo, make_room, area, expected):
        asyncio.run(room_repo.save(make_room(floor, "R", (2, 2), (3, 3), (3, 2), "EAST")))
        assert asyncio.run(room_repo.check_if_room_exist_in_area(*area, floor)) is expected


class TestElevatorRepo:
    def test_queries(self, building, floor, upper_floor, elevator_repo, make_elevator):
        elevator = make_elevator(building, [floor], (5, 5), "NORTH", 4)
        asyncio.run(elevator_repo.save(elevator))
        assert asyncio.run(elevator_repo.find_all_by_floor_id(floor.id)) == [elevator]
        assert asyncio.run(elevator_repo.find_all_by_floor_id(upper_floor.id)) == []
        assert asyncio.run(elevator_repo.find_by_building_id(building.id)) == [elevator]
        found = asyncio.run(elevator_repo.find_by_unique_number_in_building(4, building.id))
        assert found is elevator
        assert asyncio.run(elevator_repo.find_by_unique_number_in_building(1, building.id)) is None

    def test_elevator_in_area(self, building, floor, elevator_repo, make_elevator):
        asyncio.run(elevator_repo.save(make_elevator(building, [floor], (5, 5), "NORTH")))
        assert asyncio.run(elevator_repo.check_if_elevator_exist_in_area(5, 5, 6, 6, floor))
        # The door cell does not count as part of the area
        assert not asyncio.run(elevator_repo.check_if_elevator_exist_in_area(0, 0, 5, 4, floor))


class TestPassageRepo:
    @pytest.fixture
    def passage(self, floor, other_floor, passage_repo, make_passage):
        passage = make_passage((floor, (9, 4), (9, 5)), (other_floor, (0, 4), (0, 5)))
        asyncio.run(passage_repo.save(passage))
        return passage

    def test_found_from_either_floor(self, floor, other_floor, upper_floor, passage, passage_repo):
        assert asyncio.run(passage_repo.find_passages_by_floor_id(floor.id)) == [passage]
        assert asyncio.run(passage_repo.find_passages_by_floor_id(other_floor.id)) == [passage]
        assert asyncio.run(passage_repo.find_passages_by_floor_id(upper_floor.id)) == []

    def test_coordinates(self, floor, passage, passage_repo):
        query = passage_repo.is_there_a_passage_in_floor_coordinates
        assert asyncio.run(query(9, 4, floor.id, None))
        assert not asyncio.run(query(9, 4, floor.id, passage.id))
        assert not asyncio.run(query(0, 4, floor.id, None))

    def test_passage_in_area(self, floor, other_floor, passage, passage_repo):
        assert asyncio.run(passage_repo.check_if_passage_exist_in_area(8, 5, 9, 9, floor))
        assert not asyncio.run(passage_repo.check_if_passage_exist_in_area(0, 3, 2, 6, floor))
        assert asyncio.run(passage_repo.check_if_passage_exist_in_area(0, 3, 2, 6, other_floor))


class TestFloorRepo:
    def test_find_by_building_and_number(self, building, floor, upper_floor, other_floor):
        repo = InMemoryFloorRepo()
        for f in (floor, upper_floor, other_floor):
            asyncio.run(repo.save(f))
        assert asyncio.run(repo.find_by_building_and_number(building.id, 2)) is upper_floor
        assert asyncio.run(repo.find_by_building_and_number(building.id, 3)) is None
        assert len(asyncio.run(repo.find_by_building_id(building.id))) == 2


class TestSite:
    def test_build_site(self):
        site = asyncio.run(build_site(SiteDocument.model_validate(SITE)))
        floor = asyncio.run(site.find_floor("A", 1))
        assert floor.building.code == "A"
        rooms = asyncio.run(site.rooms.find_by_floor_id(floor.id))
        assert [r.name for r in rooms] == ["Office 1"]
        assert rooms[0].category.value == "OFFICE"
        [elevator] = asyncio.run(site.elevators.find_all_by_floor_id(floor.id))
        assert [f.floor_number for f in elevator.floors] == [1, 2]
        assert elevator.brand == "Otis"
        [passage] = asyncio.run(site.passages.find_passages_by_floor_id(floor.id))
        assert passage.end_point.floor.building.code == "B"

    def test_find_floor_missing(self):
        site = asyncio.run(build_site(SiteDocument.model_validate(SITE)))
        assert asyncio.run(site.find_floor("A", 7)) is None
        assert asyncio.run(site.find_floor("Z", 1)) is None

    def test_load_site(self, tmp_path):
        path = tmp_path / "site.json"
        path.write_text(json.dumps(SITE))
        site = asyncio.run(load_site(path))
        assert len(asyncio.run(site.buildings.find_all())) == 2

    def test_unknown_building(self):
        document = SiteDocument.model_validate(
            {**SITE, "floors": [*SITE["floors"], {"building": "Z", "floor_number": 1}]}
        )
        with pytest.raises(ValueError, match="Building 'Z' not found"):
            asyncio.run(build_site(document))

    def test_unknown_floor(self):
        rooms = [{**SITE["rooms"][0], "floor": 3}]
        with pytest.raises(ValueError, match="Floor 3 of building 'A' not found"):
            asyncio.run(build_site(SiteDocument.model_validate({**SITE, "rooms": rooms})))

    def test_invalid_entity(self):
        rooms = [{**SITE["rooms"][0], "final": [12, 3]}]
        with pytest.raises(ValidationError, match="out of bounds"):
            asyncio.run(build_site(SiteDocument.model_validate({**SITE, "rooms": rooms})))

    def test_settings_reach_validation(self):
        settings = Settings(elevator_min_x_position=6)
        with pytest.raises(ValidationError, match="greater than or equal to 6"):
            asyncio.run(build_site(SiteDocument.model_validate(SITE), settings))
