"""Tests for the CLI interface."""
import json
import subprocess
import sys
from pathlib import Path

import pytest

CLI = [sys.executable, "-m", "floornav"]
ROOT = Path(__file__).parent.parent

SITE = {
    "buildings": [
        {"code": "A", "dimensions": {"width": 10, "length": 10}},
        {"code": "B", "dimensions": {"width": 10, "length": 10}},
    ],
    "floors": [
        {"building": "A", "floor_number": 1},
        {"building": "A", "floor_number": 2},
        {"building": "B", "floor_number": 1},
    ],
    "rooms": [
        {"name": "Office 1", "building": "A", "floor": 1, "initial": [0, 0],
         "final": [3, 3], "door": [3, 1], "door_orientation": "EAST"},
    ],
    "elevators": [
        {"unique_number": 1, "building": "A", "floors": [1, 2],
         "position": [5, 5], "orientation": "NORTH"},
    ],
    "passages": [
        {"start": {"building": "A", "floor": 1, "first": [9, 4], "last": [9, 5]},
         "end": {"building": "B", "floor": 1, "first": [0, 4], "last": [0, 5]}},
    ],
}


def run_cli(*args: str) -> dict:
    """Run CLI command and return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode == 0, f"CLI failed: {result.stderr}\n{result.stdout}"
    return json.loads(result.stdout)


def run_cli_expect_fail(*args: str) -> dict:
    """Run CLI command expecting failure, return parsed JSON output."""
    result = subprocess.run(
        [*CLI, *args],
        capture_output=True, text=True, cwd=str(ROOT),
    )
    assert result.returncode != 0
    return json.loads(result.stdout)


@pytest.fixture
def site_file(tmp_path):
    path = tmp_path / "site.json"
    path.write_text(json.dumps(SITE))
    return str(path)


class TestMap:
    def test_map(self, site_file):
        data = run_cli("map", site_file, "A", "1")
        assert data["ok"] is True
        floor_map = data["floorMap"]
        assert len(floor_map["map"]) == 11
        assert floor_map["map"][1][4] == 4
        assert floor_map["map"][5][5] == 6
        types = sorted(c["connectionType"] for c in floor_map["connections"])
        assert types == ["elevator", "passage", "passage"]
        names = {e["displayName"] for e in floor_map["floorElements"]}
        assert names == {"Office 1", "1", ""}

    def test_map_other_building(self, site_file):
        data = run_cli("map", site_file, "B", "1")
        assert data["floorMap"]["map"][4][0] == 14
        assert data["floorMap"]["floorElements"] == []

    def test_example_campus(self):
        data = run_cli("map", "examples/campus.json", "A", "1")
        assert data["floorMap"]["size"] == {"width": 10, "length": 10}
        assert data["floorMap"]["map"][5][5] == 6

    def test_unknown_floor(self, site_file):
        data = run_cli_expect_fail("map", site_file, "A", "9")
        assert data["ok"] is False
        assert "not found" in data["error"]

    def test_missing_site_file(self, tmp_path):
        data = run_cli_expect_fail("map", str(tmp_path / "nope.json"), "A", "1")
        assert data["ok"] is False

    def test_invalid_site_file(self, tmp_path):
        path = tmp_path / "site.json"
        path.write_text(json.dumps({**SITE, "floors": [{"building": "Z", "floor_number": 1}]}))
        data = run_cli_expect_fail("map", str(path), "A", "1")
        assert data["error"].startswith("Invalid site file")


class TestCheckPosition:
    @pytest.mark.parametrize(
        "x, y, expected",
        [("2", "2", False), ("5", "4", False), ("9", "4", False), ("7", "7", True)],
    )
    def test_check_position(self, site_file, x, y, expected):
        data = run_cli("check-position", site_file, "A", "1", x, y)
        assert data["ok"] is True
        assert data["available"] is expected

    def test_exclude_unrelated_id(self, site_file):
        other = "00000000-0000-4000-8000-000000000000"
        data = run_cli("check-position", site_file, "A", "2", "5", "5", "--exclude", other)
        assert data["available"] is False
        data = run_cli("check-position", site_file, "A", "2", "5", "6", "-e", other)
        assert data["available"] is True

    def test_exclude_malformed_id(self, site_file):
        data = run_cli_expect_fail("check-position", site_file, "A", "1", "5", "5", "-e", "other")
        assert data["ok"] is False
        assert data["error"] == "Invalid element id: other"


class TestValidatePlan:
    def test_validate_plan(self, site_file, tmp_path):
        plan = tmp_path / "plan.json"
        plan.write_text(json.dumps({
            "planFloorNumber": 1,
            "planFloorSize": {"width": 11, "height": 11},
            "floorWallTexture": "./textures/wall.jpg",
            "floorElevatorTexture": "./textures/elevator.jpg",
            "floorDoorTexture": "./textures/door.jpg",
        }))
        assert run_cli("validate-plan", site_file, "A", "1", str(plan))["valid"] is True
        assert run_cli("validate-plan", site_file, "A", "2", str(plan))["valid"] is False

    def test_missing_plan(self, site_file, tmp_path):
        data = run_cli_expect_fail("validate-plan", site_file, "A", "1", str(tmp_path / "x.json"))
        assert data["ok"] is False


class TestOptions:
    def test_missing_config(self, site_file, tmp_path):
        data = run_cli_expect_fail(
            "--config", str(tmp_path / "nope.json"), "map", site_file, "A", "1"
        )
        assert data["ok"] is False
        assert data["error"].startswith("Config file not found")

    def test_invalid_config(self, site_file, tmp_path):
        config = tmp_path / "settings.json"
        config.write_text("{not json")
        data = run_cli_expect_fail("--config", str(config), "map", site_file, "A", "1")
        assert data["error"].startswith("Invalid config file")

    def test_config_overrides_settings(self, site_file, tmp_path):
        config = tmp_path / "settings.json"
        config.write_text(json.dumps({"elevator_min_y_position": 6}))
        data = run_cli_expect_fail("--config", str(config), "map", site_file, "A", "1")
        assert data["ok"] is False

    def test_verbose_logs_to_stderr(self, site_file):
        result = subprocess.run(
            [*CLI, "--verbose", "map", site_file, "A", "1"],
            capture_output=True, text=True, cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "Loaded site" in result.stderr
        assert json.loads(result.stdout)["ok"] is True
