"""Unit tests for positions and room-distance estimates"""
import math

import pytest

from colony_economy.domain.shared.value_objects import (
    ROOM_SIZE,
    Position,
    estimate_cross_room_distance,
    manhattan_distance,
    parse_room_name,
)


class TestParseRoomName:

    @pytest.mark.parametrize("room_name, expected", [
        ("W1N2", (-1, 2)),
        ("E3S4", (3, -4)),
        ("E0N0", (0, 0)),
        ("W12S30", (-12, -30)),
    ])
    def test_parses_world_coordinates(self, room_name, expected):
        assert parse_room_name(room_name) == expected

    @pytest.mark.parametrize("room_name", ["sim", "W1", "X1N1", "", "w1n1"])
    def test_rejects_malformed_names(self, room_name):
        assert parse_room_name(room_name) is None


class TestManhattanDistance:

    def test_same_room_uses_tile_offsets(self):
        assert manhattan_distance(Position(10, 10, "W1N1"), Position(13, 6, "W1N1")) == 7

    def test_adjacent_rooms_add_one_room_of_tiles(self):
        # Same tile coordinates one room apart
        distance = manhattan_distance(Position(25, 25, "W1N1"), Position(25, 25, "W2N1"))
        assert distance == ROOM_SIZE

    def test_cross_room_adds_in_room_offset(self):
        distance = estimate_cross_room_distance(Position(0, 0, "E1N1"), Position(5, 5, "E2N2"))
        assert distance == 2 * ROOM_SIZE + 10

    def test_unparseable_room_is_unreachable(self):
        assert manhattan_distance(Position(0, 0, "W1N1"), Position(0, 0, "sim")) == math.inf
