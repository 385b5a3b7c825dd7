"""Spatial value objects and distance estimates"""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Tiles along one edge of a room
ROOM_SIZE = 50

_ROOM_NAME_PATTERN = re.compile(r'^([WE])(\d+)([NS])(\d+)$')


class CorpType(Enum):
    """Kinds of corps taking part in the colony economy"""
    MINING = "mining"
    SPAWNING = "spawning"
    UPGRADING = "upgrading"
    HAULING = "hauling"
    BUILDING = "building"


@dataclass(frozen=True)
class Position:
    """
    Coordinate within a named room.

    Room names encode world coordinates, e.g. "W1N2" is one room west
    and two rooms north of the origin.
    """
    x: int
    y: int
    room_name: str

    def __repr__(self) -> str:
        return f"Position({self.x}, {self.y}, {self.room_name})"


def parse_room_name(room_name: str) -> Optional[Tuple[int, int]]:
    """
    Parse a room name into world room coordinates.

    "W1N2" -> (-1, 2), "E3S4" -> (3, -4). Returns None for names that do
    not follow the [WE]<n>[NS]<n> pattern.
    """
    match = _ROOM_NAME_PATTERN.match(room_name)
    if not match:
        return None

    x = -int(match.group(2)) if match.group(1) == 'W' else int(match.group(2))
    y = int(match.group(4)) if match.group(3) == 'N' else -int(match.group(4))
    return x, y


def estimate_cross_room_distance(a: Position, b: Position) -> float:
    """
    Estimate tile distance between positions in different rooms.

    Each room step counts as ROOM_SIZE tiles, plus the in-room offset.
    Unparseable room names yield math.inf.
    """
    a_coords = parse_room_name(a.room_name)
    b_coords = parse_room_name(b.room_name)

    if a_coords is None or b_coords is None:
        return math.inf

    room_distance = (abs(a_coords[0] - b_coords[0]) + abs(a_coords[1] - b_coords[1])) * ROOM_SIZE
    in_room_distance = abs(a.x - b.x) + abs(a.y - b.y)
    return room_distance + in_room_distance


def manhattan_distance(a: Position, b: Position) -> float:
    """Manhattan distance, estimated across rooms when room names differ"""
    if a.room_name != b.room_name:
        return estimate_cross_room_distance(a, b)
    return abs(a.x - b.x) + abs(a.y - b.y)
