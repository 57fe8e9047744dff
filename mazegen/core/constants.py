"""Shared constants and enumerations for the maze engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class MazeType(str, Enum):
    """Cell topologies supported by the engine."""

    ORTHOGONAL = "ORTHOGONAL"
    DELTA = "DELTA"
    SIGMA = "SIGMA"
    THETA = "THETA"


class WallDirection(str, Enum):
    """Wall slots carried by every cell."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"
    NORTH_EAST = "NORTH_EAST"
    NORTH_WEST = "NORTH_WEST"
    SOUTH_EAST = "SOUTH_EAST"
    SOUTH_WEST = "SOUTH_WEST"

    @property
    def opposite(self) -> "WallDirection":
        return OPPOSITE_WALLS[self]

    @property
    def attribute(self) -> str:
        return f"{self.value.lower()}_wall"


OPPOSITE_WALLS: Dict[WallDirection, WallDirection] = {
    WallDirection.NORTH: WallDirection.SOUTH,
    WallDirection.SOUTH: WallDirection.NORTH,
    WallDirection.EAST: WallDirection.WEST,
    WallDirection.WEST: WallDirection.EAST,
    WallDirection.NORTH_EAST: WallDirection.SOUTH_WEST,
    WallDirection.SOUTH_WEST: WallDirection.NORTH_EAST,
    WallDirection.NORTH_WEST: WallDirection.SOUTH_EAST,
    WallDirection.SOUTH_EAST: WallDirection.NORTH_WEST,
}

CARDINAL_WALLS: Tuple[WallDirection, ...] = (
    WallDirection.NORTH,
    WallDirection.SOUTH,
    WallDirection.EAST,
    WallDirection.WEST,
)
HEX_WALLS: Tuple[WallDirection, ...] = (
    WallDirection.EAST,
    WallDirection.WEST,
    WallDirection.NORTH_EAST,
    WallDirection.NORTH_WEST,
    WallDirection.SOUTH_EAST,
    WallDirection.SOUTH_WEST,
)
ALL_WALLS: Tuple[WallDirection, ...] = CARDINAL_WALLS + HEX_WALLS[2:]

# (dx, dy) per cardinal wall, y grows southwards.
CARDINAL_STEPS: Dict[WallDirection, Tuple[int, int]] = {
    WallDirection.NORTH: (0, -1),
    WallDirection.SOUTH: (0, 1),
    WallDirection.EAST: (1, 0),
    WallDirection.WEST: (-1, 0),
}

# Odd-row offset hex addressing: steps differ by row parity.
HEX_STEPS_EVEN_ROW: Dict[WallDirection, Tuple[int, int]] = {
    WallDirection.EAST: (1, 0),
    WallDirection.WEST: (-1, 0),
    WallDirection.NORTH_WEST: (-1, -1),
    WallDirection.NORTH_EAST: (0, -1),
    WallDirection.SOUTH_WEST: (-1, 1),
    WallDirection.SOUTH_EAST: (0, 1),
}
HEX_STEPS_ODD_ROW: Dict[WallDirection, Tuple[int, int]] = {
    WallDirection.EAST: (1, 0),
    WallDirection.WEST: (-1, 0),
    WallDirection.NORTH_WEST: (0, -1),
    WallDirection.NORTH_EAST: (1, -1),
    WallDirection.SOUTH_WEST: (0, 1),
    WallDirection.SOUTH_EAST: (1, 1),
}

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

# Per closed interior wall chance of being knocked through after carving.
# Roughly matches a quarter, an eighth, a twentieth and a fiftieth of the
# cell count for difficulties 1-4; difficulty 5 keeps the perfect maze.
SHORTCUT_PROBABILITY: Dict[int, float] = {
    1: 0.25,
    2: 0.125,
    3: 0.05,
    4: 0.02,
    5: 0.0,
}

MIN_SIZE = 1
MAX_SIZE = 20
MIN_PRESET_WIDTH = 15
MAX_PRESET_WIDTH = 100
# Printable area of the poster the presets were tuned for (33" x 21").
PRINT_ASPECT_RATIO = 33.0 / 21.0

PREVIEW_SEED = 12345


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper in (x, y) order."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


def clamp_difficulty(difficulty: int) -> int:
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, int(difficulty)))
