"""Data models supporting the maze engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import (
    ALL_WALLS,
    CARDINAL_STEPS,
    HEX_STEPS_EVEN_ROW,
    HEX_STEPS_ODD_ROW,
    MazeType,
    WallDirection,
)


@dataclass
class Cell:
    """One maze position with its walls and solving metadata.

    Wall flags are ``True`` while the wall stands. ``parent`` is a flat grid
    index written by the solver, never a reference to another cell.
    """

    x: int
    y: int
    north_wall: bool = True
    south_wall: bool = True
    east_wall: bool = True
    west_wall: bool = True
    north_east_wall: bool = True
    north_west_wall: bool = True
    south_east_wall: bool = True
    south_west_wall: bool = True
    visited: bool = False
    on_solution_path: bool = False
    is_dead_end: bool = False
    dead_end_depth: int = 0
    parent: Optional[int] = None

    @property
    def coords(self) -> tuple[int, int]:
        return self.x, self.y

    def has_wall(self, direction: WallDirection) -> bool:
        return getattr(self, direction.attribute)

    def open_wall(self, direction: WallDirection, other: "Cell") -> None:
        """Open ``direction`` on this cell and the facing wall on ``other``."""

        setattr(self, direction.attribute, False)
        setattr(other, direction.opposite.attribute, False)

    def remove_wall_to(self, other: "Cell") -> None:
        """Open the cardinal wall shared with an orthogonally adjacent cell."""

        step = (other.x - self.x, other.y - self.y)
        for direction, delta in CARDINAL_STEPS.items():
            if delta == step:
                self.open_wall(direction, other)
                return

    def remove_hex_wall_to(self, other: "Cell", maze_type: MazeType) -> None:
        """Open the wall towards ``other`` using odd-row offset hex addressing.

        Only SIGMA grids carry hexagonal adjacency; every other topology falls
        back to :meth:`remove_wall_to`.
        """

        if maze_type != MazeType.SIGMA:
            self.remove_wall_to(other)
            return
        steps = HEX_STEPS_EVEN_ROW if self.y % 2 == 0 else HEX_STEPS_ODD_ROW
        step = (other.x - self.x, other.y - self.y)
        for direction, delta in steps.items():
            if delta == step:
                self.open_wall(direction, other)
                return

    def open_wall_count(self) -> int:
        return sum(1 for direction in ALL_WALLS if not self.has_wall(direction))
