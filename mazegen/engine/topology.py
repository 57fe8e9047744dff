"""Adjacency strategies, one per maze topology.

The carving and solving algorithms in :mod:`mazegen.engine.grid` never look
at coordinates directly. They ask the grid's strategy which cells neighbour
each other and which wall flag encodes each link, so the four topologies
share a single orchestrator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, Optional, Protocol, Tuple

from ..core.constants import (
    CARDINAL_STEPS,
    CARDINAL_WALLS,
    HEX_STEPS_EVEN_ROW,
    HEX_STEPS_ODD_ROW,
    HEX_WALLS,
    MazeType,
    WallDirection,
)
from ..core.exceptions import InvalidArgumentError
from ..core.models import Cell

if TYPE_CHECKING:
    from .grid import MazeGrid


Coord = Tuple[int, int]
Link = Tuple[WallDirection, Coord]


class TopologyStrategy(Protocol):
    """Protocol implemented by every topology."""

    maze_type: MazeType
    wall_slots: Tuple[WallDirection, ...]

    def links(self, cell: Cell, grid: "MazeGrid") -> Iterator[Link]:
        """Yield ``(direction, (x, y))`` for every in-bounds neighbour."""

    def neighbors_of(self, cell: Cell, grid: "MazeGrid") -> Iterator[Coord]:
        ...

    def direction_to(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> Optional[WallDirection]:
        ...

    def wall_open(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> bool:
        ...

    def open_wall(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> None:
        ...

    def open_neighbors(self, cell: Cell, grid: "MazeGrid") -> Iterator[Coord]:
        ...

    def closed_neighbors(self, cell: Cell, grid: "MazeGrid") -> Iterator[Coord]:
        ...

    def start_coordinates(self, grid: "MazeGrid") -> Coord:
        ...

    def end_coordinates(self, grid: "MazeGrid") -> Coord:
        ...


class _BaseTopology:
    """Shared accessors built on top of :meth:`links`."""

    maze_type: MazeType
    wall_slots: Tuple[WallDirection, ...] = CARDINAL_WALLS

    def links(self, cell: Cell, grid: "MazeGrid") -> Iterator[Link]:  # pragma: no cover - abstract
        raise NotImplementedError

    def neighbors_of(self, cell: Cell, grid: "MazeGrid") -> Iterator[Coord]:
        for _, coords in self.links(cell, grid):
            yield coords

    def direction_to(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> Optional[WallDirection]:
        for direction, coords in self.links(cell, grid):
            if coords == (neighbor.x, neighbor.y):
                return direction
        return None

    def wall_open(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> bool:
        direction = self.direction_to(cell, neighbor, grid)
        if direction is None:
            return False
        return not cell.has_wall(direction)

    def open_wall(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> None:
        direction = self.direction_to(cell, neighbor, grid)
        if direction is not None:
            cell.open_wall(direction, neighbor)

    def open_neighbors(self, cell: Cell, grid: "MazeGrid") -> Iterator[Coord]:
        for direction, coords in self.links(cell, grid):
            if not cell.has_wall(direction):
                yield coords

    def closed_neighbors(self, cell: Cell, grid: "MazeGrid") -> Iterator[Coord]:
        for direction, coords in self.links(cell, grid):
            if cell.has_wall(direction):
                yield coords

    def start_coordinates(self, grid: "MazeGrid") -> Coord:
        return 0, 0

    def end_coordinates(self, grid: "MazeGrid") -> Coord:
        return grid.width - 1, grid.height - 1

    @staticmethod
    def _stepped(cell: Cell, grid: "MazeGrid", steps: Dict[WallDirection, Coord]) -> Iterator[Link]:
        for direction, (dx, dy) in steps.items():
            nx, ny = cell.x + dx, cell.y + dy
            if grid.bounds.contains(nx, ny):
                yield direction, (nx, ny)


class OrthogonalTopology(_BaseTopology):
    """Square cells with four cardinal passages."""

    maze_type = MazeType.ORTHOGONAL

    def links(self, cell: Cell, grid: "MazeGrid") -> Iterator[Link]:
        return self._stepped(cell, grid, CARDINAL_STEPS)

    def open_wall(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> None:
        cell.remove_wall_to(neighbor)


class DeltaTopology(OrthogonalTopology):
    """Triangle mazes carved on the cardinal model.

    Adjacency and wall slots are those of :class:`OrthogonalTopology`; giving
    the four walls a triangular shape is left to whoever renders the maze.
    """

    maze_type = MazeType.DELTA


class SigmaTopology(_BaseTopology):
    """Hexagonal cells in odd-row offset addressing."""

    maze_type = MazeType.SIGMA
    wall_slots = HEX_WALLS

    def links(self, cell: Cell, grid: "MazeGrid") -> Iterator[Link]:
        steps = HEX_STEPS_EVEN_ROW if cell.y % 2 == 0 else HEX_STEPS_ODD_ROW
        return self._stepped(cell, grid, steps)

    def open_wall(self, cell: Cell, neighbor: Cell, grid: "MazeGrid") -> None:
        cell.remove_hex_wall_to(neighbor, MazeType.SIGMA)


class ThetaTopology(_BaseTopology):
    """Concentric rings split into sectors.

    ``x`` indexes the sector and ``y`` is a radial row. North and south step
    between neighbouring rows, and east/west walk around the ring, wrapping
    across the seam once a ring has at least three sectors. The centre cell
    ``(width // 2, height // 2)`` is the hub where the maze starts; the exit
    sits on the last row.
    """

    maze_type = MazeType.THETA

    def links(self, cell: Cell, grid: "MazeGrid") -> Iterator[Link]:
        width = grid.width
        for direction, (dx, dy) in CARDINAL_STEPS.items():
            nx, ny = cell.x + dx, cell.y + dy
            if dx and width >= 3:
                nx %= width
            if grid.bounds.contains(nx, ny):
                yield direction, (nx, ny)

    def start_coordinates(self, grid: "MazeGrid") -> Coord:
        return grid.width // 2, grid.height // 2

    def end_coordinates(self, grid: "MazeGrid") -> Coord:
        return 0, grid.height - 1


TOPOLOGIES: Dict[MazeType, TopologyStrategy] = {
    MazeType.ORTHOGONAL: OrthogonalTopology(),
    MazeType.DELTA: DeltaTopology(),
    MazeType.SIGMA: SigmaTopology(),
    MazeType.THETA: ThetaTopology(),
}


def get_topology(maze_type: MazeType) -> TopologyStrategy:
    try:
        return TOPOLOGIES[maze_type]
    except KeyError as exc:
        raise InvalidArgumentError(f"Unsupported maze type: {maze_type!r}") from exc
