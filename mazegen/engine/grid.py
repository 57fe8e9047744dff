"""Maze grid representation and the generation pipeline."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, Iterator, List, Optional, Tuple, Union

from ..core.constants import SHORTCUT_PROBABILITY, Bounds, MazeType, clamp_difficulty
from ..core.exceptions import InvalidArgumentError, MazeError
from ..core.models import Cell
from ..core.rng import make_rng
from ..utils.logger import get_logger
from .topology import TopologyStrategy, get_topology


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Construction parameters for a single maze."""

    width: int
    height: int
    maze_type: Union[MazeType, str] = MazeType.ORTHOGONAL
    difficulty: int = 3
    seed: Optional[int] = None

    def bounds(self) -> Bounds:
        return Bounds(width=self.width, height=self.height)


def coerce_maze_type(value: Union[MazeType, str]) -> MazeType:
    if isinstance(value, MazeType):
        return value
    try:
        return MazeType(str(value).upper())
    except ValueError as exc:
        raise InvalidArgumentError(f"Unknown maze type: {value!r}") from exc


def _check_dimension(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    return value


class MazeGrid:
    """Owns the cells of one maze and runs its generation pipeline.

    A grid is built from immutable parameters, :meth:`generate` is called
    once, and the result is read-only afterwards. Cells are addressed as
    ``cells[x][y]``; traversal bookkeeping uses the flat index
    ``y * width + x``.
    """

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.width = _check_dimension("width", config.width)
        self.height = _check_dimension("height", config.height)
        self.maze_type = coerce_maze_type(config.maze_type)
        self.difficulty = clamp_difficulty(config.difficulty)
        if self.difficulty != config.difficulty:
            LOGGER.debug("Clamped difficulty %s to %s", config.difficulty, self.difficulty)
        self.seed = config.seed
        self.bounds = config.bounds()
        self.topology: TopologyStrategy = get_topology(self.maze_type)
        self.rng = make_rng(config.seed)
        self.cells: List[List[Cell]] = [
            [Cell(x, y) for y in range(self.height)] for x in range(self.width)
        ]
        self._flat: List[Cell] = [
            self.cells[x][y] for y in range(self.height) for x in range(self.width)
        ]
        self.start_x, self.start_y = self.topology.start_coordinates(self)
        self.end_x, self.end_y = self.topology.end_coordinates(self)
        self.solution_path: List[Tuple[int, int]] = []
        self.shortcuts_added = 0
        self._generated = False

    def __getstate__(self) -> Dict[str, Any]:
        # SystemRandom cannot be pickled; a generated grid never draws again.
        state = self.__dict__.copy()
        if self._generated:
            state["rng"] = None
        return state

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Cell:
        return self.cells[x][y]

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def coords(self, index: int) -> Tuple[int, int]:
        return index % self.width, index // self.width

    def cell_at(self, index: int) -> Cell:
        return self._flat[index]

    def iter_cells(self) -> Iterator[Cell]:
        """Yield every cell in row-major order."""

        return iter(self._flat)

    @property
    def start(self) -> Tuple[int, int]:
        return self.start_x, self.start_y

    @property
    def end(self) -> Tuple[int, int]:
        return self.end_x, self.end_y

    @property
    def generated(self) -> bool:
        return self._generated

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def generate(self) -> None:
        """Carve, add shortcuts, solve and classify. Runs exactly once."""

        if self._generated:
            raise MazeError("Maze grid has already been generated")
        self._generated = True
        LOGGER.debug(
            "Generating %s maze %sx%s (difficulty %s, seed %s)",
            self.maze_type.value,
            self.width,
            self.height,
            self.difficulty,
            self.seed,
        )
        self._carve()
        self.shortcuts_added = self._add_shortcuts()
        self._solve()
        self._classify_dead_ends()
        LOGGER.info(
            "Generated %s maze %sx%s: path %s cells, %s shortcuts, max dead-end depth %s",
            self.maze_type.value,
            self.width,
            self.height,
            len(self.solution_path),
            self.shortcuts_added,
            self.max_dead_end_depth,
        )

    def _carve(self) -> None:
        """Recursive backtracker with an explicit stack."""

        start = self.cell(self.start_x, self.start_y)
        start.visited = True
        stack: List[Cell] = [start]
        while stack:
            current = stack[-1]
            unvisited = [
                self.cell(nx, ny)
                for nx, ny in self.topology.neighbors_of(current, self)
                if not self.cell(nx, ny).visited
            ]
            if not unvisited:
                stack.pop()
                continue
            chosen = self.rng.choice(unvisited)
            self.topology.open_wall(current, chosen, self)
            chosen.visited = True
            stack.append(chosen)

    def _add_shortcuts(self) -> int:
        probability = SHORTCUT_PROBABILITY[self.difficulty]
        if probability <= 0:
            return 0
        opened = 0
        for cell in self.iter_cells():
            own_index = self.index(cell.x, cell.y)
            for nx, ny in list(self.topology.closed_neighbors(cell, self)):
                # Each wall is considered once, from its lower-indexed side.
                if self.index(nx, ny) < own_index:
                    continue
                if self.rng.random() < probability:
                    self.topology.open_wall(cell, self.cell(nx, ny), self)
                    opened += 1
        LOGGER.debug("Opened %s shortcut walls at p=%.3f", opened, probability)
        return opened

    def _solve(self) -> None:
        for cell in self.iter_cells():
            cell.visited = False
            cell.parent = None

        start = self.cell(self.start_x, self.start_y)
        end = self.cell(self.end_x, self.end_y)
        start.visited = True
        queue: Deque[Cell] = deque([start])
        while queue:
            current = queue.popleft()
            if current is end:
                break
            current_index = self.index(current.x, current.y)
            for nx, ny in self.topology.open_neighbors(current, self):
                neighbor = self.cell(nx, ny)
                if not neighbor.visited:
                    neighbor.visited = True
                    neighbor.parent = current_index
                    queue.append(neighbor)

        if not end.visited:
            raise MazeError(f"End cell {self.end} is unreachable from {self.start}")

        path: List[Tuple[int, int]] = []
        index: Optional[int] = self.index(end.x, end.y)
        while index is not None:
            node = self.cell_at(index)
            node.on_solution_path = True
            node.dead_end_depth = 0
            path.append((node.x, node.y))
            index = node.parent
        path.reverse()
        self.solution_path = path

    def _classify_dead_ends(self) -> None:
        """Multi-source BFS outward from every solution cell."""

        queue: Deque[Cell] = deque()
        for cell in self.iter_cells():
            cell.parent = None
            cell.visited = cell.on_solution_path
            cell.is_dead_end = not cell.on_solution_path
            if cell.on_solution_path:
                cell.dead_end_depth = 0
                queue.append(cell)

        while queue:
            current = queue.popleft()
            for nx, ny in self.topology.open_neighbors(current, self):
                neighbor = self.cell(nx, ny)
                if not neighbor.visited:
                    neighbor.visited = True
                    neighbor.dead_end_depth = current.dead_end_depth + 1
                    queue.append(neighbor)

        for cell in self.iter_cells():
            cell.visited = False

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def open_wall_count(self) -> int:
        return sum(cell.open_wall_count() for cell in self.iter_cells())

    def dead_end_histogram(self) -> Dict[int, int]:
        counts = Counter(cell.dead_end_depth for cell in self.iter_cells() if cell.is_dead_end)
        return dict(sorted(counts.items()))

    @property
    def max_dead_end_depth(self) -> int:
        return max((cell.dead_end_depth for cell in self.iter_cells()), default=0)

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> Dict[str, Any]:
        slots = self.topology.wall_slots
        return {
            "width": self.width,
            "height": self.height,
            "maze_type": self.maze_type.value,
            "difficulty": self.difficulty,
            "seed": self.seed,
            "start": [self.start_x, self.start_y],
            "end": [self.end_x, self.end_y],
            "solution_path": [[x, y] for x, y in self.solution_path],
            "cells": [
                [
                    {
                        "x": cell.x,
                        "y": cell.y,
                        "walls": {direction.value.lower(): cell.has_wall(direction) for direction in slots},
                        "on_solution_path": cell.on_solution_path,
                        "is_dead_end": cell.is_dead_end,
                        "dead_end_depth": cell.dead_end_depth,
                    }
                    for cell in column
                ]
                for column in self.cells
            ],
        }
