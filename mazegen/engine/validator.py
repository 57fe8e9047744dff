"""Deterministic rule validation for generated mazes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set, Tuple

from ..core.exceptions import ValidationError
from .grid import MazeGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class MazeValidator:
    """Runs deterministic validation over a generated grid."""

    def validate(self, grid: MazeGrid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_generated(grid)
            self._check_wall_symmetry(grid)
            self._check_classification(grid)
            self._check_solution_path(grid)
            self._check_depth_gradient(grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    @staticmethod
    def _check_generated(grid: MazeGrid) -> None:
        if not grid.generated or not grid.solution_path:
            raise ValidationError("Grid has not been generated")

    def _check_wall_symmetry(self, grid: MazeGrid) -> None:
        topology = grid.topology
        for cell in grid.iter_cells():
            linked = set()
            for direction, (nx, ny) in topology.links(cell, grid):
                linked.add(direction)
                neighbor = grid.cell(nx, ny)
                back = topology.direction_to(neighbor, cell, grid)
                if back != direction.opposite:
                    raise ValidationError(
                        f"Asymmetric adjacency between {cell.coords} and {neighbor.coords}"
                    )
                if cell.has_wall(direction) != neighbor.has_wall(back):
                    raise ValidationError(
                        f"Wall mismatch between {cell.coords} and {neighbor.coords}"
                    )
            for direction in topology.wall_slots:
                if direction not in linked and not cell.has_wall(direction):
                    raise ValidationError(
                        f"Boundary wall {direction.value} open at {cell.coords}"
                    )

    def _check_classification(self, grid: MazeGrid) -> None:
        for cell in grid.iter_cells():
            if cell.on_solution_path == cell.is_dead_end:
                raise ValidationError(f"Cell {cell.coords} is not classified exactly once")
            if cell.on_solution_path and cell.dead_end_depth != 0:
                raise ValidationError(
                    f"Solution cell {cell.coords} has depth {cell.dead_end_depth}"
                )
            if cell.is_dead_end and cell.dead_end_depth < 1:
                raise ValidationError(f"Unreachable cell at {cell.coords}")

    def _check_solution_path(self, grid: MazeGrid) -> None:
        path = grid.solution_path
        if path[0] != grid.start:
            raise ValidationError(f"Solution starts at {path[0]}, expected {grid.start}")
        if path[-1] != grid.end:
            raise ValidationError(f"Solution ends at {path[-1]}, expected {grid.end}")
        if len(set(path)) != len(path):
            raise ValidationError("Solution path revisits a cell")
        for (ax, ay), (bx, by) in zip(path, path[1:]):
            if not grid.topology.wall_open(grid.cell(ax, ay), grid.cell(bx, by), grid):
                raise ValidationError(f"Solution steps through a wall between {(ax, ay)} and {(bx, by)}")
        marked: Set[Tuple[int, int]] = {cell.coords for cell in grid.iter_cells() if cell.on_solution_path}
        if marked != set(path):
            raise ValidationError("Solution flags disagree with the solution path")

    def _check_depth_gradient(self, grid: MazeGrid) -> None:
        topology = grid.topology
        for cell in grid.iter_cells():
            if not cell.is_dead_end:
                continue
            target = cell.dead_end_depth - 1
            if not any(
                grid.cell(nx, ny).dead_end_depth == target
                for nx, ny in topology.open_neighbors(cell, grid)
            ):
                raise ValidationError(
                    f"Dead end {cell.coords} at depth {cell.dead_end_depth} has no neighbour at depth {target}"
                )
