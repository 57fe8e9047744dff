"""Pretty-print helpers for maze grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import MazeType

if TYPE_CHECKING:
    from ..core.models import Cell
    from ..engine.generator import MazeResult
    from ..engine.grid import MazeGrid


def cell_symbol(grid: MazeGrid, cell: Cell, *, show_solution: bool = True, show_depths: bool = False) -> str:
    if (cell.x, cell.y) == grid.start:
        return "S"
    if (cell.x, cell.y) == grid.end:
        return "E"
    if show_solution and cell.on_solution_path:
        return "*"
    if show_depths and cell.is_dead_end:
        return str(min(cell.dead_end_depth, 9))
    return " "


def _format_cardinal(grid: MazeGrid, show_solution: bool, show_depths: bool) -> str:
    lines: List[str] = []
    top = "+"
    for x in range(grid.width):
        top += ("---" if grid.cell(x, 0).north_wall else "   ") + "+"
    lines.append(top)
    for y in range(grid.height):
        first = grid.cell(0, y)
        body = "|" if first.west_wall else " "
        floor = "+"
        for x in range(grid.width):
            cell = grid.cell(x, y)
            symbol = cell_symbol(grid, cell, show_solution=show_solution, show_depths=show_depths)
            body += f" {symbol} " + ("|" if cell.east_wall else " ")
            floor += ("---" if cell.south_wall else "   ") + "+"
        lines.append(body)
        lines.append(floor)
    return "\n".join(lines)


def _format_sigma(grid: MazeGrid, show_solution: bool, show_depths: bool) -> str:
    # Only east/west walls are drawn; odd rows are shifted half a cell.
    lines: List[str] = []
    for y in range(grid.height):
        row = "  " if y % 2 else ""
        for x in range(grid.width):
            cell = grid.cell(x, y)
            row += f" {cell_symbol(grid, cell, show_solution=show_solution, show_depths=show_depths)} "
            if x < grid.width - 1:
                row += "|" if cell.east_wall else " "
        lines.append(row)
    return "\n".join(lines)


def format_maze(grid: MazeGrid, *, show_solution: bool = True, show_depths: bool = False) -> str:
    """Render a text sketch of the maze for debugging.

    Cardinal topologies (ORTHOGONAL, DELTA, THETA) are drawn as an unrolled
    square lattice of their wall slots.
    """

    if grid.maze_type == MazeType.SIGMA:
        return _format_sigma(grid, show_solution, show_depths)
    return _format_cardinal(grid, show_solution, show_depths)


def pretty_print_maze(grid: MazeGrid, *, label: str | None = None, stream=None, show_depths: bool = False) -> None:
    """Print the maze in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_maze(grid, show_depths=show_depths), file=stream)


def print_maze_stats(result: MazeResult, *, stream=None) -> None:
    """Print grid + stats for a completed maze."""

    stream = stream or sys.stdout
    grid = result.grid
    print(format_maze(grid), file=stream)

    total_cells = grid.width * grid.height
    path_cells = len(grid.solution_path)
    dead_ends = total_cells - path_cells

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Type:          {grid.maze_type.value}", file=stream)
    print(f"  Size:          {grid.width} x {grid.height} ({total_cells} cells)", file=stream)
    print(f"  Difficulty:    {grid.difficulty}", file=stream)
    print(f"  Open walls:    {grid.open_wall_count()}", file=stream)
    print(f"  Shortcuts:     {grid.shortcuts_added}", file=stream)

    print(file=stream)
    print("--- Solution ---", file=stream)
    print(f"  Start:         {grid.start}", file=stream)
    print(f"  End:           {grid.end}", file=stream)
    print(f"  Path length:   {path_cells} ({path_cells / total_cells * 100:.0f}% of cells)", file=stream)
    print(f"  Dead ends:     {dead_ends}", file=stream)
    histogram = grid.dead_end_histogram()
    if histogram:
        print(f"  Max depth:     {grid.max_dead_end_depth}", file=stream)
        dist_parts = [f"{depth}:{count}" for depth, count in histogram.items()]
        print(f"  Depths:        {' '.join(dist_parts)}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    print(file=stream)
    if result.seed is not None:
        print(f"Seed: {result.seed}", file=stream)
    print(f"Elapsed: {result.elapsed_seconds:.3f}s", file=stream)
