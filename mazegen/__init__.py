"""Procedural maze generation engine.

This package exposes the public API surface via:

- ``mazegen.engine.grid.MazeGrid``: carves, solves and classifies one maze.
- ``mazegen.engine.generator.MazeGenerator``: size presets, previews and
  validation around a grid.
- ``mazegen.engine.topology``: the adjacency strategy for each topology.
"""

from .core.constants import MazeType
from .core.exceptions import InvalidArgumentError, MazeError, ValidationError
from .core.models import Cell
from .engine.generator import GeneratorConfig, MazeGenerator, MazeResult
from .engine.grid import GridConfig, MazeGrid

__all__ = [
    "Cell",
    "GeneratorConfig",
    "GridConfig",
    "InvalidArgumentError",
    "MazeError",
    "MazeGenerator",
    "MazeGrid",
    "MazeResult",
    "MazeType",
    "ValidationError",
]

__version__ = "0.1.0"
