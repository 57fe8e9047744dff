"""Maze generation service.

Wraps :class:`~mazegen.engine.grid.MazeGrid` with the knobs callers actually
expose: a 1-20 size preset instead of raw cell counts, a fixed-seed preview,
reseeding, validation and batch generation.
"""

from __future__ import annotations

import math
import time
from concurrent.futures import Executor, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..core.constants import (
    MAX_PRESET_WIDTH,
    MAX_SIZE,
    MIN_PRESET_WIDTH,
    MIN_SIZE,
    PREVIEW_SEED,
    PRINT_ASPECT_RATIO,
    MazeType,
)
from ..core.exceptions import ValidationError
from .grid import GridConfig, MazeGrid
from ..utils.logger import get_logger
from .validator import MazeValidator


LOGGER = get_logger(__name__)


def size_to_grid_dimensions(size: int) -> Tuple[int, int]:
    """Map a 1-20 size preset to ``(width, height)`` in cells.

    Size 1 is 15 cells wide and size 20 is 100; the height follows the
    poster's aspect ratio. Out-of-range sizes are clamped.
    """

    size = max(MIN_SIZE, min(MAX_SIZE, int(size)))
    width = MIN_PRESET_WIDTH + (size - 1) * (MAX_PRESET_WIDTH - MIN_PRESET_WIDTH) // (MAX_SIZE - MIN_SIZE)
    height = int(math.floor(width / PRINT_ASPECT_RATIO + 0.5))
    return width, height


@dataclass
class GeneratorConfig:
    maze_type: Union[MazeType, str] = MazeType.ORTHOGONAL
    size: int = 10
    difficulty: int = 3
    seed: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    validate: bool = True

    def dimensions(self) -> Tuple[int, int]:
        preset_width, preset_height = size_to_grid_dimensions(self.size)
        width = self.width if self.width is not None else preset_width
        height = self.height if self.height is not None else preset_height
        return width, height

    def to_grid_config(self) -> GridConfig:
        width, height = self.dimensions()
        return GridConfig(
            width=width,
            height=height,
            maze_type=self.maze_type,
            difficulty=self.difficulty,
            seed=self.seed,
        )


@dataclass
class MazeResult:
    grid: MazeGrid
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None
    elapsed_seconds: float = 0.0

    @property
    def solution_path(self) -> List[Tuple[int, int]]:
        return self.grid.solution_path

    def to_jsonable(self) -> Dict[str, Any]:
        payload = self.grid.to_jsonable()
        payload["validation"] = list(self.validation_messages)
        payload["elapsed_seconds"] = round(self.elapsed_seconds, 6)
        return payload


class MazeGenerator:
    """High-level orchestrator: build a grid, generate it, validate it."""

    def __init__(self, config: GeneratorConfig, validator: Optional[MazeValidator] = None) -> None:
        self.config = config
        self.validator = validator or MazeValidator()

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def generate(self) -> MazeResult:
        grid = MazeGrid(self.config.to_grid_config())
        started = time.perf_counter()
        grid.generate()
        messages: List[str] = []
        if self.config.validate:
            validation = self.validator.validate(grid)
            if not validation.ok:
                raise ValidationError(f"Maze validation failed: {validation.messages}")
            messages = validation.messages
        elapsed = time.perf_counter() - started
        LOGGER.info(
            "Maze generation completed in %.3fs (%s %sx%s, seed %s)",
            elapsed,
            grid.maze_type.value,
            grid.width,
            grid.height,
            grid.seed,
        )
        return MazeResult(
            grid=grid,
            validation_messages=messages,
            seed=self.config.seed,
            elapsed_seconds=elapsed,
        )

    def regenerate(self) -> MazeResult:
        """Generate again under a fresh wall-clock seed."""

        self.config = replace(self.config, seed=int(time.time() * 1000))
        LOGGER.info("Regenerating maze with seed %s", self.config.seed)
        return self.generate()

    @classmethod
    def preview(
        cls,
        maze_type: Union[MazeType, str] = MazeType.ORTHOGONAL,
        size: int = 10,
        difficulty: int = 3,
    ) -> MazeResult:
        """Generate with the fixed preview seed so previews never flicker."""

        config = GeneratorConfig(maze_type=maze_type, size=size, difficulty=difficulty, seed=PREVIEW_SEED)
        return cls(config).generate()


def _generate_one(config: GeneratorConfig) -> MazeResult:
    return MazeGenerator(config).generate()


def generate_batch(
    configs: Sequence[GeneratorConfig],
    max_workers: int = 4,
    executor: Optional[Executor] = None,
) -> List[MazeResult]:
    """Generate many mazes concurrently, one grid and one RNG per task.

    Generation is CPU bound, so the default thread pool only overlaps work
    with whatever I/O the caller does. Pass a ``ProcessPoolExecutor`` to
    spread large batches over cores; a caller-supplied executor is left
    running. Results come back in the order of ``configs``.
    """

    if executor is None:
        with ThreadPoolExecutor(max_workers=max(1, max_workers)) as pool:
            return generate_batch(configs, executor=pool)

    results: List[Optional[MazeResult]] = [None] * len(configs)
    futures = {executor.submit(_generate_one, config): position for position, config in enumerate(configs)}
    for future in as_completed(futures):
        position = futures[future]
        results[position] = future.result()
    LOGGER.info("Generated batch of %s mazes", len(configs))
    return [result for result in results if result is not None]
