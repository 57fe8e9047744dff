import pickle
import unittest
from concurrent.futures import ProcessPoolExecutor
from unittest.mock import MagicMock, patch

from mazegen.core.constants import PREVIEW_SEED, MazeType
from mazegen.core.exceptions import ValidationError
from mazegen.engine.generator import (
    GeneratorConfig,
    MazeGenerator,
    generate_batch,
    size_to_grid_dimensions,
)
from mazegen.engine.validator import ValidationResult


class SizePresetTests(unittest.TestCase):
    def test_known_presets(self) -> None:
        self.assertEqual(size_to_grid_dimensions(1), (15, 10))
        self.assertEqual(size_to_grid_dimensions(10), (55, 35))
        self.assertEqual(size_to_grid_dimensions(20), (100, 64))

    def test_out_of_range_sizes_are_clamped(self) -> None:
        self.assertEqual(size_to_grid_dimensions(0), size_to_grid_dimensions(1))
        self.assertEqual(size_to_grid_dimensions(-4), size_to_grid_dimensions(1))
        self.assertEqual(size_to_grid_dimensions(25), size_to_grid_dimensions(20))

    def test_width_grows_with_size(self) -> None:
        widths = [size_to_grid_dimensions(size)[0] for size in range(1, 21)]
        self.assertEqual(widths, sorted(widths))

    def test_explicit_dimensions_override_preset(self) -> None:
        self.assertEqual(GeneratorConfig(width=12, height=8).dimensions(), (12, 8))
        self.assertEqual(GeneratorConfig(size=10, width=12).dimensions(), (12, 35))
        self.assertEqual(GeneratorConfig(size=1, height=4).dimensions(), (15, 4))


class MazeGeneratorTests(unittest.TestCase):
    def test_generate_returns_validated_result(self) -> None:
        config = GeneratorConfig(maze_type=MazeType.SIGMA, width=8, height=8, seed=7)
        result = MazeGenerator(config).generate()
        self.assertEqual(result.seed, 7)
        self.assertEqual(result.validation_messages, [])
        self.assertEqual(result.solution_path[0], (0, 0))
        self.assertEqual(result.solution_path[-1], (7, 7))
        self.assertGreaterEqual(result.elapsed_seconds, 0.0)

    def test_validation_failure_raises(self) -> None:
        validator = MagicMock()
        validator.validate.return_value = ValidationResult(ok=False, messages=["boom"])
        generator = MazeGenerator(GeneratorConfig(width=4, height=4, seed=1), validator=validator)
        with self.assertRaises(ValidationError):
            generator.generate()
        validator.validate.assert_called_once()

    def test_validation_can_be_skipped(self) -> None:
        validator = MagicMock()
        config = GeneratorConfig(width=4, height=4, seed=1, validate=False)
        MazeGenerator(config, validator=validator).generate()
        validator.validate.assert_not_called()

    def test_preview_is_stable(self) -> None:
        first = MazeGenerator.preview(MazeType.DELTA, size=1, difficulty=2)
        second = MazeGenerator.preview(MazeType.DELTA, size=1, difficulty=2)
        self.assertEqual(first.seed, PREVIEW_SEED)
        self.assertEqual((first.grid.width, first.grid.height), (15, 10))
        self.assertEqual(first.grid.to_jsonable(), second.grid.to_jsonable())

    def test_regenerate_uses_wall_clock_seed(self) -> None:
        generator = MazeGenerator(GeneratorConfig(width=5, height=5, seed=3))
        with patch("mazegen.engine.generator.time.time", return_value=1_700_000_000.25):
            result = generator.regenerate()
        self.assertEqual(result.seed, 1_700_000_000_250)
        self.assertEqual(generator.config.seed, 1_700_000_000_250)
        self.assertEqual(result.grid.seed, 1_700_000_000_250)

    def test_result_payload(self) -> None:
        result = MazeGenerator(GeneratorConfig(maze_type="theta", width=6, height=4, seed=11)).generate()
        payload = result.to_jsonable()
        self.assertEqual(payload["maze_type"], "THETA")
        self.assertEqual(payload["seed"], 11)
        self.assertEqual(payload["validation"], [])
        self.assertIn("elapsed_seconds", payload)
        self.assertEqual(payload["start"], [3, 2])
        self.assertEqual(payload["end"], [0, 3])
        self.assertEqual(payload["solution_path"][0], [3, 2])


class GenerateBatchTests(unittest.TestCase):
    def test_results_keep_input_order(self) -> None:
        configs = [
            GeneratorConfig(maze_type=maze_type, width=6, height=5, seed=index)
            for index, maze_type in enumerate(MazeType)
        ]
        results = generate_batch(configs, max_workers=2)
        self.assertEqual([r.grid.maze_type for r in results], list(MazeType))
        self.assertEqual([r.seed for r in results], [0, 1, 2, 3])

    def test_batch_matches_sequential_generation(self) -> None:
        config = GeneratorConfig(maze_type=MazeType.ORTHOGONAL, width=7, height=7, seed=42)
        batch = generate_batch([config, config])
        single = MazeGenerator(config).generate()
        for result in batch:
            self.assertEqual(result.grid.to_jsonable(), single.grid.to_jsonable())

    def test_empty_batch(self) -> None:
        self.assertEqual(generate_batch([]), [])

    def test_caller_supplied_process_pool(self) -> None:
        configs = [
            GeneratorConfig(maze_type=MazeType.SIGMA, width=6, height=6, seed=5),
            GeneratorConfig(maze_type=MazeType.THETA, width=6, height=6),
        ]
        with ProcessPoolExecutor(max_workers=2) as pool:
            results = generate_batch(configs, executor=pool)
            # The pool is still usable afterwards.
            self.assertEqual(pool.submit(abs, -1).result(), 1)
        self.assertEqual([r.grid.maze_type for r in results], [MazeType.SIGMA, MazeType.THETA])
        expected = MazeGenerator(configs[0]).generate()
        self.assertEqual(results[0].grid.to_jsonable(), expected.grid.to_jsonable())
        self.assertEqual(results[1].solution_path[0], (3, 3))

    def test_generated_unseeded_grid_pickles(self) -> None:
        result = MazeGenerator(GeneratorConfig(width=5, height=5)).generate()
        restored = pickle.loads(pickle.dumps(result))
        self.assertEqual(restored.grid.to_jsonable(), result.grid.to_jsonable())
        self.assertIsNone(restored.grid.rng)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
