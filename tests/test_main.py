import contextlib
import io
import json
import logging
import tempfile
import unittest
from pathlib import Path

import main


class MainCliTests(unittest.TestCase):
    def test_writes_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            output = Path(tmp) / "maze.json"
            code = main.main(
                [
                    "--type", "sigma",
                    "--width", "5",
                    "--height", "4",
                    "--seed", "1",
                    "--output", str(output),
                    "--log-level", "WARNING",
                ]
            )
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(payload["maze_type"], "SIGMA")
        self.assertEqual((payload["width"], payload["height"]), (5, 4))
        self.assertEqual(payload["seed"], 1)
        self.assertEqual(payload["validation"], [])

    def test_prints_json_to_stdout(self) -> None:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            main.main(["--width", "3", "--height", "3", "--seed", "5", "--log-level", "WARNING"])
        payload = json.loads(buffer.getvalue())
        self.assertEqual(payload["solution_path"][0], [0, 0])
        self.assertEqual(payload["solution_path"][-1], [2, 2])

    def test_pretty_output(self) -> None:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            main.main(["--size", "1", "--seed", "9", "--pretty", "--log-level", "WARNING"])
        text = buffer.getvalue()
        self.assertIn("--- Grid ---", text)
        self.assertIn("--- Solution ---", text)
        self.assertIn("15 x 10", text)
        self.assertIn("Seed: 9", text)

    def test_engine_log_level_is_applied(self) -> None:
        buffer = io.StringIO()
        try:
            with contextlib.redirect_stdout(buffer):
                main.main(
                    ["--width", "3", "--height", "3", "--log-level", "WARNING", "--engine-log-level", "error"]
                )
            self.assertEqual(logging.getLogger("mazegen").level, logging.ERROR)
        finally:
            logging.getLogger("mazegen").setLevel(logging.NOTSET)

    def test_invalid_dimensions_exit_with_usage_error(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main.main(["--width", "0", "--log-level", "WARNING"])
        self.assertEqual(ctx.exception.code, 2)

    def test_unknown_type_is_rejected(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main.main(["--type", "spiral"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
