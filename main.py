"""CLI entrypoint for the procedural maze generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from mazegen.core.constants import MazeType
from mazegen.core.exceptions import MazeError
from mazegen.engine.generator import GeneratorConfig, MazeGenerator
from mazegen.utils.logger import configure_logging
from mazegen.utils.pretty import print_maze_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate procedural mazes over square, triangular, hexagonal or polar grids",
    )
    parser.add_argument(
        "--type",
        dest="maze_type",
        type=str.upper,
        choices=[t.value for t in MazeType],
        default=MazeType.ORTHOGONAL.value,
        help="Cell topology",
    )
    parser.add_argument("--size", type=int, default=10, help="Size preset 1-20 (ignored per axis by --width/--height)")
    parser.add_argument("--width", type=int, help="Grid width in cells")
    parser.add_argument("--height", type=int, help="Grid height in cells")
    parser.add_argument("--difficulty", type=int, default=3, help="Difficulty 1 (many shortcuts) to 5 (perfect maze)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print a text sketch and stats instead of JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--engine-log-level",
        type=str,
        default=None,
        help="Separate level for the mazegen loggers (e.g. DEBUG to trace phases)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    engine_level = getattr(logging, args.engine_log_level.upper(), None) if args.engine_log_level else None
    configure_logging(level, engine_level=engine_level)

    config = GeneratorConfig(
        maze_type=args.maze_type,
        size=args.size,
        difficulty=args.difficulty,
        seed=args.seed,
        width=args.width,
        height=args.height,
    )
    try:
        result = MazeGenerator(config).generate()
    except MazeError as exc:
        parser.error(str(exc))

    if args.pretty:
        print_maze_stats(result)
        return 0

    output_text = json.dumps(result.to_jsonable(), indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
