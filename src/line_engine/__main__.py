"""Read one line from the controlling terminal and echo it back."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from typing import Optional, Sequence

from line_engine.config import EditorConfig
from line_engine.editor import read_line
from line_engine.errors import LineEngineError


def _parse_args(
    defaults: EditorConfig, argv: Optional[Sequence[str]] = None
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="line_engine", description="Read a single line with the gap buffer editor."
    )
    parser.add_argument("--prompt", default="> ", help="Prompt to display (default: '> ')")
    parser.add_argument(
        "--initial-capacity",
        type=int,
        default=defaults.initial_capacity,
        help="Initial gap buffer size in bytes (default: %(default)s)",
    )
    parser.add_argument(
        "--strict-restore",
        action="store_true",
        default=defaults.strict_restore,
        help="Fail if the terminal cannot be restored afterwards",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    base = EditorConfig.from_env()
    args = _parse_args(base, argv)
    try:
        config = dataclasses.replace(
            base,
            initial_capacity=args.initial_capacity,
            strict_restore=args.strict_restore,
        )
    except ValueError as exc:
        print(f"line_engine: {exc}", file=sys.stderr)
        return 2

    try:
        line = read_line(args.prompt, config=config)
    except EOFError:
        return 1
    except LineEngineError as exc:
        print(f"line_engine: {exc}", file=sys.stderr)
        return 1
    print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual demo
    sys.exit(main())
