"""Regenerate the ``pipe`` overload ladder in ``pipekit/functional.py``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from pipekit.codegen import (  # noqa: E402
    MAX_TYPED_ARITY,
    extract_generated_block,
    render_overloads,
    replace_generated_block,
)
from pipekit.utils.logging import setup_logging  # noqa: E402

LOGGER = logging.getLogger("generate_pipe_overloads")
DEFAULT_TARGET = SRC_ROOT / "pipekit" / "functional.py"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--path", type=Path, default=DEFAULT_TARGET)
    parser.add_argument("--max-arity", type=int, default=MAX_TYPED_ARITY)
    parser.add_argument("--check", action="store_true", help="exit 1 if the file is out of date")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    source = args.path.read_text(encoding="utf-8")
    block = render_overloads(args.max_arity)

    if args.check:
        if extract_generated_block(source) != block:
            LOGGER.error("%s is out of date; rerun without --check", args.path)
            return 1
        LOGGER.info("%s is up to date", args.path)
        return 0

    updated = replace_generated_block(source, block)
    if updated == source:
        LOGGER.info("%s already up to date", args.path)
        return 0
    args.path.write_text(updated, encoding="utf-8")
    LOGGER.info("Wrote %d overloads to %s", args.max_arity + 1, args.path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
