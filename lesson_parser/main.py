"""CLI entry point for the lesson plan parser."""

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from lesson_parser.parser import run_pipeline
from lesson_parser.pipeline.checker import check_lesson
from lesson_parser.pipeline.loader import STDIN, load_document

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "LESSON_PARSER_LOG_LEVEL"
EXIT_SHAPE_WARNINGS = 2


def run(source: str) -> dict:
    """Load, parse and shape-check one document, return final state."""
    state: dict = {"source": source}
    state.update(load_document(state))
    state.update(run_pipeline(state["document"]))
    state.update(check_lesson(state))
    return state


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lesson-parser",
        description="Convert a markdown lesson plan into structured JSON.",
    )
    parser.add_argument("input", help=f"Markdown file, or {STDIN!r} for stdin")
    parser.add_argument("--output", "-o", default=None,
                        help="JSON output path (default: stdout)")
    parser.add_argument("--log-level", default=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--strict", action="store_true",
                        help=f"Exit with status {EXIT_SHAPE_WARNINGS} if the lesson shape is off")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level, logging.INFO), format="%(levelname)s %(name)s: %(message)s")

    start = time.time()
    logger.info("Parsing lesson plan from %s", args.input)

    try:
        state = run(args.input)
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return 1
    except Exception:
        logger.exception("Parsing failed")
        return 1

    lesson = state["lesson"]
    payload = json.dumps(lesson, indent=2, ensure_ascii=False)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(payload)
            fh.write("\n")
        logger.info("Done: %d options -> %s (%.2fs)",
                    len(lesson["options"]), output_path, time.time() - start)
    else:
        sys.stdout.write(payload + "\n")

    warnings = state.get("warnings", [])
    if warnings and args.strict:
        logger.error("%d shape warnings in strict mode", len(warnings))
        return EXIT_SHAPE_WARNINGS
    return 0


if __name__ == "__main__":
    sys.exit(main())
