"""
Markdown loading: file path or stdin, line endings normalized to "\n".
"""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

STDIN = "-"


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def read_markdown(source: str) -> str:
    """Read a markdown document from ``source`` ("-" for stdin)."""
    if source == STDIN:
        logger.info("Reading markdown from stdin")
        return _normalize_newlines(sys.stdin.read())

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"Markdown file not found: {source}")

    logger.info("Reading markdown: %s", path)
    # utf-8-sig drops a leading BOM that would hide the title line
    return _normalize_newlines(path.read_text(encoding="utf-8-sig"))


def load_document(state: dict) -> dict:
    """Pipeline stage: read ``state["source"]`` into ``state["document"]``."""
    document = read_markdown(state["source"])
    logger.info("Loaded %d chars, %d lines", len(document), document.count("\n") + 1)
    return {"document": document}
