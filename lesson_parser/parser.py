"""
Entry point for turning a model-written lesson plan into a ParsedLesson.

    from lesson_parser.parser import parse_lesson_plan
    lesson = parse_lesson_plan(markdown)

Results are memoized per exact input string. Each call returns its own copy,
so callers may mutate what they receive without affecting later calls.
"""

import copy
import functools
import logging
import os

from lesson_parser.pipeline.assembler import DEFAULT_TITLE, assemble
from lesson_parser.pipeline.enumerator import enumerate_options
from lesson_parser.pipeline.extractor import extract_options
from lesson_parser.pipeline.sectioner import discover_sections
from lesson_parser.state import (
    AdditionalContent,
    LessonMetadata,
    LessonSections,
    ParsedLesson,
)

logger = logging.getLogger(__name__)

CACHE_SIZE_ENV = "LESSON_PARSER_CACHE_SIZE"
DEFAULT_CACHE_SIZE = 128


def _cache_size() -> int:
    raw = os.environ.get(CACHE_SIZE_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_CACHE_SIZE
    try:
        size = int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r, using %d", CACHE_SIZE_ENV, raw, DEFAULT_CACHE_SIZE)
        return DEFAULT_CACHE_SIZE
    return max(size, 0)


def empty_lesson() -> ParsedLesson:
    """The record returned for missing or unusable input."""
    return ParsedLesson(
        metadata=LessonMetadata(title=DEFAULT_TITLE, subject="", year_group="", duration=""),
        sections=LessonSections(
            overview="",
            objectives=[],
            discussion_prompts=[],
            lesson_options="",
            assessment="",
            differentiation="",
            cross_curricular="",
            additional_notes="",
            reflection="",
        ),
        options=[],
        additional_content=AdditionalContent(
            differentiation_items=[],
            differentiation_tiers=[],
            cross_curricular_items=[],
            reflection_items=[],
            additional_notes_items=[],
        ),
    )


def run_pipeline(content: str) -> dict:
    """Run every parsing stage over ``content``, return final state."""
    state: dict = {"document": content, "warnings": []}

    state.update(discover_sections(state))
    state.update(enumerate_options(state))
    state.update(extract_options(state))
    state.update(assemble(state))

    return state


@functools.lru_cache(maxsize=_cache_size())
def _parse_cached(content: str) -> ParsedLesson:
    return run_pipeline(content)["lesson"]


def parse_lesson_plan(content: str | None) -> ParsedLesson:
    """Parse lesson plan markdown. Never raises."""
    if not content or not isinstance(content, str):
        return empty_lesson()
    return copy.deepcopy(_parse_cached(content))


def clear_cache() -> None:
    _parse_cached.cache_clear()
