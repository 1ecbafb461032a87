"""
Compares a parsed lesson against the shape the generation prompt asks for.

The prompt requests exactly three lesson options, three or four learning
objectives, three or four discussion prompts and at least three
cross-curricular links. Deviations are reported, never corrected.
"""

import logging

from lesson_parser.pipeline.sectioner import CANONICAL_SECTIONS
from lesson_parser.state import ParsedLesson

logger = logging.getLogger(__name__)

EXPECTED_OPTIONS = 3
OBJECTIVES_RANGE = (3, 4)
PROMPTS_RANGE = (3, 4)
MIN_CROSS_CURRICULAR = 3


def _check_range(label: str, count: int, bounds: tuple[int, int]) -> str | None:
    low, high = bounds
    if low <= count <= high:
        return None
    return f"Expected {low}-{high} {label}, found {count}"


def check_shape(lesson: ParsedLesson, offsets: dict[str, int | None] | None = None) -> list[str]:
    """Human-readable deviations from the requested lesson shape."""
    problems: list[str] = []

    if offsets is not None:
        for name in CANONICAL_SECTIONS:
            if offsets.get(name) is None:
                problems.append(f"Missing section: {name}")

    sections = lesson["sections"]
    for label, items, bounds in (
        ("learning objectives", sections["objectives"], OBJECTIVES_RANGE),
        ("discussion prompts", sections["discussion_prompts"], PROMPTS_RANGE),
    ):
        msg = _check_range(label, len(items), bounds)
        if msg:
            problems.append(msg)

    n_options = len(lesson["options"])
    if n_options != EXPECTED_OPTIONS:
        problems.append(f"Expected {EXPECTED_OPTIONS} lesson options, found {n_options}")

    n_links = len(lesson["additional_content"]["cross_curricular_items"])
    if n_links < MIN_CROSS_CURRICULAR:
        problems.append(
            f"Expected at least {MIN_CROSS_CURRICULAR} cross-curricular links, found {n_links}"
        )

    return problems


def check_lesson(state: dict) -> dict:
    """Pipeline stage: append shape problems to ``state["warnings"]``."""
    problems = check_shape(state["lesson"], state.get("heading_offsets"))
    for msg in problems:
        logger.warning(msg)
    return {"warnings": list(state.get("warnings", [])) + problems}
