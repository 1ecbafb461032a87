"""
Splits a lesson plan into its canonical sections.

Each section ends at the next canonical heading that is actually present,
so a missing section never leaves a neighbour running to a phantom boundary.
"""

import logging

from lesson_parser.pipeline.locator import extract_section, find_heading

logger = logging.getLogger(__name__)

OVERVIEW = "Lesson Overview"
OBJECTIVES = "Learning Objectives"
PROMPTS = "Initial Discussion Prompts"
OPTIONS = "Lesson Options"
ASSESSMENT = "Assessment Questions"
DIFFERENTIATION = "Differentiation & SEN Support"
CROSS_CURRICULAR = "Cross-Curricular Links"
ADDITIONAL_NOTES = "Additional Notes"
REFLECTION = "Reflection Suggestions"

CANONICAL_SECTIONS: tuple[str, ...] = (
    OVERVIEW,
    OBJECTIVES,
    PROMPTS,
    OPTIONS,
    ASSESSMENT,
    DIFFERENTIATION,
    CROSS_CURRICULAR,
    ADDITIONAL_NOTES,
    REFLECTION,
)


def heading_offsets(document: str) -> dict[str, int | None]:
    """Offset of every canonical heading, None where absent."""
    return {name: find_heading(document, name) for name in CANONICAL_SECTIONS}


def next_present(name: str, offsets: dict[str, int | None]) -> str | None:
    """The first canonical section after ``name`` whose heading is present."""
    idx = CANONICAL_SECTIONS.index(name)
    for candidate in CANONICAL_SECTIONS[idx + 1:]:
        if offsets.get(candidate) is not None:
            return candidate
    return None


def segment(document: str, offsets: dict[str, int | None] | None = None) -> dict[str, str]:
    """Raw text of every canonical section, "" where the heading is absent."""
    if offsets is None:
        offsets = heading_offsets(document)

    sections: dict[str, str] = {}
    for name in CANONICAL_SECTIONS:
        if offsets.get(name) is None:
            sections[name] = ""
            continue
        sections[name] = extract_section(document, name, next_present(name, offsets))
    return sections


def discover_sections(state: dict) -> dict:
    """Pipeline stage: locate canonical sections in ``state["document"]``."""
    document = state["document"]
    offsets = heading_offsets(document)
    sections = segment(document, offsets)

    missing = [name for name in CANONICAL_SECTIONS if offsets[name] is None]
    if missing:
        logger.info("Missing sections: %s", ", ".join(missing))
    for name in CANONICAL_SECTIONS:
        if sections[name]:
            logger.debug("  Section %r %d chars", name, len(sections[name]))
    logger.info("Discovered %d of %d sections",
                len(CANONICAL_SECTIONS) - len(missing), len(CANONICAL_SECTIONS))

    return {"sections": sections, "heading_offsets": offsets}
