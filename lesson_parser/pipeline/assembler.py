"""
Final assembly of the parsed lesson record.

Every field is always present; absent sections become "" or [].
No model involved. Pure Python.
"""

import logging
import re

from lesson_parser.pipeline.classifier import classify
from lesson_parser.pipeline.links import to_pairs
from lesson_parser.pipeline.lists import extract_value, to_list
from lesson_parser.pipeline import sectioner as s
from lesson_parser.state import (
    AdditionalContent,
    LessonMetadata,
    LessonSections,
    ParsedLesson,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Lesson Plan"

_TITLE_RE = re.compile(r"^# ([^\n]{1,500})$", re.MULTILINE)


def extract_title(document: str) -> str:
    m = _TITLE_RE.search(document or "")
    if not m:
        return DEFAULT_TITLE
    return m.group(1).strip() or DEFAULT_TITLE


def extract_metadata(title: str, overview: str) -> LessonMetadata:
    return LessonMetadata(
        title=title,
        subject=extract_value(overview, "Subject:"),
        year_group=extract_value(overview, "Year Group:"),
        duration=extract_value(overview, "Duration:"),
    )


def build_sections(raw: dict[str, str]) -> LessonSections:
    return LessonSections(
        overview=raw.get(s.OVERVIEW, ""),
        objectives=to_list(raw.get(s.OBJECTIVES, "")),
        discussion_prompts=to_list(raw.get(s.PROMPTS, "")),
        lesson_options=raw.get(s.OPTIONS, ""),
        assessment=raw.get(s.ASSESSMENT, ""),
        differentiation=raw.get(s.DIFFERENTIATION, ""),
        cross_curricular=raw.get(s.CROSS_CURRICULAR, ""),
        additional_notes=raw.get(s.ADDITIONAL_NOTES, ""),
        reflection=raw.get(s.REFLECTION, ""),
    )


def build_additional_content(sections: LessonSections) -> AdditionalContent:
    differentiation = sections["differentiation"]
    return AdditionalContent(
        differentiation_items=to_list(differentiation),
        # bold-only lines such as "**Support**" are tier labels here
        differentiation_tiers=classify(to_list(differentiation, drop_bold_lines=False)),
        cross_curricular_items=to_pairs(sections["cross_curricular"]),
        reflection_items=to_list(sections["reflection"]),
        additional_notes_items=to_list(sections["additional_notes"]),
    )


def assemble(state: dict) -> dict:
    """Combine sections and options into the final ParsedLesson."""
    sections = build_sections(state.get("sections", {}))
    lesson = ParsedLesson(
        metadata=extract_metadata(extract_title(state.get("document", "")), sections["overview"]),
        sections=sections,
        options=list(state.get("options", [])),
        additional_content=build_additional_content(sections),
    )

    logger.info(
        "Assembly complete: %d objectives, %d prompts, %d options",
        len(sections["objectives"]), len(sections["discussion_prompts"]), len(lesson["options"]),
    )
    return {"lesson": lesson}
