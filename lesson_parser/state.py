"""
Shared TypedDicts for the lesson plan parsing pipeline.
"""

from typing import NamedTuple, TypedDict


class SectionSpan(NamedTuple):
    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start


EMPTY_SPAN = SectionSpan(0, 0)


class Option(TypedDict):
    number: int      # as written in the heading, 1-indexed
    content: str     # trimmed span text, heading line included


class TierBucket(TypedDict):
    type: str        # default, support, core, extension
    content: list[str]


class SubjectLink(TypedDict):
    subject: str
    description: str


class LessonMetadata(TypedDict):
    title: str
    subject: str
    year_group: str
    duration: str


class LessonSections(TypedDict):
    overview: str
    objectives: list[str]
    discussion_prompts: list[str]
    lesson_options: str
    assessment: str
    differentiation: str
    cross_curricular: str
    additional_notes: str
    reflection: str


class AdditionalContent(TypedDict):
    differentiation_items: list[str]
    differentiation_tiers: list[TierBucket]
    cross_curricular_items: list[SubjectLink]
    reflection_items: list[str]
    additional_notes_items: list[str]


class ParsedLesson(TypedDict):
    metadata: LessonMetadata
    sections: LessonSections
    options: list[Option]
    additional_content: AdditionalContent
