import logging

from lesson_parser.pipeline.sectioner import (
    ADDITIONAL_NOTES,
    ASSESSMENT,
    CANONICAL_SECTIONS,
    CROSS_CURRICULAR,
    DIFFERENTIATION,
    OBJECTIVES,
    OPTIONS,
    OVERVIEW,
    REFLECTION,
    discover_sections,
    heading_offsets,
    next_present,
    segment,
)


def test_canonical_order():
    assert CANONICAL_SECTIONS[0] == OVERVIEW
    assert CANONICAL_SECTIONS[-1] == REFLECTION
    assert CANONICAL_SECTIONS.index(ASSESSMENT) < CANONICAL_SECTIONS.index(DIFFERENTIATION)


def test_overview_and_objectives_bounded_by_next_heading():
    document = (
        "## Lesson Overview\nIntro\n"
        "## Learning Objectives\n- Learn\n"
        "## Lesson Options\nStuff"
    )
    sections = segment(document)
    assert sections[OVERVIEW] == "## Lesson Overview\nIntro"
    assert sections[OBJECTIVES] == "## Learning Objectives\n- Learn"
    assert sections[OPTIONS] == "## Lesson Options\nStuff"


def test_missing_sections_are_empty_strings():
    sections = segment("## Lesson Overview\nIntro")
    assert set(sections) == set(CANONICAL_SECTIONS)
    assert all(sections[name] == "" for name in CANONICAL_SECTIONS if name != OVERVIEW)


def test_boundary_chain_skips_absent_sections():
    document = (
        "## Assessment Questions\nQ1\n"
        "## Cross-Curricular Links\nArt: x\n"
        "## Reflection Suggestions\nR"
    )
    sections = segment(document)
    assert sections[ASSESSMENT] == "## Assessment Questions\nQ1"
    assert sections[CROSS_CURRICULAR] == "## Cross-Curricular Links\nArt: x"
    assert sections[REFLECTION] == "## Reflection Suggestions\nR"
    assert sections[DIFFERENTIATION] == ""


def test_body_mention_is_not_a_boundary():
    document = "## Additional Notes\nSee Reflection Suggestions later\nmore"
    assert segment(document)[ADDITIONAL_NOTES] == document


def test_next_present():
    offsets = heading_offsets("## Assessment Questions\nQ\n## Reflection Suggestions\nR")
    assert next_present(ASSESSMENT, offsets) == REFLECTION
    assert next_present(REFLECTION, offsets) is None
    assert next_present(OVERVIEW, offsets) == ASSESSMENT


def test_discover_sections_logs_missing(caplog):
    caplog.set_level(logging.INFO)
    result = discover_sections({"document": "## Lesson Overview\nIntro"})
    assert result["sections"][OVERVIEW] == "## Lesson Overview\nIntro"
    assert result["heading_offsets"][OVERVIEW] == 0
    assert "Missing sections" in caplog.text


def test_sample_lesson_sections(sample_lesson):
    sections = segment(sample_lesson)
    assert all(sections[name] for name in CANONICAL_SECTIONS)
    assert "## Option 3" in sections[OPTIONS]
    assert ASSESSMENT not in sections[OPTIONS]
