from lesson_parser.parser import empty_lesson, run_pipeline
from lesson_parser.pipeline.checker import check_lesson, check_shape
from lesson_parser.pipeline.sectioner import CANONICAL_SECTIONS, heading_offsets


def test_sample_lesson_has_expected_shape(sample_lesson):
    state = run_pipeline(sample_lesson)
    assert check_shape(state["lesson"], state["heading_offsets"]) == []


def test_empty_lesson_reports_every_problem():
    problems = check_shape(empty_lesson(), heading_offsets(""))
    assert len([p for p in problems if p.startswith("Missing section")]) == len(CANONICAL_SECTIONS)
    assert "Expected 3-4 learning objectives, found 0" in problems
    assert "Expected 3-4 discussion prompts, found 0" in problems
    assert "Expected 3 lesson options, found 0" in problems
    assert "Expected at least 3 cross-curricular links, found 0" in problems


def test_check_shape_without_offsets_skips_missing_sections():
    problems = check_shape(empty_lesson())
    assert not any(p.startswith("Missing section") for p in problems)


def test_check_lesson_appends_warnings(caplog):
    state = run_pipeline("## Lesson Options\nFree choice")
    state["warnings"] = ["earlier"]
    result = check_lesson(state)
    assert result["warnings"][0] == "earlier"
    assert "Missing section: Lesson Overview" in result["warnings"]
    assert "Missing section: Lesson Overview" in caplog.text
