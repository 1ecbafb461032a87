import pytest

from lesson_parser.pipeline.normalizer import normalize_line, strip_tags


@pytest.mark.parametrize(
    "line,expected",
    [
        ("", ""),
        ("   ", ""),
        ("###", ""),
        ("## ", ""),
        ("- item", "item"),
        ("• item", "item"),
        ("* item", "item"),
        ("**bold** text", "bold text"),
        ("1. First", "First"),
        ("12. Twelfth", "Twelfth"),
        ("**1.** Draw a diagram", "Draw a diagram"),
        ("- **Support**: use visuals", "Support: use visuals"),
        ("<br>Line<br/>", "Line"),
        ("<b>Core</b>: finish", "Core: finish"),
        ("  plain text  ", "plain text"),
        ("## Heading text", "## Heading text"),
    ],
)
def test_normalize_line(line, expected):
    assert normalize_line(line) == expected


def test_normalize_line_non_string():
    assert normalize_line(None) == ""


def test_normalize_line_adversarial_input_is_handled():
    assert normalize_line("*" * 10_000 + "x") == "x"
    assert isinstance(normalize_line("<" * 5_000), str)
    assert isinstance(normalize_line("#" * 5_000 + " " * 5_000), str)


def test_strip_tags_keeps_unclosed_angle_brackets():
    assert strip_tags("3 < 4 and <em>5</em>") == "3 < 4 and 5"
