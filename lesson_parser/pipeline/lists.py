"""
Line-item and labelled-value extraction from section text.
"""

import re

from lesson_parser.pipeline.normalizer import normalize_line

_HEADING_LINE_RE = re.compile(r"^\s{0,3}#")
_BOLD_ONLY_RE = re.compile(r"^\s{0,3}\*\*[^*\n]{0,200}\*\*\s{0,8}$")
_VALUE_TEMPLATE = r"\*\*{label}\*\*[ \t]{{1,16}}([^\n]{{1,2000}})"


def to_list(section_text: str, drop_bold_lines: bool = True) -> list[str]:
    """Split section text into cleaned, non-empty line items.

    Heading lines are dropped, and so are bold-only lines such as
    ``**Activities**`` unless ``drop_bold_lines`` is False.
    """
    if not section_text:
        return []

    items: list[str] = []
    for line in section_text.splitlines():
        if _HEADING_LINE_RE.match(line):
            continue
        if drop_bold_lines and _BOLD_ONLY_RE.match(line):
            continue
        text = normalize_line(line)
        if text:
            items.append(text)
    return items


def extract_value(section_text: str, label: str) -> str:
    """Value following ``**label**`` on the same line, or "".

    >>> extract_value("**Duration:** 60 minutes", "Duration:")
    '60 minutes'
    """
    if not section_text or not label:
        return ""
    pattern = _VALUE_TEMPLATE.format(label=re.escape(label))
    m = re.search(pattern, section_text, re.IGNORECASE)
    return m.group(1).strip() if m else ""
