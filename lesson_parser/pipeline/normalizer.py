"""
Strips markdown decoration from single lines of model output.

All patterns carry explicit repetition bounds so a hostile line cannot
trigger catastrophic backtracking.
"""

import re

_TAG_RE = re.compile(r"<[^<>\n]{0,200}>")
_BARE_HEADING_RE = re.compile(r"#{1,6}\s{0,8}")
_BULLET_RE = re.compile(r"^[-•*]\s{1,8}")
_ASTERISK_RE = re.compile(r"\*{1,2}")
_NUMBERED_RE = re.compile(r"^\d{1,4}\.\s{1,8}")


def strip_tags(text: str) -> str:
    """Remove HTML-like tags such as <br> or <strong>."""
    return _TAG_RE.sub("", text)


def normalize_line(line: str) -> str:
    """Return the plain text of one markdown line, possibly empty."""
    if not isinstance(line, str):
        return ""

    text = strip_tags(line).strip()
    if not text or _BARE_HEADING_RE.fullmatch(text):
        return ""

    text = _BULLET_RE.sub("", text)
    # Bold before numbering so "**1.** Draw" loses both markers
    text = _ASTERISK_RE.sub("", text).strip()
    text = _NUMBERED_RE.sub("", text)
    return text.strip()
