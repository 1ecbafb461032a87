"""
Finds heading-bounded sections in a markdown document.

Only H2-H4 headings count as section boundaries; H1 is the document title.
Heading text is matched exactly first, then in looser casings, because models
drift between title case and sentence case.
"""

import logging
import re
from collections.abc import Iterator

from lesson_parser.state import EMPTY_SPAN, SectionSpan

logger = logging.getLogger(__name__)

_HEADING_TEMPLATE = r"^#{{2,4}}[ \t]{{1,8}}(?:\*\*)?{name}(?!\w)"


def heading_candidates(name: str) -> Iterator[str]:
    """Yield the distinct spellings tried for a heading, most exact first."""
    if not name:
        return
    forms = (
        name,
        name[0].upper() + name[1:],
        name[0].upper() + name[1:].lower(),
        name.title(),
    )
    seen: set[str] = set()
    for form in forms:
        if form not in seen:
            seen.add(form)
            yield form


def _heading_re(form: str) -> re.Pattern[str]:
    return re.compile(_HEADING_TEMPLATE.format(name=re.escape(form)), re.MULTILINE)


def find_heading(document: str, name: str, start: int = 0) -> int | None:
    """Offset of the first heading line for ``name`` at or after ``start``."""
    for form in heading_candidates(name):
        m = _heading_re(form).search(document, start)
        if m:
            if form != name:
                logger.debug("Heading %r matched as %r", name, form)
            return m.start()
    return None


def locate_section(
    document: str, start_heading: str, end_heading: str | None,
) -> SectionSpan:
    """Span from the start heading up to the end heading or document end."""
    start = find_heading(document, start_heading)
    if start is None:
        return EMPTY_SPAN

    end = len(document)
    if end_heading:
        found = find_heading(document, end_heading, start + 1)
        if found is not None:
            end = found
    return SectionSpan(start, end)


def extract_section(
    document: str, start_heading: str, end_heading: str | None,
) -> str:
    span = locate_section(document, start_heading, end_heading)
    if span.is_empty:
        return ""
    return document[span.start:span.end].strip()
