"""
Cross-curricular links: "Subject: description" pairs.

Lines without a new subject marker continue the pending description. A
trailing subject that never received a description is dropped.
"""

import logging
import re

from lesson_parser.pipeline.normalizer import normalize_line
from lesson_parser.pipeline.sectioner import CROSS_CURRICULAR
from lesson_parser.state import SubjectLink

logger = logging.getLogger(__name__)

_HEADING_PREFIX_RE = re.compile(r"^#{1,6}\s{0,8}")
_SUBJECT_RE = re.compile(
    r"^([A-Za-z][A-Za-z&/'-]{0,30}(?: [A-Za-z&/'-]{1,30}){0,3})[ \t]{0,4}:[ \t]{0,8}(.*)$"
)
_BARE_SUBJECT_RE = re.compile(r"^[A-Za-z]{1,40}$")


def _clean(line: str) -> str:
    return normalize_line(_HEADING_PREFIX_RE.sub("", line.strip()))


def _is_self_heading(text: str) -> bool:
    return text.rstrip(":").strip().lower() == CROSS_CURRICULAR.lower()


def _match_subject(text: str) -> tuple[str, str] | None:
    m = _SUBJECT_RE.match(text)
    if m:
        return m.group(1).strip(), m.group(2).strip()
    if _BARE_SUBJECT_RE.match(text):
        return text, ""
    return None


class LinkCollector:
    """State machine: idle until a subject line, then accumulating its description."""

    def __init__(self) -> None:
        self.subject: str | None = None
        self.description = ""
        self.links: list[SubjectLink] = []

    def _commit(self) -> None:
        if self.subject is not None:
            self.links.append(SubjectLink(subject=self.subject, description=self.description))
        self.subject = None
        self.description = ""

    def feed(self, text: str) -> None:
        matched = _match_subject(text)
        if matched is not None:
            subject, description = matched
            if self.description or description:
                self._commit()
            elif self.subject is not None:
                logger.debug("Dropping subject without description: %r", self.subject)
            self.subject, self.description = subject, description
            return
        if self.subject is None:
            logger.debug("Dropping text before first subject: %r", text)
            return
        self.description = f"{self.description} {text}" if self.description else text

    def finish(self) -> list[SubjectLink]:
        if self.subject is not None and self.description:
            self._commit()
        elif self.subject is not None:
            logger.debug("Dropping trailing subject without description: %r", self.subject)
        return self.links


def to_pairs(section_text: str) -> list[SubjectLink]:
    if not section_text:
        return []

    collector = LinkCollector()
    first = True
    for line in section_text.splitlines():
        text = _clean(line)
        if not text:
            continue
        if first and _is_self_heading(text):
            first = False
            continue
        first = False
        collector.feed(text)
    return collector.finish()
