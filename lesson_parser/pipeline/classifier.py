"""
Groups differentiation lines into support / core / extension buckets.

A line naming a tier as a whole word ("Support: ...", "**Core**",
"Provide extra Support: ...") switches the active bucket; every other line
joins the active bucket. Lines seen before any label go to the "default"
bucket.
"""

import logging
import re

from lesson_parser.state import TierBucket

logger = logging.getLogger(__name__)

DEFAULT_TIER = "default"
TIERS: tuple[str, ...] = ("support", "core", "extension")

_LABEL_RE = re.compile(r"\b(" + "|".join(TIERS) + r")\b", re.IGNORECASE)
_BULLET_RE = re.compile(r"^[-•*]\s{1,8}")
_RESIDUE_LEAD_RE = re.compile(r"^[\s:*\-–—]{0,16}")


def _match_label(line: str) -> tuple[str, str] | None:
    """(tier, residue) if the line opens a new bucket."""
    text = line.replace("*", "").strip()
    m = _LABEL_RE.search(text)
    if not m:
        return None
    before = text[:m.start()].strip()
    after = _RESIDUE_LEAD_RE.sub("", text[m.end():]).strip()
    residue = " ".join(part for part in (before, after) if part)
    return m.group(1).lower(), residue


class TierClassifier:
    """State machine over lines.

    ``label`` is None while idle (nothing labelled yet, lines go to the
    default bucket) and the tier name once a label line has been seen.
    """

    def __init__(self) -> None:
        self.label: str | None = None
        self.content: list[str] = []
        self.buckets: list[TierBucket] = []

    @property
    def active_type(self) -> str:
        return self.label or DEFAULT_TIER

    def _flush(self) -> None:
        if self.content:
            self.buckets.append(TierBucket(type=self.active_type, content=self.content))
        self.content = []

    def feed(self, line: str) -> None:
        text = _BULLET_RE.sub("", line.strip()).strip() if isinstance(line, str) else ""
        if not text:
            return

        matched = _match_label(text)
        if matched is None:
            self.content.append(text)
            return

        tier, residue = matched
        self._flush()
        self.label = tier
        logger.debug("Tier switch -> %s", tier)
        if residue:
            self.content.append(residue)

    def finish(self) -> list[TierBucket]:
        self._flush()
        return self.buckets


def classify(lines: list[str]) -> list[TierBucket]:
    classifier = TierClassifier()
    for line in lines or []:
        classifier.feed(line)
    return classifier.finish()
