"""
Pass 1 over the options region: list the "Option N" heading numbers.

Numbers are returned ascending and de-duplicated. Numbering that is out of
order or repeated in the source is kept but reported as a warning.
"""

import logging
import re

logger = logging.getLogger(__name__)

_OPTION_HEADING_RE = re.compile(r"^#{2,4}[ \t]{1,8}(?:\*\*)?Option (\d{1,4})(?!\w)", re.MULTILINE)


def _scan(document: str) -> list[int]:
    return [int(m.group(1)) for m in _OPTION_HEADING_RE.finditer(document)]


def _validate(numbers: list[int]) -> str | None:
    if not numbers:
        return None
    if numbers != sorted(set(numbers)):
        return f"Option headings not monotonically increasing or duplicated: {numbers}"
    return None


def find_option_numbers(document: str) -> list[int]:
    """Distinct option numbers found in headings, ascending."""
    if not document:
        return []
    return sorted(set(_scan(document)))


def enumerate_options(state: dict) -> dict:
    """Pipeline stage: record option numbers and any numbering anomaly."""
    document = state["document"]
    raw = _scan(document)
    warnings: list[str] = list(state.get("warnings", []))

    error = _validate(raw)
    if error:
        logger.warning(error)
        warnings.append(error)

    numbers = sorted(set(raw))
    logger.info("Found %d option headings: %s", len(numbers), numbers)
    return {"option_numbers": numbers, "warnings": warnings}
