"""
Pass 2 over the options region: slice each numbered option into its own span.

Option N runs to the heading of the next greater option number, else to the
terminal heading that closes the options region, else to document end. When
the model wrote no per-option headings, the whole options section becomes a
single option numbered 1.
"""

import logging

from lesson_parser.pipeline.enumerator import find_option_numbers
from lesson_parser.pipeline.locator import extract_section
from lesson_parser.pipeline.sectioner import ASSESSMENT, OPTIONS, next_present
from lesson_parser.state import Option

logger = logging.getLogger(__name__)


def _slice_options(
    document: str, numbers: list[int], terminal_heading: str | None,
) -> list[Option]:
    options: list[Option] = []
    for i, number in enumerate(numbers):
        end_heading = f"Option {numbers[i + 1]}" if i + 1 < len(numbers) else terminal_heading
        content = extract_section(document, f"Option {number}", end_heading)
        logger.debug("  Option %d: %d chars", number, len(content))
        options.append(Option(number=number, content=content))
    return options


def _fallback(options_text: str) -> list[Option]:
    if not options_text:
        return []
    logger.info("No option headings found, using the whole options section as option 1")
    return [Option(number=1, content=options_text)]


def split_options(
    document: str,
    options_text: str = "",
    terminal_heading: str | None = ASSESSMENT,
) -> list[Option]:
    """Options in ascending number order.

    ``options_text`` is the already-located options section, used only for
    the single-option fallback.
    """
    if not document:
        return []
    numbers = find_option_numbers(document)
    if not numbers:
        return _fallback(options_text)
    return _slice_options(document, numbers, terminal_heading)


def extract_options(state: dict) -> dict:
    """Pipeline stage: build ``state["options"]`` from enumerated numbers."""
    document = state["document"]
    numbers = state.get("option_numbers", [])
    options_text = state["sections"].get(OPTIONS, "")

    if not numbers:
        return {"options": _fallback(options_text)}

    terminal = next_present(OPTIONS, state.get("heading_offsets", {}))
    options = _slice_options(document, numbers, terminal)
    logger.info("Extracted %d options", len(options))
    return {"options": options}
