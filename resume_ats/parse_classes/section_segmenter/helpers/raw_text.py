"""raw_text.py
Used to turn a continuous output of extracted text into lines and blocks.
"""
import re
from typing import List

from resume_ats.models import RawText

# One or more blank (whitespace-only) lines separate entries in a section
BLANK_LINE_SPLIT_REGEX = re.compile(r"\n\s*\n")


def to_raw_text(text: str) -> RawText:
    """
    Split extracted text into an immutable sequence of lines.

    Only `\n` is treated as a line break, so a trailing `\r` from Windows line
    endings stays on the line (and is dropped later by any `strip()`).

    Args:
        text (str): Plain text handed over by the document text extractor.

    Returns:
        RawText: Tuple of lines in document order. Empty text yields `("",)`.
    """
    return tuple((text or "").split("\n"))


def non_blank_lines(text: str) -> List[str]:
    """Return the lines of `text` that contain something other than whitespace."""
    return [line for line in to_raw_text(text) if line.strip()]


def split_blocks(text: str) -> List[str]:
    """
    Split a section's text into blocks separated by blank lines.

    Args:
        text (str): Section text.

    Returns:
        List[str]: Blocks in order. Blocks may still contain only whitespace;
            callers filter them by their own line-count rules.
    """
    if not text:
        return []
    return BLANK_LINE_SPLIT_REGEX.split(text)


def section_body(section_text: str) -> str:
    """
    Drop the header line from a SectionMap block.

    The segmenter keeps each header line at the start of its block; the
    section-scoped extractors expect only the lines that followed it.

    Example:
        section_body("Skills\\nPython, SQL\\n") -> "Python, SQL\\n"
    """
    if not section_text:
        return ""
    _, _, body = section_text.partition("\n")
    return body
