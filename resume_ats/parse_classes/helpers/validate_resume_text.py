"""validate_resume_text.py
Check that text handed in by a caller (CLI / API) is usable.
"""
from typing import Optional

from resume_ats.config import PARSER_DEFAULTS
from resume_ats.exceptions import ResumeTextEmptyError, ResumeTextTooLargeError


def validate_resume_text(
    text: str,
    label: str = "Resume text",
    max_chars: Optional[int] = PARSER_DEFAULTS.MAX_TEXT_CHARS,
) -> str:
    """
    Validate that `text` is a non-blank string within the size limit.

    The parser itself accepts any string; this check only guards the outer
    surfaces against empty uploads and oversized payloads.

    Args:
        text (str): Text to validate.
        label (str): Name used in error messages (e.g. "Job description").
        max_chars (int | None): Maximum allowed length. None disables the check.

    Returns:
        str: `text`, unchanged.

    Raises:
        TypeError: If `text` is not a string.
        ResumeTextEmptyError: If `text` is empty or whitespace-only.
        ResumeTextTooLargeError: If `text` is longer than `max_chars`.
    """
    if not isinstance(text, str):
        raise TypeError(f"{label} must be a str (got {type(text).__name__}).")

    if not text.strip():
        raise ResumeTextEmptyError(label=label)

    if max_chars is not None and len(text) > max_chars:
        raise ResumeTextTooLargeError(
            max_chars=max_chars,
            actual_chars=len(text),
            label=label,
        )

    return text
