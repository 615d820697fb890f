"""field_extractor.py
Holds abstract FieldExtractor class inherited by field-specific extractors.
"""
import re
import uuid
import logging
from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, Callable, List, Optional, Tuple

from resume_ats.config import PARSER_DEFAULTS
from resume_ats.exceptions import FieldExtractionConfigError
from resume_ats.logging import LoggerFactory
from resume_ats.parse_classes.section_segmenter.helpers.raw_text import (
    non_blank_lines,
    split_blocks,
)

logger_factory = LoggerFactory()

IdGenerator = Callable[[], str]


def generate_entry_id() -> str:
    """Default identifier generator for extracted entries (random UUID4 string)."""
    return str(uuid.uuid4())


class FieldExtractor(ABC):
    """
    Abstract base class for extracting a specific field from resume text.
    Concrete extractors must implement the `extract` method.

    Extractors never raise on malformed text: anything they cannot find comes
    back as the field's empty value (`""` or `[]`). Blank input short-circuits
    to that empty value before `extract` runs.

    Class attributes (define in each child):
        FIELD_NAME (str): Name of the ResumeDraft field the extractor fills.
        SOURCE_SECTION (str | None): SectionMap label whose body the extractor
            reads when run by ResumeExtractor. None means the whole document.
        EMPTY_VALUE_FACTORY (Callable): Builds the "not found" value.
    """
    FIELD_NAME: str = ""
    SOURCE_SECTION: Optional[str] = None
    EMPTY_VALUE_FACTORY: Callable[[], Any] = str

    # Define common regex queries that might be used in different subclasses
    COMMON_REGEX: dict = {
        # Email address: Covers standardized email format
        "email_address": r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b",
        # Phone Number: Covers common phone formats:
        # -> `+1 123-456-7890`, `(123) 456-7890`, `123-456-7890`, `123.456.7890`, `1234567890`
        "phone_number": (
            r"(\+?\d{1,3}[\s.-]?)?"           # Optional country code
            r"(\(?\d{3}\)?[\s.-]?)"           # Area code with optional parentheses
            r"\d{3}[\s.-]?\d{4}"              # Local number
        ),
        # Any line holding an `@` or a bare phone shape counts as contact info
        "contact_line": r"@|\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}",
        # `Jan 2020 - Present`, `March 2019 to Dec 2021`
        "date_range": (
            r"(\w+\s*\d{4})"                  # Start: month/word + year
            r"\s*(?:-|–|—|to)\s*"   # Hyphen, en/em dash or "to"
            r"(Present|\w+\s*\d{4})"          # End: Present or month/word + year
        ),
        # Education ranges only accept a dash separator
        "dash_date_range": (
            r"(\w+\s*\d{4})"
            r"\s*(?:-|–|—)\s*"
            r"(\w+\s*\d{4}|Present)"
        ),
    }

    def __init__(
        self,
        text: Optional[str] = "",
        id_generator: Optional[IdGenerator] = None,
    ):
        """
        Args:
            text (str | None): Text to extract from. For section-scoped extractors
                this is the section body (header line removed).
            id_generator (Callable[[], str] | None): Builds identifiers for
                extracted entries. Defaults to `generate_entry_id`.
        """
        self.text: str = "" if text is None else text
        self.id_generator: IdGenerator = id_generator or generate_entry_id
        self.has_custom_id_generator: bool = id_generator is not None
        self._validate_config()

    def _validate_config(self) -> None:
        """
        Raises:
            FieldExtractionConfigError: If `text` is not a string or
                `id_generator` is not callable.
        """
        if not isinstance(self.text, str):
            raise FieldExtractionConfigError(
                field_name=self.FIELD_NAME,
                message=f"text must be a str (got {type(self.text).__name__})",
            )
        if not callable(self.id_generator):
            raise FieldExtractionConfigError(
                field_name=self.FIELD_NAME,
                message="id_generator must be callable",
            )

    @staticmethod
    def _returns_empty_on_blank_text(func):
        """Decorator returning the empty field value when `self.text` is blank."""
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            if self.text is None:
                self.text = ""
            self._validate_config()
            if not self.text.strip():
                return self.empty_value()
            return func(self, *args, **kwargs)
        return wrapper

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "extract" in cls.__dict__:
            cls.extract = cls._returns_empty_on_blank_text(cls.extract)

    @classmethod
    def empty_value(cls) -> Any:
        """Return a fresh "not found" value for this extractor's field."""
        return cls.EMPTY_VALUE_FACTORY()

    @abstractmethod
    def extract(self) -> Any:
        """
        Extract the field from `self.text`.

        Returns:
            Any: The extracted field value, or `empty_value()` when nothing
                could be extracted.
        """
        pass

    # ----------------------
    # REGEX HANDLING
    # ----------------------
    def _regex_extract_term(
        self,
        pattern: str,
        text: Optional[str] = None,
        flags: int = 0,
    ) -> Optional[str]:
        """
        Return the first match of `pattern` in document order.

        Args:
            pattern (str): The regex pattern to search for.
            text (str | None): Text to search. Defaults to `self.text`.
            flags (int): `re` flags.

        Returns:
            str | None: The first match, or None if there is none.
        """
        match = re.search(pattern, self.text if text is None else text, flags)
        if match:
            return match.group(0)  # always return first match
        return None

    def _match_date_range(
        self,
        line: str,
        pattern_name: str = "date_range",
    ) -> Optional[re.Match]:
        """Search `line` for one of the COMMON_REGEX date range patterns (case-insensitive)."""
        return re.search(self.COMMON_REGEX[pattern_name], line, re.IGNORECASE)

    # ----------------------
    # ENTRY HANDLING
    # ----------------------
    def _split_entries(self) -> List[List[str]]:
        """
        Split `self.text` on blank lines and return each entry's non-blank lines.

        Entries with fewer than `PARSER_DEFAULTS.MIN_ENTRY_LINES` lines carry too
        little information and are dropped here.

        Returns:
            List[List[str]]: Lines per surviving entry, unmodified.
        """
        entries = []
        for block in split_blocks(self.text):
            lines = non_blank_lines(block)
            if len(lines) < PARSER_DEFAULTS.MIN_ENTRY_LINES:
                continue
            entries.append(lines)
        return entries

    def _split_description(self, lines: List[str]) -> Tuple[str, str, str]:
        """Return (first line, second line, newline-joined remainder) of an entry."""
        return lines[0], lines[1], "\n".join(lines[2:])

    def _field_logger(self) -> logging.Logger:
        """Per-field file logger used for dropped-entry diagnostics."""
        return logger_factory.get_extractor_field_logger(self.FIELD_NAME)
