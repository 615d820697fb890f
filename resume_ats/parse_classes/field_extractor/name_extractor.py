"""name_extractor.py
Picks a candidate name out of resume text with a line-order heuristic.
"""
import re
from typing import Sequence

from resume_ats.parse_classes.section_segmenter.helpers.raw_text import non_blank_lines
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor


class NameExtractor(FieldExtractor):
    """
    Extracts the candidate's name from the whole document.

    The name is taken to be the first non-blank line that does not look like
    contact info (no `@` and no phone-number shape). This is a document-order
    rule, not a name detector: if a section header or an address comes first,
    that line is returned.
    """
    FIELD_NAME = "name"

    def extract(self) -> str:
        """
        Returns:
            str: The first non-contact line, stripped, or "" if every line
                looks like contact info.
        """
        for line in non_blank_lines(self.text):
            if not self._looks_like_contact_line(line):
                return line.strip()
        return ""

    def _looks_like_contact_line(self, line: str) -> bool:
        return re.search(self.COMMON_REGEX["contact_line"], line) is not None


def extract_name(lines: Sequence[str]) -> str:
    """Return the first line of `lines` that is not an email/phone line ("" when absent)."""
    return NameExtractor("\n".join(lines)).extract()
