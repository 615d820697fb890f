"""section_segmenter.py
Splits raw resume text into labeled sections using header-keyword line matching.
"""
import re
from typing import Dict, List, Optional, Pattern

from resume_ats.logging import LoggerFactory
from resume_ats.models import SectionMap
from resume_ats.parse_classes.section_segmenter.helpers.raw_text import to_raw_text

logger = LoggerFactory().get_logger(name="section_segmenter")

SECTION_LABELS = ("summary", "experience", "education", "skills")

# Checked in this order; the first pattern that matches a line wins.
SECTION_PATTERNS: Dict[str, Pattern] = {
    "summary": re.compile(r"(?:summary|about|profile)", re.IGNORECASE),
    "experience": re.compile(r"(?:experience|work\s+history|employment)", re.IGNORECASE),
    "education": re.compile(r"(?:education|academic)", re.IGNORECASE),
    "skills": re.compile(r"(?:skills|technical\s+skills|technologies)", re.IGNORECASE),
}


class SectionSegmenter:
    """
    Groups the lines of a resume under the most recent section header.

    A line is a header when any of `section_patterns` finds a match anywhere in
    it (case-insensitive substring). Header lines open (or restart) their
    section and are kept as the first line of its block. Every other line is
    appended to the open section; lines before the first header are discarded.

    Attributes:
        section_patterns (Dict[str, Pattern]): Ordered label -> header pattern map.
            Insertion order decides which label wins on a line that matches
            several patterns.
    """

    def __init__(self, section_patterns: Optional[Dict[str, Pattern]] = None):
        self.section_patterns = dict(section_patterns or SECTION_PATTERNS)

    def detect_header(self, line: str) -> Optional[str]:
        """
        Return the label of the first pattern matching `line`, or None.

        Example:
            detect_header("Profile & Skills") -> "summary"
        """
        for label, pattern in self.section_patterns.items():
            if pattern.search(line):
                return label
        return None

    def segment(self, text: str) -> SectionMap:
        """
        Split `text` into a SectionMap.

        Args:
            text (str): Plain resume text.

        Returns:
            SectionMap: Label -> block text. Each block is its lines joined with
                a trailing `\\n` per line, header line first. Empty when the
                document contains no recognizable header.
        """
        sections: Dict[str, List[str]] = {}
        current_section: Optional[str] = None

        for line in to_raw_text(text):
            label = self.detect_header(line)
            if label:
                # A repeated header restarts its section
                current_section = label
                sections[current_section] = [line]
            elif current_section:
                sections[current_section].append(line)

        if not sections:
            logger.debug("No section headers recognized in resume text.")

        return {
            label: "".join(f"{line}\n" for line in lines)
            for label, lines in sections.items()
        }


def segment_sections(text: str) -> SectionMap:
    """Segment `text` with the default section patterns."""
    return SectionSegmenter().segment(text)
