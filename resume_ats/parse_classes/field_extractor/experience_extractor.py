"""experience_extractor.py
Extracts work experience entries from the experience section of resume text.
"""
import re
from typing import List, Optional, Tuple

from resume_ats.models import ExperienceEntry
from resume_ats.parse_classes.field_extractor.field_extractor import (
    FieldExtractor,
    IdGenerator,
)


class ExperienceExtractor(FieldExtractor):
    """
    Extracts ExperienceEntry records from the experience section body.

    Entries are separated by blank lines and need at least two non-blank lines:
        1. Title line: `<title> at <company>`, falling back to
           `<title>, <company>` or `<title> - <company>`.
        2. Date line: `<month> <year> - <month> <year>|Present` (or `to`).
        3+. Description.

    An entry whose title line matches neither form is dropped whole. When the
    date line is not a range, `start_date` is empty and `end_date` keeps the
    date line exactly as written so nothing the user typed is lost.
    """
    FIELD_NAME = "experience"
    SOURCE_SECTION = "experience"
    EMPTY_VALUE_FACTORY = list

    # Tried in order
    TITLE_REGEX = [
        # `Engineer at Acme Corp (Remote)` -> ("Engineer", "Acme Corp")
        r"^(.+?)\s+at\s+(.+?)(?:\s*\(.*\))?$",
        # `Engineer, Acme Corp` / `Engineer - Acme Corp`
        r"^(.+?)\s*[,\-–—]\s*(.+)$",
    ]

    def extract(self) -> List[ExperienceEntry]:
        """
        Returns:
            List[ExperienceEntry]: Entries in section order. Empty list if none
                could be parsed.
        """
        experience = []
        for lines in self._split_entries():
            title_line, date_line, description = self._split_description(lines)

            title_and_company = self._match_title_line(title_line)
            if title_and_company is None:
                self._field_logger().debug(
                    f"Dropped experience entry with unparsable title line: `{title_line}`"
                )
                continue
            job_title, company = title_and_company

            date_match = self._match_date_range(date_line)
            if date_match:
                start_date, end_date = date_match.group(1), date_match.group(2)
            else:
                start_date, end_date = "", date_line

            experience.append(
                ExperienceEntry(
                    id=self.id_generator(),
                    job_title=job_title,
                    company=company,
                    start_date=start_date,
                    end_date=end_date,
                    description=description,
                )
            )
        return experience

    def _match_title_line(self, line: str) -> Optional[Tuple[str, str]]:
        """Return (job_title, company) from an entry's first line, or None."""
        for pattern in self.TITLE_REGEX:
            match = re.search(pattern, line.strip(), re.IGNORECASE)
            if match:
                return match.group(1).strip(), match.group(2).strip()
        return None


def extract_experience(
    section_text: str,
    id_generator: Optional[IdGenerator] = None,
) -> List[ExperienceEntry]:
    """Return the experience entries in `section_text`."""
    return ExperienceExtractor(section_text, id_generator=id_generator).extract()
