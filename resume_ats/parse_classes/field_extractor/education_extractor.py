"""education_extractor.py
Extracts education entries from the education section of resume text.
"""
from typing import List, Optional

from resume_ats.models import EducationEntry
from resume_ats.parse_classes.field_extractor.field_extractor import (
    FieldExtractor,
    IdGenerator,
)


class EducationExtractor(FieldExtractor):
    """
    Extracts EducationEntry records from the education section body.

    Same entry splitting as ExperienceExtractor, but the first line is taken
    as the degree without any pattern check. A dash date range found on the
    second line is cut out of it and whatever remains is the school; without
    a range the whole second line is the school and both dates stay empty.
    The school is always stripped of surrounding whitespace, unlike the raw
    date line ExperienceExtractor keeps when its range does not match.
    """
    FIELD_NAME = "education"
    SOURCE_SECTION = "education"
    EMPTY_VALUE_FACTORY = list

    def extract(self) -> List[EducationEntry]:
        education = []
        for lines in self._split_entries():
            degree_line, school_line, description = self._split_description(lines)

            date_match = self._match_date_range(school_line, pattern_name="dash_date_range")
            if date_match:
                start_date, end_date = date_match.group(1), date_match.group(2)
                school = (
                    school_line[:date_match.start()] + school_line[date_match.end():]
                ).strip()
            else:
                start_date, end_date = "", ""
                school = school_line.strip()

            education.append(
                EducationEntry(
                    id=self.id_generator(),
                    degree=degree_line.strip(),
                    school=school,
                    start_date=start_date,
                    end_date=end_date,
                    description=description,
                )
            )
        return education


def extract_education(
    section_text: str,
    id_generator: Optional[IdGenerator] = None,
) -> List[EducationEntry]:
    """Return the education entries in `section_text`."""
    return EducationExtractor(section_text, id_generator=id_generator).extract()
