"""summary_extractor.py
Reads the professional summary out of the summary section.
"""
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor


class SummaryExtractor(FieldExtractor):
    """Returns the summary section body as written, minus surrounding whitespace."""
    FIELD_NAME = "summary"
    SOURCE_SECTION = "summary"

    def extract(self) -> str:
        return self.text.strip()
