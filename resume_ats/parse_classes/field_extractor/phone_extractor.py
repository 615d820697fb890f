"""phone_extractor.py
Extracts phone numbers from resume text.
"""
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor


class PhoneExtractor(FieldExtractor):
    """
    Extracts the candidate's phone number from the whole document.

    Uses the loose COMMON_REGEX['phone_number'] shape: optional country code,
    optional parenthesized area code, and space/dot/hyphen separators. First
    match in document order wins.
    """
    FIELD_NAME = "phone"

    def extract(self) -> str:
        return self._regex_extract_term(pattern=self.COMMON_REGEX["phone_number"]) or ""


def extract_phone(text: str) -> str:
    """Return the first phone number in `text` ("" when absent)."""
    return PhoneExtractor(text).extract()
