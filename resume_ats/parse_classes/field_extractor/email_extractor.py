"""email_extractor.py
Extracts email addresses from resume text.
"""
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor


class EmailExtractor(FieldExtractor):
    """
    Extracts the candidate's email address from the whole document.

    Uses COMMON_REGEX['email_address']. When the document holds several
    addresses, the first one in document order is returned.
    """
    FIELD_NAME = "email"

    def extract(self) -> str:
        """
        Returns:
            str: The first detected email address, or "" if there is none.
        """
        return self._regex_extract_term(pattern=self.COMMON_REGEX["email_address"]) or ""


def extract_email(text: str) -> str:
    """Return the first email address in `text` ("" when absent)."""
    return EmailExtractor(text).extract()
