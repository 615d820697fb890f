"""exceptions.py
Defines custom exceptions for this project.

Malformed resume text never raises inside the parser or scorers; these
exceptions cover bad input at the CLI/API boundary and misconfigured
extractors or frameworks.
"""
from typing import Optional

# ------------------------ Resume Text Errors ------------------------
class ResumeTextError(Exception):
    """Base exception for resume/job-description text input errors."""
    pass

class ResumeTextTooLargeError(ResumeTextError):
    """Raised when a submitted text exceeds the allowed character count."""
    def __init__(self, max_chars: int, actual_chars: int, label: str = "Resume text"):
        super().__init__(
            f"{label} is {actual_chars} characters, which exceeds the max allowed {max_chars} characters."
        )
        self.max_chars = max_chars
        self.actual_chars = actual_chars
        self.label = label

class ResumeTextEmptyError(ResumeTextError):
    """Raised when a submitted text contains nothing but whitespace."""
    def __init__(self, label: str = "Resume text", message: str | None = None):
        self.label = label
        if message is None:
            message = f"{label} contains no parsable text."
        super().__init__(message)

# ------------------------ Field Extraction Errors ------------------------

class FieldExtractionConfigError(Exception):
    """
    Raised when a FieldExtractor instance is configured incorrectly.

    Attributes:
        field_name (str | None): The name of the field being extracted (optional).
        message (str): Human-readable description of the error.
    """
    def __init__(self, field_name: str | None = None, message: str = "Invalid extractor configuration"):
        self.field_name = field_name
        self.message = message
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        if self.field_name:
            return f"{self.message}: {self.field_name}"
        return self.message

# ------------------------ ResumeParserFramework Errors ------------------------
class ResumeParserFrameworkConfigError(Exception):
    """
    Raised when the ResumeParserFramework configuration is invalid.
    """
    def __init__(self, message: str):
        super().__init__(f"ResumeParserFrameworkConfigError: {message}")

# ------------------------ Extractor Map Errors ------------------------
class ExtractorMapConfigError(Exception):
    """
    Raised when the extractor_map configuration is invalid.
    Provides a clear message about what went wrong.
    """
    def __init__(self, message: str, field_name: Optional[str] = None):
        self.field_name = field_name
        super().__init__(f"ExtractorMapConfigError: {message}")
