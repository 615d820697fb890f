"""dummy_classes.py
Holds dummy classes for abstract classes to test with
"""
from typing import List

from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor


# Dummy subclass for testing where needed
class DummyExtractor(FieldExtractor):
    """A dummy FieldExtractor subclass for testing."""
    FIELD_NAME = "name"

    def extract(self) -> str:
        # Minimal implementation for testing
        return "dummy"


class FailingExtractor(FieldExtractor):
    """Always raises, to test ResumeExtractor fallbacks."""
    FIELD_NAME = "skills"
    SOURCE_SECTION = "skills"
    EMPTY_VALUE_FACTORY = list

    def extract(self) -> List[str]:
        raise RuntimeError("extractor blew up")


class EmptyExtractor(FieldExtractor):
    """Always comes back empty, to test ResumeExtractor fallbacks."""
    FIELD_NAME = "skills"
    SOURCE_SECTION = "skills"
    EMPTY_VALUE_FACTORY = list

    def extract(self) -> List[str]:
        return []


class EntryIdExtractor(FieldExtractor):
    """Returns one freshly generated id per call, to test id generator wiring."""
    FIELD_NAME = "achievements"
    EMPTY_VALUE_FACTORY = list

    def extract(self) -> List[str]:
        return [self.id_generator()]
