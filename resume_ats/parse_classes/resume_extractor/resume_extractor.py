"""resume_extractor.py
Utilizes SectionSegmenter and FieldExtractor subclasses to turn plain resume
text into a ResumeDraft.
"""
import copy
from typing import Dict, List, Optional, Any

from resume_ats.logging import LoggerFactory, running_under_pytest
from resume_ats.models import ContactInfo, ResumeDraft, SectionMap

from resume_ats.parse_classes.section_segmenter.section_segmenter import SectionSegmenter
from resume_ats.parse_classes.section_segmenter.helpers.raw_text import section_body
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor, IdGenerator

from resume_ats.parse_classes.resume_extractor.helpers.extractor_map import (
    CONTACT_FIELDS,
    build_default_extractor_map,
    unify_extractor_map_id_generator,
    verify_extractor_map,
)

# Load field extraction specific logger
logger_factory = LoggerFactory()
extractor_failure_logger = logger_factory.get_logger(
    name="extractor_failures",
    logger_type="extractor"
)


class ResumeExtractor:
    """
    Orchestrates extraction of resume fields using configurable field extractors.

    The text is segmented once. Each extractor then reads either the whole
    document (`SOURCE_SECTION is None`) or the body of its section; a section
    the segmenter did not find hands the extractor empty text, which yields
    the field's empty value.

    The extractor_map allows multiple "backup" extractors per field. The first
    extractor returning a non-empty value wins. An extractor that raises is
    logged and skipped. If none produces a value, the ResumeDraft default is kept.

    Attributes:
        text (str): Plain resume text.
        extractor_map (Dict[str, List[FieldExtractor]]):
            Maps field names to a list of extractor instances to try in order.
        section_map (SectionMap): Output of the segmenter for `text`.
    """
    def __init__(
        self,
        text: str,
        extractor_map: Optional[Dict[str, List[FieldExtractor]]] = None,
        segmenter: Optional[SectionSegmenter] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        """
        Args:
            text (str): Plain resume text, already decoded by the caller.
            extractor_map (Optional[Dict[str, List[FieldExtractor]]]):
                Map of field names to lists of extractor instances. If None,
                `build_default_extractor_map()` is used.

                Example:
                    {
                        "email": [EmailExtractor()],
                        "skills": [SkillsExtractor(), BackupSkillsExtractor()],
                    }
            segmenter (Optional[SectionSegmenter]): Segmenter to split `text`
                with. Defaults to one using the standard section patterns.
            id_generator (Optional[IdGenerator]): Identifier generator handed to
                every extractor that was not given its own.
        """
        self.text = text or ""
        self.segmenter = segmenter or SectionSegmenter()

        if extractor_map is None:
            extractor_map = build_default_extractor_map(id_generator=id_generator)
        else:
            verify_extractor_map(extractor_map)
            unify_extractor_map_id_generator(extractor_map, id_generator=id_generator)
        self.extractor_map = extractor_map

        self.section_map: SectionMap = self.segmenter.segment(self.text)

    def _source_text_for(self, extractor: FieldExtractor) -> str:
        """Return the text `extractor` should read (whole document or a section body)."""
        if extractor.SOURCE_SECTION is None:
            return self.text
        return section_body(self.section_map.get(extractor.SOURCE_SECTION, ""))

    def _extract_field_with_fallback(self, field_name: str) -> Any:
        """
        Attempt to extract a single field using all configured extractors.

        Extraction is attempted in the order defined in self.extractor_map[field_name].

        Logs extractor failures to the extractor-specific logger, unless running under pytest.

        Args:
            field_name (str): The field to extract (e.g., "email").

        Returns:
            Any: Extracted value, or the field's default if every extractor
                came back empty or failed.
        """
        for configured_extractor in self.extractor_map.get(field_name, []):
            # Work on a copy so a shared extractor_map is never mutated
            extractor = copy.copy(configured_extractor)
            try:
                # Ensure extractor reads the text for its section
                extractor.text = self._source_text_for(extractor)
                result = extractor.extract()
            except Exception as e:
                if not running_under_pytest():
                    extractor_failure_logger.warning(
                        f"Field '{field_name}' failed in extractor '{type(extractor).__name__}': {str(e)}"
                    )
                continue
            if result:
                return result

        return self._default_value(field_name)

    @staticmethod
    def _default_value(field_name: str) -> Any:
        if field_name in CONTACT_FIELDS:
            return getattr(ContactInfo(), field_name)
        return getattr(ResumeDraft(), field_name)

    def extract(self) -> ResumeDraft:
        """
        Extract all fields outlined in self.extractor_map and return a ResumeDraft
        instance.

        Returns:
            ResumeDraft: Object containing extracted fields. Fields missing from
                the extractor_map keep their defaults.
        """
        resume_draft = ResumeDraft()

        for extraction_field in self.extractor_map:
            value = self._extract_field_with_fallback(extraction_field)
            if extraction_field in CONTACT_FIELDS:
                setattr(resume_draft.personal_info, extraction_field, value)
            else:
                setattr(resume_draft, extraction_field, value)

        return resume_draft
