"""extractor_map.py
Builds the "extractor_map" dictionary utilized by ResumeExtractor
to determine which extraction steps are run.
"""
from dataclasses import fields
from typing import Dict, List, Optional

from resume_ats.exceptions import ExtractorMapConfigError
from resume_ats.models import ContactInfo, ResumeDraft

from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor, IdGenerator
from resume_ats.parse_classes.field_extractor.name_extractor import NameExtractor
from resume_ats.parse_classes.field_extractor.email_extractor import EmailExtractor
from resume_ats.parse_classes.field_extractor.phone_extractor import PhoneExtractor
from resume_ats.parse_classes.field_extractor.summary_extractor import SummaryExtractor
from resume_ats.parse_classes.field_extractor.skills_extractor import SkillsExtractor
from resume_ats.parse_classes.field_extractor.experience_extractor import ExperienceExtractor
from resume_ats.parse_classes.field_extractor.education_extractor import EducationExtractor

# Fields that live on ResumeDraft.personal_info rather than on the draft itself
CONTACT_FIELDS = tuple(f.name for f in fields(ContactInfo))
DRAFT_FIELDS = tuple(f.name for f in fields(ResumeDraft) if f.name != "personal_info")

DEFAULT_EXTRACTOR_CLASSES_MAP = {
    "name": [NameExtractor],
    "email": [EmailExtractor],
    "phone": [PhoneExtractor],
    "summary": [SummaryExtractor],
    "skills": [SkillsExtractor],
    "experience": [ExperienceExtractor],
    "education": [EducationExtractor],
}


def build_default_extractor_map(
    id_generator: Optional[IdGenerator] = None,
) -> Dict[str, List[FieldExtractor]]:
    """
    Builds the default extractor map used by the resume parsing pipeline
    (i.e. ResumeExtractor).

    Args:
        id_generator (Optional[IdGenerator], default=None):
            Identifier generator shared by entry extractors. If None, each
            extractor uses `generate_entry_id`.

    Returns:
        dict:
            Mapping of field names -> list of extractor instances.

    Example:
        {
            "name": [NameExtractor()],
            "email": [EmailExtractor()],
            ...
            "education": [EducationExtractor()],
        }
    """
    extractor_map = {
        field_name: [extractor_cls(id_generator=id_generator) for extractor_cls in classes]
        for field_name, classes in DEFAULT_EXTRACTOR_CLASSES_MAP.items()
    }

    verify_extractor_map(extractor_map)

    return extractor_map


def verify_extractor_map(
    extractor_map: Optional[Dict[str, List[FieldExtractor]]]
) -> None:
    """
    Verifies the format and content of the extractor map.

    Args:
        extractor_map (Dict[str, List[FieldExtractor]]):
            Maps field names to extract to a list of extractor instances to try in order.

    This method performs validation checks on the extractor_map dictionary to ensure:
    1. The extractor_map is a dictionary
    2. All keys (fields) are strings naming a ContactInfo or ResumeDraft field
    3. All values are lists
    4. All items in the lists are FieldExtractor instances

    Raises:
        TypeError: If the map, its keys, its values or their items have the wrong type.
        ExtractorMapConfigError: If a key names a field that does not exist.
    """
    if not isinstance(extractor_map, dict):
        raise TypeError(
            f"extractor_map must be a dictionary, got {type(extractor_map).__name__}"
        )
    for field_name, extractors in extractor_map.items():
        if not isinstance(field_name, str):
            raise TypeError(
                f"Field names in extractor_map must be strings, got {type(field_name).__name__}"
            )
        if field_name not in CONTACT_FIELDS and field_name not in DRAFT_FIELDS:
            raise ExtractorMapConfigError(
                message=(
                    f"Unknown field '{field_name}'. "
                    f"Expected one of: {list(CONTACT_FIELDS + DRAFT_FIELDS)}"
                ),
                field_name=field_name,
            )
        if not isinstance(extractors, list):
            raise TypeError(
                f"Value for field '{field_name}' must be a list, got {type(extractors).__name__}"
            )
        for extractor in extractors:
            if not isinstance(extractor, FieldExtractor):
                raise TypeError(
                    f"All items in extractor list for field '{field_name}' must be "
                    f"FieldExtractor instances, got {type(extractor).__name__}"
                )


def unify_extractor_map_id_generator(
    extractor_map: Dict[str, List[FieldExtractor]],
    id_generator: Optional[IdGenerator] = None,
) -> Dict[str, List[FieldExtractor]]:
    """
    Share one id generator across all extractors in the map.

    Only extractors still using the default generator are updated; an
    extractor built with its own `id_generator` keeps it. The map is modified
    in place and returned.
    """
    if id_generator is None:
        return extractor_map

    for extractors in extractor_map.values():
        for extractor in extractors:
            if not extractor.has_custom_id_generator:
                extractor.id_generator = id_generator
                extractor.has_custom_id_generator = True

    return extractor_map
