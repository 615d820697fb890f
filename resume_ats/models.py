"""models.py
Holds standardized data models used across various functions.

Every record here is built fresh on each parse/score call. Text fields use the
empty string as their "not found" value so consumers can always render them.
"""
from typing import List, Dict, Tuple
from dataclasses import dataclass, field

# A SectionMap maps a section label ("summary", "experience", "education",
# "skills") to the block of lines that followed its header line. Labels the
# segmenter never saw a header for are absent.
SectionMap = Dict[str, str]

# RawText is the document split on newlines.
RawText = Tuple[str, ...]


@dataclass
class ContactInfo:
    """
    Contact identifiers pulled from the top-level resume text.

    Attributes:
        name (str): First non-contact line of the document.
        email (str): First email-shaped substring in the document.
        phone (str): First phone-shaped substring in the document.
        location (str): Never inferred by the parser; edited by the user.
    """
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""


@dataclass
class ExperienceEntry:
    """
    A single job pulled from the experience section.

    `start_date`/`end_date` are free-text tokens (e.g. "Jan 2020"). When the
    date line does not look like a range, `end_date` holds that line verbatim.
    """
    id: str
    job_title: str
    company: str
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass
class EducationEntry:
    """A single degree pulled from the education section."""
    id: str
    degree: str
    school: str
    start_date: str = ""
    end_date: str = ""
    description: str = ""


@dataclass
class ProjectEntry:
    """A project added through the editor (the parser never fills these)."""
    id: str
    name: str
    description: str = ""
    technologies: List[str] = field(default_factory=list)
    link: str = ""


@dataclass
class ResumeDraft:
    """
    Stores structured information extracted from a resume.

    This is the hand-off record used to seed the editable form. The completeness
    scorer reads `personal_info`, `summary`, `skills`, `experience` and `education`.
    """
    personal_info: ContactInfo = field(default_factory=ContactInfo)
    summary: str = ""
    skills: List[str] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)


@dataclass
class ATSMetrics:
    """
    Completeness report for a ResumeDraft.

    Attributes:
        has_* (bool): Presence flags for each scored category.
        keyword_matches (int): Number of reference skills found in the resume.
        total_score (int): Rubric total, always within [0, 100].
        suggestions (List[str]): One suggestion per missing category, in fixed order.
    """
    has_name: bool = False
    has_email: bool = False
    has_phone: bool = False
    has_experience: bool = False
    has_education: bool = False
    has_skills: bool = False
    has_summary: bool = False
    keyword_matches: int = 0
    total_score: int = 0
    suggestions: List[str] = field(default_factory=list)


@dataclass
class ParsedResume(ResumeDraft):
    """A ResumeDraft together with the completeness report computed for it."""
    ats_score: ATSMetrics = field(default_factory=ATSMetrics)


@dataclass
class KeywordCount:
    """A job-description keyword and how many times the resume text contains it."""
    keyword: str
    count: int


@dataclass
class JobMatchReport:
    """
    Result of matching resume text against a job description.

    `score` is computed against the full candidate keyword set. `found` (sorted
    by descending count) and `missing` (discovery order) are truncated for
    display, so they may hold fewer keywords than were used for the score.
    """
    score: int = 0
    found: List[KeywordCount] = field(default_factory=list)
    missing: List[str] = field(default_factory=list)
    total_keywords: int = 0
    rating: str = "low"
    feedback: str = ""
    tips: List[str] = field(default_factory=list)
