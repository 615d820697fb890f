"""ats_scorer.py
Scores a structured resume for completeness against a fixed, additive rubric.
"""
import json
from dataclasses import asdict
from typing import Any, Dict, List, Sequence, Tuple

from resume_ats.config import PARSER_DEFAULTS
from resume_ats.logging import LoggerFactory
from resume_ats.models import ATSMetrics, ResumeDraft

logger = LoggerFactory().get_logger(name="ats_scorer", logger_type="scorer")

# Reference vocabulary counted towards `keyword_matches`
COMMON_SKILLS: Tuple[str, ...] = (
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "SQL",
    "AWS", "Docker", "Git", "REST API", "GraphQL", "HTML", "CSS", "MongoDB",
)

# (flag, points) in rubric order. Keyword points are added separately.
SECTION_POINTS: Tuple[Tuple[str, int], ...] = (
    ("has_name", 10),
    ("has_email", 10),
    ("has_phone", 5),
    ("has_summary", 10),
    ("has_skills", 15),
    ("has_experience", 20),
    ("has_education", 15),
)

# (flag, suggestion) in the order suggestions are emitted
MISSING_SECTION_SUGGESTIONS: Tuple[Tuple[str, str], ...] = (
    ("has_name", "Add your full name"),
    ("has_email", "Include your email address"),
    ("has_phone", "Add your phone number"),
    ("has_summary", "Add a professional summary"),
    ("has_skills", "List your key skills"),
    ("has_experience", "Add your work experience"),
    ("has_education", "Include your education"),
)
KEYWORD_SUGGESTION = "Add more relevant skills and keywords"

# Only these parts of a draft are scored
SCORED_FIELDS = ("personal_info", "summary", "skills", "experience", "education")


class ATSScorer:
    """
    Computes an ATSMetrics completeness report for a ResumeDraft.

    Scoring rubric (sums to at most 100):

        | Category        | Points                      |
        |-----------------|-----------------------------|
        | has name        | 10                          |
        | has email       | 10                          |
        | has phone       | 5                           |
        | has summary     | 10                          |
        | has skills      | 15                          |
        | has experience  | 20                          |
        | has education   | 15                          |
        | keyword matches | min(matches * 3, 15)        |

    Suggestions are driven by the individual flags, never by the total.

    Attributes:
        reference_skills (Sequence[str]): Vocabulary searched for in the
            serialized resume (case-insensitive substring match).
    """

    def __init__(self, reference_skills: Sequence[str] = COMMON_SKILLS):
        self.reference_skills = tuple(reference_skills)

    def score(self, resume: ResumeDraft) -> ATSMetrics:
        """
        Score `resume` from scratch.

        Args:
            resume (ResumeDraft): Structured resume (a ParsedResume works too;
                only the scored fields are read).

        Returns:
            ATSMetrics: Presence flags, keyword match count, total and suggestions.
        """
        metrics = ATSMetrics(
            has_name=bool(resume.personal_info.name),
            has_email=bool(resume.personal_info.email),
            has_phone=bool(resume.personal_info.phone),
            has_experience=len(resume.experience) > 0,
            has_education=len(resume.education) > 0,
            has_skills=len(resume.skills) > 0,
            has_summary=bool(resume.summary),
        )
        metrics.keyword_matches = self.count_keyword_matches(resume)
        metrics.total_score = self.total_score(metrics)
        metrics.suggestions = self.suggestions(metrics)

        logger.debug(
            f"Scored resume: total_score={metrics.total_score}, "
            f"keyword_matches={metrics.keyword_matches}"
        )
        return metrics

    def count_keyword_matches(self, resume: ResumeDraft) -> int:
        """Count reference skills appearing anywhere in the serialized resume content."""
        content = self._serialize(resume).lower()
        return sum(1 for skill in self.reference_skills if skill.lower() in content)

    @staticmethod
    def keyword_points(keyword_matches: int) -> int:
        return min(
            keyword_matches * PARSER_DEFAULTS.KEYWORD_POINTS_PER_MATCH,
            PARSER_DEFAULTS.KEYWORD_POINTS_CAP,
        )

    def total_score(self, metrics: ATSMetrics) -> int:
        """Apply the rubric to `metrics`' own flags and keyword count."""
        section_points = sum(
            points for flag, points in SECTION_POINTS if getattr(metrics, flag)
        )
        return section_points + self.keyword_points(metrics.keyword_matches)

    @staticmethod
    def suggestions(metrics: ATSMetrics) -> List[str]:
        suggestions = [
            suggestion
            for flag, suggestion in MISSING_SECTION_SUGGESTIONS
            if not getattr(metrics, flag)
        ]
        if metrics.keyword_matches < PARSER_DEFAULTS.MIN_KEYWORD_MATCHES:
            suggestions.append(KEYWORD_SUGGESTION)
        return suggestions

    @staticmethod
    def _serialize(resume: ResumeDraft) -> str:
        """
        JSON-serialize the scored fields of `resume`.

        Entry ids are left out: they are random and carry no resume content.
        """
        resume_dict = asdict(resume)
        content: Dict[str, Any] = {
            field_name: resume_dict[field_name] for field_name in SCORED_FIELDS
        }
        for field_name in ("experience", "education"):
            for entry in content[field_name]:
                entry.pop("id", None)
        return json.dumps(content, ensure_ascii=False)


def calculate_ats_score(resume: ResumeDraft) -> ATSMetrics:
    """Score `resume` with the default reference vocabulary."""
    return ATSScorer().score(resume)
