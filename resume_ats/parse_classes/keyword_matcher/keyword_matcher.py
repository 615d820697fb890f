"""keyword_matcher.py
Scores resume text against a job description by keyword overlap.
"""
import math
import re
from typing import FrozenSet, List, Optional

from resume_ats.config import PARSER_DEFAULTS
from resume_ats.logging import LoggerFactory
from resume_ats.models import JobMatchReport, KeywordCount, ResumeDraft

logger = LoggerFactory().get_logger(name="keyword_matcher", logger_type="scorer")

# Common English function words never treated as keywords
STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "and", "or", "but", "a", "an", "in", "on", "at", "to", "for", "with", "as", "by",
    "of", "is", "are", "was", "were", "be", "this", "that", "these", "those", "it", "its",
    "our", "we", "you", "they", "them", "their", "your", "my", "mine", "have", "has", "had",
    "do", "does", "did", "will", "would", "should", "could", "can", "may", "might", "must",
    "shall",
})

NON_ALPHANUMERIC_REGEX = re.compile(r"[^a-zA-Z0-9]")

MATCH_FEEDBACK = {
    "excellent": "Excellent match! Your resume contains most of the important keywords.",
    "good": "Good match, but could be improved. Consider adding some of the missing keywords.",
    "low": "Low match. Your resume is missing many important keywords from the job description.",
}

MATCH_IMPROVEMENT_TIPS = [
    "Incorporate missing keywords naturally into your work experience and skills sections",
    "Use the exact terminology from the job description when possible",
    'Include both acronyms and full forms (e.g., "SEO (Search Engine Optimization)")',
    'Add a "Skills" or "Technical Skills" section with relevant keywords',
    "Ensure your resume is machine-readable (avoid headers/footers, images, or complex formatting)",
]


class KeywordMatcher:
    """
    Standalone keyword-overlap calculator between resume text and a job description.

    Candidate keywords are the job description's whitespace-separated tokens,
    lower-cased and stripped of non-alphanumeric characters, keeping tokens of
    at least `PARSER_DEFAULTS.MIN_KEYWORD_LENGTH` characters that are not stop
    words. Each candidate is counted in the resume text as a whole word.

    The score uses every candidate. The `found`/`missing` lists on the report
    are cut to `max_display_keywords` entries for display only.

    Attributes:
        stop_words (FrozenSet[str]): Tokens never used as keywords.
        max_display_keywords (int): Length cap for the found/missing lists.
    """

    def __init__(
        self,
        stop_words: FrozenSet[str] = STOP_WORDS,
        max_display_keywords: int = PARSER_DEFAULTS.MAX_DISPLAY_KEYWORDS,
    ):
        self.stop_words = frozenset(stop_words)
        self.max_display_keywords = max_display_keywords

    def candidate_keywords(self, job_description_text: str) -> List[str]:
        """
        Return the de-duplicated candidate keywords in order of first appearance.

        Example:
            candidate_keywords("We need Python, SQL and python!") -> ["need", "python", "sql"]
        """
        keywords = []
        for token in (job_description_text or "").lower().split():
            word = NON_ALPHANUMERIC_REGEX.sub("", token)
            if len(word) < PARSER_DEFAULTS.MIN_KEYWORD_LENGTH or word in self.stop_words:
                continue
            keywords.append(word)
        return list(dict.fromkeys(keywords))

    @staticmethod
    def count_occurrences(keyword: str, resume_text: str) -> int:
        """Count whole-word, case-insensitive occurrences of `keyword` in `resume_text`."""
        pattern = rf"\b{re.escape(keyword)}\b"
        return len(re.findall(pattern, resume_text, re.IGNORECASE))

    def match(self, resume_text: str, job_description_text: str) -> JobMatchReport:
        """
        Match `resume_text` against `job_description_text`.

        Args:
            resume_text (str): Flattened plain resume text.
            job_description_text (str): Plain job description text.

        Returns:
            JobMatchReport: Score 0-100 (0 when the job description yields no
                candidate keywords), truncated found/missing lists and feedback.
        """
        resume_text = (resume_text or "").lower()
        keywords = self.candidate_keywords(job_description_text)

        found: List[KeywordCount] = []
        missing: List[str] = []
        for keyword in keywords:
            count = self.count_occurrences(keyword, resume_text)
            if count > 0:
                found.append(KeywordCount(keyword=keyword, count=count))
            else:
                missing.append(keyword)

        score = self.match_score(len(found), len(keywords))
        rating = self.rate(score)

        logger.debug(
            f"Matched {len(found)}/{len(keywords)} job description keywords (score={score})"
        )

        # Stable sort keeps discovery order among equal counts
        found.sort(key=lambda keyword_count: keyword_count.count, reverse=True)

        return JobMatchReport(
            score=score,
            found=found[:self.max_display_keywords],
            missing=missing[:self.max_display_keywords],
            total_keywords=len(keywords),
            rating=rating,
            feedback=MATCH_FEEDBACK[rating],
            tips=list(MATCH_IMPROVEMENT_TIPS),
        )

    @staticmethod
    def match_score(found_count: int, candidate_count: int) -> int:
        """Percentage of candidates found, rounded half up; 0 when there are no candidates."""
        if candidate_count == 0:
            return 0
        return math.floor(found_count / candidate_count * 100 + 0.5)

    @staticmethod
    def rate(score: int) -> str:
        if score >= PARSER_DEFAULTS.EXCELLENT_MATCH_SCORE:
            return "excellent"
        if score >= PARSER_DEFAULTS.GOOD_MATCH_SCORE:
            return "good"
        return "low"


def flatten_resume_text(resume: ResumeDraft) -> str:
    """
    Flatten the content sections of a ResumeDraft into one lower-cased string.

    Contact info is left out. Order: summary, skills, education, experience,
    projects, achievements.
    """
    parts = [
        resume.summary,
        " ".join(resume.skills),
        " ".join(f"{edu.degree} {edu.school} {edu.description}" for edu in resume.education),
        " ".join(f"{exp.job_title} {exp.company} {exp.description}" for exp in resume.experience),
        " ".join(
            f"{project.name} {project.description} {' '.join(project.technologies)}"
            for project in resume.projects
        ),
        " ".join(resume.achievements),
    ]
    return " ".join(parts).lower()


def match_against_job_description(
    resume_text: str,
    job_description_text: str,
    matcher: Optional[KeywordMatcher] = None,
) -> JobMatchReport:
    """Match `resume_text` against `job_description_text` with the default matcher."""
    return (matcher or KeywordMatcher()).match(resume_text, job_description_text)
