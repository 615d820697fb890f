"""resume_parse_framework.py
Holds framework to orchestrate operation of SectionSegmenter, ResumeExtractor,
ATSScorer and KeywordMatcher and return ParsedResume / report objects.
"""
from dataclasses import fields
from typing import Optional, Dict, List

from resume_ats.exceptions import ResumeParserFrameworkConfigError
from resume_ats.logging import LoggerFactory
from resume_ats.models import ATSMetrics, JobMatchReport, ParsedResume, ResumeDraft

from resume_ats.parse_classes.section_segmenter.section_segmenter import SectionSegmenter
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor, IdGenerator
from resume_ats.parse_classes.resume_extractor.helpers.extractor_map import verify_extractor_map
from resume_ats.parse_classes.resume_extractor.resume_extractor import ResumeExtractor
from resume_ats.parse_classes.ats_scorer.ats_scorer import ATSScorer
from resume_ats.parse_classes.keyword_matcher.keyword_matcher import (
    KeywordMatcher,
    flatten_resume_text,
)

logger = LoggerFactory().get_logger(name="resume_parse_framework")


class ResumeParserFramework:
    """
    Orchestrates the complete resume pipeline, from plain text to a scored draft.

    Combines:
        - :class:`SectionSegmenter` to split the text into sections
        - :class:`ResumeExtractor` (e.g. :class:`EmailExtractor`, :class:`ExperienceExtractor`)
        - :class:`ATSScorer` for the completeness report
        - :class:`KeywordMatcher` for job-description matching

    The framework keeps no per-call state, so one instance can serve
    concurrent callers.

    Parameters
    ----------
    extractor_map : dict[str, list[FieldExtractor]], optional
        A mapping of field names to lists of extractor instances used by the
        :class:`ResumeExtractor`. Enables backup strategies for each field.
    segmenter : SectionSegmenter, optional
        Segmenter used to split resume text into sections.
    id_generator : Callable[[], str], optional
        Identifier generator for extracted entries (inject a deterministic one
        in tests).
    scorer : ATSScorer, optional
        Completeness scorer.
    matcher : KeywordMatcher, optional
        Job-description keyword matcher.

    Example
    -------
    >>> framework = ResumeParserFramework()
    >>> parsed = framework.parse_resume(resume_text)
    >>> parsed.ats_score.total_score
    75
    """

    def __init__(
        self,
        extractor_map: Optional[Dict[str, List[FieldExtractor]]] = None,
        segmenter: Optional[SectionSegmenter] = None,
        id_generator: Optional[IdGenerator] = None,
        scorer: Optional[ATSScorer] = None,
        matcher: Optional[KeywordMatcher] = None,
    ):
        if extractor_map is not None:
            verify_extractor_map(extractor_map)
        self.extractor_map = extractor_map

        self.segmenter = segmenter or SectionSegmenter()
        self.id_generator = id_generator
        self.scorer = scorer or ATSScorer()
        self.matcher = matcher or KeywordMatcher()

        self._validate_config()

    def _validate_config(self) -> None:
        """
        Raises:
            ResumeParserFrameworkConfigError: If a collaborator has the wrong type.
        """
        expected_types = {
            "segmenter": (self.segmenter, SectionSegmenter),
            "scorer": (self.scorer, ATSScorer),
            "matcher": (self.matcher, KeywordMatcher),
        }
        for name, (value, expected_type) in expected_types.items():
            if not isinstance(value, expected_type):
                raise ResumeParserFrameworkConfigError(
                    message=(
                        f"`{name}` must be a {expected_type.__name__} instance, "
                        f"got {type(value).__name__}."
                    )
                )
        if self.id_generator is not None and not callable(self.id_generator):
            raise ResumeParserFrameworkConfigError(message="`id_generator` must be callable.")

    def extract_draft(self, text: str) -> ResumeDraft:
        """Segment `text` and extract a ResumeDraft without scoring it."""
        return ResumeExtractor(
            text=text,
            extractor_map=self.extractor_map,
            segmenter=self.segmenter,
            id_generator=self.id_generator,
        ).extract()

    def parse_resume(self, text: str) -> ParsedResume:
        """
        Full pipeline: segment text → extract structured data → score → ``ParsedResume``.

        Args:
            text (str): Plain resume text (already extracted from the source document).

        Returns:
            ParsedResume: The draft fields plus its ATSMetrics under ``ats_score``.
        """
        draft = self.extract_draft(text)
        ats_score = self.score_resume(draft)

        logger.info(
            f"Parsed resume: {len(draft.skills)} skills, {len(draft.experience)} experience "
            f"entries, {len(draft.education)} education entries, score {ats_score.total_score}"
        )

        return ParsedResume(
            **{f.name: getattr(draft, f.name) for f in fields(ResumeDraft)},
            ats_score=ats_score,
        )

    def score_resume(self, resume: ResumeDraft) -> ATSMetrics:
        """Compute the completeness report for an existing (possibly user-edited) draft."""
        return self.scorer.score(resume)

    def match_job_description(
        self,
        resume_text: str,
        job_description_text: str,
    ) -> JobMatchReport:
        """Match flattened resume text against a job description."""
        return self.matcher.match(resume_text, job_description_text)

    def match_resume_to_job_description(
        self,
        resume: ResumeDraft,
        job_description_text: str,
    ) -> JobMatchReport:
        """Flatten `resume` and match it against a job description."""
        return self.match_job_description(flatten_resume_text(resume), job_description_text)
