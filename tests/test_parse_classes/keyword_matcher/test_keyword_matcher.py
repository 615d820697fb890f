"""test_keyword_matcher.py
Run tests on KeywordMatcher and flatten_resume_text
"""
import pytest

from resume_ats.models import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    KeywordCount,
    ProjectEntry,
    ResumeDraft,
)
from resume_ats.parse_classes.keyword_matcher.keyword_matcher import (
    MATCH_FEEDBACK,
    MATCH_IMPROVEMENT_TIPS,
    STOP_WORDS,
    KeywordMatcher,
    flatten_resume_text,
    match_against_job_description,
)

from resume_ats.test_helpers.dummy_variables.dummy_resume_texts import MOCK_JOB_DESCRIPTION


class TestCandidateKeywords:
    def test_normalization_and_order(self):
        assert KeywordMatcher().candidate_keywords("We need Python, SQL and python!") == [
            "need", "python", "sql"
        ]

    def test_short_tokens_and_stop_words_dropped(self):
        keywords = KeywordMatcher().candidate_keywords("The AI team uses Go and C# with Kubernetes")
        assert keywords == ["team", "uses", "kubernetes"]

    def test_punctuation_inside_tokens_removed(self):
        assert KeywordMatcher().candidate_keywords("Node.js CI/CD") == ["nodejs", "cicd"]

    def test_all_stop_words_dropped(self):
        assert KeywordMatcher().candidate_keywords(" ".join(sorted(STOP_WORDS))) == []

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, text):
        assert KeywordMatcher().candidate_keywords(text) == []


class TestKeywordMatcher:
    def test_empty_job_description_scores_zero(self):
        report = match_against_job_description("python developer", "")
        assert report.score == 0
        assert report.found == []
        assert report.missing == []
        assert report.total_keywords == 0

    def test_only_stop_words_scores_zero(self):
        assert match_against_job_description("python", "the and or with").score == 0

    def test_counts_and_score(self):
        resume_text = "python developer. python, sql and more python"
        report = match_against_job_description(resume_text, "Python SQL Docker")
        assert report.found == [KeywordCount("python", 3), KeywordCount("sql", 1)]
        assert report.missing == ["docker"]
        assert report.total_keywords == 3
        assert report.score == 67

    def test_rounds_half_up(self):
        # 1 of 8 found -> 12.5 -> 13
        report = match_against_job_description(
            "alpha", "alpha bravo charlie delta echo foxtrot golf hotel"
        )
        assert report.score == 13

    def test_whole_word_matching(self):
        report = match_against_job_description("javascript developer", "java")
        assert report.found == []
        assert report.missing == ["java"]

    def test_case_insensitive(self):
        report = match_against_job_description("Built with PYTHON", "python")
        assert report.found == [KeywordCount("python", 1)]
        assert report.score == 100

    def test_found_sorted_by_count_stably(self):
        resume_text = "sql python python docker docker aws"
        report = match_against_job_description(resume_text, "aws sql docker python")
        assert [k.keyword for k in report.found] == ["docker", "python", "aws", "sql"]

    def test_display_lists_truncated_but_score_uses_all(self):
        found_words = [f"found{i:02d}" for i in range(25)]
        missing_words = [f"missing{i:02d}" for i in range(25)]
        report = match_against_job_description(
            " ".join(found_words),
            " ".join(found_words + missing_words),
        )
        assert report.total_keywords == 50
        assert report.score == 50
        assert len(report.found) == 20
        assert report.missing == missing_words[:20]

    def test_custom_display_cap(self):
        report = KeywordMatcher(max_display_keywords=2).match("", "alpha bravo charlie")
        assert report.missing == ["alpha", "bravo"]

    @pytest.mark.parametrize(
        "score,rating",
        [(100, "excellent"), (80, "excellent"), (79, "good"), (50, "good"), (49, "low"), (0, "low")],
    )
    def test_rating_tiers(self, score, rating):
        assert KeywordMatcher.rate(score) == rating

    def test_report_feedback_and_tips(self):
        report = match_against_job_description("python", "python")
        assert report.rating == "excellent"
        assert report.feedback == MATCH_FEEDBACK["excellent"]
        assert report.tips == MATCH_IMPROVEMENT_TIPS

    def test_mock_job_description(self):
        resume_text = "backend engineer building data platforms with python, sql, docker and aws"
        report = match_against_job_description(resume_text, MOCK_JOB_DESCRIPTION)
        assert "kubernetes" in report.missing
        assert KeywordCount("python", 1) in report.found
        assert 0 < report.score < 100


class TestFlattenResumeText:
    def test_order_and_lowercase(self):
        resume = ResumeDraft(
            personal_info=ContactInfo(name="Jane Roe", email="jane@example.com"),
            summary="Summary Text",
            skills=["Python", "SQL"],
            experience=[ExperienceEntry(id="1", job_title="Engineer", company="Acme", description="Built APIs")],
            education=[EducationEntry(id="2", degree="BSc", school="MIT")],
            projects=[ProjectEntry(id="3", name="App", description="Demo", technologies=["React"])],
            achievements=["Won Award"],
        )
        flattened = flatten_resume_text(resume)
        assert flattened == flattened.lower()
        assert "jane" not in flattened
        positions = [
            flattened.index(word)
            for word in ["summary text", "python sql", "bsc mit", "engineer acme built apis", "app demo react", "won award"]
        ]
        assert positions == sorted(positions)

    def test_empty_draft(self):
        assert flatten_resume_text(ResumeDraft()).strip() == ""
