"""config.py
Holds various defaults for different resume parser and scorer settings.
"""

from dataclasses import dataclass, field

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class ParserDefaults:
    """
    Default settings for parameters used across the resume_ats package.
    """
    # ---- FieldExtractor settings ----
    MIN_ENTRY_LINES: int = field(
        default = 2,
        metadata = {
            "description": "Minimum non-blank lines an experience/education entry needs to be kept"
    })
    MIN_SKILL_LENGTH: int = field(
        default = 2,
        metadata = {
            "description": "Minimum character length of a skill token"
    })

    # ---- ATSScorer settings ----
    KEYWORD_POINTS_PER_MATCH: int = field(
        default = 3,
        metadata = {
            "description": "Points awarded for each matched reference skill"
    })
    KEYWORD_POINTS_CAP: int = field(
        default = 15,
        metadata = {
            "description": "Maximum points the keyword category can contribute"
    })
    MIN_KEYWORD_MATCHES: int = field(
        default = 3,
        metadata = {
            "description": "Below this many matched reference skills a keyword suggestion is emitted"
    })

    # ---- KeywordMatcher settings ----
    MIN_KEYWORD_LENGTH: int = field(
        default = 3,
        metadata = {
            "description": "Minimum length of a job-description candidate keyword"
    })
    MAX_DISPLAY_KEYWORDS: int = field(
        default = 20,
        metadata = {
            "description": "Found/missing keyword lists are truncated to this many entries"
    })
    EXCELLENT_MATCH_SCORE: int = field(
        default = 80,
        metadata = {
            "description": "Match score at or above which a match is rated 'excellent'"
    })
    GOOD_MATCH_SCORE: int = field(
        default = 50,
        metadata = {
            "description": "Match score at or above which a match is rated 'good'"
    })

    # ---- Input settings (CLI / API) ----
    MAX_TEXT_CHARS: int = field(
        default = 200_000,
        metadata = {
            "description": "Maximum number of characters accepted for a resume or job description"
    })


# Import this where needed
PARSER_DEFAULTS = ParserDefaults()
