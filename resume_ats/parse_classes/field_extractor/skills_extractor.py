"""skills_extractor.py
Extracts skills from the skills section of resume text.
"""
import re
from typing import List

from resume_ats.config import PARSER_DEFAULTS
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor

# Filler tokens that show up between delimiters but are never skills
SKILL_STOPLIST = frozenset({"and", "or", "with", "using", "experience"})


class SkillsExtractor(FieldExtractor):
    """
    Extracts the candidate's skills from the skills section body.

    The text is split on commas, newlines, pipes and slashes. Tokens are
    trimmed; tokens shorter than `PARSER_DEFAULTS.MIN_SKILL_LENGTH` and
    stoplist words are dropped. Duplicates are removed keeping the first
    occurrence, so skills come back in the order they were written.
    """
    FIELD_NAME = "skills"
    SOURCE_SECTION = "skills"
    EMPTY_VALUE_FACTORY = list

    SKILL_DELIMITER_REGEX = r"[,\n|/]"

    def extract(self) -> List[str]:
        """
        Returns:
            List[str]: De-duplicated skills in first-seen order. Empty list if
                no skills could be found.
        """
        skills = []
        for token in re.split(self.SKILL_DELIMITER_REGEX, self.text):
            skill = token.strip()
            if self._is_skill(skill) and skill not in skills:
                skills.append(skill)
        return skills

    def _is_skill(self, token: str) -> bool:
        return (
            len(token) >= PARSER_DEFAULTS.MIN_SKILL_LENGTH
            and token.lower() not in SKILL_STOPLIST
        )


def extract_skills(section_text: str) -> List[str]:
    """Return the skills listed in `section_text`."""
    return SkillsExtractor(section_text).extract()
