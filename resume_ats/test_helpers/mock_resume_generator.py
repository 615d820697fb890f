"""mock_resume_generator.py
Outputs plain resume text that simulates what a document text extractor hands
to the parser.
"""
from dataclasses import dataclass
from typing import List, Optional
import copy

DEFAULT_SECTION_ORDER = [
    "contact_info",
    "summary",
    "experience",
    "education",
    "skills",
]

# -------------------------------------------------------------------------
# DUMMY RESUME BLOCKS (to construct resumes from)
# -------------------------------------------------------------------------

DUMMY_RESUME_BLOCKS = {
    # ---------------------------------------------------------
    # CONTACT INFO BLOCKS
    # First example is the default used
    # ---------------------------------------------------------
    "contact_info": [
        "{name}\n{email} | {phone} | linkedin.com/in/{linkedin_name}",

        "{name}\nNew York, NY | {phone} | {email}",

        # Contact lines before the name
        "{email}\n{phone}\n{name}",
    ],

    # ---------------------------------------------------------
    # SUMMARY BLOCKS
    # ---------------------------------------------------------
    "summary": [
        "Summary\nBackend engineer with 6 years building data platforms in Python and SQL.",

        "PROFILE\nProduct-minded developer focused on React and TypeScript front ends.",

        "About Me\nData analyst turning messy spreadsheets into dashboards.",
    ],

    # ---------------------------------------------------------
    # EXPERIENCE BLOCKS
    # ---------------------------------------------------------
    "experience": [
        "Experience\n"
        "{job_title} at {company_name}\n"
        "Jan 2020 - Present\n"
        "Built internal APIs used by 40 teams.\n"
        "\n"
        "Junior Developer at Initech\n"
        "Jun 2017 - Dec 2019\n"
        "Maintained billing reports.",

        "WORK HISTORY\n"
        "{job_title}, {company_name}\n"
        "March 2019 to Dec 2021\n"
        "Led migration to cloud hosting.",

        # Year-only range does not match the date pattern
        "Employment\n"
        "{job_title} - {company_name}\n"
        "2018 - 2022\n"
        "Shipped mobile releases.",
    ],

    # ---------------------------------------------------------
    # EDUCATION BLOCKS
    # ---------------------------------------------------------
    "education": [
        "Education\n"
        "B.S. Computer Science\n"
        "State University Sep 2012 - May 2016",

        # No date range on the school line
        "EDUCATION\n"
        "M.A. English\n"
        "University of Texas at San Antonio\n"
        "Thesis on regional literature.",

        "Academic Background\n"
        "High School Diploma\n"
        "The Collegiate School Aug 2008 – Jun 2012",
    ],

    # ---------------------------------------------------------
    # SKILLS BLOCKS (FILLABLE)
    # ---------------------------------------------------------
    "skills_fillable": [
        "Skills\n{skills}",

        "TECHNICAL SKILLS\n{skills}",

        "Technologies\n{skills}",
    ],

    # ---------------------------------------------------------
    # SKILLS VALUES (to fill the templates above with)
    # ---------------------------------------------------------
    "skills_filled": [
        "Python, SQL, Docker, AWS, Git",

        "React | TypeScript | Node.js | GraphQL",

        "Excel\nTableau\nPower BI\nSQL",
    ],
}


# -------------------------------------------------------------------------
# MockResumeGenerator INPUT DATA MODELS
# -------------------------------------------------------------------------
@dataclass
class SectionValues:
    """
    Holds fillable field values that can be overridden when
    generating a mock resume. These represent the variable parts
    of the text templates (e.g., name, email, skills).

    Attributes:
        name: Default person name.
        email: Default email address.
        phone: Default phone number.
        linkedin_name: LinkedIn profile slug or username.
        job_title: Job title of the first experience entry.
        company_name: Company of the first experience entry.
        skills: Skills text for insertion into the skills block.
    """
    name: str = "John Doe"
    email: str = "john.doe@example.com"
    phone: str = "123-456-7890"
    linkedin_name: str = "john_doe23"
    job_title: str = "Software Engineer"
    company_name: str = "Comcast"
    skills: str = DUMMY_RESUME_BLOCKS["skills_filled"][0]


@dataclass
class SectionTemplates:
    """
    Defines the text templates used to render each section of the
    resume. Templates can include placeholders compatible with
    Python's `str.format()` syntax, such as `{name}` or `{skills}`.
    """
    contact_info: str = DUMMY_RESUME_BLOCKS["contact_info"][0]
    summary: str = DUMMY_RESUME_BLOCKS["summary"][0]
    experience: str = DUMMY_RESUME_BLOCKS["experience"][0]
    education: str = DUMMY_RESUME_BLOCKS["education"][0]
    skills: str = DUMMY_RESUME_BLOCKS["skills_fillable"][0]
    other: Optional[str] = None  # optional, only used if provided


# -------------------------------------------------------------------------
# MOCK RESUME GENERATOR
# -------------------------------------------------------------------------
class MockResumeGenerator:
    """
    Generate realistic mock resume text for testing purposes.

    This class builds a resume from predefined templates and values,
    substitutes fillable fields like name, email, phone and skills, and
    joins the rendered sections with blank lines.

    Attributes:
        section_values (SectionValues): Fillable field values for substitution.
        section_templates (SectionTemplates): Templates for each resume section.
        section_order (List[str]): The sequence of sections to include.
    """

    def __init__(
        self,
        section_values: Optional[SectionValues] = None,
        section_templates: Optional[SectionTemplates] = None,
        section_order: Optional[List[str]] = None,
    ):
        self.section_values = section_values or SectionValues()
        self.section_templates = section_templates or SectionTemplates()
        self.section_order = DEFAULT_SECTION_ORDER if section_order is None else section_order

    def _render(self, template: str) -> str:
        # Unknown placeholders are left as-is rather than failing the render
        try:
            return template.format(**vars(self.section_values))
        except (KeyError, IndexError):
            return template

    def generate(self) -> str:
        """
        Build the resume and return it as a single plain-text string.

        Returns:
            str: Rendered sections in `section_order`, separated by a blank line.
        """
        if not self.section_order:
            return ""

        assembled_parts = []
        for section in self.section_order:
            template = getattr(self.section_templates, section, None)
            # Always skip "other" if None
            if not template:
                continue
            assembled_parts.append(self._render(template))

        return "\n\n".join(assembled_parts)

    def clone(
        self,
        section_values: Optional[SectionValues] = None,
        section_templates: Optional[SectionTemplates] = None,
        section_order: Optional[List[str]] = None,
    ) -> "MockResumeGenerator":
        """
        Create a copy of this generator, optionally overriding specific attributes.

        Returns:
            MockResumeGenerator: A new generator with the requested overrides.
        """
        new_gen = copy.deepcopy(self)
        if section_values is not None:
            new_gen.section_values = section_values
        if section_templates is not None:
            new_gen.section_templates = section_templates
        if section_order is not None:
            new_gen.section_order = section_order
        return new_gen
