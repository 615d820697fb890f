"""dummy_resume_texts.py
Dummy resume and job description texts to use for testing.
"""

from resume_ats.test_helpers.mock_resume_generator import (
    MockResumeGenerator,
    SectionValues,
    SectionTemplates,
    DUMMY_RESUME_BLOCKS,
    DEFAULT_SECTION_ORDER,
)

# ---------------------------------------------------------------------------
# Setup dummy examples for testing
# ---------------------------------------------------------------------------

# Minimal resume with a skills and an experience section
MINIMAL_RESUME_TEXT = (
    "Skills\n"
    "JavaScript, React, Node.js\n"
    "\n"
    "Experience\n"
    "Engineer at Acme Corp\n"
    "Jan 2021 - Present\n"
    "Built stuff"
)

# Basic Resume with default values (0 for all options in DUMMY_RESUME_BLOCKS)
MOCK_RESUME_GENERATOR_0 = MockResumeGenerator(
    section_values=SectionValues(
        name="John Doe",
        email="john.doe@example.com",
        phone="123-456-7890",
        linkedin_name="john_doe23",
        job_title="Software Engineer",
        company_name="Comcast",
        skills=DUMMY_RESUME_BLOCKS["skills_filled"][0],
    ),
    section_templates=SectionTemplates(
        contact_info=DUMMY_RESUME_BLOCKS["contact_info"][0],
        summary=DUMMY_RESUME_BLOCKS["summary"][0],
        experience=DUMMY_RESUME_BLOCKS["experience"][0],
        education=DUMMY_RESUME_BLOCKS["education"][0],
        skills=DUMMY_RESUME_BLOCKS["skills_fillable"][0],
        other=None,  # optional
    ),
    section_order=DEFAULT_SECTION_ORDER,  # e.g., ["contact_info", "summary", "experience", "education", "skills"]
)

# Basic Resume with 1 for all DUMMY_RESUME_BLOCKS options and a scrambled order
MOCK_RESUME_GENERATOR_1 = MockResumeGenerator(
    section_values=SectionValues(
        name="Carlos Mendez",
        email="c.mendez@company.net",
        phone="(415) 555-0199",
        job_title="Frontend Developer",
        company_name="Globex",
        skills=DUMMY_RESUME_BLOCKS["skills_filled"][1],
    ),
    section_templates=SectionTemplates(
        contact_info=DUMMY_RESUME_BLOCKS["contact_info"][1],
        summary=DUMMY_RESUME_BLOCKS["summary"][1],
        experience=DUMMY_RESUME_BLOCKS["experience"][1],
        education=DUMMY_RESUME_BLOCKS["education"][1],
        skills=DUMMY_RESUME_BLOCKS["skills_fillable"][1],
    ),
    section_order=[
        "contact_info",
        "skills",
        "education",
        "experience",
        "summary",
    ]
)

# Basic Resume with 2 for all DUMMY_RESUME_BLOCKS options
MOCK_RESUME_GENERATOR_2 = MockResumeGenerator(
    section_values=SectionValues(
        name="Alice Lee",
        email="alice.lee@example.co.uk",
        phone="+44 207.946.0958",
        job_title="Mobile Developer",
        company_name="Initrode",
        skills=DUMMY_RESUME_BLOCKS["skills_filled"][2],
    ),
    section_templates=SectionTemplates(
        contact_info=DUMMY_RESUME_BLOCKS["contact_info"][2],
        summary=DUMMY_RESUME_BLOCKS["summary"][2],
        experience=DUMMY_RESUME_BLOCKS["experience"][2],
        education=DUMMY_RESUME_BLOCKS["education"][2],
        skills=DUMMY_RESUME_BLOCKS["skills_fillable"][2],
    ),
)

# Job description to match the generated resumes against
MOCK_JOB_DESCRIPTION = (
    "We are hiring a Backend Engineer to build data platforms. "
    "You will work with Python, SQL and Docker on AWS. "
    "Experience with Kubernetes and Terraform is a plus."
)


# Setup Test Persons to test with
MOCK_PERSONS = [
    {"name": "John Doe", "email": "john.doe@example.com", "phone": "123-456-7890"},
    {"name": "John E. Doe", "email": "j.e.doe@protonmail.com", "phone": "(212) 555-0147"},
    {"name": "John Edward Doe", "email": "jedward.doe@outlook.co.uk", "phone": "+44 207 946 0958"},
    {"name": "John Doe-Smith", "email": "john.doe-smith@smithfamily.org", "phone": "312.555.0175"},
    {"name": "María-José Carreño", "email": "mariajose.carreno@gmail.es", "phone": "+34 912-345-6789"},
    {"name": "Nguyễn Văn An", "email": "nguyenvan.an@vnmail.vn", "phone": "+84 283 822 9163"},
    {"name": "Zhang Wei", "email": "zhang.wei@aliyun.cn", "phone": "+86 105-123-4567"},
    {"name": "Mei-Ling Yi", "email": "mei.ling.yi@ntu.edu.sg", "phone": "+65 631.234.5678"},
    {"name": "Oluwaseun Adeyemi", "email": "oluwaseun.a@lagosconnect.com", "phone": "+234 803-123-4567"},
    {"name": "Ivan Ivanovich Petrov", "email": "ivan.petrov@ya.ru", "phone": "+7 495 123 4567"},
    {"name": "Anne-Marie O'Neill", "email": "annemarie.oneill@irishmail.ie", "phone": "+353 161.234.5678"},
    {"name": "Chloé Dubois", "email": "chloe.dubois@orange.fr", "phone": "+33 142-685-3000"},
    {"name": "Søren Kierkegaard", "email": "soren.kierkegaard@cph.dk", "phone": "+45 331 234 5678"},
    {"name": "Ji-hoon Park", "email": "jihoon.park@korea.kr", "phone": "+82 221-234-5678"},
    {"name": "Yuki Takahashi", "email": "yuki.takahashi@me.jp", "phone": "+81 312 345 6789"},
    {"name": "Priya Kaur Singh", "email": "priya.ks@outlook.in", "phone": "+91 981-123-4567"},
    {"name": "Arjun Srinivasan", "email": "arjun.srinivasan@iitm.ac.in", "phone": "+91 442.257.8000"},
    {"name": "Fatima Al-Sayed", "email": "fatima.al.sayed@dubai.ae", "phone": "+971 450-123-4567"},
    {"name": "Javier Fernandez Garcia", "email": "javier.fg@correo.es", "phone": "+34 934 123 4567"},
    {"name": "Daan van der Beek", "email": "daan.vanderbeek@kpn.nl", "phone": "+31 201-234-5678"},
    {"name": "Dr. Felicity Shaw", "email": "dr.felicity.shaw@nhs.uk", "phone": "+44 161 496 0000"},
    {"name": "William (Will) Smith", "email": "will.smith@hollywoodmail.com", "phone": "(310) 555-0123"},
    {"name": "Michael Johnson Jr.", "email": "michael.johnsonjr@utexas.edu", "phone": "512-555-0110"},
    {"name": "M. K. Gandhi", "email": "m.k.gandhi@freedom.org", "phone": "+91 112.338.7562"},
]
