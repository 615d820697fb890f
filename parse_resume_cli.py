"""parse_resume_cli.py
Run ResumeParserFramework from the command line.
Example: `python parse_resume_cli.py path/to/resume.txt [path/to/job_description.txt]`
"""
import sys

from resume_ats.exceptions import ResumeTextError
from resume_ats.models import JobMatchReport, ParsedResume
from resume_ats.parse_classes.helpers.validate_resume_text import validate_resume_text
from resume_ats.parse_classes.resume_parse_framework import ResumeParserFramework


def read_text_file(file_path: str, label: str) -> str:
    with open(file_path, "r", encoding="utf-8") as f:
        return validate_resume_text(f.read(), label=label)


def print_parsed_resume(parsed: ParsedResume) -> None:
    info = parsed.personal_info
    print("Resume Parsing Result:")
    print(f"Name: {info.name or 'None'}")
    print(f"Email: {info.email or 'None'}")
    print(f"Phone: {info.phone or 'None'}")
    print(f"Summary: {parsed.summary or 'None'}")
    print(f"Skills: {', '.join(parsed.skills) if parsed.skills else 'None'}")

    print(f"Experience ({len(parsed.experience)}):")
    for exp in parsed.experience:
        dates = " - ".join(d for d in (exp.start_date, exp.end_date) if d)
        print(f"  - {exp.job_title} @ {exp.company} ({dates})")

    print(f"Education ({len(parsed.education)}):")
    for edu in parsed.education:
        dates = " - ".join(d for d in (edu.start_date, edu.end_date) if d)
        print(f"  - {edu.degree}, {edu.school} ({dates})")

    print(f"\nATS Score: {parsed.ats_score.total_score}/100")
    print(f"Keyword matches: {parsed.ats_score.keyword_matches}")
    for suggestion in parsed.ats_score.suggestions:
        print(f"  * {suggestion}")


def print_job_match(report: JobMatchReport) -> None:
    print(f"\nJob Match Score: {report.score}% ({report.rating})")
    print(report.feedback)
    found = ", ".join(f"{k.keyword} ({k.count})" for k in report.found)
    print(f"Found keywords: {found or 'None'}")
    print(f"Missing keywords: {', '.join(report.missing) or 'None'}")
    print("Tips:")
    for tip in report.tips:
        print(f"  * {tip}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python parse_resume_cli.py <resume_text_path> [<job_description_path>]")
        sys.exit(1)

    try:
        resume_text = read_text_file(sys.argv[1], label="Resume text")
        job_description = (
            read_text_file(sys.argv[2], label="Job description") if len(sys.argv) > 2 else None
        )
    except (OSError, ResumeTextError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    # Initialize the parser
    resume_parser_framework = ResumeParserFramework()

    # Parse the resume
    parsed = resume_parser_framework.parse_resume(resume_text)
    print_parsed_resume(parsed)

    if job_description is not None:
        print_job_match(
            resume_parser_framework.match_job_description(resume_text, job_description)
        )


if __name__ == "__main__":
    main()
