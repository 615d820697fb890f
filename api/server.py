"""server.py
Server to launch a FastAPI / Swagger UI instance.
"""
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from resume_ats.exceptions import ResumeTextEmptyError, ResumeTextError, ResumeTextTooLargeError
from resume_ats.logging import LoggerFactory
from resume_ats.models import ATSMetrics, JobMatchReport, ParsedResume, ResumeDraft
from resume_ats.parse_classes.helpers.validate_resume_text import validate_resume_text
from resume_ats.parse_classes.resume_parse_framework import ResumeParserFramework


app = FastAPI(title="Resume ATS API", version="1.0")

logger = LoggerFactory().get_logger(name="api_server")


class ParseResumeInputs(BaseModel):
    text: str


class MatchJobDescriptionInputs(BaseModel):
    resume_text: str
    job_description: str


# Initiate ResumeParserFramework for use when server calls
resume_parse_framework = ResumeParserFramework()


def _validate_or_raise(text: str, label: str) -> str:
    """Run validate_resume_text and map failures onto HTTP errors."""
    try:
        return validate_resume_text(text, label=label)
    except ResumeTextTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except ResumeTextEmptyError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ResumeTextError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post(
    "/parse_resume",
    response_model=ParsedResume,
    summary="Parse resume text and extract structured data",
    description="Takes plain resume text, segments it, extracts fields and returns a scored ParsedResume.",
)
def parse_resume(inputs: ParseResumeInputs) -> ParsedResume:
    """
    Validate resume text, parse it, and return the extracted ParsedResume.
    """
    text = _validate_or_raise(inputs.text, label="Resume text")

    try:
        return resume_parse_framework.parse_resume(text)
    except Exception as e:
        logger.error(f"Parsing failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post(
    "/ats_score",
    response_model=ATSMetrics,
    summary="Score a (possibly edited) resume for completeness",
    description="Recomputes the ATS completeness report for a ResumeDraft.",
)
def ats_score(resume: ResumeDraft) -> ATSMetrics:
    return resume_parse_framework.score_resume(resume)


@app.post(
    "/match_job_description",
    response_model=JobMatchReport,
    summary="Match resume text against a job description",
    description="Returns the keyword match score, found/missing keywords and improvement tips.",
)
def match_job_description(inputs: MatchJobDescriptionInputs) -> JobMatchReport:
    resume_text = _validate_or_raise(inputs.resume_text, label="Resume text")
    job_description = _validate_or_raise(inputs.job_description, label="Job description")

    return resume_parse_framework.match_job_description(resume_text, job_description)
