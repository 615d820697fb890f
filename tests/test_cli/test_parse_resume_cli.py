"""test_parse_resume_cli.py
Run tests on the command line entry point
"""
import sys

import pytest

import parse_resume_cli

from resume_ats.test_helpers.dummy_variables.dummy_resume_texts import (
    MOCK_JOB_DESCRIPTION,
    MOCK_RESUME_GENERATOR_0,
)


@pytest.fixture
def resume_file(tmp_path):
    path = tmp_path / "resume.txt"
    path.write_text(MOCK_RESUME_GENERATOR_0.generate(), encoding="utf-8")
    return path


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["parse_resume_cli.py", *map(str, args)])
    parse_resume_cli.main()


def test_prints_parsed_resume(monkeypatch, capsys, resume_file):
    run_cli(monkeypatch, resume_file)
    out = capsys.readouterr().out
    assert "Name: John Doe" in out
    assert "Email: john.doe@example.com" in out
    assert "  - Software Engineer @ Comcast (Jan 2020 - Present)" in out
    assert "ATS Score: 100/100" in out
    assert "Job Match Score" not in out


def test_prints_job_match(monkeypatch, capsys, resume_file, tmp_path):
    job_description_file = tmp_path / "job.txt"
    job_description_file.write_text(MOCK_JOB_DESCRIPTION, encoding="utf-8")

    run_cli(monkeypatch, resume_file, job_description_file)
    out = capsys.readouterr().out
    assert "Job Match Score" in out
    assert "kubernetes" in out


def test_usage_without_arguments(monkeypatch, capsys):
    with pytest.raises(SystemExit) as e:
        run_cli(monkeypatch)
    assert e.value.code == 1
    assert capsys.readouterr().out.startswith("Usage:")


def test_missing_file(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as e:
        run_cli(monkeypatch, tmp_path / "nope.txt")
    assert e.value.code == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_blank_file(monkeypatch, capsys, tmp_path):
    blank_file = tmp_path / "blank.txt"
    blank_file.write_text("  \n", encoding="utf-8")
    with pytest.raises(SystemExit):
        run_cli(monkeypatch, blank_file)
    assert "Resume text contains no parsable text." in capsys.readouterr().out
