"""test_force_sequential_ids.py
Confirm FORCE_SEQUENTIAL_IDS applies correctly depending on scope.
"""
import uuid

import pytest

from resume_ats.conftest_helpers import apply_sequential_id_patch, make_sequential_id_generator
from resume_ats.parse_classes.field_extractor import field_extractor
from resume_ats.parse_classes.field_extractor.experience_extractor import ExperienceExtractor
from resume_ats.test_helpers.dummy_classes import EntryIdExtractor

EXPERIENCE_TEXT = (
    "Engineer at Acme Corp\nJan 2021 - Present\nBuilt stuff\n\n"
    "Analyst at Globex\nJun 2018 - Dec 2020\nBuilt reports"
)


# ---------------------------------------------------------------------------
# Confirm default behavior without fixture
# ---------------------------------------------------------------------------
def test_ids_are_uuids_by_default():
    """Extractors should hand out uuid4 strings unless a fixture is applied."""
    entry_id = EntryIdExtractor(text="x").extract()[0]
    assert uuid.UUID(entry_id).version == 4


def test_make_sequential_id_generator():
    generate = make_sequential_id_generator(prefix="job")
    assert [generate(), generate(), generate()] == ["job-1", "job-2", "job-3"]


# ---------------------------------------------------------------------------
# Class-level fixture tests
# ---------------------------------------------------------------------------
@pytest.mark.usefixtures("FORCE_SEQUENTIAL_IDS")
class TestForceSequentialIdsClassLevel:
    """Verify FORCE_SEQUENTIAL_IDS applies at the class level."""

    def test_experience_entries_numbered(self):
        entries = ExperienceExtractor(text=EXPERIENCE_TEXT).extract()
        assert [entry.id for entry in entries] == ["entry-1", "entry-2"]

    def test_counter_restarts_per_test(self):
        assert EntryIdExtractor(text="x").extract() == ["entry-1"]


# ---------------------------------------------------------------------------
# Function-level fixture test
# ---------------------------------------------------------------------------
def test_function_level_patch(FORCE_SEQUENTIAL_IDS):
    assert EntryIdExtractor(text="x").extract() == ["entry-1"]


def test_explicit_id_generator_wins(FORCE_SEQUENTIAL_IDS):
    extractor = EntryIdExtractor(text="x", id_generator=lambda: "mine")
    assert extractor.extract() == ["mine"]


def test_patch_applied_manually(monkeypatch):
    original = field_extractor.generate_entry_id
    apply_sequential_id_patch(monkeypatch)
    assert field_extractor.generate_entry_id is not original
    assert field_extractor.generate_entry_id() == "entry-1"
