"""test_field_extractor.py
Test the abstract FieldExtractor class
"""

import pytest

from resume_ats.exceptions import FieldExtractionConfigError

from resume_ats.parse_classes.field_extractor import field_extractor
from resume_ats.parse_classes.field_extractor.field_extractor import FieldExtractor, generate_entry_id

from resume_ats.test_helpers.dummy_classes import DummyExtractor, EntryIdExtractor


class TestFieldExtractorInit:
    """Tests for FieldExtractor construction and configuration errors."""
    # ----------------------
    # Initialization & config tests
    # ----------------------
    def test_cannot_instantiate_directly(self):
        """Ensure abstract FieldExtractor cannot be instantiated directly."""
        with pytest.raises(TypeError):
            FieldExtractor("text")

    def test_defaults(self):
        extractor = DummyExtractor()
        assert extractor.text == ""
        assert extractor.id_generator is generate_entry_id
        assert extractor.has_custom_id_generator is False

    def test_none_text_becomes_empty_string(self):
        assert DummyExtractor(None).text == ""

    def test_custom_id_generator_is_flagged(self):
        extractor = DummyExtractor("text", id_generator=lambda: "x")
        assert extractor.has_custom_id_generator is True

    def test_non_string_text_raises(self):
        with pytest.raises(FieldExtractionConfigError) as e:
            DummyExtractor(["not", "text"])
        assert "text must be a str" in str(e.value)
        assert e.value.field_name == "name"

    def test_non_callable_id_generator_raises(self):
        with pytest.raises(FieldExtractionConfigError) as e:
            DummyExtractor("text", id_generator="not callable")
        assert "id_generator must be callable" in str(e.value)

    def test_text_reassigned_to_non_string_raises_on_extract(self):
        extractor = DummyExtractor("text")
        extractor.text = 42
        with pytest.raises(FieldExtractionConfigError):
            extractor.extract()


class TestFieldExtractorEmptyValue:
    # ----------------------
    # Blank text short-circuit
    # ----------------------
    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
    def test_blank_text_returns_empty_value(self, text):
        """extract() never runs on blank text; the field's empty value comes back."""
        assert DummyExtractor(text).extract() == ""
        assert EntryIdExtractor(text).extract() == []

    def test_non_blank_text_runs_extract(self):
        assert DummyExtractor("anything").extract() == "dummy"

    def test_extract_keeps_its_name(self):
        assert DummyExtractor.extract.__name__ == "extract"


class TestFieldExtractorRegex:
    # ----------------------
    # Regex extraction
    # ----------------------
    def test_regex_extract_term_returns_first_match(self):
        extractor = DummyExtractor("no match\nmatch: test@example.com\nanother@example.com")
        result = extractor._regex_extract_term(extractor.COMMON_REGEX["email_address"])
        assert result == "test@example.com"

    def test_regex_extract_term_not_found_returns_none(self):
        assert DummyExtractor("abc\ndef")._regex_extract_term(r"xyz") is None

    def test_regex_extract_term_on_explicit_text(self):
        extractor = DummyExtractor("abc")
        assert extractor._regex_extract_term(r"\d+", text="room 101") == "101"

    @pytest.mark.parametrize(
        "line,pattern_name,expected",
        [
            ("Jan 2020 - Present", "date_range", ("Jan 2020", "Present")),
            ("Jan 2020 to Dec 2021", "date_range", ("Jan 2020", "Dec 2021")),
            ("Jan 2020 to Dec 2021", "dash_date_range", None),
            ("Sep 2012 — May 2016", "dash_date_range", ("Sep 2012", "May 2016")),
            ("2020-Present", "date_range", None),
        ],
    )
    def test_match_date_range(self, line, pattern_name, expected):
        match = DummyExtractor("x")._match_date_range(line, pattern_name=pattern_name)
        if expected is None:
            assert match is None
        else:
            assert match.groups() == expected


class TestFieldExtractorEntries:
    # ----------------------
    # Entry splitting
    # ----------------------
    def test_split_entries_drops_short_blocks(self):
        extractor = DummyExtractor("a\nb\nc\n\nlonely\n\n  \n\nd\ne\n")
        assert extractor._split_entries() == [["a", "b", "c"], ["d", "e"]]

    def test_split_entries_keeps_lines_unmodified(self):
        extractor = DummyExtractor("  a  \n\tb\n")
        assert extractor._split_entries() == [["  a  ", "\tb"]]

    def test_split_description(self):
        extractor = DummyExtractor("x")
        assert extractor._split_description(["one", "two"]) == ("one", "two", "")
        assert extractor._split_description(["one", "two", "three", "four"]) == (
            "one", "two", "three\nfour"
        )


class TestEntryIds:
    def test_default_generator_returns_unique_strings(self):
        first, second = generate_entry_id(), generate_entry_id()
        assert isinstance(first, str)
        assert first != second

    def test_injected_generator_is_used(self):
        assert EntryIdExtractor("text", id_generator=lambda: "fixed").extract() == ["fixed"]

    def test_sequential_ids_fixture(self, FORCE_SEQUENTIAL_IDS):
        extractor = EntryIdExtractor("text")
        assert extractor.extract() == ["entry-1"]
        assert extractor.extract() == ["entry-2"]

    def test_fixture_does_not_leak(self):
        assert field_extractor.generate_entry_id is generate_entry_id
