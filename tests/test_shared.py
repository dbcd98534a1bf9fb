import pytest

from dataclasses import FrozenInstanceError
from datetime import date

import cvwork.shared
from cvwork.content import Emph, Text
from cvwork.fields import ABSENT, DateField, PlainField, RichField


class TestTextNormalization:
    """Tests for text normalization functions."""

    def test_normalize_text_with_special_chars_replaces_with_standard_equivalents(self):
        """Non-breaking spaces, soft hyphens, and line endings should be normalized."""
        s = "A\u00A0B high\u00ADquality\r\nok\rnice"
        out = cvwork.shared.normalize_text_for_processing(s)
        assert out == "A B high-quality\nok\nnice"

    def test_normalize_text_with_invalid_xml_chars_removes_them(self):
        """Invalid XML 1.0 characters like vertical tab should be stripped."""
        s = "ok\x0bnope"
        out = cvwork.shared.normalize_text_for_processing(s)
        assert out == "oknope"

    def test_normalize_text_keeps_dashes(self):
        """En- and em-dashes used as separators survive normalization."""
        assert cvwork.shared.normalize_text_for_processing("a – b — c") == "a – b — c"

    def test_clean_text_with_excess_whitespace_collapses_and_trims(self):
        """Multiple spaces, tabs, and newlines should collapse to single spaces."""
        s = "  A\u00A0B \n  C\t\tD  "
        assert cvwork.shared.clean_text(s) == "A B C D"


class TestWorkExperience:
    """Tests for the WorkExperience record."""

    def test_only_body_required(self):
        exp = cvwork.shared.WorkExperience(body=Text("x"))
        assert exp.body == Text("x")
        for name in ("company", "location", "position", "start", "end"):
            assert getattr(exp, name) is ABSENT

    def test_missing_body_raises(self):
        with pytest.raises(TypeError):
            cvwork.shared.WorkExperience()

    def test_string_body_becomes_text(self):
        assert cvwork.shared.WorkExperience(body="x").body == Text("x")

    def test_non_content_body_raises(self):
        with pytest.raises(TypeError):
            cvwork.shared.WorkExperience(body=42)

    def test_fields_are_coerced(self):
        exp = cvwork.shared.WorkExperience(
            body=Text("x"),
            position="Owner",
            company=Emph(Text("Acme")),
            start=date(2042, 1, 1),
            end="Present",
        )
        assert exp.position == PlainField("Owner")
        assert exp.company == RichField(Emph(Text("Acme")))
        assert exp.start == DateField(date(2042, 1, 1))
        assert exp.end == PlainField("Present")

    def test_date_not_allowed_for_location(self):
        with pytest.raises(TypeError):
            cvwork.shared.WorkExperience(body=Text("x"), location=date(2042, 1, 1))

    def test_unsupported_field_type_raises(self):
        with pytest.raises(TypeError):
            cvwork.shared.WorkExperience(body=Text("x"), company=123)

    def test_record_is_frozen(self):
        exp = cvwork.shared.WorkExperience(body=Text("x"))
        with pytest.raises(FrozenInstanceError):
            exp.company = "Acme"

    def test_records_compare_by_value(self):
        a = cvwork.shared.WorkExperience(body=Text("x"), company="Acme")
        b = cvwork.shared.WorkExperience(body=Text("x"), company="Acme")
        assert a == b


class TestWorkSection:
    """Tests for the WorkSection record."""

    def test_entries_become_tuple(self):
        exp = cvwork.shared.WorkExperience(body=Text("x"))
        section = cvwork.shared.WorkSection(entries=[exp])
        assert section.entries == (exp,)

    def test_non_experience_entry_raises(self):
        with pytest.raises(TypeError):
            cvwork.shared.WorkSection(entries=["nope"])

    def test_date_title_rejected(self):
        with pytest.raises(TypeError):
            cvwork.shared.WorkSection(title=date(2042, 1, 1))

    def test_defaults(self):
        assert cvwork.shared.DEFAULT_TITLE == "Work Experience"
        assert cvwork.shared.DEFAULT_DATE_FORMAT == "%b %Y"
