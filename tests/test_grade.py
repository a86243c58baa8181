"""
Tests for the Grade value object.

These tests verify:
1. Constructor stores values verbatim
2. Accessors are pure
3. Valid updates read back unchanged
4. Rejected updates keep the prior value and log one diagnostic
5. The validating factory
"""

import logging

import pytest

from encapsulation.core.grade import (
    Grade,
    STUDENT_NAME_MESSAGE,
    NUMERIC_GRADE_MESSAGE,
    COURSE_CODE_MESSAGE,
)
from encapsulation.core.exceptions import ValidationError


GRADE_LOGGER = "encapsulation.core.grade"


@pytest.fixture
def grade():
    return Grade("Alice", 85, "CS101")


def grade_warnings(caplog):
    return [r for r in caplog.records if r.name == GRADE_LOGGER and r.levelno == logging.WARNING]


# =============================================================================
# CONSTRUCTION AND ACCESS
# =============================================================================

class TestConstruction:
    """Test construction and read access."""

    def test_fields_read_back(self, grade):
        assert grade.get_student_name() == "Alice"
        assert grade.get_numeric_grade() == 85
        assert grade.get_course_code() == "CS101"

    def test_properties_match_getters(self, grade):
        assert grade.student_name == grade.get_student_name()
        assert grade.numeric_grade == grade.get_numeric_grade()
        assert grade.course_code == grade.get_course_code()

    def test_constructor_does_not_validate(self, caplog):
        unchecked = Grade("", -5, "  ")

        assert unchecked.get_numeric_grade() == -5
        assert unchecked.get_student_name() == ""
        assert unchecked.get_course_code() == "  "
        assert grade_warnings(caplog) == []

    def test_reads_are_repeatable(self, grade):
        first = (grade.get_student_name(), grade.get_numeric_grade(), grade.get_course_code())
        second = (grade.get_student_name(), grade.get_numeric_grade(), grade.get_course_code())
        assert first == second

    def test_fields_are_read_only_properties(self, grade):
        with pytest.raises(AttributeError):
            grade.numeric_grade = 10

    def test_to_dict(self, grade):
        assert grade.to_dict() == {
            'student_name': "Alice",
            'numeric_grade': 85,
            'course_code': "CS101",
        }

    def test_repr(self, grade):
        assert repr(grade) == "Grade(student_name='Alice', numeric_grade=85, course_code='CS101')"


# =============================================================================
# VALID UPDATES
# =============================================================================

class TestValidUpdates:
    """Accepted values are stored as given."""

    @pytest.mark.parametrize("name", ["Bob", "a", " padded "])
    def test_set_student_name(self, grade, name):
        assert grade.set_student_name(name) is True
        assert grade.get_student_name() == name

    @pytest.mark.parametrize("value", [0, 1, 50, 99, 100])
    def test_set_numeric_grade(self, grade, value):
        assert grade.set_numeric_grade(value) is True
        assert grade.get_numeric_grade() == value

    def test_set_course_code_keeps_whitespace(self, grade):
        assert grade.set_course_code("  CS202 ") is True
        assert grade.get_course_code() == "  CS202 "

    def test_valid_updates_log_nothing(self, grade, caplog):
        grade.set_student_name("Bob")
        grade.set_numeric_grade(70)
        grade.set_course_code("CS102")
        assert grade_warnings(caplog) == []

    def test_whitespace_name_is_accepted(self, grade):
        # only the course code ignores surrounding whitespace
        assert grade.set_student_name("   ") is True
        assert grade.get_student_name() == "   "


# =============================================================================
# REJECTED UPDATES
# =============================================================================

class TestRejectedUpdates:
    """Rejected values leave the field untouched and log one diagnostic."""

    @pytest.mark.parametrize("value", [-1, 101, 150, -5, 85.5, "50", True, None])
    def test_numeric_grade_out_of_range(self, grade, caplog, value):
        assert grade.set_numeric_grade(value) is False

        assert grade.get_numeric_grade() == 85
        warnings = grade_warnings(caplog)
        assert len(warnings) == 1
        assert NUMERIC_GRADE_MESSAGE in warnings[0].getMessage()

    @pytest.mark.parametrize("name", ["", None, 42, b"Bob"])
    def test_empty_student_name(self, grade, caplog, name):
        assert grade.set_student_name(name) is False

        assert grade.get_student_name() == "Alice"
        warnings = grade_warnings(caplog)
        assert len(warnings) == 1
        assert STUDENT_NAME_MESSAGE in warnings[0].getMessage()

    @pytest.mark.parametrize("code", ["", "   ", "\t\n", None, 101, ["CS101"]])
    def test_blank_course_code(self, grade, caplog, code):
        assert grade.set_course_code(code) is False

        assert grade.get_course_code() == "CS101"
        warnings = grade_warnings(caplog)
        assert len(warnings) == 1
        assert COURSE_CODE_MESSAGE in warnings[0].getMessage()

    def test_diagnostics_stay_off_stdout(self, grade, capsys):
        grade.set_numeric_grade(150)

        assert capsys.readouterr().out == ""

    def test_rejection_after_acceptance_keeps_latest_value(self, grade):
        grade.set_numeric_grade(60)
        grade.set_numeric_grade(200)
        assert grade.get_numeric_grade() == 60


# =============================================================================
# VALIDATING FACTORY
# =============================================================================

class TestCreate:
    """Test Grade.create and is_valid."""

    def test_create_accepts_valid_triple(self):
        grade = Grade.create("Alice", 100, "CS101")
        assert grade.to_dict() == {
            'student_name': "Alice",
            'numeric_grade': 100,
            'course_code': "CS101",
        }

    def test_create_rejects_bad_grade(self):
        with pytest.raises(ValidationError) as exc_info:
            Grade.create("Alice", -5, "CS101")

        assert exc_info.value.message == NUMERIC_GRADE_MESSAGE
        assert exc_info.value.error_code == "invalid_numeric_grade"
        assert exc_info.value.details == {'field': 'numeric_grade', 'value': -5}

    def test_create_rejects_non_integer_grade(self):
        with pytest.raises(ValidationError) as exc_info:
            Grade.create("Alice", "85", "CS101")

        assert exc_info.value.error_code == "invalid_numeric_grade"

    def test_create_reports_first_bad_field(self):
        with pytest.raises(ValidationError) as exc_info:
            Grade.create("", 500, " ")

        assert exc_info.value.details['field'] == 'student_name'

    def test_is_valid(self):
        assert Grade("Alice", 85, "CS101").is_valid() is True
        assert Grade("Alice", -5, "CS101").is_valid() is False
        assert Grade(None, 85, "CS101").is_valid() is False
        assert Grade("Alice", 85, " ").is_valid() is False
