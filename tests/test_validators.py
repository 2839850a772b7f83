# tests/test_validators.py

import pytest

from core.response import ErrorCode
from core.validators import (
    is_valid_department,
    is_valid_id,
    is_valid_name,
    validate,
)

# === predicates ===


@pytest.mark.parametrize("student_id", ["123456789", "1234567890", "123456789012"])
def test_valid_ids(student_id):
    assert is_valid_id(student_id)


@pytest.mark.parametrize(
    "student_id",
    ["12", "12345678", "1234567890123", "12345678a", " 123456789", "", None, 123456789],
)
def test_invalid_ids(student_id):
    assert not is_valid_id(student_id)


def test_id_rejects_non_ascii_digits():
    assert not is_valid_id("١٢٣٤٥٦٧٨٩")


def test_id_rejects_trailing_newline():
    assert not is_valid_id("123456789\n")


def test_valid_names():
    assert is_valid_name("Maria Lopez")
    assert is_valid_name("  Al  ")
    assert is_valid_name("A" * 50)


def test_invalid_names():
    assert not is_valid_name("A")
    assert not is_valid_name("A" * 51)
    assert not is_valid_name("O'Brien")
    assert not is_valid_name("Agent 47")
    assert not is_valid_name("   ")
    assert not is_valid_name(None)


def test_department_length_is_measured_after_trimming():
    assert is_valid_department("CS")
    assert is_valid_department("  Physics & Astronomy (Dept. 7)  ")
    assert is_valid_department("D" * 50)
    assert not is_valid_department(" C ")
    assert not is_valid_department("D" * 51)
    assert not is_valid_department(42)


# === composite validation ===


def test_validate_success():
    response = validate("123456789", "Maria Lopez", "Computer Science")
    assert response.success
    assert response.error is None


def test_validate_reports_id_first():
    response = validate("12", "X", "")
    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.data["field"] == "id"
    assert "9-12 digits" in response.detail


def test_validate_reports_name_before_department():
    response = validate("123456789", "R2D2", "")
    assert response.data["field"] == "name"


def test_validate_reports_department():
    response = validate("123456789", "Maria Lopez", "X")
    assert not response.success
    assert response.data["field"] == "department"
    assert "Department" in response.detail
