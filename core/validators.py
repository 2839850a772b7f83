# core/validators.py

"""
Field rules for student records.

The predicates are pure and never raise. `validate()` composes them in a fixed order
(ID, then name, then department) and reports the first failure as a structured `Response`.
"""

import re
from typing import Any

from core.response import ErrorCode, Response

ID_PATTERN = re.compile(r"[0-9]{9,12}")
NAME_PATTERN = re.compile(r"[A-Za-z\s]{2,50}")

DEPARTMENT_MIN_LENGTH = 2
DEPARTMENT_MAX_LENGTH = 50


def is_valid_id(student_id: Any) -> bool:
    return isinstance(student_id, str) and ID_PATTERN.fullmatch(student_id) is not None


def is_valid_name(name: Any) -> bool:
    return isinstance(name, str) and NAME_PATTERN.fullmatch(name.strip()) is not None


def is_valid_department(department: Any) -> bool:
    if not isinstance(department, str):
        return False

    return DEPARTMENT_MIN_LENGTH <= len(department.strip()) <= DEPARTMENT_MAX_LENGTH


def validate(student_id: Any, name: Any, department: Any) -> Response:
    """
    Checks all three student fields, stopping at the first invalid one.

    Args:
        student_id (Any): The candidate student ID, expected to be 9-12 digits.
        name (Any): The candidate name, letters and spaces only, 2-50 characters once trimmed.
        department (Any): The candidate department, 2-50 characters once trimmed.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if every field is valid.
                - False on the first invalid field.
            - detail (str | None):
                - On failure, a human-readable description of the broken rule.
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.VALIDATION_FAILED` on failure.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
            - data (dict | None): Payload with the following keys:
                - On failure:
                    - "field" (str): One of "id", "name", or "department".

    Notes:
        - This function has no side effects and never raises.
    """
    if not is_valid_id(student_id):
        return _field_failure("id", "Student ID must be 9-12 digits.")

    if not is_valid_name(name):
        return _field_failure(
            "name", "Name must be 2-50 characters and contain only letters and spaces."
        )

    if not is_valid_department(department):
        return _field_failure("department", "Department must be 2-50 characters.")

    return Response.succeed()


def _field_failure(field: str, detail: str) -> Response:
    return Response.fail(
        detail=detail,
        error=ErrorCode.VALIDATION_FAILED,
        data={"field": field},
    )
