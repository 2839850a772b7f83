# models/student.py

"""
Represents a single student record: a numeric student ID, a name, and a department.

Student objects are immutable values. Changing a record means building a new `Student` and
handing it to the store, which replaces the old one in place.

Includes functionality for:
- Building validated records through `Student.create()`
- Serializing to and from JSON-compatible dictionaries
- Value equality, so records survive export/import round-trips
"""

from __future__ import annotations

from typing import Any

import core.validators as validators
from core.response import Response


class Student:

    def __init__(self, id: str, name: str, department: str):
        self._id: str = id
        self._name: str = name
        self._department: str = department

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def department(self) -> str:
        return self._department

    # === public classmethods ===

    @classmethod
    def create(cls, id: Any, name: Any, department: Any) -> Response:
        """
        Validates raw field input and returns a new `Student`.

        Args:
            id (Any): The student ID, 9-12 digits.
            name (Any): The student name; surrounding whitespace is stripped.
            department (Any): The department; surrounding whitespace is stripped.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every field passed validation.
                    - False otherwise.
                - detail (str | None):
                    - On failure, the reason reported by `validators.validate()`.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if a field is invalid.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The new `Student` object.
                    - On failure:
                        - "field" (str): The name of the first invalid field.
        """
        validation_response = validators.validate(id, name, department)

        if not validation_response.success:
            return validation_response

        return Response.succeed(
            data={
                "record": cls(id=id, name=name.strip(), department=department.strip()),
            },
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "department": self._department,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        # trusts its input; untrusted payloads go through core.codec
        return cls(
            id=data["id"],
            name=data["name"],
            department=data["department"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return (self._id, self._name, self._department) == (
            other._id,
            other._name,
            other._department,
        )

    def __hash__(self) -> int:
        return hash((self._id, self._name, self._department))

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._department})"

    def __str__(self) -> str:
        return f"STUDENT: {self._name} - (ID: {self._id}, {self._department})"
