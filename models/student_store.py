# models/student_store.py

"""
The StudentStore is the central data object of the program and the "source of truth" for all student records.

Records are held in an ordered list. Insertion order is kept until a sort replaces it. Student IDs are unique
across the list at all times, and every record in it has passed field validation (see `Student.create()`).

Every successful mutation (add, edit, remove, sort, import) is immediately written through the injected
`PersistencePort`. A failed write never undoes the in-memory change: the operation reports
`ErrorCode.STORAGE_FAILED` and the store is flagged as having unsaved changes.

Provides functions for hydrating from storage, adding, editing, and removing records by position, linear and
binary search, bubble and merge sort, and JSON export and import.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence

import core.codec as codec
import core.search as search
import core.sorting as sorting
from core.persistence import PersistencePort
from core.response import ErrorCode, Response
from models.student import Student

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "student_data.json"


class StudentStore:

    def __init__(self, storage: PersistencePort):
        self._storage = storage
        self._students: list[Student] = []
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    def all_students(self) -> tuple[Student, ...]:
        return self.students

    def __len__(self) -> int:
        return len(self._students)

    # === persistence and import ===

    def hydrate(self) -> Response:
        """
        Replaces the in-memory records with those held by the storage backend.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the saved records were loaded.
                    - False if the backend could not be read or holds invalid data.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.STORAGE_FAILED` if the backend fails.
                - status_code (int | None):
                    - 200 on success
                    - 500 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Student]): The loaded records.

        Notes:
            - On failure the store is left empty and remains usable.
        """
        load_response = self._storage.load()

        if not load_response.success:
            self._students = []
            return load_response

        self._students = list(load_response.data["records"])
        self._unsaved_changes = False

        return Response.succeed(
            detail=f"Loaded {len(self._students)} student records.",
            data=load_response.data,
        )

    def save(self) -> Response:
        save_response = self._storage.save(self._students)

        if not save_response.success:
            self._unsaved_changes = True
            logger.warning("Student data could not be saved: %s", save_response.detail)
            return save_response

        self._unsaved_changes = False

        return save_response

    def _commit(self, detail: str, data: dict | None = None) -> Response:
        """
        Persists the current records after a successful in-memory mutation.

        Returns:
            A success `Response` carrying `detail` and `data`, or a `ErrorCode.STORAGE_FAILED`
            failure carrying the same `data` if the write failed.

        Notes:
            - The in-memory mutation is never rolled back.
        """
        save_response = self.save()

        if not save_response.success:
            return Response.fail(
                detail=f"{detail} However, changes could not be saved: {save_response.detail}",
                error=ErrorCode.STORAGE_FAILED,
                status_code=500,
                data=data,
            )

        return Response.succeed(detail=detail, data=data)

    # === data accessors ===

    def get_student(self, index: int) -> Response:
        if not self._index_in_bounds(index):
            return self._index_failure(index)

        return Response.succeed(
            data={
                "record": self._students[index],
            },
        )

    def linear_search(self, query: str) -> Response:
        """
        Finds every student whose ID or name contains the search query, ignoring case.

        Args:
            query (str): A search key to compare against student IDs and names.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - Always True, even if nothing matched.
                - data (dict): Payload with the following keys:
                    - "records" (list[Student]): Matching students in current order (may be empty).

        Notes:
            - This method is read-only and does not raise.
            - The caller decides what an empty query means; the CLI shows all records instead.
        """
        return Response.succeed(
            data={
                "records": search.linear_search(self._students, query),
            },
        )

    def binary_search(self, student_id: str) -> Response:
        """
        Finds the student with exactly `student_id` by binary search.

        Args:
            student_id (str): The student ID to look for.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a matching student was found.
                    - False if no match was found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no matching record is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "index" (int): The position of the matching student.
                        - "record" (Student): The matching student.

        Notes:
            - Precondition: the records must be sorted ascending by ID (see `bubble_sort()` and `merge_sort()`).
              This is not checked, and results on unsorted records are undefined.
        """
        index = search.binary_search(self._students, student_id)

        if index == search.NOT_FOUND:
            return Response.fail(
                detail=f"No student found with ID '{student_id}' (make sure the records are sorted by ID).",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "index": index,
                "record": self._students[index],
            },
        )

    def is_sorted_by_id(self) -> bool:
        return search.is_sorted_by_id(self._students)

    # === data manipulators ===

    def add_student(self, student: Student) -> Response:
        """
        Appends a `Student` to the end of the records.

        Args:
            student (Student): The student to add, already validated by `Student.create()`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added and saved.
                    - False if the ID is already in use, or if saving failed.
                - detail (str | None):
                    - A human-readable description of the outcome.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_ID` if another student has the same ID.
                    - `ErrorCode.STORAGE_FAILED` if the student was added but could not be saved.
                - status_code (int | None):
                    - 200 on success
                    - 409 on a duplicate ID
                    - 500 if saving failed
                - data (dict | None): Payload with the following keys:
                    - On success or storage failure:
                        - "record" (Student): The added student.
                        - "index" (int): The student's position.

        Notes:
            - This method does not validate fields; validation belongs to `Student.create()`.
        """
        if self._find_index_by_id(student.id) is not None:
            return self._duplicate_failure(student.id)

        self._students.append(student)
        logger.debug("Added student %s", student.id)

        return self._commit(
            detail="Student successfully added.",
            data={
                "record": student,
                "index": len(self._students) - 1,
            },
        )

    def edit_student(self, index: int, student: Student) -> Response:
        """
        Replaces the student at `index` with `student`, keeping its position.

        Args:
            index (int): The position of the student being replaced.
            student (Student): The replacement student, already validated.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was replaced and saved.
                    - False if the index is out of range, the ID is in use by another student, or saving failed.
                - detail (str | None):
                    - A human-readable description of the outcome.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INDEX_OUT_OF_RANGE` if `index` is outside the records.
                    - `ErrorCode.DUPLICATE_ID` if a student at another position has the same ID.
                    - `ErrorCode.STORAGE_FAILED` if the student was replaced but could not be saved.
                - status_code (int | None):
                    - 200 on success
                    - 400 on a bad index
                    - 409 on a duplicate ID
                    - 500 if saving failed
                - data (dict | None): Payload with the following keys:
                    - On success or storage failure:
                        - "record" (Student): The new student.
                        - "previous" (Student): The student that was replaced.

        Notes:
            - A student may keep its own ID; only other positions count as duplicates.
        """
        if not self._index_in_bounds(index):
            return self._index_failure(index)

        existing_index = self._find_index_by_id(student.id)

        if existing_index is not None and existing_index != index:
            return self._duplicate_failure(student.id)

        previous = self._students[index]
        self._students[index] = student
        logger.debug("Edited student at %d (%s -> %s)", index, previous.id, student.id)

        return self._commit(
            detail="Student successfully updated.",
            data={
                "record": student,
                "previous": previous,
            },
        )

    def remove_student(self, index: int) -> Response:
        """
        Removes the student at `index`; later students shift down by one position.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was removed and the change saved.
                    - False if the index is out of range, or saving failed.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INDEX_OUT_OF_RANGE` if `index` is outside the records.
                    - `ErrorCode.STORAGE_FAILED` if the student was removed but the change could not be saved.
                - data (dict | None): Payload with the following keys:
                    - On success or storage failure:
                        - "record" (Student): The removed student.
        """
        if not self._index_in_bounds(index):
            return self._index_failure(index)

        removed = self._students.pop(index)
        logger.debug("Removed student %s from %d", removed.id, index)

        return self._commit(
            detail="Student successfully removed.",
            data={
                "record": removed,
            },
        )

    # --- sorting ---

    def bubble_sort(self) -> Response:
        return self._apply_sort(sorting.bubble_sort, "Bubble Sort")

    def merge_sort(self) -> Response:
        return self._apply_sort(sorting.merge_sort, "Merge Sort")

    def _apply_sort(
        self,
        sort_fn: Callable[[Sequence[Student]], list[Student]],
        label: str,
    ) -> Response:
        try:
            sorted_students = sort_fn(self._students)

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        self._students = sorted_students
        logger.debug("Sorted %d students by ID (%s)", len(sorted_students), label)

        return self._commit(detail=f"Students sorted by ID ({label}).")

    # --- import and export ---

    def export_json(self) -> Response:
        return Response.succeed(
            data={
                "text": codec.encode_records(self._students),
            },
        )

    def import_json(self, payload: str | bytes) -> Response:
        """
        Replaces all records with those decoded from a JSON export.

        Args:
            payload (str | bytes): A JSON array of student objects, as produced by `export_json()`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every record was valid and the import was saved.
                    - False if the payload was rejected, or saving failed.
                - detail (str | None):
                    - A human-readable description of the outcome, naming the offending record on rejection.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_FORMAT` if the payload is not a JSON array.
                    - `ErrorCode.VALIDATION_FAILED` if any record has an invalid field.
                    - `ErrorCode.DUPLICATE_ID` if the payload repeats an ID.
                    - `ErrorCode.STORAGE_FAILED` if the import was applied but could not be saved.
                - data (dict | None): Payload with the following keys:
                    - On success or storage failure:
                        - "records" (list[Student]): The imported records.

        Notes:
            - The import is atomic: on rejection the existing records are left completely unchanged.
        """
        decode_response = codec.decode_records(payload)

        if not decode_response.success:
            return Response.fail(
                detail=f"Import failed: {decode_response.detail}",
                error=decode_response.error,
                status_code=decode_response.status_code,
                data=decode_response.data,
            )

        self._students = list(decode_response.data["records"])
        logger.debug("Imported %d students", len(self._students))

        return self._commit(
            detail=f"Successfully imported {len(self._students)} students.",
            data=decode_response.data,
        )

    def export_to_file(self, path: str) -> Response:
        """
        Writes the JSON export to `path`. If `path` is a directory, `EXPORT_FILENAME` is used inside it.
        """
        if os.path.isdir(path):
            path = os.path.join(path, EXPORT_FILENAME)

        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(codec.encode_records(self._students))

        except OSError as e:
            return Response.fail(
                detail=f"Failed to write file: {e}",
                error=ErrorCode.STORAGE_FAILED,
                status_code=500,
            )

        return Response.succeed(
            detail=f"Exported {len(self._students)} students to {path}.",
            data={"path": path},
        )

    def import_from_file(self, path: str) -> Response:
        try:
            with open(path, "rb") as f:
                payload = f.read()

        except OSError as e:
            return Response.fail(
                detail=f"Failed to read file: {e}",
                error=ErrorCode.STORAGE_FAILED,
                status_code=500,
            )

        return self.import_json(payload)

    # === helpers ===

    def _index_in_bounds(self, index: int) -> bool:
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < len(self._students)

    def _find_index_by_id(self, student_id: str) -> int | None:
        for i, student in enumerate(self._students):
            if student.id == student_id:
                return i
        return None

    def _index_failure(self, index: int) -> Response:
        return Response.fail(
            detail=f"Invalid index: {index} (there are {len(self._students)} students).",
            error=ErrorCode.INDEX_OUT_OF_RANGE,
        )

    def _duplicate_failure(self, student_id: str) -> Response:
        return Response.fail(
            detail=f"Student ID {student_id} is already registered to another student.",
            error=ErrorCode.DUPLICATE_ID,
            status_code=409,
        )
