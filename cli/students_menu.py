# cli/students_menu.py

"""
Manage Students menu: the interactive front end for a `StudentStore`.

Every action collects trimmed input, calls a single store operation, prints the resulting
`Response` verbatim, and redraws the student table after each successful change.
"""

from typing import cast

import cli.formatters as formatters
import cli.menu_helpers as helpers
from cli.menu_helpers import MenuSignal
from cli.path_utils import resolve_user_path
from core.formatters import format_banner_text
from core.response import ErrorCode, Response
from models.student import Student
from models.student_store import EXPORT_FILENAME, StudentStore


def run(store: StudentStore) -> None:
    title = format_banner_text("Manage Students")
    options = [
        ("Add Student", add_student),
        ("Edit Student", edit_student),
        ("Remove Student", remove_student),
        ("View Students", view_students),
        ("Search by ID or Name (Linear Search)", linear_search),
        ("Find by Student ID (Binary Search)", binary_search),
        ("Sort by Student ID (Bubble Sort)", bubble_sort),
        ("Sort by Student ID (Merge Sort)", merge_sort),
        ("Export Students to File", export_students),
        ("Import Students from File", import_students),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            helpers.prompt_if_dirty(store)
            return None

        if callable(menu_response):
            menu_response(store)


def show_result(response: Response, store: StudentStore) -> None:
    helpers.display_response(response)

    # storage failures still leave the in-memory change applied
    if response.success or response.error is ErrorCode.STORAGE_FAILED:
        helpers.display_student_table(store.students)


# === add student ===


def add_student(store: StudentStore) -> None:
    new_student = prompt_student_fields()

    if new_student is None:
        helpers.returning_without_changes()
        return None

    show_result(store.add_student(new_student), store)


def prompt_student_fields(current: Student | None = None) -> Student | None:
    """
    Collects ID, name, and department and builds a validated `Student`.

    Args:
        current (Student | None): When editing, the record whose values are offered as defaults.

    Returns:
        Student: The new record, if every field is valid and the user confirms.
        None: If the user cancels or validation fails.

    Notes:
        - When editing, a blank entry keeps the current value; otherwise a blank entry cancels.
        - Validation is delegated to `Student.create()`, and its failure detail is printed verbatim.
    """
    values: list[str] = []

    for label, attr in (
        ("student ID (9-12 digits)", "id"),
        ("name", "name"),
        ("department", "department"),
    ):
        if current is None:
            value = helpers.prompt_user_input_or_cancel(
                f"Enter {label} (leave blank to cancel):"
            )
            if value is MenuSignal.CANCEL:
                return None
        else:
            existing = getattr(current, attr)
            value = helpers.prompt_user_input_or_none(
                f"Enter {label} (leave blank to keep '{existing}'):"
            )
            if value is None:
                value = existing

        values.append(cast(str, value))

    create_response = Student.create(*values)

    if not create_response.success:
        helpers.display_response_failure(create_response)
        return None

    student = create_response.data["record"]

    print("\nYou are about to save the following student:")
    print(formatters.format_student_multiline(student))

    if not helpers.confirm_action("\nConfirm?"):
        return None

    return student


# === edit student ===


def edit_student(store: StudentStore) -> None:
    index = helpers.prompt_student_index(store, "edit")

    if index is None:
        helpers.returning_without_changes()
        return None

    current = store.get_student(index).data["record"]
    updated_student = prompt_student_fields(current)

    if updated_student is None:
        helpers.returning_without_changes()
        return None

    show_result(store.edit_student(index, updated_student), store)


# === remove student ===


def remove_student(store: StudentStore) -> None:
    index = helpers.prompt_student_index(store, "remove")

    if index is None:
        helpers.returning_without_changes()
        return None

    student = store.get_student(index).data["record"]

    helpers.caution_banner()
    print("You are about to remove the following student:")
    print(formatters.format_student_multiline(student))

    if not helpers.confirm_action("\nRemove this student?"):
        helpers.returning_without_changes()
        return None

    show_result(store.remove_student(index), store)


# === view and search ===


def view_students(store: StudentStore) -> None:
    helpers.display_student_table(store.students)


def linear_search(store: StudentStore) -> None:
    query = helpers.prompt_user_input("Enter part of a student ID or name:")

    if not query:
        view_students(store)
        return None

    search_response = store.linear_search(query)
    results = search_response.data["records"]

    if not results:
        print("\nYour search returned no results.")
        return None

    helpers.display_student_table(results, show_index=False)


def binary_search(store: StudentStore) -> None:
    student_id = helpers.prompt_user_input("Enter the exact student ID:")

    if not student_id:
        print("\nEnter a student ID to use binary search.")
        return None

    if not store.is_sorted_by_id():
        print("\nNote: records are not sorted by ID; binary search may miss matches.")

    search_response = store.binary_search(student_id)

    if not search_response.success:
        helpers.display_response_failure(search_response)
        return None

    helpers.display_student_table([search_response.data["record"]], show_index=False)


# === sorting ===


def bubble_sort(store: StudentStore) -> None:
    show_result(store.bubble_sort(), store)


def merge_sort(store: StudentStore) -> None:
    show_result(store.merge_sort(), store)


# === import and export ===


def export_students(store: StudentStore) -> None:
    path_input = helpers.prompt_user_input_or_cancel(
        f"Enter a file or directory to export to (e.g. ./{EXPORT_FILENAME}, leave blank to cancel):"
    )

    if path_input is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return None

    helpers.display_response(
        store.export_to_file(resolve_user_path(cast(str, path_input)))
    )


def import_students(store: StudentStore) -> None:
    path_input = helpers.prompt_user_input_or_cancel(
        "Enter the file to import (leave blank to cancel):"
    )

    if path_input is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return None

    helpers.caution_banner()
    print("Importing replaces every current student record.")

    if not helpers.confirm_action("\nContinue with import?"):
        helpers.returning_without_changes()
        return None

    show_result(store.import_from_file(resolve_user_path(cast(str, path_input))), store)
