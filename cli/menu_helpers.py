# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the student records manager.

This module provides utilities for:
- Displaying interactive menus and record tables
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import cli.formatters as formatters
import core.formatters as core_formatters
from core.response import Response
from models.student import Student
from models.student_store import StudentStore


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            choice_index = int(choice) - 1
            if choice_index < 0:
                raise IndexError(choice)
            # adjusts for zero-index, retrieves action from tuple
            return options[choice_index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>3}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_student_table(students: Iterable[Student], show_index: bool = True) -> None:
    students = list(students)

    if not students:
        print("\nThere are no students to display.")
        return

    prefix = "     " if show_index else ""
    print(f"\n{prefix}{formatters.format_table_header()}")
    display_results(students, show_index, formatters.format_student_oneline)


# === confirm and prompt methods ===


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n):").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_unsaved_changes() -> bool:
    return confirm_action(
        "Some changes to the student records were not saved. Do you want to try saving again?"
    )


def prompt_if_dirty(store: StudentStore) -> None:
    if store.has_unsaved_changes and confirm_unsaved_changes():
        save_response = store.save()

        if not save_response.success:
            display_response_failure(save_response)
        else:
            print(f"\n{save_response.detail}")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


# === selection methods ===


def prompt_student_index(store: StudentStore, action: str) -> int | None:
    """
    Displays all students and prompts the user to pick one by its displayed number.

    Args:
        store (StudentStore): The active store.
        action (str): A short verb used in the prompt (e.g. "edit", "remove").

    Returns:
        int: The zero-based position of the chosen student.
        None: If there are no students or the user cancels with "0".

    Notes:
        - Selection is repeated until a valid number is entered or the user cancels.
    """
    if len(store) == 0:
        print("\nThere are no students.")
        return None

    display_student_table(store.students)

    while True:
        choice = prompt_user_input(f"Select a student to {action} (0 to cancel):")

        if choice == "0":
            return None

        try:
            index = int(choice) - 1
            if not 0 <= index < len(store):
                raise IndexError(choice)
            return index

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


# === system messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def caution_banner() -> None:
    caution_banner = core_formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


def display_response(response: Response) -> None:
    if response.success:
        if response.detail:
            print(f"\n{response.detail}")
    else:
        display_response_failure(response)
