# cli/main.py

"""
Entry point for the Student Records CLI.

Resolves the storage file, wires a `StudentStore` to its storage backend, hydrates it, and hands it
to the Manage Students menu.
"""

import logging

import click

import cli.menu_helpers as helpers
import cli.students_menu as students_menu
import core.formatters as formatters
from cli.path_utils import resolve_data_path
from core.logging_config import configure_logging
from core.persistence import JsonFileStorage
from models.student_store import StudentStore

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--data",
    "data_path",
    default=None,
    envvar="STUDENT_RECORDS_DATA",
    help="Storage file or directory (default: ~/Documents/StudentRecords/student_data.json).",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    envvar="STUDENT_RECORDS_VERBOSE",
    help="Detailed output with debug info.",
)
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def run_cli(data_path: str | None, verbose: bool, log_json: bool) -> None:
    """Student Records Manager: add, edit, search, sort, export, and import students."""
    configure_logging(verbose=verbose, log_json=log_json)

    store = open_store(resolve_data_path(data_path))

    title = formatters.format_banner_text("STUDENT RECORDS MANAGER")
    print(f"\n{title}")

    students_menu.run(store)

    exit_program()


def open_store(data_path: str) -> StudentStore:
    """
    Builds a `StudentStore` backed by `data_path` and loads any saved records.

    Returns:
        StudentStore: The hydrated store, or an empty store if the saved data could not be loaded.

    Notes:
        - A load failure is reported to the user but does not stop the program.
    """
    store = StudentStore(JsonFileStorage(data_path))

    print(f"\nLoading student records from {data_path} ...")

    hydrate_response = store.hydrate()

    if not hydrate_response.success:
        helpers.display_response_failure(hydrate_response)
        print("... Starting with an empty list of students.")
    else:
        print(f"... {formatters.format_count(len(store), 'student')} loaded.")

    logger.debug("Store opened at %s", data_path)

    return store


def exit_program() -> None:
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
