# cli/path_utils.py

import os

STORAGE_FILENAME = "student_data.json"


def get_default_data_path() -> str:
    """
    Returns the default storage file: `~/Documents/StudentRecords/student_data.json`.
    """
    documents = os.path.join(os.path.expanduser("~"), "Documents")
    return os.path.join(documents, "StudentRecords", STORAGE_FILENAME)


def resolve_data_path(user_input: str | None) -> str:
    """
    Produces an absolute storage file path for the student records.

    Args:
        user_input (str | None): An optional user-specified path. If None or blank, the default path is used.
            A path to an existing directory resolves to `STORAGE_FILENAME` inside it.

    Returns:
        A fully resolved file path whose parent directory exists.

    Notes:
        - Expands `~` and relative paths.
        - Creates the parent directory on disk (including parent directories) if it does not exist.
    """
    if user_input is None or not user_input.strip():
        data_path = get_default_data_path()
    else:
        data_path = os.path.abspath(os.path.expanduser(user_input.strip()))

    if os.path.isdir(data_path):
        data_path = os.path.join(data_path, STORAGE_FILENAME)

    os.makedirs(os.path.dirname(data_path), exist_ok=True)

    return data_path


def resolve_user_path(user_input: str) -> str:
    return os.path.abspath(os.path.expanduser(user_input.strip()))
