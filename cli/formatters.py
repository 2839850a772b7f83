# cli/formatters.py

from textwrap import dedent

from models.student import Student

ID_WIDTH = 12
NAME_WIDTH = 24


# === Student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"{student.id:<{ID_WIDTH}} | {student.name:<{NAME_WIDTH}} | {student.department}"


def format_student_multiline(student: Student) -> str:
    return dedent(
        f"""\
        ... Student ID: {student.id}
        ... Name: {student.name}
        ... Department: {student.department}"""
    )


def format_table_header() -> str:
    header = f"{'ID':<{ID_WIDTH}} | {'Name':<{NAME_WIDTH}} | Department"
    return f"{header}\n{'-' * len(header)}"
