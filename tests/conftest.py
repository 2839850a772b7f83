# tests/conftest.py

import logging

import pytest

from core.logging_config import APP_LOGGERS
from core.persistence import InMemoryStorage
from core.response import ErrorCode, Response
from models.student import Student
from models.student_store import StudentStore


class FailingStorage:
    """Storage double whose reads and writes always fail, like a full or unavailable backend."""

    def __init__(self):
        self.save_calls = 0

    def load(self) -> Response:
        return Response.fail(
            detail="Failed to read saved data: storage unavailable",
            error=ErrorCode.STORAGE_FAILED,
            status_code=500,
        )

    def save(self, records) -> Response:
        self.save_calls += 1
        return Response.fail(
            detail="Failed to write data to disk: quota exceeded",
            error=ErrorCode.STORAGE_FAILED,
            status_code=500,
        )


@pytest.fixture
def sample_student():
    return Student("123456789", "Maria Lopez", "Computer Science")


@pytest.fixture
def second_student():
    return Student("987654321", "Martin Green", "Physics")


@pytest.fixture
def third_student():
    return Student("900112233", "Ada Byron", "Mathematics")


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def failing_storage():
    return FailingStorage()


@pytest.fixture
def sample_store(memory_storage):
    return StudentStore(memory_storage)


@pytest.fixture
def populated_store(sample_store, sample_student, second_student, third_student):
    for student in (sample_student, second_student, third_student):
        sample_store.add_student(student)
    return sample_store


@pytest.fixture
def failing_store(failing_storage):
    return StudentStore(failing_storage)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Restore root and app logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_levels = {name: logging.getLogger(name).level for name in APP_LOGGERS}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in app_levels.items():
        logging.getLogger(name).setLevel(level)
