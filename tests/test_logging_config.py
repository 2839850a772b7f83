# tests/test_logging_config.py

import json
import logging

from core.logging_config import APP_LOGGERS, configure_logging
from core.persistence import JsonFileStorage


def test_verbose_enables_debug():
    configure_logging(verbose=True, log_json=False)

    for name in APP_LOGGERS:
        assert logging.getLogger(name).level == logging.DEBUG
    assert logging.getLogger().level == logging.WARNING


def test_non_verbose_sets_warning():
    configure_logging(verbose=False, log_json=False)
    assert logging.getLogger("models").level == logging.WARNING


def test_json_mode_output(capfd):
    configure_logging(verbose=True, log_json=True)

    logging.getLogger("core.test").warning("json test")

    captured = capfd.readouterr()
    parsed = json.loads(captured.err.strip())
    assert parsed["event"] == "json test"
    assert parsed["level"] == "warning"
    assert parsed["logger"] == "core.test"
    assert "timestamp" in parsed


def test_storage_failure_is_logged(capfd, tmp_path, sample_student):
    configure_logging(verbose=False, log_json=True)
    target = tmp_path / "student_data.json"
    target.mkdir()

    response = JsonFileStorage(str(target)).save([sample_student])

    assert not response.success
    lines = [line for line in capfd.readouterr().err.splitlines() if line.strip()]
    parsed = json.loads(lines[-1])
    assert parsed["level"] == "warning"
    assert parsed["logger"] == "core.persistence"
    assert "Failed to write data" in parsed["event"]


def test_json_mode_renders_exceptions(capfd):
    configure_logging(verbose=False, log_json=True)

    try:
        raise OSError("disk full")
    except OSError:
        logging.getLogger("core.persistence").exception("save failed")

    lines = [line for line in capfd.readouterr().err.splitlines() if line.strip()]
    parsed = json.loads(lines[-1])
    assert parsed["event"] == "save failed"
    assert parsed["level"] == "error"
    assert "OSError: disk full" in parsed["exception"]


def test_debug_records_hidden_unless_verbose(capfd):
    configure_logging(verbose=False, log_json=True)
    logging.getLogger("models.student_store").debug("hidden")

    assert capfd.readouterr().err.strip() == ""
