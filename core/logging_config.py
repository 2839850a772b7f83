# core/logging_config.py

"""
Log output for the student records manager.

Every module logs through the standard library (`logging.getLogger(__name__)`). This module
only decides how those records leave the process: one stderr handler whose structlog
`ProcessorFormatter` renders them either as console lines (default) or as JSON lines
(`--log-json`).

The menu talks to the user through `print()`, so the app loggers stay at WARNING unless
`--verbose` is given; storage faults are the only thing worth surfacing by default.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGERS = ("cli", "core", "models")


def _build_formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        pre_chain.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """
    Routes the app loggers to stderr.

    Args:
        verbose: Show DEBUG records from the app loggers. When False, only WARNING and above.
        log_json: Render one JSON object per line instead of console text.

    Notes:
        - Replaces any handlers already on the root logger, so calling this twice is safe.
        - Third-party loggers stay at WARNING regardless of `verbose`.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(log_json))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    app_level = logging.DEBUG if verbose else logging.WARNING
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(app_level)
