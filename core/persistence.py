# core/persistence.py

"""
Load/save boundary for the student collection.

The whole collection is kept as a single serialized blob (the JSON produced by
`core.codec.encode_records()`). Any backend that can hold one blob satisfies
`PersistencePort`: a named file on disk, or an in-process slot for tests and embedding.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from typing import Protocol

import core.codec as codec
from core.response import ErrorCode, Response
from models.student import Student

logger = logging.getLogger(__name__)


class PersistencePort(Protocol):
    def load(self) -> Response:
        """Returns a `Response` with "records" on success, `ErrorCode.STORAGE_FAILED` otherwise."""
        ...

    def save(self, records: Sequence[Student]) -> Response:
        """Returns a success `Response`, or `ErrorCode.STORAGE_FAILED`."""
        ...


def _decode_blob(blob: str, source: str) -> Response:
    decode_response = codec.decode_records(blob)

    if not decode_response.success:
        return Response.fail(
            detail=f"Failed to load saved data from {source}: {decode_response.detail}",
            error=ErrorCode.STORAGE_FAILED,
            status_code=500,
        )

    return decode_response


class JsonFileStorage:
    """
    Keeps the collection in one JSON file.

    A missing file is treated as an empty collection, so the first run starts clean.
    """

    def __init__(self, path: str):
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def load(self) -> Response:
        if not os.path.exists(self._path):
            logger.debug("No saved data at %s, starting empty", self._path)
            return Response.succeed(data={"records": []})

        try:
            with open(self._path, "r", encoding="utf-8-sig") as f:
                blob = f.read()

        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read saved data from %s: %s", self._path, e)
            return Response.fail(
                detail=f"Failed to read saved data: {e}",
                error=ErrorCode.STORAGE_FAILED,
                status_code=500,
            )

        load_response = _decode_blob(blob, self._path)

        if not load_response.success:
            logger.warning(load_response.detail)
        else:
            logger.debug(
                "Loaded %d records from %s",
                len(load_response.data["records"]),
                self._path,
            )

        return load_response

    def save(self, records: Sequence[Student]) -> Response:
        """
        Serializes `records` and overwrites the storage file.

        Notes:
            - Parent directories are created if they do not exist.
        """
        try:
            blob = codec.encode_records(records)

            parent = os.path.dirname(self._path)
            if parent:
                os.makedirs(parent, exist_ok=True)

            with open(self._path, "w", encoding="utf-8") as f:
                f.write(blob)

        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to write data to %s: %s", self._path, e)
            return Response.fail(
                detail=f"Failed to write data to disk: {e}",
                error=ErrorCode.STORAGE_FAILED,
                status_code=500,
            )

        logger.debug("Saved %d records to %s", len(records), self._path)

        return Response.succeed(detail="Student data successfully saved to disk.")


class InMemoryStorage:
    """
    Keeps the serialized collection in a single in-process text slot.
    """

    def __init__(self, blob: str | None = None):
        self._blob = blob

    @property
    def blob(self) -> str | None:
        return self._blob

    def load(self) -> Response:
        if self._blob is None:
            return Response.succeed(data={"records": []})

        load_response = _decode_blob(self._blob, "memory")

        if not load_response.success:
            logger.warning(load_response.detail)

        return load_response

    def save(self, records: Sequence[Student]) -> Response:
        self._blob = codec.encode_records(records)
        return Response.succeed(detail="Student data successfully saved to memory.")
