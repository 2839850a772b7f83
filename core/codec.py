# core/codec.py

"""
JSON import/export for the student collection.

The export format is a pretty-printed JSON array of objects with the keys "id", "name", and
"department". `decode_records()` accepts exactly that format and validates every entry before
returning anything, so a failed import never yields a partial list.
"""

import json
from collections.abc import Sequence
from typing import Any

from core.response import ErrorCode, Response
from models.student import Student


def encode_records(records: Sequence[Student]) -> str:
    return json.dumps(
        [record.to_dict() for record in records], indent=2, ensure_ascii=False
    )


def decode_records(payload: str | bytes) -> Response:
    """
    Parses and validates a JSON export back into `Student` records.

    Args:
        payload (str | bytes): The JSON text, or UTF-8 encoded bytes (a leading BOM is ignored).

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the payload is a JSON array of valid, ID-unique records.
                - False otherwise.
            - detail (str | None):
                - On failure, a human-readable description naming the offending record and field.
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.INVALID_FORMAT` if the payload is not UTF-8 JSON or not an array.
                - `ErrorCode.VALIDATION_FAILED` if any entry fails field validation.
                - `ErrorCode.DUPLICATE_ID` if two entries share an ID.
            - status_code (int | None):
                - 200 on success
                - 400 or 409 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "records" (list[Student]): The decoded records, in payload order.
                - On validation failure:
                    - "position" (int): The 1-based position of the offending record.
                    - "field" (str): The name of the invalid field, absent if the entry is not an object.

    Notes:
        - Decoding fails fast: the first bad entry aborts the whole payload.
        - Record positions in error messages are 1-based.
    """
    try:
        if isinstance(payload, bytes):
            payload = payload.decode("utf-8-sig")
        raw_records = json.loads(payload)

    except UnicodeDecodeError as e:
        return Response.fail(
            detail=f"Import data is not valid UTF-8 text: {e}",
            error=ErrorCode.INVALID_FORMAT,
        )

    except json.JSONDecodeError as e:
        return Response.fail(
            detail=f"Failed to parse JSON data: {e}",
            error=ErrorCode.INVALID_FORMAT,
        )

    if not isinstance(raw_records, list):
        return Response.fail(
            detail="Invalid format: expected a JSON array of student records.",
            error=ErrorCode.INVALID_FORMAT,
        )

    records: list[Student] = []
    seen_ids: set[str] = set()

    for position, raw_record in enumerate(raw_records, 1):
        record_response = _decode_record(raw_record)

        if not record_response.success:
            return Response.fail(
                detail=f"Invalid student record #{position}: {record_response.detail}",
                error=record_response.error,
                data={"position": position, **record_response.data},
            )

        record = record_response.data["record"]

        if record.id in seen_ids:
            return Response.fail(
                detail=f"Invalid student record #{position}: Student ID {record.id} appears more than once.",
                error=ErrorCode.DUPLICATE_ID,
                status_code=409,
                data={"position": position, "field": "id"},
            )

        seen_ids.add(record.id)
        records.append(record)

    return Response.succeed(
        data={
            "records": records,
        },
    )


def _decode_record(raw_record: Any) -> Response:
    if not isinstance(raw_record, dict):
        return Response.fail(
            detail="Expected an object with id, name, and department.",
            error=ErrorCode.VALIDATION_FAILED,
        )

    return Student.create(
        raw_record.get("id"),
        raw_record.get("name"),
        raw_record.get("department"),
    )
