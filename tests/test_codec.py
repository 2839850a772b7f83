# tests/test_codec.py

import json

from core.codec import decode_records, encode_records
from core.response import ErrorCode
from models.student import Student


def test_encode_records_uses_expected_keys(sample_student):
    data = json.loads(encode_records([sample_student]))
    assert data == [
        {"id": "123456789", "name": "Maria Lopez", "department": "Computer Science"}
    ]


def test_encode_empty_collection():
    assert encode_records([]) == "[]"


def test_round_trip(sample_student, second_student, third_student):
    records = [second_student, sample_student, third_student]

    response = decode_records(encode_records(records))

    assert response.success
    assert response.data["records"] == records


def test_round_trip_keeps_non_ascii_departments():
    records = [Student("123456789", "Jose Nunez", "Ingeniería Civil")]
    text = encode_records(records)

    assert "Ingeniería" in text
    assert decode_records(text.encode("utf-8")).data["records"] == records


def test_decode_rejects_invalid_json():
    response = decode_records("[{")
    assert response.error is ErrorCode.INVALID_FORMAT
    assert "Failed to parse JSON" in response.detail


def test_decode_rejects_non_utf8_bytes():
    response = decode_records(b"\xff\xfe[]")
    assert response.error is ErrorCode.INVALID_FORMAT


def test_decode_accepts_utf8_bom():
    payload = json.dumps([{"id": "123456789", "name": "Ann Lee", "department": "Art"}])

    response = decode_records(b"\xef\xbb\xbf" + payload.encode("utf-8"))

    assert response.success
    assert response.data["records"] == [Student("123456789", "Ann Lee", "Art")]


def test_decode_rejects_non_array():
    for payload in ('{"students": []}', '"text"', "42", "null"):
        response = decode_records(payload)
        assert not response.success
        assert response.error is ErrorCode.INVALID_FORMAT


def test_decode_reports_offending_record_and_field():
    payload = json.dumps(
        [
            {"id": "123456789", "name": "Good Name", "department": "Art"},
            {"id": "223456789", "name": "Bad Name 2", "department": "Art"},
        ]
    )

    response = decode_records(payload)

    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.data == {"position": 2, "field": "name"}
    assert "#2" in response.detail
    assert "records" not in response.data


def test_decode_rejects_missing_fields():
    response = decode_records(json.dumps([{"id": "123456789", "name": "No Department"}]))

    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.data["field"] == "department"


def test_decode_rejects_non_string_ids():
    response = decode_records(
        json.dumps([{"id": 123456789, "name": "Numeric Id", "department": "Art"}])
    )

    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.data["field"] == "id"


def test_decode_rejects_non_object_entries():
    response = decode_records(json.dumps(["123456789"]))

    assert response.error is ErrorCode.VALIDATION_FAILED
    assert response.data == {"position": 1}


def test_decode_rejects_duplicate_ids():
    payload = json.dumps(
        [
            {"id": "123456789", "name": "First", "department": "Art"},
            {"id": "123456789", "name": "Second", "department": "Art"},
        ]
    )

    response = decode_records(payload)

    assert response.error is ErrorCode.DUPLICATE_ID
    assert response.data["position"] == 2


def test_decode_trims_names():
    payload = json.dumps([{"id": "123456789", "name": " Padded ", "department": " Art "}])

    record = decode_records(payload).data["records"][0]

    assert record == Student("123456789", "Padded", "Art")
