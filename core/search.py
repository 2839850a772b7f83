# core/search.py

"""
Stateless search routines over a sequence of `Student` records.
"""

from collections.abc import Sequence

from models.student import Student

NOT_FOUND = -1


def linear_search(records: Sequence[Student], query: str) -> list[Student]:
    """
    Returns every record whose ID or name contains the query, ignoring case.

    Args:
        records (Sequence[Student]): The records to scan.
        query (str): The substring to look for.

    Returns:
        The matching records, in their original order. May be empty.

    Notes:
        - Runs in O(n).
        - An empty query matches everything; callers that mean "show all" can skip the call.
    """
    query = query.lower()

    return [
        record
        for record in records
        if query in record.id.lower() or query in record.name.lower()
    ]


def binary_search(records: Sequence[Student], student_id: str) -> int:
    """
    Finds the index of the record with exactly `student_id`.

    Args:
        records (Sequence[Student]): Records sorted ascending by ID.
        student_id (str): The ID to look for.

    Returns:
        The index of the matching record, or `NOT_FOUND` (-1).

    Notes:
        - Precondition: `records` must already be sorted ascending by ID using plain string
          comparison. This is not checked; on unsorted input the result is undefined and may be
          a wrong index or a false `NOT_FOUND`.
        - IDs compare lexicographically, so "100000000" sorts before "99999999".
        - Runs in O(log n).
    """
    low, high = 0, len(records) - 1

    while low <= high:
        mid = (low + high) // 2
        mid_id = records[mid].id

        if mid_id == student_id:
            return mid

        if mid_id < student_id:
            low = mid + 1
        else:
            high = mid - 1

    return NOT_FOUND


def is_sorted_by_id(records: Sequence[Student]) -> bool:
    return all(records[i].id <= records[i + 1].id for i in range(len(records) - 1))
