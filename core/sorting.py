# core/sorting.py

"""
Stable ascending sorts of `Student` records by ID.

IDs are compared as plain strings. Both sorts return a new list and leave the input untouched,
and both produce the same order for the same input.
"""

from collections.abc import Sequence

from models.student import Student


def bubble_sort(records: Sequence[Student]) -> list[Student]:
    """
    Sorts a copy of `records` by ID with bubble sort, O(n^2).

    Only strictly greater neighbours are swapped, so records with equal IDs keep their order.
    """
    result = list(records)
    n = len(result)

    for i in range(n - 1):
        for j in range(n - i - 1):
            if result[j].id > result[j + 1].id:
                result[j], result[j + 1] = result[j + 1], result[j]

    return result


def merge_sort(records: Sequence[Student]) -> list[Student]:
    """
    Sorts a copy of `records` by ID with top-down merge sort, O(n log n).
    """
    if len(records) <= 1:
        return list(records)

    mid = len(records) // 2
    left = merge_sort(records[:mid])
    right = merge_sort(records[mid:])

    return _merge(left, right)


def _merge(left: list[Student], right: list[Student]) -> list[Student]:
    result: list[Student] = []
    i = j = 0

    while i < len(left) and j < len(right):
        # ties take from the left run to keep the sort stable
        if left[i].id <= right[j].id:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    result.extend(left[i:])
    result.extend(right[j:])

    return result
