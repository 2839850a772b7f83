# tests/test_sorting.py

import random

from core.sorting import bubble_sort, merge_sort
from models.student import Student

SAMPLE_IDS = [
    "300000003",
    "100000001",
    "99999999",
    "1000000000",
    "200000002",
    "123456789012",
    "100000001",
]


def make_students(ids):
    # names encode input position so stability can be checked
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    return [
        Student(student_id, f"Student {letters[i % 26]}", "Dept")
        for i, student_id in enumerate(ids)
    ]


def test_bubble_sort_orders_ids_as_strings():
    result = bubble_sort(make_students(SAMPLE_IDS))
    assert [s.id for s in result] == sorted(SAMPLE_IDS)


def test_merge_sort_orders_ids_as_strings():
    result = merge_sort(make_students(SAMPLE_IDS))
    assert [s.id for s in result] == sorted(SAMPLE_IDS)


def test_sorts_do_not_mutate_input():
    students = make_students(SAMPLE_IDS)
    original = list(students)

    bubble_sort(students)
    merge_sort(students)

    assert students == original


def test_bubble_and_merge_sort_produce_identical_order():
    rng = random.Random(1987)

    for size in (0, 1, 2, 5, 17, 64):
        ids = [str(rng.randint(100000000, 100000020)) for _ in range(size)]
        students = make_students(ids)

        assert bubble_sort(students) == merge_sort(students)


def test_merge_sort_is_stable():
    students = [
        Student("200000002", "First Twin", "Dept"),
        Student("100000001", "Only One", "Dept"),
        Student("200000002", "Second Twin", "Dept"),
        Student("200000002", "Third Twin", "Dept"),
    ]

    result = merge_sort(students)

    assert [s.name for s in result] == [
        "Only One",
        "First Twin",
        "Second Twin",
        "Third Twin",
    ]


def test_bubble_sort_is_stable():
    students = [
        Student("200000002", "First Twin", "Dept"),
        Student("100000001", "Only One", "Dept"),
        Student("200000002", "Second Twin", "Dept"),
    ]

    assert [s.name for s in bubble_sort(students)] == [
        "Only One",
        "First Twin",
        "Second Twin",
    ]
