import re

import pytest

from vecmath.math_utils import (
    clamp,
    generate_uuid,
    hash_code,
    is_clockwise,
    is_clockwise_ring,
    merge_sort,
    smoothstep,
)

UUID4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


@pytest.mark.parametrize("num, expected", [(5, 5), (-5, 1), (15, 10), (1, 1), (10, 10)])
def test_clamp(num, expected):
    assert clamp(num, 1, 10) == expected


def test_clamp_collapsed_range():
    assert clamp(0, 5, 5) == 5


def test_hash_code_is_deterministic():
    assert hash_code("test") == hash_code("test")
    assert hash_code("test") != hash_code("different")
    assert hash_code("test", 123) != hash_code("test", 456)


def test_hash_code_known_value():
    # matches cyrb53 as computed in a browser
    assert hash_code("test") == 8713769735217609


def test_hash_code_fits_in_53_bits():
    for text in ("", "!@#$%^&*()", "héllo wörld", "\U0001F600"):
        value = hash_code(text)
        assert 0 <= value < 2 ** 53


def test_generate_uuid():
    first, second = generate_uuid(), generate_uuid()
    assert UUID4.match(first)
    assert first != second


def test_smoothstep():
    assert smoothstep(-5, 0, 10) == 0
    assert smoothstep(0, 0, 10) == 0
    assert smoothstep(10, 0, 10) == 1
    assert smoothstep(15, 0, 10) == 1
    assert smoothstep(5, 0, 10) == pytest.approx(0.5)
    assert smoothstep(2.5, 0, 10) == pytest.approx(0.15625)


def test_merge_sort():
    numbers = [5, 2, 9, 1, 7, 6, 3]
    merge_sort(numbers, lambda a, b: a - b)
    assert numbers == [1, 2, 3, 5, 6, 7, 9]

    merge_sort(numbers, lambda a, b: b - a)
    assert numbers == [9, 7, 6, 5, 3, 2, 1]

    empty = []
    merge_sort(empty, lambda a, b: a - b)
    assert empty == []


def test_merge_sort_is_stable():
    items = [("b", 1), ("a", 0), ("c", 1), ("d", 0)]
    merge_sort(items, lambda a, b: a[1] - b[1])
    assert [name for name, _ in items] == ["a", "d", "b", "c"]


def test_is_clockwise():
    assert is_clockwise([0, 0], [0, 1], [1, 1])
    assert not is_clockwise([0, 0], [1, 0], [1, 1])
    # collinear
    assert not is_clockwise([0, 0], [1, 0], [2, 0])


def test_is_clockwise_ring():
    assert not is_clockwise_ring([[0, 0], [1, 0], [1, 1], [0, 1]])
    assert is_clockwise_ring([[0, 0], [0, 1], [1, 1], [1, 0]])
    assert is_clockwise_ring([[0, 0], [0.5, 1], [1, 0]])
