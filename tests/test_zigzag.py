import pytest

from kata_toolkit.core.errors import InputValidationError
from kata_toolkit.core.matrix.zigzag import zigzag_matrix


def test_zigzag_small_sizes():
    assert zigzag_matrix(0) == []
    assert zigzag_matrix(1) == [[0]]
    assert zigzag_matrix(2) == [[0, 1], [2, 3]]
    assert zigzag_matrix(3) == [[0, 1, 5], [2, 4, 6], [3, 7, 8]]


def test_zigzag_four():
    assert zigzag_matrix(4) == [
        [0, 1, 5, 6],
        [2, 4, 7, 12],
        [3, 8, 11, 13],
        [9, 10, 14, 15],
    ]


def test_zigzag_holds_each_number_once():
    flat = sorted(v for row in zigzag_matrix(7) for v in row)
    assert flat == list(range(49))


def test_zigzag_negative_size():
    with pytest.raises(InputValidationError) as exc:
        zigzag_matrix(-1)
    assert exc.value.code == "E_NEGATIVE_SIZE"
