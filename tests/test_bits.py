import pytest

from mmrkit.bits import (
    all_ones,
    bit_length,
    height_index_size,
    height_max_index,
    height_size,
    is_pow2,
    log2_uint32,
    log2_uint64,
)

LOG2_CASES = [
    (1, 0),
    (2, 1),
    (3, 1),
    (4, 2),
    (8, 3),
    (16, 4),
    (17, 4),
    (18, 4),
    (19, 4),
    (32, 5),
]


@pytest.mark.parametrize("num, want", LOG2_CASES)
def test_log2_uint64(num, want):
    assert log2_uint64(num) == want


@pytest.mark.parametrize("num, want", LOG2_CASES)
def test_log2_uint32(num, want):
    assert log2_uint32(num) == want


def test_log2_of_zero_raises():
    with pytest.raises(ValueError):
        log2_uint64(0)
    with pytest.raises(ValueError):
        log2_uint32(0)


def test_log2_uint32_rejects_wide_values():
    with pytest.raises(ValueError):
        log2_uint32(1 << 32)


@pytest.mark.parametrize(
    "num, want",
    [(13, 4), (2**64 - 1, 64), (1, 1), (2, 2), (3, 2)],
)
def test_bit_length(num, want):
    assert bit_length(num) == want


@pytest.mark.parametrize(
    "num, want",
    [(0, True), (1, True), (3, True), (7, True), (15, True), (2, False), (5, False), (6, False), (14, False)],
)
def test_all_ones(num, want):
    assert all_ones(num) is want


@pytest.mark.parametrize(
    "size, want",
    [(16, True), (0, False), (1, True), (17, False), (18, False)],
)
def test_is_pow2(size, want):
    assert is_pow2(size) is want


@pytest.mark.parametrize("height_index, want", [(0, 1), (1, 3), (2, 7), (3, 15)])
def test_height_index_size(height_index, want):
    assert height_index_size(height_index) == want


@pytest.mark.parametrize("height_index, want", [(0, 0), (1, 2), (2, 6), (3, 14)])
def test_height_max_index(height_index, want):
    assert height_max_index(height_index) == want


@pytest.mark.parametrize("height, want", [(1, 1), (2, 3), (3, 7), (4, 15)])
def test_height_size(height, want):
    assert height_size(height) == want