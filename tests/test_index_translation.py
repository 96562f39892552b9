import itertools

import pytest

from src.common.tensors.errors import DimMismatchError, IndexOutOfRangeError
from src.common.tensors.index import (
    coordinate_to_flat,
    expand_strides,
    flat_to_coordinate,
    invert_axes,
    transpose_index,
    untranspose_index,
)
from src.common.tensors.shape import Shape


def test_round_trip_default_strides(shape):
    strides = Shape(shape).calc_strides()
    for coord in itertools.product(*(range(n) for n in shape)):
        offset = coordinate_to_flat(shape, strides, coord)
        assert flat_to_coordinate(offset, shape, strides) == coord


def test_round_trip_permuted_strides():
    shape, strides = (4, 2, 3), (1, 12, 4)
    seen = set()
    for coord in itertools.product(range(4), range(2), range(3)):
        offset = coordinate_to_flat(shape, strides, coord)
        seen.add(offset)
        assert flat_to_coordinate(offset, shape, strides) == coord
    assert seen == set(range(24))


def test_coordinate_to_flat_matches_stride_sum():
    assert coordinate_to_flat((2, 2, 6), (12, 6, 1), (1, 1, 4)) == 22
    assert coordinate_to_flat((), (), ()) == 0


def test_vector_with_single_stride():
    assert coordinate_to_flat((5, 1), (3,), (2, 0)) == 6
    assert coordinate_to_flat((1, 5), (3,), (0, 2)) == 6
    assert flat_to_coordinate(6, (1, 5), (3,)) == (0, 2)
    assert expand_strides((5, 1), (3,)) == (3, 0)


def test_coordinate_errors():
    with pytest.raises(IndexOutOfRangeError):
        coordinate_to_flat((2, 3), (3, 1), (2, 0))
    with pytest.raises(IndexOutOfRangeError):
        coordinate_to_flat((2, 3), (3, 1), (0, -1))
    with pytest.raises(DimMismatchError):
        coordinate_to_flat((2, 3), (3, 1), (0, 0, 0))


@pytest.mark.parametrize("offset", [-1, 6, 100])
def test_flat_to_coordinate_out_of_range(offset):
    with pytest.raises(IndexOutOfRangeError):
        flat_to_coordinate(offset, (2, 3), (3, 1))


def test_flat_to_coordinate_rejects_gaps_in_strided_view():
    # every other element of a length-6 buffer
    with pytest.raises(IndexOutOfRangeError):
        flat_to_coordinate(3, (3,), (2,))
    assert flat_to_coordinate(4, (3,), (2,)) == (2,)


def test_invert_axes():
    assert invert_axes((2, 0, 1)) == (1, 2, 0)


def test_transpose_index_matches_numpy_semantics():
    # (2, 3) -> (3, 2): element at (r, c) moves to (c, r)
    old_shape, old_strides, new_strides = (2, 3), (3, 1), (2, 1)
    moved = [transpose_index(i, old_shape, (1, 0), old_strides, new_strides) for i in range(6)]
    assert moved == [0, 2, 4, 1, 3, 5]


def test_untranspose_index_inverts_transpose_index():
    old_shape, axes = (2, 3, 4), (2, 0, 1)
    old_strides = Shape(old_shape).calc_strides()
    new_shape = tuple(old_shape[a] for a in axes)
    new_strides = Shape(new_shape).calc_strides()
    for i in range(24):
        j = transpose_index(i, old_shape, axes, old_strides, new_strides)
        assert untranspose_index(j, new_shape, axes, new_strides, old_strides) == i
