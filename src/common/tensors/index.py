"""Pure coordinate <-> flat-offset translation.

Everything here is parameterized explicitly by shape and strides; nothing
holds state.
"""
from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .errors import DimMismatchError, IndexOutOfRangeError
from .shape import as_shape


def expand_strides(shape: Sequence[int], strides: Sequence[int]) -> Tuple[int, ...]:
    """Return one stride per axis of ``shape``.

    Vectors may carry a single physical stride; it belongs to the axis whose
    size is not 1. Scalars may carry none at all.
    """
    shape = as_shape(shape)
    strides = tuple(strides)
    if len(strides) == len(shape):
        return strides
    if shape.is_scalar() and not strides:
        return (0,) * len(shape)
    if len(strides) == 1 and shape.is_vector():
        axis = 1 if shape.is_row_vec() else 0
        full = [0] * len(shape)
        full[axis] = strides[0]
        return tuple(full)
    raise DimMismatchError(len(shape), len(strides))


def coordinate_to_flat(shape: Sequence[int], strides: Sequence[int], coord: Iterable[int]) -> int:
    """Flat offset of ``coord``: ``sum(coord[i] * strides[i])``.

    Missing trailing coordinates count as 0. Scalars always map to 0.
    """
    shape = as_shape(shape)
    coord = tuple(coord)
    if shape.is_scalar():
        return 0
    if len(coord) > len(shape):
        raise DimMismatchError(len(shape), len(coord))
    full = expand_strides(shape, strides)
    at = 0
    for axis, c in enumerate(coord):
        if c < 0 or c >= shape[axis]:
            raise IndexOutOfRangeError(c, shape[axis])
        at += c * full[axis]
    return at


def flat_to_coordinate(offset: int, shape: Sequence[int], strides: Sequence[int]) -> Tuple[int, ...]:
    """Inverse of :func:`coordinate_to_flat`.

    Axes are peeled off in order of decreasing stride, so permuted (transposed)
    strides resolve as well as row-major ones. Size-1 and zero-stride axes
    always resolve to 0.
    """
    shape = as_shape(shape)
    full = expand_strides(shape, strides)
    bound = 1 + sum((s - 1) * abs(st) for s, st in zip(shape, full)) if shape.size() else 0
    if offset < 0 or offset >= bound:
        raise IndexOutOfRangeError(offset, bound)

    coord = [0] * len(shape)
    remainder = offset
    order = sorted(
        (axis for axis in range(len(shape)) if shape[axis] > 1 and full[axis] != 0),
        key=lambda axis: (-full[axis], axis),
    )
    for axis in order:
        c, remainder = divmod(remainder, full[axis])
        if c >= shape[axis]:
            raise IndexOutOfRangeError(offset, bound)
        coord[axis] = c
    if remainder:
        # offset falls between addressable elements of a strided view
        raise IndexOutOfRangeError(offset, bound)
    return tuple(coord)


def invert_axes(axes: Sequence[int]) -> Tuple[int, ...]:
    inverse = [0] * len(axes)
    for i, axis in enumerate(axes):
        inverse[axis] = i
    return tuple(inverse)


def transpose_index(
    offset: int,
    old_shape: Sequence[int],
    axes: Sequence[int],
    old_strides: Sequence[int],
    new_strides: Sequence[int],
) -> int:
    """Offset that element ``offset`` lands on in a physically transposed copy.

    The coordinate is resolved in the old geometry, then recombined with
    ``new_strides`` in permuted order.
    """
    old_coord = flat_to_coordinate(offset, old_shape, old_strides)
    new_shape = tuple(old_shape[axis] for axis in axes)
    full = expand_strides(new_shape, new_strides)
    return sum(old_coord[axis] * full[i] for i, axis in enumerate(axes))


def untranspose_index(
    offset: int,
    old_shape: Sequence[int],
    axes: Sequence[int],
    old_strides: Sequence[int],
    new_strides: Sequence[int],
) -> int:
    """Inverse of :func:`transpose_index`.

    ``old_shape``/``old_strides`` describe the transposed layout here; ``axes``
    is the permutation that produced it.
    """
    return transpose_index(offset, old_shape, invert_axes(axes), old_strides, new_strides)
