from __future__ import annotations

from typing import NamedTuple, Tuple

from .access_pattern import AccessPattern, new_ap
from .errors import DimMismatchError, IndexOutOfRangeError
from .index import expand_strides
from .logger import get_access_logger
from .results import NOOP, Ok, Result

logger = get_access_logger()


class Transposition(NamedTuple):
    """Transposed view and the permutation that was applied to produce it."""
    ap: AccessPattern
    axes: Tuple[int, ...]


def _is_identity(axes: Tuple[int, ...]) -> bool:
    return all(axis == i for i, axis in enumerate(axes))


def _check_permutation(axes: Tuple[int, ...], n: int) -> None:
    for axis in axes:
        if axis < 0 or axis >= n:
            raise IndexOutOfRangeError(axis, n)
    if len(set(axes)) != len(axes):
        raise ValueError(f"repeated axis in permutation {axes}")


def transpose_ap(ap: AccessPattern, *axes: int) -> Result:
    """Permute the axes of ``ap`` without touching any data.

    With no ``axes`` the axis order is fully reversed. Returns
    ``Ok(Transposition)`` or :data:`~.results.NOOP` when the permutation
    leaves the layout unchanged. ``ap`` itself is never modified.
    """
    if len(axes) == 1 and isinstance(axes[0], (list, tuple)):
        axes = tuple(axes[0])
    if axes and len(axes) != ap.dims:
        raise DimMismatchError(ap.dims, len(axes))

    op_dims = len(ap.shape)
    if not axes:
        axes = tuple(range(op_dims - 1, -1, -1))
    axes = tuple(int(axis) for axis in axes)
    _check_permutation(axes, op_dims)

    if ap.is_scalar() or _is_identity(axes):
        logger.debug("transpose%s of %r is a no-op", axes, ap)
        return NOOP

    shape = ap.shape
    if ap.is_vector():
        if axes[0] == 0:
            return NOOP
        # row <-> column: swap the sizes, keep the one physical stride
        full = expand_strides(shape, ap.strides)
        stride = full[1] if ap.is_row_vec() else full[0]
        transposed = new_ap((shape[1], shape[0]), (stride,))
        return Ok(Transposition(transposed, axes))

    new_shape = tuple(shape[axis] for axis in axes)
    new_strides = tuple(ap.strides[axis] for axis in axes)
    return Ok(Transposition(new_ap(new_shape, new_strides), axes))
