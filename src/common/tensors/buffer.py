"""NumPy-backed materialization of access patterns.

The access-pattern layer never touches element storage; these helpers are
the caller's side of that contract. They take flat NumPy buffers, use the
offsets the layer computes and return fresh arrays.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

import numpy as np

from .access_pattern import AccessPattern, new_ap
from .flat_iterator import FlatIterator
from .index import transpose_index
from .logger import get_access_logger
from .shape import as_shape, check_backing
from .slicer import SliceResult
from .transposer import transpose_ap

logger = get_access_logger()


def _flat(data: Any) -> np.ndarray:
    return np.asarray(data).reshape(-1)


def from_buffer(data: Any, shape: Optional[Iterable[int]] = None) -> AccessPattern:
    """Access pattern for a contiguous buffer; defaults to a flat shape.

    A shape that does not describe exactly ``len(data)`` elements is a
    programmer error and raises :class:`~.errors.InvariantViolation`.
    """
    flat = _flat(data)
    shape = (flat.size,) if shape is None else as_shape(shape)
    check_backing(shape, flat.size)
    return new_ap(shape)


def offsets(ap: AccessPattern) -> np.ndarray:
    return np.fromiter(FlatIterator(ap), dtype=np.intp)


def gather(data: Any, ap: AccessPattern, start: int = 0) -> np.ndarray:
    """Elements addressed by ``ap`` in row-major order, shaped like ``ap``."""
    flat = _flat(data)
    return flat[start + offsets(ap)].reshape(tuple(ap.shape))


def view(data: Any, result: SliceResult) -> np.ndarray:
    """Reslice a flat buffer by a slicing result and gather the view."""
    window = _flat(data)[result.start:result.end]
    return gather(window, result.ap)


def transpose_copy(data: Any, ap: AccessPattern, axes: Iterable[int] = ()) -> np.ndarray:
    """Physically transposed, C-contiguous copy of the buffer ``ap`` describes."""
    flat = _flat(data)
    result = transpose_ap(ap, *tuple(axes))
    if result.is_noop:
        return gather(flat, ap)

    transposed, applied = result.value
    new_strides = transposed.shape.calc_strides()
    out = np.empty(transposed.size(), dtype=flat.dtype)
    for offset in FlatIterator(ap):
        out[transpose_index(offset, ap.shape, applied, ap.strides, new_strides)] = flat[offset]
    logger.debug("materialized transpose %s of %r", applied, ap)
    return out.reshape(tuple(transposed.shape))
