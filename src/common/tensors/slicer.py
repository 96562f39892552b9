from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union

from .access_pattern import AccessPattern, Mutability, new_ap
from .errors import DimMismatchError, IndexOutOfRangeError
from .index import expand_strides
from .logger import get_access_logger
from .shape import Shape

logger = get_access_logger()


@dataclass(frozen=True)
class SliceSpec:
    """Per-axis selection; ``None`` fields take their defaults."""
    start: Optional[int] = None
    end: Optional[int] = None
    step: Optional[int] = None

    @classmethod
    def coerce(cls, spec: "SpecLike") -> "SliceSpec":
        if spec is None:
            return cls()
        if isinstance(spec, SliceSpec):
            return spec
        if isinstance(spec, slice):
            return cls(spec.start, spec.stop, spec.step)
        if isinstance(spec, int):
            return cls(spec, spec + 1 if spec != -1 else None, 1)
        raise TypeError(f"cannot interpret {spec!r} as a slice")

    def resolve(self, size: int) -> Tuple[int, int, int]:
        """Normalize against an axis of ``size`` elements.

        Returns ``(start, end, step)`` with ``0 <= start <= end <= size``.
        The step only carries direction; bounds are always ascending.
        """
        step = 1 if self.step is None else int(self.step)
        if step == 0:
            raise ValueError("slice step cannot be zero")

        start = 0 if self.start is None else int(self.start)
        end = size if self.end is None else int(self.end)
        if start < 0:
            start += size
        if end < 0:
            end += size
        end = min(end, size)

        if start < 0 or start > end:
            raise IndexOutOfRangeError(start, size)
        if start >= size and start != end:
            raise IndexOutOfRangeError(start, size)
        return start, end, step


SpecLike = Union[None, int, slice, SliceSpec]


class SliceResult(NamedTuple):
    """A derived view plus its half-open offset range into the parent buffer."""
    ap: AccessPattern
    start: int
    end: int


def slice_ap(ap: AccessPattern, size: int, *specs: SpecLike) -> SliceResult:
    """Derive the access pattern of ``ap`` restricted by ``specs``.

    ``size`` is the element count of the view ``ap`` currently describes;
    the returned ``start``/``end`` bound the elements the new view touches.
    Axes without a spec keep their full range. A spec with ``start == end``
    yields a zero-length axis.
    """
    shape = ap.shape
    if len(specs) > len(shape):
        raise DimMismatchError(len(shape), len(specs))

    op_dims = len(shape)
    # vectors and scalars may carry fewer strides than axes
    strides = expand_strides(shape, ap.strides)

    nd_start, nd_end = 0, size
    new_shape = list(shape)
    new_strides = [0] * op_dims
    for i in range(op_dims):
        spec = SliceSpec.coerce(specs[i] if i < len(specs) else None)
        axis_size = shape[i]
        stride = strides[i]
        start, end, step = spec.resolve(axis_size)

        nd_start += start * stride
        nd_end -= (axis_size - end) * stride
        if start == end:
            new_shape[i] = 0
            new_strides[i] = stride
        elif step > 0:
            new_shape[i] = max(1, math.ceil((end - start) / step))
            new_strides[i] = stride * step
        else:
            new_shape[i] = end - start
            new_strides[i] = stride

    if nd_end - nd_start == 1:
        logger.debug("slice %s of %r collapsed to a scalar at offset %d", specs, ap, nd_start)
        scalar = AccessPattern(state=Mutability.MUTABLE)
        scalar.set_shape()
        scalar.lock()
        return SliceResult(scalar, nd_start, nd_end)

    kept = [i for i in range(op_dims) if new_shape[i] != 1 or i == op_dims - 1]
    new_shape = [new_shape[i] for i in kept]
    new_strides = [new_strides[i] for i in kept]
    if Shape(new_shape).is_col_vec():
        new_strides = new_strides[:1]

    return SliceResult(new_ap(new_shape, new_strides), nd_start, nd_end)
