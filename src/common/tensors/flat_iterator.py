"""Stride-aware flat iteration over an access pattern.

:class:`FlatIterator` walks the coordinates of an :class:`AccessPattern` in
row-major order (last axis fastest) and yields the flat offset of each one,
in the manner of NumPy's ``flatiter``.

Cursor contract
---------------
``coord()`` always reports the coordinate that the *next* call to
``next()`` will translate. ``next()`` translates the cursor, advances it and
returns the offset of the coordinate it started from::

    it = FlatIterator(new_ap((2, 3)))
    it.coord()   # (0, 0)
    it.next()    # 0
    it.coord()   # (0, 1)

Once the last offset has been produced the cursor wraps back to all zeros
and the iterator is ``DONE``.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .access_pattern import AccessPattern
from .errors import IndexOutOfRangeError, IteratorExhaustedError
from .index import coordinate_to_flat
from .logger import get_access_logger
from .results import NOOP, Ok, Result
from .shape import Shape
from .slicer import SliceSpec, SpecLike

logger = get_access_logger()


class IteratorState(Enum):
    ACTIVE = "active"
    DONE = "done"


def _geometry(ap: AccessPattern) -> Tuple[Shape, Tuple[int, ...]]:
    """Extents and strides the odometer runs over, one per reported dim."""
    if ap.is_scalar():
        return Shape(), ()
    shape = ap.shape
    if ap.is_vector():
        n = shape[0] if ap.is_col_vec() or len(shape) == 1 else shape[1]
        if len(ap.strides) == 1:
            stride = ap.strides[0]
        else:
            stride = ap.strides[1] if ap.is_row_vec() else ap.strides[0]
        return Shape((n,)), (stride,)
    return shape, ap.strides


class FlatIterator:
    """Cursor producing the row-major sequence of flat offsets for ``ap``.

    The iterator borrows ``ap`` and never mutates it.
    """

    def __init__(self, ap: AccessPattern):
        self._ap = ap
        self._extents, self._steps = _geometry(ap)
        self._track: List[int] = [0] * len(self._extents)
        self._state = IteratorState.ACTIVE
        self._empty = self._extents.size() == 0
        if self._empty:
            self._state = IteratorState.DONE

    # forwarded queries --------------------------------------------------
    @property
    def ap(self) -> AccessPattern:
        return self._ap

    @property
    def shape(self) -> Shape:
        return self._ap.shape

    @property
    def strides(self) -> Tuple[int, ...]:
        return self._ap.strides

    @property
    def dims(self) -> int:
        return self._ap.dims

    def is_scalar(self) -> bool:
        return self._ap.is_scalar()

    # state ---------------------------------------------------------------
    @property
    def state(self) -> IteratorState:
        return self._state

    @property
    def done(self) -> bool:
        return self._state is IteratorState.DONE

    def coord(self) -> Tuple[int, ...]:
        """Coordinate the next call to :meth:`next` will translate."""
        return tuple(self._track)

    def next(self) -> int:
        if self.done:
            raise IteratorExhaustedError()

        offset = coordinate_to_flat(self._extents, self._steps, self._track)
        if self.is_scalar():
            self._state = IteratorState.DONE
            return offset

        for d in range(len(self._extents) - 1, -1, -1):
            if self._track[d] < self._extents[d] - 1:
                self._track[d] += 1
                break
            self._track[d] = 0
        else:
            # slowest axis overflowed
            self._state = IteratorState.DONE
            logger.debug("flat iteration over %r exhausted", self._ap)
        return offset

    def try_next(self) -> Result:
        """Exception-free :meth:`next`: ``Ok(offset)`` or ``NOOP`` when done."""
        if self.done:
            return NOOP
        return Ok(self.next())

    def reset(self) -> None:
        for i in range(len(self._track)):
            self._track[i] = 0
        self._state = IteratorState.DONE if self._empty else IteratorState.ACTIVE

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self.done:
            raise StopIteration
        return self.next()

    def slice(self, spec: Optional[SpecLike] = None) -> List[int]:
        """Drain the remaining offsets, optionally sub-selecting them.

        A negative step reverses the drained list before selecting with the
        absolute step.
        """
        offsets = list(self)
        if spec is None:
            return offsets

        spec = SliceSpec.coerce(spec)
        step = 1 if spec.step is None else int(spec.step)
        if step == 0:
            raise ValueError("slice step cannot be zero")
        start = 0 if spec.start is None else int(spec.start)
        end = len(offsets) if spec.end is None else int(spec.end)
        if start < 0 or start >= len(offsets):
            raise IndexOutOfRangeError(start, len(offsets))

        if step < 0:
            offsets.reverse()
            step = -step
        end = min(end, len(offsets))
        return offsets[start:end:step]
