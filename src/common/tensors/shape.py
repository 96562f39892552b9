from __future__ import annotations

import functools
import itertools
import operator
from typing import Iterable, Tuple

from .errors import InvariantViolation


class Shape(tuple):
    """Ordered, immutable dimension sizes.

    Two special cases drive the rest of the access-pattern layer:

    * a scalar is ``()`` or any shape made only of ones, and reports 0 dims;
    * a vector is ``(n,)``, ``(n, 1)`` or ``(1, n)`` with ``n > 1`` and
      reports 1 dim. Its strides carry a single physical stride.
    """

    def __new__(cls, dims: Iterable[int] = ()):
        dims = tuple(int(d) for d in dims)
        for d in dims:
            if d < 0:
                raise ValueError(f"negative dimension size does not make sense: {dims}")
        return super().__new__(cls, dims)

    def __repr__(self) -> str:
        return f"Shape{tuple(self)}"

    def clone(self) -> Shape:
        return Shape(self)

    def size(self) -> int:
        return functools.reduce(operator.mul, self, 1)

    def is_scalar(self) -> bool:
        return len(self) == 0 or all(d == 1 for d in self)

    def is_col_vec(self) -> bool:
        return len(self) == 2 and self[0] > 1 and self[1] == 1

    def is_row_vec(self) -> bool:
        return len(self) == 2 and self[0] == 1 and self[1] > 1

    def is_vector(self) -> bool:
        return (len(self) == 1 and self[0] > 1) or self.is_col_vec() or self.is_row_vec()

    def dims(self) -> int:
        if self.is_scalar():
            return 0
        if self.is_vector():
            return 1
        return len(self)

    def calc_strides(self) -> Tuple[int, ...]:
        """Row-major strides; vectors get their single physical stride."""
        if self.is_scalar():
            return ()
        if self.is_vector():
            return (1,)
        return tuple(itertools.accumulate(reversed(self[1:]), operator.mul, initial=1))[::-1]


def as_shape(dims) -> Shape:
    if isinstance(dims, Shape):
        return dims
    if isinstance(dims, int):
        return Shape((dims,))
    return Shape(dims)


def check_backing(shape: Iterable[int], n: int) -> None:
    """Abort when ``shape`` does not describe exactly ``n`` elements."""
    shape = as_shape(shape)
    if shape.size() != n:
        raise InvariantViolation(
            f"shape {tuple(shape)} describes {shape.size()} elements, backing holds {n}"
        )
