"""Access patterns: how a flat buffer is read as an n-dimensional array.

An :class:`AccessPattern` bundles a :class:`~.shape.Shape`, its strides, the
dimensionality reported to the outside world and a mutability state. The
reported dimensionality differs from ``len(shape)`` for the special cases:

* scalars report 0 dims whether their shape is ``()``, ``(1,)`` or ``(1, 1)``;
* vectors report 1 dim for ``(n,)``, ``(n, 1)`` and ``(1, n)``, and carry a
  single physical stride.

Patterns built through :func:`new_ap` and every derived view start out
``FROZEN``. Edits on a frozen pattern are silently ignored; callers that
need to edit take a copy with :meth:`AccessPattern.with_shape` or
:meth:`AccessPattern.clone` followed by :meth:`AccessPattern.unlock`.
"""
from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Tuple, TYPE_CHECKING

from .logger import get_access_logger
from .shape import Shape, as_shape

if TYPE_CHECKING:  # pragma: no cover - type hints only
    from .results import Result
    from .slicer import SliceResult

logger = get_access_logger()


class Mutability(Enum):
    MUTABLE = "mutable"
    FROZEN = "frozen"


class AccessPattern:
    __slots__ = ("_shape", "_strides", "_dims", "_state")

    def __init__(
        self,
        shape: Iterable[int] = (),
        strides: Optional[Iterable[int]] = None,
        state: Mutability = Mutability.MUTABLE,
    ):
        self._shape = as_shape(shape)
        self._strides = self._shape.calc_strides() if strides is None else tuple(int(s) for s in strides)
        self._dims = self._shape.dims()
        self._state = state

    # ------------------------------------------------------------------
    # read-only views
    # ------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def strides(self) -> Tuple[int, ...]:
        return self._strides

    @property
    def dims(self) -> int:
        return self._dims

    @property
    def state(self) -> Mutability:
        return self._state

    @property
    def locked(self) -> bool:
        return self._state is Mutability.FROZEN

    def size(self) -> int:
        return self._shape.size()

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------
    def lock(self) -> None:
        self._state = Mutability.FROZEN

    def unlock(self) -> None:
        self._state = Mutability.MUTABLE

    def set_shape(self, *dims: int) -> None:
        """Replace the shape and recompute strides from scratch.

        No-op when frozen. Called without arguments the pattern collapses to
        the scalar state.
        """
        if self.locked:
            logger.debug("set_shape%s ignored on frozen %r", dims, self)
            return
        if not dims:
            self._shape = Shape()
            self._strides = ()
            self._dims = 0
            return
        self._shape = Shape(dims)
        self._strides = self._shape.calc_strides()
        self._dims = self._shape.dims()

    def with_shape(self, *dims: int) -> AccessPattern:
        """Copy-on-write edit: a mutable copy of this pattern reshaped to ``dims``."""
        ap = self.clone()
        ap.unlock()
        ap.set_shape(*dims)
        return ap

    def clone(self) -> AccessPattern:
        ap = AccessPattern.__new__(AccessPattern)
        ap._shape = Shape(self._shape)
        ap._strides = tuple(self._strides)
        ap._dims = self._dims
        ap._state = self._state
        return ap

    # ------------------------------------------------------------------
    # classification
    # ------------------------------------------------------------------
    def c(self) -> bool:
        """C-contiguous: the last axis has stride 1."""
        if not self._strides:
            return True
        return self._strides[-1] == 1

    def f(self) -> bool:
        """Fortran-contiguous: the first axis has stride 1."""
        if not self._strides:
            return True
        return self._strides[0] == 1

    def is_scalar(self) -> bool:
        return self._dims == 0 or (len(self._shape) == 1 and self._shape[0] == 1)

    def is_vector(self) -> bool:
        return self._shape.is_vector()

    def is_col_vec(self) -> bool:
        return self._shape.is_col_vec()

    def is_row_vec(self) -> bool:
        return self._shape.is_row_vec()

    def is_matrix(self) -> bool:
        return self._dims == 2

    # ------------------------------------------------------------------
    # derived views
    # ------------------------------------------------------------------
    def s(self, size: int, *specs) -> SliceResult:
        from .slicer import slice_ap
        return slice_ap(self, size, *specs)

    def t(self, *axes: int) -> Result:
        from .transposer import transpose_ap
        return transpose_ap(self, *axes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AccessPattern):
            return NotImplemented
        return (
            self._shape == other._shape
            and self._strides == other._strides
            and self._dims == other._dims
            and self._state is other._state
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Shape: {tuple(self._shape)}, Stride: {self._strides}, "
            f"Dims: {self._dims}, Lock: {self.locked}"
        )


def new_ap(shape: Iterable[int], strides: Optional[Iterable[int]] = None) -> AccessPattern:
    """Build a frozen access pattern; strides default to row-major."""
    return AccessPattern(shape, strides, state=Mutability.FROZEN)
