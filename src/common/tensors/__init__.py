"""Strided access patterns: shape/stride bookkeeping for flat buffers."""
from __future__ import annotations

from .errors import (
    AccessPatternError,
    DimMismatchError,
    IndexOutOfRangeError,
    IteratorExhaustedError,
    InvariantViolation,
)
from .results import NOOP, NoOp, Ok
from .shape import Shape, check_backing
from .access_pattern import AccessPattern, Mutability, new_ap
from .index import (
    coordinate_to_flat,
    flat_to_coordinate,
    invert_axes,
    transpose_index,
    untranspose_index,
)
from .slicer import SliceResult, SliceSpec, slice_ap
from .transposer import Transposition, transpose_ap
from .flat_iterator import FlatIterator, IteratorState

# numpy-backed helpers (eye, gather, transpose_copy) live in .creation and
# .buffer and are imported from there explicitly.

__all__ = [
    "AccessPatternError",
    "DimMismatchError",
    "IndexOutOfRangeError",
    "IteratorExhaustedError",
    "InvariantViolation",
    "NOOP",
    "NoOp",
    "Ok",
    "Shape",
    "check_backing",
    "AccessPattern",
    "Mutability",
    "new_ap",
    "coordinate_to_flat",
    "flat_to_coordinate",
    "invert_axes",
    "transpose_index",
    "untranspose_index",
    "SliceResult",
    "SliceSpec",
    "slice_ap",
    "Transposition",
    "transpose_ap",
    "FlatIterator",
    "IteratorState",
]
