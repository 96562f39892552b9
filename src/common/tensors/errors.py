"""Error kinds raised by the access-pattern layer."""
from __future__ import annotations


class AccessPatternError(Exception):
    """Base class for recoverable access-pattern failures."""


class DimMismatchError(AccessPatternError, ValueError):
    def __init__(self, expected: int, got: int):
        self.expected = expected
        self.got = got
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Dimension mismatch. Expected {self.expected}, got {self.got}"


class IndexOutOfRangeError(AccessPatternError, IndexError):
    def __init__(self, index: int, bound: int):
        self.index = index
        self.bound = bound
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Index {self.index} is out of range for bound {self.bound}"


class IteratorExhaustedError(AccessPatternError, RuntimeError):
    """``FlatIterator.next`` was called after the last offset."""

    def __init__(self, message: str = "iterator is exhausted"):
        super().__init__(message)


class InvariantViolation(AssertionError):
    """Programmer error: a shape disagrees with the storage it describes.

    Not part of the :class:`AccessPatternError` family and not meant to be
    handled.
    """
