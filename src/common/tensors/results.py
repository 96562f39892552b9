"""Tagged results for operations that may legitimately have nothing to do."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful result carrying ``value``."""
    value: T

    @property
    def is_noop(self) -> bool:
        return False


@dataclass(frozen=True)
class NoOp:
    """Logical identity: the caller can skip the work entirely."""

    @property
    def is_noop(self) -> bool:
        return True


NOOP = NoOp()

Result = Union[Ok[Any], NoOp]
