"""Tagged result returned by repositories: a row set, nothing, or a database failure."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Failed:
    detail: str


Outcome = Union[Found[T], NotFound, Failed]


def from_rowcount(rowcount: int) -> "Outcome[int]":
    """Writes succeed only when the statement touched at least one row."""
    if rowcount > 0:
        return Found(rowcount)
    return NotFound()
