"""Bounded integer square root search."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

ROOT_BOUND = 10000


@dataclass(slots=True, frozen=True)
class RootFound:
    """*number* is a perfect square and *root* squared equals it."""

    number: int
    root: int
    kind: str = "found"
    ok: bool = True

    @property
    def message(self) -> str:
        return f"The square root of {self.number} is {self.root}"


@dataclass(slots=True, frozen=True)
class OutOfBounds:
    number: int
    kind: str = "out_of_bounds"
    ok: bool = False


@dataclass(slots=True, frozen=True)
class NoRootFound:
    number: int
    kind: str = "no_root_found"
    ok: bool = False


RootResult = Union[RootFound, OutOfBounds, NoRootFound]


def find_integer_square_root(number: int) -> RootResult:
    """Return the integer square root of *number* if it lies in ``[1, ROOT_BOUND]``.

    The bound is checked before any search, so a perfect square above the
    bound is still ``OutOfBounds``.
    """

    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected int, got {type(number).__name__}")
    if number < 1 or number > ROOT_BOUND:
        return OutOfBounds(number)

    count = 0
    while count * count <= ROOT_BOUND:
        if count * count == number:
            return RootFound(number, count)
        count += 1
    return NoRootFound(number)


__all__ = ["ROOT_BOUND", "RootFound", "OutOfBounds", "NoRootFound", "RootResult", "find_integer_square_root"]
