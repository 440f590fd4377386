"""Test suite for implementations of ``find_integer_square_root``."""

from typing import Callable

from playground.roots import NoRootFound, OutOfBounds, RootFound, RootResult

FindRoot = Callable[[int], RootResult]


def run_tests(find_root: FindRoot) -> None:
    """Check a user implementation of ``find_integer_square_root``."""

    assert find_root(0) == OutOfBounds(0)
    assert find_root(-4) == OutOfBounds(-4)
    assert find_root(10001) == OutOfBounds(10001)
    assert find_root(57600) == OutOfBounds(57600)

    assert find_root(1) == RootFound(1, 1)
    assert find_root(49) == RootFound(49, 7)
    assert find_root(10000) == RootFound(10000, 100)

    assert find_root(2) == NoRootFound(2)
    assert find_root(9999) == NoRootFound(9999)
    print("SquareRoot OK")


__all__ = ["run_tests", "FindRoot"]
