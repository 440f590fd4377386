"""Turn root search results into text and JSON payloads."""
from __future__ import annotations

from typing import Any, Dict

from .roots import NoRootFound, OutOfBounds, RootFound, RootResult, find_integer_square_root

OUT_OF_BOUNDS_MESSAGE = "Out of Bounds Error"
NO_ROOT_MESSAGE = "No Square Root was found"
GENERIC_ERROR_MESSAGE = "There was an error."


def describe_root_result(result: RootResult) -> str:
    match result:
        case RootFound():
            return result.message
        case OutOfBounds():
            return OUT_OF_BOUNDS_MESSAGE
        case NoRootFound():
            return NO_ROOT_MESSAGE
        case _:
            return GENERIC_ERROR_MESSAGE


def root_result_payload(result: RootResult) -> Dict[str, Any]:
    """JSON-ready view of *result*; ``root`` is ``None`` unless one was found."""

    match result:
        case RootFound(number=number, root=root):
            return {"number": number, "ok": True, "kind": result.kind, "root": root, "message": result.message}
        case OutOfBounds(number=number) | NoRootFound(number=number):
            return {
                "number": number,
                "ok": False,
                "kind": result.kind,
                "root": None,
                "message": describe_root_result(result),
            }
        case _:
            return {"number": None, "ok": False, "kind": "error", "root": None, "message": GENERIC_ERROR_MESSAGE}


def check_and_describe(number: int) -> str:
    return describe_root_result(find_integer_square_root(number))


__all__ = [
    "describe_root_result",
    "root_result_payload",
    "check_and_describe",
    "OUT_OF_BOUNDS_MESSAGE",
    "NO_ROOT_MESSAGE",
    "GENERIC_ERROR_MESSAGE",
]
