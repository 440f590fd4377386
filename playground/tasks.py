"""Built-in training tasks."""
from __future__ import annotations

from typing import Dict


TASKS: Dict[str, Dict[str, str]] = {
    "square_root": {
        "description": (
            "Implement find_integer_square_root(number: int). Numbers outside 1..10000 are out of bounds; "
            "otherwise search candidates 0, 1, 2, ... and report the root or that none was found."
        ),
        "starter_code": """
# Write your function below

def find_integer_square_root(number: int):
    if number < 1 or number > 10000:
        return "out_of_bounds"
    count = 0
    # TODO: search for count with count * count == number
    return "no_root_found"
""".strip(),
        "tests": """
# ---- TESTS (do not edit) ----
if __name__ == "__main__":
    assert find_integer_square_root(0) == "out_of_bounds"
    assert find_integer_square_root(57600) == "out_of_bounds"
    assert find_integer_square_root(10001) == "out_of_bounds"
    assert find_integer_square_root(1) == 1
    assert find_integer_square_root(49) == 7
    assert find_integer_square_root(10000) == 100
    assert find_integer_square_root(50) == "no_root_found"
    print("OK")
""".strip(),
    },
}


__all__ = ["TASKS"]
