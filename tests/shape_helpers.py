from __future__ import annotations

import string

ALPHANUMERIC = set(string.ascii_letters + string.digits)


def shape(value: object) -> object:
    """Kind tree of a JSON value, with string lengths and int/float numbers.

    Sub-kinds are not part of the tree: a signed replacement may land in the
    non-negative half of its range.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, str):
        return ("str", len(value))
    if isinstance(value, (int, float)):
        return ("number", type(value).__name__)
    if isinstance(value, list):
        return ["array", [shape(item) for item in value]]
    if isinstance(value, dict):
        return ["object", [(len(key), shape(item)) for key, item in value.items()]]
    raise AssertionError(f"not JSON: {value!r}")


def is_alphanumeric(text: str) -> bool:
    return all(char in ALPHANUMERIC for char in text)
