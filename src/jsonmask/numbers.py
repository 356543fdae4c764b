"""Number sub-kinds and the value ranges each one spans."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from jsonmask.invariants import never
from jsonmask.json_types import JSONNumber


class NumberKind(str, Enum):
    UINT = "uint"
    INT = "int"
    FLOAT = "float"


@dataclass(frozen=True)
class IntegerRange:
    low: int
    high: int

    def __contains__(self, value: object) -> bool:
        return (
            isinstance(value, int)
            and not isinstance(value, bool)
            and self.low <= value <= self.high
        )


UINT_RANGE = IntegerRange(low=0, high=2**64 - 1)
INT_RANGE = IntegerRange(low=-(2**63), high=2**63 - 1)

INTEGER_RANGES: dict[NumberKind, IntegerRange] = {
    NumberKind.UINT: UINT_RANGE,
    NumberKind.INT: INT_RANGE,
}


def is_number(value: object) -> bool:
    # bool subclasses int but is never a JSON number.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def number_kind(value: JSONNumber) -> NumberKind:
    """Classify a parsed JSON number the way a 64-bit JSON reader would.

    Non-negative integers that fit in 64 bits are unsigned, negative integers
    that fit are signed, and everything else (floats and integers too wide for
    either range) is floating point.
    """
    if not is_number(value):
        never("number_kind called on a non-number", value=value)
    if isinstance(value, float):
        return NumberKind.FLOAT
    if value in UINT_RANGE:
        return NumberKind.UINT
    if value in INT_RANGE:
        return NumberKind.INT
    return NumberKind.FLOAT


def fits_kind(value: JSONNumber, kind: NumberKind) -> bool:
    if kind is NumberKind.FLOAT:
        return isinstance(value, float)
    return value in INTEGER_RANGES[kind]
