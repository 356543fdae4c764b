"""Per-kind random replacement generators.

Every generator draws from the `random.Random` instance it is handed so a run
can be made reproducible by seeding a single source.
"""

from __future__ import annotations

import math
import random
import string

from jsonmask.invariants import never
from jsonmask.json_types import JSONNumber
from jsonmask.numbers import INTEGER_RANGES, NumberKind, fits_kind

ALPHANUMERIC = string.ascii_letters + string.digits


def default_source() -> random.Random:
    return random.SystemRandom()


def seeded_source(seed: int | None) -> random.Random:
    if seed is None:
        return default_source()
    return random.Random(seed)


def generate_bool(rng: random.Random) -> bool:
    """Uniform boolean for callers that randomize booleans.

    The obfuscation context passes booleans through and never calls this.
    """
    return rng.random() < 0.5


def generate_string(rng: random.Random, length: int) -> str:
    """Return `length` characters drawn independently from [A-Za-z0-9]."""
    if length < 0:
        never("negative string length", length=length)
    return "".join(rng.choice(ALPHANUMERIC) for _ in range(length))


def generate_number(rng: random.Random, kind: NumberKind) -> JSONNumber:
    if kind is NumberKind.FLOAT:
        value: JSONNumber = rng.random()
        if not math.isfinite(value):
            never("generated float is not finite", value=value)
    else:
        bounds = INTEGER_RANGES[kind]
        value = rng.randint(bounds.low, bounds.high)
    if not fits_kind(value, kind):
        never("generated number does not fit its sub-kind", value=value, kind=kind.value)
    return value
