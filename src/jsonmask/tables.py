"""Consistency tables shared by every call of one obfuscation run.

Lookups are by structural equality. Python treats ``1``, ``1.0`` and ``True``
as equal dictionary keys, so value-table entries are keyed by a canonical
``(tag, payload)`` pair instead of the raw value: strings by their text,
integers by sub-kind and value, floats by their IEEE-754 bit pattern.
"""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass, field
from typing import Iterator, TypeAlias

from jsonmask.generators import generate_number, generate_string
from jsonmask.invariants import never
from jsonmask.json_types import JSONNumber
from jsonmask.numbers import NumberKind, is_number, number_kind

Scalar: TypeAlias = str | JSONNumber
ScalarKey: TypeAlias = tuple[str, object]


def scalar_key(value: Scalar) -> ScalarKey:
    if isinstance(value, str):
        return ("str", value)
    if not is_number(value):
        never("value table only holds strings and numbers", value=value)
    kind = number_kind(value)
    if kind is NumberKind.FLOAT:
        if isinstance(value, int):
            # Integers wider than 64 bits keep their exact value as the key.
            return ("wide", value)
        return (kind.value, struct.pack(">d", value))
    return (kind.value, value)


def replacement_for(rng: random.Random, value: Scalar) -> Scalar:
    if isinstance(value, str):
        return generate_string(rng, len(value))
    kind = number_kind(value)
    return generate_number(rng, kind)


@dataclass
class KeyTable:
    """Original object key -> obfuscated key."""

    entries: dict[str, str] = field(default_factory=dict)

    def resolve(self, key: str, rng: random.Random) -> str:
        known = self.entries.get(key)
        if known is None:
            known = generate_string(rng, len(key))
            self.entries[key] = known
        return known

    def get(self, key: str) -> str | None:
        return self.entries.get(key)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries.items())

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


@dataclass
class ValueTable:
    """Original scalar (string or number) -> replacement scalar."""

    entries: dict[ScalarKey, tuple[Scalar, Scalar]] = field(default_factory=dict)

    def resolve(self, value: Scalar, rng: random.Random) -> Scalar:
        key = scalar_key(value)
        known = self.entries.get(key)
        if known is None:
            known = (value, replacement_for(rng, value))
            self.entries[key] = known
        return known[1]

    def get(self, value: Scalar) -> Scalar | None:
        known = self.entries.get(scalar_key(value))
        return None if known is None else known[1]

    def items(self) -> Iterator[tuple[Scalar, Scalar]]:
        return iter(self.entries.values())

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, str) and not is_number(value):
            return False
        return scalar_key(value) in self.entries  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.entries)
