"""Recursive obfuscation transform over parsed JSON values."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from jsonmask.generators import default_source
from jsonmask.invariants import never
from jsonmask.json_types import JSONArray, JSONObject, JSONValue
from jsonmask.numbers import is_number
from jsonmask.tables import KeyTable, ValueTable


@dataclass
class ObfuscationContext:
    """Tables and random source threaded through one obfuscation run.

    A context is meant to be reused across every document of a batch: a key
    or scalar seen in one document maps to the same replacement in all of
    them.
    """

    keys: KeyTable = field(default_factory=KeyTable)
    values: ValueTable = field(default_factory=ValueTable)
    rng: random.Random = field(default_factory=default_source)
    obfuscate_keys: bool = True

    def obfuscate(self, value: JSONValue) -> JSONValue:
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, str) or is_number(value):
            return self.values.resolve(value, self.rng)
        if isinstance(value, list):
            return self._obfuscate_array(value)
        if isinstance(value, dict):
            return self._obfuscate_object(value)
        never("value is not JSON", value_type=type(value).__name__)

    def obfuscate_key(self, key: str) -> str:
        if not self.obfuscate_keys:
            return key
        return self.keys.resolve(key, self.rng)

    def _obfuscate_array(self, items: JSONArray) -> JSONArray:
        return [self.obfuscate(item) for item in items]

    def _obfuscate_object(self, mapping: JSONObject) -> JSONObject:
        out: JSONObject = {}
        for key, item in mapping.items():
            new_key = self.obfuscate_key(key)
            # Distinct keys that draw the same replacement overwrite each other.
            out[new_key] = self.obfuscate(item)
        return out


def obfuscate(
    value: JSONValue,
    key_table: KeyTable,
    value_table: ValueTable,
    *,
    rng: random.Random | None = None,
) -> JSONValue:
    """Obfuscate `value`, recording new replacements in the given tables."""
    context = ObfuscationContext(
        keys=key_table,
        values=value_table,
        rng=rng if rng is not None else default_source(),
    )
    return context.obfuscate(value)
