from __future__ import annotations

import random

import pytest

from jsonmask.exceptions import NeverThrown
from jsonmask.tables import KeyTable, ValueTable, scalar_key


def test_key_table_reuses_replacement() -> None:
    table = KeyTable()
    rng = random.Random(5)
    first = table.resolve("name", rng)
    assert len(first) == 4
    assert table.resolve("name", rng) == first
    assert table.get("name") == first
    assert "name" in table
    assert len(table) == 1


def test_value_table_is_structural_not_identity() -> None:
    table = ValueTable()
    rng = random.Random(5)
    left = "".join(["ab", "c"])
    right = "abc"
    assert table.resolve(left, rng) == table.resolve(right, rng)
    assert len(table) == 1


def test_value_table_keeps_numeric_kinds_and_strings_apart() -> None:
    table = ValueTable()
    rng = random.Random(5)
    for value in (1, 1.0, "1", -1):
        table.resolve(value, rng)
    assert len(table) == 4
    assert isinstance(table.get(1), int)
    assert isinstance(table.get(1.0), float)
    assert isinstance(table.get("1"), str)


def test_value_table_compares_floats_by_bit_pattern() -> None:
    assert scalar_key(0.0) != scalar_key(-0.0)
    assert scalar_key(0.5) == scalar_key(0.5)
    table = ValueTable()
    rng = random.Random(5)
    table.resolve(0.0, rng)
    table.resolve(-0.0, rng)
    assert len(table) == 2


def test_value_table_rejects_non_scalars() -> None:
    with pytest.raises(NeverThrown):
        scalar_key(True)
    assert True not in ValueTable()
    assert None not in ValueTable()


def test_value_table_items_yield_originals() -> None:
    table = ValueTable()
    rng = random.Random(5)
    table.resolve("Ann", rng)
    table.resolve(42, rng)
    originals = [original for original, _ in table.items()]
    assert originals == ["Ann", 42]


def test_value_table_keys_wide_integers_exactly() -> None:
    huge = 10**400
    assert scalar_key(huge) == ("wide", huge)
    assert scalar_key(huge) != scalar_key(huge + 1)
    table = ValueTable()
    replacement = table.resolve(huge, random.Random(5))
    assert isinstance(replacement, float)
    assert table.get(huge) == replacement
