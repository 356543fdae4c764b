from __future__ import annotations

import pytest

from jsonmask.exceptions import NeverThrown
from jsonmask.numbers import INT_RANGE, UINT_RANGE, NumberKind, fits_kind, is_number, number_kind


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (0, NumberKind.UINT),
        (42, NumberKind.UINT),
        (2**64 - 1, NumberKind.UINT),
        (-1, NumberKind.INT),
        (-(2**63), NumberKind.INT),
        (0.0, NumberKind.FLOAT),
        (-2.5, NumberKind.FLOAT),
        (2**64, NumberKind.FLOAT),
        (-(2**63) - 1, NumberKind.FLOAT),
    ],
)
def test_number_kind_follows_64_bit_ranges(value: int | float, kind: NumberKind) -> None:
    assert number_kind(value) is kind


def test_bool_is_not_a_number() -> None:
    assert not is_number(True)
    assert not is_number(False)
    assert True not in UINT_RANGE
    with pytest.raises(NeverThrown):
        number_kind(True)


def test_fits_kind_checks_representation() -> None:
    assert fits_kind(2**63, NumberKind.UINT)
    assert not fits_kind(2**63, NumberKind.INT)
    assert fits_kind(INT_RANGE.low, NumberKind.INT)
    assert not fits_kind(1, NumberKind.FLOAT)
    assert fits_kind(1.0, NumberKind.FLOAT)
