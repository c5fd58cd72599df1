from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from rbo.domain.common.money import is_normalized, normalize_amount


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (2.345, 2.35),
        (-2.345, -2.35),
        (1.005, 1.01),
        (3.333333, 3.33),
        (10.0, 10.0),
        (0.0, 0.0),
        (0.125, 0.13),
    ],
)
def test_normalize_amount_rounds_half_away_from_zero(amount: float, expected: float) -> None:
    assert normalize_amount(amount) == expected


def test_normalize_amount_is_idempotent() -> None:
    for amount in (2.345, 13.329999, 99.995, 0.1 + 0.2):
        once = normalize_amount(amount)
        assert normalize_amount(once) == once


def test_normalize_amount_honours_precision() -> None:
    assert normalize_amount(2.3456, precision=3) == 2.346
    assert normalize_amount(2.5, precision=0) == 3.0


def test_normalize_amount_rejects_non_finite_and_negative_precision() -> None:
    with pytest.raises(ValueError):
        normalize_amount(float("nan"))
    with pytest.raises(ValueError):
        normalize_amount(float("inf"))
    with pytest.raises(ValueError):
        normalize_amount(1.0, precision=-1)


def test_is_normalized() -> None:
    assert is_normalized(13.33)
    assert not is_normalized(13.333)
    assert not is_normalized(float("nan"))


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (1e300, 1e300),
        (-1e300, -1e300),
        (123456789012.345, 123456789012.35),
        (-123456789012.345, -123456789012.35),
    ],
)
def test_normalize_amount_handles_large_magnitudes(amount: float, expected: float) -> None:
    assert normalize_amount(amount) == expected
