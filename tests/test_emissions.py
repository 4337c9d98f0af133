"""Tests for emission calculation and amount validation."""

import math

import pytest

from carbon_tracker.services.emissions import calculate_co2e, validate_amount
from tests.conftest import activity_type


def test_calculate_co2e_is_unrounded() -> None:
    assert calculate_co2e(3, activity_type("1")) == 0.75
    assert calculate_co2e(10, activity_type("2")) == pytest.approx(4.2)
    assert calculate_co2e(1 / 3, activity_type("3")) == 6.0 * (1 / 3)


@pytest.mark.parametrize("amount", [0, -1, "10", None, True, math.nan, math.inf])
def test_validate_amount_rejects(amount) -> None:
    assert validate_amount(amount) is None


def test_validate_amount_accepts_positive_numbers() -> None:
    assert validate_amount(2) == 2.0
    assert validate_amount(0.5) == 0.5
