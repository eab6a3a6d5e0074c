"""
Tests for `domain/pricing.py`.

Covers rules:
- Base prices per model.
- Sport carries a 7% surcharge (18200 * 1.07 = 19474.00).
- total_amount = unit_price * quantity.
- Unmapped models are an internal error, not a validation error.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from domain.car_model import CarModel
from domain.errors import SaleValidationError, UnknownCarModelError
from domain.pricing import calculate_sale_price, get_unit_price


@pytest.mark.parametrize(
    "car_model, expected",
    [
        (CarModel.SEDAN, Decimal("8000.00")),
        (CarModel.SUV, Decimal("9500.00")),
        (CarModel.OFFROAD, Decimal("12500.00")),
        (CarModel.SPORT, Decimal("19474.00")),
    ],
)
def test_unit_price_per_model(car_model: CarModel, expected: Decimal) -> None:
    """Verify the final unit price of every model, Sport surcharge included."""

    assert get_unit_price(car_model) == expected


def test_unit_price_has_two_decimal_places() -> None:
    """Verify prices are quantized to cents."""

    assert str(get_unit_price(CarModel.SPORT)) == "19474.00"
    assert str(get_unit_price(CarModel.SEDAN)) == "8000.00"


@pytest.mark.parametrize("quantity", [1, 2, 7, 1000])
def test_calculate_sale_price_multiplies_unit_price(quantity: int) -> None:
    """Verify total_amount is unit_price times quantity for each model."""

    for car_model in CarModel:
        line = calculate_sale_price(car_model, quantity)
        assert line.unit_price == get_unit_price(car_model)
        assert line.total_amount == line.unit_price * quantity
        assert line.quantity == quantity


def test_unknown_model_raises_internal_error() -> None:
    """Verify a value outside the pricing table raises UnknownCarModelError."""

    with pytest.raises(UnknownCarModelError) as exc_info:
        get_unit_price("Truck")  # type: ignore[arg-type]

    assert not isinstance(exc_info.value, SaleValidationError)
