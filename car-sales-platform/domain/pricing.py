"""
Domain: Pricing table for car models.

Base unit prices (USD):
- Sedan:    8000.00
- SUV:      9500.00
- Offroad: 12500.00
- Sport:   18200.00, plus a 7% surcharge (final 19474.00)

Pure and deterministic. Amounts are quantized to cents.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from .car_model import CarModel
from .errors import UnknownCarModelError

CENTS = Decimal("0.01")

BASE_PRICES: Dict[CarModel, Decimal] = {
    CarModel.SEDAN: Decimal("8000.00"),
    CarModel.SUV: Decimal("9500.00"),
    CarModel.OFFROAD: Decimal("12500.00"),
    CarModel.SPORT: Decimal("18200.00"),
}

SPORT_SURCHARGE_RATE = Decimal("0.07")


@dataclass(frozen=True, slots=True)
class PriceCalculation:
    """Priced line for a quantity of a single car model."""
    car_model: CarModel
    quantity: int
    unit_price: Decimal
    total_amount: Decimal


def get_unit_price(car_model: CarModel) -> Decimal:
    """
    Final unit price for a car model, surcharge included.

    Raises:
        UnknownCarModelError: If the model has no entry in the pricing table
    """

    base_price = BASE_PRICES.get(car_model)
    if base_price is None:
        raise UnknownCarModelError(f"No price configured for car model: {car_model!r}")

    if car_model is CarModel.SPORT:
        base_price += base_price * SPORT_SURCHARGE_RATE

    return base_price.quantize(CENTS)


def calculate_sale_price(car_model: CarModel, quantity: int) -> PriceCalculation:
    """
    Price a quantity of one car model.

    Example:
        line = calculate_sale_price(CarModel.SPORT, 2)
        # line.unit_price == Decimal('19474.00'), line.total_amount == Decimal('38948.00')
    """

    unit_price = get_unit_price(car_model)
    return PriceCalculation(
        car_model=car_model,
        quantity=quantity,
        unit_price=unit_price,
        total_amount=(unit_price * quantity).quantize(CENTS),
    )


__all__ = [
    "BASE_PRICES",
    "SPORT_SURCHARGE_RATE",
    "PriceCalculation",
    "get_unit_price",
    "calculate_sale_price",
]
