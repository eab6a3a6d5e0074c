"""
Tests for `services/sales_service.py`.

Covers rules:
- A valid request stores exactly one priced sale.
- Model text is parsed before the center is resolved.
- Unknown centers raise DistributionCenterNotFoundError without storing anything.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from domain.errors import (
    DistributionCenterNotFoundError,
    EmptyCarModelError,
    InvalidCarModelIndexError,
    InvalidCarModelNameError,
    InvalidQuantityError,
)
from domain.pricing import get_unit_price
from repositories.sale_repository import InMemorySaleRepository
from services.sales_service import SALE_CREATED_MESSAGE, CreateSaleCommand, create_sale


def test_create_sale_with_model_name(repository: InMemorySaleRepository) -> None:
    """Verify a named model is priced, stored and described in the result."""

    result = create_sale(CreateSaleCommand(car_model="Sedan", distribution_center_id=1, quantity=5), repository)

    assert result.sale_id == 1
    assert result.car_model == "Sedan"
    assert result.distribution_center_id == 1
    assert result.distribution_center_name == "Centro Norte"
    assert result.quantity == 5
    assert result.unit_price == Decimal("8000.00")
    assert result.total_amount == Decimal("40000.00")
    assert result.message == SALE_CREATED_MESSAGE
    assert repository.count() == 1
    assert repository.get_all_sales()[0].sale_date == result.sale_date


@pytest.mark.parametrize(
    "text, expected_model",
    [("0", "Sedan"), ("1", "SUV"), ("2", "Offroad"), ("3", "Sport"), ("sport", "Sport")],
)
def test_create_sale_maps_input_to_canonical_name(
    repository: InMemorySaleRepository, text: str, expected_model: str
) -> None:
    """Verify indexes and lower-case names come back as canonical model names."""

    result = create_sale(CreateSaleCommand(car_model=text, distribution_center_id=3, quantity=1), repository)

    assert result.car_model == expected_model


@pytest.mark.parametrize("quantity", [1, 3, 12])
def test_create_sale_total_matches_pricing(repository: InMemorySaleRepository, quantity: int) -> None:
    """Verify total_amount == unit_price * quantity and unit_price matches the pricing table."""

    for text in ("Sedan", "SUV", "Offroad", "Sport"):
        result = create_sale(CreateSaleCommand(car_model=text, distribution_center_id=2, quantity=quantity), repository)
        assert result.total_amount == result.unit_price * quantity
        assert result.unit_price == get_unit_price(repository.get_all_sales()[-1].car_model)


@pytest.mark.parametrize(
    "text, error",
    [
        ("", EmptyCarModelError),
        ("   ", EmptyCarModelError),
        ("99", InvalidCarModelIndexError),
        ("InvalidModel", InvalidCarModelNameError),
    ],
)
def test_create_sale_model_errors(repository: InMemorySaleRepository, text: str, error: type) -> None:
    """Verify parser errors propagate unchanged and nothing is stored."""

    with pytest.raises(error):
        create_sale(CreateSaleCommand(car_model=text, distribution_center_id=1, quantity=1), repository)

    assert repository.count() == 0


def test_create_sale_unknown_center(repository: InMemorySaleRepository) -> None:
    """Verify an unknown center id raises DistributionCenterNotFoundError."""

    with pytest.raises(DistributionCenterNotFoundError) as exc_info:
        create_sale(CreateSaleCommand(car_model="Sedan", distribution_center_id=99, quantity=1), repository)

    assert exc_info.value.center_id == 99
    assert "99" in str(exc_info.value)
    assert repository.count() == 0


def test_create_sale_reports_model_error_before_center_error(repository: InMemorySaleRepository) -> None:
    """Verify a bad model and a bad center together report the model error."""

    with pytest.raises(InvalidCarModelNameError):
        create_sale(CreateSaleCommand(car_model="Truck", distribution_center_id=99, quantity=1), repository)

    with pytest.raises(EmptyCarModelError):
        create_sale(CreateSaleCommand(car_model="", distribution_center_id=0, quantity=1), repository)


def test_create_sale_rejects_non_positive_quantity(repository: InMemorySaleRepository) -> None:
    """Verify quantity <= 0 raises InvalidQuantityError and stores nothing."""

    with pytest.raises(InvalidQuantityError):
        create_sale(CreateSaleCommand(car_model="Sedan", distribution_center_id=1, quantity=0), repository)

    assert repository.count() == 0
