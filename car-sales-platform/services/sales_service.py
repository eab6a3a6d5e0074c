"""
Sales service for recording new car sales.

Validation order is fixed:
1. parse the car model text
2. resolve the distribution center
3. store the priced sale

A request with both a bad model and an unknown center reports the model error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from domain.car_model import CarModel
from domain.errors import DistributionCenterNotFoundError, InvalidQuantityError
from repositories.sale_repository import InMemorySaleRepository

logger = logging.getLogger(__name__)

SALE_CREATED_MESSAGE = "Sale created successfully"


@dataclass(frozen=True, slots=True)
class CreateSaleCommand:
    """
    Request to record a sale.

    car_model accepts a canonical name ("Sedan", "suv", ...) or an index ("0".."3").
    """
    car_model: str
    distribution_center_id: int
    quantity: int


@dataclass(frozen=True, slots=True)
class SaleResult:
    """
    Outcome of a successful sale creation.

    Carries every stored Sale field plus the resolved center name and a
    confirmation message for the caller.
    """
    sale_id: int
    car_model: str
    distribution_center_id: int
    distribution_center_name: str
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    sale_date: datetime
    message: str = SALE_CREATED_MESSAGE


def create_sale(command: CreateSaleCommand, repository: InMemorySaleRepository) -> SaleResult:
    """
    Validate, price and store a sale.

    Args:
        command: Sale creation request
        repository: Store that receives the sale

    Returns:
        SaleResult describing the stored sale

    Raises:
        EmptyCarModelError, InvalidCarModelIndexError, InvalidCarModelNameError:
            If the car model text cannot be interpreted
        DistributionCenterNotFoundError: If the center id does not exist
        InvalidQuantityError: If quantity is not positive

    Example:
        result = create_sale(CreateSaleCommand("sport", 1, 2), repository)
        # result.unit_price == Decimal('19474.00'), result.total_amount == Decimal('38948.00')
    """

    car_model = CarModel.parse(command.car_model)

    center = repository.get_distribution_center(command.distribution_center_id)
    if center is None:
        raise DistributionCenterNotFoundError(command.distribution_center_id)

    if command.quantity <= 0:
        raise InvalidQuantityError(command.quantity)

    sale = repository.add_sale(
        car_model=car_model,
        distribution_center_id=center.center_id,
        quantity=command.quantity,
    )

    logger.info(
        f"Sale {sale.sale_id} recorded: {sale.quantity} x {sale.car_model.value} at {center.name}",
        extra={
            "sale_id": sale.sale_id,
            "car_model": sale.car_model.value,
            "center_id": center.center_id,
            "total_amount": str(sale.total_amount),
        },
    )

    return SaleResult(
        sale_id=sale.sale_id,
        car_model=sale.car_model.value,
        distribution_center_id=sale.distribution_center_id,
        distribution_center_name=center.name,
        quantity=sale.quantity,
        unit_price=sale.unit_price,
        total_amount=sale.total_amount,
        sale_date=sale.sale_date,
    )


__all__ = [
    "CreateSaleCommand",
    "SaleResult",
    "create_sale",
]
