"""
Domain: Sale records.

Rules implemented here:
- A Sale is created exactly once and never updated or deleted.
- unit_price and total_amount are derived from the pricing table and the
  quantity; they can never be set independently.
- sale_date is a UTC timestamp.

Sale ids are assigned by the repository that owns the record.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .car_model import CarModel
from .errors import InvalidQuantityError
from .pricing import calculate_sale_price
from .time import require_utc_timestamp


@dataclass(frozen=True, slots=True)
class Sale:
    """
    Immutable record of one sale: a quantity of one car model sold through
    one distribution center.

    Use Sale.priced() to build a record; the constructor only accepts amounts
    that agree with the pricing table.
    """

    sale_id: int
    car_model: CarModel
    distribution_center_id: int
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    sale_date: datetime

    def __post_init__(self) -> None:
        if self.sale_id < 1:
            raise ValueError("sale_id must be >= 1")
        if self.quantity <= 0:
            raise InvalidQuantityError(self.quantity)
        require_utc_timestamp("sale_date", self.sale_date)

        expected = calculate_sale_price(self.car_model, self.quantity)
        if self.unit_price != expected.unit_price or self.total_amount != expected.total_amount:
            raise ValueError(
                f"Sale amounts do not match the pricing table for {self.car_model.value} x {self.quantity}"
            )

    @classmethod
    def priced(
        cls,
        sale_id: int,
        car_model: CarModel,
        distribution_center_id: int,
        quantity: int,
        sale_date: datetime,
    ) -> "Sale":
        """Build a Sale with unit_price and total_amount taken from the pricing table."""

        if quantity <= 0:
            raise InvalidQuantityError(quantity)

        price = calculate_sale_price(car_model, quantity)
        return cls(
            sale_id=sale_id,
            car_model=car_model,
            distribution_center_id=distribution_center_id,
            quantity=quantity,
            unit_price=price.unit_price,
            total_amount=price.total_amount,
            sale_date=sale_date,
        )
