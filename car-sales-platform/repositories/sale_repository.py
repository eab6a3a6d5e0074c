"""
Sale repository (in-memory persistence).

This module owns the authoritative list of Sale records and the fixed catalog
of distribution centers. It assigns sale ids and prices each record through the
domain, but does not enforce business rules such as referential integrity of
distribution_center_id; the sales service checks that before calling add_sale.

Concurrency:
- A single lock guards both the id counter and the append, so ids are unique
  and strictly increasing even when requests are served from several threads.
- Reads copy the sales list under the same lock and work on that snapshot.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from domain.car_model import CarModel
from domain.distribution_center import DISTRIBUTION_CENTERS, DistributionCenter
from domain.sale import Sale
from domain.time import utc_now

logger = logging.getLogger(__name__)


class InMemorySaleRepository:
    """
    Append-only store of sales for the lifetime of the process.

    The sale id is the record's position in the log plus one.
    """

    def __init__(self, distribution_centers: Iterable[DistributionCenter] = DISTRIBUTION_CENTERS) -> None:
        self._lock = threading.Lock()
        self._sales: List[Sale] = []
        self._next_sale_id = 1
        self._distribution_centers: Tuple[DistributionCenter, ...] = tuple(distribution_centers)
        self._centers_by_id: Dict[int, DistributionCenter] = {
            center.center_id: center for center in self._distribution_centers
        }

    def add_sale(
        self,
        car_model: CarModel,
        distribution_center_id: int,
        quantity: int,
        sale_date: Optional[datetime] = None,
    ) -> Sale:
        """
        Price, number and append a new sale.

        Args:
            car_model: Model sold
            distribution_center_id: Center the sale belongs to (not validated here)
            quantity: Units sold, must be > 0
            sale_date: UTC timestamp of the sale (default: now)

        Returns:
            The stored, immutable Sale

        Nothing is stored if the record cannot be built.
        """

        with self._lock:
            sale = Sale.priced(
                sale_id=self._next_sale_id,
                car_model=car_model,
                distribution_center_id=distribution_center_id,
                quantity=quantity,
                sale_date=sale_date if sale_date is not None else utc_now(),
            )
            self._sales.append(sale)
            self._next_sale_id += 1

        logger.debug(
            "Stored sale",
            extra={"sale_id": sale.sale_id, "car_model": sale.car_model.value, "center_id": distribution_center_id},
        )
        return sale

    def get_distribution_center(self, center_id: int) -> Optional[DistributionCenter]:
        return self._centers_by_id.get(center_id)

    def get_all_distribution_centers(self) -> Tuple[DistributionCenter, ...]:
        """All centers in catalog order."""

        return self._distribution_centers

    def get_all_sales(self) -> Tuple[Sale, ...]:
        """Snapshot of every sale in insertion order."""

        with self._lock:
            return tuple(self._sales)

    def get_sales_by_center(self, center_id: int) -> List[Sale]:
        """Sales for one center in insertion order; empty for unknown centers."""

        return [sale for sale in self.get_all_sales() if sale.distribution_center_id == center_id]

    def get_sales_grouped_by_center(self) -> Dict[int, List[Sale]]:
        """Only centers with at least one sale appear as keys."""

        return group_by_center(self.get_all_sales())

    def get_sales_grouped_by_center_and_model(self) -> Dict[int, Dict[CarModel, List[Sale]]]:
        """Only centers and models with at least one sale appear as keys."""

        return group_by_center_and_model(self.get_all_sales())

    def count(self) -> int:
        with self._lock:
            return len(self._sales)


def group_by_center(sales: Iterable[Sale]) -> Dict[int, List[Sale]]:
    grouped: Dict[int, List[Sale]] = {}
    for sale in sales:
        grouped.setdefault(sale.distribution_center_id, []).append(sale)
    return grouped


def group_by_center_and_model(sales: Iterable[Sale]) -> Dict[int, Dict[CarModel, List[Sale]]]:
    grouped: Dict[int, Dict[CarModel, List[Sale]]] = {}
    for sale in sales:
        by_model = grouped.setdefault(sale.distribution_center_id, {})
        by_model.setdefault(sale.car_model, []).append(sale)
    return grouped


# Process-wide store shared by the API layer.
_default_repository = InMemorySaleRepository()


def get_sale_repository() -> InMemorySaleRepository:
    """Return the process-wide repository (used as a FastAPI dependency)."""

    return _default_repository


__all__ = [
    "InMemorySaleRepository",
    "group_by_center",
    "group_by_center_and_model",
    "get_sale_repository",
]
