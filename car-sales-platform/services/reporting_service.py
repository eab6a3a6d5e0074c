"""
Reporting service for aggregate sales figures.

Reports:
- Total volume: units, amount and number of sales across the whole store
- Volume by center: the same figures per distribution center
- Percentage by model and center: each model's share of units within its
  center and within all sales

Every catalog center appears in the per-center reports, including centers
with no sales. Each report is computed from a single snapshot of the store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import List

from domain.pricing import CENTS
from repositories.sale_repository import InMemorySaleRepository, group_by_center, group_by_center_and_model

logger = logging.getLogger(__name__)

_ZERO_AMOUNT = Decimal("0.00")


@dataclass(frozen=True, slots=True)
class TotalVolumeReport:
    total_units: int
    total_amount: Decimal
    total_sales: int


@dataclass(frozen=True, slots=True)
class CenterVolume:
    center_id: int
    center_name: str
    total_units: int
    total_amount: Decimal
    total_sales: int


@dataclass(frozen=True, slots=True)
class VolumeByCenterReport:
    centers: List[CenterVolume]
    grand_total_units: int
    grand_total_amount: Decimal


@dataclass(frozen=True, slots=True)
class ModelPercentage:
    """
    Share of one car model's units.

    percentage_of_center: units / units sold in this center * 100
    percentage_of_total: units / units sold everywhere * 100
    Both rounded to 2 decimals; 0 when the denominator is 0.
    """
    car_model: str
    units_sold: int
    percentage_of_center: Decimal
    percentage_of_total: Decimal


@dataclass(frozen=True, slots=True)
class CenterPercentage:
    center_id: int
    center_name: str
    total_units_in_center: int
    models: List[ModelPercentage]


@dataclass(frozen=True, slots=True)
class PercentageByModelAndCenterReport:
    centers: List[CenterPercentage]
    total_units_global: int


def percentage(part: int, whole: int) -> Decimal:
    """
    part / whole * 100 rounded half-to-even to 2 decimal places.

    Example:
        percentage(1, 3)  # Decimal('33.33')
        percentage(5, 0)  # Decimal('0.00')
    """

    if whole == 0:
        return _ZERO_AMOUNT
    return (Decimal(part) * 100 / Decimal(whole)).quantize(CENTS, rounding=ROUND_HALF_EVEN)


def get_total_volume(repository: InMemorySaleRepository) -> TotalVolumeReport:
    sales = repository.get_all_sales()

    report = TotalVolumeReport(
        total_units=sum(sale.quantity for sale in sales),
        total_amount=sum((sale.total_amount for sale in sales), _ZERO_AMOUNT),
        total_sales=len(sales),
    )

    logger.info(
        f"Total volume: {report.total_units} units, ${report.total_amount} USD, {report.total_sales} sales"
    )
    return report


def get_volume_by_center(repository: InMemorySaleRepository) -> VolumeByCenterReport:
    """
    Units, amount and sale count per distribution center, in catalog order.

    The grand totals are the sums over the listed centers.
    """

    sales_by_center = group_by_center(repository.get_all_sales())

    centers: List[CenterVolume] = []
    for center in repository.get_all_distribution_centers():
        center_sales = sales_by_center.get(center.center_id, [])
        centers.append(CenterVolume(
            center_id=center.center_id,
            center_name=center.name,
            total_units=sum(sale.quantity for sale in center_sales),
            total_amount=sum((sale.total_amount for sale in center_sales), _ZERO_AMOUNT),
            total_sales=len(center_sales),
        ))

    report = VolumeByCenterReport(
        centers=centers,
        grand_total_units=sum(center.total_units for center in centers),
        grand_total_amount=sum((center.total_amount for center in centers), _ZERO_AMOUNT),
    )

    logger.info(
        f"Volume by center: {len(centers)} centers, {report.grand_total_units} units, "
        f"${report.grand_total_amount} USD"
    )
    return report


def get_percentage_by_model_and_center(repository: InMemorySaleRepository) -> PercentageByModelAndCenterReport:
    """
    Share of units per car model within each center and within all sales.

    Models inside a center are sorted by canonical name, ignoring case, so
    SUV follows Sport. Centers without sales report zero units and an empty
    model list.
    """

    sales = repository.get_all_sales()
    sales_by_center_and_model = group_by_center_and_model(sales)
    total_units_global = sum(sale.quantity for sale in sales)

    centers: List[CenterPercentage] = []
    for center in repository.get_all_distribution_centers():
        model_sales = sales_by_center_and_model.get(center.center_id, {})
        total_units_in_center = sum(
            sale.quantity for sales_of_model in model_sales.values() for sale in sales_of_model
        )

        models: List[ModelPercentage] = []
        for car_model, sales_of_model in model_sales.items():
            units_sold = sum(sale.quantity for sale in sales_of_model)
            models.append(ModelPercentage(
                car_model=car_model.value,
                units_sold=units_sold,
                percentage_of_center=percentage(units_sold, total_units_in_center),
                percentage_of_total=percentage(units_sold, total_units_global),
            ))
        models.sort(key=lambda item: item.car_model.casefold())

        centers.append(CenterPercentage(
            center_id=center.center_id,
            center_name=center.name,
            total_units_in_center=total_units_in_center,
            models=models,
        ))

    logger.info(f"Percentage by model and center computed over {total_units_global} units")

    return PercentageByModelAndCenterReport(
        centers=centers,
        total_units_global=total_units_global,
    )


__all__ = [
    "TotalVolumeReport",
    "CenterVolume",
    "VolumeByCenterReport",
    "ModelPercentage",
    "CenterPercentage",
    "PercentageByModelAndCenterReport",
    "percentage",
    "get_total_volume",
    "get_volume_by_center",
    "get_percentage_by_model_and_center",
]
