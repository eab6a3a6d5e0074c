#!/usr/bin/env python3
"""
Sales Report Script

Fills an in-memory store with demo sales and prints the three sales reports:
total volume, volume by center and percentage by model and center.

Usage:
    python scripts/sales_report.py
    python scripts/sales_report.py --count 50 --seed 7
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from repositories.sale_repository import InMemorySaleRepository
from services.demo_data_service import DEFAULT_DEMO_SALES, DEFAULT_SEED, seed_demo_sales
from services.reporting_service import (
    get_percentage_by_model_and_center,
    get_total_volume,
    get_volume_by_center,
)


def print_reports(repository: InMemorySaleRepository) -> None:
    total = get_total_volume(repository)
    print("=" * 60)
    print("TOTAL VOLUME")
    print("=" * 60)
    print(f"  Units:  {total.total_units}")
    print(f"  Amount: ${total.total_amount:,} USD")
    print(f"  Sales:  {total.total_sales}")
    print()

    by_center = get_volume_by_center(repository)
    print("=" * 60)
    print("VOLUME BY CENTER")
    print("=" * 60)
    for center in by_center.centers:
        print(
            f"  [{center.center_id}] {center.center_name:<14} "
            f"units={center.total_units:<4} amount=${center.total_amount:>12,} sales={center.total_sales}"
        )
    print(f"  Grand total: {by_center.grand_total_units} units, ${by_center.grand_total_amount:,} USD")
    print()

    percentages = get_percentage_by_model_and_center(repository)
    print("=" * 60)
    print("PERCENTAGE BY MODEL AND CENTER")
    print("=" * 60)
    for center in percentages.centers:
        print(f"  [{center.center_id}] {center.center_name} ({center.total_units_in_center} units)")
        if not center.models:
            print("      (no sales)")
        for model in center.models:
            print(
                f"      {model.car_model:<8} units={model.units_sold:<4} "
                f"center={model.percentage_of_center:>6}% total={model.percentage_of_total:>6}%"
            )
    print(f"  Global units: {percentages.total_units_global}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Print sales reports over generated demo sales")
    parser.add_argument("--count", type=int, default=DEFAULT_DEMO_SALES, help="Number of demo sales to generate")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed for demo sales")
    args = parser.parse_args()

    if args.count < 0:
        parser.error("--count must be >= 0")

    repository = InMemorySaleRepository()
    seed_demo_sales(repository, count=args.count, seed=args.seed)
    print_reports(repository)
    return 0


if __name__ == "__main__":
    sys.exit(main())
