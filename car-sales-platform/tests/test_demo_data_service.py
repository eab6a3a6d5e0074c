"""
Tests for `services/demo_data_service.py`.

Covers rules:
- The requested number of sales is stored.
- The same seed reproduces the same sales.
- Quantities stay within 1..5, centers within the catalog, dates within 30 days.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from repositories.sale_repository import InMemorySaleRepository
from services.demo_data_service import seed_demo_sales

NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def _signature(sales):
    return [(s.car_model, s.distribution_center_id, s.quantity, s.sale_date) for s in sales]


def test_seed_demo_sales_stores_requested_count(repository: InMemorySaleRepository) -> None:
    """Verify the default seeding stores 20 sales with ids 1..20."""

    created = seed_demo_sales(repository, now=NOW)

    assert len(created) == 20
    assert [sale.sale_id for sale in repository.get_all_sales()] == list(range(1, 21))


def test_seed_demo_sales_is_reproducible() -> None:
    """Verify equal seeds give equal sales and different seeds differ."""

    first = seed_demo_sales(InMemorySaleRepository(), count=30, seed=42, now=NOW)
    second = seed_demo_sales(InMemorySaleRepository(), count=30, seed=42, now=NOW)
    other = seed_demo_sales(InMemorySaleRepository(), count=30, seed=7, now=NOW)

    assert _signature(first) == _signature(second)
    assert _signature(first) != _signature(other)


def test_seed_demo_sales_values_in_range(repository: InMemorySaleRepository) -> None:
    """Verify generated quantities, centers and dates stay inside their ranges."""

    created = seed_demo_sales(repository, count=100, seed=1, now=NOW)

    for sale in created:
        assert 1 <= sale.quantity <= 5
        assert 1 <= sale.distribution_center_id <= 4
        assert NOW - timedelta(days=29) <= sale.sale_date <= NOW


def test_seed_demo_sales_rejects_negative_count(repository: InMemorySaleRepository) -> None:
    """Verify a negative count raises ValueError."""

    with pytest.raises(ValueError):
        seed_demo_sales(repository, count=-1)


def test_seed_demo_sales_requires_utc_reference(repository: InMemorySaleRepository) -> None:
    """Verify a naive reference time is rejected."""

    with pytest.raises(ValueError):
        seed_demo_sales(repository, count=1, now=datetime(2025, 6, 1))
