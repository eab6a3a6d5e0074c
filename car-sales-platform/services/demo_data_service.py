"""
Demo data service.

Fills a repository with reproducible random sales so the reporting endpoints
can be tried without posting data by hand. Each generated sale picks a random
car model, a random catalog center, a quantity of 1..5 units and a sale date
within the last 30 days.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta
from typing import List, Optional

from domain.car_model import CarModel
from domain.sale import Sale
from domain.time import require_utc_timestamp, utc_now
from repositories.sale_repository import InMemorySaleRepository

logger = logging.getLogger(__name__)

DEFAULT_DEMO_SALES = 20
DEFAULT_SEED = 42
MAX_DEMO_QUANTITY = 5
DEMO_WINDOW_DAYS = 30


def seed_demo_sales(
    repository: InMemorySaleRepository,
    count: int = DEFAULT_DEMO_SALES,
    seed: int = DEFAULT_SEED,
    now: Optional[datetime] = None,
) -> List[Sale]:
    """
    Append `count` pseudo-random sales to the repository.

    The same seed always produces the same models, centers, quantities and
    day offsets.

    Args:
        repository: Store that receives the sales
        count: Number of sales to generate
        seed: Random seed
        now: UTC reference time for sale dates (default: now)

    Returns:
        The stored sales, in insertion order
    """

    if count < 0:
        raise ValueError("count must be >= 0")

    reference = now if now is not None else utc_now()
    require_utc_timestamp("now", reference)

    rng = random.Random(seed)
    models = list(CarModel)
    center_ids = [center.center_id for center in repository.get_all_distribution_centers()]

    created: List[Sale] = []
    for _ in range(count):
        car_model = rng.choice(models)
        center_id = rng.choice(center_ids)
        quantity = rng.randint(1, MAX_DEMO_QUANTITY)
        sale_date = reference - timedelta(days=rng.randrange(DEMO_WINDOW_DAYS))

        created.append(repository.add_sale(
            car_model=car_model,
            distribution_center_id=center_id,
            quantity=quantity,
            sale_date=sale_date,
        ))

    logger.info(f"Seeded {len(created)} demo sales (seed={seed})")
    return created


__all__ = ["seed_demo_sales"]
