"""
Domain: Distribution centers.

The catalog is fixed: four centers with ids 1..4, created once and never
changed. Sales reference a center by id only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class DistributionCenter:
    center_id: int
    name: str
    location: str


DISTRIBUTION_CENTERS: Tuple[DistributionCenter, ...] = (
    DistributionCenter(center_id=1, name="Centro Norte", location="Buenos Aires Norte"),
    DistributionCenter(center_id=2, name="Centro Sur", location="Buenos Aires Sur"),
    DistributionCenter(center_id=3, name="Centro Este", location="Región Este"),
    DistributionCenter(center_id=4, name="Centro Oeste", location="Región Oeste"),
)
