"""
Domain: Car models.

Rules implemented here:
- Exactly four models exist, in fixed index order:
  0 = Sedan, 1 = SUV, 2 = Offroad, 3 = Sport
- Callers may name a model either by its index or by its canonical name
  (case-insensitive, surrounding whitespace ignored).
- Numeric input is only ever treated as an index; it is never matched
  against names.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional

from .errors import EmptyCarModelError, InvalidCarModelIndexError, InvalidCarModelNameError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class CarModel(str, Enum):
    SEDAN = "Sedan"
    SUV = "SUV"
    OFFROAD = "Offroad"
    SPORT = "Sport"

    @staticmethod
    def canonical_names() -> List[str]:
        return [model.value for model in CarModel]

    @staticmethod
    def from_index(index: int) -> "CarModel":
        """
        Resolve a CarModel from its numeric index.

        Raises InvalidCarModelIndexError for anything outside 0..3.
        """

        models = list(CarModel)
        if 0 <= index < len(models):
            return models[index]
        valid = ", ".join(f"{i} ({model.value})" for i, model in enumerate(models))
        raise InvalidCarModelIndexError(index, valid)

    @staticmethod
    def from_name(name: str) -> "CarModel":
        """Resolve a CarModel from its canonical name, ignoring case."""

        wanted = name.strip().casefold()
        for model in CarModel:
            if model.value.casefold() == wanted:
                return model
        raise InvalidCarModelNameError(name, CarModel.canonical_names())

    @staticmethod
    def parse(text: Optional[str]) -> "CarModel":
        """
        Interpret free-form caller input as a CarModel.

        Order matters:
        1. strip whitespace; empty input raises EmptyCarModelError
        2. an integer is treated as an index only
        3. anything else must match a canonical name
        """

        stripped = (text or "").strip()
        if not stripped:
            raise EmptyCarModelError()

        if _INTEGER_PATTERN.fullmatch(stripped):
            return CarModel.from_index(int(stripped))

        return CarModel.from_name(stripped)
