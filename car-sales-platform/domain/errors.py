"""
Domain: error taxonomy for sale creation.

Caller-input errors derive from SaleValidationError and are safe to report back
to the client verbatim. UnknownCarModelError signals a broken internal invariant
and must surface as an internal failure.
"""

from __future__ import annotations

from typing import Sequence


class SaleValidationError(ValueError):
    """Base class for errors the caller can fix by correcting its input."""
    pass


class EmptyCarModelError(SaleValidationError):
    """Raised when the car model text is empty or whitespace-only."""

    def __init__(self) -> None:
        super().__init__("Car model cannot be empty")


class InvalidCarModelIndexError(SaleValidationError):
    """Raised when a numeric car model does not map to any known model."""

    def __init__(self, index: int, valid_indexes: str) -> None:
        self.index = index
        super().__init__(
            f"Index {index} does not correspond to any valid car model. "
            f"Valid values are: {valid_indexes}"
        )


class InvalidCarModelNameError(SaleValidationError):
    """Raised when a car model name matches none of the canonical names."""

    def __init__(self, value: str, valid_names: Sequence[str]) -> None:
        self.value = value
        self.valid_names = list(valid_names)
        super().__init__(
            f"Car model '{value}' is not valid. "
            f"Valid models are: {', '.join(self.valid_names)}"
        )


class DistributionCenterNotFoundError(SaleValidationError):
    """Raised when a sale references a distribution center id that does not exist."""

    def __init__(self, center_id: int) -> None:
        self.center_id = center_id
        super().__init__(f"Distribution center with ID {center_id} does not exist")


class InvalidQuantityError(SaleValidationError):
    """Raised when a sale quantity is not a positive integer."""

    def __init__(self, quantity: int) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be greater than 0, got {quantity}")


class UnknownCarModelError(RuntimeError):
    """Raised when the pricing table has no entry for a car model."""
    pass


__all__ = [
    "SaleValidationError",
    "EmptyCarModelError",
    "InvalidCarModelIndexError",
    "InvalidCarModelNameError",
    "DistributionCenterNotFoundError",
    "InvalidQuantityError",
    "UnknownCarModelError",
]
