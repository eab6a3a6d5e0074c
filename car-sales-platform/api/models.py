"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, field_validator


# ============================================================================
# Sale Models
# ============================================================================

class CreateSaleRequest(BaseModel):
    """Request to record a new sale."""
    car_model: str = Field(
        ...,
        description="Car model name (Sedan, SUV, Offroad, Sport; case-insensitive) or index (0-3)"
    )
    distribution_center_id: int = Field(
        ...,
        ge=1,
        le=4,
        description="Distribution center ID (1-4)"
    )
    quantity: int = Field(
        ...,
        ge=1,
        description="Units sold (must be greater than 0)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "car_model": "Sport",
                "distribution_center_id": 1,
                "quantity": 2
            }
        }

    @field_validator("car_model", mode="before")
    @classmethod
    def accept_numeric_index(cls, value):
        """Allow the model index to be sent as a JSON number."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class SaleResponse(BaseModel):
    """Response after a sale is recorded."""
    id: int
    car_model: str
    distribution_center_id: int
    distribution_center_name: str
    quantity: int
    unit_price: Decimal
    total_amount: Decimal
    sale_date: datetime
    message: str

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "car_model": "Sport",
                "distribution_center_id": 1,
                "distribution_center_name": "Centro Norte",
                "quantity": 2,
                "unit_price": "19474.00",
                "total_amount": "38948.00",
                "sale_date": "2025-01-01T12:00:00Z",
                "message": "Sale created successfully"
            }
        }


# ============================================================================
# Report Models
# ============================================================================

class TotalVolumeResponse(BaseModel):
    """Total units, amount (USD) and number of recorded sales."""
    total_units: int
    total_amount: Decimal
    total_sales: int

    class Config:
        json_schema_extra = {
            "example": {
                "total_units": 10,
                "total_amount": "107448.00",
                "total_sales": 3
            }
        }


class CenterVolumeResponse(BaseModel):
    """Sales volume for one distribution center."""
    distribution_center_id: int
    distribution_center_name: str
    total_units: int
    total_amount: Decimal
    total_sales: int


class VolumeByCenterResponse(BaseModel):
    """Sales volume grouped by distribution center."""
    centers: List[CenterVolumeResponse]
    grand_total_units: int
    grand_total_amount: Decimal

    class Config:
        json_schema_extra = {
            "example": {
                "centers": [
                    {
                        "distribution_center_id": 1,
                        "distribution_center_name": "Centro Norte",
                        "total_units": 7,
                        "total_amount": "78948.00",
                        "total_sales": 2
                    }
                ],
                "grand_total_units": 10,
                "grand_total_amount": "107448.00"
            }
        }


class ModelPercentageResponse(BaseModel):
    """Share of units for one car model in a center."""
    car_model: str
    units_sold: int
    percentage_of_center: Decimal
    percentage_of_total: Decimal


class CenterPercentageResponse(BaseModel):
    """Per-model breakdown for one distribution center."""
    distribution_center_id: int
    distribution_center_name: str
    total_units_in_center: int
    models: List[ModelPercentageResponse]


class PercentageByModelAndCenterResponse(BaseModel):
    """Share of units of each car model sold in each center."""
    centers: List[CenterPercentageResponse]
    total_units_global: int

    class Config:
        json_schema_extra = {
            "example": {
                "centers": [
                    {
                        "distribution_center_id": 1,
                        "distribution_center_name": "Centro Norte",
                        "total_units_in_center": 10,
                        "models": [
                            {
                                "car_model": "Sedan",
                                "units_sold": 6,
                                "percentage_of_center": "60.00",
                                "percentage_of_total": "60.00"
                            }
                        ]
                    }
                ],
                "total_units_global": 10
            }
        }


# ============================================================================
# Error Models
# ============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    detail: str

    class Config:
        json_schema_extra = {
            "example": {
                "detail": "Distribution center with ID 9 does not exist"
            }
        }
