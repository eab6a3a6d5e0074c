"""
Sales API Endpoints.

Endpoints for recording car sales and reading aggregate sales reports.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.models import (
    CenterPercentageResponse,
    CenterVolumeResponse,
    CreateSaleRequest,
    ErrorResponse,
    ModelPercentageResponse,
    PercentageByModelAndCenterResponse,
    SaleResponse,
    TotalVolumeResponse,
    VolumeByCenterResponse,
)
from domain.errors import SaleValidationError
from repositories.sale_repository import InMemorySaleRepository, get_sale_repository
from services.reporting_service import (
    get_percentage_by_model_and_center,
    get_total_volume,
    get_volume_by_center,
)
from services.sales_service import CreateSaleCommand, create_sale

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_ERROR_DETAIL = "Internal server error"


@router.post(
    "/sales",
    response_model=SaleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Create Sale",
    description="Record a new car sale. Unit price and total amount are calculated from the car model."
)
def create_car_sale(
    request: CreateSaleRequest,
    repository: InMemorySaleRepository = Depends(get_sale_repository),
):
    """
    Record a sale of a car model at a distribution center.

    **Car model** may be given as a name or an index:
    - `Sedan` / `0`: $8,000
    - `SUV` / `1`: $9,500
    - `Offroad` / `2`: $12,500
    - `Sport` / `3`: $18,200 plus 7% surcharge ($19,474)

    Names are case-insensitive.

    **Example request:**
    ```json
    {
      "car_model": "Sport",
      "distribution_center_id": 1,
      "quantity": 2
    }
    ```
    """
    try:
        logger.info(
            f"Creating sale: model={request.car_model}, center={request.distribution_center_id}, "
            f"quantity={request.quantity}"
        )

        result = create_sale(
            CreateSaleCommand(
                car_model=request.car_model,
                distribution_center_id=request.distribution_center_id,
                quantity=request.quantity,
            ),
            repository,
        )

        logger.info(f"Sale created with ID: {result.sale_id}")

        return SaleResponse(
            id=result.sale_id,
            car_model=result.car_model,
            distribution_center_id=result.distribution_center_id,
            distribution_center_name=result.distribution_center_name,
            quantity=result.quantity,
            unit_price=result.unit_price,
            total_amount=result.total_amount,
            sale_date=result.sale_date,
            message=result.message,
        )

    except SaleValidationError as e:
        logger.warning(f"Validation error while creating sale: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception:
        logger.exception("Unexpected error while creating sale")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL
        )


@router.get(
    "/sales/total-volume",
    response_model=TotalVolumeResponse,
    summary="Total Sales Volume",
    description="Total units sold, total amount in USD and number of recorded sales."
)
def read_total_volume(repository: InMemorySaleRepository = Depends(get_sale_repository)):
    """
    Get the total sales volume across all distribution centers.

    Returns zeros when no sales have been recorded.
    """
    try:
        report = get_total_volume(repository)

        return TotalVolumeResponse(
            total_units=report.total_units,
            total_amount=report.total_amount,
            total_sales=report.total_sales,
        )

    except Exception:
        logger.exception("Error while computing total sales volume")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL
        )


@router.get(
    "/sales/volume-by-center",
    response_model=VolumeByCenterResponse,
    summary="Sales Volume by Center",
    description="Units, amount and number of sales for every distribution center."
)
def read_volume_by_center(repository: InMemorySaleRepository = Depends(get_sale_repository)):
    """
    Get sales volume grouped by distribution center.

    Every center is listed, including centers without sales.
    """
    try:
        report = get_volume_by_center(repository)

        return VolumeByCenterResponse(
            centers=[
                CenterVolumeResponse(
                    distribution_center_id=center.center_id,
                    distribution_center_name=center.center_name,
                    total_units=center.total_units,
                    total_amount=center.total_amount,
                    total_sales=center.total_sales,
                )
                for center in report.centers
            ],
            grand_total_units=report.grand_total_units,
            grand_total_amount=report.grand_total_amount,
        )

    except Exception:
        logger.exception("Error while computing sales volume by center")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL
        )


@router.get(
    "/sales/percentage-by-model-and-center",
    response_model=PercentageByModelAndCenterResponse,
    summary="Model Percentage by Center",
    description="Share of units of each car model within each center and within all sales."
)
def read_percentage_by_model_and_center(repository: InMemorySaleRepository = Depends(get_sale_repository)):
    """
    Get the percentage of units of each car model sold in each center.

    **Two percentages per model:**
    1. `percentage_of_center`: share of the units sold in that center
    2. `percentage_of_total`: share of all units sold

    Percentages are rounded to 2 decimal places.
    """
    try:
        report = get_percentage_by_model_and_center(repository)

        return PercentageByModelAndCenterResponse(
            centers=[
                CenterPercentageResponse(
                    distribution_center_id=center.center_id,
                    distribution_center_name=center.center_name,
                    total_units_in_center=center.total_units_in_center,
                    models=[
                        ModelPercentageResponse(
                            car_model=model.car_model,
                            units_sold=model.units_sold,
                            percentage_of_center=model.percentage_of_center,
                            percentage_of_total=model.percentage_of_total,
                        )
                        for model in center.models
                    ],
                )
                for center in report.centers
            ],
            total_units_global=report.total_units_global,
        )

    except Exception:
        logger.exception("Error while computing percentage by model and center")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INTERNAL_ERROR_DETAIL
        )
