"""Calculation endpoints: sum and product of two numbers.

Bodies are validated by CalculationRequest before the handler runs; a
non-numeric or missing operand never reaches the operation library and is
answered with 400 {"error": "Both a and b must be numbers"}.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter

from src.models.calculation import CalculationRequest, CalculationResponse, ErrorResponse
from src.services.operations import OPERATIONS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])

_ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Operands are not both numbers"}}


def _calculate(operation: str, payload: CalculationRequest) -> CalculationResponse:
    result = OPERATIONS[operation](payload.a, payload.b)
    logger.debug("Computed %s", operation)
    return CalculationResponse(operation=operation, a=payload.a, b=payload.b, result=result)


# PUBLIC_INTERFACE
@router.post("/sum", response_model=CalculationResponse, responses=_ERROR_RESPONSES, summary="Sum", description="Add two numbers.")
def calculate_sum(payload: CalculationRequest):
    """Return a + b along with the echoed operands."""
    return _calculate("sum", payload)


# PUBLIC_INTERFACE
@router.post("/product", response_model=CalculationResponse, responses=_ERROR_RESPONSES, summary="Product", description="Multiply two numbers.")
def calculate_product(payload: CalculationRequest):
    """Return a * b along with the echoed operands."""
    return _calculate("product", payload)
