"""Request and response DTOs for calculation, health and welcome endpoints."""
from __future__ import annotations
from typing import List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

# JSON numbers only: strings, booleans and null are rejected, ints stay ints.
Number = Union[StrictInt, StrictFloat]


class CalculationRequest(BaseModel):
    """Two numeric operands for a binary operation."""
    # json.loads accepts NaN/Infinity tokens; they are not JSON numbers
    model_config = ConfigDict(allow_inf_nan=False, json_schema_extra={"example": {"a": 2, "b": 3}})

    a: Number = Field(..., description="First operand")
    b: Number = Field(..., description="Second operand")


class CalculationResponse(BaseModel):
    """Echoed operands and the computed result."""
    operation: Literal["sum", "product"] = Field(..., description="Operation applied")
    a: Number = Field(..., description="First operand")
    b: Number = Field(..., description="Second operand")
    result: Number = Field(..., description="Computed result")


class HealthStatus(BaseModel):
    status: Literal["healthy"] = Field("healthy", description="Liveness status")
    timestamp: str = Field(..., description="Current UTC time, ISO-8601")


class WelcomeResponse(BaseModel):
    message: str = Field(..., description="Welcome message")
    version: str = Field(..., description="Service version")
    endpoints: List[str] = Field(default_factory=list, description="Available endpoints")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Human readable error")
