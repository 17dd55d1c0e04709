"""
Pydantic Schemas for Request/Response Envelopes

Request bodies arrive as ``{"data": {...}}``; the fields inside ``data``
are checked by the service pipelines rather than by pydantic so that each
failure reports the same message as the rest of the API. The record
schemas below document the response shapes in the OpenAPI docs.
"""

from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from grubdash.models import OrderStatus


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class DataEnvelope(BaseModel):
    """Request body wrapper."""
    data: Optional[dict[str, Any]] = Field(
        default=None,
        examples=[{"name": "Falafel bagel", "description": "Warm", "price": 6, "image_url": "https://..."}],
    )

    @property
    def body(self) -> dict[str, Any]:
        return self.data or {}


# =============================================================================
# RECORD SCHEMAS
# =============================================================================

class DishSchema(BaseModel):
    """A dish as returned by the API."""
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str
    price: Union[int, float] = Field(..., ge=0)
    image_url: str


class OrderLineSchema(BaseModel):
    """One line of an order."""
    model_config = ConfigDict(extra="allow")

    dishId: Optional[str] = None
    quantity: int = Field(..., gt=0)


class OrderSchema(BaseModel):
    """An order as returned by the API."""
    model_config = ConfigDict(extra="allow")

    id: str
    deliverTo: str
    mobileNumber: str
    dishes: List[OrderLineSchema] = Field(..., min_length=1)
    status: Optional[OrderStatus] = None


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class DishResponse(BaseModel):
    data: DishSchema


class DishListResponse(BaseModel):
    data: List[DishSchema]


class OrderResponse(BaseModel):
    data: OrderSchema


class OrderListResponse(BaseModel):
    data: List[OrderSchema]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    errors: Optional[List[dict[str, Any]]] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    dishes: int
    orders: int
    timestamp: datetime
