"""
Order Endpoints

    - GET    /orders             List orders
    - POST   /orders             Create an order
    - GET    /orders/{order_id}  Read an order
    - PUT    /orders/{order_id}  Update an order (status required)
    - DELETE /orders/{order_id}  Delete a pending order
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from grubdash.schemas import DataEnvelope, ErrorResponse, OrderListResponse, OrderResponse
from grubdash.services import OrderService, RequestContext

router = APIRouter(prefix="/orders", tags=["Orders"])

NOT_FOUND = {404: {"model": ErrorResponse}}
INVALID = {400: {"model": ErrorResponse}}


def get_order_service(request: Request) -> OrderService:
    """Order service wired onto the application by the factory."""
    return request.app.state.order_service


@router.get(
    "",
    responses={200: {"model": OrderListResponse}},
    summary="List Orders",
)
async def list_orders(
    service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    return {"data": service.list.run()}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": OrderResponse}, **INVALID},
    summary="Create Order",
)
async def create_order(
    envelope: Optional[DataEnvelope] = None,
    service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    """
    Create an order from ``deliverTo``, ``mobileNumber`` and ``dishes``.

    ``status`` is optional here and stored as given.
    """
    body = envelope.body if envelope else {}
    return {"data": service.create.run(RequestContext(body=body))}


@router.get(
    "/{order_id}",
    responses={200: {"model": OrderResponse}, **NOT_FOUND},
    summary="Read Order",
)
async def read_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    return {"data": service.read.run(RequestContext(route_id=order_id))}


@router.put(
    "/{order_id}",
    responses={200: {"model": OrderResponse}, **INVALID, **NOT_FOUND},
    summary="Update Order",
)
async def update_order(
    order_id: str,
    envelope: Optional[DataEnvelope] = None,
    service: OrderService = Depends(get_order_service),
) -> dict[str, Any]:
    body = envelope.body if envelope else {}
    return {"data": service.update.run(RequestContext(body=body, route_id=order_id))}


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**INVALID, **NOT_FOUND},
    summary="Delete Order",
)
async def delete_order(
    order_id: str,
    service: OrderService = Depends(get_order_service),
) -> Response:
    """Delete an order. Only pending orders can be deleted."""
    service.destroy.run(RequestContext(route_id=order_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
