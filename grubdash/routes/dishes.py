"""
Dish Endpoints

    - GET  /dishes            List dishes
    - POST /dishes            Create a dish
    - GET  /dishes/{dish_id}  Read a dish
    - PUT  /dishes/{dish_id}  Update a dish
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, status

from grubdash.schemas import DataEnvelope, DishListResponse, DishResponse, ErrorResponse
from grubdash.services import DishService, RequestContext

router = APIRouter(prefix="/dishes", tags=["Dishes"])

NOT_FOUND = {404: {"model": ErrorResponse}}
INVALID = {400: {"model": ErrorResponse}}


def get_dish_service(request: Request) -> DishService:
    """Dish service wired onto the application by the factory."""
    return request.app.state.dish_service


@router.get(
    "",
    responses={200: {"model": DishListResponse}},
    summary="List Dishes",
)
async def list_dishes(
    service: DishService = Depends(get_dish_service),
) -> dict[str, Any]:
    return {"data": service.list.run()}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": DishResponse}, **INVALID},
    summary="Create Dish",
)
async def create_dish(
    envelope: Optional[DataEnvelope] = None,
    service: DishService = Depends(get_dish_service),
) -> dict[str, Any]:
    """Create a dish from ``name``, ``description``, ``price`` and ``image_url``."""
    body = envelope.body if envelope else {}
    return {"data": service.create.run(RequestContext(body=body))}


@router.get(
    "/{dish_id}",
    responses={200: {"model": DishResponse}, **NOT_FOUND},
    summary="Read Dish",
)
async def read_dish(
    dish_id: str,
    service: DishService = Depends(get_dish_service),
) -> dict[str, Any]:
    return {"data": service.read.run(RequestContext(route_id=dish_id))}


@router.put(
    "/{dish_id}",
    responses={200: {"model": DishResponse}, **INVALID, **NOT_FOUND},
    summary="Update Dish",
)
async def update_dish(
    dish_id: str,
    envelope: Optional[DataEnvelope] = None,
    service: DishService = Depends(get_dish_service),
) -> dict[str, Any]:
    """
    Replace the fields of a dish.

    A body ``id`` is optional but must match the route when given.
    """
    body = envelope.body if envelope else {}
    return {"data": service.update.run(RequestContext(body=body, route_id=dish_id))}
