"""
Record Models

Dishes and orders are held as plain JSON-compatible dicts; these
TypedDicts document their shape and the order status lifecycle.
"""

import enum
from typing import TypedDict


class OrderStatus(str, enum.Enum):
    """
    Order status workflow.

    Any status may be set on update; an order can only be deleted
    while it is still pending.
    """
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def values(cls) -> list[str]:
        return [s.value for s in cls]


class Dish(TypedDict):
    id: str
    name: str
    description: str
    price: float
    image_url: str


class OrderLine(TypedDict, total=False):
    dishId: str
    quantity: int


class Order(TypedDict, total=False):
    id: str
    deliverTo: str
    mobileNumber: str
    dishes: list[OrderLine]
    status: str  # absent until first set, read as pending
