"""
                        Services Module

Request pipelines for each resource. A service is bound to the store it
operates on and exposes one ``Pipeline`` per CRUD operation.

Services:
    - dishes: list/create/read/update
    - orders: list/create/read/update/destroy
"""

from grubdash.services.pipeline import Pipeline, RequestContext
from grubdash.services.dishes import DishService
from grubdash.services.orders import OrderService

__all__ = ["Pipeline", "RequestContext", "DishService", "OrderService"]
