"""HTTP routers for each resource."""

from grubdash.routes.dishes import router as dishes_router
from grubdash.routes.orders import router as orders_router

__all__ = ["dishes_router", "orders_router"]
