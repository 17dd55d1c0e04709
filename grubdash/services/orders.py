"""
Order Service

Validation steps and pipelines for the order endpoints. Orders carry the
only real rules in the API:
    - every order needs a delivery address, a mobile number and at
      least one dish line with a positive integer quantity
    - updates must name one of the known statuses
    - only pending orders may be deleted

Status transitions are otherwise unrestricted: any status may be replaced
by any other on update.
"""

import logging
from typing import Any

from grubdash.core.exceptions import InvalidRequest, NotFound
from grubdash.core.ids import next_id
from grubdash.models import Order, OrderStatus
from grubdash.services.pipeline import Pipeline, RequestContext
from grubdash.services.validation import is_missing, is_positive_integer, check_route_id
from grubdash.stores import OrderStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("deliverTo", "mobileNumber", "dishes")
CREATE_FIELDS = REQUIRED_FIELDS + ("status",)
UPDATABLE_FIELDS = REQUIRED_FIELDS + ("status",)


def current_status(order: Order) -> str:
    """Stored status of an order; orders created without one are pending."""
    return order.get("status") or OrderStatus.PENDING.value


class OrderService:
    """Order operations bound to one order store."""

    def __init__(self, store: OrderStore):
        self.store = store

        self.list = Pipeline("orders.list", [], self._list)
        self.create = Pipeline(
            "orders.create",
            [self.required_fields, self.valid_dishes],
            self._create,
        )
        self.read = Pipeline("orders.read", [self.order_exists], self._read)
        self.update = Pipeline(
            "orders.update",
            [
                self.order_exists,
                self.required_fields,
                self.valid_dishes,
                self.id_matches_route,
                self.valid_status,
            ],
            self._update,
        )
        self.destroy = Pipeline(
            "orders.destroy",
            [self.order_exists, self.is_pending],
            self._destroy,
        )

    # =========================================================================
    # VALIDATION STEPS
    # =========================================================================

    def required_fields(self, context: RequestContext) -> RequestContext:
        for name in REQUIRED_FIELDS:
            if is_missing(context.body.get(name)):
                raise InvalidRequest(f"Order must include a {name}")
        return context

    def valid_dishes(self, context: RequestContext) -> RequestContext:
        """Require a non-empty list of lines, each with a positive integer quantity."""
        dishes = context.body.get("dishes")
        if not isinstance(dishes, list) or not dishes:
            raise InvalidRequest("Order must include at least one dish")

        for index, line in enumerate(dishes):
            quantity = line.get("quantity") if isinstance(line, dict) else None
            if not is_positive_integer(quantity):
                raise InvalidRequest(
                    f"Dish {index} must have a quantity that is an integer greater than 0",
                    errors=[{"index": index, "field": "quantity"}],
                )

        for line in dishes:
            line["quantity"] = int(line["quantity"])
        return context

    def order_exists(self, context: RequestContext) -> RequestContext:
        order = self.store.find(context.route_id)
        if order is None:
            raise NotFound(f"Order does not exist: {context.route_id}")
        context.record = order
        return context

    def id_matches_route(self, context: RequestContext) -> RequestContext:
        check_route_id("Order", context)
        return context

    def valid_status(self, context: RequestContext) -> RequestContext:
        if context.body.get("status") not in OrderStatus.values():
            raise InvalidRequest(
                "Order must have a status of " + ", ".join(OrderStatus.values())
            )
        return context

    def is_pending(self, context: RequestContext) -> RequestContext:
        if current_status(context.record) != OrderStatus.PENDING.value:
            raise InvalidRequest("An order cannot be deleted unless it is pending")
        return context

    # =========================================================================
    # HANDLERS
    # =========================================================================

    def _list(self, context: RequestContext) -> list[dict[str, Any]]:
        return self.store.all()

    def _create(self, context: RequestContext) -> dict[str, Any]:
        order = {name: context.body[name] for name in CREATE_FIELDS if name in context.body}
        order["id"] = next_id(self.store.max_id())
        self.store.append(order)
        logger.info(f"Order {order['id']} created with {len(order['dishes'])} dish line(s)")
        return order

    def _read(self, context: RequestContext) -> dict[str, Any]:
        return context.record

    def _update(self, context: RequestContext) -> dict[str, Any]:
        order = context.record
        previous = current_status(order)
        for name in UPDATABLE_FIELDS:
            if name in context.body:
                order[name] = context.body[name]
        if order["status"] != previous:
            logger.info(f"Order {order['id']} status {previous} -> {order['status']}")
        return order

    def _destroy(self, context: RequestContext) -> None:
        self.store.remove(context.record["id"])
        logger.info(f"Order {context.record['id']} deleted")
