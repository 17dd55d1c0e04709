"""
Dish Service

Validation steps and pipelines for the dish endpoints:
    - list: every dish
    - create: required fields, price
    - read: dish exists
    - update: dish exists, required fields, price, id matches route
"""

import logging

from grubdash.core.exceptions import InvalidRequest, NotFound
from grubdash.core.ids import next_id
from grubdash.models import Dish
from grubdash.services.pipeline import Pipeline, RequestContext
from grubdash.services.validation import is_missing, is_number, check_route_id
from grubdash.stores import DishStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "description", "price", "image_url")
UPDATABLE_FIELDS = REQUIRED_FIELDS


class DishService:
    """Dish operations bound to one dish store."""

    def __init__(self, store: DishStore):
        self.store = store

        self.list = Pipeline("dishes.list", [], self._list)
        self.create = Pipeline(
            "dishes.create",
            [self.required_fields, self.valid_price],
            self._create,
        )
        self.read = Pipeline("dishes.read", [self.dish_exists], self._read)
        self.update = Pipeline(
            "dishes.update",
            [self.dish_exists, self.required_fields, self.valid_price, self.id_matches_route],
            self._update,
        )

    # =========================================================================
    # VALIDATION STEPS
    # =========================================================================

    def required_fields(self, context: RequestContext) -> RequestContext:
        for name in REQUIRED_FIELDS:
            if is_missing(context.body.get(name)):
                raise InvalidRequest(f"Dish must include a {name}")
        return context

    def valid_price(self, context: RequestContext) -> RequestContext:
        price = context.body.get("price")
        if not is_number(price) or price < 0:
            raise InvalidRequest(
                "Dish must have a price that is a number greater than or equal to 0"
            )
        return context

    def dish_exists(self, context: RequestContext) -> RequestContext:
        dish = self.store.find(context.route_id)
        if dish is None:
            raise NotFound(f"Dish does not exist: {context.route_id}")
        context.record = dish
        return context

    def id_matches_route(self, context: RequestContext) -> RequestContext:
        check_route_id("Dish", context)
        return context

    # =========================================================================
    # HANDLERS
    # =========================================================================

    def _list(self, context: RequestContext) -> list[Dish]:
        return self.store.all()

    def _create(self, context: RequestContext) -> Dish:
        dish = {name: context.body[name] for name in REQUIRED_FIELDS}
        dish["id"] = next_id(self.store.max_id())
        self.store.append(dish)
        logger.info(f"Dish {dish['id']} created: {dish['name']}")
        return dish

    def _read(self, context: RequestContext) -> Dish:
        return context.record

    def _update(self, context: RequestContext) -> Dish:
        dish = context.record
        for name in UPDATABLE_FIELDS:
            if name in context.body:
                dish[name] = context.body[name]
        logger.info(f"Dish {dish['id']} updated")
        return dish
