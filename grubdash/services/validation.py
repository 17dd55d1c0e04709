"""Field checks shared by the dish and order pipelines."""

import math
from typing import Any

from grubdash.core.exceptions import InvalidRequest
from grubdash.services.pipeline import RequestContext


def is_missing(value: Any) -> bool:
    """A field is missing when absent, null or an empty string."""
    return value is None or value == ""


def is_number(value: Any) -> bool:
    # bool is a subclass of int but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def is_positive_integer(value: Any) -> bool:
    """JSON has one number type, so ``2.0`` counts as the integer 2."""
    if not is_number(value):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return value > 0


def check_route_id(kind: str, context: RequestContext) -> None:
    """
    Reject a body ``id`` that names a different record than the route.

    An absent, null or empty ``id`` is accepted and later ignored. Ids are
    compared as strings, so ``7`` matches the route ``/7``.

    Raises:
        InvalidRequest: If the ids differ
    """
    body_id = context.body.get("id")
    if not is_missing(body_id) and str(body_id) != context.route_id:
        raise InvalidRequest(
            f"{kind} id does not match route id. "
            f"{kind}: {body_id}, Route: {context.route_id}"
        )
