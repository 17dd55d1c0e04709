"""
Request Pipeline

A pipeline is the ordered list of validation steps for one CRUD operation,
followed by the terminal handler that performs it. Each step receives the
request context and returns it, possibly enriched (for example with the
looked-up record), or raises a ``GrubDashError``. The first failure stops
the run; the handler only executes once every step has passed, so no
operation mutates a store before its input is fully validated.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from grubdash.core.exceptions import GrubDashError

logger = logging.getLogger(__name__)


@dataclass
class RequestContext:
    """
    Everything a pipeline knows about one request.

    Attributes:
        body: The ``data`` object of the request body
        route_id: Identifier taken from the request path
        record: Stored record matched by an existence check
    """
    body: dict[str, Any] = field(default_factory=dict)
    route_id: Optional[str] = None
    record: Optional[dict[str, Any]] = None


Step = Callable[[RequestContext], RequestContext]
Handler = Callable[[RequestContext], Any]


class Pipeline:
    """Ordered validation steps plus the handler for one operation."""

    def __init__(self, name: str, steps: list[Step], handler: Handler):
        self.name = name
        self.steps = list(steps)
        self.handler = handler

    def __repr__(self) -> str:
        step_names = [getattr(s, "__name__", repr(s)) for s in self.steps]
        return f"Pipeline({self.name!r}, steps={step_names})"

    def run(self, context: Optional[RequestContext] = None) -> Any:
        """
        Execute the steps in order, then the handler.

        Raises:
            GrubDashError: From the first step that rejects the request
        """
        context = context or RequestContext()
        for step in self.steps:
            try:
                context = step(context)
            except GrubDashError as e:
                logger.info(f"{self.name} rejected ({e.status_code}): {e.message}")
                raise
        return self.handler(context)

    __call__ = run
