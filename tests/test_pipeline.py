import pytest

from grubdash.core.exceptions import InvalidRequest, NotFound
from grubdash.services.pipeline import Pipeline, RequestContext


def test_steps_run_in_order_before_handler():
    calls = []

    def first(context):
        calls.append("first")
        context.record = {"id": "1"}
        return context

    def second(context):
        calls.append("second")
        return context

    def handler(context):
        calls.append("handler")
        return context.record

    result = Pipeline("test", [first, second], handler).run(RequestContext())

    assert result == {"id": "1"}
    assert calls == ["first", "second", "handler"]


def test_first_failure_short_circuits():
    calls = []

    def missing(context):
        raise NotFound("gone")

    def never(context):
        calls.append("never")
        return context

    pipeline = Pipeline("test", [missing, never], lambda context: calls.append("handler"))

    with pytest.raises(NotFound, match="gone"):
        pipeline.run(RequestContext())
    assert calls == []


def test_pipeline_without_steps_calls_handler_with_empty_context():
    pipeline = Pipeline("test", [], lambda context: context)

    context = pipeline()

    assert context.body == {}
    assert context.route_id is None


def test_errors_carry_status_codes():
    assert InvalidRequest("bad").status_code == 400
    assert NotFound("gone").status_code == 404
    assert InvalidRequest("bad").to_dict() == {"error": "bad"}
