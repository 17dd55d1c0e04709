import pytest

from grubdash.core.exceptions import InvalidRequest
from grubdash.services import RequestContext
from grubdash.services.validation import check_route_id, is_number, is_positive_integer


@pytest.mark.parametrize("value", [0, 3, 4.5, 10 ** 400])
def test_is_number_accepts_finite_numbers(value):
    assert is_number(value)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan"), True, "5", None])
def test_is_number_rejects_non_finite_and_non_numbers(value):
    assert not is_number(value)


@pytest.mark.parametrize("value", [1, 2.0, 99])
def test_is_positive_integer_accepts_integral_values(value):
    assert is_positive_integer(value)


@pytest.mark.parametrize("value", [0, -1, 1.5, float("inf"), float("nan"), True, "2"])
def test_is_positive_integer_rejects(value):
    assert not is_positive_integer(value)


def test_route_id_compared_as_string():
    check_route_id("Dish", RequestContext(body={"id": 7}, route_id="7"))

    with pytest.raises(InvalidRequest, match="Dish: 8, Route: 7"):
        check_route_id("Dish", RequestContext(body={"id": 8}, route_id="7"))
