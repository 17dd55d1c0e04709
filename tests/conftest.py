import copy

import pytest
from fastapi.testclient import TestClient

from grubdash.core.config import Settings
from grubdash.database import Datastore
from grubdash.main import create_app
from grubdash.services import DishService, OrderService
from grubdash.stores import DishStore, OrderStore

DISHES = [
    {
        "id": "1",
        "name": "Dolcelatte and chickpea spaghetti",
        "description": "Spaghetti topped with dolcelatte and chickpeas",
        "price": 19,
        "image_url": "https://example.com/spaghetti.jpeg",
    },
    {
        "id": "7",
        "name": "Cuban pork sandwich",
        "description": "Slow roasted pork on toasted bread",
        "price": 12,
        "image_url": "https://example.com/cuban.jpeg",
    },
]

ORDERS = [
    {
        "id": "3",
        "deliverTo": "308 Negra Arroyo Lane",
        "mobileNumber": "(505) 143-3369",
        "status": "pending",
        "dishes": [{"dishId": "1", "quantity": 2}],
    },
    {
        "id": "4",
        "deliverTo": "1600 Pennsylvania Avenue NW",
        "mobileNumber": "(202) 456-1111",
        "status": "preparing",
        "dishes": [{"dishId": "7", "quantity": 1}],
    },
]


@pytest.fixture
def new_dish():
    return {
        "name": "Falafel and tahini bagel",
        "description": "A warm bagel filled with falafel and tahini",
        "price": 6,
        "image_url": "https://example.com/bagel.jpeg",
    }


@pytest.fixture
def new_order():
    return {
        "deliverTo": "Rm 2301, 700 Maple Street",
        "mobileNumber": "(555) 555-0134",
        "dishes": [{"dishId": "1", "quantity": 1}, {"dishId": "7", "quantity": 3}],
    }


@pytest.fixture
def datastore():
    return Datastore(
        dishes=DishStore(copy.deepcopy(DISHES)),
        orders=OrderStore(copy.deepcopy(ORDERS)),
    )


@pytest.fixture
def dish_service(datastore):
    return DishService(datastore.dishes)


@pytest.fixture
def order_service(datastore):
    return OrderService(datastore.orders)


@pytest.fixture
def settings():
    return Settings(env_mode="development", load_seed_data=False)


@pytest.fixture
def client(settings, datastore):
    with TestClient(create_app(settings, datastore)) as test_client:
        yield test_client
