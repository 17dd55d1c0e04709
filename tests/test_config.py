import json

import pytest
from pydantic import ValidationError

from grubdash.core.config import EnvironmentMode, Settings
from grubdash.database import SeedDataError, init_db, load_seed_file


def test_env_mode_is_case_insensitive():
    settings = Settings(env_mode="PRODUCTION")

    assert settings.env_mode == EnvironmentMode.PRODUCTION
    assert settings.is_production
    assert not settings.is_development


def test_invalid_env_mode():
    with pytest.raises(ValidationError):
        Settings(env_mode="qa")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:3000, http://localhost:3001")

    settings = Settings()

    assert settings.api_port == 8080
    assert settings.cors_origins_list == ["http://localhost:3000", "http://localhost:3001"]


def test_default_seed_files_are_bundled():
    datastore = init_db(Settings(load_seed_data=True))

    assert len(datastore.dishes) > 0
    assert len(datastore.orders) > 0


def test_init_db_without_seed_data():
    datastore = init_db(Settings(load_seed_data=False))

    assert len(datastore.dishes) == 0
    assert len(datastore.orders) == 0


def test_init_db_from_custom_files(tmp_path):
    dishes = tmp_path / "dishes.json"
    orders = tmp_path / "orders.json"
    dishes.write_text(json.dumps([{"id": "5", "name": "Soup"}]), encoding="utf-8")
    orders.write_text("[]", encoding="utf-8")

    datastore = init_db(Settings(dishes_seed_file=dishes, orders_seed_file=orders))

    assert datastore.dishes.find("5") == {"id": "5", "name": "Soup"}
    assert len(datastore.orders) == 0


def test_seed_file_must_hold_array(tmp_path):
    path = tmp_path / "dishes.json"
    path.write_text('{"id": "1"}', encoding="utf-8")

    with pytest.raises(SeedDataError, match="array of objects"):
        load_seed_file(path)


def test_missing_seed_file(tmp_path):
    with pytest.raises(SeedDataError, match="Could not load"):
        load_seed_file(tmp_path / "nope.json")
