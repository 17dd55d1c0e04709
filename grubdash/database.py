"""
Datastore Module
Owns the in-memory dish and order stores and loads their seed data.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from grubdash.core.config import Settings, get_settings
from grubdash.stores import DishStore, OrderStore

logger = logging.getLogger(__name__)


class SeedDataError(Exception):
    """Seed file is missing or does not hold an array of records."""


@dataclass
class Datastore:
    """Container for the stores of one application instance."""
    dishes: DishStore = field(default_factory=DishStore)
    orders: OrderStore = field(default_factory=OrderStore)


def load_seed_file(path: Path) -> list[dict[str, Any]]:
    """
    Read an array of records from a JSON file.

    Raises:
        SeedDataError: If the file cannot be read or has the wrong shape
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as fp:
            records = json.load(fp)
    except (OSError, json.JSONDecodeError) as e:
        raise SeedDataError(f"Could not load seed data from {path}: {e}") from e

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise SeedDataError(f"Seed data in {path} must be an array of objects")
    return records


def init_db(settings: Optional[Settings] = None) -> Datastore:
    """
    Build the datastore for a new application.
    Called once by the application factory.
    """
    settings = settings or get_settings()

    if not settings.load_seed_data:
        logger.info("Seed data disabled, starting with empty stores")
        return Datastore()

    datastore = Datastore(
        dishes=DishStore(load_seed_file(settings.dishes_seed_file)),
        orders=OrderStore(load_seed_file(settings.orders_seed_file)),
    )
    logger.info(
        f"Loaded {len(datastore.dishes)} dishes and "
        f"{len(datastore.orders)} orders from seed data"
    )
    return datastore
