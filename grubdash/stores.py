"""
In-Memory Record Stores

Each store exclusively owns an ordered list of records (plain dicts as
decoded from JSON). Pipelines look records up per request and never keep
references between requests.
"""

import logging
from typing import Any, Iterable, Optional

from grubdash.core.ids import max_id

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class RecordStore:
    """Ordered collection of records addressed by their ``id`` field."""

    kind = "record"

    def __init__(self, records: Optional[Iterable[Record]] = None):
        self._records: list[Record] = [dict(r) for r in (records or [])]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    def all(self) -> list[Record]:
        """Get every record in insertion order."""
        return self._records

    def find(self, record_id: Any) -> Optional[Record]:
        """Get the record with the given ID, or None."""
        for record in self._records:
            if record.get("id") == record_id:
                return record
        return None

    def append(self, record: Record) -> Record:
        """Add a record at the end of the collection."""
        self._records.append(record)
        logger.debug(f"{self.kind} {record.get('id')} added ({len(self)} total)")
        return record

    def max_id(self) -> int:
        """Largest numeric ID currently stored (0 if empty)."""
        return max_id(self._records)


class DishStore(RecordStore):
    """Dishes are never deleted."""

    kind = "dish"


class OrderStore(RecordStore):
    kind = "order"

    def remove(self, record_id: Any) -> Optional[Record]:
        """
        Remove the order with the given ID.

        Returns:
            The removed record, or None when no order matched
        """
        for index, record in enumerate(self._records):
            if record.get("id") == record_id:
                del self._records[index]
                logger.debug(f"order {record_id} removed ({len(self)} left)")
                return record
        return None
