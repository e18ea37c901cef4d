"""Record store interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from .exceptions import UnknownCollectionError


COLLECTIONS = ('farmers', 'batches', 'buyers', 'requests', 'offers')


class RecordStore(ABC):
    """
    Key-based CRUD over named collections of plain dict records.

    Every record carries an ``id``. Stores assign one on insert when the
    record does not bring its own, and never change it afterwards.
    """

    collections = COLLECTIONS

    def check_collection(self, collection: str) -> None:
        if collection not in self.collections:
            raise UnknownCollectionError(f"Unknown collection '{collection}'")

    @abstractmethod
    def get(self, collection: str, record_id: str) -> Optional[dict]:
        """Return one record by id, or None."""

    @abstractmethod
    def list(self, collection: str, **filters: Any) -> List[dict]:
        """Return records whose fields equal every given filter value."""

    @abstractmethod
    def insert(self, collection: str, record: dict) -> dict:
        """Store a new record and return it with its id."""

    @abstractmethod
    def update(self, collection: str, record_id: str, **changes: Any) -> Optional[dict]:
        """Apply changes to one record; None when it does not exist."""

    def batches_for_farmer(self, farmer_id: str) -> List[dict]:
        """Batches owned by a farmer, whichever key spelling they were stored with."""
        return [
            record for record in self.list('batches')
            if (record.get('farmer_id') or record.get('farmerId')) == farmer_id
        ]
