"""
Flat JSON file record store.

The whole database is one JSON document holding a list per collection::

    {"farmers": [...], "batches": [...], "buyers": [...], "requests": [...], "offers": [...]}

This is the file layout written by the first version of the application, so
existing ``db.json`` files can be opened as they are. Records keep whatever
keys they were written with (the old application used camelCase such as
``farmerId`` and ``harvestDate``); readers normalize at their own boundary.

Opening or reading a store never writes the file. A missing file reads as
empty and is created by the first write. Every store on the same file shares one lock, so
writes from separate instances in this process are serialized.
"""

import copy
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, List, Optional

from django.core.serializers.json import DjangoJSONEncoder

from apps.records.ids import generate_record_id
from .base import RecordStore
from .exceptions import CorruptStoreError

logger = logging.getLogger(__name__)

# Resolved path -> lock shared by every store opened on that file
_LOCKS = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    with _LOCKS_GUARD:
        return _LOCKS.setdefault(str(path.resolve()), threading.Lock())


class JsonFileRecordStore(RecordStore):
    """Record store persisted to a single JSON file."""

    def __init__(self, path):
        self.path = Path(path)
        self._lock = _lock_for(self.path)
        # Fail early on a corrupt file
        with self._lock:
            self._read()

    # ------------------------------------------------------------------
    # File handling
    # ------------------------------------------------------------------

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding='utf-8') as fh:
                content = fh.read()
        except OSError as e:
            raise CorruptStoreError(f"Cannot read {self.path}: {e}") from e
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(f"{self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise CorruptStoreError(f"{self.path} must hold a JSON object")
        return data

    def _apply_defaults(self, data: dict) -> bool:
        changed = False
        for collection in self.collections:
            if not isinstance(data.get(collection), list):
                data[collection] = []
                changed = True
        return changed

    def _write(self, data: dict) -> None:
        if not self.path.exists():
            logger.info("Creating JSON record store at %s", self.path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp'
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as fh:
                json.dump(data, fh, indent=2, cls=DjangoJSONEncoder)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def _load(self) -> dict:
        data = self._read()
        self._apply_defaults(data)
        return data

    @staticmethod
    def _matches(record: dict, filters: dict) -> bool:
        return all(record.get(key) == value for key, value in filters.items())

    # ------------------------------------------------------------------
    # RecordStore API
    # ------------------------------------------------------------------

    def get(self, collection: str, record_id: str) -> Optional[dict]:
        self.check_collection(collection)
        with self._lock:
            data = self._load()
        for record in data[collection]:
            if record.get('id') == record_id:
                return copy.deepcopy(record)
        return None

    def list(self, collection: str, **filters: Any) -> List[dict]:
        self.check_collection(collection)
        with self._lock:
            data = self._load()
        return [
            copy.deepcopy(record)
            for record in data[collection]
            if self._matches(record, filters)
        ]

    def insert(self, collection: str, record: dict) -> dict:
        self.check_collection(collection)
        record = dict(record)
        if not record.get('id'):
            record['id'] = generate_record_id()

        # Round-trip through the encoder so the returned record matches what
        # a later get() will read back (dates and decimals become strings).
        stored = json.loads(json.dumps(record, cls=DjangoJSONEncoder))

        with self._lock:
            data = self._load()
            data[collection].append(stored)
            self._write(data)

        logger.info("Inserted %s record %s into %s", collection, stored['id'], self.path)
        return copy.deepcopy(stored)

    def update(self, collection: str, record_id: str, **changes: Any) -> Optional[dict]:
        self.check_collection(collection)
        changes.pop('id', None)
        changes = json.loads(json.dumps(changes, cls=DjangoJSONEncoder))

        with self._lock:
            data = self._load()
            for record in data[collection]:
                if record.get('id') == record_id:
                    record.update(changes)
                    self._write(data)
                    return copy.deepcopy(record)
        return None
