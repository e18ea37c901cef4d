"""Record stores: JSON file and relational backends behind one interface."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base import RecordStore, COLLECTIONS
from .exceptions import RecordStoreError, UnknownCollectionError, CorruptStoreError
from .json_store import JsonFileRecordStore


def get_record_store(backend=None) -> RecordStore:
    """
    Return the record store selected by ``settings.RECORD_STORE``.

    Args:
        backend: Override the configured backend ('orm' or 'json').

    Raises:
        ImproperlyConfigured: If the backend name is unknown.
    """
    backend = (backend or getattr(settings, 'RECORD_STORE', 'orm')).lower()

    if backend == 'orm':
        from .orm_store import ModelRecordStore
        return ModelRecordStore()
    if backend == 'json':
        return JsonFileRecordStore(settings.JSON_STORE_PATH)

    raise ImproperlyConfigured(
        f"RECORD_STORE must be 'orm' or 'json', got '{backend}'"
    )


__all__ = [
    'RecordStore',
    'COLLECTIONS',
    'RecordStoreError',
    'UnknownCollectionError',
    'CorruptStoreError',
    'JsonFileRecordStore',
    'get_record_store',
]
