"""
Readiness Services Module
=========================

Builds the export readiness report shown on the readiness page and returned
by the readiness API. Records are read through a record store, normalized,
and handed to the pure evaluator; nothing is written back.

Example:
    Report for one farmer shipping to New Zealand::

        from apps.readiness.services import build_farmer_readiness

        report = build_farmer_readiness(farmer_id='V1StGXR8', destination='nz')
        print(report['destination'])            # 'NZ'
        for entry in report['batches']:
            print(entry['batch']['cultivar'], entry['result'].overall)
"""

import logging
from typing import Optional

from django.conf import settings

from apps.farmers.services import BatchNotFoundError, FarmerNotFoundError
from apps.records.stores import RecordStore, get_record_store
from .evaluator import evaluate_readiness
from .normalization import normalize_batch
from .requirements import normalize_destination, required_documents

logger = logging.getLogger(__name__)


def resolve_destination(destination: Optional[str] = None) -> str:
    """Normalize a destination code, using the DEFAULT_DESTINATION setting when blank."""
    if not (destination or '').strip():
        destination = getattr(settings, 'DEFAULT_DESTINATION', None)
    return normalize_destination(destination)


def _batch_documents(record: dict) -> list:
    return [
        {
            'id': doc.get('id'),
            'type': doc.get('type') or 'other',
            'name': doc.get('name') or '',
            'url': doc.get('url') or '',
        }
        for doc in (record.get('docs') or [])
    ]


def evaluate_record(record: dict) -> dict:
    """Evaluate one stored batch record and keep its documents alongside."""
    batch = normalize_batch(record)
    return {
        'batch': batch,
        'result': evaluate_readiness(batch),
        'documents': _batch_documents(record),
    }


def build_farmer_readiness(
    *,
    farmer_id: str,
    destination: Optional[str] = None,
    store: Optional[RecordStore] = None
) -> dict:
    """
    Build the readiness report for every batch of one farmer.

    Args:
        farmer_id: Farmer whose batches are evaluated
        destination: Destination code, case-insensitive; blank means the
            DEFAULT_DESTINATION setting
        store: Record store to read from; defaults to the configured store

    Returns:
        dict: A dictionary containing:
            - farmer (dict): The farmer record.
            - destination (str): Normalized destination code.
            - required_documents (tuple[str]): Documents for the destination.
            - batches (list[dict]): One entry per batch with ``batch``
              (normalized record), ``result`` (ReadinessResult) and
              ``documents``.
            - ready_count (int): Number of batches that passed every check.

    Raises:
        FarmerNotFoundError: If the farmer is not in the store
    """
    store = store or get_record_store()

    farmer = store.get('farmers', farmer_id)
    if farmer is None:
        raise FarmerNotFoundError(f"Farmer {farmer_id} not found")

    code = resolve_destination(destination)
    entries = [evaluate_record(record) for record in store.batches_for_farmer(farmer_id)]
    ready_count = sum(1 for entry in entries if entry['result'].overall)

    logger.debug(
        "Readiness for farmer %s to %s: %d/%d batches ready",
        farmer_id, code, ready_count, len(entries)
    )

    return {
        'farmer': farmer,
        'destination': code,
        'required_documents': required_documents(code),
        'batches': entries,
        'ready_count': ready_count,
    }


def build_batch_readiness(
    *,
    batch_id: str,
    destination: Optional[str] = None,
    store: Optional[RecordStore] = None
) -> dict:
    """
    Readiness of a single batch plus the destination's required documents.

    Raises:
        BatchNotFoundError: If the batch is not in the store
    """
    store = store or get_record_store()

    record = store.get('batches', batch_id)
    if record is None:
        raise BatchNotFoundError(f"Batch {batch_id} not found")

    code = resolve_destination(destination)
    return {
        'destination': code,
        'required_documents': required_documents(code),
        **evaluate_record(record),
    }
