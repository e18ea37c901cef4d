"""Batch record normalization at the store boundary.

Batches reach the readiness code from three places: Django model instances,
snake_case dicts from the ORM record store, and camelCase dicts written by the
legacy JSON file store. Everything is folded into one canonical mapping here so
the evaluator never has to care where a record came from.
"""

from typing import Any, Mapping


CANONICAL_FIELDS = (
    'id',
    'farmer_id',
    'cultivar',
    'form',
    'weight',
    'harvest_date',
    'gi',
    'lab',
)

# canonical name -> accepted spellings, first match wins
FIELD_ALIASES = {
    'id': ('id',),
    'farmer_id': ('farmer_id', 'farmerId'),
    'cultivar': ('cultivar',),
    'form': ('form',),
    'weight': ('weight', 'weight_kg', 'weightKg'),
    'harvest_date': ('harvest_date', 'harvestDate'),
    'gi': ('gi', 'gi_claimed', 'giClaimed'),
    'lab': ('lab', 'lab_test_available', 'labTestAvailable'),
}

_LOWERCASED = ('form', 'gi', 'lab')
_FLAGS = ('gi', 'lab')


def _as_mapping(record: Any) -> Mapping[str, Any]:
    if record is None:
        return {}
    if isinstance(record, Mapping):
        return record

    # Model instance or any object exposing attributes
    values = {}
    for aliases in FIELD_ALIASES.values():
        for name in aliases:
            if hasattr(record, name):
                values[name] = getattr(record, name)
    return values


def _flag(value: Any) -> Any:
    if isinstance(value, bool):
        return 'yes' if value else 'no'
    return value


def normalize_batch(record: Any) -> dict:
    """
    Fold a batch record into the canonical snake_case mapping.

    Args:
        record: A ``Batch`` instance, or a mapping using either snake_case or
            camelCase keys. ``None`` is treated as an empty record.

    Returns:
        dict with exactly the keys in ``CANONICAL_FIELDS``. Missing fields map
        to ``None``; nothing is validated here.
    """
    source = _as_mapping(record)
    normalized = {}

    for field in CANONICAL_FIELDS:
        value = None
        for alias in FIELD_ALIASES[field]:
            if alias in source and source[alias] is not None:
                value = source[alias]
                break

        if field in _FLAGS:
            value = _flag(value)
        if field in _LOWERCASED and isinstance(value, str):
            value = value.strip().lower()

        normalized[field] = value

    return normalized
