"""
Management command to copy a legacy ``db.json`` into the relational database.

Records keep their identifiers, so links between farmers, batches, buyers,
requests and offers survive the move. Records whose id already exists in the
database are skipped, which makes the import safe to run more than once.

Usage:
    python manage.py import_json_store db.json
    python manage.py import_json_store db.json --dry-run
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import IntegrityError, transaction

from apps.readiness.normalization import normalize_batch
from apps.records.stores import CorruptStoreError, JsonFileRecordStore
from apps.records.stores.orm_store import MODELS, ModelRecordStore

logger = logging.getLogger(__name__)


# Parents before children so foreign keys resolve
IMPORT_ORDER = ('farmers', 'batches', 'buyers', 'requests', 'offers')


def _decimal(value):
    if value is None or value == '':
        return None
    try:
        return Decimal(str(value).strip()).quantize(Decimal('0.01'))
    except (InvalidOperation, ValueError):
        # Left as is; model validation reports it
        return value


def _first(record, *keys, default=None):
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return default


def _farmer(record):
    return {
        'id': record.get('id'),
        'name': record.get('name') or '',
        'island': record.get('island') or '',
        'village': record.get('village') or '',
        'phone': record.get('phone') or '',
    }


def _batch(record):
    batch = normalize_batch(record)
    return {
        'id': batch['id'],
        'farmer_id': batch['farmer_id'],
        'cultivar': (batch['cultivar'] or '').strip(),
        'form': batch['form'],
        'weight_kg': _decimal(batch['weight']),
        'harvest_date': batch['harvest_date'] or None,
        'gi': batch['gi'] or 'no',
        'lab': batch['lab'] or 'no',
        'docs': record.get('docs') or [],
    }


def _buyer(record):
    return {
        'id': record.get('id'),
        'name': record.get('name') or '',
        'country': record.get('country') or '',
        'email': record.get('email') or '',
    }


def _request(record):
    return {
        'id': record.get('id'),
        'buyer_id': _first(record, 'buyer_id', 'buyerId'),
        'destination': record.get('destination') or '',
        'form': (record.get('form') or '').strip().lower(),
        'cultivar': record.get('cultivar') or '',
        'min_kg': _decimal(_first(record, 'min_kg', 'minKg')),
        'max_kg': _decimal(_first(record, 'max_kg', 'maxKg')),
        'status': record.get('status') or 'open',
    }


def _offer(record):
    return {
        'id': record.get('id'),
        'request_id': _first(record, 'request_id', 'requestId'),
        'batch_id': _first(record, 'batch_id', 'batchId'),
        'quantity_kg': _decimal(_first(record, 'quantity_kg', 'quantityKg', 'qty')),
        'price_per_kg': _decimal(_first(record, 'price_per_kg', 'pricePerKg', 'price')),
        'note': record.get('note') or '',
        'status': record.get('status') or 'pending',
    }


CONVERTERS = {
    'farmers': _farmer,
    'batches': _batch,
    'buyers': _buyer,
    'requests': _request,
    'offers': _offer,
}


def validate_record(collection, values):
    """
    Run model validation on converted values.

    Raises:
        ValidationError: If a field is invalid or a referenced record is missing
    """
    fields = {key: value for key, value in values.items() if key != 'docs'}
    instance = MODELS[collection](**fields)
    instance.full_clean(validate_unique=False)


class Command(BaseCommand):
    help = 'Import farmers, batches, buyers, requests and offers from a JSON store file'

    def add_arguments(self, parser):
        parser.add_argument('path', help='Path to the JSON store file (e.g. db.json)')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show what would be imported without saving anything',
        )

    def handle(self, *args, **options):
        path = Path(options['path'])
        dry_run = options['dry_run']

        if not path.is_file():
            raise CommandError(f'JSON store not found: {path}')

        try:
            source = JsonFileRecordStore(path)
        except CorruptStoreError as e:
            raise CommandError(str(e))

        target = ModelRecordStore()
        totals = {'imported': 0, 'existing': 0, 'invalid': 0}

        with transaction.atomic():
            for collection in IMPORT_ORDER:
                counts = self._import_collection(collection, source, target)
                for key, value in counts.items():
                    totals[key] += value

            if dry_run:
                transaction.set_rollback(True)

        summary = (
            f"{totals['imported']} imported, {totals['existing']} already present, "
            f"{totals['invalid']} invalid"
        )
        logger.info("Imported %s: %s%s", path, summary, ' (dry run)' if dry_run else '')

        if dry_run:
            self.stdout.write(self.style.WARNING(f'\n--dry-run mode: No changes made. {summary}'))
            return

        self.stdout.write(self.style.SUCCESS(f'\n✓ Import finished: {summary}'))

    def _import_collection(self, collection, source, target):
        counts = {'imported': 0, 'existing': 0, 'invalid': 0}
        records = source.list(collection)
        if records:
            self.stdout.write(f'\n{collection}: {len(records)} record(s)')

        for record in records:
            values = CONVERTERS[collection](record)
            record_id = values.get('id')

            if not record_id:
                counts['invalid'] += 1
                self.stdout.write(self.style.WARNING(f'  - skipped {collection} record without id'))
                continue

            if target.get(collection, record_id) is not None:
                counts['existing'] += 1
                self.stdout.write(f'  - {record_id} already present')
                continue

            try:
                validate_record(collection, values)
                with transaction.atomic():
                    target.insert(collection, values)
            except (ValidationError, IntegrityError) as e:
                counts['invalid'] += 1
                messages = e.messages if isinstance(e, ValidationError) else [str(e)]
                self.stdout.write(
                    self.style.WARNING(f'  - {record_id} invalid: {"; ".join(messages)}')
                )
                continue

            counts['imported'] += 1
            self.stdout.write(f'  - {record_id} imported')

        return counts
