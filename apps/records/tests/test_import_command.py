"""Tests for the import_json_store management command."""

import json
from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.farmers.models import Batch, Farmer
from apps.marketplace.models import Buyer, BuyerRequest


def run_import(*args):
    out = StringIO()
    call_command('import_json_store', *args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestImportJsonStore:

    def test_imports_records_keeping_ids(self, legacy_db_path):
        output = run_import(str(legacy_db_path))

        assert '4 imported, 0 already present, 1 invalid' in output
        farmer = Farmer.objects.get(pk='Fa1xYz_9')
        assert farmer.phone == '+679 555 0101'

        batch = Batch.objects.get(pk='Ba1xYz_9')
        assert batch.farmer_id == 'Fa1xYz_9'
        assert batch.weight_kg == Decimal('12.50')
        assert str(batch.harvest_date) == '2024-05-01'
        assert batch.documents.get().url == '/media/uploads/1714521600000_lab_report.pdf'

        request = BuyerRequest.objects.get(pk='Rq1xYz_9')
        assert request.buyer_id == 'Bu1xYz_9'
        assert request.max_kg == Decimal('50.00')

    def test_batch_of_unknown_farmer_is_reported(self, legacy_db_path):
        output = run_import(str(legacy_db_path))

        assert 'Ba2xYz_9 invalid' in output
        assert not Batch.objects.filter(pk='Ba2xYz_9').exists()

    def test_second_run_skips_existing(self, legacy_db_path):
        run_import(str(legacy_db_path))

        output = run_import(str(legacy_db_path))

        assert '0 imported, 4 already present, 1 invalid' in output
        assert Farmer.objects.count() == 1

    def test_dry_run_saves_nothing(self, legacy_db_path):
        output = run_import(str(legacy_db_path), '--dry-run')

        assert '--dry-run mode' in output
        assert Farmer.objects.count() == 0
        assert Buyer.objects.count() == 0

    def test_missing_gi_and_lab_default_to_no(self, tmp_path, legacy_db):
        batch = legacy_db['batches'][0]
        del batch['gi']
        del batch['lab']
        path = tmp_path / 'old.json'
        path.write_text(json.dumps(legacy_db))

        run_import(str(path))

        batch = Batch.objects.get(pk='Ba1xYz_9')
        assert (batch.gi, batch.lab) == ('no', 'no')

    def test_record_without_id_is_invalid(self, tmp_path):
        path = tmp_path / 'db.json'
        path.write_text(json.dumps({'farmers': [{'name': 'No Id', 'island': 'x', 'village': 'y'}]}))

        output = run_import(str(path))

        assert '0 imported, 0 already present, 1 invalid' in output

    def test_missing_file(self, tmp_path):
        with pytest.raises(CommandError):
            run_import(str(tmp_path / 'nope.json'))

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / 'db.json'
        path.write_text('{broken')

        with pytest.raises(CommandError):
            run_import(str(path))
