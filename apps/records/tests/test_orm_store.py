"""Tests for the database record store and backend selection."""

from datetime import date
from decimal import Decimal

import pytest
from django.core.exceptions import ImproperlyConfigured

from apps.farmers.models import Batch, BatchDocument, Farmer
from apps.records.ids import RECORD_ID_ALPHABET, generate_record_id
from apps.records.stores import (
    JsonFileRecordStore,
    UnknownCollectionError,
    get_record_store,
)
from apps.records.stores.orm_store import ModelRecordStore


@pytest.fixture
def store():
    return ModelRecordStore()


@pytest.fixture
def farmer():
    return Farmer.objects.create(name='Mere Vula', island='Kadavu', village='Vunisea')


@pytest.mark.django_db
class TestModelRecordStore:

    def test_insert_and_get_farmer(self, store):
        record = store.insert('farmers', {'name': 'Jone', 'island': 'Ovalau', 'village': 'Levuka'})

        assert len(record['id']) == 8
        assert store.get('farmers', record['id'])['name'] == 'Jone'
        assert Farmer.objects.filter(pk=record['id']).exists()

    def test_insert_keeps_given_id(self, store):
        record = store.insert('buyers', {'id': 'Bu1xYz_9', 'name': 'Pacific Roots', 'country': 'Australia'})

        assert record['id'] == 'Bu1xYz_9'

    def test_batch_record_uses_model_names_and_carries_docs(self, store, farmer):
        batch = Batch.objects.create(
            farmer=farmer,
            cultivar='Borogu',
            form='dry',
            weight_kg=Decimal('12.50'),
            harvest_date=date(2024, 5, 1),
            gi='yes',
            lab='yes',
        )
        BatchDocument.objects.create(batch=batch, doc_type='lab', name='lab.pdf', file='uploads/1_lab.pdf')

        record = store.get('batches', batch.id)

        assert record['farmer_id'] == farmer.id
        assert record['weight_kg'] == Decimal('12.50')
        assert record['harvest_date'] == date(2024, 5, 1)
        assert record['docs'][0]['type'] == 'lab'
        assert record['docs'][0]['url'] == '/media/uploads/1_lab.pdf'

    def test_insert_batch_with_legacy_docs(self, store, farmer):
        record = store.insert('batches', {
            'id': 'Ba1xYz_9',
            'farmer_id': farmer.id,
            'cultivar': 'Borogu',
            'form': 'dry',
            'weight_kg': Decimal('12.50'),
            'harvest_date': date(2024, 5, 1),
            'docs': [
                {'id': 'Do1xYz_9', 'type': 'lab', 'name': 'lab.pdf', 'url': '/uploads/1_lab.pdf'},
                {'type': 'photo', 'name': 'pic.jpg', 'url': '/uploads/2_pic.jpg'},
            ],
        })

        first, second = record['docs']
        assert first['id'] == 'Do1xYz_9'
        assert first['url'] == '/media/uploads/1_lab.pdf'
        assert second['type'] == 'other'

    def test_list_with_filters(self, store, farmer):
        other = Farmer.objects.create(name='Jone', island='Ovalau', village='Levuka')

        records = store.list('farmers', island='Ovalau')

        assert [r['id'] for r in records] == [other.id]
        assert len(store.list('farmers')) == 2

    def test_batches_for_farmer(self, store, farmer):
        batch = Batch.objects.create(
            farmer=farmer, cultivar='Borogu', form='green',
            weight_kg=Decimal('1.00'), harvest_date=date(2024, 5, 1),
        )

        assert [r['id'] for r in store.batches_for_farmer(farmer.id)] == [batch.id]
        assert store.batches_for_farmer('nobody') == []

    def test_update(self, store, farmer):
        updated = store.update('farmers', farmer.id, id='ignored', phone='+679 555 0101')

        assert updated['id'] == farmer.id
        assert updated['phone'] == '+679 555 0101'

    def test_update_missing(self, store):
        assert store.update('farmers', 'nope', name='x') is None

    def test_get_missing(self, store):
        assert store.get('offers', 'nope') is None

    def test_unknown_collection(self, store):
        with pytest.raises(UnknownCollectionError):
            store.get('cows', 'x')


class TestGetRecordStore:

    def test_default_is_database(self, settings):
        settings.RECORD_STORE = 'orm'

        assert isinstance(get_record_store(), ModelRecordStore)

    def test_json_backend(self, settings, tmp_path):
        settings.RECORD_STORE = 'JSON'
        settings.JSON_STORE_PATH = tmp_path / 'db.json'

        store = get_record_store()

        assert isinstance(store, JsonFileRecordStore)
        assert store.path == tmp_path / 'db.json'

    def test_explicit_backend_wins(self, settings, tmp_path):
        settings.JSON_STORE_PATH = tmp_path / 'db.json'

        assert isinstance(get_record_store('json'), JsonFileRecordStore)

    def test_unknown_backend(self, settings):
        settings.RECORD_STORE = 'redis'

        with pytest.raises(ImproperlyConfigured):
            get_record_store()


class TestGenerateRecordId:

    def test_shape(self):
        record_id = generate_record_id()

        assert len(record_id) == 8
        assert set(record_id) <= set(RECORD_ID_ALPHABET)

    def test_custom_length(self):
        assert len(generate_record_id(12)) == 12

    def test_ids_differ(self):
        assert len({generate_record_id() for _ in range(100)}) == 100
