import json
import pytest
from apps.records.stores import JsonFileRecordStore


LEGACY_DB = {
    'farmers': [
        {'id': 'Fa1xYz_9', 'name': 'Mere Vula', 'island': 'Kadavu', 'village': 'Vunisea', 'phone': '+679 555 0101'},
    ],
    'batches': [
        {
            'id': 'Ba1xYz_9',
            'farmerId': 'Fa1xYz_9',
            'cultivar': 'Borogu',
            'form': 'dry',
            'weight': 12.5,
            'harvestDate': '2024-05-01',
            'gi': 'yes',
            'lab': 'yes',
            'docs': [
                {
                    'id': 'Do1xYz_9',
                    'type': 'lab',
                    'name': 'lab report.pdf',
                    'url': '/uploads/1714521600000_lab_report.pdf',
                    'uploadedAt': '2024-05-02T10:00:00.000Z',
                },
            ],
        },
        {
            'id': 'Ba2xYz_9',
            'farmerId': 'nobody',
            'cultivar': 'Loa Kasa',
            'form': 'green',
            'weight': 3,
            'harvestDate': '2024-05-03',
            'gi': 'no',
            'lab': 'no',
            'docs': [],
        },
    ],
    'buyers': [
        {'id': 'Bu1xYz_9', 'name': 'Pacific Roots Pty', 'country': 'Australia', 'email': ''},
    ],
    'requests': [
        {
            'id': 'Rq1xYz_9',
            'buyerId': 'Bu1xYz_9',
            'destination': 'Australia',
            'form': 'powder',
            'cultivar': '',
            'minKg': 10,
            'maxKg': 50,
            'status': 'open',
            'createdAt': '2024-05-04T10:00:00.000Z',
        },
    ],
    'offers': [],
}


@pytest.fixture
def legacy_db():
    """Copy of a db.json as written by the first version of the app."""
    return json.loads(json.dumps(LEGACY_DB))


@pytest.fixture
def legacy_db_path(tmp_path, legacy_db):
    path = tmp_path / 'db.json'
    path.write_text(json.dumps(legacy_db), encoding='utf-8')
    return path


@pytest.fixture
def json_store(tmp_path):
    """Empty JSON store in a temporary directory."""
    return JsonFileRecordStore(tmp_path / 'store' / 'db.json')
