import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from apps.farmers.models import Farmer, Batch, BatchDocument


@pytest.fixture
def api_client():
    """Return an API client (the API needs no credentials)."""
    return APIClient()


@pytest.fixture
def ready_record():
    """Legacy camelCase batch record that passes every check."""
    return {
        'id': 'b1',
        'farmerId': 'f1',
        'form': 'dry',
        'lab': 'yes',
        'gi': 'yes',
        'cultivar': 'Borogu',
        'harvestDate': '2024-05-01',
        'weight': 12.5,
    }


@pytest.fixture
def readiness_farmer(db):
    """Create and return a farmer for readiness tests."""
    return Farmer.objects.create(
        name='Seru Tawake',
        island='Taveuni',
        village='Somosomo',
    )


@pytest.fixture
def ready_batch(db, readiness_farmer):
    """A dry batch with a lab test and GI claim, plus one uploaded document."""
    batch = Batch.objects.create(
        farmer=readiness_farmer,
        cultivar='Borogu',
        form='dry',
        weight_kg=Decimal('12.50'),
        harvest_date=date(2024, 5, 1),
        gi='yes',
        lab='yes',
    )
    BatchDocument.objects.create(
        batch=batch,
        doc_type='lab',
        name='lab report.pdf',
        file='uploads/1714521600000_lab_report.pdf',
    )
    return batch


@pytest.fixture
def green_batch(db, readiness_farmer):
    """A green batch with no lab test; fails form and lab checks."""
    return Batch.objects.create(
        farmer=readiness_farmer,
        cultivar='Loa Kasa',
        form='green',
        weight_kg=Decimal('40.00'),
        harvest_date=date(2024, 6, 12),
        gi='yes',
        lab='no',
    )
