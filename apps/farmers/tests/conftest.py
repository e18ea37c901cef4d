import pytest
from datetime import date
from decimal import Decimal
from django.core.files.uploadedfile import SimpleUploadedFile
from rest_framework.test import APIClient
from apps.farmers.models import Farmer, Batch


@pytest.fixture
def api_client():
    """Return an API client (the API needs no credentials)."""
    return APIClient()


@pytest.fixture
def media_root(settings, tmp_path):
    """Store uploads in a temporary directory."""
    settings.MEDIA_ROOT = tmp_path
    return tmp_path


@pytest.fixture
def farmer(db):
    """Create and return a test farmer."""
    return Farmer.objects.create(
        name='Mere Vula',
        island='Kadavu',
        village='Vunisea',
        phone='+679 555 0101',
    )


@pytest.fixture
def batch(db, farmer):
    """Create and return a dry batch for the test farmer."""
    return Batch.objects.create(
        farmer=farmer,
        cultivar='Borogu',
        form='dry',
        weight_kg=Decimal('12.50'),
        harvest_date=date(2024, 5, 1),
        gi='yes',
        lab='no',
    )


@pytest.fixture
def batch_data(farmer):
    """Valid batch payload for the API and services."""
    return {
        'farmer': farmer.id,
        'cultivar': 'Borogu',
        'form': 'powder',
        'weight_kg': '25.00',
        'harvest_date': '2024-05-01',
        'gi': 'yes',
        'lab': 'yes',
    }


@pytest.fixture
def pdf_upload():
    """Uploaded PDF whose name needs sanitizing."""
    return SimpleUploadedFile(
        'lab report (May).pdf',
        b'%PDF-1.4 test',
        content_type='application/pdf',
    )
