import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from apps.farmers.models import Farmer, Batch
from apps.marketplace.models import Buyer, BuyerRequest, Offer


@pytest.fixture
def api_client():
    """Return an API client (the API needs no credentials)."""
    return APIClient()


@pytest.fixture
def farmer(db):
    return Farmer.objects.create(name='Mere Vula', island='Kadavu', village='Vunisea')


@pytest.fixture
def make_batch(db, farmer):
    """Factory for batches of the test farmer."""
    def make(cultivar='Borogu', form='powder', weight_kg='40.00'):
        return Batch.objects.create(
            farmer=farmer,
            cultivar=cultivar,
            form=form,
            weight_kg=Decimal(weight_kg),
            harvest_date=date(2024, 5, 1),
            gi='yes',
            lab='yes',
        )
    return make


@pytest.fixture
def batch(make_batch):
    return make_batch()


@pytest.fixture
def buyer(db):
    return Buyer.objects.create(name='Pacific Roots Pty', country='Australia', email='buy@pacificroots.example')


@pytest.fixture
def buyer_request(db, buyer):
    """Open request for 10-50kg of Borogu powder."""
    return BuyerRequest.objects.create(
        buyer=buyer,
        destination='Australia',
        form='powder',
        cultivar='Borogu',
        min_kg=Decimal('10.00'),
        max_kg=Decimal('50.00'),
    )


@pytest.fixture
def offer(db, buyer_request, batch):
    return Offer.objects.create(
        request=buyer_request,
        batch=batch,
        quantity_kg=Decimal('20.00'),
        price_per_kg=Decimal('45.00'),
    )
