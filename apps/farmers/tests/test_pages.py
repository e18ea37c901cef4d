"""Tests for the server-rendered farmer and batch pages."""

import pytest
from django.urls import reverse

from apps.farmers.models import Batch, BatchDocument, Farmer


@pytest.mark.django_db
class TestFarmerPages:

    def test_list(self, client, farmer):
        response = client.get(reverse('farmer-list'))

        assert response.status_code == 200
        assert 'Mere Vula' in response.content.decode()

    def test_list_empty(self, client):
        response = client.get(reverse('farmer-list'))

        assert 'No farmers yet.' in response.content.decode()

    def test_register(self, client):
        data = {'name': 'Jone Rabuka', 'island': 'Ovalau', 'village': 'Levuka', 'phone': ''}

        response = client.post(reverse('farmer-create'), data)

        assert response.status_code == 302
        assert response.url == reverse('farmer-list')
        assert Farmer.objects.get().name == 'Jone Rabuka'

    def test_register_missing_island(self, client):
        data = {'name': 'Jone Rabuka', 'island': '', 'village': 'Levuka'}

        response = client.post(reverse('farmer-create'), data)

        assert response.status_code == 200
        assert response.context['form'].errors['island']
        assert Farmer.objects.count() == 0

    def test_batches(self, client, farmer, batch):
        response = client.get(reverse('farmer-batches', kwargs={'farmer_id': farmer.id}))

        content = response.content.decode()
        assert response.status_code == 200
        assert 'Batches for Mere Vula' in content
        assert batch.id in content

    def test_batches_of_unknown_farmer(self, client):
        response = client.get(reverse('farmer-batches', kwargs={'farmer_id': 'missing'}))

        assert response.status_code == 404


@pytest.mark.django_db
class TestBatchPages:

    def test_form_prefills_farmer(self, client, farmer):
        response = client.get(reverse('batch-create'), {'farmer': farmer.id})

        assert response.status_code == 200
        assert response.context['form']['farmer'].value() == farmer.id

    def test_create(self, client, batch_data):
        response = client.post(reverse('batch-create'), batch_data)

        assert response.status_code == 302
        assert response.url == reverse('farmer-batches', kwargs={'farmer_id': batch_data['farmer']})
        assert Batch.objects.get().form == 'powder'

    def test_create_for_unknown_farmer(self, client, batch_data):
        batch_data['farmer'] = 'missing'

        response = client.post(reverse('batch-create'), batch_data)

        assert response.status_code == 200
        assert 'Farmer missing not found' in response.content.decode()
        assert Batch.objects.count() == 0

    def test_create_with_zero_weight(self, client, batch_data):
        batch_data['weight_kg'] = '0'

        response = client.post(reverse('batch-create'), batch_data)

        assert response.status_code == 200
        assert response.context['form'].errors['weight_kg']

    def test_documents_page(self, client, batch):
        response = client.get(reverse('batch-documents', kwargs={'batch_id': batch.id}))

        assert response.status_code == 200
        assert 'No docs yet.' in response.content.decode()

    def test_upload(self, client, batch, pdf_upload, media_root):
        url = reverse('batch-documents', kwargs={'batch_id': batch.id})

        response = client.post(url, {'doc_type': 'invoice', 'file': pdf_upload})

        assert response.status_code == 302
        assert response.url == url
        assert BatchDocument.objects.get().doc_type == 'invoice'

    def test_documents_of_unknown_batch(self, client):
        response = client.get(reverse('batch-documents', kwargs={'batch_id': 'missing'}))

        assert response.status_code == 404
