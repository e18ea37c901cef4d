"""API tests for farmers, batches and batch documents."""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework import status

from apps.farmers.models import Batch, BatchDocument, Farmer


@pytest.mark.django_db
class TestFarmerAPI:
    """/api/farmers/"""

    def test_list_farmers(self, api_client, farmer, batch):
        url = reverse('farmers:farmer-list')

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        result = response.data['results'][0]
        assert result['name'] == 'Mere Vula'
        assert result['batch_count'] == 1

    def test_register_farmer(self, api_client):
        url = reverse('farmers:farmer-list')
        data = {'name': 'Jone Rabuka', 'island': 'Ovalau', 'village': 'Levuka'}

        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.data['id']) == 8
        assert response.data['phone'] == ''
        assert Farmer.objects.filter(pk=response.data['id']).exists()

    def test_register_farmer_missing_village(self, api_client):
        url = reverse('farmers:farmer-list')
        data = {'name': 'Jone Rabuka', 'island': 'Ovalau', 'village': '  '}

        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'village' in response.data
        assert Farmer.objects.count() == 0

    def test_retrieve_farmer(self, api_client, farmer):
        url = reverse('farmers:farmer-detail', kwargs={'pk': farmer.id})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['island'] == 'Kadavu'

    def test_retrieve_missing_farmer(self, api_client):
        url = reverse('farmers:farmer-detail', kwargs={'pk': 'missing'})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_farmers_cannot_be_deleted(self, api_client, farmer):
        url = reverse('farmers:farmer-detail', kwargs={'pk': farmer.id})

        response = api_client.delete(url)

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_farmer_batches(self, api_client, farmer, batch):
        url = reverse('farmers:farmer-batches', kwargs={'pk': farmer.id})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [b['id'] for b in response.data] == [batch.id]
        assert response.data[0]['documents'] == []


@pytest.mark.django_db
class TestBatchAPI:
    """/api/batches/"""

    def test_record_batch(self, api_client, batch_data):
        url = reverse('farmers:batch-list')

        response = api_client.post(url, batch_data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['weight_kg'] == '25.00'
        assert response.data['form'] == 'powder'
        assert Batch.objects.get(pk=response.data['id']).farmer_id == batch_data['farmer']

    def test_unknown_farmer(self, api_client, batch_data):
        url = reverse('farmers:batch-list')
        batch_data['farmer'] = 'missing'

        response = api_client.post(url, batch_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'farmer' in response.data

    @pytest.mark.parametrize('field, value', [
        ('weight_kg', '0'),
        ('weight_kg', '-2'),
        ('form', 'chips'),
        ('harvest_date', 'yesterday'),
        ('cultivar', ''),
    ])
    def test_invalid_batch(self, api_client, batch_data, field, value):
        url = reverse('farmers:batch-list')
        batch_data[field] = value

        response = api_client.post(url, batch_data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Batch.objects.count() == 0

    def test_list_filters(self, api_client, farmer, batch, batch_data):
        api_client.post(reverse('farmers:batch-list'), batch_data, format='json')
        url = reverse('farmers:batch-list')

        response = api_client.get(url, {'farmer': farmer.id, 'form': 'DRY'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['id'] == batch.id
        assert response.data['results'][0]['farmer_name'] == 'Mere Vula'

    def test_retrieve_batch(self, api_client, batch):
        url = reverse('farmers:batch-detail', kwargs={'pk': batch.id})

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['harvest_date'] == '2024-05-01'


@pytest.mark.django_db
class TestBatchDocumentsAPI:
    """/api/batches/{id}/documents/"""

    def test_upload_document(self, api_client, batch, pdf_upload, media_root):
        url = reverse('farmers:batch-documents', kwargs={'pk': batch.id})

        response = api_client.post(url, {'file': pdf_upload, 'doc_type': 'lab'}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['doc_type'] == 'lab'
        assert response.data['name'] == 'lab report (May).pdf'
        assert response.data['url'].startswith('/media/uploads/')
        assert response.data['url'].endswith('_lab_report__May_.pdf')

    def test_upload_without_type_is_other(self, api_client, batch, media_root):
        url = reverse('farmers:batch-documents', kwargs={'pk': batch.id})
        upload = SimpleUploadedFile('invoice.pdf', b'data')

        response = api_client.post(url, {'file': upload}, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['doc_type'] == 'other'

    def test_upload_without_file(self, api_client, batch, media_root):
        url = reverse('farmers:batch-documents', kwargs={'pk': batch.id})

        response = api_client.post(url, {'doc_type': 'lab'}, format='multipart')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert BatchDocument.objects.count() == 0

    def test_upload_to_missing_batch(self, api_client, pdf_upload, media_root):
        url = reverse('farmers:batch-documents', kwargs={'pk': 'missing'})

        response = api_client.post(url, {'file': pdf_upload}, format='multipart')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_documents(self, api_client, batch, pdf_upload, media_root):
        url = reverse('farmers:batch-documents', kwargs={'pk': batch.id})
        api_client.post(url, {'file': pdf_upload, 'doc_type': 'coo'}, format='multipart')

        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [d['doc_type'] for d in response.data] == ['coo']
