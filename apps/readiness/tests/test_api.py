"""API and page tests for export readiness."""

import pytest
from django.urls import reverse


@pytest.mark.django_db
class TestRequiredDocumentsAPI:
    """GET /api/readiness/required-documents/"""

    def test_default_destination(self, api_client):
        url = reverse('readiness:required-documents')

        response = api_client.get(url)

        assert response.status_code == 200
        assert response.data['destination'] == 'AU'
        assert response.data['destination_name'] == 'Australia (AU)'
        assert len(response.data['documents']) == 6

    def test_lowercase_code(self, api_client):
        url = reverse('readiness:required-documents')

        response = api_client.get(url, {'dest': 'us'})

        assert response.data['destination'] == 'US'
        assert response.data['documents'][4] == 'Importer compliance docs (depends on product form)'

    def test_unknown_code(self, api_client):
        url = reverse('readiness:required-documents')

        response = api_client.get(url, {'dest': 'fj'})

        assert response.status_code == 200
        assert response.data['destination'] == 'FJ'
        assert response.data['destination_name'] is None
        assert len(response.data['documents']) == 4

    @pytest.mark.parametrize('code', ['ABCDEFGHIJK', '???', 'New Zealand, North Island'])
    def test_long_or_garbage_code_gets_base_documents(self, api_client, code):
        url = reverse('readiness:required-documents')

        response = api_client.get(url, {'dest': code})

        assert response.status_code == 200
        assert response.data['destination_name'] is None
        assert len(response.data['documents']) == 4

    def test_configured_default(self, api_client, settings):
        settings.DEFAULT_DESTINATION = 'US'
        url = reverse('readiness:required-documents')

        response = api_client.get(url)

        assert response.data['destination'] == 'US'


@pytest.mark.django_db
class TestFarmerReadinessAPI:
    """GET /api/farmers/{id}/readiness/"""

    def test_report(self, api_client, readiness_farmer, ready_batch, green_batch):
        url = reverse('farmers:farmer-readiness', kwargs={'pk': readiness_farmer.id})

        response = api_client.get(url, {'dest': 'NZ'})

        assert response.status_code == 200
        assert response.data['farmer']['name'] == 'Seru Tawake'
        assert response.data['destination'] == 'NZ'
        assert response.data['ready_count'] == 1

        ready, green = response.data['batches']
        assert ready['result']['overall'] is True
        assert ready['batch']['weight'] == '12.50'
        assert ready['batch']['harvest_date'] == '2024-05-01'
        assert ready['documents'][0]['name'] == 'lab report.pdf'
        assert green['result']['overall'] is False
        assert [c['key'] for c in green['result']['checks'] if not c['passed']] == ['form', 'lab']

    def test_unknown_farmer(self, api_client):
        url = reverse('farmers:farmer-readiness', kwargs={'pk': 'missing'})

        response = api_client.get(url)

        assert response.status_code == 404


@pytest.mark.django_db
class TestBatchReadinessAPI:
    """GET /api/batches/{id}/readiness/"""

    def test_ready_batch(self, api_client, ready_batch):
        url = reverse('farmers:batch-readiness', kwargs={'pk': ready_batch.id})

        response = api_client.get(url, {'dest': 'us'})

        assert response.status_code == 200
        assert response.data['destination'] == 'US'
        assert response.data['result']['overall'] is True
        assert len(response.data['result']['checks']) == 6
        assert len(response.data['required_documents']) == 6

    def test_unknown_batch(self, api_client):
        url = reverse('farmers:batch-readiness', kwargs={'pk': 'missing'})

        response = api_client.get(url)

        assert response.status_code == 404


@pytest.mark.django_db
class TestReadinessPage:
    """GET /readiness/<farmer_id>/"""

    def test_page_lists_batches_and_documents(self, client, readiness_farmer, ready_batch, green_batch):
        url = reverse('farmer-readiness', kwargs={'farmer_id': readiness_farmer.id})

        response = client.get(url, {'dest': 'nz'})

        assert response.status_code == 200
        content = response.content.decode()
        assert 'Export Readiness: Seru Tawake' in content
        assert 'Importer biosecurity / phytosanitary documents (as required)' in content
        assert 'READY' in content
        assert 'NOT READY' in content
        assert 'lab report.pdf' in content
        assert '<option value="NZ" selected>' in content

    def test_page_without_batches(self, client, readiness_farmer):
        url = reverse('farmer-readiness', kwargs={'farmer_id': readiness_farmer.id})

        response = client.get(url)

        assert response.status_code == 200
        assert 'No batches yet.' in response.content.decode()
        assert response.context['report']['destination'] == 'AU'

    def test_unknown_farmer_is_404(self, client):
        url = reverse('farmer-readiness', kwargs={'farmer_id': 'missing'})

        response = client.get(url)

        assert response.status_code == 404
