import pytest
from decimal import Decimal
from uuid import uuid4
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestMyStats:
    """Tests for GET /api/tracking/stats/"""

    def test_my_stats(self, tracker_client, entity_with_entries):
        url = reverse('tracking:my-stats')
        response = tracker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert Decimal(response.data['total_spent']) == Decimal('100.00')
        assert response.data['total_units'] == 10
        assert Decimal(response.data['cost_per_unit']) == Decimal('10.00')
        assert response.data['total_entities'] == 2
        assert Decimal(response.data['efficiency_score']) == Decimal('118.00')

    def test_my_stats_empty(self, tracker_client):
        url = reverse('tracking:my-stats')
        response = tracker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_units'] == 0
        assert Decimal(response.data['cost_per_unit']) == 0

    def test_my_stats_unauthenticated(self, api_client):
        url = reverse('tracking:my-stats')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestEntityMetrics:
    """Tests for GET /api/tracking/entities/{id}/metrics/"""

    def test_entity_metrics(self, tracker_client, entity_with_entries):
        url = reverse('tracking:entity-metrics', args=[entity_with_entries.id])
        response = tracker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['entries_count'] == 1
        assert Decimal(response.data['cost_per_unit']) == Decimal('10.00')

    def test_unknown_entity(self, tracker_client):
        url = reverse('tracking:entity-metrics', args=[uuid4()])
        response = tracker_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data
