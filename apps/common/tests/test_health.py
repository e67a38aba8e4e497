import pytest
from unittest.mock import patch
from django.db import OperationalError
from django.urls import reverse
from rest_framework.test import APIClient


@pytest.mark.django_db
class TestHealthCheck:
    """Tests for GET /api/health/"""

    def test_healthy(self):
        response = APIClient().get(reverse('health-check'))

        assert response.status_code == 200
        assert response.json() == {'status': 'healthy', 'database': 'ok'}

    def test_database_down(self):
        with patch('config.views.connection.cursor', side_effect=OperationalError("down")):
            response = APIClient().get(reverse('health-check'))

        assert response.status_code == 503
        assert response.json()['status'] == 'unhealthy'
