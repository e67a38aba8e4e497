import pytest
from datetime import date
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, SubscriptionTier
from apps.tracking.models import TrackedEntity, EncounterEntry


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def tracker(db):
    """Create and return a paid-tier user who tracks entities."""
    return User.objects.create_user(
        email='tracker@example.com',
        password='TestPass123!',
        display_name='Tracker',
        subscription_tier=SubscriptionTier.PLAYER,
    )


@pytest.fixture
def free_tracker(db):
    """Create and return a free-tier user."""
    return User.objects.create_user(
        email='free@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def tracker_client(api_client, tracker):
    """Return API client authenticated as the tracker."""
    refresh = RefreshToken.for_user(tracker)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def entity(db, tracker):
    """Create and return an active entity rated 8."""
    return TrackedEntity.objects.create(
        user=tracker,
        name='Alice',
        age=27,
        rating=Decimal('8.0'),
    )


@pytest.fixture
def inactive_entity(db, tracker):
    """Create and return an inactive entity rated 8."""
    return TrackedEntity.objects.create(
        user=tracker,
        name='Beth',
        age=31,
        rating=Decimal('8.0'),
        is_active=False,
    )


@pytest.fixture
def entity_with_entries(entity, inactive_entity):
    """
    Entries spread over an active and an inactive entity.

    Totals: 100.00 spent, 10 units, 60 minutes.
    """
    EncounterEntry.objects.create(
        entity=entity,
        date=date(2025, 1, 10),
        amount_spent=Decimal('60.00'),
        duration_minutes=40,
        units_count=6,
    )
    EncounterEntry.objects.create(
        entity=inactive_entity,
        date=date(2025, 1, 12),
        amount_spent=Decimal('40.00'),
        duration_minutes=20,
        units_count=4,
    )
    return entity
