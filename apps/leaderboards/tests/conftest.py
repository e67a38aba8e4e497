import pytest
from datetime import date, timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User, SubscriptionTier
from apps.leaderboards.models import LeaderboardGroup, LeaderboardMembership
from apps.tracking.models import TrackedEntity, EncounterEntry


def add_entry(user, *, spent, units, minutes, rating=Decimal('8.0')):
    """Give a user one entity with one entry."""
    entity = TrackedEntity.objects.create(user=user, name='Entity', age=30, rating=rating)
    EncounterEntry.objects.create(
        entity=entity,
        date=date(2025, 1, 10),
        amount_spent=Decimal(spent),
        duration_minutes=minutes,
        units_count=units,
    )
    return entity


def auth(client, user):
    """Authenticate an API client as user."""
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def group_creator(db):
    """Create and return a paid-tier user who creates groups."""
    return User.objects.create_user(
        email='creator@example.com',
        password='TestPass123!',
        display_name='Group Creator',
        subscription_tier=SubscriptionTier.PLAYER,
    )


@pytest.fixture
def member_user(db):
    """Create and return a paid-tier user."""
    return User.objects.create_user(
        email='member@example.com',
        password='TestPass123!',
        display_name='Group Member',
        subscription_tier=SubscriptionTier.PLAYER,
    )


@pytest.fixture
def outsider(db):
    """Create and return a paid-tier user not in any group."""
    return User.objects.create_user(
        email='outsider@example.com',
        password='TestPass123!',
        subscription_tier=SubscriptionTier.PLAYER,
    )


@pytest.fixture
def free_user(db):
    """Create and return a free-tier user."""
    return User.objects.create_user(
        email='free@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def creator_client(api_client, group_creator):
    """Return API client authenticated as the group creator."""
    return auth(api_client, group_creator)


@pytest.fixture
def member_client(api_client, member_user):
    """Return API client authenticated as a group member."""
    return auth(api_client, member_user)


@pytest.fixture
def outsider_client(api_client, outsider):
    """Return API client authenticated as a non-member."""
    return auth(api_client, outsider)


@pytest.fixture
def free_client(api_client, free_user):
    """Return API client authenticated as a free-tier user."""
    return auth(api_client, free_user)


@pytest.fixture
def group(db, group_creator):
    """Create and return a group with its creator as a member."""
    group = LeaderboardGroup.objects.create(
        name='Friday Crew',
        created_by=group_creator,
    )
    LeaderboardMembership.objects.create(
        group=group,
        user=group_creator,
        display_alias='Captain',
        joined_at=timezone.now() - timedelta(days=2),
    )
    return group


@pytest.fixture
def group_with_member(group, member_user):
    """Group with creator and one more member."""
    LeaderboardMembership.objects.create(
        group=group,
        user=member_user,
        display_alias='Rookie',
        joined_at=timezone.now() - timedelta(days=1),
    )
    return group
