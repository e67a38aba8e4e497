import pytest
from apps.accounts.models import User, SubscriptionTier


@pytest.fixture
def user(db):
    """Create and return a free-tier test user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        display_name='Test User',
    )


@pytest.fixture
def player_user(db):
    """Create and return a paid-tier user."""
    return User.objects.create_user(
        email='player@example.com',
        password='TestPass123!',
        subscription_tier=SubscriptionTier.PLAYER,
        subscription_status='active',
    )
