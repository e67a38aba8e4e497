"""
Service layer tests for accounts app.

Tests cover:
- Feature gating policy per subscription tier
- Billing boundary updates
- Display name fallback
"""

import pytest
from datetime import timedelta
from uuid import uuid4

from django.utils import timezone

from apps.accounts.models import User, SubscriptionTier, SubscriptionStatus
from apps.accounts.services import (
    PremiumFeature,
    is_locked,
    locked_features,
    max_active_entities,
    apply_subscription_update,
    mark_paywall_seen,
    UserNotFoundError,
    InvalidSubscriptionError,
)


# =============================================================================
# Feature Gating Policy Tests
# =============================================================================

class TestFeatureGating:
    """Tests for is_locked() and friends (no database needed)."""

    @pytest.mark.parametrize('feature', PremiumFeature.values)
    def test_free_tier_is_locked_out_of_every_premium_feature(self, feature):
        assert is_locked(SubscriptionTier.BOYFRIEND, feature) is True

    @pytest.mark.parametrize('tier', [
        SubscriptionTier.PLAYER,
        SubscriptionTier.FREE,
        SubscriptionTier.PREMIUM,
        SubscriptionTier.LIFETIME,
    ])
    def test_other_tiers_are_not_locked(self, tier):
        assert is_locked(tier, PremiumFeature.LEADERBOARDS) is False

    def test_missing_tier_is_not_locked(self):
        assert is_locked(None, PremiumFeature.ANALYTICS) is False
        assert locked_features(None) == []

    def test_missing_tier_keeps_free_entity_limit(self):
        assert max_active_entities(None) == 1

    def test_unknown_feature_rejected(self):
        with pytest.raises(ValueError):
            is_locked(SubscriptionTier.PLAYER, 'time_machine')

    def test_locked_features(self):
        assert set(locked_features(SubscriptionTier.BOYFRIEND)) == set(PremiumFeature.values)
        assert locked_features(SubscriptionTier.PLAYER) == []

    def test_max_active_entities(self):
        assert max_active_entities(SubscriptionTier.BOYFRIEND) == 1
        assert max_active_entities(SubscriptionTier.PLAYER) == 50


# =============================================================================
# Billing Boundary Tests
# =============================================================================

@pytest.mark.django_db
class TestApplySubscriptionUpdate:
    """Tests for apply_subscription_update() and mark_paywall_seen()."""

    def test_upgrade_to_player(self, user):
        period_end = timezone.now() + timedelta(days=7)

        updated = apply_subscription_update(
            user_id=user.id,
            tier=SubscriptionTier.PLAYER,
            status=SubscriptionStatus.ACTIVE,
            plan_type='weekly',
            stripe_customer_id='cus_123',
            stripe_subscription_id='sub_123',
            period_end=period_end,
        )

        user.refresh_from_db()
        assert updated.subscription_tier == SubscriptionTier.PLAYER
        assert user.subscription_status == SubscriptionStatus.ACTIVE
        assert user.subscription_plan_type == 'weekly'
        assert user.stripe_customer_id == 'cus_123'
        assert user.stripe_subscription_id == 'sub_123'
        assert user.subscription_period_end == period_end

    def test_downgrade_keeps_billing_identifiers(self, player_user):
        player_user.stripe_customer_id = 'cus_keep'
        player_user.save()

        apply_subscription_update(
            user_id=player_user.id,
            tier=SubscriptionTier.BOYFRIEND,
            status=SubscriptionStatus.CANCELED,
        )

        player_user.refresh_from_db()
        assert player_user.subscription_tier == SubscriptionTier.BOYFRIEND
        assert player_user.subscription_status == SubscriptionStatus.CANCELED
        assert player_user.stripe_customer_id == 'cus_keep'

    def test_invalid_tier(self, user):
        with pytest.raises(InvalidSubscriptionError):
            apply_subscription_update(user_id=user.id, tier='gold')

    def test_invalid_status(self, user):
        with pytest.raises(InvalidSubscriptionError):
            apply_subscription_update(
                user_id=user.id,
                tier=SubscriptionTier.PLAYER,
                status='paused',
            )

    def test_unknown_user(self):
        with pytest.raises(UserNotFoundError):
            apply_subscription_update(user_id=uuid4(), tier=SubscriptionTier.PLAYER)

    def test_mark_paywall_seen(self, user):
        assert user.has_seen_paywall is False

        mark_paywall_seen(user_id=user.id)

        user.refresh_from_db()
        assert user.has_seen_paywall is True

    def test_mark_paywall_seen_unknown_user(self):
        with pytest.raises(UserNotFoundError):
            mark_paywall_seen(user_id=uuid4())


@pytest.mark.django_db
class TestUserModel:

    def test_new_users_start_on_free_tier(self, user):
        assert user.subscription_tier == SubscriptionTier.BOYFRIEND
        assert user.subscription_status is None

    def test_display_name_falls_back_to_email_prefix(self, db):
        user = User.objects.create_user(email='nameless@example.com', password='x')
        assert user.get_display_name() == 'nameless'
