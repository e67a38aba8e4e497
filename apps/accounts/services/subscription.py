"""
Subscription policy service.

Answers "is this tier locked out of feature X" and applies subscription
updates coming from the billing boundary. Checkout, portal and webhook
handling live outside this project; they call apply_subscription_update().
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from django.db import models, transaction

from apps.accounts.models import User, SubscriptionTier, SubscriptionStatus, PlanType

from .exceptions import UserNotFoundError, InvalidSubscriptionError

logger = logging.getLogger(__name__)


class PremiumFeature(models.TextChoices):
    DATA_VAULT = 'data_vault', 'Data Vault'
    LEADERBOARDS = 'leaderboards', 'Leaderboards'
    ANALYTICS = 'analytics', 'Analytics'
    SHARE = 'share', 'Share'


FREE_TIER_ACTIVE_ENTITY_LIMIT = 1
PAID_TIER_ACTIVE_ENTITY_LIMIT = 50


def is_locked(tier: Optional[str], feature: str) -> bool:
    """
    Return True when the tier may not use a premium feature.

    Only the free tier is locked; every paid and legacy tier has full access.
    A missing tier is not the free tier, so it is not locked.
    """
    if feature not in PremiumFeature.values:
        raise ValueError(f"Unknown feature: {feature}")
    return tier == SubscriptionTier.BOYFRIEND


def locked_features(tier: Optional[str]) -> list:
    """List the premium features a tier is locked out of."""
    return [feature for feature in PremiumFeature.values if is_locked(tier, feature)]


def max_active_entities(tier: Optional[str]) -> int:
    """Maximum number of simultaneously active tracked entities for a tier."""
    if (tier or SubscriptionTier.BOYFRIEND) == SubscriptionTier.BOYFRIEND:
        return FREE_TIER_ACTIVE_ENTITY_LIMIT
    return PAID_TIER_ACTIVE_ENTITY_LIMIT


@transaction.atomic
def apply_subscription_update(
    *,
    user_id: UUID,
    tier: str,
    status: Optional[str] = None,
    plan_type: Optional[str] = None,
    stripe_customer_id: Optional[str] = None,
    stripe_subscription_id: Optional[str] = None,
    period_end: Optional[datetime] = None,
) -> User:
    """
    Write subscription state for a user.

    Called by the billing boundary after it has verified a checkout or
    webhook event. Identifiers that are not passed keep their current value.

    Args:
        user_id: UUID of the user
        tier: New subscription tier
        status: New subscription status (None clears it)
        plan_type: 'weekly' or 'annual' (None clears it)
        stripe_customer_id: Billing customer id, if known
        stripe_subscription_id: Billing subscription id, if known
        period_end: End of the current billing period

    Returns:
        Updated User instance

    Raises:
        InvalidSubscriptionError: If tier, status or plan type is unknown
        UserNotFoundError: If user doesn't exist
    """
    if tier not in SubscriptionTier.values:
        raise InvalidSubscriptionError(f"Invalid subscription tier: {tier}")
    if status is not None and status not in SubscriptionStatus.values:
        raise InvalidSubscriptionError(f"Invalid subscription status: {status}")
    if plan_type is not None and plan_type not in PlanType.values:
        raise InvalidSubscriptionError(f"Invalid plan type: {plan_type}")

    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User {user_id} not found")

    previous_tier = user.subscription_tier

    user.subscription_tier = tier
    user.subscription_status = status
    user.subscription_plan_type = plan_type
    user.subscription_period_end = period_end
    update_fields = [
        'subscription_tier',
        'subscription_status',
        'subscription_plan_type',
        'subscription_period_end',
        'updated_at',
    ]

    if stripe_customer_id is not None:
        user.stripe_customer_id = stripe_customer_id
        update_fields.append('stripe_customer_id')
    if stripe_subscription_id is not None:
        user.stripe_subscription_id = stripe_subscription_id
        update_fields.append('stripe_subscription_id')

    user.save(update_fields=update_fields)

    logger.info(
        "Subscription updated for user %s: %s -> %s (status=%s)",
        user_id, previous_tier, tier, status,
    )
    return user


def mark_paywall_seen(*, user_id: UUID) -> None:
    """Record that the user has been shown the paywall."""
    updated = User.objects.filter(id=user_id).update(has_seen_paywall=True)
    if not updated:
        raise UserNotFoundError(f"User {user_id} not found")
