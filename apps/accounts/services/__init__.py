"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserNotFoundError,
    InvalidSubscriptionError,
)
from .subscription import (
    PremiumFeature,
    is_locked,
    locked_features,
    max_active_entities,
    apply_subscription_update,
    mark_paywall_seen,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserNotFoundError',
    'InvalidSubscriptionError',
    # Services
    'PremiumFeature',
    'is_locked',
    'locked_features',
    'max_active_entities',
    'apply_subscription_update',
    'mark_paywall_seen',
]
