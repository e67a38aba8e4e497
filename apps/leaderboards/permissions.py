from rest_framework import permissions

from apps.accounts.services import is_locked, PremiumFeature
from .services import is_member


class LeaderboardsUnlocked(permissions.BasePermission):
    """
    Permission: User's subscription tier must include leaderboards.
    """

    message = "Leaderboards are a premium feature. Upgrade to unlock them."

    def has_permission(self, request, view):
        tier = getattr(request.user, 'subscription_tier', None)
        return not is_locked(tier, PremiumFeature.LEADERBOARDS)


class IsLeaderboardMember(permissions.BasePermission):
    """
    Permission: User must be a member of the group in the URL.
    """

    message = "You are not a member of this group"

    def has_permission(self, request, view):
        group_id = view.kwargs.get('pk')
        if group_id is None:
            return True
        return is_member(group_id=group_id, user_id=request.user.id)
