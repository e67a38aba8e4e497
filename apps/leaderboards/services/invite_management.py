"""
Invite management service.

Invite tokens are the only way into a group: they are resolved to a
group, previewed before joining, and regenerated by the creator to
revoke old links.
"""

import logging
from uuid import UUID

from django.conf import settings
from django.db import transaction, IntegrityError
from django.db.models import Count

from apps.leaderboards.models import LeaderboardGroup, generate_invite_token

from .exceptions import (
    GroupNotFoundError,
    InvalidInviteTokenError,
    InsufficientPermissionsError,
    StorageError,
)
from .results import leaderboard_service
from .validation import parse_group_id

logger = logging.getLogger(__name__)


def build_invite_url(token: str) -> str:
    """Shareable join link for an invite token."""
    base_url = getattr(settings, 'INVITE_BASE_URL', '').rstrip('/')
    return f"{base_url}/join/{token}"


@leaderboard_service
def get_group_by_invite_token(*, token: str) -> dict:
    """
    Resolve an invite token to its group.

    Returns:
        ServiceResult wrapping {'id': UUID, 'name': str}

    Errors:
        InvalidInviteTokenError: If no group has this token
    """
    token = (token or '').strip()
    group = None
    if token:
        group = (
            LeaderboardGroup.objects
            .filter(invite_token=token)
            .values('id', 'name')
            .first()
        )
    if group is None:
        raise InvalidInviteTokenError("Invalid invite token")
    return group


@leaderboard_service
def validate_invite_token(*, token: str) -> dict:
    """
    Preview the group behind an invite token before joining.

    Returns:
        ServiceResult wrapping a dict with id, name, creator_email
        and member_count

    Errors:
        InvalidInviteTokenError: If the link is invalid or expired
    """
    token = (token or '').strip()
    try:
        group = (
            LeaderboardGroup.objects
            .select_related('created_by')
            .annotate(member_count=Count('memberships'))
            .get(invite_token=token)
        )
    except LeaderboardGroup.DoesNotExist:
        raise InvalidInviteTokenError("Invalid or expired invite link")

    return {
        'id': group.id,
        'name': group.name,
        'creator_email': group.created_by.email,
        'member_count': group.member_count,
    }


@leaderboard_service
def regenerate_invite_token(*, group_id: UUID, user_id: UUID, max_retries: int = 5) -> str:
    """
    Replace a group's invite token (creator only). Old links stop working.

    Uses row-level locking, with each save attempt in its own savepoint
    so a token collision can be retried.

    Returns:
        ServiceResult wrapping the new token

    Errors:
        GroupNotFoundError, InsufficientPermissionsError, StorageError
    """
    group_id = parse_group_id(group_id)
    with transaction.atomic():
        try:
            group = LeaderboardGroup.objects.select_for_update().get(id=group_id)
        except LeaderboardGroup.DoesNotExist:
            raise GroupNotFoundError("Group not found")

        if str(group.created_by_id) != str(user_id):
            raise InsufficientPermissionsError(
                "Only the group creator can regenerate the invite link"
            )

        for attempt in range(max_retries):
            group.invite_token = generate_invite_token()
            try:
                with transaction.atomic():
                    group.save(update_fields=['invite_token', 'updated_at'])
            except IntegrityError:
                logger.warning("Invite token collision for group %s (attempt %d)", group_id, attempt + 1)
                continue

            logger.info("Invite token regenerated for group %s", group_id)
            return group.invite_token

    raise StorageError(f"Failed to generate unique invite token after {max_retries} attempts")
