"""
Membership management service.

Handles joining via invite token, leaving, alias changes and member
listing. Membership is unique per (group, user); concurrent joins are
resolved by the database constraint.
"""

import logging
from typing import List, Optional
from uuid import UUID

from django.core.exceptions import ValidationError
from django.db import transaction, IntegrityError, DatabaseError

from apps.leaderboards.models import LeaderboardGroup, LeaderboardMembership

from .exceptions import (
    GroupNotFoundError,
    AlreadyMemberError,
    NotMemberError,
)
from .invite_management import get_group_by_invite_token
from .results import leaderboard_service
from .validation import validate_display_alias, parse_group_id

logger = logging.getLogger(__name__)

ALREADY_MEMBER_MESSAGE = "You are already a member of this group"

# Lookup failures that membership checks treat as "not a member"
LOOKUP_ERRORS = (DatabaseError, ValidationError, ValueError, TypeError)


@leaderboard_service
def join_group(*, token: str, user_id: UUID, display_alias: str) -> LeaderboardMembership:
    """
    Join a group using an invite token.

    The alias is validated before the token is resolved. Joining a group
    twice fails with AlreadyMemberError and leaves the existing
    membership untouched, including when two joins race.

    Args:
        token: Invite token from the shared link
        user_id: UUID of the joining user
        display_alias: Name shown to other members, 2-50 characters

    Returns:
        ServiceResult wrapping the created LeaderboardMembership

    Errors:
        InvalidDisplayAliasError, InvalidInviteTokenError,
        AlreadyMemberError, StorageError
    """
    alias = validate_display_alias(display_alias)
    group = get_group_by_invite_token(token=token).unwrap()

    if LeaderboardMembership.objects.filter(group_id=group['id'], user_id=user_id).exists():
        raise AlreadyMemberError(ALREADY_MEMBER_MESSAGE)

    try:
        with transaction.atomic():
            membership = LeaderboardMembership.objects.create(
                group_id=group['id'],
                user_id=user_id,
                display_alias=alias,
            )
    except IntegrityError:
        # Lost a race with a concurrent join
        raise AlreadyMemberError(ALREADY_MEMBER_MESSAGE)

    logger.info("User %s joined leaderboard group %s", user_id, group['id'])
    return membership


@leaderboard_service
def leave_group(*, group_id: UUID, user_id: UUID) -> None:
    """
    Leave a group. Leaving a group you are not in is a no-op.

    The creator may leave too; the group stays and keeps its creator.

    Errors:
        GroupNotFoundError: If group_id is not a valid id
    """
    group_id = parse_group_id(group_id)
    deleted, _ = (
        LeaderboardMembership.objects
        .filter(group_id=group_id, user_id=user_id)
        .delete()
    )
    if deleted:
        logger.info("User %s left leaderboard group %s", user_id, group_id)


@leaderboard_service
def update_display_alias(*, group_id: UUID, user_id: UUID, display_alias: str) -> LeaderboardMembership:
    """
    Change the caller's alias within one group.

    Errors:
        InvalidDisplayAliasError, NotMemberError
    """
    alias = validate_display_alias(display_alias)
    group_id = parse_group_id(group_id)

    with transaction.atomic():
        try:
            membership = (
                LeaderboardMembership.objects
                .select_for_update()
                .get(group_id=group_id, user_id=user_id)
            )
        except LeaderboardMembership.DoesNotExist:
            raise NotMemberError("You are not a member of this group")

        membership.display_alias = alias
        membership.save(update_fields=['display_alias'])

    return membership


@leaderboard_service
def list_members(*, group_id: UUID) -> List[LeaderboardMembership]:
    """
    List a group's memberships, earliest joiner first.

    Errors:
        GroupNotFoundError: If group doesn't exist
    """
    group_id = parse_group_id(group_id)
    if not LeaderboardGroup.objects.filter(id=group_id).exists():
        raise GroupNotFoundError("Group not found")

    return list(
        LeaderboardMembership.objects
        .filter(group_id=group_id)
        .order_by('joined_at')
    )


def is_member(*, group_id: UUID, user_id: UUID) -> bool:
    """
    Check whether a user belongs to a group.

    Any lookup failure is logged and reported as False.
    """
    try:
        return LeaderboardMembership.objects.filter(group_id=group_id, user_id=user_id).exists()
    except LOOKUP_ERRORS:
        logger.warning("Membership check failed for group %s", group_id, exc_info=True)
        return False


def get_member_alias(*, group_id: UUID, user_id: UUID) -> Optional[str]:
    """Return the user's alias in a group, or None if they are not a member."""
    try:
        return (
            LeaderboardMembership.objects
            .filter(group_id=group_id, user_id=user_id)
            .values_list('display_alias', flat=True)
            .first()
        )
    except LOOKUP_ERRORS:
        logger.warning("Alias lookup failed for group %s", group_id, exc_info=True)
        return None
