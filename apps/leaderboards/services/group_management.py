"""
Group management service.

Handles leaderboard group creation, lookup, renaming and deletion.
Every public function returns a ServiceResult; ownership checks are part
of the query predicate, so a non-creator's rename or delete touches no rows.
"""

import logging
from typing import List
from uuid import UUID

from django.db import transaction, IntegrityError, DatabaseError
from django.db.models import Count
from django.utils import timezone

from apps.accounts.models import User
from apps.leaderboards.models import LeaderboardGroup, LeaderboardMembership, generate_invite_token

from .exceptions import (
    GroupNotFoundError,
    InsufficientPermissionsError,
    StorageError,
)
from .results import leaderboard_service
from .validation import validate_group_name, parse_group_id, DISPLAY_ALIAS_MAX_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_ALIAS = 'User'


def derive_creator_alias(user) -> str:
    """
    Alias for a group creator: display name, else email local part, else 'User'.
    """
    alias = user.get_display_name().strip() if user is not None else ''
    return (alias or DEFAULT_ALIAS)[:DISPLAY_ALIAS_MAX_LENGTH]


@leaderboard_service
def create_group(*, name: str, user_id: UUID, max_retries: int = 5) -> LeaderboardGroup:
    """
    Create a new leaderboard group and add the creator as its first member.

    Steps:
    1. Validate the name (no I/O on failure)
    2. Insert the group with a fresh invite token, retrying on collision
    3. Insert the creator's membership; a failure here is logged and
       does not fail group creation

    Args:
        name: Group name, 3-100 characters after trimming
        user_id: UUID of the creating user
        max_retries: Maximum attempts to generate a unique invite token

    Returns:
        ServiceResult wrapping the created LeaderboardGroup

    Errors:
        InvalidGroupNameError, StorageError
    """
    name = validate_group_name(name)

    group = None
    for attempt in range(max_retries):
        try:
            # Each attempt is a separate transaction
            with transaction.atomic():
                group = LeaderboardGroup.objects.create(
                    name=name,
                    created_by_id=user_id,
                    invite_token=generate_invite_token(),
                )
            break
        except IntegrityError:
            # Invite token collision (very rare)
            logger.warning("Invite token collision creating group (attempt %d)", attempt + 1)

    if group is None:
        raise StorageError(
            f"Failed to generate unique invite token after {max_retries} attempts"
        )

    _add_creator_membership(group)

    logger.info("Leaderboard group %s created by user %s", group.id, user_id)
    return group


def _add_creator_membership(group: LeaderboardGroup) -> None:
    try:
        with transaction.atomic():
            creator = User.objects.filter(id=group.created_by_id).first()
            LeaderboardMembership.objects.bulk_create(
                [
                    LeaderboardMembership(
                        group=group,
                        user_id=group.created_by_id,
                        display_alias=derive_creator_alias(creator),
                        joined_at=timezone.now(),
                    )
                ],
                ignore_conflicts=True,
            )
    except DatabaseError:
        logger.warning(
            "Could not add creator %s as member of group %s",
            group.created_by_id, group.id, exc_info=True,
        )


@leaderboard_service
def get_user_groups(*, user_id: UUID) -> List[LeaderboardGroup]:
    """
    List the groups a user belongs to, newest first.

    Each group carries a ``member_count`` annotation. Runs as one query.
    """
    member_of = LeaderboardMembership.objects.filter(user_id=user_id).values('group_id')
    return list(
        LeaderboardGroup.objects
        .filter(id__in=member_of)
        .select_related('created_by')
        .annotate(member_count=Count('memberships'))
        .order_by('-created_at')
    )


@leaderboard_service
def get_group_by_id(*, group_id: UUID) -> LeaderboardGroup:
    """
    Get a group by ID, annotated with ``member_count``.

    Errors:
        GroupNotFoundError: If group doesn't exist
    """
    group_id = parse_group_id(group_id)
    try:
        return (
            LeaderboardGroup.objects
            .select_related('created_by')
            .annotate(member_count=Count('memberships'))
            .get(id=group_id)
        )
    except LeaderboardGroup.DoesNotExist:
        raise GroupNotFoundError("Group not found")


def _raise_missing_or_forbidden(group_id: UUID, action: str) -> None:
    if LeaderboardGroup.objects.filter(id=group_id).exists():
        raise InsufficientPermissionsError(f"Only the group creator can {action} this group")
    raise GroupNotFoundError("Group not found")


@leaderboard_service
def update_group_name(*, group_id: UUID, name: str, user_id: UUID) -> LeaderboardGroup:
    """
    Rename a group (creator only).

    Errors:
        InvalidGroupNameError, GroupNotFoundError, InsufficientPermissionsError
    """
    name = validate_group_name(name)
    group_id = parse_group_id(group_id)

    updated = (
        LeaderboardGroup.objects
        .filter(id=group_id, created_by_id=user_id)
        .update(name=name, updated_at=timezone.now())
    )
    if not updated:
        _raise_missing_or_forbidden(group_id, 'rename')

    logger.info("Leaderboard group %s renamed by user %s", group_id, user_id)
    return get_group_by_id(group_id=group_id).unwrap()


@leaderboard_service
def delete_group(*, group_id: UUID, user_id: UUID) -> None:
    """
    Delete a group and all its memberships (creator only).

    Errors:
        GroupNotFoundError, InsufficientPermissionsError
    """
    group_id = parse_group_id(group_id)
    deleted, _ = (
        LeaderboardGroup.objects
        .filter(id=group_id, created_by_id=user_id)
        .delete()
    )
    if not deleted:
        _raise_missing_or_forbidden(group_id, 'delete')

    logger.info("Leaderboard group %s deleted by user %s", group_id, user_id)
