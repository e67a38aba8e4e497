"""
Leaderboards app services layer.

Public service functions return a ServiceResult rather than raising;
the error it carries is one of the exceptions below. Ranking never
fails: it degrades to an empty list.
"""

from .exceptions import (
    LeaderboardsServiceError,
    InvalidInputError,
    InvalidGroupNameError,
    InvalidDisplayAliasError,
    GroupNotFoundError,
    InvalidInviteTokenError,
    NotMemberError,
    AlreadyMemberError,
    InsufficientPermissionsError,
    StorageError,
)

from .validation import (
    validate_group_name,
    validate_display_alias,
)

from .group_management import (
    create_group,
    get_user_groups,
    get_group_by_id,
    update_group_name,
    delete_group,
)

from .invite_management import (
    build_invite_url,
    get_group_by_invite_token,
    validate_invite_token,
    regenerate_invite_token,
)

from .membership_management import (
    join_group,
    leave_group,
    update_display_alias,
    list_members,
    is_member,
    get_member_alias,
)

from .ranking import (
    MemberWithStats,
    Ranking,
    calculate_rankings,
    get_group_rankings,
)


__all__ = [
    # Exceptions
    'LeaderboardsServiceError',
    'InvalidInputError',
    'InvalidGroupNameError',
    'InvalidDisplayAliasError',
    'GroupNotFoundError',
    'InvalidInviteTokenError',
    'NotMemberError',
    'AlreadyMemberError',
    'InsufficientPermissionsError',
    'StorageError',

    # Validation
    'validate_group_name',
    'validate_display_alias',

    # Group Management
    'create_group',
    'get_user_groups',
    'get_group_by_id',
    'update_group_name',
    'delete_group',

    # Invite Management
    'build_invite_url',
    'get_group_by_invite_token',
    'validate_invite_token',
    'regenerate_invite_token',

    # Membership Management
    'join_group',
    'leave_group',
    'update_display_alias',
    'list_members',
    'is_member',
    'get_member_alias',

    # Ranking
    'MemberWithStats',
    'Ranking',
    'calculate_rankings',
    'get_group_rankings',
]
