"""
Domain-specific exceptions for leaderboards app.

Services raise these; the public service functions hand them back inside
a ServiceResult instead of letting them escape. Views convert them to
HTTP responses by class:

    InvalidInputError            -> 400 (fix your input)
    GroupNotFoundError, NotMemberError -> 404 (link expired / not found)
    AlreadyMemberError           -> 409 (expected, common)
    InsufficientPermissionsError -> 403
    StorageError                 -> 503
"""


class LeaderboardsServiceError(Exception):
    """Base exception for all leaderboards service errors."""
    pass


class InvalidInputError(LeaderboardsServiceError):
    """Raised when input fails validation, before any storage access."""
    pass


class InvalidGroupNameError(InvalidInputError):
    """Raised when a group name is not 3-100 characters after trimming."""
    pass


class InvalidDisplayAliasError(InvalidInputError):
    """Raised when a display alias is not 2-50 characters after trimming."""
    pass


class GroupNotFoundError(LeaderboardsServiceError):
    """Raised when a group does not exist or is inaccessible."""
    pass


class InvalidInviteTokenError(GroupNotFoundError):
    """Raised when an invite token matches no group."""
    pass


class NotMemberError(LeaderboardsServiceError):
    """Raised when a user tries to perform an action requiring membership."""
    pass


class AlreadyMemberError(LeaderboardsServiceError):
    """Raised when a user tries to join a group they're already in."""
    pass


class InsufficientPermissionsError(LeaderboardsServiceError):
    """Raised when someone other than the creator renames or deletes a group."""
    pass


class StorageError(LeaderboardsServiceError):
    """Raised when storage fails in a way not otherwise classified."""
    pass
