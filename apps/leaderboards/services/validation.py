"""Input validation for group names and display aliases. No I/O."""

from uuid import UUID

from .exceptions import InvalidGroupNameError, InvalidDisplayAliasError, GroupNotFoundError

GROUP_NAME_MIN_LENGTH = 3
GROUP_NAME_MAX_LENGTH = 100

DISPLAY_ALIAS_MIN_LENGTH = 2
DISPLAY_ALIAS_MAX_LENGTH = 50


def validate_group_name(name) -> str:
    """Return the trimmed name, or raise InvalidGroupNameError."""
    trimmed = (name or '').strip()
    if not GROUP_NAME_MIN_LENGTH <= len(trimmed) <= GROUP_NAME_MAX_LENGTH:
        raise InvalidGroupNameError(
            f"Group name must be between {GROUP_NAME_MIN_LENGTH} and "
            f"{GROUP_NAME_MAX_LENGTH} characters"
        )
    return trimmed


def validate_display_alias(display_alias) -> str:
    """Return the trimmed alias, or raise InvalidDisplayAliasError."""
    trimmed = (display_alias or '').strip()
    if not DISPLAY_ALIAS_MIN_LENGTH <= len(trimmed) <= DISPLAY_ALIAS_MAX_LENGTH:
        raise InvalidDisplayAliasError(
            f"Username must be between {DISPLAY_ALIAS_MIN_LENGTH} and "
            f"{DISPLAY_ALIAS_MAX_LENGTH} characters"
        )
    return trimmed


def parse_group_id(group_id) -> UUID:
    """Return group_id as a UUID; a malformed id names no group."""
    if isinstance(group_id, UUID):
        return group_id
    try:
        return UUID(str(group_id))
    except ValueError:
        raise GroupNotFoundError("Group not found")
