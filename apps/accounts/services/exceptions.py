"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserNotFoundError(AccountsServiceError):
    """Raised when user does not exist."""
    pass


class InvalidSubscriptionError(AccountsServiceError):
    """Raised when the billing boundary sends an unknown tier, status or plan."""
    pass
