"""
Domain-specific exceptions for tracking app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class TrackingServiceError(Exception):
    """Base exception for all tracking service errors."""
    pass


class EntityNotFoundError(TrackingServiceError):
    """Raised when a tracked entity does not exist or belongs to someone else."""
    pass


class InvalidEntityError(TrackingServiceError):
    """Raised when tracked entity fields are out of range."""
    pass


class InvalidEntryError(TrackingServiceError):
    """Raised when an encounter entry has invalid amounts."""
    pass


class EntityLimitReachedError(TrackingServiceError):
    """Raised when the user's tier does not allow another active entity."""
    pass


class StatsUnavailableError(TrackingServiceError):
    """Raised when stats could not be read from storage."""
    pass
