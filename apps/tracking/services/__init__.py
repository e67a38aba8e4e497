"""
Tracking app services layer.

Metrics are pure functions; statistics aggregate stored entries;
entity management owns the tracked entity lifecycle.
"""

from .exceptions import (
    TrackingServiceError,
    EntityNotFoundError,
    InvalidEntityError,
    InvalidEntryError,
    EntityLimitReachedError,
    StatsUnavailableError,
)

from .metrics import (
    round_half_up,
    cost_per_unit,
    time_per_unit,
    cost_per_hour,
    units_per_hour,
    efficiency_score,
)

from .statistics import (
    UserStats,
    fetch_user_stats,
    get_user_stats,
    get_entity_metrics,
)

from .entity_management import (
    create_entity,
    deactivate_entity,
    reactivate_entity,
    delete_entity,
    add_entry,
)


__all__ = [
    # Exceptions
    'TrackingServiceError',
    'EntityNotFoundError',
    'InvalidEntityError',
    'InvalidEntryError',
    'EntityLimitReachedError',
    'StatsUnavailableError',

    # Metrics
    'round_half_up',
    'cost_per_unit',
    'time_per_unit',
    'cost_per_hour',
    'units_per_hour',
    'efficiency_score',

    # Statistics
    'UserStats',
    'fetch_user_stats',
    'get_user_stats',
    'get_entity_metrics',

    # Entity Management
    'create_entity',
    'deactivate_entity',
    'reactivate_entity',
    'delete_entity',
    'add_entry',
]
