"""
Statistics service - per-user and per-entity aggregates.

Sums are computed by the database (aggregate queries) and the derived
ratios come from the metrics service. Stats are display data: the
public get_user_stats() never raises and falls back to all-zero stats.
"""

import logging
from dataclasses import dataclass, asdict
from decimal import Decimal
from uuid import UUID

from django.db.models import Avg, Count, Sum

from apps.common.results import ServiceResult, returns_result
from apps.tracking.models import TrackedEntity, EncounterEntry

from . import metrics
from .exceptions import TrackingServiceError, EntityNotFoundError, StatsUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserStats:
    """Aggregate metrics for one user across all their tracked entities."""

    total_spent: Decimal = Decimal('0.00')
    total_units: int = 0
    cost_per_unit: Decimal = Decimal('0.00')
    total_time_minutes: int = 0
    total_entities: int = 0
    efficiency_score: Decimal = Decimal('0.00')

    @classmethod
    def empty(cls) -> 'UserStats':
        return cls()

    def as_dict(self) -> dict:
        return asdict(self)


@returns_result(
    TrackingServiceError,
    fallback=lambda: StatsUnavailableError("Stats are temporarily unavailable"),
)
def fetch_user_stats(*, user_id: UUID) -> UserStats:
    """
    Calculate a user's stats from their entities and entries.

    Inactive entities are included; their history still counts.
    The rating fed into the efficiency score is the average rating of
    the user's entities (0 when they have none).

    Args:
        user_id: UUID of the user

    Returns:
        ServiceResult wrapping UserStats, or StatsUnavailableError
    """
    entity_summary = (
        TrackedEntity.objects
        .filter(user_id=user_id)
        .aggregate(count=Count('id'), avg_rating=Avg('rating'))
    )

    totals = (
        EncounterEntry.objects
        .filter(entity__user_id=user_id)
        .aggregate(
            spent=Sum('amount_spent'),
            units=Sum('units_count'),
            minutes=Sum('duration_minutes'),
        )
    )

    total_spent = totals['spent'] or Decimal('0.00')
    total_units = totals['units'] or 0
    total_minutes = totals['minutes'] or 0
    avg_rating = entity_summary['avg_rating'] or Decimal('0')

    return UserStats(
        total_spent=total_spent,
        total_units=total_units,
        cost_per_unit=metrics.cost_per_unit(total_spent, total_units),
        total_time_minutes=total_minutes,
        total_entities=entity_summary['count'],
        efficiency_score=metrics.efficiency_score(
            total_units, total_spent, total_minutes, avg_rating
        ),
    )


def get_user_stats(*, user_id: UUID) -> UserStats:
    """
    Get a user's stats, degrading to all-zero stats on failure.

    Example:
        >>> stats = get_user_stats(user_id=user.id)
        >>> stats.cost_per_unit
        Decimal('12.50')
    """
    result: ServiceResult = fetch_user_stats(user_id=user_id)
    if not result.ok:
        logger.warning("Serving empty stats for user %s: %s", user_id, result.error)
    return result.unwrap_or(UserStats.empty())


def get_entity_metrics(*, entity_id: UUID, user_id: UUID) -> dict:
    """
    Calculate metrics for a single tracked entity.

    Args:
        entity_id: UUID of the entity
        user_id: UUID of the owner

    Returns:
        Dictionary with totals and derived ratios:
        - entries_count, total_spent, total_units, total_time_minutes
        - cost_per_unit, time_per_unit, cost_per_hour, units_per_hour
        - efficiency_score (uses the entity's own rating)

    Raises:
        EntityNotFoundError: If entity doesn't exist or isn't owned by user
    """
    try:
        entity = TrackedEntity.objects.get(id=entity_id, user_id=user_id)
    except TrackedEntity.DoesNotExist:
        raise EntityNotFoundError(f"Tracked entity {entity_id} not found")

    totals = entity.entries.aggregate(
        count=Count('id'),
        spent=Sum('amount_spent'),
        units=Sum('units_count'),
        minutes=Sum('duration_minutes'),
    )

    total_spent = totals['spent'] or Decimal('0.00')
    total_units = totals['units'] or 0
    total_minutes = totals['minutes'] or 0

    return {
        'entity_id': entity.id,
        'entries_count': totals['count'],
        'total_spent': total_spent,
        'total_units': total_units,
        'total_time_minutes': total_minutes,
        'cost_per_unit': metrics.cost_per_unit(total_spent, total_units),
        'time_per_unit': metrics.time_per_unit(total_minutes, total_units),
        'cost_per_hour': metrics.cost_per_hour(total_spent, total_minutes),
        'units_per_hour': metrics.units_per_hour(total_units, total_minutes),
        'efficiency_score': metrics.efficiency_score(
            total_units, total_spent, total_minutes, entity.rating
        ),
    }
