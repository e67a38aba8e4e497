"""
Entity management service.

Handles tracked entity lifecycle and encounter logging. Active entity
counts are capped per subscription tier.
"""

import logging
from datetime import date as date_type
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.accounts.services import max_active_entities
from apps.tracking.models import TrackedEntity, EncounterEntry

from .exceptions import (
    EntityNotFoundError,
    InvalidEntityError,
    InvalidEntryError,
    EntityLimitReachedError,
)

logger = logging.getLogger(__name__)

MIN_RATING = Decimal('0')
MAX_RATING = Decimal('10')

# Bounds of EncounterEntry.amount_spent (max_digits=10, decimal_places=2)
MAX_AMOUNT_SPENT = Decimal('99999999.99')
AMOUNT_PLACES = Decimal('0.01')


def _get_owned_entity(entity_id: UUID, user: User, *, for_update: bool = False) -> TrackedEntity:
    queryset = TrackedEntity.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=entity_id, user=user)
    except TrackedEntity.DoesNotExist:
        raise EntityNotFoundError(f"Tracked entity {entity_id} not found")


def _check_active_limit(user: User) -> None:
    # Lock the owner row so two concurrent creates can't both pass the check
    owner = User.objects.select_for_update().get(id=user.id)
    limit = max_active_entities(owner.subscription_tier)
    active = TrackedEntity.objects.filter(user=owner, is_active=True).count()
    if active >= limit:
        raise EntityLimitReachedError(
            f"Your plan allows {limit} active profile(s). Upgrade to track more."
        )


@transaction.atomic
def create_entity(
    *,
    user: User,
    name: str,
    age: int,
    rating,
    nationality: Optional[str] = None,
    ethnicity: Optional[str] = None,
    hair_color: Optional[str] = None,
    location_city: Optional[str] = None,
    location_country: Optional[str] = None,
) -> TrackedEntity:
    """
    Create a new active tracked entity for a user.

    Args:
        user: Owner of the entity
        name: Entity name
        age: Age in years
        rating: Rating between 0 and 10
        nationality, ethnicity, hair_color, location_city, location_country:
            Optional descriptive fields

    Returns:
        Created TrackedEntity instance

    Raises:
        InvalidEntityError: If name is blank or rating is out of range
        EntityLimitReachedError: If the user's tier has no free active slot
    """
    name = (name or '').strip()
    if not name:
        raise InvalidEntityError("Name is required")

    try:
        rating = Decimal(str(rating))
    except InvalidOperation:
        raise InvalidEntityError("Rating must be a number")
    if not rating.is_finite() or not MIN_RATING <= rating <= MAX_RATING:
        raise InvalidEntityError("Rating must be between 0 and 10")

    _check_active_limit(user)

    entity = TrackedEntity.objects.create(
        user=user,
        name=name,
        age=age,
        rating=rating,
        nationality=nationality,
        ethnicity=ethnicity,
        hair_color=hair_color,
        location_city=location_city,
        location_country=location_country,
    )
    logger.info("User %s created tracked entity %s", user.id, entity.id)
    return entity


@transaction.atomic
def deactivate_entity(*, entity_id: UUID, user: User) -> TrackedEntity:
    """
    Soft-deactivate an entity. Its entries keep counting toward stats.

    Raises:
        EntityNotFoundError: If entity doesn't exist or isn't owned by user
    """
    entity = _get_owned_entity(entity_id, user, for_update=True)
    if entity.is_active:
        entity.is_active = False
        entity.save(update_fields=['is_active', 'updated_at'])
    return entity


@transaction.atomic
def reactivate_entity(*, entity_id: UUID, user: User) -> TrackedEntity:
    """
    Reactivate a deactivated entity, subject to the tier's active limit.

    Raises:
        EntityNotFoundError: If entity doesn't exist or isn't owned by user
        EntityLimitReachedError: If the user's tier has no free active slot
    """
    entity = _get_owned_entity(entity_id, user, for_update=True)
    if not entity.is_active:
        _check_active_limit(user)
        entity.is_active = True
        entity.save(update_fields=['is_active', 'updated_at'])
    return entity


@transaction.atomic
def delete_entity(*, entity_id: UUID, user: User) -> None:
    """
    Hard-delete an entity. Cascading deletes remove all of its entries.

    Raises:
        EntityNotFoundError: If entity doesn't exist or isn't owned by user
    """
    entity = _get_owned_entity(entity_id, user, for_update=True)
    entity.delete()


def add_entry(
    *,
    entity_id: UUID,
    user: User,
    date: date_type,
    amount_spent,
    duration_minutes: int,
    units_count: int = 0,
) -> EncounterEntry:
    """
    Log an encounter against one of the user's entities.

    Args:
        entity_id: UUID of the entity
        user: Owner of the entity
        date: Date of the encounter
        amount_spent: Money spent, >= 0
        duration_minutes: Duration, > 0
        units_count: Unit count, whole number >= 0

    Returns:
        Created EncounterEntry instance

    Raises:
        EntityNotFoundError: If entity doesn't exist or isn't owned by user
        InvalidEntryError: If any amount is out of range
    """
    try:
        amount_spent = Decimal(str(amount_spent))
    except InvalidOperation:
        raise InvalidEntryError("Amount spent must be a number")
    if not amount_spent.is_finite() or amount_spent < 0:
        raise InvalidEntryError("Amount spent cannot be negative")
    if amount_spent > MAX_AMOUNT_SPENT:
        raise InvalidEntryError(f"Amount spent cannot exceed {MAX_AMOUNT_SPENT}")
    if amount_spent != amount_spent.quantize(AMOUNT_PLACES):
        raise InvalidEntryError("Amount spent can have at most 2 decimal places")

    # bool is an int subclass
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int) or duration_minutes <= 0:
        raise InvalidEntryError("Duration must be greater than 0 minutes")

    if isinstance(units_count, bool) or not isinstance(units_count, int) or units_count < 0:
        raise InvalidEntryError("Unit count must be a whole number of 0 or more")

    entity = _get_owned_entity(entity_id, user)

    return EncounterEntry.objects.create(
        entity=entity,
        date=date,
        amount_spent=amount_spent,
        duration_minutes=duration_minutes,
        units_count=units_count,
    )
