# ==========================================
# apps/tracking/models.py
# ==========================================

from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid


class TrackedEntity(models.Model):
    """A profile the user logs encounters against."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='tracked_entities')
    name = models.CharField(max_length=100)
    age = models.PositiveSmallIntegerField()

    # Descriptive, all optional
    nationality = models.CharField(max_length=100, blank=True, null=True)
    ethnicity = models.CharField(max_length=100, blank=True, null=True)
    hair_color = models.CharField(max_length=50, blank=True, null=True)
    location_city = models.CharField(max_length=100, blank=True, null=True)
    location_country = models.CharField(max_length=100, blank=True, null=True)

    rating = models.DecimalField(
        max_digits=3,
        decimal_places=1,
        validators=[MinValueValidator(Decimal('0.0')), MaxValueValidator(Decimal('10.0'))]
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tracked_entities'
        indexes = [
            models.Index(fields=['user', 'is_active'], name='tracked_user_active_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name


class EncounterEntry(models.Model):
    """One logged event with cost, time and unit count."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    entity = models.ForeignKey(TrackedEntity, on_delete=models.CASCADE, related_name='entries')
    date = models.DateField()
    amount_spent = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    duration_minutes = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    units_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'encounter_entries'
        indexes = [
            models.Index(fields=['entity', 'date'], name='encounter_entity_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.entity.name} on {self.date}"
