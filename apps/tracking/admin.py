# ==========================================
# apps/tracking/admin.py
# ==========================================

from django.contrib import admin
from apps.tracking.models import TrackedEntity, EncounterEntry


class EncounterEntryInline(admin.TabularInline):
    """Inline admin for an entity's entries."""
    model = EncounterEntry
    extra = 0
    fields = ['date', 'amount_spent', 'duration_minutes', 'units_count']


@admin.register(TrackedEntity)
class TrackedEntityAdmin(admin.ModelAdmin):
    """Admin interface for Tracked Entities."""

    list_display = ['name', 'user', 'rating', 'is_active', 'entry_count', 'created_at']
    list_filter = ['is_active', 'created_at']
    search_fields = ['name', 'user__email']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [EncounterEntryInline]
    ordering = ['-created_at']

    def entry_count(self, obj):
        """Show number of logged entries."""
        return obj.entries.count()
    entry_count.short_description = 'Entries'

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user')
