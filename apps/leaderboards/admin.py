# ==========================================
# apps/leaderboards/admin.py
# ==========================================

from django.contrib import admin
from apps.leaderboards.models import LeaderboardGroup, LeaderboardMembership
from apps.leaderboards.services import regenerate_invite_token


class LeaderboardMembershipInline(admin.TabularInline):
    """Inline admin for group memberships."""
    model = LeaderboardMembership
    extra = 0
    fields = ['user', 'display_alias', 'joined_at']
    readonly_fields = ['joined_at']


@admin.register(LeaderboardGroup)
class LeaderboardGroupAdmin(admin.ModelAdmin):
    """Admin interface for leaderboard groups."""

    list_display = [
        'name',
        'created_by',
        'member_count',
        'created_at'
    ]
    list_filter = ['created_at']
    search_fields = ['name', 'created_by__email', 'invite_token']
    readonly_fields = ['invite_token', 'created_at', 'updated_at']
    inlines = [LeaderboardMembershipInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'created_by')
        }),
        ('Invitation', {
            'fields': ('invite_token',)
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def member_count(self, obj):
        """Show number of members."""
        return obj.memberships.count()
    member_count.short_description = 'Members'

    actions = ['regenerate_invite_tokens']

    def regenerate_invite_tokens(self, request, queryset):
        """Regenerate invite tokens for selected groups."""
        regenerated = 0
        for group in queryset:
            result = regenerate_invite_token(group_id=group.id, user_id=group.created_by_id)
            if result.ok:
                regenerated += 1
        self.message_user(request, f"Regenerated invite tokens for {regenerated} groups")
    regenerate_invite_tokens.short_description = "Regenerate invite tokens"


@admin.register(LeaderboardMembership)
class LeaderboardMembershipAdmin(admin.ModelAdmin):
    """Admin interface for group memberships."""

    list_display = ['display_alias', 'user', 'group', 'joined_at']
    list_filter = ['joined_at']
    search_fields = ['display_alias', 'user__email', 'group__name']
    readonly_fields = ['joined_at']
    date_hierarchy = 'joined_at'
    ordering = ['-joined_at']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('user', 'group')
