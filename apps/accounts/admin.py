# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import User, SubscriptionTier


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Custom admin interface for User model.

    Shows subscription state next to the account so support can see
    what the billing boundary last wrote.
    """

    list_display = [
        'email',
        'display_name',
        'tier_badge',
        'subscription_status',
        'is_active',
        'created_at',
    ]

    list_filter = [
        'subscription_tier',
        'subscription_status',
        'is_active',
        'is_staff',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
        'stripe_customer_id',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Subscription', {
            'fields': (
                'subscription_tier',
                'subscription_status',
                'subscription_plan_type',
                'subscription_period_end',
                'has_seen_paywall',
            ),
        }),
        ('Billing identifiers', {
            'fields': ('stripe_customer_id', 'stripe_subscription_id'),
            'classes': ('collapse',),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'created_at',
        'updated_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def tier_badge(self, obj):
        """Display subscription tier as colored badge."""
        if obj.subscription_tier == SubscriptionTier.BOYFRIEND:
            return format_html(
                '<span style="background: #ccc; color: #666; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>',
                obj.get_subscription_tier_display(),
            )
        return format_html(
            '<span style="background: #E5B800; color: black; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            obj.get_subscription_tier_display(),
        )
    tier_badge.short_description = 'Tier'
    tier_badge.admin_order_field = 'subscription_tier'
