# ==========================================
# apps/leaderboards/models.py
# ==========================================

from django.db import models
from django.utils import timezone
import uuid
import secrets

INVITE_TOKEN_BYTES = 24


def generate_invite_token():
    """Unguessable, URL-safe invite token (32 characters)."""
    return secrets.token_urlsafe(INVITE_TOKEN_BYTES)


class LeaderboardGroup(models.Model):
    """Invite-only group whose members are ranked against each other."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    created_by = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='created_leaderboards')
    invite_token = models.CharField(max_length=64, unique=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'leaderboard_groups'
        indexes = [
            models.Index(fields=['created_by', 'created_at'], name='leaderboard_creator_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.invite_token:
            self.invite_token = generate_invite_token()
        super().save(*args, **kwargs)

    def is_creator(self, user):
        return self.created_by_id == user.id


class LeaderboardMembership(models.Model):
    """A user's aliased presence in one leaderboard group."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    group = models.ForeignKey(LeaderboardGroup, on_delete=models.CASCADE, related_name='memberships')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='leaderboard_memberships')
    display_alias = models.CharField(max_length=50)
    joined_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'leaderboard_memberships'
        unique_together = [['group', 'user']]
        indexes = [
            models.Index(fields=['group', 'joined_at'], name='membership_group_joined_idx'),
        ]
        ordering = ['joined_at']

    def __str__(self):
        return f"{self.display_alias} in {self.group.name}"
