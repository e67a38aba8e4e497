from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers

from apps.tracking.serializers import UserStatsSerializer
from .models import LeaderboardGroup, LeaderboardMembership
from .services import build_invite_url


class LeaderboardMemberSerializer(serializers.ModelSerializer):
    """A member as other members see them: alias only, no account details."""

    is_current_user = serializers.SerializerMethodField()

    class Meta:
        model = LeaderboardMembership
        fields = ['id', 'display_alias', 'joined_at', 'is_current_user']
        read_only_fields = fields

    def get_is_current_user(self, obj) -> bool:
        request = self.context.get('request')
        return bool(request and request.user.is_authenticated and obj.user_id == request.user.id)


class MembershipSerializer(serializers.ModelSerializer):
    """The caller's own membership."""

    class Meta:
        model = LeaderboardMembership
        fields = ['id', 'group', 'display_alias', 'joined_at']
        read_only_fields = fields


class LeaderboardGroupSerializer(serializers.ModelSerializer):
    """Main serializer for leaderboard groups."""

    invite_url = serializers.SerializerMethodField()
    member_count = serializers.SerializerMethodField()
    is_creator = serializers.SerializerMethodField()

    class Meta:
        model = LeaderboardGroup
        fields = [
            'id',
            'name',
            'invite_token',
            'invite_url',
            'member_count',
            'is_creator',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_invite_url(self, obj) -> str:
        return build_invite_url(obj.invite_token)

    def get_member_count(self, obj) -> int:
        """Use the annotation when the service provided one."""
        count = getattr(obj, 'member_count', None)
        return count if count is not None else obj.memberships.count()

    def get_is_creator(self, obj) -> bool:
        request = self.context.get('request')
        return bool(request and request.user.is_authenticated and obj.is_creator(request.user))


class GroupNameSerializer(serializers.Serializer):
    """Serializer for creating or renaming a group. Length rules live in the service."""

    name = serializers.CharField(allow_blank=True)


class DisplayAliasSerializer(serializers.Serializer):
    """Serializer for joining a group or changing an alias."""

    display_alias = serializers.CharField(allow_blank=True)


class InvitePreviewSerializer(serializers.Serializer):
    """What an invite link points at, shown before joining."""

    id = serializers.UUIDField()
    name = serializers.CharField()
    creator_email = serializers.EmailField()
    member_count = serializers.IntegerField()


class InviteTokenSerializer(serializers.Serializer):
    invite_token = serializers.CharField()
    invite_url = serializers.CharField()


class RankingSerializer(serializers.Serializer):
    """One row of a group leaderboard."""

    rank = serializers.IntegerField()
    member = serializers.SerializerMethodField()
    stats = serializers.SerializerMethodField()

    @extend_schema_field(LeaderboardMemberSerializer)
    def get_member(self, obj):
        return LeaderboardMemberSerializer(obj.member.membership, context=self.context).data

    @extend_schema_field(UserStatsSerializer)
    def get_stats(self, obj):
        return UserStatsSerializer(obj.member.stats.as_dict()).data
