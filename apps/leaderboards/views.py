from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.tracking.serializers import ErrorSerializer
from .serializers import (
    LeaderboardGroupSerializer,
    LeaderboardMemberSerializer,
    MembershipSerializer,
    GroupNameSerializer,
    DisplayAliasSerializer,
    InvitePreviewSerializer,
    InviteTokenSerializer,
    RankingSerializer,
)
from .permissions import LeaderboardsUnlocked, IsLeaderboardMember

from apps.leaderboards.services import (
    create_group,
    get_user_groups,
    get_group_by_id,
    update_group_name,
    delete_group,
    build_invite_url,
    validate_invite_token,
    regenerate_invite_token,
    join_group,
    leave_group,
    update_display_alias,
    list_members,
    get_group_rankings,
    # Exceptions
    InvalidInputError,
    GroupNotFoundError,
    NotMemberError,
    AlreadyMemberError,
    InsufficientPermissionsError,
)

ERROR_STATUS_CODES = (
    (InvalidInputError, status.HTTP_400_BAD_REQUEST),
    (InsufficientPermissionsError, status.HTTP_403_FORBIDDEN),
    (GroupNotFoundError, status.HTTP_404_NOT_FOUND),
    (NotMemberError, status.HTTP_404_NOT_FOUND),
    (AlreadyMemberError, status.HTTP_409_CONFLICT),
)


def error_response(error):
    """Map a service error to an HTTP response; unclassified errors are 503."""
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(error, error_class):
            return Response({'error': str(error)}, status=status_code)
    return Response({'error': str(error)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)


class LeaderboardGroupViewSet(viewsets.ViewSet):
    """
    ViewSet for leaderboard groups.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Get the groups the user is a member of
    create: Create a new group (creator joins automatically)
    retrieve: Get a specific group (members only)
    partial_update: Rename a group (creator only)
    destroy: Delete a group (creator only)
    """

    lookup_value_regex = r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'

    def get_permissions(self):
        """Set permissions based on action."""
        if self.action == 'leave':
            return [IsAuthenticated()]
        if self.action in ['retrieve', 'members', 'rankings', 'alias']:
            return [IsAuthenticated(), LeaderboardsUnlocked(), IsLeaderboardMember()]
        return [IsAuthenticated(), LeaderboardsUnlocked()]

    def _group_response(self, group, status_code=status.HTTP_200_OK):
        serializer = LeaderboardGroupSerializer(group, context={'request': self.request})
        return Response(serializer.data, status=status_code)

    @extend_schema(responses={200: LeaderboardGroupSerializer(many=True), 503: ErrorSerializer}, tags=['leaderboards'])
    def list(self, request):
        """List the current user's groups."""
        result = get_user_groups(user_id=request.user.id)
        if not result.ok:
            return error_response(result.error)

        serializer = LeaderboardGroupSerializer(result.data, many=True, context={'request': request})
        return Response(serializer.data)

    @extend_schema(
        request=GroupNameSerializer,
        responses={201: LeaderboardGroupSerializer, 400: ErrorSerializer, 503: ErrorSerializer},
        tags=['leaderboards'],
    )
    def create(self, request):
        """Create a new group."""
        serializer = GroupNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = create_group(name=serializer.validated_data['name'], user_id=request.user.id)
        if not result.ok:
            return error_response(result.error)

        return self._group_response(result.data, status.HTTP_201_CREATED)

    @extend_schema(responses={200: LeaderboardGroupSerializer, 404: ErrorSerializer}, tags=['leaderboards'])
    def retrieve(self, request, pk=None):
        """Get a group."""
        result = get_group_by_id(group_id=pk)
        if not result.ok:
            return error_response(result.error)

        return self._group_response(result.data)

    @extend_schema(
        request=GroupNameSerializer,
        responses={200: LeaderboardGroupSerializer, 400: ErrorSerializer, 403: ErrorSerializer, 404: ErrorSerializer},
        tags=['leaderboards'],
    )
    def partial_update(self, request, pk=None):
        """Rename a group."""
        serializer = GroupNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = update_group_name(
            group_id=pk,
            name=serializer.validated_data['name'],
            user_id=request.user.id,
        )
        if not result.ok:
            return error_response(result.error)

        return self._group_response(result.data)

    @extend_schema(responses={204: None, 403: ErrorSerializer, 404: ErrorSerializer}, tags=['leaderboards'])
    def destroy(self, request, pk=None):
        """Delete a group."""
        result = delete_group(group_id=pk, user_id=request.user.id)
        if not result.ok:
            return error_response(result.error)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(responses={200: LeaderboardMemberSerializer(many=True)}, tags=['leaderboards'])
    @action(detail=True, methods=['get'])
    def members(self, request, pk=None):
        """Get all members of the group."""
        result = list_members(group_id=pk)
        if not result.ok:
            return error_response(result.error)

        serializer = LeaderboardMemberSerializer(result.data, many=True, context={'request': request})
        return Response(serializer.data)

    @extend_schema(responses={200: RankingSerializer(many=True)}, tags=['leaderboards'])
    @action(detail=True, methods=['get'])
    def rankings(self, request, pk=None):
        """Get the group leaderboard. Empty when stats are unavailable."""
        rankings = get_group_rankings(group_id=pk)
        serializer = RankingSerializer(rankings, many=True, context={'request': request})
        return Response(serializer.data)

    @extend_schema(request=None, responses={204: None, 503: ErrorSerializer}, tags=['leaderboards'])
    @action(detail=True, methods=['post'])
    def leave(self, request, pk=None):
        """Leave a group."""
        result = leave_group(group_id=pk, user_id=request.user.id)
        if not result.ok:
            return error_response(result.error)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        request=DisplayAliasSerializer,
        responses={200: MembershipSerializer, 400: ErrorSerializer, 404: ErrorSerializer},
        tags=['leaderboards'],
    )
    @action(detail=True, methods=['patch'])
    def alias(self, request, pk=None):
        """Change the current user's alias in this group."""
        serializer = DisplayAliasSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = update_display_alias(
            group_id=pk,
            user_id=request.user.id,
            display_alias=serializer.validated_data['display_alias'],
        )
        if not result.ok:
            return error_response(result.error)

        return Response(MembershipSerializer(result.data).data)

    @extend_schema(
        request=None,
        responses={200: InviteTokenSerializer, 403: ErrorSerializer, 404: ErrorSerializer},
        tags=['leaderboards'],
    )
    @action(detail=True, methods=['post'])
    def regenerate_invite(self, request, pk=None):
        """Regenerate invite link (creator only)."""
        result = regenerate_invite_token(group_id=pk, user_id=request.user.id)
        if not result.ok:
            return error_response(result.error)

        return Response({
            'invite_token': result.data,
            'invite_url': build_invite_url(result.data),
        })


@extend_schema(
    responses={200: InvitePreviewSerializer, 404: ErrorSerializer},
    description="Preview the group behind an invite link before joining.",
    tags=['leaderboards'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def invite_preview(request, token):
    """Preview an invite - thin HTTP handler."""
    result = validate_invite_token(token=token)
    if not result.ok:
        return error_response(result.error)

    return Response(InvitePreviewSerializer(result.data).data)


@extend_schema(
    request=DisplayAliasSerializer,
    responses={
        201: MembershipSerializer,
        400: ErrorSerializer,
        404: ErrorSerializer,
        409: ErrorSerializer,
    },
    description="Join a group through its invite link, choosing an alias.",
    tags=['leaderboards'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, LeaderboardsUnlocked])
def join_via_invite(request, token):
    """Join a group - thin HTTP handler."""
    serializer = DisplayAliasSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    result = join_group(
        token=token,
        user_id=request.user.id,
        display_alias=serializer.validated_data['display_alias'],
    )
    if not result.ok:
        return error_response(result.error)

    return Response(MembershipSerializer(result.data).data, status=status.HTTP_201_CREATED)
