from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework import status
from drf_spectacular.utils import extend_schema

from .serializers import UserStatsSerializer, EntityMetricsSerializer, ErrorSerializer
from .services import get_user_stats, get_entity_metrics, EntityNotFoundError


@extend_schema(
    responses={200: UserStatsSerializer},
    description="Get the current user's aggregate stats across all tracked entities.",
    tags=['tracking'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_stats(request):
    """Get current user's stats - thin HTTP handler."""
    stats = get_user_stats(user_id=request.user.id)
    return Response(UserStatsSerializer(stats.as_dict()).data)


@extend_schema(
    responses={
        200: EntityMetricsSerializer,
        404: ErrorSerializer,
    },
    description="Get totals and derived metrics for one of the current user's tracked entities.",
    tags=['tracking'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def entity_metrics(request, entity_id):
    """Get metrics for a tracked entity - thin HTTP handler."""
    try:
        data = get_entity_metrics(entity_id=entity_id, user_id=request.user.id)
    except EntityNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(EntityMetricsSerializer(data).data)
