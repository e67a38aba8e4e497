from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'leaderboards'

# Router for ViewSets
router = DefaultRouter()
router.register(r'groups', views.LeaderboardGroupViewSet, basename='group')

urlpatterns = [
    # Group ViewSet routes
    # GET    /api/leaderboards/groups/          - List user's groups
    # POST   /api/leaderboards/groups/          - Create group
    # GET    /api/leaderboards/groups/{id}/     - Get group details (member)
    # PATCH  /api/leaderboards/groups/{id}/     - Rename group (creator)
    # DELETE /api/leaderboards/groups/{id}/     - Delete group (creator)

    # Custom group actions
    # GET    /api/leaderboards/groups/{id}/members/            - List members
    # GET    /api/leaderboards/groups/{id}/rankings/           - Leaderboard
    # POST   /api/leaderboards/groups/{id}/leave/              - Leave group
    # PATCH  /api/leaderboards/groups/{id}/alias/              - Change own alias
    # POST   /api/leaderboards/groups/{id}/regenerate_invite/  - New invite link (creator)

    # Invite links
    path('invites/<str:token>/', views.invite_preview, name='invite-preview'),
    path('invites/<str:token>/join/', views.join_via_invite, name='invite-join'),

    # Include router URLs
    path('', include(router.urls)),
]
