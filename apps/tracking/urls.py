from django.urls import path
from . import views

app_name = 'tracking'

urlpatterns = [
    # GET /api/tracking/stats/                    - Current user's stats
    path('stats/', views.my_stats, name='my-stats'),

    # GET /api/tracking/entities/{id}/metrics/    - Per-entity metrics
    path('entities/<uuid:entity_id>/metrics/', views.entity_metrics, name='entity-metrics'),
]
