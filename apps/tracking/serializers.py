from rest_framework import serializers


class UserStatsSerializer(serializers.Serializer):
    """Aggregate stats for one user."""

    total_spent = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_units = serializers.IntegerField()
    cost_per_unit = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_time_minutes = serializers.IntegerField()
    total_entities = serializers.IntegerField()
    efficiency_score = serializers.DecimalField(max_digits=14, decimal_places=2)


class EntityMetricsSerializer(serializers.Serializer):
    """Totals and derived ratios for one tracked entity."""

    entity_id = serializers.UUIDField()
    entries_count = serializers.IntegerField()
    total_spent = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_units = serializers.IntegerField()
    total_time_minutes = serializers.IntegerField()
    cost_per_unit = serializers.DecimalField(max_digits=12, decimal_places=2)
    time_per_unit = serializers.DecimalField(max_digits=12, decimal_places=2)
    cost_per_hour = serializers.DecimalField(max_digits=12, decimal_places=2)
    units_per_hour = serializers.DecimalField(max_digits=12, decimal_places=2)
    efficiency_score = serializers.DecimalField(max_digits=14, decimal_places=2)


class ErrorSerializer(serializers.Serializer):
    """Error response."""

    error = serializers.CharField()
