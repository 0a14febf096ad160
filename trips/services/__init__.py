"""Trip services module."""

from trips.services.trip_metrics_service import TripMetrics, TripMetricsService

__all__ = ["TripMetrics", "TripMetricsService"]
