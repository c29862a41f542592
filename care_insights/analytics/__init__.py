# Analytics Package
"""
Predictive practice analytics over caller-supplied appointment, payment,
review and analysis facts.
"""

from .no_show import predict_no_show
from .revenue import forecast_revenue, daily_revenue_series
from .peak_hours import analyze_peak_hours
from .outbreak import detect_outbreak_patterns
from .retention import analyze_patient_retention
from .success_rate import calculate_success_rate
from .dashboard import build_dashboard

__all__ = [
    "predict_no_show",
    "forecast_revenue",
    "daily_revenue_series",
    "analyze_peak_hours",
    "detect_outbreak_patterns",
    "analyze_patient_retention",
    "calculate_success_rate",
    "build_dashboard",
]
