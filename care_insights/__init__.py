# Care Insights Package
"""
Care Insights - Clinical Decision Support & Practice Analytics

This package provides the derivation core of the appointment platform:
- Symptom-to-disease prediction (lexical matching + severity weighting)
- Urgency classification with critical-symptom override
- Predictive analytics (no-show risk, revenue forecast, peak hours,
  outbreak detection, patient retention, treatment success rate)

NOT a diagnostic system - provides assistive insights only.
"""

__version__ = "1.0.0"

from .engines import analyze_symptoms, SymptomAnalyzer
from .analytics import (
    predict_no_show,
    forecast_revenue,
    daily_revenue_series,
    analyze_peak_hours,
    detect_outbreak_patterns,
    analyze_patient_retention,
    calculate_success_rate,
    build_dashboard,
)

__all__ = [
    "analyze_symptoms",
    "SymptomAnalyzer",
    "predict_no_show",
    "forecast_revenue",
    "daily_revenue_series",
    "analyze_peak_hours",
    "detect_outbreak_patterns",
    "analyze_patient_retention",
    "calculate_success_rate",
    "build_dashboard",
]
