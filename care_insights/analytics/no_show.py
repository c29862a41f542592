"""
No-Show Risk Model
==================

Additive point heuristic for the chance a patient misses an appointment.

Factors:
- Historical no-show rate (percent x history weight)
- Booking lead time (very long or very short notice)
- Hour of day (before opening or after closing)
- Day of week (weekend, Monday)
- Payment status (unpaid)

The weights are operational heuristics, not a fitted model. They live in
config.NoShowWeights.
"""

import logging
from datetime import datetime
from typing import Optional

from .. import config
from ..config import NoShowWeights
from ..models import AppointmentFacts, NoShowFactors, NoShowRisk, PatientHistory, RiskLevel
from .timeutils import day_of_week, reference_now, whole_days

logger = logging.getLogger(__name__)

RECOMMENDATIONS = {
    RiskLevel.HIGH: "Send reminder SMS/Email 24 hours before appointment",
    RiskLevel.MEDIUM: "Send confirmation request",
    RiskLevel.LOW: "Standard appointment handling",
}


def predict_no_show(appointment: AppointmentFacts,
                    history: PatientHistory,
                    now: Optional[datetime] = None,
                    weights: Optional[NoShowWeights] = None) -> NoShowRisk:
    weights = weights or config.NO_SHOW_WEIGHTS
    when = appointment.appointment_date
    now = reference_now([when], now)

    contributions = {}

    # Factor 1: history
    if history.total_appointments > 0:
        no_show_rate = history.no_shows / history.total_appointments * 100
    else:
        no_show_rate = 0.0
    contributions["history"] = no_show_rate * weights.history_weight

    # Factor 2: lead time
    lead_days = whole_days(when, now)
    if lead_days > weights.long_lead_days:
        contributions["lead_time"] = weights.long_lead_points
    elif lead_days < weights.short_lead_days:
        contributions["lead_time"] = weights.short_lead_points
    else:
        contributions["lead_time"] = 0

    # Factor 3: hour of day
    hour = when.hour
    if hour < weights.opening_hour or hour > weights.closing_hour:
        contributions["hour"] = weights.off_hours_points
    else:
        contributions["hour"] = 0

    # Factor 4: day of week
    day = day_of_week(when)
    is_weekend = day in (0, 6)
    if is_weekend:
        contributions["day"] = weights.weekend_points
    elif day == 1:
        contributions["day"] = weights.monday_points
    else:
        contributions["day"] = 0

    # Factor 5: payment
    contributions["payment"] = 0 if appointment.is_paid else weights.unpaid_points

    score = min(max(sum(contributions.values()), 0), 100)

    if score > weights.high_risk_above:
        risk_level = RiskLevel.HIGH
    elif score > weights.medium_risk_above:
        risk_level = RiskLevel.MEDIUM
    else:
        risk_level = RiskLevel.LOW

    logger.debug(f"No-show score {score:.1f} ({risk_level.value}) for appointment at {when}")

    return NoShowRisk(
        probability=int(round(score)),
        risk_level=risk_level,
        factors=NoShowFactors(
            historical_no_show_rate=round(no_show_rate, 2),
            lead_time_days=lead_days,
            hour=hour,
            day_of_week=day,
            is_weekend=is_weekend,
            is_paid=appointment.is_paid,
            contributions={k: float(v) for k, v in contributions.items()},
        ),
        recommendation=RECOMMENDATIONS[risk_level],
    )
