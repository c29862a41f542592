"""
Retention Analyzer

Classifies each patient by days since their latest appointment:
active < 90, at risk 90..180, lost > 180. Patients with no appointments
are left out of every count.
"""

import logging
from collections import defaultdict
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from ..models import AppointmentFacts, PatientRef, RetentionSnapshot
from .timeutils import reference_now, whole_days

logger = logging.getLogger(__name__)

ACTIVE_BELOW_DAYS = 90
LOST_ABOVE_DAYS = 180

GOOD_RETENTION_ABOVE = 70
FAIR_RETENTION_ABOVE = 50


def retention_status(rate: float) -> str:
    if rate > GOOD_RETENTION_ABOVE:
        return "Good"
    if rate > FAIR_RETENTION_ABOVE:
        return "Fair"
    return "Needs Improvement"


def analyze_patient_retention(patients: Sequence[PatientRef],
                              appointments: Sequence[AppointmentFacts],
                              now: Optional[datetime] = None) -> RetentionSnapshot:
    visits: Dict[str, List[datetime]] = defaultdict(list)
    for appointment in appointments:
        if appointment.patient_id is not None:
            visits[appointment.patient_id].append(appointment.appointment_date)

    now = reference_now((a.appointment_date for a in appointments), now)

    active = at_risk = lost = 0
    total = 0
    total_visits = 0
    for patient in patients:
        dates = visits.get(patient.patient_id)
        if not dates:
            continue
        total += 1
        total_visits += len(dates)

        days_since_last = whole_days(now, max(dates))
        if days_since_last < ACTIVE_BELOW_DAYS:
            active += 1
        elif days_since_last <= LOST_ABOVE_DAYS:
            at_risk += 1
        else:
            lost += 1

    if total == 0:
        return RetentionSnapshot()

    rate = active / total * 100
    logger.debug(f"Retention: {active}/{total} active, {at_risk} at risk, {lost} lost")

    return RetentionSnapshot(
        total_patients=total,
        active_patients=active,
        at_risk_patients=at_risk,
        lost_patients=lost,
        retention_rate=round(rate, 2),
        average_visits_per_patient=round(total_visits / total, 2),
        patients_needing_follow_up=at_risk,
        retention_status=retention_status(rate),
    )
