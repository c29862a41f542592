"""
Analytics Dashboard
===================

One-call summary of the last 30 days: overview counts, revenue forecast,
peak hours, success metrics, retention and outbreak alerts.
"""

import logging
from datetime import datetime, timedelta
from itertools import chain
from typing import Optional, Sequence

from ..models import (
    AnalysisRecord,
    AppointmentFacts,
    DashboardSummary,
    PatientRef,
    PaymentFacts,
    ReviewFacts,
)
from .outbreak import detect_outbreak_patterns
from .peak_hours import analyze_peak_hours
from .retention import analyze_patient_retention
from .revenue import daily_revenue_series, forecast_revenue
from .success_rate import calculate_success_rate
from .timeutils import reference_now

logger = logging.getLogger(__name__)

DASHBOARD_WINDOW_DAYS = 30


def build_dashboard(appointments: Sequence[AppointmentFacts],
                    payments: Sequence[PaymentFacts],
                    reviews: Sequence[ReviewFacts],
                    patients: Sequence[PatientRef],
                    analyses: Sequence[AnalysisRecord],
                    now: Optional[datetime] = None) -> DashboardSummary:
    timestamps = chain(
        (a.appointment_date for a in appointments),
        (p.paid_at for p in payments),
        (r.created_at for r in analyses),
    )
    now = reference_now(timestamps, now)
    cutoff = now - timedelta(days=DASHBOARD_WINDOW_DAYS)

    recent_appointments = [a for a in appointments if a.appointment_date >= cutoff]
    recent_payments = [
        p for p in payments
        if p.paid_at >= cutoff and p.status == "completed"
    ]

    total_revenue = sum(p.amount for p in recent_payments)
    retention = analyze_patient_retention(patients, recent_appointments, now=now)
    forecast = forecast_revenue(daily_revenue_series(recent_payments), DASHBOARD_WINDOW_DAYS)
    peak = analyze_peak_hours(recent_appointments) if recent_appointments else None

    def count_status(status: str) -> int:
        return sum(1 for a in recent_appointments if a.status == status)

    logger.info(
        f"Dashboard built: {len(recent_appointments)} appointments, "
        f"{len(recent_payments)} payments in the last {DASHBOARD_WINDOW_DAYS} days"
    )

    return DashboardSummary(
        overview={
            "period": f"Last {DASHBOARD_WINDOW_DAYS} days",
            "total_appointments": len(recent_appointments),
            "total_revenue": round(total_revenue, 2),
            "total_patients": len(patients),
            "active_patients": retention.active_patients,
        },
        revenue_forecast=forecast,
        peak_hours=peak,
        appointments={
            "total": len(recent_appointments),
            "completed": count_status("completed"),
            "pending": count_status("pending"),
            "cancelled": count_status("cancelled"),
            "no_show": count_status("no-show"),
        },
        performance=calculate_success_rate(recent_appointments, reviews),
        patient_retention=retention,
        health_alerts=detect_outbreak_patterns(analyses, now=now),
    )
