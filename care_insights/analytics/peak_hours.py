"""
Peak-Time Analyzer

Buckets appointments by hour (0-23) and weekday (Sunday = 0). Both
distributions are always complete; the peak is the busiest bucket, the
earliest one on a tie.
"""

from typing import List, Sequence

from ..models import AppointmentFacts, PeakAnalysis, PeakBucket
from .timeutils import DAY_NAMES, day_of_week


def _peak(counts: List[int]) -> int:
    best = 0
    for index, count in enumerate(counts):
        if count > counts[best]:
            best = index
    return best


def _buckets(labels: List[str], counts: List[int], revenue: List[float]) -> List[PeakBucket]:
    return [
        PeakBucket(index=i, label=labels[i], count=counts[i], revenue=round(revenue[i], 2))
        for i in range(len(labels))
    ]


def analyze_peak_hours(appointments: Sequence[AppointmentFacts]) -> PeakAnalysis:
    hour_counts = [0] * 24
    hour_revenue = [0.0] * 24
    day_counts = [0] * 7
    day_revenue = [0.0] * 7

    for appointment in appointments:
        hour = appointment.appointment_date.hour
        day = day_of_week(appointment.appointment_date)
        fee = appointment.consultation_fee or 0.0

        hour_counts[hour] += 1
        hour_revenue[hour] += fee
        day_counts[day] += 1
        day_revenue[day] += fee

    hourly = _buckets([f"{h}:00 - {h + 1}:00" for h in range(24)], hour_counts, hour_revenue)
    daily = _buckets(DAY_NAMES, day_counts, day_revenue)

    return PeakAnalysis(
        peak_hour=hourly[_peak(hour_counts)],
        peak_day=daily[_peak(day_counts)],
        hourly_distribution=hourly,
        daily_distribution=daily,
        total_appointments=len(appointments),
    )
