"""
Treatment Success Rate

Share of approved reviews rated 4 or higher, reported alongside the
number of completed appointments.
"""

from typing import Sequence

from ..models import AppointmentFacts, ReviewFacts, SuccessRateReport

POSITIVE_RATING = 4


def calculate_success_rate(appointments: Sequence[AppointmentFacts],
                           reviews: Sequence[ReviewFacts]) -> SuccessRateReport:
    completed = [a for a in appointments if a.status == "completed"]
    if not completed:
        return SuccessRateReport()

    approved = [r for r in reviews if r.status == "approved"]
    if not approved:
        return SuccessRateReport(total_treated=len(completed))

    positive = sum(1 for r in approved if r.rating >= POSITIVE_RATING)
    average = sum(r.rating for r in approved) / len(approved)

    return SuccessRateReport(
        success_rate=round(positive / len(approved) * 100, 2),
        total_treated=len(completed),
        total_reviewed=len(approved),
        average_rating=round(average, 2),
        positive_reviews=positive,
        negative_reviews=len(approved) - positive,
    )
