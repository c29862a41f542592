"""
Revenue Forecaster
==================

Moving-average forecast with a half-window trend adjustment.

    daily_average  = mean(window)
    trend_pct      = (mean(second half) - mean(first half)) / mean(first half) * 100
    forecast       = daily_average * period * (1 + trend_pct / 100)
    confidence     = max(0, 100 - std / mean * 100)

Degenerate windows (empty, single point, zero or negative means) resolve to neutral
values instead of dividing by zero.
"""

import logging
from typing import List, Sequence

import numpy as np
import pandas as pd

from ..models import PaymentFacts, RevenueForecast, RevenuePoint, Trend

logger = logging.getLogger(__name__)

DEFAULT_PERIOD_DAYS = 30
TREND_THRESHOLD_PERCENT = 5.0      # |trend| above this is growing/declining


def forecast_revenue(series: Sequence[RevenuePoint], period_days: int = DEFAULT_PERIOD_DAYS) -> RevenueForecast:
    if period_days < 1:
        raise ValueError("period_days must be at least 1")

    if not series:
        return RevenueForecast(period_days=period_days)

    ordered = sorted(series, key=lambda p: p.date)
    window = np.array([p.revenue for p in ordered[-period_days:]], dtype=float)

    daily_average = float(window.mean())

    if len(window) < 2:
        trend = Trend.INSUFFICIENT_DATA
        trend_percentage = 0.0
    else:
        midpoint = len(window) // 2
        first_half = float(window[:midpoint].mean())
        second_half = float(window[midpoint:].mean())
        if first_half == 0:
            trend_percentage = 0.0
        else:
            trend_percentage = (second_half - first_half) / first_half * 100

        if trend_percentage > TREND_THRESHOLD_PERCENT:
            trend = Trend.GROWING
        elif trend_percentage < -TREND_THRESHOLD_PERCENT:
            trend = Trend.DECLINING
        else:
            trend = Trend.STABLE

    forecast_amount = daily_average * period_days * (1 + trend_percentage / 100)

    # Zero or net-refund windows report no confidence
    if daily_average <= 0:
        confidence = 0.0
    else:
        variation = float(window.std()) / daily_average * 100
        confidence = min(max(100 - variation, 0.0), 100.0)

    return RevenueForecast(
        forecast_amount=round(forecast_amount, 2),
        daily_average=round(daily_average, 2),
        trend=trend,
        trend_percentage=round(trend_percentage, 2),
        confidence=round(confidence, 2),
        period_days=period_days,
        data_points=len(ordered),
        total_historical_revenue=round(float(sum(p.revenue for p in ordered)), 2),
    )


def daily_revenue_series(payments: Sequence[PaymentFacts]) -> List[RevenuePoint]:
    """Sum completed payments per calendar day, oldest first."""
    rows = [
        {"date": p.paid_at.date(), "revenue": p.amount}
        for p in payments
        if p.status == "completed"
    ]
    if not rows:
        return []

    df = pd.DataFrame(rows)
    daily = df.groupby("date")["revenue"].sum().sort_index()
    logger.debug(f"Grouped {len(rows)} payments into {len(daily)} days")

    return [RevenuePoint(date=day, revenue=float(total)) for day, total in daily.items()]
