"""
Runtime configuration.

Environment variables for engine tunables and service settings. Heuristic
weights are not clinically derived; they are exposed here so operators can
adjust them without code changes.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

# Knowledge base override (JSON file with "diseases" and "synonyms")
KNOWLEDGE_BASE_PATH = os.getenv("CARE_INSIGHTS_KB_PATH", "")

LOG_LEVEL = os.getenv("CARE_INSIGHTS_LOG_LEVEL", "INFO").upper()

# Share of window analyses a single disease must exceed to raise an alert
OUTBREAK_ALERT_THRESHOLD = float(os.getenv("OUTBREAK_ALERT_THRESHOLD", "0.20"))

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", 8000))

# Comma-separated list of allowed origins
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


@dataclass(frozen=True)
class NoShowWeights:
    """Point weights for the no-show heuristic."""

    history_weight: float = 0.40
    long_lead_points: float = 15
    short_lead_points: float = 5
    off_hours_points: float = 10
    weekend_points: float = 8
    monday_points: float = 5
    unpaid_points: float = 15

    # Thresholds
    long_lead_days: int = 30
    short_lead_days: int = 3
    opening_hour: int = 9
    closing_hour: int = 17
    high_risk_above: float = 70
    medium_risk_above: float = 40

    @classmethod
    def from_env(cls) -> "NoShowWeights":
        return cls(
            history_weight=float(os.getenv("NO_SHOW_HISTORY_WEIGHT", cls.history_weight)),
            long_lead_points=float(os.getenv("NO_SHOW_LONG_LEAD_POINTS", cls.long_lead_points)),
            short_lead_points=float(os.getenv("NO_SHOW_SHORT_LEAD_POINTS", cls.short_lead_points)),
            off_hours_points=float(os.getenv("NO_SHOW_OFF_HOURS_POINTS", cls.off_hours_points)),
            weekend_points=float(os.getenv("NO_SHOW_WEEKEND_POINTS", cls.weekend_points)),
            monday_points=float(os.getenv("NO_SHOW_MONDAY_POINTS", cls.monday_points)),
            unpaid_points=float(os.getenv("NO_SHOW_UNPAID_POINTS", cls.unpaid_points)),
        )


NO_SHOW_WEIGHTS = NoShowWeights.from_env()


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the service entry points."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
