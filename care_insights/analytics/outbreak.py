"""
Outbreak Detector
=================

Counts confident disease predictions in a recent window and flags a
disease that dominates the window.

This is a clustering heuristic over the platform's own analyses, not an
epidemiological test.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, Optional, Sequence

from .. import config
from ..models import AnalysisRecord, OutbreakPattern, OutbreakReport
from .timeutils import reference_now

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_DAYS = 7
MIN_CASE_CONFIDENCE = 0.5      # Predictions must exceed this to count as a case
MAX_PATTERNS = 10


def detect_outbreak_patterns(records: Sequence[AnalysisRecord],
                             window_days: int = DEFAULT_WINDOW_DAYS,
                             now: Optional[datetime] = None,
                             threshold: Optional[float] = None) -> OutbreakReport:
    threshold = config.OUTBREAK_ALERT_THRESHOLD if threshold is None else threshold
    now = reference_now((r.created_at for r in records), now)
    cutoff = now - timedelta(days=window_days)

    recent = [r for r in records if r.created_at >= cutoff]
    total = len(recent)

    counts: Dict[str, int] = {}
    for record in recent:
        for prediction in record.predictions:
            if prediction.confidence > MIN_CASE_CONFIDENCE:
                counts[prediction.disease] = counts.get(prediction.disease, 0) + 1

    # Stable sort keeps first-seen order among equal counts
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:MAX_PATTERNS]
    patterns = [
        OutbreakPattern(disease=disease, cases=cases, percentage=round(cases / total * 100, 2))
        for disease, cases in ranked
    ]

    alert = None
    if patterns and patterns[0].cases > threshold * total:
        top = patterns[0]
        alert = f"⚠️ Potential outbreak: {top.disease} ({top.cases} cases)"
        logger.warning(f"{alert} in the last {window_days} days out of {total} analyses")

    return OutbreakReport(
        patterns=patterns,
        alert=alert,
        window_days=window_days,
        total_analyses=total,
    )
