"""
Urgency Classifier

A reported phrase containing a critical keyword escalates to EMERGENCY
outright. Otherwise the worst severity tier among the retained
predictions decides.
"""

from typing import Iterable, Sequence

from ..clinical_config import find_critical_symptoms
from ..models import SeverityTier, UrgencyLevel

TIER_TO_URGENCY = {
    SeverityTier.CRITICAL: UrgencyLevel.EMERGENCY,
    SeverityTier.HIGH: UrgencyLevel.HIGH,
    SeverityTier.MEDIUM: UrgencyLevel.MODERATE,
    SeverityTier.LOW: UrgencyLevel.LOW,
}


class UrgencyClassifier:

    def classify(self, phrases: Sequence[str], tiers: Iterable[SeverityTier]) -> UrgencyLevel:
        if find_critical_symptoms(phrases):
            return UrgencyLevel.EMERGENCY

        worst = None
        for tier in tiers:
            if worst is None or tier.rank > worst.rank:
                worst = tier
        if worst is None:
            return UrgencyLevel.LOW
        return TIER_TO_URGENCY[worst]
