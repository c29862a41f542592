"""
Disease Scorer
==============

Turns matcher scores into a per-disease confidence percentage.

    base  = sum(match(report, keyword)) / len(keywords) * 100
    boost = sum(SEVERITY_BOOST[report.severity] * match) for non-zero matches
    final = min(base + boost, 100)
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from ..clinical_config import SEVERITY_BOOST
from ..knowledge import DiseaseProfile
from ..models import SymptomReport
from .symptom_matcher import SymptomMatcher

logger = logging.getLogger(__name__)


@dataclass
class DiseaseScore:
    """Raw scoring breakdown for one disease (percent scale)."""
    profile: DiseaseProfile
    match_total: float = 0.0
    base_confidence: float = 0.0
    severity_boost: float = 0.0
    confidence: float = 0.0


class DiseaseScorer:
    """Scores every knowledge-base disease against a set of reports."""

    MAX_CONFIDENCE = 100.0

    def __init__(self, matcher: SymptomMatcher):
        self.matcher = matcher

    def score(self, profile: DiseaseProfile, reports: Sequence[SymptomReport]) -> DiseaseScore:
        result = DiseaseScore(profile=profile)
        if not profile.keywords:
            return result

        for report in reports:
            weight = SEVERITY_BOOST[report.severity.value]
            for keyword in profile.keywords:
                strength = self.matcher.match(report.symptom, keyword)
                if strength > 0:
                    result.match_total += strength
                    result.severity_boost += weight * strength

        result.base_confidence = result.match_total / len(profile.keywords) * 100
        result.confidence = min(result.base_confidence + result.severity_boost, self.MAX_CONFIDENCE)
        return result

    def score_all(self, profiles, reports: Sequence[SymptomReport]) -> List[DiseaseScore]:
        """Scores in the iteration order of `profiles`."""
        return [self.score(profile, reports) for profile in profiles]
