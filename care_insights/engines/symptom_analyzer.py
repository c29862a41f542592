"""
Symptom Analyzer
================

Orchestrates matcher, scorer and urgency classifier into a ranked
AnalysisResult.

Pipeline:
1. Score every knowledge-base disease (declaration order)
2. Drop diseases at or below MIN_CONFIDENCE_PERCENT
3. Stable sort by confidence, keep the top MAX_PREDICTIONS
4. Classify urgency, pick specialist, aggregate tests

NOT a diagnostic system - provides assistive insights only.
"""

import logging
from typing import List, Optional, Sequence

from ..clinical_config import (
    DEFAULT_SPECIALIST,
    MAX_PREDICTIONS,
    MIN_CONFIDENCE_PERCENT,
    urgency_warning,
)
from ..knowledge import KnowledgeBase, load_knowledge_base
from ..models import AnalysisResult, PatientContext, Prediction, SymptomReport
from .disease_scorer import DiseaseScore, DiseaseScorer
from .symptom_matcher import SymptomMatcher, direct_match
from .urgency import UrgencyClassifier

logger = logging.getLogger(__name__)


class SymptomAnalyzer:
    """
    Symptom-to-disease prediction over an immutable knowledge base.

    Stateless after construction; one instance can serve concurrent
    callers.
    """

    def __init__(self, knowledge_base: Optional[KnowledgeBase] = None):
        self.kb = knowledge_base if knowledge_base is not None else load_knowledge_base()
        self.matcher = SymptomMatcher(self.kb.synonyms)
        self.scorer = DiseaseScorer(self.matcher)
        self.urgency = UrgencyClassifier()
        logger.info(f"SymptomAnalyzer ready with {len(self.kb)} diseases")

    def analyze(self, reports: Sequence[SymptomReport],
                context: Optional[PatientContext] = None) -> AnalysisResult:
        scores = [
            s for s in self.scorer.score_all(self.kb, reports)
            if s.confidence > MIN_CONFIDENCE_PERCENT
        ]
        # sorted() is stable, so ties keep declaration order
        scores = sorted(scores, key=lambda s: s.confidence, reverse=True)[:MAX_PREDICTIONS]

        predictions = [self._to_prediction(s, reports) for s in scores]
        phrases = [r.symptom for r in reports]
        urgency = self.urgency.classify(phrases, [p.severity_tier for p in predictions])

        specialist = predictions[0].specialist if predictions else DEFAULT_SPECIALIST

        tests: List[str] = []
        for prediction in predictions:
            for test in prediction.tests:
                if test not in tests:
                    tests.append(test)

        logger.debug(
            f"Analyzed {len(reports)} symptoms: {len(predictions)} predictions, urgency={urgency.value}"
        )

        return AnalysisResult(
            predictions=predictions,
            urgency_level=urgency,
            recommended_specialist=specialist,
            recommended_tests=tests,
            warning=urgency_warning(urgency.value, has_predictions=bool(predictions)),
            context=context,
        )

    def _to_prediction(self, score: DiseaseScore, reports: Sequence[SymptomReport]) -> Prediction:
        profile = score.profile
        matched = []
        for report in reports:
            if report.symptom in matched:
                continue
            if any(direct_match(report.symptom, keyword) for keyword in profile.keywords):
                matched.append(report.symptom)

        return Prediction(
            disease=profile.name,
            confidence=round(score.confidence / 100, 4),
            severity_tier=profile.severity_tier,
            matched_symptoms=matched,
            specialist=profile.specialist,
            actions=list(profile.actions),
            tests=list(profile.tests),
            description=_describe(profile.name, matched),
        )


def _describe(disease: str, matched: List[str]) -> str:
    if not matched:
        return f"{disease} is indicated by related symptoms."
    return f"{disease} is indicated by: {', '.join(matched)}."


_default_analyzer: Optional[SymptomAnalyzer] = None


def get_analyzer() -> SymptomAnalyzer:
    """Process-wide analyzer over the default knowledge base."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = SymptomAnalyzer()
    return _default_analyzer


def analyze_symptoms(reports: Sequence[SymptomReport],
                     context: Optional[PatientContext] = None) -> AnalysisResult:
    return get_analyzer().analyze(reports, context)
