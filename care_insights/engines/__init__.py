# Engines Package
"""
Symptom prediction engines: matcher, scorer, urgency and the analyzer
that ties them together.
"""

from .symptom_matcher import SymptomMatcher, direct_match
from .disease_scorer import DiseaseScorer, DiseaseScore
from .urgency import UrgencyClassifier
from .symptom_analyzer import SymptomAnalyzer, analyze_symptoms, get_analyzer

__all__ = [
    "SymptomMatcher",
    "direct_match",
    "DiseaseScorer",
    "DiseaseScore",
    "UrgencyClassifier",
    "SymptomAnalyzer",
    "analyze_symptoms",
    "get_analyzer",
]
