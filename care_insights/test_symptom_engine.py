"""Tests for the symptom matcher, scorer, urgency classifier and analyzer."""

import json

import pytest

from care_insights.clinical_config import NO_MATCH_WARNING, SPECIALISTS, URGENCY_WARNINGS
from care_insights.engines import DiseaseScorer, SymptomAnalyzer, SymptomMatcher, UrgencyClassifier, direct_match
from care_insights.knowledge import DiseaseProfile, KnowledgeBase, default_knowledge_base, load_knowledge_base
from care_insights.knowledge.disease_profiles import DISEASE_PROFILES, SYMPTOM_SYNONYMS
from care_insights.models import SeverityTier, SymptomReport, UrgencyLevel


def report(symptom, severity="moderate"):
    return SymptomReport(symptom=symptom, severity=severity)


def profile(name, keywords, tier=SeverityTier.LOW, specialist="General Physician", tests=()):
    return DiseaseProfile(
        name=name,
        keywords=tuple(keywords),
        severity_tier=tier,
        specialist=specialist,
        tests=tuple(tests),
    )


@pytest.fixture
def matcher():
    return SymptomMatcher(default_knowledge_base().synonyms)


@pytest.fixture(scope="module")
def analyzer():
    return SymptomAnalyzer(default_knowledge_base())


# ===== KNOWLEDGE BASE =====

def test_default_knowledge_base_keeps_declaration_order():
    kb = default_knowledge_base()
    assert len(kb) == len(DISEASE_PROFILES)
    assert kb.names == [entry["name"] for entry in DISEASE_PROFILES]
    assert kb.names.index("Influenza (Flu)") < kb.names.index("COVID-19")


def test_knowledge_base_rejects_duplicate_names():
    with pytest.raises(ValueError):
        KnowledgeBase([profile("Flu", ["fever"]), profile("Flu", ["cough"])])


def test_knowledge_base_is_read_only():
    kb = default_knowledge_base()
    with pytest.raises(TypeError):
        kb.synonyms["fever"] = ("hot",)
    assert isinstance(kb.get("Migraine").keywords, tuple)


def test_every_specialist_is_listed():
    assert set(default_knowledge_base().specialists()) <= set(SPECIALISTS)


def test_synonym_table_has_no_generic_pain_entry():
    assert "pain" not in SYMPTOM_SYNONYMS


def test_load_knowledge_base_from_json(tmp_path):
    path = tmp_path / "kb.json"
    path.write_text(json.dumps({
        "diseases": [
            {"name": "Test Fever", "keywords": ["Fever", "chills"], "severity_tier": "medium",
             "specialist": "General Physician", "tests": ["CBC"], "actions": ["Rest"]},
        ],
        "synonyms": {"fever": ["pyrexia"]},
    }))

    kb = load_knowledge_base(str(path))

    assert kb.names == ["Test Fever"]
    assert kb.get("Test Fever").keywords == ("fever", "chills")
    assert kb.synonyms["fever"] == ("pyrexia",)
    assert load_knowledge_base(str(path)) is kb


# ===== MATCHER =====

def test_direct_substring_match_is_full_score(matcher):
    assert matcher.match("High Fever", "fever") == 1.0
    assert matcher.match("cough", "dry cough") == 1.0


def test_synonym_match(matcher):
    assert matcher.match("throwing up", "vomiting") == 0.9
    assert matcher.match("stomach ache", "abdominal pain") == 0.9


def test_partial_token_match(matcher):
    assert matcher.match("painful joints", "joint pain") == 0.7


def test_short_tokens_do_not_partially_match(matcher):
    assert matcher.match("red eye", "red patches") == 0.0


def test_blank_and_unrelated_phrases_score_zero(matcher):
    assert matcher.match("", "fever") == 0.0
    assert matcher.match("   ", "fever") == 0.0
    assert matcher.match("xyzzy", "fever") == 0.0


def test_direct_match_helper():
    assert direct_match("Cough", "dry cough")
    assert not direct_match("", "cough")
    assert not direct_match("throwing up", "vomiting")


# ===== SCORER =====

def test_scorer_base_plus_severity_boost():
    scorer = DiseaseScorer(SymptomMatcher({}))
    score = scorer.score(profile("A", ["fever", "cough"]), [report("fever", "severe")])

    assert score.base_confidence == 50.0
    assert score.severity_boost == 15.0
    assert score.confidence == 65.0


def test_scorer_caps_at_100():
    scorer = DiseaseScorer(SymptomMatcher({}))
    score = scorer.score(
        profile("A", ["fever", "cough"]),
        [report("fever", "severe"), report("cough", "severe")],
    )
    assert score.confidence == 100.0


def test_scorer_profile_without_keywords_scores_zero():
    scorer = DiseaseScorer(SymptomMatcher({}))
    score = scorer.score(profile("Empty", []), [report("fever", "severe")])
    assert score.confidence == 0.0


# ===== URGENCY =====

def test_critical_keyword_overrides_tiers():
    urgency = UrgencyClassifier().classify(["Sudden CHEST PAIN at rest"], [SeverityTier.LOW])
    assert urgency == UrgencyLevel.EMERGENCY


def test_worst_tier_decides_without_critical_keyword():
    classifier = UrgencyClassifier()
    assert classifier.classify(["cough"], [SeverityTier.LOW, SeverityTier.HIGH]) == UrgencyLevel.HIGH
    assert classifier.classify(["cough"], [SeverityTier.MEDIUM]) == UrgencyLevel.MODERATE
    assert classifier.classify(["cough"], [SeverityTier.CRITICAL]) == UrgencyLevel.EMERGENCY
    assert classifier.classify(["cough"], []) == UrgencyLevel.LOW


# ===== ANALYZER =====

def test_influenza_scenario(analyzer):
    result = analyzer.analyze([
        report("high fever", "severe"),
        report("body aches", "moderate"),
        report("cough", "moderate"),
    ])

    top = result.predictions[0]
    assert top.disease == "Influenza (Flu)"
    assert top.confidence > 0.5
    assert top.matched_symptoms == ["high fever", "body aches", "cough"]
    assert top.description == "Influenza (Flu) is indicated by: high fever, body aches, cough."
    assert result.predictions[1].disease == "COVID-19"
    assert result.urgency_level.rank <= UrgencyLevel.MODERATE.rank
    assert result.recommended_specialist == "General Physician"
    assert "Rapid Flu Test" in result.recommended_tests
    assert len(result.recommended_tests) == len(set(result.recommended_tests))


def test_chest_pain_is_emergency(analyzer):
    result = analyzer.analyze([report("chest pain", "severe")])
    assert result.urgency_level == UrgencyLevel.EMERGENCY
    assert result.warning == URGENCY_WARNINGS["emergency"]


def test_critical_keyword_with_no_predictions():
    result = SymptomAnalyzer(KnowledgeBase([])).analyze([report("severe bleeding", "severe")])

    assert result.predictions == []
    assert result.urgency_level == UrgencyLevel.EMERGENCY
    assert result.recommended_specialist == "General Physician"
    assert result.recommended_tests == []


def test_unmatched_symptoms_give_low_urgency(analyzer):
    result = analyzer.analyze([report("xyzzy", "mild")])
    assert result.predictions == []
    assert result.urgency_level == UrgencyLevel.LOW
    assert result.warning == NO_MATCH_WARNING


def test_ties_keep_declaration_order():
    kb = KnowledgeBase([
        profile("Zoster", ["fever"], tests=["T1"]),
        profile("Acne", ["fever"], tests=["T1", "T2"]),
    ])
    result = SymptomAnalyzer(kb).analyze([report("fever", "mild")])

    assert [p.disease for p in result.predictions] == ["Zoster", "Acne"]
    assert result.recommended_tests == ["T1", "T2"]


def test_low_confidence_diseases_are_dropped():
    kb = KnowledgeBase([profile("Diluted", ["fever"] + [f"keyword {i}" for i in range(9)])])
    # 1/10 * 100 + 3 = 13
    result = SymptomAnalyzer(kb).analyze([report("fever", "mild")])
    assert result.predictions == []


@pytest.mark.parametrize("symptoms", [
    [("fever", "mild")],
    [("headache", "severe"), ("nausea", "moderate"), ("dizziness", "mild")],
    [("fatigue", "moderate"), ("joint pain", "severe"), ("rash", "mild"), ("fever", "severe")],
    [("runny nose", "mild"), ("sneezing", "mild"), ("itchy eyes", "moderate")],
])
def test_prediction_bounds_and_order(analyzer, symptoms):
    result = analyzer.analyze([report(s, sev) for s, sev in symptoms])

    assert len(result.predictions) <= 5
    confidences = [p.confidence for p in result.predictions]
    assert confidences == sorted(confidences, reverse=True)
    assert all(0.2 <= c <= 1.0 for c in confidences)


def test_context_is_echoed_not_scored(analyzer):
    from care_insights.models import PatientContext

    reports = [report("high fever", "severe"), report("cough", "moderate")]
    context = PatientContext(age=42, existing_conditions=["asthma"])

    with_context = analyzer.analyze(reports, context)
    without_context = analyzer.analyze(reports)

    assert with_context.context == context
    assert with_context.predictions == without_context.predictions


def test_invalid_report_is_rejected():
    from pydantic import ValidationError

    with pytest.raises(ValidationError):
        SymptomReport(symptom="fever", severity="extreme")
    with pytest.raises(ValidationError):
        SymptomReport(symptom="   ", severity="mild")
