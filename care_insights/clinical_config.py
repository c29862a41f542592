"""
Clinical Reference Configuration
================================

Fixed clinical reference data shared by the symptom engine and the API:
critical keywords, severity weighting, urgency messages and the
reference lists offered to callers for autocomplete.

Core Principle:
    The engine is a Clinical Decision Support aid, not a diagnostic tool.
    Any single alarming symptom escalates to EMERGENCY on its own.

"""

from typing import List

# === 1. CRITICAL SYMPTOMS (Immediate Emergency) ===
CRITICAL_SYMPTOMS = [
    "chest pain",
    "difficulty breathing",
    "severe bleeding",
    "loss of consciousness",
    "severe headache",
    "facial drooping",
    "arm weakness",
    "speech difficulty",
    "severe abdominal pain",
]

# === 2. SEVERITY BOOST (points per unit of match score) ===
SEVERITY_BOOST = {
    "severe": 15,
    "moderate": 8,
    "mild": 3,
}

# === 3. PREDICTION LIMITS ===
MIN_CONFIDENCE_PERCENT = 20     # Discard at or below this
MAX_PREDICTIONS = 5
DEFAULT_SPECIALIST = "General Physician"

# === 4. URGENCY WARNINGS ===
URGENCY_WARNINGS = {
    "emergency": "⚠️ EMERGENCY: Seek immediate medical attention!",
    "high": "⚠️ HIGH PRIORITY: Consult a doctor as soon as possible",
}

DEFAULT_WARNING = (
    "This is an AI prediction. Please consult a healthcare professional "
    "for accurate diagnosis."
)

NO_MATCH_WARNING = "Please consult a healthcare professional for accurate diagnosis."

# === 5. REFERENCE LISTS ===
COMMON_SYMPTOMS = sorted([
    "Fever", "Cough", "Headache", "Sore throat", "Runny nose",
    "Body aches", "Fatigue", "Nausea", "Vomiting", "Diarrhea",
    "Abdominal pain", "Chest pain", "Shortness of breath", "Dizziness",
    "Rash", "Itchy skin", "Joint pain", "Muscle pain", "Back pain",
    "Frequent urination", "Painful urination", "Blurred vision",
    "Loss of appetite", "Weight loss", "Weight gain", "Sweating",
    "Chills", "Congestion", "Sneezing", "Difficulty swallowing",
    "Heartburn", "Bloating", "Constipation", "Insomnia",
    "Anxiety", "Depression", "Memory problems", "Confusion",
    "Numbness", "Tingling", "Tremors", "Seizures",
    "Palpitations", "High blood pressure", "Low blood pressure",
    "Swelling", "Bruising", "Bleeding", "Nosebleeds",
])

SPECIALISTS = sorted([
    "General Physician",
    "Allergist",
    "Cardiologist",
    "Dermatologist",
    "Endocrinologist",
    "Gastroenterologist",
    "Neurologist",
    "Pulmonologist",
    "Urologist",
    "Orthopedic Surgeon",
    "ENT Specialist",
    "Ophthalmologist",
    "Psychiatrist",
    "Gynecologist",
    "Pediatrician",
    "Oncologist",
    "Infectious Disease Specialist",
    "Rheumatologist",
    "Nephrologist",
    "Hematologist",
    "Orthopedist",
    "Sleep Specialist",
    "Surgeon",
])

# === 6. DISCLAIMER ===
DISCLAIMER = (
    "This system provides AI-assisted triage support and is NOT a medical "
    "diagnosis. Please consult a qualified healthcare professional."
)


def urgency_warning(urgency: str, has_predictions: bool = True) -> str:
    """Caller-facing message for an urgency level."""
    if urgency in URGENCY_WARNINGS:
        return URGENCY_WARNINGS[urgency]
    if not has_predictions:
        return NO_MATCH_WARNING
    return DEFAULT_WARNING


def find_critical_symptoms(phrases: List[str]) -> List[str]:
    """
    Return the reported phrases that contain a critical keyword.

    Matching is a lower-cased substring test on the raw phrase.
    """
    hits = []
    for phrase in phrases:
        text = phrase.lower()
        if any(keyword in text for keyword in CRITICAL_SYMPTOMS):
            hits.append(phrase)
    return hits
