"""
Shared schemas for the prediction and analytics engines.

Inputs are validated at construction (closed enums, non-blank symptom
text, non-negative counts). Outputs are frozen: they are pure results of a
single call and carry no identity.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===== ENUMS =====

class SymptomSeverity(str, Enum):
    """Patient-reported severity of a single symptom."""
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"


class SeverityTier(str, Enum):
    """Knowledge-base severity of a disease."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _TIER_ORDER.index(self)


class UrgencyLevel(str, Enum):
    """Ordinal summary of how quickly care should be sought."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EMERGENCY = "emergency"

    @property
    def rank(self) -> int:
        return _URGENCY_ORDER.index(self)


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Trend(str, Enum):
    GROWING = "growing"
    STABLE = "stable"
    DECLINING = "declining"
    INSUFFICIENT_DATA = "insufficient_data"


_TIER_ORDER = [SeverityTier.LOW, SeverityTier.MEDIUM, SeverityTier.HIGH, SeverityTier.CRITICAL]
_URGENCY_ORDER = [UrgencyLevel.LOW, UrgencyLevel.MODERATE, UrgencyLevel.HIGH, UrgencyLevel.EMERGENCY]


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


# ===== SYMPTOM ANALYSIS =====

class SymptomReport(BaseModel):
    symptom: str = Field(..., min_length=1)
    severity: SymptomSeverity
    duration: Optional[str] = None     # e.g. "2 days", "1 week"
    frequency: Optional[str] = None    # e.g. "constant", "occasional"

    @field_validator("symptom")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("symptom must not be blank")
        return value


class PatientContext(BaseModel):
    """Optional patient background supplied with an analysis request."""
    age: Optional[int] = Field(default=None, ge=0)
    gender: Optional[str] = None
    existing_conditions: List[str] = Field(default_factory=list)
    medications: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)


class Prediction(_Result):
    disease: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    severity_tier: SeverityTier
    matched_symptoms: List[str] = Field(default_factory=list)
    specialist: str
    actions: List[str] = Field(default_factory=list)
    tests: List[str] = Field(default_factory=list)
    description: str = ""

    @property
    def percentage(self) -> float:
        """Confidence on the 0-100 scale."""
        return round(self.confidence * 100, 2)


class AnalysisResult(_Result):
    predictions: List[Prediction] = Field(default_factory=list)
    urgency_level: UrgencyLevel
    recommended_specialist: str
    recommended_tests: List[str] = Field(default_factory=list)
    warning: str = ""
    context: Optional[PatientContext] = None


# ===== APPOINTMENT / PRACTICE FACTS =====

class AppointmentFacts(BaseModel):
    appointment_date: datetime
    is_paid: bool = False
    consultation_fee: float = Field(default=0.0, ge=0)
    patient_id: Optional[str] = None
    status: Optional[str] = None       # pending, completed, cancelled, no-show


class PatientHistory(BaseModel):
    total_appointments: int = Field(default=0, ge=0)
    no_shows: int = Field(default=0, ge=0)
    completed_appointments: int = Field(default=0, ge=0)


class PatientRef(BaseModel):
    patient_id: str


class RevenuePoint(BaseModel):
    date: date
    revenue: float


class PaymentFacts(BaseModel):
    paid_at: datetime
    amount: float
    status: str = "completed"


class ReviewFacts(BaseModel):
    rating: float = Field(..., ge=1, le=5)
    status: str = "approved"


class RecordedPrediction(BaseModel):
    disease: str
    confidence: float = Field(..., ge=0.0, le=1.0)


class AnalysisRecord(BaseModel):
    """A previously produced analysis, as stored by the caller."""
    created_at: datetime
    predictions: List[RecordedPrediction] = Field(default_factory=list)


# ===== ANALYTICS RESULTS =====

class NoShowFactors(_Result):
    historical_no_show_rate: float
    lead_time_days: int
    hour: int
    day_of_week: int               # Sunday = 0
    is_weekend: bool
    is_paid: bool
    contributions: Dict[str, float] = Field(default_factory=dict)


class NoShowRisk(_Result):
    probability: int = Field(..., ge=0, le=100)
    risk_level: RiskLevel
    factors: NoShowFactors
    recommendation: str


class RevenueForecast(_Result):
    forecast_amount: float = 0.0
    daily_average: float = 0.0
    trend: Trend = Trend.INSUFFICIENT_DATA
    trend_percentage: float = 0.0
    confidence: float = Field(default=0.0, ge=0.0, le=100.0)
    period_days: int = 30
    data_points: int = 0
    total_historical_revenue: float = 0.0


class PeakBucket(_Result):
    index: int
    label: str
    count: int = 0
    revenue: float = 0.0


class PeakAnalysis(_Result):
    peak_hour: PeakBucket
    peak_day: PeakBucket
    hourly_distribution: List[PeakBucket]
    daily_distribution: List[PeakBucket]
    total_appointments: int = 0


class OutbreakPattern(_Result):
    disease: str
    cases: int
    percentage: float


class OutbreakReport(_Result):
    patterns: List[OutbreakPattern] = Field(default_factory=list)
    alert: Optional[str] = None
    window_days: int = 7
    total_analyses: int = 0


class RetentionSnapshot(_Result):
    total_patients: int = 0
    active_patients: int = 0
    at_risk_patients: int = 0
    lost_patients: int = 0
    retention_rate: float = 0.0
    average_visits_per_patient: float = 0.0
    patients_needing_follow_up: int = 0
    retention_status: str = "Needs Improvement"


class SuccessRateReport(_Result):
    success_rate: float = 0.0
    total_treated: int = 0
    total_reviewed: int = 0
    average_rating: float = 0.0
    positive_reviews: int = 0
    negative_reviews: int = 0


class DashboardSummary(_Result):
    overview: Dict[str, Any]
    revenue_forecast: RevenueForecast
    peak_hours: Optional[PeakAnalysis] = None
    appointments: Dict[str, int]
    performance: SuccessRateReport
    patient_retention: RetentionSnapshot
    health_alerts: OutbreakReport
