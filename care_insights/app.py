"""
Care Insights API - FastAPI Application

Stateless decision-support microservice. Callers post the facts they hold
(symptom reports, appointments, payments, reviews, past analyses) and get
the derived result back; nothing is stored.

Endpoints:
- POST /symptoms/analyze - Rank likely conditions and classify urgency
- GET  /symptoms/common - Symptom suggestions for input forms
- GET  /specialists - Specialist list
- POST /analytics/no-show - No-show risk for one appointment
- POST /analytics/revenue-forecast - Revenue forecast from a daily series or payments
- POST /analytics/peak-hours - Hourly / daily appointment distribution
- POST /analytics/outbreaks - Disease clustering in recent analyses
- POST /analytics/retention - Patient retention snapshot
- POST /analytics/success-rate - Treatment success rate from reviews
- POST /analytics/dashboard - Combined 30-day summary
- GET  /health - Liveness

This service is NOT a diagnostic system - it provides assistive insights only.
"""

import logging
from datetime import datetime
from itertools import chain
from typing import Iterator, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, model_validator

from . import __version__, config
from .analytics import (
    analyze_patient_retention,
    analyze_peak_hours,
    build_dashboard,
    calculate_success_rate,
    daily_revenue_series,
    detect_outbreak_patterns,
    forecast_revenue,
    predict_no_show,
)
from .analytics.timeutils import check_consistent_timezones
from .clinical_config import COMMON_SYMPTOMS, DISCLAIMER, SPECIALISTS
from .engines import get_analyzer
from .models import (
    AnalysisRecord,
    AnalysisResult,
    AppointmentFacts,
    DashboardSummary,
    NoShowRisk,
    OutbreakReport,
    PatientContext,
    PatientHistory,
    PatientRef,
    PaymentFacts,
    PeakAnalysis,
    RetentionSnapshot,
    RevenueForecast,
    RevenuePoint,
    ReviewFacts,
    SuccessRateReport,
    SymptomReport,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Care Insights",
    description="Symptom prediction and practice analytics microservice",
    version=__version__
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
class AnalyzeRequest(BaseModel):
    symptoms: List[SymptomReport] = Field(..., min_length=1)
    context: Optional[PatientContext] = None

class _TimedRequest(BaseModel):
    """Request carrying datetimes that are compared against each other."""
    now: Optional[datetime] = None

    def timestamps(self) -> Iterator[datetime]:
        return iter(())

    @model_validator(mode="after")
    def _same_timezone_kind(self):
        moments = chain(self.timestamps(), [self.now] if self.now is not None else [])
        check_consistent_timezones(moments)
        return self

class NoShowRequest(_TimedRequest):
    appointment: AppointmentFacts
    history: PatientHistory = Field(default_factory=PatientHistory)

    def timestamps(self):
        return iter([self.appointment.appointment_date])

class RevenueRequest(BaseModel):
    series: List[RevenuePoint] = Field(default_factory=list)
    payments: List[PaymentFacts] = Field(default_factory=list)  # used when series is empty
    period_days: int = Field(default=30, ge=1)

class PeakHoursRequest(BaseModel):
    appointments: List[AppointmentFacts] = Field(default_factory=list)

class OutbreakRequest(_TimedRequest):
    analyses: List[AnalysisRecord] = Field(default_factory=list)
    window_days: int = Field(default=7, ge=1)

    def timestamps(self):
        return (r.created_at for r in self.analyses)

class RetentionRequest(_TimedRequest):
    patients: List[PatientRef] = Field(default_factory=list)
    appointments: List[AppointmentFacts] = Field(default_factory=list)

    def timestamps(self):
        return (a.appointment_date for a in self.appointments)

class SuccessRateRequest(BaseModel):
    appointments: List[AppointmentFacts] = Field(default_factory=list)
    reviews: List[ReviewFacts] = Field(default_factory=list)

class DashboardRequest(_TimedRequest):
    appointments: List[AppointmentFacts] = Field(default_factory=list)
    payments: List[PaymentFacts] = Field(default_factory=list)
    reviews: List[ReviewFacts] = Field(default_factory=list)
    patients: List[PatientRef] = Field(default_factory=list)
    analyses: List[AnalysisRecord] = Field(default_factory=list)

    def timestamps(self):
        return chain(
            (a.appointment_date for a in self.appointments),
            (p.paid_at for p in self.payments),
            (r.created_at for r in self.analyses),
        )


# === SYMPTOM ENDPOINTS ===

@app.post("/symptoms/analyze", response_model=AnalysisResult)
async def analyze_symptoms_endpoint(request: AnalyzeRequest):
    """
    Rank likely conditions for the reported symptoms.
    """
    try:
        return get_analyzer().analyze(request.symptoms, request.context)
    except Exception as e:
        logger.exception(f"Error in analyze_symptoms: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/symptoms/common")
async def common_symptoms():
    return {"symptoms": COMMON_SYMPTOMS}


@app.get("/specialists")
async def specialists():
    return {"specialists": SPECIALISTS}


# === ANALYTICS ENDPOINTS ===

@app.post("/analytics/no-show", response_model=NoShowRisk)
async def no_show_endpoint(request: NoShowRequest):
    try:
        return predict_no_show(request.appointment, request.history, now=request.now)
    except Exception as e:
        logger.exception(f"Error predicting no-show: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analytics/revenue-forecast", response_model=RevenueForecast)
async def revenue_forecast_endpoint(request: RevenueRequest):
    """
    Forecast from an explicit daily series, or from raw payments grouped
    per day when no series is given.
    """
    try:
        series = request.series or daily_revenue_series(request.payments)
        return forecast_revenue(series, request.period_days)
    except Exception as e:
        logger.exception(f"Error forecasting revenue: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analytics/peak-hours", response_model=PeakAnalysis)
async def peak_hours_endpoint(request: PeakHoursRequest):
    try:
        return analyze_peak_hours(request.appointments)
    except Exception as e:
        logger.exception(f"Error analyzing peak hours: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analytics/outbreaks", response_model=OutbreakReport)
async def outbreaks_endpoint(request: OutbreakRequest):
    try:
        return detect_outbreak_patterns(request.analyses, request.window_days, now=request.now)
    except Exception as e:
        logger.exception(f"Error detecting outbreaks: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analytics/retention", response_model=RetentionSnapshot)
async def retention_endpoint(request: RetentionRequest):
    try:
        return analyze_patient_retention(request.patients, request.appointments, now=request.now)
    except Exception as e:
        logger.exception(f"Error analyzing retention: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analytics/success-rate", response_model=SuccessRateReport)
async def success_rate_endpoint(request: SuccessRateRequest):
    try:
        return calculate_success_rate(request.appointments, request.reviews)
    except Exception as e:
        logger.exception(f"Error calculating success rate: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analytics/dashboard", response_model=DashboardSummary)
async def dashboard_endpoint(request: DashboardRequest):
    try:
        return build_dashboard(
            request.appointments,
            request.payments,
            request.reviews,
            request.patients,
            request.analyses,
            now=request.now,
        )
    except Exception as e:
        logger.exception(f"Error generating dashboard: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
async def health():
    return {
        "status": "healthy",
        "version": __version__,
        "diseases": len(get_analyzer().kb),
        "disclaimer": DISCLAIMER,
    }
