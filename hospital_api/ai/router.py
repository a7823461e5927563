"""
AI Router - Stub endpoints backing the dashboard's AI views.

These endpoints keep no state and never touch the collection store.
"""
import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, status
from pydantic import ValidationError

from ..exceptions import AppException
from .models import (
    RiskAssessmentRequest, ScheduleOptimizationRequest, SymptomAnalysisRequest
)
from .service import analyze_symptoms, assess_risk, generate_insights, optimize_schedule

# Set up logging
logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/analyze-symptoms")
def analyze_symptoms_endpoint(payload: Dict[str, Any] = Body(...)):
    """
    Analyze reported symptoms

    The analysis is a fixed template regardless of the symptoms sent.
    """
    try:
        request = SymptomAnalysisRequest.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Symptom analysis failed: {e}")
        raise AppException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to analyze symptoms")
    logger.info(f"Symptom analysis requested ({'with' if request.symptoms else 'without'} symptoms)")
    return {"success": True, "analysis": analyze_symptoms()}

@router.get("/insights")
def list_insights():
    """Get the current AI insight cards"""
    insights = generate_insights()
    return {"success": True, "insights": insights, "totalInsights": len(insights)}

@router.post("/optimize-schedule")
def optimize_schedule_endpoint(payload: Dict[str, Any] = Body(...)):
    """
    Optimize an appointment schedule

    Expects ``{"appointments": [...]}`` and echoes each appointment with a
    projected wait time reduction.
    """
    try:
        request = ScheduleOptimizationRequest.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Schedule optimization failed: {e}")
        raise AppException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to optimize schedule")
    return {"success": True, **optimize_schedule(request)}

@router.post("/risk-assessment")
def risk_assessment_endpoint(payload: Dict[str, Any] = Body(...)):
    """
    Assess a patient's risk from their vitals

    Blood pressure above 140, heart rate above 100 and temperature above
    38.5 each add to the risk score.
    """
    try:
        request = RiskAssessmentRequest.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Risk assessment failed: {e}")
        raise AppException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to assess risk")
    return {"success": True, "assessment": assess_risk(request)}
