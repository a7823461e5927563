"""
AI Service - Deterministic stand-ins for the dashboard's AI features.

None of these consult a model. They return fixed templates or simple rule
based scores so the dashboard's AI views have stable data to render.
"""
from typing import Any, Dict, List

from ..core.repository import now_timestamp
from .models import (
    AIInsight, InsightType, Severity,
    RiskAssessmentRequest, ScheduleOptimizationRequest
)

# Readings above these limits count as risk factors
BLOOD_PRESSURE_LIMIT = 140
HEART_RATE_LIMIT = 100
TEMPERATURE_LIMIT = 38.5


def exceeds(reading: Any, limit: float) -> bool:
    """True when a reading is numeric (or a numeric string) and above ``limit``."""
    if isinstance(reading, bool):
        return False
    if isinstance(reading, str):
        try:
            reading = float(reading)
        except ValueError:
            return False
    return isinstance(reading, (int, float)) and reading > limit


def analyze_symptoms() -> Dict[str, Any]:
    """Return the fixed symptom analysis template."""
    return {
        "possibleConditions": [
            {
                "condition": "Common Cold",
                "probability": 65,
                "description": "Mild symptoms consistent with common cold",
            },
            {
                "condition": "Seasonal Flu",
                "probability": 25,
                "description": "Some symptoms match seasonal flu patterns",
            },
            {
                "condition": "Allergies",
                "probability": 10,
                "description": "Possible allergic reaction",
            },
        ],
        "recommendedActions": [
            "Monitor symptoms for 2-3 days",
            "Get rest and stay hydrated",
            "Schedule follow-up if symptoms worsen",
        ],
        "riskLevel": "low",
        "aiConfidence": 0.87,
    }


def generate_insights() -> List[Dict[str, Any]]:
    """Return the three insight cards, stamped with the current time."""
    now = now_timestamp()
    insights = [
        AIInsight(
            id=1,
            type=InsightType.RISK_ALERT,
            title="High Priority Risk Detection",
            description="AI identified 3 patients with elevated risk factors requiring immediate attention",
            severity=Severity.HIGH,
            timestamp=now,
        ),
        AIInsight(
            id=2,
            type=InsightType.OPTIMIZATION,
            title="Schedule Optimization Opportunity",
            description="Rescheduling 5 appointments could reduce patient wait times by 30%",
            severity=Severity.MEDIUM,
            timestamp=now,
        ),
        AIInsight(
            id=3,
            type=InsightType.PREDICTION,
            title="Patient Flow Prediction",
            description="AI predicts 45% increase in appointments for next week",
            severity=Severity.LOW,
            timestamp=now,
        ),
    ]
    return [insight.to_record() for insight in insights]


def optimize_schedule(request: ScheduleOptimizationRequest) -> Dict[str, Any]:
    """
    Annotate each appointment with a projected wait time reduction.

    Every third appointment (starting with the first) is marked optimized;
    only those count towards the total.

    Args:
        request: Appointments to optimize

    Returns:
        Dict: ``optimizedSchedule``, ``totalWaitTimeReduction`` and ``efficiencyGain``
    """
    schedule = []
    for index, appointment in enumerate(request.appointments):
        schedule.append({
            **appointment,
            "optimizedTime": appointment.get("time"),
            "waitTimeReduction": 10 + (index * 7) % 30,
            "aiOptimized": index % 3 == 0,
        })

    total = sum(item["waitTimeReduction"] for item in schedule if item["aiOptimized"])
    gain = round(total / len(schedule), 2) if schedule else 0
    return {
        "optimizedSchedule": schedule,
        "totalWaitTimeReduction": total,
        "efficiencyGain": gain,
    }


def assess_risk(request: RiskAssessmentRequest) -> Dict[str, Any]:
    """
    Score a patient's vitals.

    Args:
        request: Patient id, vitals and history (history is not scored)

    Returns:
        Dict: Assessment with risk level, score, factors and recommendations
    """
    vitals = request.vitals
    risk_factors = []
    risk_score = 0

    if vitals is not None:
        if exceeds(vitals.blood_pressure, BLOOD_PRESSURE_LIMIT):
            risk_factors.append("Elevated blood pressure")
            risk_score += 20
        if exceeds(vitals.heart_rate, HEART_RATE_LIMIT):
            risk_factors.append("Elevated heart rate")
            risk_score += 15
        if exceeds(vitals.temperature, TEMPERATURE_LIMIT):
            risk_factors.append("High fever")
            risk_score += 25

    if risk_score >= 40:
        risk_level = "high"
        advice = "Immediate medical attention recommended"
    elif risk_score >= 20:
        risk_level = "medium"
        advice = "Close monitoring advised"
    else:
        risk_level = "low"
        advice = "Continue routine checkups"

    return {
        "riskLevel": risk_level,
        "riskScore": risk_score,
        "riskFactors": risk_factors,
        "recommendations": [
            advice,
            "Maintain current medication schedule",
            "Schedule follow-up within 7 days",
        ],
        "aiConfidence": 0.92,
        "timestamp": now_timestamp(),
    }
