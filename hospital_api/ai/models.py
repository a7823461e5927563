"""
AI Models - Shapes of the AI insight records and stub request bodies.
"""
import enum
from typing import Any, Dict, List, Optional
from ..core.schemas import CamelModel

class InsightType(str, enum.Enum):
    """Enum for AI insight categories"""
    RISK_ALERT = "risk-alert"
    OPTIMIZATION = "optimization"
    PREDICTION = "prediction"
    MEDICATION = "medication"
    DIAGNOSIS = "diagnosis"

class Severity(str, enum.Enum):
    """Enum for AI insight severity"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class AIInsight(CamelModel):
    """An insight card shown on the AI insights view"""
    id: int
    type: InsightType
    title: str
    description: str
    severity: Severity
    timestamp: str

class Vitals(CamelModel):
    """Vital signs considered by the risk assessment; non-numeric readings are kept but not scored"""
    blood_pressure: Optional[Any] = None
    heart_rate: Optional[Any] = None
    temperature: Optional[Any] = None

class RiskAssessmentRequest(CamelModel):
    """Body of the risk assessment endpoint"""
    patient_id: Optional[str] = None
    vitals: Optional[Vitals] = None
    history: Optional[Any] = None

class SymptomAnalysisRequest(CamelModel):
    """Body of the symptom analysis endpoint"""
    symptoms: Optional[Any] = None
    patient_history: Optional[Any] = None

class ScheduleOptimizationRequest(CamelModel):
    """Body of the schedule optimization endpoint"""
    appointments: List[Dict[str, Any]]
