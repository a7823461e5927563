"""
Patient Model - Shape of the records stored in ``patients.json``.

Status and risk level drive the dashboard's alerting; they are stored as
plain strings.
"""
import enum
from typing import List, Optional
from ..core.schemas import StoredEntity

class Gender(str, enum.Enum):
    """Enum for patient gender"""
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"

class PatientStatus(str, enum.Enum):
    """Enum for patient status"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    CRITICAL = "critical"

class RiskLevel(str, enum.Enum):
    """Enum for patient risk level"""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class Patient(StoredEntity):
    """
    Patient Model - Stores patient information

    Fields:
    - name: Patient's full name
    - age: Age in years
    - gender: Patient's gender
    - phone: Contact number
    - email: Contact email
    - address: Home address (optional)
    - condition: Primary condition under treatment
    - status: Current patient status
    - risk_level: Assessed risk level
    - last_visit: Date of the last visit (optional)
    - next_appointment: Date of the next appointment (optional)
    - ai_insight: Templated insight text shown on the dashboard (optional)
    - medical_history: Past conditions (optional)
    """
    name: str
    age: int
    gender: Gender
    phone: str
    email: str
    address: Optional[str] = None
    condition: str
    status: PatientStatus = PatientStatus.ACTIVE
    risk_level: RiskLevel = RiskLevel.LOW
    last_visit: Optional[str] = None
    next_appointment: Optional[str] = None
    ai_insight: Optional[str] = None
    medical_history: Optional[List[str]] = None
