"""
Doctor Model - Shape of the records stored in ``doctors.json``.

The ``patients`` count is informational; it is not kept in step with the
patient or appointment collections.
"""
import enum
from typing import Optional
from ..core.schemas import StoredEntity

class DoctorStatus(str, enum.Enum):
    """Enum for doctor availability"""
    AVAILABLE = "available"
    BUSY = "busy"
    OFFLINE = "offline"

class Doctor(StoredEntity):
    """
    Doctor Model - Stores doctor information

    Fields:
    - name: Doctor's full name
    - specialization: Medical specialization
    - experience: Experience as free text (e.g. "15 years")
    - email: Contact email
    - phone: Contact number
    - location: Ward or wing where the doctor practices
    - status: Current availability
    - rating: Average rating
    - patients: Number of patients under care
    - next_available: Next free slot (optional)
    """
    name: str
    specialization: str
    experience: str
    email: str
    phone: str
    location: str
    status: DoctorStatus = DoctorStatus.AVAILABLE
    rating: float = 0.0
    patients: int = 0
    next_available: Optional[str] = None
