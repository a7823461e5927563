"""
Appointment Model - Shape of the records stored in ``appointments.json``.

``patient_name`` and ``doctor_name`` are copies taken when the appointment
is created; renaming a patient or doctor does not update them.
"""
import enum
from typing import Optional
from ..core.schemas import StoredEntity

class AppointmentStatus(str, enum.Enum):
    """Enum for appointment status"""
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class Appointment(StoredEntity):
    """
    Appointment Model - Stores appointment information

    Fields:
    - patient_id: Id of the patient
    - patient_name: Patient name at booking time
    - doctor_id: Id of the doctor
    - doctor_name: Doctor name at booking time
    - date: Local date, yyyy-MM-dd
    - time: Display time (e.g. "09:00 AM")
    - duration: Display duration (e.g. "30 min")
    - type: Visit type
    - status: Current status of the appointment
    - notes: Additional notes (optional)
    - ai_optimized: Whether the slot came from schedule optimization (optional)
    """
    patient_id: str
    patient_name: str
    doctor_id: str
    doctor_name: str
    date: str
    time: str
    duration: str
    type: str
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    notes: Optional[str] = None
    ai_optimized: Optional[bool] = None
