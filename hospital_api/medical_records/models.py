"""
Medical Record Model - Shape of the records stored in ``records.json``.
"""
import enum
from typing import Optional
from ..core.schemas import StoredEntity

class RecordStatus(str, enum.Enum):
    """Enum for medical record status"""
    COMPLETED = "Completed"
    PENDING_REVIEW = "Pending Review"
    ACTIVE = "Active"
    ARCHIVED = "Archived"

class MedicalRecord(StoredEntity):
    """
    Medical Record Model - Stores patient medical records

    Fields:
    - patient_id: Id of the patient
    - patient_name: Patient name when the record was filed
    - doctor_id: Id of the authoring doctor
    - doctor_name: Doctor name when the record was filed
    - record_type: Kind of record (lab result, imaging, ...)
    - date: Date of the record
    - status: Review status
    - content: Record body (optional)
    - file_size: Display size of an attached file (optional)
    - ai_summary: Templated summary string (optional)
    """
    patient_id: str
    patient_name: str
    doctor_id: str
    doctor_name: str
    record_type: str
    date: str
    status: RecordStatus = RecordStatus.PENDING_REVIEW
    content: Optional[str] = None
    file_size: Optional[str] = None
    ai_summary: Optional[str] = None
