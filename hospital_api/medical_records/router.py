"""
Medical Record Router - API endpoints for listing and filing medical records.
"""
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from ..core.responses import success_envelope
from .service import MedicalRecordRepository, get_record_repository

router = APIRouter()

@router.get("")
def list_records(repository: MedicalRecordRepository = Depends(get_record_repository)):
    """Get all medical records"""
    return success_envelope(repository.get_all())

@router.post("", status_code=status.HTTP_201_CREATED)
def create_record(
    payload: Dict[str, Any] = Body(...),
    repository: MedicalRecordRepository = Depends(get_record_repository)
):
    """
    File a medical record

    ``aiSummary`` is whatever text the client sends; it is not derived from
    the record content.
    """
    return success_envelope(repository.create(payload))
