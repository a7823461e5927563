"""
Doctor Router - API endpoints for doctor management.
"""
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from ..core.responses import success_envelope
from ..exceptions import ResourceNotFoundException
from .service import DoctorRepository, get_doctor_repository

router = APIRouter()

@router.get("")
def list_doctors(repository: DoctorRepository = Depends(get_doctor_repository)):
    """Get all doctors"""
    return success_envelope(repository.get_all())

@router.post("", status_code=status.HTTP_201_CREATED)
def create_doctor(
    payload: Dict[str, Any] = Body(...),
    repository: DoctorRepository = Depends(get_doctor_repository)
):
    """Create a doctor"""
    return success_envelope(repository.create(payload))

@router.get("/{doctor_id}")
def get_doctor(
    doctor_id: str,
    repository: DoctorRepository = Depends(get_doctor_repository)
):
    """
    Get a doctor by ID

    This endpoint allows users to view a specific doctor's profile.
    """
    doctor = repository.get_by_id(doctor_id)
    if doctor is None:
        raise ResourceNotFoundException("Doctor not found")
    return success_envelope(doctor)

@router.put("/{doctor_id}")
def update_doctor(
    doctor_id: str,
    payload: Dict[str, Any] = Body(...),
    repository: DoctorRepository = Depends(get_doctor_repository)
):
    """
    Update a doctor

    Renaming a doctor does not touch the doctor name copied into
    appointments and records.
    """
    return success_envelope(repository.update(doctor_id, payload))

@router.delete("/{doctor_id}")
def delete_doctor(
    doctor_id: str,
    repository: DoctorRepository = Depends(get_doctor_repository)
):
    """Delete a doctor"""
    repository.delete(doctor_id)
    return success_envelope(message="Doctor deleted")
