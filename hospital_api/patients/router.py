"""
Patient Router - API endpoints for patient management.

Request bodies are stored as sent; fields are not validated.
"""
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from ..core.responses import success_envelope
from ..exceptions import ResourceNotFoundException
from .service import PatientRepository, get_patient_repository

router = APIRouter()

@router.get("")
def list_patients(repository: PatientRepository = Depends(get_patient_repository)):
    """
    Get all patients

    Returns every stored patient in insertion order.
    """
    return success_envelope(repository.get_all())

@router.post("", status_code=status.HTTP_201_CREATED)
def create_patient(
    payload: Dict[str, Any] = Body(...),
    repository: PatientRepository = Depends(get_patient_repository)
):
    """
    Create a patient

    The id and timestamps are assigned by the server.
    """
    return success_envelope(repository.create(payload))

@router.get("/{patient_id}")
def get_patient(
    patient_id: str,
    repository: PatientRepository = Depends(get_patient_repository)
):
    """
    Get a patient by ID
    """
    patient = repository.get_by_id(patient_id)
    if patient is None:
        raise ResourceNotFoundException("Patient not found")
    return success_envelope(patient)

@router.put("/{patient_id}")
def update_patient(
    patient_id: str,
    payload: Dict[str, Any] = Body(...),
    repository: PatientRepository = Depends(get_patient_repository)
):
    """
    Update a patient

    Fields in the body overwrite the stored ones; other fields are kept.
    """
    return success_envelope(repository.update(patient_id, payload))

@router.delete("/{patient_id}")
def delete_patient(
    patient_id: str,
    repository: PatientRepository = Depends(get_patient_repository)
):
    """
    Delete a patient

    Deleting a patient that does not exist also succeeds. Appointments and
    records that reference the patient are left in place.
    """
    repository.delete(patient_id)
    return success_envelope(message="Patient deleted")
