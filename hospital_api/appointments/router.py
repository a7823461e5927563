"""
Appointment Router - API endpoints for appointment scheduling.
"""
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from ..core.responses import success_envelope
from ..exceptions import ResourceNotFoundException
from .service import AppointmentRepository, get_appointment_repository

router = APIRouter()

@router.get("")
def list_appointments(repository: AppointmentRepository = Depends(get_appointment_repository)):
    """
    Get all appointments

    Cancelled appointments are included; filtering is left to the client.
    """
    return success_envelope(repository.get_all())

@router.post("", status_code=status.HTTP_201_CREATED)
def create_appointment(
    payload: Dict[str, Any] = Body(...),
    repository: AppointmentRepository = Depends(get_appointment_repository)
):
    """
    Book an appointment

    The body carries the patient and doctor names alongside their ids; they
    are stored as given.
    """
    return success_envelope(repository.create(payload))

@router.get("/{appointment_id}")
def get_appointment(
    appointment_id: str,
    repository: AppointmentRepository = Depends(get_appointment_repository)
):
    """Get an appointment by ID"""
    appointment = repository.get_by_id(appointment_id)
    if appointment is None:
        raise ResourceNotFoundException("Appointment not found")
    return success_envelope(appointment)

@router.put("/{appointment_id}")
def update_appointment(
    appointment_id: str,
    payload: Dict[str, Any] = Body(...),
    repository: AppointmentRepository = Depends(get_appointment_repository)
):
    """
    Update an appointment

    Used for rescheduling and for status changes such as cancellation.
    """
    return success_envelope(repository.update(appointment_id, payload))

@router.delete("/{appointment_id}")
def delete_appointment(
    appointment_id: str,
    repository: AppointmentRepository = Depends(get_appointment_repository)
):
    """Delete an appointment"""
    repository.delete(appointment_id)
    return success_envelope(message="Appointment deleted")
