"""
Appointment Service - Repository over the ``appointments`` collection.
"""
from datetime import date
from typing import List

from fastapi import Depends

from ..core.bootstrap import APPOINTMENTS
from ..core.repository import Repository
from ..core.storage import JsonStore, Record
from ..database import get_store
from .models import AppointmentStatus


class AppointmentRepository(Repository):
    """CRUD access to appointments"""
    collection = APPOINTMENTS
    label = "Appointment"


def appointments_on(appointments: List[Record], day: date) -> List[Record]:
    """Filter appointments to those dated ``day`` whose status is not cancelled."""
    wanted = day.isoformat()
    return [
        appointment for appointment in appointments
        if appointment.get("date") == wanted
        and appointment.get("status") != AppointmentStatus.CANCELLED.value
    ]


def get_appointment_repository(store: JsonStore = Depends(get_store)) -> AppointmentRepository:
    """Repository dependency bound to the request's store"""
    return AppointmentRepository(store)
