"""
Doctor Service - Repository over the ``doctors`` collection.
"""
from fastapi import Depends

from ..core.bootstrap import DOCTORS
from ..core.repository import Repository
from ..core.storage import JsonStore, Record
from ..database import get_store
from .models import DoctorStatus


class DoctorRepository(Repository):
    """CRUD access to doctors"""
    collection = DOCTORS
    label = "Doctor"


def is_available(doctor: Record) -> bool:
    """Check if a stored doctor record is marked available"""
    return doctor.get("status") == DoctorStatus.AVAILABLE.value


def get_doctor_repository(store: JsonStore = Depends(get_store)) -> DoctorRepository:
    """Repository dependency bound to the request's store"""
    return DoctorRepository(store)
