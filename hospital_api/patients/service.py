"""
Patient Service - Repository over the ``patients`` collection.
"""
from fastapi import Depends

from ..core.bootstrap import PATIENTS
from ..core.repository import Repository
from ..core.storage import JsonStore
from ..database import get_store


class PatientRepository(Repository):
    """CRUD access to patients"""
    collection = PATIENTS
    label = "Patient"


def get_patient_repository(store: JsonStore = Depends(get_store)) -> PatientRepository:
    """Repository dependency bound to the request's store"""
    return PatientRepository(store)
