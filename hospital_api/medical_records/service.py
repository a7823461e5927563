"""
Medical Record Service - Repository over the ``records`` collection.

The HTTP surface only lists and creates records; update and delete are
available to callers of the repository.
"""
from fastapi import Depends

from ..core.bootstrap import RECORDS
from ..core.repository import Repository
from ..core.storage import JsonStore
from ..database import get_store


class MedicalRecordRepository(Repository):
    """CRUD access to medical records"""
    collection = RECORDS
    label = "Record"


def get_record_repository(store: JsonStore = Depends(get_store)) -> MedicalRecordRepository:
    """Repository dependency bound to the request's store"""
    return MedicalRecordRepository(store)
