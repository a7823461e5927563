"""
Admin Router - API endpoints for system users, system logs and health.
"""
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, status

from ..core.responses import success_envelope
from ..core.storage import JsonStore
from ..database import get_store
from ..exceptions import ResourceNotFoundException
from .service import (
    UserRepository,
    SystemLogRepository,
    get_user_repository,
    get_log_repository,
    get_system_health
)

router = APIRouter()

# ============================================================================
# SYSTEM USERS
# ============================================================================

@router.get("/users")
def list_users(repository: UserRepository = Depends(get_user_repository)):
    """Get all system users"""
    return success_envelope(repository.get_all())

@router.post("/users", status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Dict[str, Any] = Body(...),
    repository: UserRepository = Depends(get_user_repository)
):
    """
    Create a system user

    Users created without a ``permissions`` list start with none.
    """
    return success_envelope(repository.create(payload))

@router.get("/users/{user_id}")
def get_user(
    user_id: str,
    repository: UserRepository = Depends(get_user_repository)
):
    """Get a system user by ID"""
    user = repository.get_by_id(user_id)
    if user is None:
        raise ResourceNotFoundException("User not found")
    return success_envelope(user)

@router.put("/users/{user_id}")
def update_user(
    user_id: str,
    payload: Dict[str, Any] = Body(...),
    repository: UserRepository = Depends(get_user_repository)
):
    """Update a system user's role, status, department or permissions"""
    return success_envelope(repository.update(user_id, payload))

@router.delete("/users/{user_id}")
def delete_user(
    user_id: str,
    repository: UserRepository = Depends(get_user_repository)
):
    """Delete a system user"""
    repository.delete(user_id)
    return success_envelope(message="User deleted")

# ============================================================================
# SYSTEM LOGS
# ============================================================================

@router.get("/logs")
def list_logs(repository: SystemLogRepository = Depends(get_log_repository)):
    """
    Get the system log

    Only the most recent entries are retained (100 by default).
    """
    return success_envelope(repository.get_all())

@router.post("/logs", status_code=status.HTTP_201_CREATED)
def create_log(
    payload: Dict[str, Any] = Body(...),
    repository: SystemLogRepository = Depends(get_log_repository)
):
    """Append a system log entry"""
    return success_envelope(repository.create(payload))

# ============================================================================
# HEALTH
# ============================================================================

@router.get("/health")
def system_health(store: JsonStore = Depends(get_store)):
    """
    Get system health

    Reports whether the data directory is reachable and how much space the
    collection files use.
    """
    return success_envelope(get_system_health(store))
