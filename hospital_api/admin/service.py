"""
Admin Service - System users, the capped system log, and storage health.
"""
import logging
from typing import Any, Dict

from fastapi import Depends

from ..config import settings
from ..core.bootstrap import LOGS, USERS
from ..core.repository import BaseRepository, Repository, now_timestamp
from ..core.storage import JsonStore, Record
from ..database import get_store
from .models import AccountStatus, SystemHealth

# Set up logging
logger = logging.getLogger(__name__)

# Nominal capacity reported by the health endpoint, in GB
STORAGE_CAPACITY = 100


class UserRepository(Repository):
    """CRUD access to system users"""
    collection = USERS
    label = "User"

    def prepare(self, record: Record) -> Record:
        """New users start without permissions unless the payload grants some."""
        record.setdefault("permissions", [])
        return record


class SystemLogRepository(BaseRepository):
    """
    Append-only access to the system log.

    Only the most recent ``retention`` entries are kept; older ones are
    dropped on every append.
    """
    collection = LOGS
    label = "Log"

    def __init__(self, store: JsonStore, retention: int = 100):
        super().__init__(store)
        self.retention = retention

    def create(self, payload: Dict[str, Any]) -> Record:
        """
        Append a log entry and trim the collection.

        Args:
            payload: Entry fields; any id or timestamp are overwritten

        Returns:
            The stored entry with its id and timestamp
        """
        with self.store.lock(self.collection):
            logs = self.store.read(self.collection)
            entry = dict(payload)
            entry.update({
                "id": self.next_id(logs),
                "timestamp": now_timestamp(),
            })
            logs.append(entry)
            dropped = max(len(logs) - self.retention, 0)
            self.store.write(self.collection, logs[dropped:])

        if dropped:
            logger.debug(f"Dropped {dropped} old log entries")
        return entry


def get_system_health(store: JsonStore) -> Dict[str, Any]:
    """
    Build the health report for the admin view.

    Args:
        store: Collection store to inspect

    Returns:
        Dict: Health record with camelCase keys
    """
    used_mb = round(store.usage() / 1024 / 1024, 2)
    users = UserRepository(store).get_all()
    active_users = sum(1 for user in users if user.get("status") == AccountStatus.ACTIVE.value)

    health = SystemHealth(
        database="connected" if store.base_dir.is_dir() else "disconnected",
        storage=STORAGE_CAPACITY,
        storage_used=min(used_mb, STORAGE_CAPACITY),
        active_users=active_users,
        timestamp=now_timestamp(),
    )
    return health.to_record()


def get_user_repository(store: JsonStore = Depends(get_store)) -> UserRepository:
    """Repository dependency bound to the request's store"""
    return UserRepository(store)


def get_log_repository(store: JsonStore = Depends(get_store)) -> SystemLogRepository:
    """Repository dependency bound to the request's store"""
    return SystemLogRepository(store, retention=settings.log_retention)
