"""
Repository base classes - typed CRUD over one collection of the JSON store.

Every mutation is a whole-collection read-modify-write cycle executed while
holding the collection's lock.
"""
import logging
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from ..exceptions import ResourceNotFoundException
from .storage import JsonStore, Record

# Set up logging
logger = logging.getLogger(__name__)

# Keys owned by the repository; callers cannot set them
SERVER_FIELDS = ("id", "createdAt", "updatedAt")


def format_timestamp(moment: datetime) -> str:
    """Render a UTC datetime as ISO-8601 with millisecond precision and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a timestamp written by ``format_timestamp``; None if it is not one."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def now_timestamp(after: Any = None) -> str:
    """
    Current time as a timestamp string, strictly later than ``after``.

    Args:
        after: Previous timestamp of the same record, if any

    Returns:
        str: ISO-8601 timestamp
    """
    now = datetime.now(timezone.utc)
    # Only milliseconds are stored, so compare at that precision
    moment = now.replace(microsecond=now.microsecond // 1000 * 1000)
    previous = parse_timestamp(after)
    if previous is not None and moment <= previous:
        moment = previous + timedelta(milliseconds=1)
    return format_timestamp(moment)


class BaseRepository:
    """
    Read access and id assignment shared by every repository.

    Attributes:
        collection: Name of the backing collection
        label: Entity name used in log and error messages
    """
    collection: str = ""
    label: str = "Record"

    def __init__(self, store: JsonStore):
        self.store = store

    def get_all(self) -> List[Record]:
        """Return the whole collection in insertion order."""
        return self.store.read(self.collection)

    @staticmethod
    def next_id(records: List[Record]) -> str:
        """
        Assign an id from the current epoch milliseconds.

        Two creates within the same millisecond would collide, so the
        candidate is bumped until no stored record uses it.
        """
        taken = {str(record.get("id")) for record in records}
        candidate = int(time.time() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)


class Repository(BaseRepository):
    """
    Full CRUD repository for one collection.

    Subclasses only set ``collection`` and ``label``; ``prepare`` may be
    overridden to fill defaults on new records.
    """

    def get_by_id(self, record_id: str) -> Optional[Record]:
        """
        Find a record by id.

        Args:
            record_id: Id to look up

        Returns:
            The record, or None when no record has that id
        """
        for record in self.get_all():
            if record.get("id") == record_id:
                return record
        return None

    def prepare(self, record: Record) -> Record:
        """Hook for subclasses to fill defaults on a record about to be created."""
        return record

    def create(self, payload: Dict[str, Any]) -> Record:
        """
        Append a new record.

        Args:
            payload: Entity fields; any id or timestamps are overwritten

        Returns:
            The stored record with its id, createdAt and updatedAt
        """
        with self.store.lock(self.collection):
            records = self.store.read(self.collection)
            now = now_timestamp()
            record = dict(payload)
            record.update({
                "id": self.next_id(records),
                "createdAt": now,
                "updatedAt": now,
            })
            record = self.prepare(record)
            records.append(record)
            self.store.write(self.collection, records)

        logger.info(f"{self.label} {record['id']} created")
        return record

    def update(self, record_id: str, patch: Dict[str, Any]) -> Record:
        """
        Shallow-merge a partial payload into an existing record.

        Args:
            record_id: Id of the record to update
            patch: Fields to overwrite; id and createdAt are ignored

        Returns:
            The merged record

        Raises:
            ResourceNotFoundException: If no record has that id
        """
        with self.store.lock(self.collection):
            records = self.store.read(self.collection)
            index = next(
                (i for i, record in enumerate(records) if record.get("id") == record_id),
                None
            )
            if index is None:
                raise ResourceNotFoundException(f"{self.label} not found")

            existing = records[index]
            changes = {key: value for key, value in patch.items() if key not in SERVER_FIELDS}
            merged = {**existing, **changes, "updatedAt": now_timestamp(existing.get("updatedAt"))}
            records[index] = merged
            self.store.write(self.collection, records)

        logger.info(f"{self.label} {record_id} updated")
        return merged

    def delete(self, record_id: str) -> bool:
        """
        Remove a record. Deleting a missing id is a successful no-op.

        Args:
            record_id: Id of the record to remove

        Returns:
            bool: True if a record was removed
        """
        with self.store.lock(self.collection):
            records = self.store.read(self.collection)
            remaining = [record for record in records if record.get("id") != record_id]
            removed = len(remaining) != len(records)
            if removed:
                self.store.write(self.collection, remaining)

        if removed:
            logger.info(f"{self.label} {record_id} deleted")
        else:
            logger.info(f"{self.label} {record_id} not present, nothing deleted")
        return removed
