"""
File-backed collection store.

Each collection is one JSON array in its own file under a single data
directory. Reads and writes always cover the whole collection; callers that
need one record load the full sequence and scan it.
"""
import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional

from ..exceptions import StorageException

# Set up logging
logger = logging.getLogger(__name__)

Record = Dict[str, Any]
SeedFactory = Callable[[], Dict[str, List[Record]]]

# Permissions of every collection file
FILE_MODE = 0o644


class JsonStore:
    """
    Collection-agnostic persistence over a directory of JSON files.

    Attributes:
        base_dir: Directory holding the collection files
        collections: Names of the collections created by ``ensure_ready``
    """
    def __init__(
        self,
        base_dir,
        collections: Iterable[str] = (),
        seed_factory: Optional[SeedFactory] = None
    ):
        self.base_dir = Path(base_dir)
        self.collections = tuple(collections)
        self._seed_factory = seed_factory
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def path_for(self, name: str) -> Path:
        """Return the backing file of a collection."""
        return self.base_dir / f"{name}.json"

    def ensure_ready(self) -> None:
        """
        Create the data directory and seed every missing collection file.

        Existing files are never touched, so calling this on every request
        performs no writes once the store is initialized.

        Raises:
            StorageException: If the directory or a seed file cannot be written
        """
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageException(f"Failed to create data directory {self.base_dir}: {e}")

        missing = [name for name in self.collections if not self.path_for(name).exists()]
        if not missing:
            return

        seeds = self._seed_factory() if self._seed_factory else {}
        for name in missing:
            with self.lock(name):
                # Another request may have seeded it while we waited
                if self.path_for(name).exists():
                    continue
                self.write(name, seeds.get(name, []))
                logger.info(f"Seeded collection '{name}' with {len(seeds.get(name, []))} records")

    def read(self, name: str) -> List[Record]:
        """
        Load a whole collection.

        A missing file or a document that is not a JSON array yields an
        empty list instead of an error.

        Args:
            name: Collection name

        Returns:
            List of records in stored order

        Raises:
            StorageException: If the file exists but cannot be read
        """
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Collection '{name}' is not valid JSON, treating as empty: {e}")
            return []
        except OSError as e:
            raise StorageException(f"Failed to read {path.name}: {e}")

        if not isinstance(data, list):
            logger.warning(f"Collection '{name}' does not hold a JSON array, treating as empty")
            return []
        return data

    def write(self, name: str, records: List[Record]) -> None:
        """
        Replace a whole collection.

        The sequence is written to a temporary file in the same directory
        and moved over the target, so readers never observe a half-written
        file.

        Args:
            name: Collection name
            records: Full sequence to persist

        Raises:
            StorageException: If serialization or the file write fails
        """
        path = self.path_for(name)
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.base_dir,
                prefix=f".{name}.",
                suffix=".tmp",
                delete=False
            ) as tmp:
                tmp_name = tmp.name
                json.dump(records, tmp, indent=2, ensure_ascii=False)
            # Temp files are created 0600
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise StorageException(f"Failed to write {path.name}: {e}")

    @contextmanager
    def lock(self, name: str) -> Iterator[None]:
        """
        Hold the collection's lock for a read-modify-write cycle.

        The lock is re-entrant so a repository may call ``read`` and
        ``write`` while holding it.
        """
        with self._locks_guard:
            collection_lock = self._locks.setdefault(name, threading.RLock())
        with collection_lock:
            yield

    def usage(self) -> int:
        """Return the total size in bytes of the collection files on disk."""
        if not self.base_dir.is_dir():
            return 0
        return sum(
            entry.stat().st_size
            for entry in self.base_dir.glob("*.json")
            if entry.is_file()
        )
