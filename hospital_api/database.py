"""
Storage connection management.
Provides the process-wide JSON store and the dependency that hands it to
request handlers.
"""
from .config import settings
from .core.bootstrap import COLLECTIONS, default_collections
from .core.storage import JsonStore

# Create the store for the configured data directory
store = JsonStore(settings.data_dir, collections=COLLECTIONS, seed_factory=default_collections)

def get_store() -> JsonStore:
    """
    Storage dependency - Returns the JSON store ready for use.

    The data directory and any missing collection files are created before
    the store is returned, so every handler runs against initialized storage.
    Tests override this dependency to point at a temporary directory.

    Returns:
        JsonStore: Initialized collection store
    """
    store.ensure_ready()
    return store
