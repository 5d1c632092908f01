"""
Build the byte store selected by configuration.
"""

from typing import Optional

from csvtable.config.settings import Settings, get_settings
from csvtable.stores.base import ByteStore
from csvtable.stores.http_store import HttpStore
from csvtable.stores.local_store import LocalFileStore
from csvtable.stores.memory_store import MemoryStore


def build_store(settings: Optional[Settings] = None) -> ByteStore:
    """
    Create a ByteStore from settings.

    Args:
        settings: Settings to use. Defaults to the global singleton
                  (loaded from the environment on first use).

    Returns:
        LocalFileStore, MemoryStore or HttpStore, per settings.store.backend.

    Example:
        >>> store = build_store(Settings(store=StoreSettings(backend="memory")))
        >>> type(store).__name__
        'MemoryStore'
    """
    settings = settings or get_settings()
    backend = settings.store.backend

    if backend == "local":
        return LocalFileStore(root_dir=settings.store.root_dir, encoding=settings.store.encoding)
    if backend == "memory":
        return MemoryStore()
    if backend == "http":
        return HttpStore(settings.http)

    raise ValueError(f"Unknown store backend: {backend!r}")
