"""
In-memory byte store, used by tests and by callers embedding CSV text.
"""

import logging
from typing import Dict, Mapping, Optional

from csvtable.data.errors import AccessError

logger = logging.getLogger(__name__)


class MemoryStore:
    """
    ByteStore backed by a dict of name -> text.

    Args:
        initial: Optional resources to preload (copied).
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._resources: Dict[str, str] = dict(initial or {})

    def read_all(self, name: str) -> str:
        try:
            text = self._resources[name]
        except KeyError as e:
            logger.warning(f"Resource '{name}' not found in memory store")
            raise AccessError("read", name, e) from e
        logger.debug(f"Read {len(text)} chars from memory:{name}")
        return text

    def write_all(self, name: str, text: str) -> None:
        if not isinstance(text, str):
            raise AccessError("write", name, TypeError(f"expected str, got {type(text).__name__}"))
        self._resources[name] = text
        logger.debug(f"Wrote {len(text)} chars to memory:{name}")

    def names(self) -> list:
        """Names of all stored resources, sorted."""
        return sorted(self._resources)

    def __contains__(self, name: str) -> bool:
        return name in self._resources

    def close(self):
        """Nothing to release; stored resources stay readable."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
