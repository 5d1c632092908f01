"""
Base abstraction for byte stores.

**Conceptual**: A byte store is whatever holds the CSV text between runs: a
local directory, an in-memory dict, or an HTTP object store. The Dataset
only needs two operations from it, so this module defines them as a
Protocol. Any class with matching `read_all` and `write_all` methods is a
ByteStore, without inheriting from anything.

**Contract**: All implementations MUST:
  1. Treat each call as a single whole-resource request (no partial reads,
     no appends).
  2. Raise AccessError (never a backend-specific exception) on failure, with
     operation "read" or "write", the resource name, and the original error
     as cause.

The built-in stores are also context managers (`close`, `__enter__`,
`__exit__`) so that a store built from settings can be released when the
work is done. A caller-supplied store only needs the two methods below.
"""

from typing import Protocol


class ByteStore(Protocol):
    """
    Protocol for reading and writing named text resources.

    **Example usage**:
        >>> from csvtable.stores.memory_store import MemoryStore
        >>> store = MemoryStore()
        >>> store.write_all("people.csv", "name,age\\nAda,36")
        >>> store.read_all("people.csv")
        'name,age\\nAda,36'
    """

    def read_all(self, name: str) -> str:
        """
        Return the full text content of resource `name`.

        Raises:
            AccessError: If the resource cannot be read.
        """
        ...

    def write_all(self, name: str, text: str) -> None:
        """
        Replace the content of resource `name` with `text`.

        Raises:
            AccessError: If the resource cannot be written.
        """
        ...
