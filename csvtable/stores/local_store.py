"""
Filesystem byte store.

Reads and writes whole files. Relative names resolve against `root_dir`.
Newlines are never translated in either direction, so the text on disk is
byte-for-byte what the codec produced.
"""

import logging
from pathlib import Path

from csvtable.data.errors import AccessError

logger = logging.getLogger(__name__)


class LocalFileStore:
    """
    ByteStore backed by the local filesystem.

    Args:
        root_dir: Base directory for relative names. None means the current
                  working directory. Absolute names ignore it.
        encoding: Text encoding for reads and writes (default utf-8).

    Example:
        >>> store = LocalFileStore(root_dir="data")
        >>> store.write_all("out/people.csv", "name\\nAda")  # creates data/out/
    """

    def __init__(self, root_dir: Path | str | None = None, encoding: str = "utf-8"):
        self.root_dir = Path(root_dir) if root_dir is not None else None
        self.encoding = encoding

    def resolve(self, name: str) -> Path:
        """Map a resource name to a filesystem path."""
        path = Path(name)
        if self.root_dir is not None and not path.is_absolute():
            path = self.root_dir / path
        return path

    def read_all(self, name: str) -> str:
        path = self.resolve(name)
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            raise AccessError("read", name, e) from e

        logger.debug(f"Read {len(text)} chars from {path}")
        return text

    def write_all(self, name: str, text: str) -> None:
        path = self.resolve(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(text)
        except (OSError, UnicodeEncodeError) as e:
            logger.warning(f"Failed to write {path}: {e}")
            raise AccessError("write", name, e) from e

        logger.debug(f"Wrote {len(text)} chars to {path}")

    def close(self):
        """Nothing to release; files are opened and closed per call."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
