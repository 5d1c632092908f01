"""
Dataset: validated column names and string rows, with CSV load/save.

**Conceptual**: A Dataset owns a fixed list of column names and an ordered
list of rows. Every row has exactly one cell per column at all times; this is
checked on construction and on every bulk replacement of the rows. There is
no API to edit a single cell or row, only to replace all rows at once.

**Ownership**: Inputs are copied on the way in and accessors return copies,
so nothing a caller holds can alias the dataset's internal lists.

**Construction**:
  - Dataset(columns, rows) / Dataset.from_rows(...): direct data, no codec.
  - Dataset.from_text(text): parse dialect text with the codec.
  - Dataset.load(name, store): read text from a byte store, then from_text.

**Output**:
  - to_text(): serialize with the codec.
  - save_to(name, store): to_text() then write through a byte store.

Blocking I/O is the primary form. save_to also accepts a callback, and
load_async / save_to_async return coroutines; all of them run the same code
path and raise (or deliver) the same errors.
"""

import asyncio
import logging
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from csvtable.data import codec
from csvtable.data.errors import AccessError, MalformedCsvError, ShapeError
from csvtable.stores.base import ByteStore

logger = logging.getLogger(__name__)

SaveCallback = Callable[[Optional[Exception]], None]


def _default_store() -> ByteStore:
    # Imported lazily so that pure codec/dataset use never touches settings
    from csvtable.stores.factory import build_store
    return build_store()


@contextmanager
def _store_for(store: Optional[ByteStore]) -> Iterator[ByteStore]:
    """
    Yield `store`, or a default store that is closed on exit.

    A caller-supplied store is left open; its lifetime belongs to the caller.
    """
    if store is not None:
        yield store
        return
    with _default_store() as owned:
        yield owned


def _copy_columns(columns: Sequence[str]) -> List[str]:
    """Copy column names, rejecting anything that is not a sequence of str."""
    if isinstance(columns, str):
        raise TypeError("columns must be a sequence of str, not a single str")
    copied = list(columns)
    for index, name in enumerate(copied):
        if not isinstance(name, str):
            raise TypeError(
                f"Column {index + 1} name must be str, got {type(name).__name__}"
            )
    return copied


def _validated_rows(
    rows: Sequence[Sequence[str]],
    column_count: int,
    context: str | None = None,
) -> List[List[str]]:
    """
    Copy rows and check each one against the column count.

    Raises:
        ShapeError: First row (1-based) whose length differs from column_count.
        TypeError: If a row is a bare str or holds a non-str cell.
        ValueError: If there are rows but no columns (such a table has no text form).
    """
    validated = []
    for index, row in enumerate(rows):
        row_number = index + 1
        if isinstance(row, str):
            raise TypeError(f"Row {row_number} must be a sequence of str, not a single str")
        copied = list(row)
        if column_count == 0:
            raise ValueError(f"Row {row_number}: a dataset with no columns cannot hold rows")
        if len(copied) != column_count:
            raise ShapeError(row_number, column_count, len(copied), context)
        for col_index, cell in enumerate(copied):
            if not isinstance(cell, str):
                raise TypeError(
                    f"Row {row_number}, column {col_index + 1}: cell must be str, "
                    f"got {type(cell).__name__}"
                )
        validated.append(copied)
    return validated


class Dataset:
    """
    Fixed columns plus string rows, convertible to and from dialect text.

    Args:
        columns: Column names, in field order. Fixed for the dataset's lifetime.
        rows: Initial rows (default: none). Each must have len(columns) cells.

    Raises:
        ShapeError: If any row's length differs from the column count.
        TypeError: If a column name or cell is not a str.
        ValueError: If rows are given but there are no columns.

    Example:
        >>> ds = Dataset(["name", "age"], [["Ada", "36"]])
        >>> ds.rows
        [['Ada', '36']]
        >>> ds.to_text()
        'name,age\\nAda,36'
    """

    def __init__(self, columns: Sequence[str], rows: Optional[Sequence[Sequence[str]]] = None):
        self._columns = _copy_columns(columns)
        self._rows = _validated_rows(rows if rows is not None else [], len(self._columns))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, columns: Sequence[str], rows: Optional[Sequence[Sequence[str]]] = None) -> "Dataset":
        """Create a dataset from column names and rows (same as the constructor)."""
        return cls(columns, rows)

    @classmethod
    def from_text(cls, text: str) -> "Dataset":
        """
        Create a dataset by parsing dialect text.

        Raises:
            ShapeError: If a data row has the wrong number of fields.
            MalformedCsvError: If quoting cannot be decoded.
        """
        columns, rows = codec.parse(text)
        return cls(columns, rows)

    @classmethod
    def load(cls, source: str, store: Optional[ByteStore] = None) -> "Dataset":
        """
        Read `source` from a byte store and parse it.

        Args:
            source: Resource name (a file path for the local store).
            store: Byte store to read from. Defaults to the store selected
                   by settings.

        Returns:
            The parsed Dataset.

        Raises:
            AccessError: If the text cannot be read.
            ShapeError: If a data row has the wrong number of fields. The
                        message names the source.
            MalformedCsvError: If quoting cannot be decoded.
        """
        with _store_for(store) as active:
            text = _call_store(active.read_all, "read", source)

        try:
            dataset = cls.from_text(text)
        except ShapeError as e:
            raise ShapeError(e.row_number, e.expected, e.actual, context=source) from e
        except MalformedCsvError as e:
            raise MalformedCsvError(e.message, e.line, context=source) from e

        logger.debug(f"Loaded {source}: {len(dataset)} rows x {len(dataset._columns)} columns")
        return dataset

    @classmethod
    async def load_async(cls, source: str, store: Optional[ByteStore] = None) -> "Dataset":
        """Awaitable form of load(); the blocking read runs in a worker thread."""
        return await asyncio.to_thread(cls.load, source, store)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def columns(self) -> List[str]:
        """Column names (a copy)."""
        return list(self._columns)

    @property
    def rows(self) -> List[List[str]]:
        """All rows (a deep copy)."""
        return [list(row) for row in self._rows]

    @rows.setter
    def rows(self, new_rows: Sequence[Sequence[str]]) -> None:
        self.set_rows(new_rows)

    def get_columns(self) -> List[str]:
        return self.columns

    def get_rows(self) -> List[List[str]]:
        return self.rows

    def set_rows(self, new_rows: Sequence[Sequence[str]]) -> None:
        """
        Replace every row at once.

        All rows are validated before anything changes; on error the
        existing rows are kept as they were.

        Raises:
            ShapeError: If any new row's length differs from the column count.
            TypeError: If a row is a bare str or holds a non-str cell.
            ValueError: If the dataset has no columns and new_rows is not empty.
        """
        self._rows = _validated_rows(new_rows, len(self._columns))

    @property
    def shape(self) -> Tuple[int, int]:
        """(row count, column count)."""
        return len(self._rows), len(self._columns)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        """Serialize to dialect text (header first, rows joined by newlines)."""
        return codec.serialize(self._columns, self._rows)

    def save_to(
        self,
        destination: str,
        store: Optional[ByteStore] = None,
        callback: Optional[SaveCallback] = None,
    ) -> None:
        """
        Write to_text() to `destination` through a byte store.

        Args:
            destination: Resource name (a file path for the local store).
            store: Byte store to write to. Defaults to the store selected
                   by settings.
            callback: If given, called with None on success or with the
                      AccessError on failure, and nothing is raised.

        Raises:
            AccessError: If the text cannot be written (only without callback).
        """
        if callback is None:
            self._save(destination, store)
            return

        try:
            self._save(destination, store)
        except AccessError as e:
            callback(e)
            return
        callback(None)

    async def save_to_async(self, destination: str, store: Optional[ByteStore] = None) -> None:
        """Awaitable form of save_to(); the blocking write runs in a worker thread."""
        await asyncio.to_thread(self._save, destination, store)

    def _save(self, destination: str, store: Optional[ByteStore]) -> None:
        text = self.to_text()
        with _store_for(store) as active:
            _call_store(active.write_all, "write", destination, text)
        logger.debug(f"Saved {len(self._rows)} rows to {destination}")

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dataset):
            return NotImplemented
        return self._columns == other._columns and self._rows == other._rows

    __hash__ = None

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Dataset(columns={self._columns!r}, rows={len(self._rows)})"


def _call_store(method, operation: str, name: str, *args):
    """
    Invoke a byte store method, classifying every failure as AccessError.

    AccessError from the store passes through. Anything else the store
    raises is unexpected and gets wrapped.
    """
    try:
        return method(name, *args)
    except AccessError:
        raise
    except Exception as e:
        logger.warning(f"Byte store raised {type(e).__name__} during {operation} of '{name}'")
        raise AccessError(operation, name, e) from e
