"""
Exceptions raised by the codec, the Dataset, and the byte stores.

**Conceptual**: Every failure this package can report falls into one of a few
kinds, all rooted at TableError:
  - ShapeError: a row's field count disagrees with the column count.
  - AccessError: a byte store could not read or write a named resource.
  - MalformedCsvError: text whose quoting cannot be decoded at all.

Callers can catch TableError to handle everything from this package, or catch
a specific subclass for fine-grained handling.
"""


class TableError(Exception):
    """Base exception for all csvtable errors."""
    pass


class ShapeError(TableError):
    """
    Raised when a row does not have exactly one field per column.

    **Conceptual**: Raised at construction, at bulk row replacement, and after
    parsing. The operation that discovers it is aborted without touching
    existing valid state, and the row is never padded or truncated.

    Attributes:
        row_number: 1-based index of the offending row (first data row is 1).
        expected: Number of columns in the dataset.
        actual: Number of fields found in the offending row.
        context: Optional description of where the row came from
                 (e.g. a resource name). Included in the message.
    """

    def __init__(self, row_number: int, expected: int, actual: int, context: str | None = None):
        self.row_number = row_number
        self.expected = expected
        self.actual = actual
        self.context = context

        ctx = f"{context}: " if context else ""
        super().__init__(
            f"{ctx}Row {row_number} has {actual} fields, expected {expected} "
            f"(one per column)"
        )


class AccessError(TableError):
    """
    Raised when a byte store fails to read or write a resource.

    **Conceptual**: Wraps whatever the backing store raised (OSError,
    requests exceptions, KeyError for in-memory stores, ...) so that callers
    deal with a single error kind at the I/O boundary. The original exception
    is kept on `cause` and is also chained as `__cause__` by the raiser.

    Attributes:
        operation: "read" or "write".
        resource: Name of the resource that was being accessed.
        cause: The underlying exception (may be None when the store detected
               the failure itself, e.g. an HTTP status code).
    """

    def __init__(self, operation: str, resource: str, cause: BaseException | None = None):
        self.operation = operation
        self.resource = resource
        self.cause = cause

        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to {operation} '{resource}'{detail}")


class MalformedCsvError(TableError):
    """
    Raised when quoted fields cannot be decoded.

    Attributes:
        message: Description of the quoting problem.
        line: 1-based line number in the source text where decoding failed.
        context: Optional description of where the text came from
                 (e.g. a resource name). Included in the message.
    """

    def __init__(self, message: str, line: int, context: str | None = None):
        self.message = message
        self.line = line
        self.context = context

        ctx = f"{context}: " if context else ""
        super().__init__(f"{ctx}Line {line}: {message}")
