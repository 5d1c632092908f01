"""
CSV codec: pure conversion between (columns, rows) and dialect text.

**Conceptual**: This module is the only place that knows the text format.
It performs no I/O; the Dataset hands it strings and receives strings back.

**Dialect**:
  - Fields are separated by `,` and rows by `\\n`.
  - A field is quoted if, and only if, it contains a comma, contains a
    newline, or begins with a double quote. Inside a quoted field every `"`
    is written as `""`.
  - Unquoted fields are taken verbatim, including any `"` that is not in
    the first position.
  - The first row is always the column row.

**Parsing quirks kept for compatibility**:
  - In data rows, a last field that decodes to the empty string is dropped
    (so `1,2,` yields two fields, not three). The header row keeps it.
  - A newline at the very end of the text closes the last row; it does not
    open an empty one.

Example:
    >>> columns, rows = parse('name,quote\\nAda,"said ""hi"", twice"')
    >>> columns
    ['name', 'quote']
    >>> rows
    [['Ada', 'said "hi", twice']]
    >>> serialize(columns, rows)
    'name,quote\\nAda,"said ""hi"", twice"'
"""

import logging
from typing import List, Sequence, Tuple

from csvtable.data.errors import MalformedCsvError, ShapeError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
ROW_SEPARATOR = "\n"
QUOTE = '"'


def encode_field(field: str) -> str:
    """
    Encode a single field for output.

    Args:
        field: Cell value or column name.

    Returns:
        The field verbatim, or wrapped in quotes with inner quotes doubled
        when it contains a comma or newline, or starts with a quote.

    Example:
        >>> encode_field('a,b')
        '"a,b"'
        >>> encode_field('a"b')
        'a"b'
        >>> encode_field('"ab')
        '\"\"\"ab"'
    """
    needs_quotes = (
        FIELD_SEPARATOR in field
        or ROW_SEPARATOR in field
        or field.startswith(QUOTE)
    )
    if not needs_quotes:
        return field
    return QUOTE + field.replace(QUOTE, QUOTE + QUOTE) + QUOTE


def encode_row(fields: Sequence[str]) -> str:
    """Encode one row (header or data) as a single line of fields."""
    return FIELD_SEPARATOR.join(encode_field(field) for field in fields)


def serialize(columns: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """
    Serialize a header and data rows to dialect text.

    The header is always written first. With no rows, the result is exactly
    the encoded header with no trailing newline.

    Args:
        columns: Column names.
        rows: Data rows; each is expected to have one field per column
              (the Dataset enforces this before calling).

    Raises:
        ValueError: If rows are given with no columns; the header line would
            be empty and the text could not be parsed back.

    Returns:
        Text with rows joined by `\\n`.
    """
    if not columns and rows:
        raise ValueError("Cannot serialize rows without columns")

    lines = [encode_row(columns)]
    lines.extend(encode_row(row) for row in rows)
    text = ROW_SEPARATOR.join(lines)

    logger.debug(f"Serialized {len(rows)} rows x {len(columns)} columns ({len(text)} chars)")
    return text


def _line_of(text: str, pos: int) -> int:
    """1-based line number of position `pos` in `text`."""
    return text.count(ROW_SEPARATOR, 0, pos) + 1


def _read_field(text: str, pos: int) -> Tuple[str, int]:
    """
    Read one field starting at `pos`.

    Returns:
        (value, end) where `end` indexes the terminator that follows the
        field: a `,`, a `\\n`, or len(text).

    Raises:
        MalformedCsvError: If a quoted field is never closed, or if its
            closing quote is followed by anything but a separator.
    """
    length = len(text)

    if pos < length and text[pos] == QUOTE:
        parts = []
        i = pos + 1
        while True:
            close = text.find(QUOTE, i)
            if close == -1:
                raise MalformedCsvError("Quoted field is never closed", _line_of(text, pos))
            parts.append(text[i:close])

            # "" is an escaped literal quote
            if close + 1 < length and text[close + 1] == QUOTE:
                parts.append(QUOTE)
                i = close + 2
                continue

            end = close + 1
            if end < length and text[end] not in (FIELD_SEPARATOR, ROW_SEPARATOR):
                raise MalformedCsvError(
                    f"Unexpected character {text[end]!r} after closing quote",
                    _line_of(text, end),
                )
            return "".join(parts), end

    end = pos
    while end < length and text[end] not in (FIELD_SEPARATOR, ROW_SEPARATOR):
        end += 1
    return text[pos:end], end


def _read_row(text: str, pos: int, drop_trailing_empty: bool) -> Tuple[List[str], int]:
    """
    Read fields from `pos` up to the end of the row.

    Returns:
        (fields, end) where `end` indexes the `\\n` that closed the row,
        or len(text).
    """
    fields = []
    while True:
        value, end = _read_field(text, pos)
        if end < len(text) and text[end] == FIELD_SEPARATOR:
            fields.append(value)
            pos = end + 1
            continue

        # End of row: an empty last field is not a value in data rows
        if value != "" or not drop_trailing_empty:
            fields.append(value)
        return fields, end


def parse(text: str) -> Tuple[List[str], List[List[str]]]:
    """
    Parse dialect text into (columns, rows).

    **Functionally**:
      - Empty text gives no columns and no rows.
      - The first row becomes the column list verbatim.
      - Every following row must have exactly one field per column.
      - All-or-nothing: on any error nothing is returned.

    Args:
        text: Full CSV text.

    Returns:
        Tuple of (columns, rows).

    Raises:
        ShapeError: If a data row's field count differs from the column
            count. `row_number` is the 1-based data row number.
        MalformedCsvError: If quoting cannot be decoded.

    Example:
        >>> parse('a,b\\n1,2\\n3')
        Traceback (most recent call last):
            ...
        csvtable.data.errors.ShapeError: Row 2 has 1 fields, expected 2 (one per column)
    """
    if text == "":
        return [], []

    length = len(text)
    columns, pos = _read_row(text, 0, drop_trailing_empty=False)

    rows = []
    while pos < length:
        # pos sits on the newline that closed the previous row
        pos += 1
        if pos == length:
            break

        row, pos = _read_row(text, pos, drop_trailing_empty=True)
        if len(row) != len(columns):
            raise ShapeError(len(rows) + 1, len(columns), len(row))
        rows.append(row)

    logger.debug(f"Parsed {len(rows)} rows x {len(columns)} columns from {length} chars")
    return columns, rows
