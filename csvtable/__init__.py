"""
csvtable - tabular datasets with a round-trip CSV codec.

Usage:
    from csvtable import Dataset

    dataset = Dataset.from_text("name,age\nAda,36")
    dataset.save_to("people.csv")
"""

from csvtable.data.codec import parse, serialize
from csvtable.data.dataset import Dataset
from csvtable.data.errors import (
    AccessError,
    MalformedCsvError,
    ShapeError,
    TableError,
)

__version__ = "1.0.0"

__all__ = [
    "Dataset",
    "parse",
    "serialize",
    "TableError",
    "ShapeError",
    "AccessError",
    "MalformedCsvError",
]
