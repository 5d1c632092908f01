"""
Conversion between Dataset and pandas DataFrames.

**Conceptual**: Datasets hold opaque strings only. Once data has gone through
the codec, analysis usually happens in pandas, so these two functions move a
table across that boundary without ever going through pd.read_csv or
df.to_csv (which implement a different dialect).

**Rules**:
  - to_dataframe: one column per dataset column (duplicates kept, order kept),
    every cell an `str`, dtype object.
  - from_dataframe: labels and cells are converted with str(); missing
    values (NaN, None, NaT) become "".
"""

import pandas as pd

from csvtable.data.dataset import Dataset


def to_dataframe(dataset: Dataset) -> pd.DataFrame:
    """
    Build a DataFrame with the dataset's columns and string cells.

    Args:
        dataset: Source dataset.

    Returns:
        DataFrame of dtype object. An empty dataset gives an empty frame
        that still carries the column labels.

    Example:
        >>> ds = Dataset(["name", "age"], [["Ada", "36"]])
        >>> to_dataframe(ds)["age"].tolist()
        ['36']
    """
    return pd.DataFrame(dataset.rows, columns=dataset.columns, dtype=object)


def from_dataframe(df: pd.DataFrame) -> Dataset:
    """
    Build a Dataset from any DataFrame.

    Args:
        df: Source frame. The index is ignored.

    Returns:
        Dataset whose columns are str(label) and whose cells are str(value),
        with missing values as "".
    """
    columns = [str(label) for label in df.columns]

    # Cast to object first so NaN stays detectable after mixed-type columns
    cells = df.astype(object)
    cells = cells.where(pd.notna(cells), "")

    rows = [[str(value) for value in record] for record in cells.itertuples(index=False, name=None)]
    return Dataset(columns, rows)
