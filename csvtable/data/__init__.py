"""
Tabular data model and the CSV codec.

Holds the Dataset (validated columns and string rows), the codec that converts
it to and from dialect text, the package's exception types, and the bridge to
pandas DataFrames.
"""
