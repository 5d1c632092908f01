"""
csvtable – Main entry point.

Minimal bootstrap script to verify the package imports and the codec works.
"""

from csvtable import Dataset


def main() -> None:
    """Print a bootstrap confirmation message."""
    dataset = Dataset.from_text("status\nok")
    print(f"csvtable bootstrap complete ({dataset.rows[0][0]})")


if __name__ == "__main__":
    main()
