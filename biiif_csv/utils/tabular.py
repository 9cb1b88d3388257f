"""CSV reading."""

import csv
from pathlib import Path

from biiif_csv.core.errors import InputNotFoundError, TabularReadError
from biiif_csv.core.models import Row


def read_rows(csv_path: str | Path) -> list[Row]:
    """Read a CSV file with a header row into a list of rows.

    Blank lines are skipped. A UTF-8 byte order mark is tolerated.

    Args:
        csv_path: Path to the CSV file.

    Returns:
        One mapping per record, keyed by header name in header order.

    Raises:
        InputNotFoundError: If the file does not exist.
        TabularReadError: If the file cannot be read or has no header.
    """
    path = Path(csv_path)
    if not path.is_file():
        raise InputNotFoundError("CSV file", str(path))

    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            if not reader.fieldnames:
                raise TabularReadError("CSV file has no header row", str(path))
            rows = [_clean_row(row) for row in reader if _has_content(row)]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise TabularReadError(f"Could not read CSV file {path}", str(e)) from e

    return rows


def _has_content(row: dict) -> bool:
    return any(value not in (None, "") for key, value in row.items() if key is not None)


def _clean_row(row: dict) -> Row:
    # Cells beyond the header land under the None key; they have no column name.
    return {key.strip(): value for key, value in row.items() if key is not None}
