"""Row → metadata document normalization.

A CSV row is flat: compound values are spread over dotted column names such
as ``provider.id`` or ``metadata.Creator``. This module folds a row into the
nested document written to a node's ``info.yml``.

Only values that are present on the row are emitted, so sidecars stay small.
A compound group (``provider``, ``homepage``, ...) is emitted only when all of
its sub-keys are filled in; a partial group is dropped.

Example:
    row = {
        "hierarchy": "collection/manifest1",
        "label": "Letters",
        "behavior": "paged, auto-advance",
        "metadata.Creator": "Jane Doe",
        "provider.id": "https://example.org",
        "provider.type": "Agent",
    }
    normalize_record(row)
    # {"label": "Letters",
    #  "behavior": ["paged", "auto-advance"],
    #  "metadata": {"Creator": "Jane Doe"}}
"""

import re
from typing import Any

from biiif_csv.core.models import DiagnosticReport, MetadataDocument, Row

METADATA_PREFIX = "metadata."

# Group name -> sub-keys that must all be present for the group to be written
COMPOUND_GROUPS: dict[str, tuple[str, ...]] = {
    "requiredStatement": ("label", "value"),
    "provider": ("id", "type", "label"),
    "homepage": ("id", "type", "label"),
    "seeAlso": ("id", "type", "label"),
    "rendering": ("id", "type", "label"),
    "start": ("id", "type", "label"),
    "supplementary": ("id", "type", "label"),
    "services": ("id", "type", "profile"),
}

# Output layout. Each entry is (key, kind); the document follows this order.
DOCUMENT_LAYOUT: list[tuple[str, str]] = [
    ("label", "scalar"),
    ("description", "scalar"),
    ("attribution", "scalar"),
    ("behavior", "behavior"),
    ("width", "int"),
    ("height", "int"),
    ("duration", "float"),
    ("viewingHint", "scalar"),
    ("viewingDirection", "scalar"),
    ("navDate", "scalar"),
    ("metadata", "metadata"),
    ("requiredStatement", "group"),
    ("summary", "scalar"),
    ("provider", "group"),
    ("homepage", "group"),
    ("seeAlso", "group"),
    ("rendering", "group"),
    ("start", "group"),
    ("supplementary", "group"),
    ("services", "group"),
]

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def extract_field_value(row: Row, field_name: str) -> Any | None:
    """Extract a field value from a row.

    Only None values and blank strings are treated as missing.

    Args:
        row: The CSV row.
        field_name: The column name to extract.

    Returns:
        The field value if present and non-empty, None otherwise.
    """
    value = row.get(field_name)

    if value is None:
        return None

    if isinstance(value, str) and not value.strip():
        return None

    return value


def parse_int(value: Any) -> int | None:
    """Read an integer the way a curator would expect from a cell.

    Leading digits are used and anything after them ignored, so ``"1200px"``
    gives ``1200`` and ``"12.7"`` gives ``12``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float("inf") else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def parse_float(value: Any) -> float | None:
    """Read a float from a cell, using its leading decimal number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_FLOAT.match(str(value))
    return float(match.group(1)) if match else None


def map_behavior(value: Any) -> str | list[str]:
    """Split a comma separated behavior cell into a list of behaviors."""
    text = str(value)
    if "," in text:
        return [token.strip() for token in text.split(",")]
    return text


def extract_metadata_bag(row: Row) -> dict[str, Any]:
    """Collect ``metadata.<Name>`` columns into a label -> value mapping."""
    metadata: dict[str, Any] = {}
    for key, value in row.items():
        if not key.startswith(METADATA_PREFIX):
            continue
        if extract_field_value(row, key) is None:
            continue
        metadata[key[len(METADATA_PREFIX):]] = value
    return metadata


def extract_compound_group(row: Row, group: str) -> dict[str, Any] | None:
    """Build a compound group from its dotted columns.

    Args:
        row: The CSV row.
        group: Group name, one of COMPOUND_GROUPS.

    Returns:
        The group mapping, or None if any required sub-key is missing.
    """
    values: dict[str, Any] = {}
    for sub_key in COMPOUND_GROUPS[group]:
        value = extract_field_value(row, f"{group}.{sub_key}")
        if value is None:
            return None
        values[sub_key] = value
    return values


def normalize_record(
    row: Row, report: DiagnosticReport | None = None, subject: str | None = None
) -> MetadataDocument:
    """Fold a row into a metadata document.

    Args:
        row: A CSV row, possibly carrying extracted technical fields.
        report: Report that receives warnings for unreadable numeric cells.
        subject: What to name in those warnings (defaults to the hierarchy).

    Returns:
        The ordered metadata document.
    """
    subject = subject or str(row.get("hierarchy", ""))
    document: MetadataDocument = {}

    for key, kind in DOCUMENT_LAYOUT:
        if kind == "metadata":
            metadata = extract_metadata_bag(row)
            if metadata:
                document[key] = metadata
            continue

        if kind == "group":
            group = extract_compound_group(row, key)
            if group is not None:
                document[key] = group
            continue

        value = extract_field_value(row, key)
        if value is None:
            continue

        if kind == "behavior":
            document[key] = map_behavior(value)
        elif kind in ("int", "float"):
            number = parse_int(value) if kind == "int" else parse_float(value)
            if number is None:
                if report is not None:
                    report.add_warning(subject, f"Ignoring non-numeric {key} value", value)
                continue
            document[key] = number
        else:
            document[key] = value

    return document
