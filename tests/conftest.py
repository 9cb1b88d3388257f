"""
Shared fixtures for the biiif-csv tests.
"""

import csv
from pathlib import Path

import pytest
from PIL import Image

from biiif_csv.assets.extractor import MetadataExtractor


@pytest.fixture
def make_jpeg():
    """Write a real JPEG of the given size and return its path."""

    def _make(path: Path, size=(64, 48)) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size, color=(120, 80, 40)).save(path, "JPEG")
        return path

    return _make


@pytest.fixture
def write_csv():
    """Write rows to a CSV file with a header taken from the union of row keys."""

    def _write(path: Path, rows: list[dict]) -> Path:
        fieldnames: list[str] = []
        for row in rows:
            for key in row:
                if key not in fieldnames:
                    fieldnames.append(key)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def duration_probe_calls():
    return []


@pytest.fixture
def fake_extractor(duration_probe_calls):
    """Extractor with real image probing and a fixed 12.5 second duration."""

    def duration_probe(path: str) -> float:
        duration_probe_calls.append(path)
        return 12.5

    return MetadataExtractor(duration_probe=duration_probe)
