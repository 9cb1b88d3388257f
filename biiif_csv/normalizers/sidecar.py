"""YAML sidecar serialization."""

from pathlib import Path

import yaml

from biiif_csv.core.models import MetadataDocument
from biiif_csv.utils.file_utils import write_text_file

DEFAULT_SIDECAR_FILENAME = "info.yml"


def dump_document(document: MetadataDocument) -> str:
    """Serialize a metadata document to YAML, keeping its key order."""
    return yaml.safe_dump(
        document,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )


def load_document(path: str | Path) -> MetadataDocument:
    """Read a sidecar back into a document."""
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def write_sidecar(
    directory: str | Path,
    document: MetadataDocument,
    filename: str = DEFAULT_SIDECAR_FILENAME,
) -> Path:
    """Write ``document`` into ``directory``, replacing any existing sidecar."""
    return write_text_file(Path(directory) / filename, dump_document(document))
