"""Row normalization and sidecar serialization."""

from biiif_csv.normalizers.record import COMPOUND_GROUPS, normalize_record
from biiif_csv.normalizers.sidecar import dump_document, write_sidecar

__all__ = [
    "COMPOUND_GROUPS",
    "normalize_record",
    "dump_document",
    "write_sidecar",
]
