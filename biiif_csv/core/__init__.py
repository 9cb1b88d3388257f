"""Core module for biiif-csv."""

from biiif_csv.core.config import BuilderConfig
from biiif_csv.core.errors import (
    AssetIndexError,
    BiiifCsvError,
    ConfigurationError,
    HierarchyError,
    InputNotFoundError,
    OutputWriteError,
    ProbeError,
    TabularReadError,
)
from biiif_csv.core.models import (
    BuildResult,
    Diagnostic,
    DiagnosticReport,
    NodeResult,
    NodeRole,
    TreeNode,
)
from biiif_csv.core.version import __version__

__all__ = [
    "__version__",
    "BuilderConfig",
    "BiiifCsvError",
    "AssetIndexError",
    "ConfigurationError",
    "HierarchyError",
    "InputNotFoundError",
    "OutputWriteError",
    "ProbeError",
    "TabularReadError",
    "BuildResult",
    "Diagnostic",
    "DiagnosticReport",
    "NodeResult",
    "NodeRole",
    "TreeNode",
]
