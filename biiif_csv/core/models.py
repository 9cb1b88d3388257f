"""Data models for biiif-csv.

Key Classes:
    NodeRole: Role of a node in the biiif tree (collection, manifest, canvas)
    TreeNode: A classified hierarchy path, ready to become a directory
    Diagnostic: Individual non-fatal issue found while building
    DiagnosticReport: Ordered collection of diagnostics for one run
    NodeResult: What was written for one row
    BuildResult: Everything a build run produced
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from aws_lambda_powertools import Logger

logger = Logger(service="biiif-csv", child=True)

# A row from the CSV: column name -> value, in header order.
Row = dict[str, Any]

# The ordered document written to a node's sidecar file.
MetadataDocument = dict[str, Any]


class NodeRole(Enum):
    """Role of a tree node, inferred from its last hierarchy segment."""

    COLLECTION = "collection"
    MANIFEST = "manifest"
    CANVAS = "canvas"


@dataclass(frozen=True)
class TreeNode:
    """A hierarchy path split into segments, with the terminal role resolved.

    Attributes:
        hierarchy: The hierarchy string as it appeared in the row
        segments: Path segments, with a canvas segment already carrying the marker
        original_segment: The terminal segment as written in the hierarchy
        role: Role of the terminal segment
        parent_segment: The segment directly above the terminal one, if any
        parent_role: Role the parent segment would be classified as, if any
    """

    hierarchy: str
    segments: tuple[str, ...]
    original_segment: str
    role: NodeRole
    parent_segment: str | None = None
    parent_role: NodeRole | None = None

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def is_canvas(self) -> bool:
        return self.role is NodeRole.CANVAS

    @property
    def is_manifest(self) -> bool:
        return self.role is NodeRole.MANIFEST

    @property
    def relative_path(self) -> str:
        return "/".join(self.segments)

    def path_under(self, root: str | Path) -> Path:
        return Path(root).joinpath(*self.segments)


@dataclass
class Diagnostic:
    """A single non-fatal issue raised while building the tree.

    Attributes:
        subject: What the issue is about (a hierarchy path or a file path)
        message: Human-readable description of the issue
        source_value: The value that caused the issue (for debugging)
    """

    subject: str
    message: str
    source_value: Any | None = None


@dataclass
class DiagnosticReport:
    """Warnings collected over a run, in the order they were raised.

    Fatal problems are raised as BiiifCsvError instead of being recorded here.
    """

    warnings: list[Diagnostic] = field(default_factory=list)

    def add_warning(self, subject: str, message: str, source_value: Any | None = None) -> None:
        """Record a warning and log it.

        Args:
            subject: Hierarchy path or file the warning is about
            message: Description of the issue
            source_value: The problematic value (optional)
        """
        self.warnings.append(
            Diagnostic(subject=subject, message=message, source_value=source_value)
        )
        logger.warning(message, extra={"subject": subject, "source_value": source_value})


@dataclass
class NodeResult:
    """Result of processing one row.

    Attributes:
        node: The classified tree node
        directory: The directory created for the node
        sidecar_path: Where the metadata document was written
        document: The metadata document that was written
        copied_files: Asset files copied into the node directory
    """

    node: TreeNode
    directory: Path
    sidecar_path: Path
    document: MetadataDocument
    copied_files: list[Path] = field(default_factory=list)


@dataclass
class BuildResult:
    """Result of a full build run."""

    nodes: list[NodeResult] = field(default_factory=list)
    diagnostics: DiagnosticReport = field(default_factory=DiagnosticReport)

    @property
    def warnings(self) -> list[Diagnostic]:
        return self.diagnostics.warnings
