"""Nesting rules for biiif trees.

Rules:
- A canvas must sit directly inside a manifest.
- A manifest must not sit directly inside another manifest.

Violations never stop a build. They are recorded as warnings and the
directory is still created.
"""

from biiif_csv.core.models import DiagnosticReport, TreeNode
from biiif_csv.hierarchy.classifier import MANIFEST_TOKEN


def _looks_like_manifest(segment: str | None) -> bool:
    return segment is not None and MANIFEST_TOKEN in segment


def validate_nesting(node: TreeNode, report: DiagnosticReport | None = None) -> DiagnosticReport:
    """Check a node against its immediate parent.

    Args:
        node: Classified tree node
        report: Report to add warnings to; a new one is created if omitted

    Returns:
        The report the warnings were added to
    """
    report = report if report is not None else DiagnosticReport()

    # Top-level nodes have nothing to be nested in.
    if node.parent_segment is None:
        return report

    if node.is_canvas and not _looks_like_manifest(node.parent_segment):
        report.add_warning(
            subject=node.hierarchy,
            message=(
                f"Canvas {node.original_segment} must be inside a manifest. "
                f"Current parent: {node.parent_segment}"
            ),
            source_value=node.parent_segment,
        )

    if node.is_manifest and _looks_like_manifest(node.parent_segment):
        report.add_warning(
            subject=node.hierarchy,
            message=(
                f"Manifest {node.original_segment} cannot be inside another manifest. "
                f"Current parent: {node.parent_segment}"
            ),
            source_value=node.parent_segment,
        )

    return report
