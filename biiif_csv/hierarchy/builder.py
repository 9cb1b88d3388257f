"""Hierarchy builder: turns CSV rows into a biiif directory tree.

For each row, in order:

1. classify the hierarchy path (collection / manifest / canvas)
2. check the nesting rules (warnings only)
3. create the node directory
4. for canvases, when an input directory was given, copy every matching
   asset into the canvas and read its technical metadata into the row
5. normalize the row and write the node's ``info.yml``

Rows are processed one at a time. A fatal error, including a directory or
sidecar that cannot be written, stops the run; whatever was already written
stays on disk.
"""

from pathlib import Path

from aws_lambda_powertools import Logger

from biiif_csv.assets.asset_index import AssetIndex
from biiif_csv.assets.extractor import MetadataExtractor
from biiif_csv.assets.matcher import find_canvas_assets
from biiif_csv.core.config import BuilderConfig
from biiif_csv.core.errors import HierarchyError, InputNotFoundError, OutputWriteError
from biiif_csv.core.models import (
    BuildResult,
    DiagnosticReport,
    NodeResult,
    Row,
    TreeNode,
)
from biiif_csv.hierarchy.classifier import classify_hierarchy
from biiif_csv.hierarchy.nesting import validate_nesting
from biiif_csv.normalizers.record import extract_field_value, normalize_record
from biiif_csv.normalizers.sidecar import write_sidecar
from biiif_csv.utils.ffmpeg_utils import FFprobeHelper
from biiif_csv.utils.file_utils import copy_file, ensure_directory
from biiif_csv.utils.tabular import read_rows

logger = Logger(service="biiif-csv", child=True)


class HierarchyBuilder:
    """Builds the output tree for a sequence of rows.

    Args:
        output_dir: Root of the tree to create
        asset_index: Index of the input directory, or None to skip asset matching
        config: Builder settings
        extractor: Technical metadata extractor (built from config when omitted)
    """

    def __init__(
        self,
        output_dir: str | Path,
        asset_index: AssetIndex | None = None,
        config: BuilderConfig | None = None,
        extractor: MetadataExtractor | None = None,
    ):
        self.output_dir = Path(output_dir)
        self.asset_index = asset_index
        self.config = config or BuilderConfig()
        self.extractor = extractor or MetadataExtractor(
            duration_probe=FFprobeHelper(
                self.config.ffprobe_path, self.config.probe_timeout_seconds
            ).get_duration
        )

    def build(self, rows: list[Row]) -> BuildResult:
        result = BuildResult()
        for row in rows:
            node_result = self.process_row(row, result.diagnostics)
            if node_result is not None:
                result.nodes.append(node_result)

        logger.info(
            f"Built {len(result.nodes)} nodes",
            extra={
                "output_dir": self.output_dir.as_posix(),
                "warning_count": len(result.warnings),
            },
        )
        return result

    def process_row(self, row: Row, report: DiagnosticReport) -> NodeResult | None:
        """Create the directory and sidecar for one row.

        Returns:
            NodeResult for the row, or None if the row has no usable hierarchy
        """
        hierarchy = extract_field_value(row, "hierarchy")
        if hierarchy is None:
            report.add_warning("<row>", "Skipping row without a hierarchy value", row.get("label"))
            return None

        try:
            node = classify_hierarchy(str(hierarchy), self.config.canvas_marker)
        except HierarchyError as e:
            report.add_warning(str(hierarchy), f"Skipping row: {e}", hierarchy)
            return None

        validate_nesting(node, report)

        node_path = node.path_under(self.output_dir)
        try:
            directory = ensure_directory(node_path)
        except OSError as e:
            raise OutputWriteError(
                f"Could not create directory for {node.hierarchy}", node_path.as_posix(), str(e)
            ) from e

        copied_files: list[Path] = []
        if node.is_canvas and self.asset_index is not None:
            copied_files = self._attach_assets(node, directory, row, report)

        document = normalize_record(row, report, subject=node.hierarchy)
        try:
            sidecar_path = write_sidecar(directory, document, self.config.sidecar_filename)
        except OSError as e:
            raise OutputWriteError(
                f"Could not write sidecar for {node.hierarchy}", directory.as_posix(), str(e)
            ) from e

        logger.debug(
            f"Wrote {sidecar_path.as_posix()}",
            extra={"hierarchy": node.hierarchy, "role": node.role.value},
        )
        return NodeResult(
            node=node,
            directory=directory,
            sidecar_path=sidecar_path,
            document=document,
            copied_files=copied_files,
        )

    def _attach_assets(
        self, node: TreeNode, directory: Path, row: Row, report: DiagnosticReport
    ) -> list[Path]:
        match = find_canvas_assets(
            node,
            self.asset_index,
            marker=self.config.canvas_marker,
            audio_parent_segment=self.config.audio_parent_segment,
        )

        if not match.files:
            report.add_warning(
                node.hierarchy,
                f"No matching files found for canvas {node.name}",
                match.canvas_index,
            )
            return []

        copied: list[Path] = []
        for file_path in match.files:
            try:
                destination = copy_file(file_path, directory)
            except OSError as e:
                report.add_warning(file_path, f"Could not copy {file_path} to {directory}", str(e))
                continue

            self.extractor.add_file_metadata(destination, row, report)
            copied.append(destination)
            logger.info(
                f"Copied {destination.name} to {directory.as_posix()}",
                extra={"canvas_index": match.canvas_index, "kind": match.kind.value},
            )

        return copied


def csv_to_hierarchy(
    csv_path: str | Path,
    output_dir: str | Path,
    input_dir: str | Path | None = None,
    config: BuilderConfig | None = None,
    extractor: MetadataExtractor | None = None,
) -> BuildResult:
    """Convert a CSV file into a biiif directory tree.

    Args:
        csv_path: CSV file with one row per tree node
        output_dir: Where to create the tree
        input_dir: Optional directory holding the assets to attach to canvases
        config: Builder settings
        extractor: Technical metadata extractor override

    Returns:
        BuildResult with the written nodes and every warning raised

    Raises:
        InputNotFoundError: If the CSV file or input directory does not exist
        TabularReadError: If the CSV file cannot be read
        AssetIndexError: If the input directory cannot be scanned
        OutputWriteError: If a node directory or sidecar cannot be written
    """
    config = config or BuilderConfig()

    if input_dir is not None and not Path(input_dir).is_dir():
        raise InputNotFoundError("Input directory", str(input_dir))

    rows = read_rows(csv_path)
    logger.info(f"Read {len(rows)} rows", extra={"csv_path": str(csv_path)})

    asset_index = None
    if input_dir is not None:
        asset_index = AssetIndex.scan(input_dir, config.ignore_patterns)

    builder = HierarchyBuilder(output_dir, asset_index, config, extractor)
    return builder.build(rows)
