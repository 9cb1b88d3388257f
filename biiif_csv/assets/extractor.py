"""Technical metadata extraction from matched asset files.

Images give ``width`` and ``height``; audio and video give ``duration``.
Values already on the row are never replaced: whatever the curator typed in
the CSV wins over what the file reports.
"""

from collections.abc import Callable
from pathlib import Path

from aws_lambda_powertools import Logger

from biiif_csv.assets.file_extensions import get_probe_type
from biiif_csv.core.errors import ProbeError
from biiif_csv.core.models import DiagnosticReport, Row
from biiif_csv.normalizers.record import extract_field_value
from biiif_csv.utils.ffmpeg_utils import FFprobeHelper
from biiif_csv.utils.image_utils import probe_image_dimensions

logger = Logger(service="biiif-csv", child=True)

ImageProbe = Callable[[str], tuple[int, int]]
DurationProbe = Callable[[str], float]


class MetadataExtractor:
    """Fills missing technical fields on a row from an asset file.

    Args:
        image_probe: Returns (width, height) for an image, raising ProbeError on failure
        duration_probe: Returns a duration in seconds, raising ProbeError on failure
    """

    def __init__(
        self,
        image_probe: ImageProbe | None = None,
        duration_probe: DurationProbe | None = None,
    ):
        self.image_probe = image_probe or probe_image_dimensions
        self.duration_probe = duration_probe or FFprobeHelper().get_duration

    def add_file_metadata(
        self, file_path: str | Path, row: Row, report: DiagnosticReport | None = None
    ) -> Row:
        """Merge technical metadata from ``file_path`` into ``row`` in place.

        Args:
            file_path: A matched asset file
            row: The row being built; only unset fields are written
            report: Report that receives probe failure warnings

        Returns:
            The same row
        """
        report = report if report is not None else DiagnosticReport()
        path = str(file_path)
        probe_type = get_probe_type(Path(path).suffix)

        if probe_type == "Image":
            self._add_dimensions(path, row, report)
        elif probe_type == "Media":
            self._add_duration(path, row, report)

        return row

    def _add_dimensions(self, path: str, row: Row, report: DiagnosticReport) -> None:
        try:
            width, height = self.image_probe(path)
        except ProbeError as e:
            report.add_warning(path, f"Could not extract dimensions from image: {path}", str(e))
            return

        if extract_field_value(row, "width") is None:
            row["width"] = width
        if extract_field_value(row, "height") is None:
            row["height"] = height
        logger.debug("Image dimensions read", extra={"file": path, "width": width, "height": height})

    def _add_duration(self, path: str, row: Row, report: DiagnosticReport) -> None:
        try:
            duration = self.duration_probe(path)
        except ProbeError as e:
            report.add_warning(path, f"Could not extract duration from media file: {path}", str(e))
            return

        if extract_field_value(row, "duration") is None:
            row["duration"] = duration
        logger.debug("Media duration read", extra={"file": path, "duration": duration})
