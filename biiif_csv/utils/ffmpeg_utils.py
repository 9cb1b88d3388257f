"""FFprobe utilities for audio and video files."""

import json
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from biiif_csv.core.errors import ProbeError


def find_ffprobe_path(configured_path: Optional[str] = None) -> Optional[Path]:
    """Get the path to the FFprobe binary.

    Args:
        configured_path: Explicit binary path from configuration.

    Returns:
        Path to FFprobe, or None if it cannot be found.
    """
    if configured_path:
        path = Path(configured_path)
        return path if path.exists() else None

    found = shutil.which("ffprobe")
    return Path(found) if found else None


@dataclass
class MediaInfo:
    """Information about a media file."""

    streams: List[Dict[str, Any]]
    format_name: str
    format_duration: Optional[float]

    @property
    def duration(self) -> Optional[float]:
        """Duration of the first stream in seconds."""
        if not self.streams:
            return None
        return _to_float(self.streams[0].get("duration"))


def _to_float(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class FFprobeHelper:
    """Helper class for FFprobe operations."""

    def __init__(self, ffprobe_path: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize the helper.

        Args:
            ffprobe_path: Explicit binary path; looked up on PATH when omitted.
            timeout: Seconds to wait for FFprobe, or None to wait indefinitely.
        """
        self._ffprobe_path = find_ffprobe_path(ffprobe_path)
        self._timeout = timeout

    @property
    def is_available(self) -> bool:
        return self._ffprobe_path is not None

    @property
    def ffprobe_path(self) -> Optional[Path]:
        return self._ffprobe_path

    def get_media_info(self, file_path: str) -> MediaInfo:
        """Get stream and container information about a media file.

        Args:
            file_path: Path to the media file.

        Returns:
            MediaInfo with the file's streams.

        Raises:
            ProbeError: If FFprobe is missing or cannot read the file.
        """
        if not self._ffprobe_path:
            raise ProbeError("FFprobe not available", path=str(file_path))

        cmd = [
            str(self._ffprobe_path),
            "-v", "quiet",
            "-print_format", "json",
            "-show_format",
            "-show_streams",
            str(file_path),
        ]

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ProbeError("FFprobe timed out", path=str(file_path), command=" ".join(cmd)) from e
        except OSError as e:
            raise ProbeError(
                "Could not run FFprobe", path=str(file_path), command=" ".join(cmd), stderr=str(e)
            ) from e

        if result.returncode != 0:
            raise ProbeError(
                "Failed to get media info",
                path=str(file_path),
                command=" ".join(cmd),
                stderr=result.stderr or None,
            )

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ProbeError(
                f"Failed to parse FFprobe output: {e}", path=str(file_path), command=" ".join(cmd)
            ) from e

        format_info = data.get("format", {})
        return MediaInfo(
            streams=data.get("streams", []),
            format_name=format_info.get("format_name", "unknown"),
            format_duration=_to_float(format_info.get("duration")),
        )

    def get_duration(self, file_path: str) -> float:
        """Get the duration of the first stream of a media file.

        Raises:
            ProbeError: If the file cannot be probed or has no stream duration.
        """
        info = self.get_media_info(file_path)
        duration = info.duration
        if duration is None:
            raise ProbeError("No stream duration reported", path=str(file_path))
        return duration
