"""Index of the source assets available for canvas matching.

The index is built once per run by walking the input directory. Files are
bucketed by the directory that contains them; sidecar and thumbnail files are
left out. After the build the index is only read.
"""

import os
from collections.abc import Iterator
from pathlib import Path

from aws_lambda_powertools import Logger

from biiif_csv.core.errors import AssetIndexError
from biiif_csv.utils.file_utils import matches_any, normalise_file_path

logger = Logger(service="biiif-csv", child=True)

DEFAULT_IGNORE_PATTERNS = ["*.yml", "thumb.*"]


class AssetIndex:
    """Mapping of containing directory -> files found under the assets root."""

    def __init__(self, root: str | Path, buckets: dict[str, list[str]] | None = None):
        self.root = normalise_file_path(root)
        self._buckets: dict[str, list[str]] = buckets if buckets is not None else {}

    def __len__(self) -> int:
        return sum(len(files) for files in self._buckets.values())

    def directories(self) -> list[str]:
        return list(self._buckets)

    def files_in(self, directory: str | Path) -> list[str]:
        return list(self._buckets.get(normalise_file_path(directory), []))

    def all_files(self) -> list[str]:
        """Flatten every bucket into one candidate list, bucket by bucket."""
        return [path for files in self._buckets.values() for path in files]

    def add(self, file_path: str | Path) -> None:
        normalized = normalise_file_path(file_path)
        directory = normalized.rsplit("/", 1)[0] if "/" in normalized else "."
        self._buckets.setdefault(directory, []).append(normalized)

    @classmethod
    def scan(
        cls, root: str | Path, ignore_patterns: list[str] | None = None
    ) -> "AssetIndex":
        """Walk ``root`` recursively and index every file found.

        Args:
            root: The input directory holding source assets
            ignore_patterns: File name patterns to leave out of the index

        Returns:
            A fully built AssetIndex

        Raises:
            AssetIndexError: If the directory is missing or cannot be read
        """
        patterns = DEFAULT_IGNORE_PATTERNS if ignore_patterns is None else ignore_patterns
        root_path = Path(root)
        if not root_path.is_dir():
            raise AssetIndexError("Input directory does not exist", root=str(root_path))

        index = cls(root_path)
        try:
            for file_path in _walk_files(root_path):
                if matches_any(file_path.name, patterns):
                    continue
                index.add(file_path)
        except OSError as e:
            raise AssetIndexError(
                "Could not scan input directory", root=str(root_path), details=str(e)
            ) from e

        logger.info(
            f"Indexed {len(index)} files in {len(index.directories())} directories",
            extra={"input_dir": index.root},
        )
        return index


def _raise_walk_error(error: OSError) -> None:
    raise error


def _walk_files(root: Path) -> Iterator[Path]:
    # os.walk swallows errors unless onerror re-raises them.
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            yield Path(dirpath) / filename
