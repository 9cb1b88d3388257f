"""File system utilities."""

import fnmatch
import shutil
from pathlib import Path


def normalise_file_path(path: str | Path) -> str:
    """Return a path with forward slash separators on every platform."""
    return str(path).replace("\\", "/")


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it and its parents if necessary.

    Args:
        path: Path to the directory.

    Returns:
        Path object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def matches_any(filename: str, patterns: list[str]) -> bool:
    """Check a file name against shell-style patterns.

    Args:
        filename: Bare file name (no directory).
        patterns: Patterns such as ``*.yml`` or ``thumb.*``.

    Returns:
        True if any pattern matches.
    """
    return any(fnmatch.fnmatchcase(filename, pattern) for pattern in patterns)


def copy_file(source: str | Path, destination_dir: str | Path) -> Path:
    """Copy a file into a directory, keeping its name and overwriting.

    Args:
        source: File to copy.
        destination_dir: Directory to copy into (must exist).

    Returns:
        Path of the copy.
    """
    source_path = Path(source)
    destination = Path(destination_dir) / source_path.name
    shutil.copyfile(source_path, destination)
    return destination


def write_text_file(path: str | Path, content: str) -> Path:
    """Write text to a file as UTF-8, replacing any existing file."""
    file_path = Path(path)
    file_path.write_text(content, encoding="utf-8")
    return file_path
