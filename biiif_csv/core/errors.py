"""Custom exceptions for biiif-csv."""


class BiiifCsvError(Exception):
    """Base exception for biiif-csv errors."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InputNotFoundError(BiiifCsvError):
    """Exception raised when a required input file or directory is missing."""

    def __init__(self, kind: str = "Input", path: str | None = None):
        self.path = path
        message = f"{kind} does not exist"
        super().__init__(message, details=path)


class TabularReadError(BiiifCsvError):
    """Exception raised when the CSV input cannot be read or parsed."""

    def __init__(self, message: str = "Could not read CSV file", details: str | None = None):
        super().__init__(message, details)


class AssetIndexError(BiiifCsvError):
    """Exception raised when the assets directory cannot be scanned."""

    def __init__(
        self,
        message: str = "Could not scan input directory",
        root: str | None = None,
        details: str | None = None,
    ):
        self.root = root
        super().__init__(message, details or root)


class OutputWriteError(BiiifCsvError):
    """Exception raised when a node directory or sidecar cannot be written."""

    def __init__(
        self,
        message: str = "Could not write output",
        path: str | None = None,
        details: str | None = None,
    ):
        self.path = path
        super().__init__(message, details or path)


class HierarchyError(BiiifCsvError):
    """Exception raised for hierarchy paths that cannot be turned into a node."""

    def __init__(self, message: str = "Invalid hierarchy", details: str | None = None):
        super().__init__(message, details)


class ConfigurationError(BiiifCsvError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str = "Configuration error", details: str | None = None):
        super().__init__(message, details)


class ProbeError(BiiifCsvError):
    """Exception raised when an image or media file cannot be probed."""

    def __init__(
        self,
        message: str = "Probe failed",
        path: str | None = None,
        command: str | None = None,
        stderr: str | None = None,
    ):
        self.path = path
        self.command = command
        self.stderr = stderr
        super().__init__(message, details=stderr or path)
