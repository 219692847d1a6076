class BuildMatrixError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to loading the configuration and the discovery root ---
class ConfigurationError(BuildMatrixError):
    """Base class for fatal precondition errors: settings, config files, discovery root."""

    pass


class RootNotFoundError(ConfigurationError):
    """Raised when the discovery root does not exist or is not a directory."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when an explicitly given configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the merged settings fail validation (e.g., Pydantic)."""

    pass


# --- 2. Errors raised after discovery finished ---
class OutputError(BuildMatrixError):
    """Raised when the CI output channel cannot be written."""

    pass


class StrictModeError(BuildMatrixError):
    """Raised when strict mode is on and build metadata is missing."""

    def __init__(self, message: str, missing_tags=None, missing_context=None):
        super().__init__(message)
        self.missing_tags = list(missing_tags or [])
        self.missing_context = list(missing_context or [])


# --- 3. Errors related to IO operations ---
class BMIOError(BuildMatrixError):
    """Base class for IO-related errors."""

    pass


class BMPathNotFoundError(BMIOError):
    """Raised when a file or directory is not found."""

    pass


class BMNotAFileError(BMIOError):
    """Raised when a file is expected, but a directory is found."""

    pass


class BMNotADirectoryError(BMIOError):
    """Raised when a directory is expected, but a file is found."""

    pass


class BMPermissionError(BMIOError):
    """Raised when the process lacks permission for a path."""

    pass


class BMDecodeError(BMIOError):
    """Raised when a file's bytes cannot be decoded as text."""

    pass
