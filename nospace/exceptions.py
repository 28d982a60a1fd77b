"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class TranscriptParseError(BaseAppError):
    """Exception raised when transcript text does not match the command grammar."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class FilesystemError(BaseAppError):
    """Exception raised for filesystem tree errors."""

    pass


class NavigationError(FilesystemError):
    """Exception raised when a directory change has no valid destination."""

    pass


class TranscriptSourceError(BaseAppError):
    """Exception raised when a transcript cannot be read."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
