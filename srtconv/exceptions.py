"""Custom Exceptions for the srtconv application."""

class SrtConvError(Exception):
    """Base class for exceptions in this module."""
    pass

class ConfigurationError(SrtConvError):
    """Exception raised for errors in configuration loading."""
    pass

class InvalidDurationFormat(SrtConvError):
    """Exception raised when a duration string is not of the form M:S."""
    pass

class FileReadFailure(SrtConvError):
    """Exception raised when an input text file cannot be read."""
    pass

class FormattingError(SrtConvError):
    """Exception raised for errors during subtitle formatting or writing."""
    pass

class MediaProbeError(SrtConvError):
    """Exception raised when a media file's duration cannot be determined."""
    pass

class FileSystemError(SrtConvError):
    """Exception raised for file system related errors (permissions, not found etc)."""
    pass
