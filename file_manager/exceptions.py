"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised when a filesystem primitive fails."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
