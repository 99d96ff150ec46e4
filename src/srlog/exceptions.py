"""Custom exception classes for the srlog library."""


class SrlogError(Exception):
    """Base exception class for all srlog errors."""

    def __init__(self, message: str):
        """Initializes the base exception.

        Args:
            message: The error message.
        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(SrlogError, ValueError):
    """Raised when a setter is given a value outside its accepted range.

    The configuration in effect before the call is left unchanged.
    """


class ConfigurationError(SrlogError):
    """Represents an error in the settings srlog was started with."""
