"""Custom exceptions for drawstyle."""

from typing import Optional


class DrawStyleError(Exception):
    """Base exception for drawstyle errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class InvalidArgumentError(DrawStyleError, ValueError):
    """Exception raised when a value is outside the range an attribute accepts."""

    pass


class TypeMismatchError(DrawStyleError, TypeError):
    """Exception raised when a value has the wrong type for a text attribute."""

    pass


class UnknownAttributeError(DrawStyleError, KeyError):
    """Exception raised for a text attribute identifier that is not recognised."""

    pass


class StyleLockedError(DrawStyleError):
    """Exception raised when a locked style record is modified."""

    pass
