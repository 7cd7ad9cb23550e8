"""Exceptions raised by dotver."""

from typing import Self


class VersionError(Exception):
    """Base exception for all dotver errors."""


class InvalidVersionError(VersionError, ValueError):
    """Raised when text or a part value does not form a valid version.

    Attributes:
        text: The offending input, as given.
    """

    def __init__(self: Self, text: str, reason: str | None = None) -> None:
        """Initialize the error.

        Args:
            text: The offending input.
            reason: Optional detail appended to the message.
        """
        self.text = text
        self.reason = reason
        message = f"Invalid version string: '{text}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EmptyVersionError(VersionError, ValueError):
    """Raised when a version would be built without any parts."""

    def __init__(self: Self) -> None:
        """Initialize the error."""
        super().__init__("A version needs at least one part")


class ConfigError(VersionError):
    """Raised when the dotver configuration cannot be loaded."""
