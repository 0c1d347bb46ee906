"""
Common exception classes for zeroarg.

This module defines the exception hierarchy raised by the classifier and the
configuration layer. Every error carries a human-readable message and a
``details`` dictionary so callers can render it however they like.
"""

from __future__ import annotations

from typing import Any


class ZeroArgError(Exception):
    """Base exception class for all zeroarg errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
            }
        }


class ConfigurationError(ZeroArgError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)


class ClassificationError(ZeroArgError):
    """Raised when an argument violates the flag/attribute syntax.

    The segmentation helpers raise it without a location; the classifier
    attaches the offending argument's index and text through :meth:`locate`
    before the error reaches the caller.
    """

    kind = "ClassificationError"

    def __init__(
        self,
        reason: str,
        *,
        index: int | None = None,
        argument: str | None = None,
    ):
        self.reason = reason
        self.index = index
        self.argument = argument
        super().__init__(self._format_message(), self._build_details())

    def locate(self, index: int, argument: str) -> ClassificationError:
        """Attach the position of the offending argument and return ``self``."""
        self.index = index
        self.argument = argument
        self.message = self._format_message()
        self.details = self._build_details()
        self.args = (self.message,)
        return self

    def _format_message(self) -> str:
        if self.index is None:
            return f"{self.kind}: {self.reason}"
        return f"{self.kind} in argument {self.index} ({self.argument!r}): {self.reason}"

    def _build_details(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "reason": self.reason,
            "index": self.index,
            "argument": self.argument,
        }


class MalformedNamedBodyError(ClassificationError):
    """Raised for a broken ``+``-joined flag/attribute list."""

    kind = "MalformedNamedBody"


class MalformedShortBodyError(ClassificationError):
    """Raised for a broken compound short-flag run after a single ``-``."""

    kind = "MalformedShortBody"


class EmptyBodyError(ClassificationError):
    """Raised when a prefix is followed by nothing to segment."""

    kind = "EmptyBody"
