"""
Exception classes for flag-parser.

Extraction itself is total over strings; these exceptions cover the opt-in
strict mode and configuration loading.
"""

from __future__ import annotations

from typing import Any


class FlagParserError(Exception):
    """Base exception class for all flag-parser errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict[str, Any]:
        error_dict: dict[str, Any] = {
            "message": self.message,
            "type": self.__class__.__name__,
            "details": self.details,
        }

        # Extra attributes set via kwargs
        for attr_name, value in vars(self).items():
            if not attr_name.startswith("_") and attr_name not in (
                "message",
                "details",
            ):
                error_dict[attr_name] = value

        return {"error": error_dict}


class EmptyFlagNameError(FlagParserError):
    """Raised in strict mode when a bare '-' or '--' token is found."""

    def __init__(
        self,
        token: str,
        position: int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message or f"Empty flag name for token {token!r} at position {position}",
            details,
            token=token,
            position=position,
        )
        self.token: str = token
        self.position: int = position


class ConfigurationError(FlagParserError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)
