"""
Custom exceptions for hydroutils.

Only the unit parsers raise library exceptions; every other helper lets the
underlying Python error propagate unchanged.
"""

from typing import Any, Dict, Optional


class HydroUtilsException(Exception):
    """Base exception for hydroutils."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ParseError(HydroUtilsException, ValueError):
    """Raised when a quantity string does not match its expected pattern."""

    kind = "value"

    def __init__(self, value: Any):
        super().__init__(
            message=f"{value} error parsing {self.kind}",
            details={"value": value, "kind": self.kind},
        )
        self.value = value


class TimeParseError(ParseError):
    """Exception raised when a time string cannot be parsed."""

    kind = "time"


class MemoryParseError(ParseError):
    """Exception raised when a memory string cannot be parsed."""

    kind = "memory"
