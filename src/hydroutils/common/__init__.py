"""
Common package - fundamental building blocks without project dependencies.

This package contains:
- Constants (FormatConstants, TimeConstants, UnitConstants,
  StreamConstants, SystemConstants)
- Exceptions (HydroUtilsException, ParseError and its subclasses)
- Numeric helpers (half-up rounding, number rendering)

IMPORTANT: This package must NOT import from any other hydroutils module
to avoid circular dependencies.
"""

from hydroutils.common.constants import (
    FormatConstants,
    StreamConstants,
    SystemConstants,
    TimeConstants,
    UnitConstants,
)
from hydroutils.common.exceptions import (
    HydroUtilsException,
    MemoryParseError,
    ParseError,
    TimeParseError,
)
from hydroutils.common.numeric import format_number, round_half_up, round_to

__all__ = [
    # Constants
    "FormatConstants",
    "StreamConstants",
    "SystemConstants",
    "TimeConstants",
    "UnitConstants",
    # Exceptions
    "HydroUtilsException",
    "MemoryParseError",
    "ParseError",
    "TimeParseError",
    # Numeric
    "format_number",
    "round_half_up",
    "round_to",
]
