"""
Parsers for time and memory quantity strings.

Time strings normalize to milliseconds, memory strings to megabytes:
- ``"2"``, ``"2s"`` -> 2000 ms; ``"500ms"`` -> 500 ms; ``"250us"`` -> 0 ms
- ``"512kb"`` -> 1 MB; ``"64m"`` -> 64 MB; ``"2gb"`` -> 2048 MB
"""

import logging
import math

from hydroutils.common.constants import UnitConstants
from hydroutils.common.exceptions import MemoryParseError, TimeParseError

logger = logging.getLogger(__name__)


def parse_time_ms(value: str) -> int:
    """
    Parse a time string into whole milliseconds (rounded down).

    Args:
        value: ``<number>[m|u]s?``, case-insensitive

    Returns:
        Milliseconds

    Raises:
        TimeParseError: If ``value`` does not match the pattern
    """
    match = UnitConstants.TIME_RE.fullmatch(value)
    if not match:
        logger.debug(f"Rejected time string {value!r}")
        raise TimeParseError(value)
    factor = UnitConstants.TIME_UNITS[match.group(2).lower()]
    return math.floor(float(match.group(1)) * factor)


def parse_memory_mb(value: str) -> int:
    """
    Parse a memory string into whole megabytes (rounded up).

    Args:
        value: ``<number>(k|m|g)b?``, case-insensitive

    Returns:
        Megabytes

    Raises:
        MemoryParseError: If ``value`` does not match the pattern
    """
    match = UnitConstants.MEMORY_RE.fullmatch(value)
    if not match:
        logger.debug(f"Rejected memory string {value!r}")
        raise MemoryParseError(value)
    factor = UnitConstants.MEMORY_UNITS[match.group(2).lower()]
    return math.ceil(float(match.group(1)) * factor)
