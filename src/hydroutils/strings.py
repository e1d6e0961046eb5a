"""
String formatting helpers.

This module consolidates the text-producing helpers used by host services:
- Template formatting: positional ``{0}`` and keyed ``{name}`` placeholders
- Random strings: alphanumeric identifiers from a non-cryptographic source
- Dates: ``%Y-%m-%d %H:%M:%S`` style rendering with zero padding
- Sizes and durations: byte sizes in binary units, ``HH:MM:SS`` clocks

All helpers are pure functions apart from reading defaults from settings.
"""

import logging
import math
import random
import re
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any, Optional, Sequence, Union

from hydroutils.common.constants import FormatConstants
from hydroutils.common.numeric import format_number, round_half_up, round_to
from hydroutils.config import get_settings

logger = logging.getLogger(__name__)

# ==============================================================================
# Template Formatting
# ==============================================================================


def format_string(template: str, *args: Any) -> str:
    """
    Substitute placeholders in a template.

    A single mapping argument fills ``{key}`` placeholders by name; any other
    arguments fill ``{0}``, ``{1}``, ... by position. ``None`` values leave
    their placeholder untouched.

    Examples:
        >>> format_string("{0}-{1}", "a", "b")
        'a-b'
        >>> format_string("{x}", {"x": 5})
        '5'
    """
    if not args:
        return template
    if len(args) == 1 and isinstance(args[0], Mapping):
        result = template
        for key, value in args[0].items():
            if value is not None:
                result = result.replace(f"{{{key}}}", str(value))
        return result
    return format_from_array(template, args)


def format_from_array(template: str, args: Sequence[Any]) -> str:
    """Fill ``{i}`` placeholders from a sequence, skipping ``None`` entries."""
    result = template
    for i, value in enumerate(args):
        if value is not None:
            result = result.replace(f"{{{i}}}", str(value))
    return result


def _join_value(value: Any) -> str:
    # Generic list-to-string conversion: None is empty, sequences comma-join
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_join_value(item) for item in value)
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def rawformat(template: str, obj: Any) -> str:
    """
    Interpose ``obj`` at the ``{@}`` marker of a template.

    The two halves and the object are comma-joined rather than substituted,
    so ``rawformat("a{@}b", "x")`` gives ``"a,x,b"``. A template without the
    marker yields ``"<template>,<obj>,"``.
    """
    parts = template.split(FormatConstants.RAW_FORMAT_MARKER)
    head = parts[0]
    tail = parts[1] if len(parts) > 1 else None
    return _join_value([head, obj, tail])


# ==============================================================================
# Random Strings
# ==============================================================================


def random_string(digit: Optional[int] = None) -> str:
    """
    Generate a random alphanumeric string.

    Args:
        digit: Length of the string, defaults to the configured length (32)

    Returns:
        String of ``digit`` characters drawn uniformly from ``[a-zA-Z0-9]``
    """
    if digit is None:
        digit = get_settings().format.random_length
    return "".join(random.choices(FormatConstants.RANDOM_ALPHABET, k=max(digit, 0)))


# ==============================================================================
# Dates and Durations
# ==============================================================================


def _digit2(number: int) -> str:
    return f"0{number}" if number < 10 else str(number)


def format_date(value: Union[datetime, date], fmt: Optional[str] = None) -> str:
    """
    Render a date-time with ``%Y %m %d %H %M %S`` tokens.

    Only the first occurrence of each token is replaced. Every field except
    the year is zero-padded to two digits.

    Args:
        value: Date-time to render; a plain date is taken at midnight
        fmt: Format string, defaults to the configured date format

    Returns:
        Formatted string
    """
    if fmt is None:
        fmt = get_settings().format.date_format
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    return (
        fmt.replace("%Y", str(value.year), 1)
        .replace("%m", _digit2(value.month), 1)
        .replace("%d", _digit2(value.day), 1)
        .replace("%H", _digit2(value.hour), 1)
        .replace("%M", _digit2(value.minute), 1)
        .replace("%S", _digit2(value.second), 1)
    )


_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def format_seconds(value: Union[str, int] = "0") -> str:
    """
    Render a number of seconds as ``HH:MM:SS``.

    Hours are not wrapped at 24, so ``"90000"`` gives ``"25:00:00"``. Hours
    round down while minutes and seconds keep the sign of the total, so
    ``"-1"`` gives ``"0-1:0-1:0-1"``.

    Raises:
        ValueError: If ``value`` does not start with an integer
    """
    if isinstance(value, int):
        seconds = value
    else:
        match = _LEADING_INT_RE.match(str(value))
        if not match:
            raise ValueError(f"Invalid seconds value: {value!r}")
        seconds = int(match.group(1))
    return format_from_array(
        "{0}:{1}:{2}",
        [
            _digit2(seconds // 3600),
            _digit2(math.floor(math.fmod(seconds, 3600) / 60)),
            _digit2(int(math.fmod(seconds, 60))),
        ],
    )


# ==============================================================================
# Byte Sizes
# ==============================================================================


def size(value: float, base: float = 1) -> str:
    """
    Render a byte count with binary units.

    Args:
        value: Quantity to render
        base: Scale applied first, e.g. 1024 when ``value`` is in KiB

    Returns:
        String such as ``"1.5 KiB"`` (one decimal, dropped when integral)

    Examples:
        >>> size(1536)
        '1.5 KiB'
        >>> size(1, 1024 * 1024)
        '1 MiB'
    """
    value *= base
    step = FormatConstants.SIZE_STEP
    unit_names = FormatConstants.SIZE_UNIT_NAMES
    for unit_name in unit_names:
        if value < step:
            return format_string("{0} {1}", format_number(round_to(value, 1)), unit_name)
        value /= step
    return f"{round_half_up(value * step)} {unit_names[-1]}"
