"""
hydroutils - shared helpers for hydrooj services.

Modules:
- strings: template formatting, random strings, dates, sizes, clocks
- containers: list difference, flattened sums, set algebra
- units: time (ms) and memory (MB) quantity parsing
- casing: deep camel/param/snake case conversion
- timeutils: duration constants, short durations, ObjectId from timestamps
- streams: stream buffering and async sleep
- fs: recursive folder size
- introspection: class-style constructor detection
- stack: stack trace path shortening
"""

from hydroutils.casing import camel_case, deepen, noop, param_case, snake_case
from hydroutils.common.exceptions import (
    HydroUtilsException,
    MemoryParseError,
    ParseError,
    TimeParseError,
)
from hydroutils.config import Settings, get_settings, reload_settings
from hydroutils.containers import intersection, is_diff, is_superset, sum_numbers, union
from hydroutils.fs import folder_size
from hydroutils.introspection import is_class
from hydroutils.log import configure_logging
from hydroutils.stack import error_message, rewrite_stack
from hydroutils.streams import buffer_to_stream, sleep, stream_to_buffer
from hydroutils.strings import (
    format_date,
    format_from_array,
    format_seconds,
    format_string,
    random_string,
    rawformat,
    size,
)
from hydroutils.timeutils import (
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    WEEK,
    Time,
    format_time_short,
    get_object_id,
)
from hydroutils.units import parse_memory_mb, parse_time_ms

__version__ = "1.0.0"

__all__ = [
    # Strings
    "format_string",
    "format_from_array",
    "rawformat",
    "random_string",
    "format_date",
    "format_seconds",
    "size",
    # Containers
    "is_diff",
    "sum_numbers",
    "is_superset",
    "union",
    "intersection",
    # Units
    "parse_time_ms",
    "parse_memory_mb",
    # Casing
    "deepen",
    "camel_case",
    "param_case",
    "snake_case",
    "noop",
    # Time
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "Time",
    "format_time_short",
    "get_object_id",
    # Streams
    "stream_to_buffer",
    "buffer_to_stream",
    "sleep",
    # Filesystem
    "folder_size",
    # Introspection
    "is_class",
    # Stack traces
    "error_message",
    "rewrite_stack",
    # Configuration and logging
    "Settings",
    "get_settings",
    "reload_settings",
    "configure_logging",
    # Exceptions
    "HydroUtilsException",
    "ParseError",
    "TimeParseError",
    "MemoryParseError",
]
