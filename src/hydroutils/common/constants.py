"""
Constants and default values for hydroutils.
Centralizes all magic numbers, unit tables and format defaults.
"""

import re


# Formatting Constants
class FormatConstants:
    """Constants related to string, date and size formatting."""

    # Random strings
    RANDOM_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ1234567890"
    DEFAULT_RANDOM_LENGTH = 32
    MAX_RANDOM_LENGTH = 4096

    # Dates
    DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

    # rawformat splits on this marker
    RAW_FORMAT_MARKER = "{@}"

    # Byte sizes
    SIZE_STEP = 1024
    SIZE_UNIT_NAMES = ["Bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]


# Time Constants
class TimeConstants:
    """Durations expressed in milliseconds."""

    SECOND = 1000
    MINUTE = SECOND * 60
    HOUR = MINUTE * 60
    DAY = HOUR * 24
    WEEK = DAY * 7


# Unit Parsing Constants
class UnitConstants:
    """Patterns and factors for time/memory quantity strings."""

    TIME_RE = re.compile(r"^([0-9]+(?:\.[0-9]*)?)([mu]?)s?$", re.IGNORECASE)
    TIME_UNITS = {"": 1000, "m": 1, "u": 0.001}  # -> milliseconds

    MEMORY_RE = re.compile(r"^([0-9]+(?:\.[0-9]*)?)([kmg])b?$", re.IGNORECASE)
    MEMORY_UNITS = {"k": 1 / 1024, "m": 1, "g": 1024}  # -> megabytes


# System Constants
class SystemConstants:
    """Constants for logging and stack rewriting."""

    # Logging
    LOG_LEVEL_DEFAULT = "INFO"
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
    LOG_FILE_BACKUP_COUNT = 5

    # Stack traces
    DEFAULT_STACK_NAMESPACE = "hydrooj"
    JS_FRAME_PREFIX = "    at"


# Stream Constants
class StreamConstants:
    """Constants for stream buffering."""

    READ_CHUNK_SIZE = 64 * 1024  # 64KB per read() call
