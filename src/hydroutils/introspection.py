"""
Runtime shape detection for callables.
"""

import inspect
import logging
import re
import textwrap
from typing import Any

logger = logging.getLogger(__name__)

# Attribute assignment on the instance, e.g. ``self.name = name``
_INSTANCE_ASSIGN_RE = re.compile(r"\b(?:self|cls)\.\w+\s*=(?!=)")


def _source_of(func: Any) -> str:
    try:
        return textwrap.dedent(inspect.getsource(func))
    except (OSError, TypeError):
        # Source unavailable (REPL, C extensions, frozen modules)
        return ""


def is_class(obj: Any, strict: bool = False) -> bool:
    """
    Guess whether a callable is a class-style constructor.

    Real classes are always detected. For plain functions the check falls
    back to source inspection: a function that builds up ``self`` is treated
    as a constructor. The result is best-effort.

    Args:
        obj: Value to inspect
        strict: Require stronger evidence for functions. A capitalized name
            counts, and ``self`` assignments only count when the first
            parameter is ``self``.

    Returns:
        True if ``obj`` looks like a class
    """
    if not callable(obj):
        return False
    if inspect.isclass(obj):
        return True
    if not inspect.isfunction(obj):
        return False
    if obj.__name__ == "<lambda>":
        return False
    if strict and obj.__name__[:1].isupper():
        return True

    source = _source_of(obj)
    if source.startswith("class"):
        return True
    if _INSTANCE_ASSIGN_RE.search(source):
        if not strict:
            return True
        params = list(inspect.signature(obj).parameters)
        return bool(params) and params[0] == "self"
    return False
