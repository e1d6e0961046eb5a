"""
Stack trace rewriting.

Frames that live inside the project namespace directory are shortened so
logs show ``utils/lib/x.py`` instead of a full install path. Both Python
traceback lines and JS-style ``    at`` lines from sandboxed workers are
rewritten.
"""

import logging
import os
import re
import traceback
from typing import Optional, TypeVar, Union

from hydroutils.common.constants import SystemConstants
from hydroutils.config import get_settings

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseException)

_PY_FRAME_RE = re.compile(r'^(\s*File ")(.*?)(".*)$')


def _shorten_path(path: str, namespace: str, sep: str) -> Optional[str]:
    scoped = f"@{namespace}{sep}"
    plain = f"{namespace}{sep}"
    if f"{sep}{scoped}" in path:
        return path.split(scoped, 1)[1]
    if f"{sep}{plain}" in path:
        return plain + path.split(plain, 1)[1]
    return None


def _rewrite_line(line: str, namespace: str, sep: str) -> str:
    if line.startswith(SystemConstants.JS_FRAME_PREFIX):
        shortened = _shorten_path(line, namespace, sep)
        if shortened is None:
            return line
        if f"{sep}@{namespace}{sep}" in line:
            return shortened
        return f"{SystemConstants.JS_FRAME_PREFIX} {shortened}"

    match = _PY_FRAME_RE.match(line)
    if match:
        shortened = _shorten_path(match.group(2), namespace, sep)
        if shortened is not None:
            return f"{match.group(1)}{shortened}{match.group(3)}"
    return line


def rewrite_stack(text: str, namespace: Optional[str] = None) -> str:
    """Rewrite every frame line of a stack trace string."""
    namespace = namespace or get_settings().system.stack_namespace
    sep = os.sep
    return "\n".join(_rewrite_line(line, namespace, sep) for line in text.split("\n"))


def error_message(err: Union[str, E], namespace: Optional[str] = None) -> Union[str, E]:
    """
    Shorten project paths in a stack trace.

    Args:
        err: Stack trace text, or an exception. An exception's ``stack``
            attribute is used when present, otherwise its formatted traceback.
        namespace: Namespace directory, defaults to the configured one

    Returns:
        The rewritten string for string input; for exceptions, the same
        exception object with ``stack`` set to the rewritten trace
    """
    if isinstance(err, str):
        return rewrite_stack(err, namespace)

    stack = getattr(err, "stack", None)
    if not isinstance(stack, str):
        stack = "".join(traceback.format_exception(type(err), err, err.__traceback__))
    err.stack = rewrite_stack(stack, namespace)
    logger.debug(f"Rewrote stack of {type(err).__name__}")
    return err
