"""
Deep case conversion for strings and nested key/value structures.

``deepen`` lifts a ``str -> str`` function so that it rewrites every mapping
key of a nested structure. Only a top-level string is rewritten as a value;
strings inside lists or mapping values are left as they are.

Examples:
    >>> camel_case({"user_id": 1, "items": [{"item-name": "a_b"}]})
    {'userId': 1, 'items': [{'itemName': 'a_b'}]}
    >>> snake_case("pageSize")
    'page_size'
"""

import re
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

T = TypeVar("T")

_CAMEL_RE = re.compile(r"[_-][a-z]")
_INNER_UPPER_RE = re.compile(r"(?!^)[A-Z]")


def deepen(modify_string: Callable[[str], str]) -> Callable[[T], T]:
    """
    Build a deep variant of a string mapping function.

    Args:
        modify_string: Function applied to strings and mapping keys

    Returns:
        Function that maps a string directly, or rebuilds lists, tuples and
        mappings with every string key passed through ``modify_string``
    """

    def modify_object(source: Any) -> Any:
        if isinstance(source, Mapping):
            return {
                (modify_string(key) if isinstance(key, str) else key): modify_object(value)
                for key, value in source.items()
            }
        if isinstance(source, list):
            return [modify_object(item) for item in source]
        if isinstance(source, tuple):
            return tuple(modify_object(item) for item in source)
        return source

    def transform(source: T) -> T:
        if isinstance(source, str):
            return modify_string(source)
        return modify_object(source)

    return transform


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept anything, do nothing."""


def _to_camel(source: str) -> str:
    return _CAMEL_RE.sub(lambda m: m.group(0)[1].upper(), source)


def _to_param(source: str) -> str:
    return _INNER_UPPER_RE.sub(lambda m: f"-{m.group(0).lower()}", source.replace("_", "-"))


def _to_snake(source: str) -> str:
    return _INNER_UPPER_RE.sub(lambda m: f"_{m.group(0).lower()}", source.replace("-", "_"))


camel_case = deepen(_to_camel)
param_case = deepen(_to_param)
snake_case = deepen(_to_snake)
