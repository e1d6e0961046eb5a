"""
Array and set helpers.

Set helpers accept any iterable for their second argument and always return
new sets, leaving inputs untouched. ``is_diff`` is the exception: it sorts
both lists in place.
"""

from typing import AbstractSet, Any, Iterable, List, Set, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float]


def is_diff(a: List[Any], b: List[Any]) -> bool:
    """
    Check whether two lists hold different elements, ignoring order.

    Note:
        Both lists are sorted in place.

    Examples:
        >>> is_diff([1, 2], [2, 1])
        False
        >>> is_diff([1, 2], [1, 3])
        True
    """
    if len(a) != len(b):
        return True
    a.sort()
    b.sort()
    for left, right in zip(a, b):
        if left != right:
            return True
    return False


def sum_numbers(*args: Union[Number, Iterable[Number]]) -> Number:
    """
    Sum numbers and lists of numbers, flattening one level.

    Examples:
        >>> sum_numbers(1, [2, 3], 4)
        10
    """
    total = 0
    for item in args:
        if isinstance(item, (list, tuple)):
            for value in item:
                total += value
        else:
            total += item
    return total


def is_superset(container: AbstractSet[Any], subset: Iterable[Any]) -> bool:
    """Return True if every element of ``subset`` is in ``container``."""
    for elem in subset:
        if elem not in container:
            return False
    return True


def union(set_a: Iterable[T], set_b: Iterable[T]) -> Set[T]:
    result = set(set_a)
    for elem in set_b:
        result.add(elem)
    return result


def intersection(set_a: AbstractSet[T], set_b: Iterable[T]) -> Set[T]:
    result = set()
    for elem in set_b:
        if elem in set_a:
            result.add(elem)
    return result
