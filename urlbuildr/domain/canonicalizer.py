"""
Canonicalisation of name/value arguments.

param() and query() accept several argument shapes which all collapse
into a single dict:

  - accumulate({"a": 1, "b": 2})           →  {"a": 1, "b": 2}
  - accumulate("a", 1, "b", 2)             →  {"a": 1, "b": 2}
  - accumulate(["a", 1, "b", 2])           →  {"a": 1, "b": 2}
  - accumulate([["a", 1], ["b", 2]])       →  {"a": 1, "b": 2}
  - accumulate("a", 1, "b")                →  {"a": 1}   (unpaired tail dropped)
"""

from collections.abc import Mapping
from typing import Any

from urlbuildr.core.exceptions import InvalidArgumentShape

PRIMITIVES = (str, int, float, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _flatten(items: tuple) -> list:
    """Flatten one level of list/tuple nesting."""
    flat: list = []
    for item in items:
        if _is_sequence(item):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


def _merge_mappings(items: list) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for item in items:
        if not isinstance(item, Mapping):
            raise InvalidArgumentShape(item, "expected a mapping after a leading mapping")
        for key, value in item.items():
            result[str(key)] = value
    return result


def _pair_up(items: list) -> dict[str, Any]:
    result: dict[str, Any] = {}
    # Stepping two at a time silently drops an odd trailing element
    for i in range(0, len(items) - 1, 2):
        name = items[i]
        if not isinstance(name, PRIMITIVES):
            raise InvalidArgumentShape(name, "parameter names must be primitives")
        result[str(name)] = items[i + 1]
    return result


def accumulate(*items: Any) -> dict[str, Any]:
    """
    Normalise name/value input into a dict.

    The shape is decided by the first element: while it is a list or tuple
    the arguments are flattened one level, then a primitive starts an alternating name, value, ... list
    and a mapping contributes its entries. Later names overwrite earlier ones.

    Raises:
        InvalidArgumentShape: If the first element is none of the above, or
            the remaining arguments do not match the shape it selected.
    """
    if not items or (len(items) == 1 and items[0] is None):
        return {}

    flat = list(items)
    while flat and _is_sequence(flat[0]):
        flat = _flatten(flat)
    if not flat:
        return {}

    first = flat[0]
    if isinstance(first, PRIMITIVES):
        return _pair_up(flat)
    if isinstance(first, Mapping):
        return _merge_mappings(flat)

    raise InvalidArgumentShape(first)
