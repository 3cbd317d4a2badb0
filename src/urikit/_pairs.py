"""Detection and conversion of pair arrays into mappings.

A pair array is a list (or tuple) whose elements are all 2-element lists
or tuples, e.g. ``[["a", 1], ["b", 2]]``. It stands in for a mapping when
duplicate keys must be expressible.

Two checks guard the conversion:

- ``is_pair_array`` inspects every element, O(n). Never lets a malformed
  value through.
- ``looks_like_pair_array`` only peeks at the first element, O(1). Mixed
  shapes slip through and the conversion may then raise or build a
  malformed mapping.

The two are kept apart on purpose: callers choose the tradeoff explicitly
through ``to_mapping(value, strict=...)``.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_SEQUENCE_TYPES = (list, tuple)


def is_pair_array(value: Any) -> bool:
    """Return True if every element of ``value`` is a 2-element sequence.

    >>> is_pair_array([])
    True
    >>> is_pair_array([1, 2, 3])
    False
    >>> is_pair_array([["a", 1], ["b", 2]])
    True
    >>> is_pair_array([["a", 1], []])
    False
    """
    if not isinstance(value, _SEQUENCE_TYPES):
        return False
    return all(isinstance(p, _SEQUENCE_TYPES) and len(p) == 2 for p in value)


def looks_like_pair_array(value: Any) -> bool:
    """Cheap pair-array check: ``value`` is a sequence starting with a sequence.

    Assumes the remaining elements look like the first. An empty sequence
    has no first element and does not qualify.
    """
    return (
        isinstance(value, _SEQUENCE_TYPES)
        and len(value) > 0
        and isinstance(value[0], _SEQUENCE_TYPES)
    )


def _flatten_once(value: list[Any] | tuple[Any, ...]) -> list[Any]:
    flat: list[Any] = []
    for item in value:
        if isinstance(item, _SEQUENCE_TYPES):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


def to_mapping(value: Any, *, strict: bool) -> dict[Any, Any] | Any:
    """Turn a pair array into a dict; return anything else unchanged.

    Later duplicates of a key overwrite earlier ones.

    With ``strict=False`` only ``looks_like_pair_array`` guards the
    conversion, so mixed shapes are flattened anyway:

    >>> to_mapping([["a", 1], "foo", "bar"], strict=False)
    {'a': 1, 'foo': 'bar'}
    >>> to_mapping([["a", 1], "foo", "bar"], strict=True)
    [['a', 1], 'foo', 'bar']

    Raises:
        ValueError: Fast mode only, when flattening leaves an odd number of
            items.
        TypeError: When a key is unhashable.
    """
    check = is_pair_array if strict else looks_like_pair_array
    if not check(value):
        return value

    flat = _flatten_once(value)
    if len(flat) % 2:
        logger.debug("pair conversion of %d items left one key without a value", len(flat))
        msg = f"odd number of items ({len(flat)}) after flattening pair array"
        raise ValueError(msg)

    result: dict[Any, Any] = {}
    for i in range(0, len(flat), 2):
        result[flat[i]] = flat[i + 1]
    return result
