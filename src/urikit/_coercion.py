"""Value-to-param coercion with a fixed fallback chain.

Order of capabilities:
1. ``to_param()`` on the value (AsParam)
2. a usable ``__str__`` (AsString; ``__str__ = None`` opts out)
3. otherwise Unconvertable

Whatever goes wrong inside 1 or 2 is reported as Unconvertable, so
callers only ever handle one error kind for "could not get a string".
"""

from __future__ import annotations

import logging
from typing import Any

from urikit._types import AsParam, AsString

logger = logging.getLogger(__name__)


def _describe(obj: object) -> str:
    # object.__repr__ cannot be overridden and does not fail.
    return object.__repr__(obj)


class Unconvertable(Exception):
    """An object could not be converted to a param string.

    ``object`` is kept for diagnostics only; it is not a recovery path.
    """

    def __init__(self, obj: object) -> None:
        self.object = obj
        super().__init__(
            f"could not convert {_describe(obj)} to a param: "
            "it has neither a usable to_param() nor __str__()"
        )


def _convert(value: Any) -> object:
    if isinstance(value, AsParam):
        return value.to_param()
    if isinstance(value, AsString):
        return str(value)
    return None


def to_param(value: Any) -> str:
    """Convert ``value`` to its param string.

    >>> to_param(5)
    '5'
    >>> class Post:
    ...     def to_param(self) -> str:
    ...         return "42"
    >>> to_param(Post())
    '42'

    Raises:
        Unconvertable: If neither capability is present, either one fails,
            or it returns something other than a string.
    """
    try:
        result = _convert(value)
    except Exception as e:
        logger.debug("to_param failed for %s", _describe(value), exc_info=True)
        raise Unconvertable(value) from e

    if not isinstance(result, str):
        logger.debug(
            "no param string for %s (got %s)",
            _describe(value),
            type(result).__name__,
        )
        raise Unconvertable(value)
    return result
