"""Core segment types and coercion protocols for urikit.

- Segment is the unit produced by the tokenizer: Literal | Match
- AsParam / AsString are the two optional capabilities consulted, in that
  order, when a value is coerced to a param string
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class Literal:
    """A run of the input that the rule did not match.

    Never empty, except for the final trailing segment of a scan.
    """

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Match:
    """A match of the rule against the input.

    Carries the matched text plus its capture groups so callers can tell
    which alternative of the rule fired (see ``lastindex``).
    """

    text: str
    groups: tuple[str | None, ...] = ()
    named: Mapping[str, str | None] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    lastindex: int | None = None

    @classmethod
    def from_match(cls, m: Any) -> Match:
        """Build a Match from an ``re2`` or ``re`` match object."""
        return cls(
            text=m.group(0),
            groups=tuple(m.groups()),
            named=MappingProxyType(dict(m.groupdict())),
            lastindex=m.lastindex,
        )

    def group(self, index: int | str = 0) -> str | None:
        """Return group ``index`` (0 is the whole match), or a named group."""
        if isinstance(index, str):
            return self.named[index]
        if index == 0:
            return self.text
        return self.groups[index - 1]

    def __str__(self) -> str:
        return self.text


# A tokenizer emits Literal and Match segments; joined in order they
# reconstruct the input exactly.
type Segment = Literal | Match


@runtime_checkable
class AsParam(Protocol):
    """A value that knows its own param string.

    Preferred over ``AsString`` when both are available. Capabilities are
    found by static lookup, so ``__getattr__`` cannot provide them.
    """

    def to_param(self) -> str: ...


@runtime_checkable
class AsString(Protocol):
    """A value with a usable ``__str__``.

    Almost every object qualifies; a class opts out with ``__str__ = None``.
    """

    def __str__(self) -> str: ...
