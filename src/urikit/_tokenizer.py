"""Lazy tokenizer splitting a string into Literal and Match segments.

The rule is searched against the remaining suffix of the input. Every
non-empty run before a match is emitted as a Literal, every match as a
Match, and whatever is left after the last match as a final Literal.

Zero-width matches would re-search the same suffix forever, so the first
zero-width match ends the scan: its remainder is emitted as the final
Literal without searching again.

Pattern strings are compiled with ``google-re2`` (linear-time, no
backreferences or lookaround). Any precompiled object with ``search()``
is accepted as-is, so stdlib ``re`` patterns work too.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from urikit._rules import compile_rule
from urikit._types import Literal, Match

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from urikit._types import Segment


@dataclass(frozen=True, slots=True)
class Tokenizer:
    """Splits strings against a fixed rule.

    Stateless after construction: every call to ``each`` starts a new,
    independent scan, so a Tokenizer can be shared between threads.

    Each step searches a fresh slice of the unconsumed text so that anchors
    such as ``^`` apply to the remainder. That copy makes a full scan
    quadratic in the input length, which is fine for template-sized strings.

    >>> from urikit import Tokenizer
    >>> [str(s) for s in Tokenizer(r"\\{(\\w+)\\}").each("/a/{b}/c")]
    ['/a/', '{b}', '/c']
    """

    rule: str | Any
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", compile_rule(self.rule))

    def each(self, text: str) -> Iterator[Segment]:
        """Lazily yield the segments of ``text``, one per pull."""
        rest = text
        while True:
            m = self._compiled.search(rest)
            if m is None:
                yield Literal(rest)
                return
            start, end = m.span()
            if start > 0:
                yield Literal(rest[:start])
            yield Match.from_match(m)
            if start == end:
                # Remainder equals what would be searched next.
                yield Literal(rest[end:])
                return
            rest = rest[end:]

    def split(self, text: str) -> list[Segment]:
        """Eagerly collect all segments of ``text``."""
        return list(self.each(text))

    def stream(self, text: str) -> TokenStream:
        """Return a restartable lazy sequence over ``text``."""
        return TokenStream(self, text)


@dataclass(frozen=True, slots=True)
class TokenStream:
    """Restartable lazy sequence of segments.

    Each ``iter()`` begins a fresh scan; a single iterator is meant for one
    consumer and looks no further ahead than the segment it returns.
    """

    tokenizer: Tokenizer
    text: str

    def __iter__(self) -> Iterator[Segment]:
        return self.tokenizer.each(self.text)

    def to_list(self) -> list[Segment]:
        return self.tokenizer.split(self.text)


def tokenize(rule: str | Any, text: str) -> TokenStream:
    """Tokenize ``text`` against ``rule``.

    Convenience for ``Tokenizer(rule).stream(text)``. Build a Tokenizer once
    when the same rule is applied to many strings.
    """
    return Tokenizer(rule).stream(text)


def join_segments(segments: Iterable[Segment]) -> str:
    """Concatenate segments back into the text they were cut from."""
    return "".join(s.text for s in segments)
