"""Percent-encoding codec operating on raw bytes.

Encoding replaces every character matched by the rule with one ``%XX``
token per UTF-8 byte (uppercase hex). Decoding replaces every ``%XX``
token (hex case-insensitive) with the byte it encodes; everything else
passes through as its UTF-8 bytes.

Decoded bytes that are not valid UTF-8 come back as lone surrogates
(``surrogateescape``) instead of raising, and encoding such a string
restores the original bytes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import re2

from urikit._rules import compile_rule

if TYPE_CHECKING:
    from collections.abc import Iterator

# Everything outside the unreserved set [A-Za-z0-9-._] is encoded.
NOT_SIMPLE_CHARS = r"([^A-Za-z0-9\-._])"

PCT = r"%([0-9A-Fa-f]{2})"

_PCT_RE = re2.compile(PCT)

_ERRORS = "surrogateescape"


def _pct_bytes(data: bytes) -> str:
    return "".join(f"%{b:02X}" for b in data)


def _pct_token(char: str) -> str:
    return _pct_bytes(char.encode("utf-8"))


def _has_surrogates(text: str) -> bool:
    # UTF-8 can encode every code point except lone surrogates.
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return True
    return False


def _surrogate_bytes(run: str) -> bytes:
    """Raw bytes behind a run of lone surrogates.

    U+DC80..U+DCFF are the bytes ``decode`` could not read as UTF-8; any
    other surrogate is kept as its 3-byte form.
    """
    return b"".join(
        ch.encode("utf-8", _ERRORS if "\udc80" <= ch <= "\udcff" else "surrogatepass")
        for ch in run
    )


def _split_surrogates(text: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(run, is_surrogate_run)`` pieces covering ``text`` in order.

    RE2 only accepts valid UTF-8, so surrogate runs are kept away from it.
    """
    start = 0
    in_run = False
    for i, ch in enumerate(text):
        is_surrogate = "\ud800" <= ch <= "\udfff"
        if is_surrogate != in_run:
            if i > start:
                yield text[start:i], in_run
            start, in_run = i, is_surrogate
    if start < len(text):
        yield text[start:], in_run


@dataclass(frozen=True, slots=True)
class Codec:
    """Pct-codec bound to a rule describing the unsafe characters.

    The rule is compiled once at construction time. With the default rule
    the encoded output is pure ASCII and ``decode(encode(s)) == s`` for
    any ``s``; a custom rule that leaves non-ASCII characters alone gives
    up the ASCII guarantee. Lone surrogates (undecodable bytes returned by
    ``decode``) are always encoded, whatever the rule.

    >>> Codec().encode("a b")
    'a%20b'
    >>> Codec(r"[/]").encode("a b/c")
    'a b%2Fc'
    """

    rule: str | Any = NOT_SIMPLE_CHARS
    _compiled: Any = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", compile_rule(self.rule))

    def encode(self, text: str) -> str:
        """Pct-encode every character of ``text`` matched by the rule.

        Not idempotent: an existing ``%XX`` token has its ``%`` encoded
        again unless the rule excludes ``%``.
        """
        if not _has_surrogates(text):
            return self._encode_run(text)
        return "".join(
            _pct_bytes(_surrogate_bytes(run)) if surrogates else self._encode_run(run)
            for run, surrogates in _split_surrogates(text)
        )

    def _encode_run(self, text: str) -> str:
        parts: list[str] = []
        last = 0
        for m in self._compiled.finditer(text):
            start, end = m.span()
            parts.append(text[last:start])
            parts.append(_pct_token(m.group(0)))
            last = end
        parts.append(text[last:])
        return "".join(parts)

    def decode_bytes(self, text: str) -> bytes:
        """Replace every ``%XX`` token with its raw byte."""
        if not _has_surrogates(text):
            return _decode_run(text)
        return b"".join(
            _surrogate_bytes(run) if surrogates else _decode_run(run)
            for run, surrogates in _split_surrogates(text)
        )

    def decode(self, text: str) -> str:
        """Decode ``%XX`` tokens and read the resulting bytes as UTF-8.

        Invalid UTF-8 is not an error here: offending bytes come back as
        lone surrogates and ``decode_bytes`` is the way to see them raw.
        Feeding that result back to ``encode`` restores the original bytes.
        """
        return self.decode_bytes(text).decode("utf-8", _ERRORS)


def _decode_run(text: str) -> bytes:
    out = bytearray()
    last = 0
    for m in _PCT_RE.finditer(text):
        start, end = m.span()
        out += text[last:start].encode("utf-8")
        out.append(int(m.group(1), 16))
        last = end
    out += text[last:].encode("utf-8")
    return bytes(out)


_DEFAULT = Codec()


def encode(text: str, rule: str | Any | None = None) -> str:
    """Pct-encode ``text``; ``rule`` defaults to ``NOT_SIMPLE_CHARS``.

    >>> encode("abc")
    'abc'
    >>> encode("%")
    '%25'
    """
    codec = _DEFAULT if rule is None else Codec(rule)
    return codec.encode(text)


def decode(text: str) -> str:
    """Decode pct-encoded ``text`` into a string.

    >>> decode("%25")
    '%'
    """
    return _DEFAULT.decode(text)


def decode_bytes(text: str) -> bytes:
    """Decode pct-encoded ``text`` into raw bytes."""
    return _DEFAULT.decode_bytes(text)
