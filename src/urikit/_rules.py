"""Rule compilation shared by the tokenizer and the codec."""

from __future__ import annotations

from typing import Any

import re2


def compile_rule(rule: str | Any) -> Any:
    """Compile a pattern string with RE2; pass compiled patterns through.

    RE2 guarantees linear-time matching and rejects backreferences and
    lookaround. Precompiled stdlib ``re`` patterns are accepted unchanged.

    Raises:
        re2.error: If ``rule`` is a string that is not valid RE2 syntax.
    """
    if isinstance(rule, str):
        return re2.compile(rule)
    return rule
