"""urikit — String primitives for URI template expansion.

All public names are exported from this module for flat imports:

    from urikit import tokenize, encode, decode, to_param, to_mapping
"""

import logging

__version__ = "0.1.0"

# Codec
from urikit._codec import (
    NOT_SIMPLE_CHARS,
    PCT,
    Codec,
    decode,
    decode_bytes,
    encode,
)

# Coercion
from urikit._coercion import Unconvertable, to_param

# Pair normalizer
from urikit._pairs import is_pair_array, looks_like_pair_array, to_mapping

# Tokenizer
from urikit._tokenizer import TokenStream, Tokenizer, join_segments, tokenize
from urikit._types import AsParam, AsString, Literal, Match, Segment

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Segments and capabilities
    "Literal",
    "Match",
    "Segment",
    "AsParam",
    "AsString",
    # Tokenizer
    "Tokenizer",
    "TokenStream",
    "tokenize",
    "join_segments",
    # Codec
    "Codec",
    "encode",
    "decode",
    "decode_bytes",
    "NOT_SIMPLE_CHARS",
    "PCT",
    # Coercion
    "Unconvertable",
    "to_param",
    # Pair normalizer
    "is_pair_array",
    "looks_like_pair_array",
    "to_mapping",
]
