"""
fuzzkit
=======

A wildcard-aware edit distance, plus the small helpers that usually
travel with it.

    distance("kitten", "sitting")             → 3
    distance("_23-___-____", "123-456-7890")  → 0   ('_' matches a digit)
    distance("123", "_23")                    → 1   (only in the pattern)

The distance is the minimum number of unmatched or mismatched
characters over all order-preserving alignments of the two strings,
computed by dynamic programming in O(m·n) time and O(n) memory.

Alongside it:
  • Bounded polling loops (poll, busy_poll, poll_attempts)
  • Value wrappers (Pair, Either, Lazy, ByteView)
  • String/collection helpers (parse, segment, tail, inverse, ...)
"""

from fuzzkit.core import (
    # Cost rule
    WILDCARD,
    DIGITS,
    is_ascii_digit,
    char_cost,
    # Distance
    distance,
    normalized_distance,
    # Alignment
    EditOp,
    EditEntry,
    align,
)
from fuzzkit.errors import FuzzkitError, InvalidArgumentError, ParseError
from fuzzkit.helpers import parse, segment, tail, non_empty, inverse, as_map
from fuzzkit.polling import (
    poll, busy_poll, poll_attempts, try_until_true, try_until_true_attempts,
)
from fuzzkit.types import Pair, Either, Left, Right, Lazy, ByteView

__version__ = "0.1.0"
__all__ = [
    "WILDCARD", "DIGITS", "is_ascii_digit", "char_cost",
    "distance", "normalized_distance",
    "EditOp", "EditEntry", "align",
    "FuzzkitError", "InvalidArgumentError", "ParseError",
    "parse", "segment", "tail", "non_empty", "inverse", "as_map",
    "poll", "busy_poll", "poll_attempts", "try_until_true", "try_until_true_attempts",
    "Pair", "Either", "Left", "Right", "Lazy", "ByteView",
]
