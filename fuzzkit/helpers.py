"""
fuzzkit.helpers — String and collection helpers.
"""

import re
from typing import Callable, Hashable, Iterable, Optional, Sequence, TypeVar, Union

from .errors import InvalidArgumentError, ParseError

S = TypeVar("S")
T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

SEGMENT_SIZE = 4


def parse(regex: Union[str, re.Pattern], text: str) -> re.Match:
    """
    Match the whole of `text` against `regex`.

    Returns the match object so that groups can be read off it.
    Raises ParseError if the text does not match.
    """
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    match = pattern.fullmatch(text)
    if match is None:
        raise ParseError(pattern.pattern, text)
    return match


def segment(text: str, size: int = SEGMENT_SIZE) -> str:
    """
    Air out a string by putting a space every `size` characters.

        segment("1234567890") == "1234 5678 90"
    """
    if size < 1:
        raise InvalidArgumentError("size", f"size must be at least 1, got {size}", value=size)
    return " ".join(text[i:i + size] for i in range(0, len(text), size))


def tail(items: Sequence[T]) -> list[T]:
    """A new list holding everything but the first element."""
    if not items:
        raise InvalidArgumentError("items", "Cannot get tail of empty list")
    return list(items[1:])


def non_empty(text: Optional[str]) -> Optional[str]:
    """`text` if it is a non-empty string, else None."""
    return text or None


def inverse(injection: Callable[[S], K], domain: Iterable[S]) -> dict[K, S]:
    """
    The inverse of `injection` on `domain`, as a dict.

    Raises InvalidArgumentError if two elements of the domain share an
    image, since the inverse is then not a function.
    """
    result: dict[K, S] = {}
    for x in domain:
        key = injection(x)
        if key in result:
            raise InvalidArgumentError(
                "injection",
                f"{result[key]!r} and {x!r} both map to {key!r}",
                key=key,
            )
        result[key] = x
    return result


def as_map(function: Callable[[K], T], domain: Iterable[K]) -> dict[K, T]:
    """`function` tabulated over `domain`."""
    return {x: function(x) for x in domain}
