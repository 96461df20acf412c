"""
fuzzkit.types — Small value wrappers.

    Pair       an immutable 2-tuple with named sides
    Either     Left(value) | Right(value)
    Lazy       a value computed on first use
    ByteView   a mutable window into a bytearray
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .errors import InvalidArgumentError

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
X = TypeVar("X")


# ═══════════════════════════════════════════════════════════════════
#  PAIR
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class Pair(Generic[A, B]):
    """An immutable pair.  Unpacks like a tuple: `a, b = pair`."""
    first: A
    second: B

    @staticmethod
    def fanout(f1: Callable[[X], A], f2: Callable[[X], B]) -> Callable[[X], "Pair[A, B]"]:
        """Combine two functions into one that returns both results."""
        return lambda x: Pair(f1(x), f2(x))

    def map(self, f1: Callable[[A], C], f2: Callable[[B], D]) -> "Pair[C, D]":
        return Pair(f1(self.first), f2(self.second))

    def map_pair(self, fs: "Pair[Callable[[A], C], Callable[[B], D]]") -> "Pair[C, D]":
        return Pair(fs.first(self.first), fs.second(self.second))

    def switched(self) -> "Pair[B, A]":
        return Pair(self.second, self.first)

    def __iter__(self) -> Iterator[Any]:
        yield self.first
        yield self.second

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"


# ═══════════════════════════════════════════════════════════════════
#  EITHER
# ═══════════════════════════════════════════════════════════════════

class Either(Generic[L, R]):
    """Base class of Left and Right.  Not instantiated directly."""
    __slots__ = ()

    @staticmethod
    def left(value: L) -> "Left[L, R]":
        return Left(value)

    @staticmethod
    def right(value: R) -> "Right[L, R]":
        return Right(value)

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    def match(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        raise NotImplementedError

    def map(self, left_fn: Callable[[L], C], right_fn: Callable[[R], D]) -> "Either[C, D]":
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Left(Either[L, R]):
    value: L

    def match(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_left(self.value)

    def map(self, left_fn: Callable[[L], C], right_fn: Callable[[R], D]) -> "Either[C, D]":
        return Left(left_fn(self.value))


@dataclass(frozen=True, slots=True)
class Right(Either[L, R]):
    value: R

    def match(self, on_left: Callable[[L], T], on_right: Callable[[R], T]) -> T:
        return on_right(self.value)

    def map(self, left_fn: Callable[[L], C], right_fn: Callable[[R], D]) -> "Either[C, D]":
        return Right(right_fn(self.value))


# ═══════════════════════════════════════════════════════════════════
#  LAZY
# ═══════════════════════════════════════════════════════════════════

_PENDING = object()


class Lazy(Generic[T]):
    """
    A value computed by `supplier` on the first call to get().

    The supplier is released once it has run.  None is a valid value:
    a supplier returning None still runs only once.
    """
    __slots__ = ("_supplier", "_value")

    def __init__(self, supplier: Callable[[], T]) -> None:
        self._supplier: Optional[Callable[[], T]] = supplier
        self._value: Any = _PENDING

    def get(self) -> T:
        if self._value is _PENDING:
            self._value = self._supplier()
            self._supplier = None
        return self._value

    __call__ = get

    def is_computed(self) -> bool:
        return self._value is not _PENDING

    def get_if_computed(self) -> Optional[T]:
        return self._value if self.is_computed() else None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Lazy):
            return NotImplemented
        if self.is_computed():
            return other.is_computed() and self._value == other._value
        return not other.is_computed() and self._supplier == other._supplier

    def __hash__(self) -> int:
        return hash(self._value) if self.is_computed() else hash(self._supplier)

    def __repr__(self) -> str:
        return f"Lazy({self._value!r})" if self.is_computed() else "Lazy(_)"


# ═══════════════════════════════════════════════════════════════════
#  BYTE VIEW
# ═══════════════════════════════════════════════════════════════════

class ByteView:
    """
    A window of `length` bytes starting at `start` in a shared bytearray.

    Writes go straight through to the underlying buffer, and so are seen
    by every other view on it.  Two views are equal when they cover the
    same window of the same buffer object.
    """
    __slots__ = ("_array", "_start", "_length")

    def __init__(self, array: bytearray, start: int = 0, length: Optional[int] = None) -> None:
        if length is None:
            length = len(array) - start
        if start < 0 or length < 0 or start + length > len(array):
            raise InvalidArgumentError(
                "length",
                f"window [{start}, {start + length}) does not fit a buffer of {len(array)} bytes",
                start=start, length=length, size=len(array),
            )
        self._array = array
        self._start = start
        self._length = length

    def _offset(self, index: int) -> int:
        if not 0 <= index < self._length:
            raise IndexError(index)
        return self._start + index

    def at(self, index: int) -> int:
        return self._array[self._offset(index)]

    def set(self, index: int, value: int) -> None:
        self._array[self._offset(index)] = value

    __getitem__ = at
    __setitem__ = set

    def sub(self, start: int, length: Optional[int] = None) -> "ByteView":
        """A view on part of this one; `start` is relative to this view."""
        if length is None:
            length = self._length - start
        if start < 0 or length < 0 or start + length > self._length:
            raise InvalidArgumentError(
                "length",
                f"window [{start}, {start + length}) does not fit a view of {self._length} bytes",
                start=start, length=length, size=self._length,
            )
        return ByteView(self._array, self._start + start, length)

    def to_bytes(self) -> bytes:
        return bytes(self._array[self._start:self._start + self._length])

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[int]:
        for i in range(self._start, self._start + self._length):
            yield self._array[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteView):
            return NotImplemented
        return (self._array is other._array
                and self._start == other._start
                and self._length == other._length)

    def __hash__(self) -> int:
        return hash((id(self._array), self._start, self._length))

    def __repr__(self) -> str:
        return f"ByteView({list(self)})"
