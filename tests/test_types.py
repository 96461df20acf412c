"""
Test suite for fuzzkit.types — Pair, Either, Lazy, ByteView.
"""

import os
import sys

import pytest

# Add parent to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fuzzkit.errors import InvalidArgumentError
from fuzzkit.types import ByteView, Either, Lazy, Left, Pair, Right


# ═══════════════════════════════════════════════════════════════════
#  §1  PAIR
# ═══════════════════════════════════════════════════════════════════

class TestPair:

    def test_fields_and_unpacking(self):
        p = Pair(1, "a")
        assert p.first == 1
        assert p.second == "a"
        first, second = p
        assert (first, second) == (1, "a")

    def test_equality_and_hash(self):
        assert Pair(1, 2) == Pair(1, 2)
        assert Pair(1, 2) != Pair(2, 1)
        assert len({Pair(1, 2), Pair(1, 2), Pair(2, 1)}) == 2

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Pair(1, 2).first = 3

    def test_map(self):
        assert Pair(2, "ab").map(lambda n: n * 10, str.upper) == Pair(20, "AB")

    def test_map_pair(self):
        fs = Pair(lambda n: n + 1, len)
        assert Pair(1, "abc").map_pair(fs) == Pair(2, 3)

    def test_switched(self):
        assert Pair(1, "a").switched() == Pair("a", 1)

    def test_fanout(self):
        stats = Pair.fanout(min, max)
        assert stats([3, 1, 2]) == Pair(1, 3)

    def test_str(self):
        assert str(Pair(1, "a")) == "(1, a)"


# ═══════════════════════════════════════════════════════════════════
#  §2  EITHER
# ═══════════════════════════════════════════════════════════════════

class TestEither:

    def test_constructors(self):
        assert Either.left(1) == Left(1)
        assert Either.right("x") == Right("x")

    def test_sides(self):
        assert Left(1).is_left and not Left(1).is_right
        assert Right(1).is_right and not Right(1).is_left

    def test_left_and_right_differ(self):
        assert Left(1) != Right(1)

    def test_match(self):
        describe = lambda e: e.match(lambda n: f"Number: {n}", lambda s: f"Error: {s}")
        assert describe(Left(1)) == "Number: 1"
        assert describe(Right("division by zero")) == "Error: division by zero"

    def test_map_keeps_side(self):
        assert Left(2).map(lambda n: n * 2, str.upper) == Left(4)
        assert Right("ab").map(lambda n: n * 2, str.upper) == Right("AB")

    def test_none_payload(self):
        """None is a value like any other on both sides."""
        assert Left(None).is_left
        assert Right(None).match(lambda _: "left", lambda _: "right") == "right"

    def test_isinstance(self):
        assert isinstance(Left(1), Either)
        assert isinstance(Right(1), Either)


# ═══════════════════════════════════════════════════════════════════
#  §3  LAZY
# ═══════════════════════════════════════════════════════════════════

class TestLazy:

    def test_computed_once(self):
        calls = []

        def supplier():
            calls.append(1)
            return "value"

        lazy = Lazy(supplier)
        assert not lazy.is_computed()
        assert lazy.get() == "value"
        assert lazy.get() == "value"
        assert lazy() == "value"
        assert len(calls) == 1
        assert lazy.is_computed()

    def test_none_value_computed_once(self):
        calls = []
        lazy = Lazy(lambda: calls.append(1))
        assert lazy.get() is None
        assert lazy.get() is None
        assert len(calls) == 1
        assert lazy.is_computed()

    def test_get_if_computed(self):
        lazy = Lazy(lambda: 5)
        assert lazy.get_if_computed() is None
        lazy.get()
        assert lazy.get_if_computed() == 5

    def test_equality(self):
        supplier = lambda: 3
        assert Lazy(supplier) == Lazy(supplier)
        assert Lazy(supplier) != Lazy(lambda: 3)

        a, b = Lazy(lambda: 3), Lazy(lambda: 3)
        a.get()
        assert a != b
        b.get()
        assert a == b
        assert hash(a) == hash(b)

    def test_repr(self):
        lazy = Lazy(lambda: "x")
        assert repr(lazy) == "Lazy(_)"
        lazy.get()
        assert repr(lazy) == "Lazy('x')"

    def test_supplier_errors_propagate(self):
        def broken():
            raise RuntimeError("boom")

        lazy = Lazy(broken)
        with pytest.raises(RuntimeError):
            lazy.get()
        assert not lazy.is_computed()


# ═══════════════════════════════════════════════════════════════════
#  §4  BYTE VIEW
# ═══════════════════════════════════════════════════════════════════

class TestByteView:

    def test_whole_buffer(self):
        view = ByteView(bytearray(b"hello"))
        assert len(view) == 5
        assert view.at(1) == ord("e")
        assert view.to_bytes() == b"hello"
        assert list(view) == list(b"hello")

    def test_window(self):
        view = ByteView(bytearray(b"hello world"), 6, 5)
        assert view.to_bytes() == b"world"
        assert view[0] == ord("w")

    def test_writes_are_shared(self):
        buf = bytearray(b"abcdef")
        view = ByteView(buf, 2, 3)
        view.set(0, ord("X"))
        view[2] = ord("Y")
        assert buf == bytearray(b"abXdYf")

    def test_sub_is_relative(self):
        view = ByteView(bytearray(b"0123456789"), 2, 6)
        assert view.sub(1, 3).to_bytes() == b"345"
        assert view.sub(4).to_bytes() == b"67"

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_index_out_of_range(self, index):
        view = ByteView(bytearray(b"abcdef"), 1, 3)
        with pytest.raises(IndexError):
            view.at(index)
        with pytest.raises(IndexError):
            view.set(index, 0)

    @pytest.mark.parametrize("start,length", [(-1, 2), (2, 10), (0, -1)])
    def test_bad_window(self, start, length):
        with pytest.raises(InvalidArgumentError):
            ByteView(bytearray(b"abcd"), start, length)

    def test_bad_sub_window(self):
        view = ByteView(bytearray(b"abcdef"), 1, 3)
        with pytest.raises(InvalidArgumentError):
            view.sub(2, 2)

    def test_equality_is_by_buffer_identity(self):
        buf = bytearray(b"abc")
        assert ByteView(buf, 0, 2) == ByteView(buf, 0, 2)
        assert ByteView(buf, 0, 2) != ByteView(buf, 1, 2)
        assert ByteView(buf) != ByteView(bytearray(b"abc"))
        assert hash(ByteView(buf, 0, 2)) == hash(ByteView(buf, 0, 2))

    def test_repr(self):
        assert repr(ByteView(bytearray(b"\x01\x02"))) == "ByteView([1, 2])"
