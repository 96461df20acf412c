"""
fuzzkit.core — Wildcard Edit Distance
=====================================

§1  THE METRIC
──────────────

The distance between a PATTERN and a SUBJECT is the minimum cost of an
order-preserving alignment of their characters, where:

    • a character left without a partner on either side costs 1
    • a matched pair costs char_cost(p, s), which is 0 or 1

char_cost is ordinary equality with one extension: the wildcard '_'
in the pattern matches any ASCII digit in the subject for free.

    Mary--- had a little lamb.
    Marylin had a cut--e lamb.

Five characters are unmatched (the dashes) and two pairs mismatch
("li" against "cu"), so d = 7.


§2  ASYMMETRY
─────────────

The wildcard only means something in the FIRST argument:

    d("_23", "123") = 0
    d("123", "_23") = 1      ('_' in the subject is a literal)

d is therefore not a metric in the strict sense.  It is non-negative,
d(x, x) = 0, and d("", s) = d(s, "") = len(s), but d(p, s) and d(s, p)
may differ.


§3  THE RECURRENCE
──────────────────

    D[0][j] = j
    D[i][0] = i
    D[i][j] = min(
        D[i-1][j-1] + char_cost(p[i-1], s[j-1]),    # match / mismatch
        D[i-1][j]   + 1,                            # p[i-1] unmatched
        D[i][j-1]   + 1,                            # s[j-1] unmatched
    )

    d(p, s) = D[m][n]

Row i depends only on row i-1 and the already-filled part of row i, so
distance() keeps two rows of length n + 1: O(m·n) time, O(n) memory.
align() keeps the whole table because it needs it for the trace-back.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence


# ═══════════════════════════════════════════════════════════════════
#  CHARACTER COST
# ═══════════════════════════════════════════════════════════════════

WILDCARD = "_"
DIGITS = frozenset("0123456789")


def is_ascii_digit(ch: str) -> bool:
    """True for '0'..'9' only.  str.isdigit() would accept '٣' and '²'."""
    return ch in DIGITS


def char_cost(pattern_char: str, subject_char: str) -> int:
    """
    Cost of matching one pattern character with one subject character.

    0 if they are equal, or if pattern_char is the wildcard and
    subject_char is an ASCII digit.  1 otherwise.  The order of the
    arguments matters.
    """
    if pattern_char == subject_char:
        return 0
    if pattern_char == WILDCARD and is_ascii_digit(subject_char):
        return 0
    return 1


# ═══════════════════════════════════════════════════════════════════
#  DISTANCE
# ═══════════════════════════════════════════════════════════════════

def distance(pattern: Sequence[str], subject: Sequence[str]) -> int:
    """
    Wildcard edit distance between `pattern` and `subject`.

    Underscores in the pattern are read as digit wildcards.  Defined for
    every pair of finite strings, empty ones included; never raises for
    string input.
    """
    m = len(pattern)
    n = len(subject)

    if m == 0:
        return n
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        p = pattern[i - 1]
        curr[0] = i
        for j in range(1, n + 1):
            curr[j] = min(
                prev[j - 1] + char_cost(p, subject[j - 1]),
                prev[j] + 1,
                curr[j - 1] + 1,
            )
        prev, curr = curr, prev

    return prev[n]


def normalized_distance(pattern: Sequence[str], subject: Sequence[str]) -> float:
    """
    distance() scaled into [0, 1] by the length of the longer input.

    0.0 = identical (or both empty)
    1.0 = nothing lines up
    """
    longest = max(len(pattern), len(subject))
    if longest == 0:
        return 0.0
    return distance(pattern, subject) / longest


# ═══════════════════════════════════════════════════════════════════
#  ALIGNMENT (trace-back)
# ═══════════════════════════════════════════════════════════════════

class EditOp(Enum):
    """How one step of an alignment treats its characters."""
    EQUAL = auto()      # Matched at cost 0 (equal, or wildcard on digit)
    REPLACE = auto()    # Matched at cost 1
    DELETE = auto()     # Pattern char left unmatched
    INSERT = auto()     # Subject char left unmatched


@dataclass(frozen=True)
class EditEntry:
    """One column of an alignment."""
    op: EditOp
    pattern_index: Optional[int] = None
    subject_index: Optional[int] = None
    pattern_char: Optional[str] = None
    subject_char: Optional[str] = None

    @property
    def cost(self) -> int:
        return 0 if self.op is EditOp.EQUAL else 1

    def __repr__(self) -> str:
        if self.op is EditOp.DELETE:
            return f"DELETE p[{self.pattern_index}]={self.pattern_char!r}"
        if self.op is EditOp.INSERT:
            return f"INSERT s[{self.subject_index}]={self.subject_char!r}"
        return (
            f"{self.op.name} p[{self.pattern_index}]={self.pattern_char!r}"
            f" ~ s[{self.subject_index}]={self.subject_char!r}"
        )


def align(pattern: Sequence[str], subject: Sequence[str]) -> list[EditEntry]:
    """
    An optimal alignment of `pattern` against `subject`, left to right.

    Meant for debugging and explaining a distance: the sum of the entry
    costs equals distance(pattern, subject).  When several alignments are
    optimal, matches are preferred over unmatched characters.
    """
    m = len(pattern)
    n = len(subject)

    # Full DP table (needed for trace-back)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for j in range(1, n + 1):
        dp[0][j] = j
    for i in range(1, m + 1):
        dp[i][0] = i

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            dp[i][j] = min(
                dp[i - 1][j - 1] + char_cost(pattern[i - 1], subject[j - 1]),
                dp[i - 1][j] + 1,
                dp[i][j - 1] + 1,
            )

    ops: list[EditEntry] = []
    i, j = m, n
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            cost = char_cost(pattern[i - 1], subject[j - 1])
            if dp[i][j] == dp[i - 1][j - 1] + cost:
                ops.append(EditEntry(
                    EditOp.EQUAL if cost == 0 else EditOp.REPLACE,
                    i - 1, j - 1, pattern[i - 1], subject[j - 1],
                ))
                i -= 1
                j -= 1
                continue

        if i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            ops.append(EditEntry(EditOp.DELETE, pattern_index=i - 1,
                                 pattern_char=pattern[i - 1]))
            i -= 1
            continue

        ops.append(EditEntry(EditOp.INSERT, subject_index=j - 1,
                             subject_char=subject[j - 1]))
        j -= 1

    ops.reverse()
    return ops
