from __future__ import annotations

import hashlib
import logging
import struct
from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from latin_squares.invariants.latin import check_latin_square

from .symbols import symbol_index, validate_symbols

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)


@dataclass(frozen=True, slots=True)
class LatinSquare(Generic[S]):
    """An immutable n x n grid over n symbols.

    Each symbol appears once in every row and once in every column. Instances are
    produced by `generate` / `cyclic`; the grid is a tuple of row tuples.
    """

    order: int
    symbols: tuple[S, ...]
    rows: tuple[tuple[S, ...], ...]

    def __len__(self) -> int:
        return self.order

    def __iter__(self) -> Iterator[tuple[S, ...]]:
        return iter(self.rows)

    def _check_index(self, kind: str, k: int) -> None:
        # no negative indexing
        if not (0 <= k < self.order):
            raise IndexError(f"{kind} index {k} out of range for order {self.order}")

    def row(self, i: int) -> tuple[S, ...]:
        self._check_index("row", i)
        return self.rows[i]

    def column(self, j: int) -> tuple[S, ...]:
        self._check_index("column", j)
        return tuple(r[j] for r in self.rows)

    def columns(self) -> tuple[tuple[S, ...], ...]:
        return tuple(self.column(j) for j in range(self.order))

    def cell(self, i: int, j: int) -> S:
        self._check_index("row", i)
        self._check_index("column", j)
        return self.rows[i][j]

    def as_lists(self) -> list[list[S]]:
        """Fresh mutable copy of the grid; changes do not touch this square."""
        return [list(r) for r in self.rows]

    def index_grid(self) -> list[list[int]]:
        """Grid of symbol positions in `symbols`. Audits first."""
        self.audit()
        idx = symbol_index(self.symbols)
        return [[idx[s] for s in r] for r in self.rows]

    def _canonical_bytes(self) -> bytes:
        # little-endian uint32 array: [order] + row-major symbol indices,
        # then uint32 length + utf-8 repr of the symbol labels
        flat = [k for r in self.index_grid() for k in r]
        fmt = "<" + "I" * (1 + len(flat))
        labels = repr(self.symbols).encode("utf-8")
        return struct.pack(fmt, self.order, *flat) + struct.pack("<I", len(labels)) + labels

    def hash(self) -> str:
        return hashlib.sha256(self._canonical_bytes()).hexdigest()

    def audit(self) -> None:
        if len(self.symbols) != self.order or len(self.rows) != self.order:
            raise AssertionError("square dimensions do not match its order")
        check_latin_square(self.rows, self.symbols)

    def __str__(self) -> str:
        body = "\n\n".join("   ".join(str(s) for s in r) for r in self.rows)
        return f"Latin square of size {self.order}\n\n{body}"


def generate(symbols: Sequence[S]) -> LatinSquare[S]:
    """Build the cyclic Latin square over `symbols`.

    Row i is `symbols` rotated left by i positions, so cell (i, j) holds
    `symbols[(i + j) % n]`. For a fixed column j, (i + j) % n runs over every residue
    exactly once as i does, which makes every column a permutation as well.

    Raises:
    - EmptyInputError if `symbols` is empty
    - DuplicateSymbolError if a symbol repeats (the input is never deduplicated)
    """
    base = validate_symbols(symbols)
    n = len(base)
    rows = tuple(tuple(base[(i + j) % n] for j in range(n)) for i in range(n))
    logger.debug("generated cyclic latin square of order %d", n)
    return LatinSquare(order=n, symbols=base, rows=rows)


def cyclic(n: int) -> LatinSquare[int]:
    """Cyclic Latin square of order `n` over the integers 0..n-1."""
    if n < 1:
        raise ValueError("n must be >= 1")
    return generate(range(n))
