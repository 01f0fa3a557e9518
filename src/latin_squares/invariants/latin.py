from __future__ import annotations

from collections.abc import Hashable, Sequence


def _is_permutation(line: Sequence[Hashable], symbol_set: set) -> bool:
    return len(line) == len(symbol_set) and set(line) == symbol_set


def check_latin_square(rows: Sequence[Sequence[Hashable]], symbols: Sequence[Hashable] | None = None) -> None:
    """Raise AssertionError unless `rows` is a Latin square.

    When `symbols` is None the first row is taken as the symbol set.
    """
    n = len(rows)
    if n == 0:
        raise AssertionError("square has no rows")
    base = list(rows[0]) if symbols is None else list(symbols)
    symbol_set = set(base)
    if len(base) != n or len(symbol_set) != n:
        raise AssertionError("symbol set must hold exactly n distinct symbols")

    for i, row in enumerate(rows):
        if len(row) != n:
            raise AssertionError(f"row {i} has length {len(row)}, expected {n}")
        if not _is_permutation(row, symbol_set):
            raise AssertionError(f"row {i} is not a permutation of the symbol set")

    for j in range(n):
        col = [row[j] for row in rows]
        if not _is_permutation(col, symbol_set):
            raise AssertionError(f"column {j} is not a permutation of the symbol set")


def is_latin_square(rows: Sequence[Sequence[Hashable]], symbols: Sequence[Hashable] | None = None) -> bool:
    try:
        check_latin_square(rows, symbols)
    except AssertionError:
        return False
    return True
