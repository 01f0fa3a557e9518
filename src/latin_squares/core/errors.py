from __future__ import annotations

from collections.abc import Hashable


class InvalidInputError(ValueError):
    """Raised when a symbol set cannot form a Latin square."""


class EmptyInputError(InvalidInputError):
    def __init__(self) -> None:
        super().__init__("symbols must contain at least one element")


class DuplicateSymbolError(InvalidInputError):
    """A symbol occurs more than once in the input.

    `index` is the position of the repeat, `first_index` the position where the
    symbol was first seen.
    """

    def __init__(self, symbol: Hashable, index: int, first_index: int) -> None:
        self.symbol = symbol
        self.index = index
        self.first_index = first_index
        super().__init__(f"duplicate symbol {symbol!r} at index {index} (first seen at index {first_index})")
