from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from typing import TypeVar

from .errors import DuplicateSymbolError, EmptyInputError

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)


def validate_symbols(symbols: Sequence[S]) -> tuple[S, ...]:
    """Return the symbols as a tuple, or raise if they cannot index a Latin square.

    Scans the whole input before returning; nothing is built from a rejected set.
    """
    base = tuple(symbols)
    if not base:
        logger.debug("rejected empty symbol set")
        raise EmptyInputError()

    seen: dict[S, int] = {}
    for i, sym in enumerate(base):
        first = seen.setdefault(sym, i)
        if first != i:
            logger.debug("rejected duplicate symbol %r at %d (first at %d)", sym, i, first)
            raise DuplicateSymbolError(sym, i, first)
    return base


def symbol_index(symbols: Sequence[S]) -> dict[S, int]:
    # symbol -> position in the base sequence
    return {sym: i for i, sym in enumerate(symbols)}
