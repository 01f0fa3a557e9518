"""Latin square generation."""

from .core.errors import DuplicateSymbolError, EmptyInputError, InvalidInputError
from .core.incidence import IncidenceCube
from .core.square import LatinSquare, cyclic, generate
from .invariants.latin import check_latin_square, is_latin_square

__all__ = [
    "LatinSquare",
    "IncidenceCube",
    "generate",
    "cyclic",
    "check_latin_square",
    "is_latin_square",
    "InvalidInputError",
    "EmptyInputError",
    "DuplicateSymbolError",
]
