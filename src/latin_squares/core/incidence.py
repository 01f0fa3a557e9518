from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .square import LatinSquare

S = TypeVar("S", bound=Hashable)

Coordinate = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class IncidenceCube(Generic[S]):
    """Three-dimensional 0/1 view of a Latin square.

    Axes are (row, column, symbol index): cube[x][y][z] == 1 iff cell (x, y) holds
    symbols[z]. A square is Latin exactly when every axis-parallel line of its cube
    holds a single 1.

        0 1        (0, 0, 0), (0, 1, 1)
        1 0   ->   (1, 0, 1), (1, 1, 0)
    """

    size: int
    symbols: tuple[S, ...]
    cube: tuple[tuple[tuple[int, ...], ...], ...]

    @classmethod
    def from_square(cls, square: LatinSquare[S]) -> IncidenceCube[S]:
        n = square.order
        grid = square.index_grid()
        cube = tuple(
            tuple(tuple(1 if z == grid[x][y] else 0 for z in range(n)) for y in range(n)) for x in range(n)
        )
        return cls(size=n, symbols=square.symbols, cube=cube)

    def on_cells(self) -> list[Coordinate]:
        n = self.size
        return [(x, y, z) for x in range(n) for y in range(n) for z in range(n) if self.cube[x][y][z] == 1]

    def audit(self) -> None:
        n = self.size
        if len(self.symbols) != n or len(self.cube) != n:
            raise AssertionError("cube dimensions do not match its size")
        for x in range(n):
            if len(self.cube[x]) != n or any(len(col) != n for col in self.cube[x]):
                raise AssertionError("cube is not n x n x n")
            for y in range(n):
                for z in range(n):
                    if self.cube[x][y][z] not in (0, 1):
                        raise AssertionError(f"improper entry {self.cube[x][y][z]} at ({x}, {y}, {z})")
        for a in range(n):
            for b in range(n):
                if sum(self.cube[a][b][z] for z in range(n)) != 1:
                    raise AssertionError(f"cell ({a}, {b}) does not hold exactly one symbol")
                if sum(self.cube[a][y][b] for y in range(n)) != 1:
                    raise AssertionError(f"symbol {b} does not occur exactly once in row {a}")
                if sum(self.cube[x][a][b] for x in range(n)) != 1:
                    raise AssertionError(f"symbol {b} does not occur exactly once in column {a}")

    def as_latin_square(self) -> LatinSquare[S]:
        """Collapse back to two dimensions. Audits first."""
        self.audit()
        n = self.size
        rows = [[self.symbols[0]] * n for _ in range(n)]
        for x, y, z in self.on_cells():
            rows[x][y] = self.symbols[z]
        return LatinSquare(order=n, symbols=self.symbols, rows=tuple(tuple(r) for r in rows))
