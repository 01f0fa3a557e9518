from __future__ import annotations

import enum

import pytest

from latin_squares import LatinSquare, cyclic, generate, is_latin_square


class Color(enum.Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


def test_single_symbol():
    sq = generate(["X"])
    assert sq.as_lists() == [["X"]]
    assert sq.order == 1


def test_order_three_letters():
    sq = generate(["A", "B", "C"])
    assert sq.as_lists() == [["A", "B", "C"], ["B", "C", "A"], ["C", "A", "B"]]


def test_order_four_integers_rows_and_column():
    sq = generate([1, 2, 3, 4])
    assert sq.rows == ((1, 2, 3, 4), (2, 3, 4, 1), (3, 4, 1, 2), (4, 1, 2, 3))
    assert sq.column(0) == (1, 2, 3, 4)
    assert sorted(sq.column(0)) == [1, 2, 3, 4]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 8, 13])
def test_rows_and_columns_are_permutations(n: int):
    symbols = [f"s{k}" for k in range(n)]
    sq = generate(symbols)
    assert len(sq.rows) == n
    for row in sq.rows:
        assert len(row) == n
        assert sorted(row) == sorted(symbols)
    for col in sq.columns():
        assert sorted(col) == sorted(symbols)
    sq.audit()
    assert is_latin_square(sq.rows)


@pytest.mark.parametrize("symbols", [[3, 1, 2], ["a", "b"], list(Color), [(0, 1), (1, 0), (2, 2)]])
def test_generic_over_symbol_types(symbols):
    sq = generate(symbols)
    assert sq.symbols == tuple(symbols)
    assert sq.row(0) == tuple(symbols)
    sq.audit()


def test_row_i_is_left_rotation_by_i():
    symbols = list("abcdefg")
    n = len(symbols)
    sq = generate(symbols)
    for i in range(n):
        assert list(sq.row(i)) == symbols[i:] + symbols[:i]
        for j in range(n):
            assert sq.cell(i, j) == symbols[(i + j) % n]


def test_deterministic():
    a = generate(["p", "q", "r", "s"])
    b = generate(["p", "q", "r", "s"])
    assert a == b
    assert a.hash() == b.hash()


def test_does_not_retain_caller_list():
    symbols = ["A", "B", "C"]
    sq = generate(symbols)
    symbols[0] = "Z"
    symbols.append("D")
    assert sq.row(0) == ("A", "B", "C")
    assert sq.order == 3


def test_as_lists_is_independent_copy():
    sq = generate([1, 2, 3])
    grid = sq.as_lists()
    grid[0][0] = 99
    assert sq.cell(0, 0) == 1


def test_square_is_immutable():
    sq = generate([1, 2])
    with pytest.raises(AttributeError):
        sq.order = 5  # type: ignore[misc]


def test_accepts_any_sequence():
    assert generate(("x", "y")).rows == (("x", "y"), ("y", "x"))
    assert generate("xy").rows == (("x", "y"), ("y", "x"))


def test_len_and_iter():
    sq = generate([1, 2, 3])
    assert len(sq) == 3
    assert list(sq) == list(sq.rows)


def test_column_out_of_range():
    sq = generate([1, 2, 3])
    with pytest.raises(IndexError):
        sq.column(3)


@pytest.mark.parametrize("k", [-1, -3, 3])
def test_accessors_reject_out_of_range_indices(k: int):
    sq = generate([1, 2, 3])
    with pytest.raises(IndexError):
        sq.row(k)
    with pytest.raises(IndexError):
        sq.column(k)
    with pytest.raises(IndexError):
        sq.cell(k, 0)
    with pytest.raises(IndexError):
        sq.cell(0, k)


@pytest.mark.parametrize("n", [1, 2, 4, 7])
def test_cyclic_uses_integer_symbols(n: int):
    sq = cyclic(n)
    assert isinstance(sq, LatinSquare)
    assert sq.symbols == tuple(range(n))
    assert sq.row(n - 1) == tuple((n - 1 + j) % n for j in range(n))
    sq.audit()


def test_cyclic_rejects_non_positive_order():
    with pytest.raises(ValueError):
        cyclic(0)
    with pytest.raises(ValueError):
        cyclic(-3)


def test_hash_distinguishes_labels():
    squares = [generate(["A", "B", "C"]), generate(["C", "B", "A"]), generate([7, 8, 9]), generate(["x", "y", "z"])]
    hashes = {sq.hash() for sq in squares}
    assert len(hashes) == len(squares)
    assert cyclic(3).hash() != generate(["0", "1", "2"]).hash()
    assert cyclic(3).hash() != cyclic(4).hash()
    assert len(cyclic(3).hash()) == 64


def test_hash_stable_for_same_labels():
    assert generate(["A", "B", "C"]).hash() == generate(("A", "B", "C")).hash()
