"""Integer matrix products and modular matrix powers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence

Matrix = list[list[int]]

DEFAULT_MODULUS = 1000


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def _check_modulus(modulus: int | None) -> None:
    if modulus is not None and modulus <= 0:
        raise ValueError("modulus must be positive")


def _reduce(matrix: Sequence[Sequence[int]], modulus: int | None) -> Matrix:
    if modulus is None:
        return [list(row) for row in matrix]
    return [[value % modulus for value in row] for row in matrix]


def multiply(
    left: Sequence[Sequence[int]],
    right: Sequence[Sequence[int]],
    modulus: int | None = None,
) -> Matrix:
    """Return the product of two matrices, reduced by modulus when given."""
    _check_modulus(modulus)
    _, inner = _shape(left)
    right_rows, _ = _shape(right)
    if inner != right_rows:
        raise ValueError(
            f"cannot multiply: left has {inner} columns, right has {right_rows} rows"
        )
    columns = list(zip(*right))
    product = [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in left
    ]
    return _reduce(product, modulus)


def _check_power(matrix: Sequence[Sequence[int]], exponent: int) -> None:
    rows, cols = _shape(matrix)
    if rows != cols:
        raise ValueError("only square matrices can be raised to a power")
    if exponent < 1:
        raise ValueError("exponent must be at least 1")


def power_naive(
    matrix: Sequence[Sequence[int]],
    exponent: int,
    modulus: int | None = DEFAULT_MODULUS,
) -> Matrix:
    """Raise a square matrix to a power by repeated multiplication."""
    _check_power(matrix, exponent)
    _check_modulus(modulus)
    result = _reduce(matrix, modulus)
    for _ in range(exponent - 1):
        result = multiply(matrix, result, modulus)
    return result


def power(
    matrix: Sequence[Sequence[int]],
    exponent: int,
    modulus: int | None = DEFAULT_MODULUS,
) -> Matrix:
    """Raise a square matrix to a power by repeated squaring."""
    _check_power(matrix, exponent)
    _check_modulus(modulus)
    base = _reduce(matrix, modulus)
    result: Matrix | None = None
    while True:
        if exponent & 1:
            result = base if result is None else multiply(result, base, modulus)
        exponent >>= 1
        if not exponent:
            break
        base = multiply(base, base, modulus)
    return result


def _read(tokens: Iterator[int], count: int) -> list[int]:
    values = [next(tokens, None) for _ in range(count)]
    if None in values:
        raise SystemExit("unexpected end of input")
    return values  # type: ignore[return-value]


def _read_matrix(tokens: Iterator[int], rows: int, cols: int) -> Matrix:
    return [_read(tokens, cols) for _ in range(rows)]


def _print_matrix(matrix: Matrix) -> None:
    for row in matrix:
        print("".join(f"{value} " for value in row))


def main(argv: Sequence[str] | None = None) -> int:
    """Read matrices from standard input and print a product or a power."""
    parser = argparse.ArgumentParser(
        prog="studykit-matrix", description="Matrix products and powers."
    )
    parser.add_argument(
        "operation",
        choices=("multiply", "power", "power-naive"),
        help="multiply: N M A M K B; power: N B then an N by N matrix",
    )
    args = parser.parse_args(argv)
    tokens = iter(int(token) for token in sys.stdin.read().split())

    if args.operation == "multiply":
        rows, inner = _read(tokens, 2)
        left = _read_matrix(tokens, rows, inner)
        right_rows, cols = _read(tokens, 2)
        if inner != right_rows:
            sys.stdout.write("it can't be calculated\n!")
            return 0
        right = _read_matrix(tokens, right_rows, cols)
        _print_matrix(multiply(left, right))
    else:
        size, exponent = _read(tokens, 2)
        matrix = _read_matrix(tokens, size, size)
        raise_to = power if args.operation == "power" else power_naive
        _print_matrix(raise_to(matrix, exponent, DEFAULT_MODULUS))
    return 0


if __name__ == "__main__":
    sys.exit(main())