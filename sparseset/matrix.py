"""Dense matrices and sparse matrices held as sets of matrix points."""

from __future__ import annotations

import operator
from typing import Iterator, List, Tuple

from sparseset.elements import (
    Element,
    ElementSet,
    ElementType,
    matrix_point_element,
)


class DenseMatrix:
    """A rectangular grid of integers, indexed as ``matrix[row, column]``."""

    def __init__(self, column_length: int, row_length: int) -> None:
        column_length = operator.index(column_length)
        row_length = operator.index(row_length)
        if column_length < 0 or row_length < 0:
            raise ValueError(
                f"matrix dimensions must be non-negative, got "
                f"{column_length} columns and {row_length} rows"
            )
        self.column_length = column_length
        self.row_length = row_length
        self._rows: List[List[int]] = [
            [0] * column_length for _ in range(row_length)
        ]

    def _locate(self, position: Tuple[int, int]) -> Tuple[int, int]:
        row, column = (operator.index(part) for part in position)
        if not (0 <= row < self.row_length and 0 <= column < self.column_length):
            raise IndexError(
                f"position ({row}, {column}) is outside a "
                f"{self.row_length}x{self.column_length} matrix"
            )
        return row, column

    def __getitem__(self, position: Tuple[int, int]) -> int:
        row, column = self._locate(position)
        return self._rows[row][column]

    def __setitem__(self, position: Tuple[int, int], value: int) -> None:
        row, column = self._locate(position)
        self._rows[row][column] = operator.index(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return (
            self.column_length == other.column_length
            and self.row_length == other.row_length
            and self._rows == other._rows
        )

    def __repr__(self) -> str:
        return (
            f"DenseMatrix(column_length={self.column_length}, "
            f"row_length={self.row_length}, rows={self._rows!r})"
        )


def sparse_to_dense(
    sparse: ElementSet, column_length: int, row_length: int
) -> DenseMatrix:
    """Build a dense matrix from the matrix points of a set.

    Elements that are not matrix points, and points outside the given
    dimensions, are ignored.
    """
    dense = DenseMatrix(column_length, row_length)
    for element in sparse:
        if element.type is not ElementType.MATRIX_POINT:
            continue
        x, y, value = element.data  # type: ignore[misc]
        if 0 <= x < dense.column_length and 0 <= y < dense.row_length:
            dense[y, x] = value
    return dense


def dense_to_sparse(dense: DenseMatrix) -> ElementSet:
    """Return the non-zero entries of a dense matrix as matrix points, row by row."""
    result = ElementSet()
    for y, row in enumerate(dense._rows):
        for x, value in enumerate(row):
            if value != 0:
                result.add(matrix_point_element(x, y, value))
    return result


def add_dense_matrices(dm1: DenseMatrix, dm2: DenseMatrix) -> DenseMatrix:
    """Return the element-wise sum of two matrices of equal dimensions."""
    if dm1.row_length != dm2.row_length or dm1.column_length != dm2.column_length:
        raise ValueError("matrices have different dimensions")
    result = DenseMatrix(dm1.column_length, dm1.row_length)
    result._rows = [
        [a + b for a, b in zip(row1, row2)]
        for row1, row2 in zip(dm1._rows, dm2._rows)
    ]
    return result


def _points(sparse: ElementSet) -> Iterator[Tuple[int, int, int]]:
    for element in sparse:
        if not isinstance(element, Element) or element.type is not ElementType.MATRIX_POINT:
            raise TypeError(f"sparse matrix holds a non matrix point element: {element!r}")
        yield element.data  # type: ignore[misc]


def add_sparse_matrices(
    sm1: ElementSet, sm2: ElementSet, column_length: int, row_length: int
) -> ElementSet:
    """Add two sparse matrices by merging their points.

    Both sets are expected in ascending (x, y) order; points at the same
    position are summed and zero results are dropped. The dimensions are
    accepted for symmetry with the dense operations and do not limit the
    result.
    """
    result = ElementSet()
    first, second = _points(sm1), _points(sm2)
    p1, p2 = next(first, None), next(second, None)

    def keep(x: int, y: int, value: int) -> None:
        if value != 0:
            result.add(matrix_point_element(x, y, value))

    while p1 is not None or p2 is not None:
        if p1 is not None and p2 is not None:
            if p1[:2] == p2[:2]:
                keep(p1[0], p1[1], p1[2] + p2[2])
                p1, p2 = next(first, None), next(second, None)
            elif p1[:2] < p2[:2]:
                keep(*p1)
                p1 = next(first, None)
            else:
                keep(*p2)
                p2 = next(second, None)
        elif p1 is not None:
            keep(*p1)
            p1 = next(first, None)
        else:
            keep(*p2)  # type: ignore[misc]
            p2 = next(second, None)
    return result