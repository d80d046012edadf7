"""Small demonstration of set and sparse matrix operations."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from sparseset.elements import (
    ElementSet,
    integer_element,
    matrix_point_element,
    string_element,
)
from sparseset.matrix import add_sparse_matrices


def set_demo() -> str:
    """Build two sets and describe them with their union, intersection and difference."""
    set_1 = ElementSet(
        [
            integer_element(5),
            integer_element(4),
            integer_element(5),
            string_element("Hello"),
            string_element("Hello"),
        ]
    )
    set_2 = ElementSet(
        [
            integer_element(5),
            string_element("Hello"),
            integer_element(7),
            integer_element(8),
        ]
    )
    sections = [
        ("Set 1", set_1),
        ("Set 2", set_2),
        ("United Set", set_1.unite(set_2)),
        ("Intersected Set", set_1.intersect(set_2)),
        ("Substructed Set", set_1.subtract(set_2)),
    ]
    return "".join(f"{title}: {members.format()}\n" for title, members in sections)


def matrix_demo() -> str:
    """Add two small sparse matrices and describe the result."""
    sparse_1 = ElementSet(
        [
            matrix_point_element(0, 0, 1),
            matrix_point_element(1, 2, 3),
            matrix_point_element(2, 2, 4),
        ]
    )
    sparse_2 = ElementSet(
        [
            matrix_point_element(0, 0, 4),
            matrix_point_element(1, 1, 5),
            matrix_point_element(2, 2, -4),
        ]
    )
    column_length, row_length = 4, 3
    result = add_sparse_matrices(sparse_1, sparse_2, column_length, row_length)
    return result.format() + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    """Print both demonstrations."""
    parser = argparse.ArgumentParser(
        prog="sparseset", description="Demonstrate set and sparse matrix operations."
    )
    parser.parse_args(argv)
    sys.stdout.write(set_demo())
    sys.stdout.write(matrix_demo())
    return 0