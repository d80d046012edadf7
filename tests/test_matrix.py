import pytest

from sparseset.elements import (
    ElementSet,
    integer_element,
    matrix_point_element,
    string_element,
)
from sparseset.matrix import (
    DenseMatrix,
    add_dense_matrices,
    add_sparse_matrices,
    dense_to_sparse,
    sparse_to_dense,
)


def _sparse(*points):
    return ElementSet(matrix_point_element(*p) for p in points)


def _data(sparse):
    return [element.data for element in sparse]


def test_new_dense_matrix_is_all_zero():
    dense = DenseMatrix(4, 3)
    assert dense.column_length == 4
    assert dense.row_length == 3
    assert all(dense[r, c] == 0 for r in range(3) for c in range(4))


def test_setitem_and_getitem():
    dense = DenseMatrix(2, 2)
    dense[1, 0] = 7
    assert dense[1, 0] == 7
    assert dense[0, 1] == 0


@pytest.mark.parametrize("position", [(3, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_index_raises(position):
    dense = DenseMatrix(4, 3)
    with pytest.raises(IndexError):
        _ = dense[position]
    with pytest.raises(IndexError):
        dense[position] = 1
    assert _data(dense_to_sparse(dense)) == []
    assert dense == DenseMatrix(4, 3)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        DenseMatrix(-1, 2)


def test_sparse_to_dense_places_points_by_column_and_row():
    dense = sparse_to_dense(_sparse((0, 0, 1), (1, 2, 3), (2, 2, 4)), 4, 3)
    assert dense[0, 0] == 1
    assert dense[2, 1] == 3
    assert dense[2, 2] == 4
    assert dense[1, 2] == 0


def test_sparse_to_dense_ignores_out_of_range_and_other_types():
    sparse = ElementSet(
        [
            matrix_point_element(5, 0, 9),
            matrix_point_element(0, 9, 9),
            integer_element(3),
            string_element("Hello"),
            matrix_point_element(1, 1, 2),
        ]
    )
    dense = sparse_to_dense(sparse, 4, 3)
    assert _data(dense_to_sparse(dense)) == [(1, 1, 2)]


def test_dense_to_sparse_round_trip():
    dense = DenseMatrix(3, 2)
    dense[0, 2] = 5
    dense[1, 0] = -3
    sparse = dense_to_sparse(dense)
    assert _data(sparse) == [(2, 0, 5), (0, 1, -3)]
    assert sparse_to_dense(sparse, 3, 2) == dense


def test_dense_to_sparse_skips_zeros():
    assert len(dense_to_sparse(DenseMatrix(3, 3))) == 0


def test_add_dense_matrices():
    a = sparse_to_dense(_sparse((0, 0, 1), (1, 1, 2)), 2, 2)
    b = sparse_to_dense(_sparse((0, 0, 4), (1, 0, 6)), 2, 2)
    total = add_dense_matrices(a, b)
    assert total[0, 0] == 1 + 4
    assert total[0, 1] == 6
    assert total[1, 1] == 2
    assert total[1, 0] == 0
    assert a[0, 0] == 1


def test_add_dense_matrices_dimension_mismatch():
    with pytest.raises(ValueError):
        add_dense_matrices(DenseMatrix(2, 3), DenseMatrix(3, 2))


def test_add_sparse_matrices_worked_example():
    sm1 = _sparse((0, 0, 1), (1, 2, 3), (2, 2, 4))
    sm2 = _sparse((0, 0, 4), (1, 1, 5), (2, 2, -4))
    result = add_sparse_matrices(sm1, sm2, 4, 3)
    assert _data(result) == [(0, 0, 5), (1, 1, 5), (1, 2, 3)]


def test_add_sparse_matches_dense_addition():
    sm1 = _sparse((0, 1, 2), (1, 0, 3), (2, 2, 7), (3, 1, -1))
    sm2 = _sparse((0, 0, 1), (1, 0, -3), (2, 2, 1), (3, 2, 6))
    sparse_sum = add_sparse_matrices(sm1, sm2, 4, 3)
    dense_sum = add_dense_matrices(
        sparse_to_dense(sm1, 4, 3), sparse_to_dense(sm2, 4, 3)
    )
    assert set(_data(sparse_sum)) == set(_data(dense_to_sparse(dense_sum)))
    assert sparse_to_dense(sparse_sum, 4, 3) == dense_sum


def test_add_sparse_with_empty_is_copy():
    sm1 = _sparse((0, 0, 1), (2, 1, 8))
    assert _data(add_sparse_matrices(sm1, ElementSet(), 3, 2)) == _data(sm1)
    assert _data(add_sparse_matrices(ElementSet(), sm1, 3, 2)) == _data(sm1)


def test_add_sparse_drops_zero_values():
    sm1 = _sparse((0, 0, 0), (1, 1, 2))
    sm2 = _sparse((1, 1, -2))
    assert len(add_sparse_matrices(sm1, sm2, 2, 2)) == 0


def test_add_sparse_rejects_non_point_elements():
    with pytest.raises(TypeError):
        add_sparse_matrices(ElementSet([integer_element(1)]), ElementSet(), 2, 2)