# sparseset

This package provides sets of typed elements. An element can be an integer, a float, a string or a matrix point. The sets support union, intersection and difference. The package also provides integer matrices. A matrix is kept either densely, as a `DenseMatrix`, or sparsely, as a set of matrix points.

## Elements and sets

An element has a type and a value. Two elements are the same when both the type and the value match. An `ElementSet` therefore holds each value only once. It keeps the elements in the order they were first added.

```python
from sparseset.elements import ElementSet, integer_element, string_element

a = ElementSet([integer_element(5), integer_element(4), integer_element(5),
                string_element("Hello")])
b = ElementSet([integer_element(5), string_element("Hello"), integer_element(7)])

len(a)                      # 3, the second 5 is not added again
integer_element(4) in a     # True
print(a.unite(b).format())
print(a.intersect(b).format())
print(a.subtract(b).format())
```

The constructors are:

- `integer_element`
- `float_element`
- `string_element`
- `matrix_point_element(x, y, value)`

They check the type of their arguments and raise `TypeError` on a mismatch. A float element is stored rounded to single precision.

The set methods behave as follows:

- `ElementSet.add` returns `False` when an identical element is already present. It raises `TypeError` for anything that is not an `Element`.
- `ElementSet.remove` raises `KeyError` when the element is absent.
- `unite` returns the elements of the first set, followed by the elements found only in the second.
- `intersect` and `subtract` keep the order of the first set.

`Element.format` gives one line for an element, for example `INTEGER ELEMENT: 5`, `FLOAT ELEMENT: 2.50` or `MATRIX POINT ELEMENT: (1, 2, 3)`. `format_element` does the same, and also accepts `None`. `ElementSet.format` writes a header line, `Elements in the set:`, followed by one line per element.

## Matrices

A sparse matrix is an `ElementSet` of `matrix_point_element(x, y, value)` entries. Here `x` is the column and `y` is the row.

A `DenseMatrix(column_length, row_length)` holds every cell and starts out filled with zeros. You index it as `dense[row, column]`. An index outside the matrix raises `IndexError`. Negative dimensions raise `ValueError`. Two dense matrices compare equal when their sizes and cells match.

```python
from sparseset.elements import ElementSet, matrix_point_element
from sparseset.matrix import (
    add_dense_matrices, add_sparse_matrices, dense_to_sparse, sparse_to_dense,
)

m1 = ElementSet([matrix_point_element(0, 0, 1), matrix_point_element(1, 2, 3),
                 matrix_point_element(2, 2, 4)])
m2 = ElementSet([matrix_point_element(0, 0, 4), matrix_point_element(1, 1, 5),
                 matrix_point_element(2, 2, -4)])

total = add_sparse_matrices(m1, m2, 4, 3)   # entries that sum to zero are dropped
dense = sparse_to_dense(m1, 4, 3)
back = dense_to_sparse(add_dense_matrices(dense, sparse_to_dense(m2, 4, 3)))
```

- `sparse_to_dense` ignores elements that are not matrix points. It also ignores points that fall outside the given size.
- `dense_to_sparse` returns the non-zero cells row by row.
- `add_dense_matrices` raises `ValueError` if the two matrices differ in size.
- `add_sparse_matrices` merges two sets of matrix points:
  - Both sets are expected in ascending `(x, y)` order.
  - Points at the same position are summed, and zero sums are dropped.
  - The dimensions passed in do not limit the result.
  - It raises `TypeError` if a set holds an element that is not a matrix point.

## Demo

The package has a command that builds sample sets and matrices and prints the results:

```
sparseset-demo
```

## Limitations

The package only adds matrices. It offers no other matrix arithmetic, such as multiplication or transposition. It has no way to read or save sets or matrices. All data lives in memory.

## Tests

```
pip install -e .[test]
pytest
```