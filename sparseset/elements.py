"""Typed elements and an insertion-ordered set of distinct elements."""

from __future__ import annotations

import enum
import operator
import struct
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple, Union

MatrixPoint = Tuple[int, int, int]
ElementData = Union[int, float, str, MatrixPoint]


class ElementType(enum.Enum):
    """Kinds of value an element may hold."""

    INTEGER = "INTEGER"
    FLOAT = "FLOAT"
    STRING = "STRING"
    MATRIX_POINT = "MATRIX_POINT"


def _to_single_precision(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    return struct.unpack("f", struct.pack("f", float(value)))[0]


@dataclass(frozen=True)
class Element:
    """A typed value; two elements are the same when type and data match."""

    type: ElementType
    data: ElementData

    def is_same(self, other: object) -> bool:
        """Return True if `other` is an element of the same type and value."""
        if not isinstance(other, Element):
            return False
        return self.type is other.type and self.data == other.data

    def format(self) -> str:
        """Return the one-line description of this element."""
        if self.type is ElementType.INTEGER:
            return f"INTEGER ELEMENT: {self.data}"
        if self.type is ElementType.FLOAT:
            return f"FLOAT ELEMENT: {self.data:.2f}"
        if self.type is ElementType.STRING:
            return f"STRING ELEMENT: {self.data}"
        x, y, value = self.data  # type: ignore[misc]
        return f"MATRIX POINT ELEMENT: ({x}, {y}, {value})"


def integer_element(value: int) -> Element:
    """Create an integer element."""
    return Element(ElementType.INTEGER, operator.index(value))


def float_element(value: float) -> Element:
    """Create a float element stored with single precision."""
    if isinstance(value, str) or not isinstance(value, (int, float)):
        raise TypeError(f"float element needs a number, got {type(value).__name__}")
    return Element(ElementType.FLOAT, _to_single_precision(value))


def string_element(value: str) -> Element:
    """Create a string element."""
    if not isinstance(value, str):
        raise TypeError(f"string element needs a str, got {type(value).__name__}")
    return Element(ElementType.STRING, value)


def matrix_point_element(x: int, y: int, value: int) -> Element:
    """Create a matrix point element holding column x, row y and a value."""
    point = (operator.index(x), operator.index(y), operator.index(value))
    return Element(ElementType.MATRIX_POINT, point)


def format_element(element: Optional[Element]) -> str:
    """Describe an element, or report that there is none."""
    if element is None:
        return "Null element. Failed to print."
    return element.format()


class ElementSet:
    """Distinct elements kept in the order they were first added."""

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._elements: list[Element] = []
        for element in elements:
            self.add(element)

    def add(self, element: Element) -> bool:
        """Add an element; return False if an identical one is already present."""
        if not isinstance(element, Element):
            raise TypeError(f"expected an Element, got {type(element).__name__}")
        if element in self:
            return False
        self._elements.append(element)
        return True

    def remove(self, element: Element) -> None:
        """Remove the element identical to `element`; raise KeyError if absent."""
        for position, member in enumerate(self._elements):
            if member.is_same(element):
                del self._elements[position]
                return
        raise KeyError(element)

    def __contains__(self, element: object) -> bool:
        return any(member.is_same(element) for member in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __repr__(self) -> str:
        return f"ElementSet({self._elements!r})"

    def unite(self, other: ElementSet) -> ElementSet:
        """Return the elements of this set followed by those only in `other`."""
        return ElementSet([*self, *other])

    def intersect(self, other: ElementSet) -> ElementSet:
        """Return the elements of this set that are also in `other`."""
        return ElementSet(element for element in self if element in other)

    def subtract(self, other: ElementSet) -> ElementSet:
        """Return the elements of this set that are not in `other`."""
        return ElementSet(element for element in self if element not in other)

    def format(self) -> str:
        """Return a header line followed by one line per element."""
        lines = ["Elements in the set:"]
        lines.extend(element.format() for element in self)
        return "\n".join(lines) + "\n"