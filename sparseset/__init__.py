"""Typed element sets with set algebra, and sparse and dense integer matrices."""

__version__ = "0.1.0"
__all__ = ["elements", "matrix", "demo"]