"""Singly linked list algorithms, spiral and transposed matrices, and small arithmetic helpers."""

__version__ = "0.1.0"

__all__ = ["node", "cycles", "merging", "transform", "matrix", "arith"]