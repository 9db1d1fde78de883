"""
Dense complex matrix algebra.

Operators are square ``complex128`` numpy arrays of dimension 2^k. The
Kronecker ordering used here fixes the bit convention of the whole
machine: the left factor of ``kron(A, B)`` occupies the more significant
bits of the combined index.
"""

from __future__ import annotations

import numpy as np
from numpy import ndarray

from tiny_qvm.errors import DimensionMismatch

# Type alias
Matrix = ndarray

_ONE = np.ones((1, 1), dtype=np.complex128)


def compose(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product ``a @ b`` (apply ``b`` first, then ``a``).

    Raises
    ------
    DimensionMismatch
        If the column count of ``a`` differs from the row count of ``b``.
    """
    if a.shape[1] != b.shape[0]:
        raise DimensionMismatch(
            f"Cannot compose {a.shape[0]}x{a.shape[1]} with "
            f"{b.shape[0]}x{b.shape[1]}"
        )
    return a @ b


def kron(a: Matrix, b: Matrix) -> Matrix:
    """
    Kronecker product.

    For ``a`` of shape (m, n) and ``b`` of shape (p, q) the result has shape
    (m*p, n*q) with entry ``(i*p + k, j*q + l) = a[i, j] * b[k, l]``.
    """
    return np.kron(a, b)


def kron_power(u: Matrix, m: int) -> Matrix:
    """
    m-fold Kronecker power of ``u``.

    ``m < 1`` gives the 1x1 identity. The product accumulates to the right,
    ``kron(kron_power(u, m - 1), u)``.
    """
    if m < 1:
        return _ONE.copy()
    result = u
    for _ in range(m - 1):
        result = kron(result, u)
    return result
