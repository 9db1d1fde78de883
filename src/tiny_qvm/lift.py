"""
Embedding of a k-qubit operator into an n-qubit space.

``lift(U, i, n)`` pads ``U`` with identities so that it acts on the
contiguous block of qubits ``i .. i+k-1``. The highest qubit of the block
lines up with the most significant index bit of ``U``.
"""

from __future__ import annotations

import numpy as np

from tiny_qvm.errors import InvalidQubitIndex
from tiny_qvm.linalg import Matrix, kron, kron_power
from tiny_qvm.state import qubit_count

_I = np.eye(2, dtype=np.complex128)


def lift(u: Matrix, i: int, n: int) -> Matrix:
    """
    Build ``I^(n-i-k) ⊗ U ⊗ I^i`` on ``n`` qubits.

    Parameters
    ----------
    u : ndarray
        Operator of dimension 2^k.
    i : int
        Lowest qubit of the block the operator acts on.
    n : int
        Number of qubits in the full system.

    Raises
    ------
    InvalidQubitIndex
        If the block ``i .. i+k-1`` does not fit inside ``0 .. n-1``.
    """
    k = qubit_count(u.shape[0])
    if i < 0 or i + k > n:
        raise InvalidQubitIndex(
            f"Cannot lift a {k}-qubit operator to qubit {i} of a {n}-qubit system"
        )
    return kron(kron_power(_I, n - i - k), kron(u, kron_power(_I, i)))
