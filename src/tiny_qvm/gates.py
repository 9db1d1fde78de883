"""
Standard gate matrices.

Gates are plain ``complex128`` numpy arrays; parameterized gates are
callables returning arrays. The machine treats all of them as opaque
operators and never checks unitarity.

For multi-qubit gates the first qubit named in a ``Gate`` instruction maps
to the most significant bit of the matrix index, so in ``CNOT`` on
``[c, t]`` qubit ``c`` is the control.

Gate categories:
    - Single-qubit: I, X, Y, Z, H, S, T
    - Rotations: Rx, Ry, Rz, P (phase)
    - Two-qubit: CNOT/CX, CZ, SWAP, CP (controlled phase)
    - Three-qubit: CCX (Toffoli)
"""

from __future__ import annotations

import numpy as np

from tiny_qvm.linalg import Matrix

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
_SQRT2_INV = 1.0 / np.sqrt(2.0)

# ---------------------------------------------------------------------------
# Single-qubit fixed gates
# ---------------------------------------------------------------------------

I = np.eye(2, dtype=np.complex128)
"""Identity gate."""

X = np.array([[0, 1], [1, 0]], dtype=np.complex128)
"""Pauli-X (NOT) gate."""

Y = np.array([[0, -1j], [1j, 0]], dtype=np.complex128)
"""Pauli-Y gate."""

Z = np.array([[1, 0], [0, -1]], dtype=np.complex128)
"""Pauli-Z gate."""

H = np.array([[1, 1], [1, -1]], dtype=np.complex128) * _SQRT2_INV
"""Hadamard gate."""

S = np.array([[1, 0], [0, 1j]], dtype=np.complex128)
"""S (phase) gate: sqrt(Z)."""

T = np.array([[1, 0], [0, np.exp(1j * np.pi / 4)]], dtype=np.complex128)
"""T gate: sqrt(S)."""

# ---------------------------------------------------------------------------
# Single-qubit parameterized gates
# ---------------------------------------------------------------------------

def Rx(theta: float) -> Matrix:
    """Rotation around X-axis by angle theta."""
    c = np.cos(theta / 2)
    s = np.sin(theta / 2)
    return np.array([[c, -1j * s], [-1j * s, c]], dtype=np.complex128)


def Ry(theta: float) -> Matrix:
    """Rotation around Y-axis by angle theta."""
    c = np.cos(theta / 2)
    s = np.sin(theta / 2)
    return np.array([[c, -s], [s, c]], dtype=np.complex128)


def Rz(phi: float) -> Matrix:
    """Rotation around Z-axis by angle phi."""
    return np.array(
        [[np.exp(-1j * phi / 2), 0], [0, np.exp(1j * phi / 2)]],
        dtype=np.complex128,
    )


def P(lam: float) -> Matrix:
    """Phase gate: diagonal with entries [1, exp(i*lam)]."""
    return np.array([[1, 0], [0, np.exp(1j * lam)]], dtype=np.complex128)


# ---------------------------------------------------------------------------
# Controlled construction
# ---------------------------------------------------------------------------

def controlled(u: Matrix) -> Matrix:
    """
    Add one control qubit to ``u``.

    Returns the block-diagonal ``diag(I, U)``: the new control is the most
    significant qubit and ``u`` acts on the rest when it is |1⟩.
    """
    dim = u.shape[0]
    out = np.eye(2 * dim, dtype=np.complex128)
    out[dim:, dim:] = u
    return out


# ---------------------------------------------------------------------------
# Two-qubit gates (4x4 matrices)
# ---------------------------------------------------------------------------

CNOT = controlled(X)
"""Controlled-NOT (CX) gate."""
CX = CNOT  # alias

CZ = controlled(Z)
"""Controlled-Z gate."""

SWAP = np.array(
    [[1, 0, 0, 0], [0, 0, 1, 0], [0, 1, 0, 0], [0, 0, 0, 1]],
    dtype=np.complex128,
)
"""SWAP gate."""


def CP(lam: float) -> Matrix:
    """Controlled-Phase gate."""
    return controlled(P(lam))


# ---------------------------------------------------------------------------
# Three-qubit gates (8x8 matrices)
# ---------------------------------------------------------------------------

CCX = controlled(CNOT)
"""Toffoli (CCX) gate."""
TOFFOLI = CCX  # alias
