"""
State vector engine.

A state is a flat ``complex128`` vector of length 2^n. Amplitude index bit
``q`` holds qubit ``q``, so qubit 0 is the least significant bit.

Memory usage: 2^n * 16 bytes for the vector, 4^n * 16 bytes for a full
operator on it.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy import ndarray

from tiny_qvm.errors import DimensionMismatch, NonPowerOfTwoDimension
from tiny_qvm.linalg import Matrix

logger = logging.getLogger(__name__)

NORM_ATOL = 1e-9
"""Tolerance used by :func:`is_normalized`."""


def qubit_count(dim: int) -> int:
    """
    Number of qubits spanned by a space of dimension ``dim``.

    Raises
    ------
    NonPowerOfTwoDimension
        If ``dim`` is not a positive power of two.
    """
    dim = int(dim)
    if dim < 1 or dim & (dim - 1):
        raise NonPowerOfTwoDimension(f"Dimension {dim} is not a power of 2")
    return dim.bit_length() - 1


def create(n_qubits: int) -> ndarray:
    """Return the |00...0⟩ state on ``n_qubits`` qubits."""
    state = np.zeros(2**n_qubits, dtype=np.complex128)
    state[0] = 1.0
    return state


def apply(op: Matrix, state: ndarray) -> ndarray:
    """
    Replace ``state`` with ``op @ state``.

    The owned buffer is overwritten in place and returned, so references
    held by the caller always see the current amplitudes.

    Raises
    ------
    DimensionMismatch
        If the operator does not match the state length.
    TypeError
        If ``state`` is not a complex array.
    """
    if not np.iscomplexobj(state):
        raise TypeError(f"State must be a complex array, got dtype {state.dtype}")
    if op.ndim != 2 or op.shape[0] != op.shape[1] or op.shape[1] != state.shape[0]:
        raise DimensionMismatch(
            f"Operator of shape {op.shape} cannot act on a state of "
            f"length {state.shape[0]}"
        )
    state[:] = op @ state
    return state


def probabilities(state: ndarray) -> ndarray:
    """Born-rule probabilities |amp_i|^2 for every basis state."""
    return np.abs(state) ** 2


def norm(state: ndarray) -> float:
    """Total probability, sum of |amp_i|^2."""
    return float(np.sum(probabilities(state)))


def is_normalized(state: ndarray, atol: float = NORM_ATOL) -> bool:
    return abs(norm(state) - 1.0) <= atol


def sample(state: ndarray, rng: np.random.Generator) -> int:
    """
    Draw a basis index with probability |amp_i|^2.

    A uniform ``u`` in [0, 1) is reduced by each probability in index order
    and the first index that drives it negative is returned. When rounding
    leaves the total just below ``u`` the scan runs off the end; the last
    index with nonzero probability is returned in that case.
    """
    probs = probabilities(state)
    u = rng.random()
    index = int(np.searchsorted(np.cumsum(probs), u, side="right"))
    if index < len(probs):
        return index

    nonzero = np.flatnonzero(probs)
    fallback = int(nonzero[-1]) if len(nonzero) else len(probs) - 1
    logger.debug(
        "Sampling exhausted u=%r against total %r; falling back to index %d",
        u, float(probs.sum()), fallback,
    )
    return fallback


def collapse(state: ndarray, index: int) -> ndarray:
    """Project ``state`` onto basis vector ``index`` in place."""
    state.fill(0)
    state[index] = 1.0
    return state
