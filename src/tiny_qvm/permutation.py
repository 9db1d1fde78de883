"""
Relabeling of qubits for multi-qubit gates.

A gate on an arbitrary ordered qubit list is reduced to the contiguous case:
the target qubits are moved to the bottom of the register with a chain of
adjacent SWAPs, the gate is lifted at position 0, and the SWAPs are undone.

Permutations use two-line (Cauchy) notation flattened to a list:
``perm[p]`` is the qubit that ends up at position ``p``.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Sequence

from tiny_qvm import gates as g
from tiny_qvm.linalg import Matrix, compose
from tiny_qvm.lift import lift

logger = logging.getLogger(__name__)


def full_permutation(qubits: Sequence[int], n: int) -> list[int]:
    """
    Complete a gate's qubit list to a permutation of ``0 .. n-1``.

    The gate qubits come first in reverse, so that ``qubits[0]`` lands on the
    most significant position of the block ``lift(U, 0, n)`` acts on. The
    remaining qubits follow in ascending order.
    """
    chosen = set(qubits)
    return list(reversed(qubits)) + [q for q in range(n) if q not in chosen]


def perm_to_transpositions(perm: Sequence[int]) -> list[tuple[int, int]]:
    """
    Decompose a permutation into transpositions.

    Each nontrivial cycle is visited once, from its smallest position.
    Every pair is ordered ``(low, high)``; the list is in discovery order and
    composes (first pair outermost) back to ``perm``.
    """
    transpositions = []
    for dest, src in enumerate(perm):
        while src < dest:
            src = perm[src]
        if src > dest:
            transpositions.append((dest, src))
    return transpositions


def transpositions_to_adjacent_swaps(
    transpositions: Sequence[tuple[int, int]],
) -> list[int]:
    """
    Expand transpositions into adjacent swaps.

    A swap ``j`` exchanges positions ``j`` and ``j+1``. ``(low, high)`` becomes
    ``low .. high-1`` followed by ``high-2 .. low``.
    """
    swaps: list[int] = []
    for low, high in transpositions:
        if high - low == 1:
            swaps.append(low)
        else:
            swaps.extend(range(low, high - 1))
            swaps.extend(range(high - 1, low - 1, -1))
    return swaps


def swap_operators(swaps: Sequence[int], n: int) -> tuple[Matrix, Matrix]:
    """
    Compose adjacent swaps into full-system operators.

    Returns ``(to_from, from_to)``: the swaps multiplied left to right, and
    the same factors in reverse, which is its inverse.
    """
    factors = [lift(g.SWAP, j, n) for j in swaps]
    to_from = reduce(compose, factors)
    from_to = reduce(compose, reversed(factors))
    return to_from, from_to


def permuted_operator(u: Matrix, qubits: Sequence[int], n: int) -> Matrix:
    """
    Full-system operator applying ``u`` to ``qubits`` in the given order.

    Callers validate ``qubits`` first; see :func:`tiny_qvm.machine.apply_gate`.
    """
    base = lift(u, 0, n)
    perm = full_permutation(qubits, n)
    swaps = transpositions_to_adjacent_swaps(perm_to_transpositions(perm))
    logger.debug("Qubits %s -> permutation %s -> swaps %s", list(qubits), perm, swaps)
    if not swaps:
        return base
    to_from, from_to = swap_operators(swaps, n)
    return compose(to_from, compose(base, from_to))
