"""
The quantum abstract machine and its interpreter.

A :class:`Machine` owns an n-qubit state vector and an integer measurement
register. A program is a sequence of two kinds of instruction, :class:`Gate`
and :class:`Measure`, executed in order by :func:`run`.

Example
-------
>>> from tiny_qvm import Gate, Measure, machine_create, run
>>> from tiny_qvm import gates as g
>>> program = (Gate(g.H, [0]), Gate(g.CNOT, [0, 1]), Measure())
>>> m = run(program, machine_create(2, seed=7))
>>> m.register in (0, 3)
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from operator import index
from typing import Iterable, Sequence, Union

import numpy as np
from numpy import ndarray

from tiny_qvm import state as sv
from tiny_qvm.errors import DimensionMismatch, InvalidQubitIndex
from tiny_qvm.lift import lift
from tiny_qvm.linalg import Matrix
from tiny_qvm.permutation import permuted_operator

logger = logging.getLogger(__name__)

MAX_QUBITS = 10
"""Default ceiling on machine size; a full operator holds 4^n entries."""


# ---------------------------------------------------------------------------
# Instructions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Gate:
    """Apply ``operator`` to ``qubits``, the first qubit being most significant."""
    operator: Matrix
    qubits: tuple[int, ...]

    def __post_init__(self) -> None:
        op = np.array(self.operator, dtype=np.complex128)
        op.flags.writeable = False
        object.__setattr__(self, "operator", op)
        object.__setattr__(self, "qubits", tuple(_qubit_index(q) for q in self.qubits))

    def __repr__(self) -> str:
        return f"Gate(dim={self.operator.shape[0]}, qubits={list(self.qubits)})"


@dataclass(frozen=True)
class Measure:
    """Measure every qubit into the register, collapsing the state."""


def _qubit_index(q) -> int:
    try:
        return index(q)
    except TypeError:
        raise InvalidQubitIndex(f"Qubit index must be an integer, got {q!r}") from None


Instruction = Union[Gate, Measure]
Program = tuple[Instruction, ...]


# ---------------------------------------------------------------------------
# Machine
# ---------------------------------------------------------------------------

@dataclass
class Machine:
    """
    State vector plus classical measurement register.

    Attributes
    ----------
    state : ndarray
        Amplitudes, ``complex128`` of length 2^n. Mutated in place.
    register : int
        Basis index observed by the last measurement.
    rng : numpy.random.Generator
        Source of randomness for measurement.
    """

    state: ndarray
    register: int = 0
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    @property
    def n_qubits(self) -> int:
        return sv.qubit_count(len(self.state))

    def probabilities(self) -> ndarray:
        return sv.probabilities(self.state)

    def __repr__(self) -> str:
        return f"Machine(qubits={self.n_qubits}, register={self.register})"


def machine_create(
    n_qubits: int,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    max_qubits: int = MAX_QUBITS,
) -> Machine:
    """
    Create a machine in state |00...0⟩ with a zeroed register.

    Parameters
    ----------
    n_qubits : int
        Number of qubits, between 1 and ``max_qubits``.
    seed : int, optional
        Seed for a fresh ``numpy.random.default_rng``. Ignored if ``rng``
        is given.
    rng : numpy.random.Generator, optional
        Generator to draw measurement outcomes from.
    max_qubits : int
        Size ceiling for this machine.
    """
    if not 1 <= n_qubits <= max_qubits:
        raise ValueError(f"Need between 1 and {max_qubits} qubits, got {n_qubits}")
    if rng is None:
        rng = np.random.default_rng(seed)
    return Machine(state=sv.create(n_qubits), rng=rng)


# ---------------------------------------------------------------------------
# Gate dispatch
# ---------------------------------------------------------------------------

def _validate(u: Matrix, qubits: Sequence[int], n: int) -> None:
    qubits = [_qubit_index(q) for q in qubits]
    if u.ndim != 2 or u.shape[0] != u.shape[1]:
        raise DimensionMismatch(f"Operator must be square, got shape {u.shape}")
    k = sv.qubit_count(u.shape[0])
    if len(qubits) != k:
        raise DimensionMismatch(
            f"{k}-qubit operator given {len(qubits)} qubit(s): {list(qubits)}"
        )
    for q in qubits:
        if not 0 <= q < n:
            raise InvalidQubitIndex(f"Qubit {q} out of range for {n}-qubit machine")
    if len(set(qubits)) != len(qubits):
        raise InvalidQubitIndex(f"Duplicate qubits in {list(qubits)}")


def gate_operator(u: Matrix, qubits: Sequence[int], n: int) -> Matrix:
    """
    Full ``2^n x 2^n`` operator for ``u`` acting on ``qubits``.

    Raises
    ------
    DimensionMismatch
        If ``u`` is not square or its size disagrees with ``len(qubits)``.
    NonPowerOfTwoDimension
        If ``u`` is not 2^k on a side.
    InvalidQubitIndex
        If a qubit is out of range or repeated.
    """
    _validate(u, qubits, n)
    if len(qubits) == 1:
        return lift(u, qubits[0], n)
    return permuted_operator(u, qubits, n)


def apply_gate(state: ndarray, u: Matrix, qubits: Sequence[int]) -> ndarray:
    """Apply ``u`` to ``qubits`` of ``state`` in place and return it."""
    n = sv.qubit_count(len(state))
    return sv.apply(gate_operator(u, qubits, n), state)


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------

def observe(machine: Machine) -> Machine:
    """
    Measure all qubits.

    Samples a basis index, collapses the state onto it and stores it in the
    register.
    """
    index = sv.sample(machine.state, machine.rng)
    sv.collapse(machine.state, index)
    machine.register = index
    logger.debug("Measured basis state %d", index)
    return machine


# ---------------------------------------------------------------------------
# Interpreter
# ---------------------------------------------------------------------------

def run(program: Iterable[Instruction], machine: Machine) -> Machine:
    """
    Execute ``program`` on ``machine`` and return the same machine.

    The first error aborts execution and propagates; gates applied before it
    stay applied.
    """
    for step, inst in enumerate(program):
        logger.debug("Step %d: %r", step, inst)
        if isinstance(inst, Gate):
            apply_gate(machine.state, inst.operator, inst.qubits)
        elif isinstance(inst, Measure):
            observe(machine)
        else:
            raise TypeError(f"Unknown instruction: {inst!r}")
    return machine
