"""
tiny-qvm: a minimal quantum abstract machine.

Every gate, on any number of qubits in any order, is compiled to one dense
operator on the full 2^n-dimensional space and applied to the state vector.

Quick Start:
    >>> from tiny_qvm import Gate, Measure, machine_create, run, gates
    >>> program = (Gate(gates.H, [0]), Gate(gates.CNOT, [0, 1]))
    >>> m = run(program, machine_create(2))
    >>> probs = m.probabilities()  # 0.5 on |00⟩ and on |11⟩
"""
import logging

__version__ = "0.1.0"

from tiny_qvm import gates
from tiny_qvm.errors import (
    QVMError,
    DimensionMismatch,
    InvalidQubitIndex,
    NonPowerOfTwoDimension,
)
from tiny_qvm.linalg import compose, kron, kron_power
from tiny_qvm.lift import lift
from tiny_qvm.machine import (
    Gate,
    Measure,
    Instruction,
    Program,
    Machine,
    machine_create,
    apply_gate,
    gate_operator,
    observe,
    run,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Machine
    'Gate',
    'Measure',
    'Instruction',
    'Program',
    'Machine',
    'machine_create',
    'apply_gate',
    'gate_operator',
    'observe',
    'run',
    # Algebra
    'compose',
    'kron',
    'kron_power',
    'lift',
    # Errors
    'QVMError',
    'DimensionMismatch',
    'InvalidQubitIndex',
    'NonPowerOfTwoDimension',
    # Submodules
    'gates',
]
