"""
Error kinds raised by the virtual machine.

All of them are fatal to the current run: the library never retries or
recovers, it raises at the point of detection and lets the caller decide.
Each kind derives from :class:`QVMError`, which is itself a ``ValueError``.
"""

from __future__ import annotations


class QVMError(ValueError):
    """Base class for machine errors."""


class DimensionMismatch(QVMError):
    """Operator and operand sizes disagree."""


class InvalidQubitIndex(QVMError):
    """A qubit index is out of range or repeated within one gate."""


class NonPowerOfTwoDimension(QVMError):
    """A state or operator dimension is not a power of two."""
