"""Shared fixtures for tiny-qvm tests."""

import numpy as np
import pytest


def _random_unitary(rng, dim):
    z = rng.normal(size=(dim, dim)) + 1j * rng.normal(size=(dim, dim))
    q, r = np.linalg.qr(z)
    return q * (np.diag(r) / np.abs(np.diag(r)))


def _random_state(rng, n):
    v = rng.normal(size=2**n) + 1j * rng.normal(size=2**n)
    return v / np.linalg.norm(v)


def _reference_apply(u, qubits, state):
    """
    Apply ``u`` to ``qubits`` by tensor contraction, without building the
    full operator. Qubit q is index bit q, i.e. tensor axis n-1-q; the first
    listed qubit is the gate's most significant (leading) axis.
    """
    n = int(np.log2(len(state)))
    k = len(qubits)
    psi = np.asarray(state).reshape([2] * n)
    gate = np.asarray(u).reshape([2] * (2 * k))
    axes = [n - 1 - q for q in qubits]
    out = np.tensordot(gate, psi, axes=(list(range(k, 2 * k)), axes))
    out = np.moveaxis(out, list(range(k)), axes)
    return out.reshape(-1)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_unitary():
    return _random_unitary


@pytest.fixture
def random_state():
    return _random_state


@pytest.fixture
def reference_apply():
    return _reference_apply
