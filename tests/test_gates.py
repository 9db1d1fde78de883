"""Tests for quantum gate definitions."""

import numpy as np
import pytest

from tiny_qvm import gates as g


# ---------------------------------------------------------------------------
# Unitarity tests
# ---------------------------------------------------------------------------

FIXED_GATES = [
    ("I", g.I), ("X", g.X), ("Y", g.Y), ("Z", g.Z), ("H", g.H),
    ("S", g.S), ("T", g.T),
    ("CNOT", g.CNOT), ("CZ", g.CZ), ("SWAP", g.SWAP), ("CCX", g.CCX),
]


@pytest.mark.parametrize("name,matrix", FIXED_GATES)
def test_fixed_gate_unitary(name, matrix):
    dim = matrix.shape[0]
    product = matrix.conj().T @ matrix
    np.testing.assert_allclose(product, np.eye(dim), atol=1e-12, err_msg=f"{name} is not unitary")


@pytest.mark.parametrize("name,matrix", FIXED_GATES)
def test_fixed_gate_shape(name, matrix):
    assert matrix.shape[0] == matrix.shape[1]
    dim = matrix.shape[0]
    assert dim & (dim - 1) == 0, f"{name} dimension {dim} is not a power of 2"
    assert matrix.dtype == np.complex128


@pytest.mark.parametrize("factory,dim", [
    (g.Rx, 2), (g.Ry, 2), (g.Rz, 2), (g.P, 2), (g.CP, 4),
])
@pytest.mark.parametrize("theta", [0, 0.5, np.pi, -1.3])
def test_param_gate_unitary(factory, dim, theta):
    mat = factory(theta)
    np.testing.assert_allclose(mat.conj().T @ mat, np.eye(dim), atol=1e-12)


# ---------------------------------------------------------------------------
# Gate algebra
# ---------------------------------------------------------------------------

def test_hadamard_squared_is_identity():
    np.testing.assert_allclose(g.H @ g.H, g.I, atol=1e-12)


def test_t_squared_is_s():
    np.testing.assert_allclose(g.T @ g.T, g.S, atol=1e-12)


def test_cnot_matrix():
    expected = np.array(
        [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]]
    )
    np.testing.assert_array_equal(g.CNOT, expected)
    assert g.CX is g.CNOT


def test_cz_is_diagonal():
    np.testing.assert_array_equal(g.CZ, np.diag([1, 1, 1, -1]))


def test_cp_phase_on_one_one():
    np.testing.assert_allclose(
        g.CP(np.pi / 2), np.diag([1, 1, 1, 1j]), atol=1e-12
    )


def test_toffoli_swaps_last_two_rows():
    expected = np.eye(8)
    expected[[6, 7]] = expected[[7, 6]]
    np.testing.assert_array_equal(g.CCX, expected)
    assert g.TOFFOLI is g.CCX


def test_controlled_is_block_diagonal(rng, random_unitary):
    u = random_unitary(rng, 4)
    out = g.controlled(u)
    assert out.shape == (8, 8)
    np.testing.assert_array_equal(out[:4, :4], np.eye(4))
    np.testing.assert_array_equal(out[4:, 4:], u)
    np.testing.assert_array_equal(out[:4, 4:], 0)
    np.testing.assert_array_equal(out[4:, :4], 0)


def test_rotation_by_pi_matches_pauli_up_to_phase():
    np.testing.assert_allclose(g.Rx(np.pi), -1j * g.X, atol=1e-12)
    np.testing.assert_allclose(g.Ry(np.pi), -1j * g.Y, atol=1e-12)
    np.testing.assert_allclose(g.Rz(np.pi), -1j * g.Z, atol=1e-12)
