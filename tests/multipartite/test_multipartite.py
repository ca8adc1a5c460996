"""
Tests for multipartite operations.

Checks numeric results against Kronecker-product identities and checks
that each precondition violation surfaces with the operation's name.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pyqpp.core.exceptions import (
    DimsInvalid,
    DimsMismatchCvector,
    DimsMismatchMatrix,
    MatrixNotSquareNorCvector,
    NotBipartite,
    PermInvalid,
    PermMismatchDims,
    QppException,
    SubsysMismatchDims,
    TypeMismatch,
    ZeroSize,
)
from pyqpp.multipartite import ptrace, ptrace1, ptrace2, ptranspose, syspermute


@pytest.fixture
def A2(rng):
    return rng.standard_normal((2, 2)) + 1j * rng.standard_normal((2, 2))


@pytest.fixture
def B3(rng):
    return rng.standard_normal((3, 3)) + 1j * rng.standard_normal((3, 3))


# ═══════════════════════════════════════════════════════════════════════
# syspermute
# ═══════════════════════════════════════════════════════════════════════


class TestSyspermute:
    """syspermute reorders tensor factors."""

    def test_swap_basis_state(self):
        psi = np.array([0.0, 1.0, 0.0, 0.0])  # |0>|1>
        result = syspermute(psi, [1, 0], [2, 2])
        assert_allclose(result, np.array([[0.0], [0.0], [1.0], [0.0]]))

    def test_swap_operator(self, A2, B3):
        result = syspermute(np.kron(A2, B3), [1, 0], [2, 3])
        assert_allclose(result, np.kron(B3, A2), rtol=1e-12)

    def test_identity_perm(self, random_state):
        result = syspermute(random_state, [0, 1, 2], [2, 3, 2])
        assert_allclose(result, random_state)

    def test_cycle_product_state(self, rng):
        a, b, c = (rng.standard_normal((d, 1)) for d in (2, 3, 4))
        psi = np.kron(np.kron(a, b), c)
        result = syspermute(psi, [2, 0, 1], [2, 3, 4])
        assert_allclose(result, np.kron(np.kron(c, a), b), rtol=1e-12)

    def test_perm_mismatch_dims(self):
        with pytest.raises(PermMismatchDims) as exc_info:
            syspermute(np.ones(4), [0, 1, 2], [2, 2])
        assert str(exc_info.value) == "IN syspermute: Permutation mismatch dimensions!"

    def test_invalid_perm(self):
        with pytest.raises(PermInvalid, match="IN syspermute: Invalid permutation!"):
            syspermute(np.ones(4), [0, 0], [2, 2])

    def test_dims_mismatch_vector(self):
        with pytest.raises(DimsMismatchCvector):
            syspermute(np.ones(4), [1, 0], [2, 3])

    def test_dims_mismatch_matrix(self):
        with pytest.raises(DimsMismatchMatrix):
            syspermute(np.eye(4), [1, 0], [2, 3])

    def test_row_vector_rejected(self):
        with pytest.raises(MatrixNotSquareNorCvector):
            syspermute(np.ones((1, 4)), [1, 0], [2, 2])

    def test_empty_rejected(self):
        with pytest.raises(ZeroSize):
            syspermute(np.zeros((0, 0)), [0], [1])

    def test_invalid_dims(self):
        with pytest.raises(DimsInvalid):
            syspermute(np.eye(4), [1, 0], [4, 0])


# ═══════════════════════════════════════════════════════════════════════
# ptrace
# ═══════════════════════════════════════════════════════════════════════


class TestPtrace:
    """ptrace against Tr_B(A ⊗ B) = Tr(B) A."""

    def test_trace_second(self, A2, B3):
        result = ptrace(np.kron(A2, B3), [1], [2, 3])
        assert_allclose(result, np.trace(B3) * A2, rtol=1e-10)

    def test_trace_first(self, A2, B3):
        result = ptrace(np.kron(A2, B3), [0], [2, 3])
        assert_allclose(result, np.trace(A2) * B3, rtol=1e-10)

    def test_trace_middle_of_three(self, rng, A2, B3):
        C = rng.standard_normal((2, 2))
        result = ptrace(np.kron(np.kron(A2, B3), C), [1], [2, 3, 2])
        assert_allclose(result, np.trace(B3) * np.kron(A2, C), rtol=1e-10)

    def test_trace_nothing(self, random_density):
        assert_allclose(ptrace(random_density, [], [2, 3]), random_density)

    def test_trace_everything(self, random_density):
        result = ptrace(random_density, [0, 1], [2, 3])
        assert result.shape == (1, 1)
        assert_allclose(result[0, 0], 1.0, atol=1e-12)

    def test_pure_state(self, random_state):
        rho = ptrace(random_state, [1], [2, 3, 2])
        assert rho.shape == (4, 4)
        assert_allclose(np.trace(rho), 1.0, atol=1e-12)
        assert_allclose(rho, rho.conj().T, atol=1e-12)

    def test_pure_state_matches_density(self, random_state):
        rho = random_state @ random_state.conj().T
        assert_allclose(
            ptrace(random_state, [0, 2], [2, 3, 2]),
            ptrace(rho, [0, 2], [2, 3, 2]),
            atol=1e-12,
        )

    def test_subsys_out_of_range(self, random_density):
        with pytest.raises(SubsysMismatchDims, match="IN ptrace: "):
            ptrace(random_density, [2], [2, 3])

    def test_subsys_duplicates(self, random_density):
        with pytest.raises(SubsysMismatchDims):
            ptrace(random_density, [0, 0], [2, 3])

    def test_non_numeric(self):
        with pytest.raises(TypeMismatch, match="IN ptrace: Type mismatch!"):
            ptrace([["a", "b"], ["c", "d"]], [0], [2])


class TestBipartiteTraces:
    """ptrace1 / ptrace2 require exactly two subsystems."""

    def test_ptrace1(self, A2, B3):
        assert_allclose(ptrace1(np.kron(A2, B3), [2, 3]), np.trace(A2) * B3, rtol=1e-10)

    def test_ptrace2(self, A2, B3):
        assert_allclose(ptrace2(np.kron(A2, B3), [2, 3]), np.trace(B3) * A2, rtol=1e-10)

    def test_ptrace1_not_bipartite(self):
        with pytest.raises(NotBipartite) as exc_info:
            ptrace1(np.eye(8), [2, 2, 2])
        assert str(exc_info.value) == "IN ptrace1: Not bi-partite!"

    def test_ptrace2_not_bipartite(self):
        with pytest.raises(NotBipartite, match="IN ptrace2: "):
            ptrace2(np.eye(2), [2])

    def test_ptrace2_dims_mismatch(self):
        with pytest.raises(DimsMismatchMatrix, match="IN ptrace2: "):
            ptrace2(np.eye(4), [2, 3])


# ═══════════════════════════════════════════════════════════════════════
# ptranspose
# ═══════════════════════════════════════════════════════════════════════


class TestPtranspose:
    """ptranspose against (A ⊗ B)^{T_B} = A ⊗ B^T."""

    def test_second(self, A2, B3):
        result = ptranspose(np.kron(A2, B3), [1], [2, 3])
        assert_allclose(result, np.kron(A2, B3.T), rtol=1e-12)

    def test_first(self, A2, B3):
        result = ptranspose(np.kron(A2, B3), [0], [2, 3])
        assert_allclose(result, np.kron(A2.T, B3), rtol=1e-12)

    def test_all_is_full_transpose(self, random_density):
        result = ptranspose(random_density, [0, 1], [2, 3])
        assert_allclose(result, random_density.T)

    def test_none_is_identity(self, random_density):
        assert_allclose(ptranspose(random_density, [], [2, 3]), random_density)

    def test_pure_state(self, random_state):
        rho = random_state @ random_state.conj().T
        assert_allclose(
            ptranspose(random_state, [2], [2, 3, 2]),
            ptranspose(rho, [2], [2, 3, 2]),
            atol=1e-12,
        )

    def test_bad_subsys(self, random_density):
        with pytest.raises(SubsysMismatchDims, match="IN ptranspose: "):
            ptranspose(random_density, [0, 1, 2], [2, 3])


# ═══════════════════════════════════════════════════════════════════════
# Non-integer index lists
# ═══════════════════════════════════════════════════════════════════════


class TestNonIntegerArguments:
    """Fractional or text entries surface as catalog errors, never truncated."""

    def test_syspermute_fractional_perm(self):
        with pytest.raises(PermInvalid, match="IN syspermute: Invalid permutation!"):
            syspermute(np.eye(4), [1.7, 0.2], [2, 2])

    def test_ptrace_fractional_subsys(self):
        with pytest.raises(SubsysMismatchDims, match="IN ptrace: "):
            ptrace(np.eye(6), [0.9], [2, 3])

    def test_ptranspose_text_subsys(self):
        with pytest.raises(SubsysMismatchDims, match="IN ptranspose: "):
            ptranspose(np.eye(4), ["1"], [2, 2])

    def test_fractional_dims(self):
        with pytest.raises(DimsInvalid, match="IN ptrace: "):
            ptrace(np.eye(4), [0], [2.7, 2])

    def test_text_dims(self):
        with pytest.raises(DimsInvalid, match="IN syspermute: "):
            syspermute(np.eye(4), [1, 0], ["x", 2])

    def test_numpy_integer_arguments(self, A2, B3):
        result = syspermute(
            np.kron(A2, B3), np.array([1, 0]), np.array([2, 3], dtype=np.int64)
        )
        assert_allclose(result, np.kron(B3, A2), rtol=1e-12)
        traced = ptrace(np.kron(A2, B3), np.array([1]), np.array([2, 3]))
        assert_allclose(traced, np.trace(B3) * A2, rtol=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# Caller-side handling
# ═══════════════════════════════════════════════════════════════════════


class TestUniformHandling:
    """Callers can report any failure without knowing its kind."""

    @pytest.mark.parametrize(
        "call",
        [
            lambda: syspermute(np.ones(4), [0, 1, 2], [2, 2]),
            lambda: ptrace(np.eye(4), [5], [2, 2]),
            lambda: ptrace1(np.eye(4), [4]),
            lambda: ptranspose(np.ones((2, 3)), [0], [2]),
        ],
    )
    def test_single_diagnostic(self, call):
        with pytest.raises(QppException) as exc_info:
            call()
        err = exc_info.value
        assert str(err) == f"IN {err.where}: {err.describe()}!"
        assert err.where in ("syspermute", "ptrace", "ptrace1", "ptranspose")
