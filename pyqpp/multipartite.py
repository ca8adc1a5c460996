"""
Operations on multipartite (tensor-structured) states and operators.

A state is a column vector of length prod(dims); an operator (e.g. a
density matrix) is a square matrix of size prod(dims). Subsystem k has
dimension dims[k] and subsystem 0 is the most significant tensor factor.

Each operation validates its arguments through pyqpp.core.validation and
reports violations under its own name, e.g. a three-entry permutation for
two subsystems raises

    PermMismatchDims: IN syspermute: Permutation mismatch dimensions!

Public API:
    syspermute(A, perm, dims)  - Reorder subsystems
    ptrace(A, subsys, dims)    - Partial trace over subsystems
    ptrace1(A, dims)           - Trace out the first of two subsystems
    ptrace2(A, dims)           - Trace out the second of two subsystems
    ptranspose(A, subsys, dims) - Partial transpose over subsystems
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyqpp.core.validation import (
    as_matrix,
    check_bipartite,
    check_dims,
    check_dims_match_cvect,
    check_dims_match_mat,
    check_nonzero_size,
    check_perm,
    check_perm_match_dims,
    check_square_or_cvector,
    check_subsys_match_dims,
    prod_dims,
)


def _validate_state_or_operator(
    A: ArrayLike,
    dims: Sequence[int],
    where: str,
) -> tuple[NDArray[Any], bool]:
    """
    Shared checks for a column vector or square matrix over dims.

    Returns:
        (matrix, is_cvector)
    """
    M = as_matrix(A, where)
    check_nonzero_size(M, where)
    check_dims(dims, where)
    check_square_or_cvector(M, where)

    is_cvector = M.shape[1] == 1 and M.shape[0] != 1
    if is_cvector:
        check_dims_match_cvect(dims, M, where)
    else:
        check_dims_match_mat(dims, M, where)
    return M, is_cvector


def syspermute(
    A: ArrayLike,
    perm: Sequence[int],
    dims: Sequence[int],
) -> NDArray[Any]:
    """
    Permute the subsystems of a state vector or operator.

    Subsystem perm[i] of the input becomes subsystem i of the output, so
    the output dimension list is [dims[p] for p in perm].

    Args:
        A: Column vector or square matrix over dims
        perm: Permutation of range(len(dims))
        dims: Subsystem dimensions

    Returns:
        Array of the same shape as A (1D input comes back as a column vector)

    Raises:
        ZeroSize, DimsInvalid, MatrixNotSquareNorCvector, DimsMismatchCvector,
        DimsMismatchMatrix, PermInvalid, PermMismatchDims
    """
    where = "syspermute"
    M, is_cvector = _validate_state_or_operator(A, dims, where)
    check_perm(perm, where)
    check_perm_match_dims(perm, dims, where)

    dims = list(dims)
    perm = list(perm)
    n = len(dims)

    if is_cvector:
        tensor = M.reshape(dims)
        return tensor.transpose(perm).reshape(-1, 1)

    tensor = M.reshape(dims + dims)
    axes = perm + [n + p for p in perm]
    D = M.shape[0]
    return tensor.transpose(axes).reshape(D, D)


def _ptrace(
    A: ArrayLike,
    subsys: Sequence[int],
    dims: Sequence[int],
    where: str,
) -> NDArray[Any]:
    M, is_cvector = _validate_state_or_operator(A, dims, where)
    check_subsys_match_dims(subsys, dims, where)

    if is_cvector:
        M = M @ M.conj().T

    dims = list(dims)
    n = len(dims)
    tensor = M.reshape(dims + dims)

    # Trace highest labels first so lower axis positions stay put
    for s in sorted(subsys, reverse=True):
        tensor = np.trace(tensor, axis1=s, axis2=s + n)
        n -= 1

    traced = set(subsys)
    D_keep = prod_dims([d for k, d in enumerate(dims) if k not in traced])
    return np.asarray(tensor).reshape(D_keep, D_keep)


def ptrace(
    A: ArrayLike,
    subsys: Sequence[int],
    dims: Sequence[int],
) -> NDArray[Any]:
    """
    Partial trace over the given subsystems.

    A column vector is treated as the pure state |A><A|. Tracing over every
    subsystem returns a 1 x 1 matrix holding the full trace.

    Args:
        A: Column vector or square matrix over dims
        subsys: Labels of the subsystems to trace out
        dims: Subsystem dimensions

    Returns:
        Square matrix over the remaining subsystems

    Raises:
        ZeroSize, DimsInvalid, MatrixNotSquareNorCvector, DimsMismatchCvector,
        DimsMismatchMatrix, SubsysMismatchDims
    """
    return _ptrace(A, subsys, dims, "ptrace")


def ptrace1(A: ArrayLike, dims: Sequence[int]) -> NDArray[Any]:
    """Trace out subsystem 0 of a bipartite state or operator."""
    check_bipartite(dims, "ptrace1")
    return _ptrace(A, [0], dims, "ptrace1")


def ptrace2(A: ArrayLike, dims: Sequence[int]) -> NDArray[Any]:
    """Trace out subsystem 1 of a bipartite state or operator."""
    check_bipartite(dims, "ptrace2")
    return _ptrace(A, [1], dims, "ptrace2")


def ptranspose(
    A: ArrayLike,
    subsys: Sequence[int],
    dims: Sequence[int],
) -> NDArray[Any]:
    """
    Partial transpose over the given subsystems.

    A column vector is treated as the pure state |A><A|.

    Args:
        A: Column vector or square matrix over dims
        subsys: Labels of the subsystems to transpose
        dims: Subsystem dimensions

    Returns:
        Square matrix of size prod(dims)

    Raises:
        ZeroSize, DimsInvalid, MatrixNotSquareNorCvector, DimsMismatchCvector,
        DimsMismatchMatrix, SubsysMismatchDims
    """
    where = "ptranspose"
    M, is_cvector = _validate_state_or_operator(A, dims, where)
    check_subsys_match_dims(subsys, dims, where)

    if is_cvector:
        M = M @ M.conj().T

    dims = list(dims)
    n = len(dims)
    tensor = M.reshape(dims + dims)
    for s in subsys:
        tensor = np.swapaxes(tensor, s, s + n)

    D = M.shape[0]
    return tensor.reshape(D, D)
