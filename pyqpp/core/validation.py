"""
Precondition validators for PyQpp.

These validators follow the "fail fast, fail loud" principle. Each one
checks ONE structural property and raises the matching exception from
pyqpp.core.exceptions the moment it fails. The caller passes its own
name as ``where`` so the rendered message points at the operation that
was misused, not at the validator.

Conventions:
    - Matrices are 2D numpy arrays; as_matrix() turns 1D input into a
      column vector
    - Dimension, subsystem and permutation lists hold Python or numpy
      integers; any other entry type fails the check, never converted
    - Subsystem labels are 0-based
    - Validators return None on success
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyqpp.core.exceptions import (
    DimsInvalid,
    DimsMismatchCvector,
    DimsMismatchMatrix,
    DimsMismatchRvector,
    DimsMismatchVector,
    DimsNotEqual,
    MatrixMismatchSubsys,
    MatrixNotCvector,
    MatrixNotRvector,
    MatrixNotSquare,
    MatrixNotSquareNorCvector,
    MatrixNotSquareNorRvector,
    MatrixNotSquareNorVector,
    MatrixNotVector,
    NotBipartite,
    NotQubitCvector,
    NotQubitMatrix,
    NotQubitRvector,
    NotQubitSubsys,
    NotQubitVector,
    OutOfRange,
    PermInvalid,
    PermMismatchDims,
    SizeMismatch,
    SubsysMismatchDims,
    TypeMismatch,
    ZeroSize,
)

# Dimension of a qubit subsystem
QUBIT_DIM = 2


def as_matrix(A: ArrayLike, where: str) -> NDArray[Any]:
    """
    Convert input to a 2D numeric array.

    1D input becomes a column vector. Rejects object/string dtypes and
    arrays of more than two dimensions.

    Args:
        A: Array-like input
        where: Origin for error messages

    Returns:
        2D numpy array (no copy when A already qualifies)

    Raises:
        TypeMismatch: If A cannot be read as a numeric matrix
    """
    try:
        result = np.asarray(A)
    except (ValueError, TypeError) as e:
        raise TypeMismatch(where) from e

    if not np.issubdtype(result.dtype, np.number):
        raise TypeMismatch(where)

    if result.ndim == 0:
        result = result.reshape(1, 1)
    elif result.ndim == 1:
        result = result.reshape(-1, 1)
    elif result.ndim > 2:
        raise TypeMismatch(where)
    return result


def _is_index(x: object) -> bool:
    """True for Python and numpy integers; bools are not indices."""
    return isinstance(x, (int, np.integer)) and not isinstance(x, (bool, np.bool_))


def _all_indices(values: Sequence[Any]) -> bool:
    return all(_is_index(x) for x in values)


def prod_dims(dims: Sequence[int]) -> int:
    """Product of a dimension list (1 for an empty list)."""
    result = 1
    for d in dims:
        result *= d
    return result


def _dims_product_is(dims: Sequence[int], size: int) -> bool:
    return _all_indices(dims) and prod_dims(dims) == size


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


def check_nonzero_size(A: NDArray[Any] | Sequence[Any], where: str) -> None:
    """
    Verify an array or list has at least one element.

    Raises:
        ZeroSize: If A is empty
    """
    size = A.size if isinstance(A, np.ndarray) else len(A)
    if size == 0:
        raise ZeroSize(where)


def _is_square(A: NDArray[Any]) -> bool:
    return A.shape[0] == A.shape[1]


def _is_cvector(A: NDArray[Any]) -> bool:
    return A.shape[1] == 1


def _is_rvector(A: NDArray[Any]) -> bool:
    return A.shape[0] == 1


def check_square_mat(A: NDArray[Any], where: str) -> None:
    """
    Verify matrix is square.

    Raises:
        MatrixNotSquare: If rows != cols
    """
    if not _is_square(A):
        raise MatrixNotSquare(where)


def check_cvector(A: NDArray[Any], where: str) -> None:
    """
    Verify matrix is a column vector.

    Raises:
        MatrixNotCvector: If A has more than one column
    """
    if not _is_cvector(A):
        raise MatrixNotCvector(where)


def check_rvector(A: NDArray[Any], where: str) -> None:
    """
    Verify matrix is a row vector.

    Raises:
        MatrixNotRvector: If A has more than one row
    """
    if not _is_rvector(A):
        raise MatrixNotRvector(where)


def check_vector(A: NDArray[Any], where: str) -> None:
    """
    Verify matrix is a row or column vector.

    Raises:
        MatrixNotVector: If A is neither
    """
    if not (_is_rvector(A) or _is_cvector(A)):
        raise MatrixNotVector(where)


def check_square_or_cvector(A: NDArray[Any], where: str) -> None:
    """Raises MatrixNotSquareNorCvector unless A is square or a column vector."""
    if not (_is_square(A) or _is_cvector(A)):
        raise MatrixNotSquareNorCvector(where)


def check_square_or_rvector(A: NDArray[Any], where: str) -> None:
    """Raises MatrixNotSquareNorRvector unless A is square or a row vector."""
    if not (_is_square(A) or _is_rvector(A)):
        raise MatrixNotSquareNorRvector(where)


def check_square_or_vector(A: NDArray[Any], where: str) -> None:
    """Raises MatrixNotSquareNorVector unless A is square or any vector."""
    if not (_is_square(A) or _is_rvector(A) or _is_cvector(A)):
        raise MatrixNotSquareNorVector(where)


# ═══════════════════════════════════════════════════════════════════════
# Dimension lists
# ═══════════════════════════════════════════════════════════════════════


def check_dims(dims: Sequence[int], where: str) -> None:
    """
    Verify a dimension list is non-empty and has only positive integer entries.

    Raises:
        DimsInvalid: If dims is empty, contains a non-integer entry, or
            contains a zero (or negative)
    """
    if len(dims) == 0:
        raise DimsInvalid(where)
    if not _all_indices(dims):
        raise DimsInvalid(where)
    if any(d <= 0 for d in dims):
        raise DimsInvalid(where)


def check_eq_dims(dims: Sequence[int], d: int, where: str) -> None:
    """
    Verify every entry of a dimension list equals d.

    Raises:
        DimsNotEqual: If some entry differs from d
    """
    if any(x != d for x in dims):
        raise DimsNotEqual(where)


def check_dims_match_mat(dims: Sequence[int], A: NDArray[Any], where: str) -> None:
    """
    Verify the product of dims equals the number of rows of a square matrix.

    Raises:
        DimsMismatchMatrix: If prod(dims) != rows(A)
    """
    if not _dims_product_is(dims, A.shape[0]):
        raise DimsMismatchMatrix(where)


def check_dims_match_cvect(dims: Sequence[int], A: NDArray[Any], where: str) -> None:
    """Raises DimsMismatchCvector if prod(dims) != rows of column vector A."""
    if not _dims_product_is(dims, A.shape[0]):
        raise DimsMismatchCvector(where)


def check_dims_match_rvect(dims: Sequence[int], A: NDArray[Any], where: str) -> None:
    """Raises DimsMismatchRvector if prod(dims) != cols of row vector A."""
    if not _dims_product_is(dims, A.shape[1]):
        raise DimsMismatchRvector(where)


def check_dims_match_vect(dims: Sequence[int], A: NDArray[Any], where: str) -> None:
    """Raises DimsMismatchVector if prod(dims) != number of elements of A."""
    if not _dims_product_is(dims, A.size):
        raise DimsMismatchVector(where)


# ═══════════════════════════════════════════════════════════════════════
# Subsystems and permutations
# ═══════════════════════════════════════════════════════════════════════


def check_subsys_match_dims(
    subsys: Sequence[int],
    dims: Sequence[int],
    where: str,
) -> None:
    """
    Verify subsystem labels are valid for a dimension list.

    Labels must be integers, unique, in range [0, len(dims)), and there
    cannot be more labels than subsystems.

    Raises:
        SubsysMismatchDims: If any of the above fails
    """
    n = len(dims)
    if len(subsys) > n:
        raise SubsysMismatchDims(where)
    if not _all_indices(subsys):
        raise SubsysMismatchDims(where)
    if len(set(subsys)) != len(subsys):
        raise SubsysMismatchDims(where)
    if any(s < 0 or s >= n for s in subsys):
        raise SubsysMismatchDims(where)


def check_mat_match_subsys(
    A: NDArray[Any],
    subsys: Sequence[int],
    dims: Sequence[int],
    where: str,
) -> None:
    """
    Verify a square matrix acts on exactly the space of the target subsystems.

    Assumes subsys has already passed check_subsys_match_dims().

    Raises:
        MatrixMismatchSubsys: If A is not D x D with D = prod(dims[subsys])
    """
    expected = prod_dims([dims[s] for s in subsys])
    if A.shape != (expected, expected):
        raise MatrixMismatchSubsys(where)


def check_perm(perm: Sequence[int], where: str) -> None:
    """
    Verify perm is a permutation of 0, 1, ..., len(perm) - 1.

    Raises:
        PermInvalid: If perm is empty, has non-integer, duplicate or
            out-of-range entries
    """
    if len(perm) == 0:
        raise PermInvalid(where)
    if not _all_indices(perm):
        raise PermInvalid(where)
    if sorted(perm) != list(range(len(perm))):
        raise PermInvalid(where)


def check_perm_match_dims(perm: Sequence[int], dims: Sequence[int], where: str) -> None:
    """Raises PermMismatchDims if len(perm) != len(dims)."""
    if len(perm) != len(dims):
        raise PermMismatchDims(where)


# ═══════════════════════════════════════════════════════════════════════
# Qubits
# ═══════════════════════════════════════════════════════════════════════


def check_qubit_matrix(A: NDArray[Any], where: str) -> None:
    """Raises NotQubitMatrix unless A is 2 x 2."""
    if A.shape != (QUBIT_DIM, QUBIT_DIM):
        raise NotQubitMatrix(where)


def check_qubit_cvector(A: NDArray[Any], where: str) -> None:
    """Raises NotQubitCvector unless A is 2 x 1."""
    if A.shape != (QUBIT_DIM, 1):
        raise NotQubitCvector(where)


def check_qubit_rvector(A: NDArray[Any], where: str) -> None:
    """Raises NotQubitRvector unless A is 1 x 2."""
    if A.shape != (1, QUBIT_DIM):
        raise NotQubitRvector(where)


def check_qubit_vector(A: NDArray[Any], where: str) -> None:
    """Raises NotQubitVector unless A is 2 x 1 or 1 x 2."""
    if A.shape not in ((QUBIT_DIM, 1), (1, QUBIT_DIM)):
        raise NotQubitVector(where)


def check_qubit_subsys(dims: Sequence[int], subsys: Sequence[int], where: str) -> None:
    """
    Verify every targeted subsystem is a qubit.

    Assumes subsys has already passed check_subsys_match_dims().

    Raises:
        NotQubitSubsys: If some dims[s] for s in subsys is not 2
    """
    if any(dims[s] != QUBIT_DIM for s in subsys):
        raise NotQubitSubsys(where)


# ═══════════════════════════════════════════════════════════════════════
# Structural and generic
# ═══════════════════════════════════════════════════════════════════════


def check_bipartite(dims: Sequence[int], where: str) -> None:
    """Raises NotBipartite unless dims has exactly two entries."""
    if len(dims) != 2:
        raise NotBipartite(where)


def check_in_range(value: float, low: float, high: float, where: str) -> None:
    """
    Verify low <= value < high.

    Raises:
        OutOfRange: If value is outside the half-open interval
    """
    if not (low <= value < high):
        raise OutOfRange(where)


def check_same_size(A: NDArray[Any], B: NDArray[Any], where: str) -> None:
    """Raises SizeMismatch if A and B have different shapes."""
    if np.shape(A) != np.shape(B):
        raise SizeMismatch(where)


def check_same_dtype(A: NDArray[Any], B: NDArray[Any], where: str) -> None:
    """Raises TypeMismatch if A and B have different scalar types."""
    if np.asarray(A).dtype != np.asarray(B).dtype:
        raise TypeMismatch(where)
