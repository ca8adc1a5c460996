"""
Exception catalog for PyQpp.

Every precondition violation in the library maps to exactly one ErrorKind.
The kind fixes the description text; the caller supplies the origin (the
name of the operation that detected the violation). The rendered message
is always

    IN <origin>: <description>!

and is computed when asked for, never stored.

All exceptions inherit from PyQppError so a caller can catch any library
error with one clause. Each concrete class binds a single ErrorKind so a
caller can also catch one category by class, or switch on ``err.kind``.

Design principles:
    - The set of kinds is closed; new categories extend ErrorKind
    - Descriptions live in one table, not in per-class overrides
    - Only CustomException carries a payload (the detail string)
    - Unknown is a last resort, not a general bucket
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Discriminant for every error category. The value is the description."""

    UNKNOWN = "UNKNOWN EXCEPTION"

    # Shape / size
    ZERO_SIZE = "Object has zero size"
    MATRIX_NOT_SQUARE = "Matrix is not square"
    MATRIX_NOT_CVECTOR = "Matrix is not a column vector"
    MATRIX_NOT_RVECTOR = "Matrix is not a row vector"
    MATRIX_NOT_VECTOR = "Matrix is not a vector"
    MATRIX_NOT_SQUARE_NOR_CVECTOR = "Matrix is not square nor column vector"
    MATRIX_NOT_SQUARE_NOR_RVECTOR = "Matrix is not square nor row vector"
    MATRIX_NOT_SQUARE_NOR_VECTOR = "Matrix is not square nor vector"

    # Subsystems / dimension lists
    MATRIX_MISMATCH_SUBSYS = "Matrix mismatch subsystems"
    DIMS_INVALID = "Invalid dimension(s)"
    DIMS_NOT_EQUAL = "Dimensions not equal"
    DIMS_MISMATCH_MATRIX = "Dimension(s) mismatch matrix size"
    DIMS_MISMATCH_CVECTOR = "Dimension(s) mismatch column vector size"
    DIMS_MISMATCH_RVECTOR = "Dimension(s) mismatch row vector size"
    DIMS_MISMATCH_VECTOR = "Dimension(s) mismatch vector size"
    SUBSYS_MISMATCH_DIMS = "Subsystems mismatch dimensions"

    # Permutations
    PERM_INVALID = "Invalid permutation"
    PERM_MISMATCH_DIMS = "Permutation mismatch dimensions"

    # Qubits
    NOT_QUBIT_MATRIX = "Matrix is not 2 x 2"
    NOT_QUBIT_CVECTOR = "Column vector is not 2 x 1"
    NOT_QUBIT_RVECTOR = "Row vector is not 1 x 2"
    NOT_QUBIT_VECTOR = "Vector is not 2 x 1 nor 1 x 2"
    NOT_QUBIT_SUBSYS = "Subsystems are not qubits"

    # Structural
    NOT_BIPARTITE = "Not bi-partite"
    NO_CODEWORD = "Codeword does not exist"

    # Generic
    OUT_OF_RANGE = "Parameter out of range"
    TYPE_MISMATCH = "Type mismatch"
    SIZE_MISMATCH = "Size mismatch"
    UNDEFINED_TYPE = "Not defined for this type"

    # Free-form; the value is the prefix of the rendered description
    CUSTOM = "CUSTOM EXCEPTION"


def describe_kind(kind: ErrorKind, detail: str | None = None) -> str:
    """
    Description text for an error kind.

    Args:
        kind: The error discriminant
        detail: Caller-supplied text, used only by ErrorKind.CUSTOM

    Returns:
        The fixed description, or "CUSTOM EXCEPTION <detail>" for CUSTOM
    """
    if kind is ErrorKind.CUSTOM:
        return f"{kind.value} {detail if detail is not None else ''}"
    return kind.value


def render_message(where: str, description: str) -> str:
    """Format the canonical diagnostic: ``IN <where>: <description>!``."""
    return "IN " + where + ": " + description + "!"


class PyQppError(Exception):
    """Base exception for all PyQpp errors."""
    pass


class QppException(PyQppError):
    """
    Precondition violation detected by a PyQpp routine.

    Subclasses bind ``kind``; instances only carry the origin. This class
    is abstract: construct a concrete subclass.

    Attributes:
        kind: The ErrorKind of this error (class level, read-only)
        where: Origin of the error, stored verbatim (may be empty, read-only)

    Example:
        >>> err = MatrixNotSquare("apply")
        >>> str(err)
        'IN apply: Matrix is not square!'
    """

    kind: ErrorKind

    # Public attributes that are fixed once the error exists
    _READ_ONLY = frozenset({"kind", "where", "detail"})

    def __init__(self, where: str = ""):
        if type(self) is QppException:
            raise TypeError(
                "QppException is abstract; raise one of its subclasses"
            )
        super().__init__(where)
        self._where = where

    def __setattr__(self, name: str, value: object) -> None:
        if name in self._READ_ONLY:
            raise AttributeError(
                f"{type(self).__name__}.{name} is read-only"
            )
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._READ_ONLY:
            raise AttributeError(
                f"{type(self).__name__}.{name} is read-only"
            )
        super().__delattr__(name)

    @property
    def where(self) -> str:
        """Origin of the error."""
        return self._where

    def describe(self) -> str:
        """Fixed description of this error's kind."""
        return describe_kind(self.kind)

    def render(self, where: str | None = None) -> str:
        """
        Rendered diagnostic.

        Args:
            where: Origin to render. Defaults to the stored origin.

        Returns:
            "IN " + where + ": " + describe() + "!"
        """
        if where is None:
            where = self.where
        return render_message(where, self.describe())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.where!r})"


class Unknown(QppException):
    """
    No other exception is suitable.

    Prefer adding a new ErrorKind over raising this.
    """
    kind = ErrorKind.UNKNOWN


class ZeroSize(QppException):
    """Object has zero size, e.g. an empty array or dimension list."""
    kind = ErrorKind.ZERO_SIZE


class MatrixNotSquare(QppException):
    """Matrix is not square."""
    kind = ErrorKind.MATRIX_NOT_SQUARE


class MatrixNotCvector(QppException):
    """Matrix is not a column vector."""
    kind = ErrorKind.MATRIX_NOT_CVECTOR


class MatrixNotRvector(QppException):
    """Matrix is not a row vector."""
    kind = ErrorKind.MATRIX_NOT_RVECTOR


class MatrixNotVector(QppException):
    """Matrix is neither a row nor a column vector."""
    kind = ErrorKind.MATRIX_NOT_VECTOR


class MatrixNotSquareNorCvector(QppException):
    """Matrix is neither square nor a column vector."""
    kind = ErrorKind.MATRIX_NOT_SQUARE_NOR_CVECTOR


class MatrixNotSquareNorRvector(QppException):
    """Matrix is neither square nor a row vector."""
    kind = ErrorKind.MATRIX_NOT_SQUARE_NOR_RVECTOR


class MatrixNotSquareNorVector(QppException):
    """Matrix is neither square nor a row/column vector."""
    kind = ErrorKind.MATRIX_NOT_SQUARE_NOR_VECTOR


class MatrixMismatchSubsys(QppException):
    """Matrix size does not match the dimensions of the target subsystems."""
    kind = ErrorKind.MATRIX_MISMATCH_SUBSYS


class DimsInvalid(QppException):
    """Dimension list is empty or contains zeros."""
    kind = ErrorKind.DIMS_INVALID


class DimsNotEqual(QppException):
    """Local/global dimensions are not equal."""
    kind = ErrorKind.DIMS_NOT_EQUAL


class DimsMismatchMatrix(QppException):
    """
    Product of the dimension list differs from the number of rows of a
    (square) matrix.
    """
    kind = ErrorKind.DIMS_MISMATCH_MATRIX


class DimsMismatchCvector(QppException):
    """Product of the dimension list differs from the column vector size."""
    kind = ErrorKind.DIMS_MISMATCH_CVECTOR


class DimsMismatchRvector(QppException):
    """Product of the dimension list differs from the row vector size."""
    kind = ErrorKind.DIMS_MISMATCH_RVECTOR


class DimsMismatchVector(QppException):
    """Product of the dimension list differs from the vector size."""
    kind = ErrorKind.DIMS_MISMATCH_VECTOR


class SubsysMismatchDims(QppException):
    """
    Subsystem labels have duplicates, or entries outside the range of the
    dimension list.
    """
    kind = ErrorKind.SUBSYS_MISMATCH_DIMS


class PermInvalid(QppException):
    """Index list is not a valid permutation."""
    kind = ErrorKind.PERM_INVALID


class PermMismatchDims(QppException):
    """Permutation length differs from the length of the dimension list."""
    kind = ErrorKind.PERM_MISMATCH_DIMS


class NotQubitMatrix(QppException):
    """Matrix is not 2 x 2."""
    kind = ErrorKind.NOT_QUBIT_MATRIX


class NotQubitCvector(QppException):
    """Column vector is not 2 x 1."""
    kind = ErrorKind.NOT_QUBIT_CVECTOR


class NotQubitRvector(QppException):
    """Row vector is not 1 x 2."""
    kind = ErrorKind.NOT_QUBIT_RVECTOR


class NotQubitVector(QppException):
    """Vector is neither 2 x 1 nor 1 x 2."""
    kind = ErrorKind.NOT_QUBIT_VECTOR


class NotQubitSubsys(QppException):
    """Subsystems are not 2-dimensional."""
    kind = ErrorKind.NOT_QUBIT_SUBSYS


class NotBipartite(QppException):
    """Dimension list does not have exactly two entries."""
    kind = ErrorKind.NOT_BIPARTITE


class NoCodeword(QppException):
    """Requested codeword index does not exist."""
    kind = ErrorKind.NO_CODEWORD


class OutOfRange(QppException):
    """Parameter out of range."""
    kind = ErrorKind.OUT_OF_RANGE


class TypeMismatch(QppException):
    """Scalar types do not match."""
    kind = ErrorKind.TYPE_MISMATCH


class SizeMismatch(QppException):
    """Sizes do not match."""
    kind = ErrorKind.SIZE_MISMATCH


class UndefinedType(QppException):
    """Operation is not defined for this type."""
    kind = ErrorKind.UNDEFINED_TYPE


class CustomException(QppException):
    """
    Free-form error with a caller-supplied detail message.

    Attributes:
        detail: Text appended to "CUSTOM EXCEPTION " in the description
    """
    kind = ErrorKind.CUSTOM

    def __init__(self, where: str = "", detail: str = ""):
        super().__init__(where)
        self.args = (where, detail)
        self._detail = detail

    @property
    def detail(self) -> str:
        """Caller-supplied message."""
        return self._detail

    def describe(self) -> str:
        return describe_kind(self.kind, self.detail)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.where!r}, {self.detail!r})"


# One class per kind; make_error() and exhaustiveness tests rely on this.
EXCEPTION_CLASSES: dict[ErrorKind, type[QppException]] = {
    cls.kind: cls
    for cls in (
        Unknown,
        ZeroSize,
        MatrixNotSquare,
        MatrixNotCvector,
        MatrixNotRvector,
        MatrixNotVector,
        MatrixNotSquareNorCvector,
        MatrixNotSquareNorRvector,
        MatrixNotSquareNorVector,
        MatrixMismatchSubsys,
        DimsInvalid,
        DimsNotEqual,
        DimsMismatchMatrix,
        DimsMismatchCvector,
        DimsMismatchRvector,
        DimsMismatchVector,
        SubsysMismatchDims,
        PermInvalid,
        PermMismatchDims,
        NotQubitMatrix,
        NotQubitCvector,
        NotQubitRvector,
        NotQubitVector,
        NotQubitSubsys,
        NotBipartite,
        NoCodeword,
        OutOfRange,
        TypeMismatch,
        SizeMismatch,
        UndefinedType,
        CustomException,
    )
}


def make_error(
    kind: ErrorKind,
    where: str = "",
    detail: str | None = None,
) -> QppException:
    """
    Build the exception for a given kind.

    Args:
        kind: The error discriminant
        where: Origin of the error
        detail: Required for ErrorKind.CUSTOM, rejected otherwise

    Returns:
        An instance of the concrete class bound to ``kind``

    Raises:
        ValueError: If detail is given for a fixed kind, or missing for CUSTOM
    """
    if kind is ErrorKind.CUSTOM:
        if detail is None:
            raise ValueError("ErrorKind.CUSTOM requires a detail message")
        return CustomException(where, detail)
    if detail is not None:
        raise ValueError(f"{kind.name} does not take a detail message")
    return EXCEPTION_CLASSES[kind](where)
