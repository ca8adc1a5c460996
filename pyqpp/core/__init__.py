"""
Core infrastructure for PyQpp.

Shared error catalog and precondition validators used by every
operation in the library.

Key components:
    exceptions: ErrorKind catalog and exception classes
    validation: Precondition validators that raise catalog exceptions
"""

from pyqpp.core.exceptions import (
    PyQppError,
    ErrorKind,
    QppException,
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
    EXCEPTION_CLASSES,
    describe_kind,
    make_error,
)

__all__ = [
    # Base contract
    "PyQppError",
    "ErrorKind",
    "QppException",
    "describe_kind",
    "make_error",
    "EXCEPTION_CLASSES",
    # Shape / size
    "ZeroSize",
    "MatrixNotSquare",
    "MatrixNotCvector",
    "MatrixNotRvector",
    "MatrixNotVector",
    "MatrixNotSquareNorCvector",
    "MatrixNotSquareNorRvector",
    "MatrixNotSquareNorVector",
    # Dimension lists
    "DimsInvalid",
    "DimsNotEqual",
    "DimsMismatchMatrix",
    "DimsMismatchCvector",
    "DimsMismatchRvector",
    "DimsMismatchVector",
    # Subsystems / permutations
    "MatrixMismatchSubsys",
    "SubsysMismatchDims",
    "PermInvalid",
    "PermMismatchDims",
    # Qubits
    "NotQubitMatrix",
    "NotQubitCvector",
    "NotQubitRvector",
    "NotQubitVector",
    "NotQubitSubsys",
    # Structural
    "NotBipartite",
    "NoCodeword",
    # Generic
    "OutOfRange",
    "TypeMismatch",
    "SizeMismatch",
    "UndefinedType",
    "Unknown",
    "CustomException",
]
