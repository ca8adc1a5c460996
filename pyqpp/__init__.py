"""
PyQpp: typed precondition errors for multipartite linear algebra.

Every validation failure in the library raises a QppException subclass
whose message reads ``IN <origin>: <description>!``.

Submodules:
    core: Error catalog and precondition validators
    multipartite: Subsystem permutation, partial trace, partial transpose
"""

__version__ = "0.1.0"

from pyqpp.core.exceptions import PyQppError, QppException, ErrorKind
from pyqpp import core
from pyqpp import multipartite

__all__ = [
    "__version__",
    "PyQppError",
    "QppException",
    "ErrorKind",
    "core",
    "multipartite",
]
