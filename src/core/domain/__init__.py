"""
Domain models.

Contains the Matrix model and the error taxonomy of matrix operations.
"""

from src.core.errors import DimensionMismatch, ErrorKind, MatrixError, OutOfRange
from src.core.domain.matrix import Matrix

__all__ = [
    # Errors
    "ErrorKind",
    "MatrixError",
    "DimensionMismatch",
    "OutOfRange",
    # Matrix model
    "Matrix",
]
