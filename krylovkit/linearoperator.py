# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable

from .backend import T, shape
from .errors import ConfigurationError

Operator = Callable[[T], T]

def as_operator(mat: Any, rhs: T) -> Operator[T]:
    """
    Wrap mat into a matrix-vector product. Callables are used as they are, anything else needs a
    two dimensional shape and support for the matmul operator (dense arrays, sparse matrices).
    """
    if callable(mat) and not hasattr(mat, "shape"):
        return mat
    if not hasattr(mat, "shape") or not hasattr(mat, "__matmul__"):
        raise ConfigurationError(
            f"Operator must be callable or support the matmul operator, got {type(mat)}.")

    rows_cols = tuple(mat.shape)
    if len(rows_cols) != 2:
        raise ConfigurationError("Matrix A must be two dimensional.")
    if rows_cols[0] == 0:
        raise ConfigurationError("Matrix A cannot be empty.")
    if rows_cols[0] != rows_cols[1]:
        raise ConfigurationError("Matrix A must be square.")
    if len(shape(rhs)) != 1:
        raise ConfigurationError("Vector b must be one dimensional when A is a matrix.")
    if shape(rhs)[0] != rows_cols[0]:
        raise ConfigurationError("Dimension mismatch between matrix A and vector b.")

    return lambda vec: mat @ vec
