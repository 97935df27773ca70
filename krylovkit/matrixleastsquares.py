# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol
from .backend import ArrayLike

class MatrixLeastSquares(Protocol):
    """Protocol for the small dense solver of the projected problem."""

    def __call__(self, A: ArrayLike, b: ArrayLike, /) -> ArrayLike:
        """Return the coefficients y minimizing ||Ay - b|| for the upper triangular factor A."""
        ...
