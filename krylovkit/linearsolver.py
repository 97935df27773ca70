# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, Any, Optional
from .backend import T
from .solverresult import SolverResult

class LinearSolver(Protocol):
    """Protocol for an iterative linear solver."""

    def __call__(
        self,
        mat: Any,
        rhs: T,
        guess: Optional[T] = None, /
        ) -> SolverResult[T]:
        """
        Solve a linear problem for a matrix or linear map with a right-hand side and an optional initial guess.
        """
        ...
