# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generic
from dataclasses import dataclass

from .backend import T

@dataclass(kw_only=True)
class SolverResult(Generic[T]):
    #: Solution of the linear system, or the last iterate if the solver did not converge.
    array: T
    #: True if the relative residual dropped below the tolerance.
    converged: bool
    #: Relative residual norms, starting with 1.0 and one entry per completed cycle.
    residuals: list[float]
    #: Number of completed cycles.
    cycles: int
    #: Dimension of the search subspace used in each cycle.
    subspaces: list[int]
    #: Time taken to compute the solution.
    time: float
