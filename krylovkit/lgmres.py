# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Generic, Optional
from dataclasses import dataclass

from .backend import T
from .errors import ConfigurationError
from .utils import check_pos, check_non_neg
from .iteratestate import IterateState
from .errorhistory import ApproximationErrorHistory, augmentation_split
from .restartedsolver import RestartedSolver, CyclePlan
from .gmres import GMRES

class AugmentedPlanner(Generic[T]):
    history: ApproximationErrorHistory[T]
    subspace: int

    def __init__(self, subspace: int, augment: int) -> None:
        self.history = ApproximationErrorHistory(augment)
        self.subspace = subspace

    def plan(self, state: IterateState[T], size: int) -> CyclePlan[T]:
        plain, augment = augmentation_split(state.completed, self.history.capacity,
                                            self.subspace, size)
        return CyclePlan(subspace=plain, augment=self.history.query()[:augment])

    def record(self, update: T) -> None:
        self.history.append(update)

@dataclass(kw_only=True)
class LGMRES(RestartedSolver):
    """
    LGMRES(m, k) linear solver. The search space of each cycle is widened by the updates of
    up to augment previous cycles. While fewer updates exist, the Arnoldi basis is enlarged
    instead, so every cycle searches a space of dimension subspace+augment.

    Follows Baker, Jessup and Manteuffel, SIAM J. Matrix Anal. Appl. 26 (2005) 962-984.
    """

    #: Number of Arnoldi vectors per cycle
    subspace: int = 10

    #: Number of approximation error vectors kept from previous cycles
    augment: int = 3

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "subspace":
            check_pos(name, value)
        elif name == "augment":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def _check_config(self, size: int) -> None:
        if self.subspace > size:
            raise ConfigurationError(f"m must satisfy: 1 <= m <= n, got {self.subspace}.")

    def _fallback(self, size: int) -> Optional[RestartedSolver]:
        if self.subspace < size and self.augment > 0:
            return None
        return GMRES(nsteps=self.nsteps, subspace=self.subspace, eps=self.eps,
                     solver=self.solver, breakdown=self.breakdown)

    def _planner(self, size: int) -> AugmentedPlanner[T]:
        return AugmentedPlanner(self.subspace, self.augment)
