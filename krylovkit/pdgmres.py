# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Generic, Optional
from dataclasses import dataclass, field

from .backend import T
from .errors import ConfigurationError
from .utils import check_opt_pos
from .iteratestate import IterateState
from .pdcontroller import PDController
from .restartedsolver import RestartedSolver, CyclePlan
from .gmres import GMRES

class PDPlanner(Generic[T]):
    controller: PDController
    subspace: int

    def __init__(self, controller: PDController, initial: int) -> None:
        self.controller = controller
        self.subspace = initial

    def plan(self, state: IterateState[T], size: int) -> CyclePlan[T]:
        if state.cycle > 1:
            self.subspace = self.controller(self.subspace, state.norms, size)
        return CyclePlan(subspace=self.subspace)

    def record(self, update: T) -> None:
        pass

@dataclass(kw_only=True)
class PDGMRES(RestartedSolver):
    """
    PD-GMRES(m) linear solver. The restart parameter starts at subspace and is adapted before
    every further cycle by a proportional-derivative controller fed with the residual norms.
    Without a subspace, or with one equal to the problem size, the unrestarted GMRES is used.

    Follows Nunez, Schaerer and Bhaya, J. Comput. Appl. Math. 337 (2018) 209-224.
    """

    #: Initial restart parameter
    subspace: None | int = None

    #: Control law for the restart parameter
    controller: PDController = field(default_factory=PDController)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "subspace":
            check_opt_pos(name, value)
        super().__setattr__(name, value)

    def _restarted(self, size: int) -> bool:
        return self.subspace is not None and self.subspace != size

    def _check_config(self, size: int) -> None:
        if not self._restarted(size):
            return
        assert self.subspace is not None
        if self.subspace > size:
            raise ConfigurationError(f"m_initial must satisfy: 1 <= m_initial <= n, got {self.subspace}.")
        self.controller.check(size, self.subspace)

    def _fallback(self, size: int) -> Optional[RestartedSolver]:
        if self._restarted(size):
            return None
        return GMRES(nsteps=self.nsteps, subspace=size, eps=self.eps,
                     solver=self.solver, breakdown=self.breakdown)

    def _planner(self, size: int) -> PDPlanner[T]:
        assert self.subspace is not None
        return PDPlanner(self.controller, self.subspace)
