# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Generic
from dataclasses import dataclass

from .backend import T
from .utils import check_pos
from .iteratestate import IterateState
from .restartedsolver import RestartedSolver, CyclePlan

class FixedPlanner(Generic[T]):
    subspace: int

    def __init__(self, subspace: int) -> None:
        self.subspace = subspace

    def plan(self, state: IterateState[T], size: int) -> CyclePlan[T]:
        return CyclePlan(subspace=self.subspace)

    def record(self, update: T) -> None:
        pass

@dataclass(kw_only=True)
class GMRES(RestartedSolver):
    """
    GMRES(m) linear solver with a fixed restart parameter. A subspace of at least the problem
    size gives the unrestarted method.
    """

    #: Size of the Arnoldi basis
    subspace: int = 10

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "subspace":
            check_pos(name, value)
        super().__setattr__(name, value)

    def _planner(self, size: int) -> FixedPlanner[T]:
        return FixedPlanner(min(self.subspace, size))
