# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generic
from copy import deepcopy

from .backend import T

class IterateState(Generic[T]):
    """Mutable state of a single solver invocation, carried from cycle to cycle."""

    #: Current approximate solution.
    array: T
    #: Absolute residual norms, the initial one first.
    norms: list[float]
    #: Search subspace dimension of every completed cycle.
    subspaces: list[int]
    #: Index of the running cycle, starting at one.
    cycle: int

    def __init__(self, guess: T, initial: float) -> None:
        self.array = deepcopy(guess)
        self.norms = [initial]
        self.subspaces = []
        self.cycle = 1

    @property
    def norm(self) -> float:
        return self.norms[-1]

    @property
    def completed(self) -> int:
        return len(self.norms) - 1

    @property
    def relative(self) -> list[float]:
        if self.norms[0] == 0.0:
            return [1.0] + [0.0] * self.completed
        return [norm / self.norms[0] for norm in self.norms]

    def advance(self, update: T, norm: float, subspace: int) -> None:
        """Add the update of the finished cycle to the iterate and record its residual."""
        self.array += update
        self.norms.append(norm)
        self.subspaces.append(subspace)
        self.cycle += 1
