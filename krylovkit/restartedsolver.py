# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Generic, Optional, Protocol, Sequence
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
import time

from .backend import ArrayLike, ArrayNamespace, DType, T, namespace_of_arrays, device, size, norm, machine_eps, as_floating
from .errors import ConfigurationError
from .utils import check_pos, check_non_neg, check_opt_pos
from .linearoperator import as_operator
from .arnoldi import arnoldi
from .givensrotation import plane_rotations
from .matrixleastsquares import MatrixLeastSquares
from .backsubstitution import BackSubstitution
from .iteratestate import IterateState
from .solverresult import SolverResult

logger = logging.getLogger(__name__)

@dataclass(kw_only=True)
class CyclePlan(Generic[T]):
    #: Number of basis columns built by applying the operator.
    subspace: int
    #: Augmentation vectors appended to the search space, newest first.
    augment: Sequence[T] = field(default_factory=list)

    @property
    def total(self) -> int:
        return self.subspace + len(self.augment)

class RestartPlanner(Protocol[T]):
    """Decides the search space of each cycle for one solver invocation."""

    def plan(self, state: IterateState[T], size: int) -> CyclePlan[T]:
        ...

    def record(self, update: T) -> None:
        ...

@dataclass(kw_only=True)
class RestartedSolver(ABC):
    """
    Common cycle driver of the restarted Krylov solvers. Each cycle computes the residual,
    builds an Arnoldi basis as planned by the variant, solves the projected least squares
    problem with Givens rotations and updates the iterate. The residual norm of the projected
    problem is recorded without forming the new residual explicitly. The variants only supply the
    planner, so the driver itself cannot be instantiated.
    """

    #: Maximum number of restart cycles.
    nsteps: int = 10

    #: Tolerance on the relative residual norm, after which the algorithm is stopped.
    eps: float = 1e-6

    #: Solver for the triangular system of every cycle.
    solver: MatrixLeastSquares = BackSubstitution()

    #: Relative threshold for a vanishing Arnoldi vector, None for the default of the dtype.
    breakdown: None | float = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "nsteps":
            check_pos(name, value)
        elif name == "eps":
            check_non_neg(name, value)
        elif name == "breakdown":
            check_opt_pos(name, value)
        super().__setattr__(name, value)

    def __call__(
            self,
            mat: Any,
            rhs: T,
            guess: Optional[T] = None, /) -> SolverResult[T]:
        """
        Solve the linear system with mat being a matrix or linear operator and rhs being the right
        hand side. The initial guess can be provided, otherwise it will be initialized to zero.
        """
        xp = namespace_of_arrays(rhs)
        rhs = as_floating(rhs)
        guess = xp.zeros_like(rhs) if guess is None else as_floating(guess)
        self._check_input(rhs, guess)
        op = as_operator(mat, rhs)

        num = size(rhs)
        self._check_config(num)
        fallback = self._fallback(num)
        if fallback is not None:
            logger.info("%s delegates to %s", type(self).__name__, fallback)
            return fallback(op, rhs, guess)

        stamp = time.time()
        eps = self._tolerance(rhs.dtype, xp)
        planner = self._planner(num)

        residual = rhs - op(guess)
        if residual.shape != rhs.shape:
            raise ConfigurationError("Operator output does not match the shape of b.")
        state = IterateState(guess, norm(residual))

        converged = False
        while True:
            plan = planner.plan(state, num)
            update, res_norm = self._cycle(op, residual, plan)
            state.advance(update, res_norm, plan.total)
            planner.record(update)

            relres = state.relative[-1]
            logger.debug("cycle %d: m=%d relres=%.3e", state.completed, plan.total, relres)
            if relres < eps:
                converged = True
                logger.info("%s converged after %d cycles", type(self).__name__, state.completed)
                break
            if state.completed >= self.nsteps:
                logger.warning("%s stopped after %d cycles at relres=%.3e",
                               type(self).__name__, state.completed, relres)
                break
            residual = rhs - op(state.array)

        return SolverResult(array=state.array,
                            converged=converged,
                            residuals=state.relative,
                            cycles=state.completed,
                            subspaces=state.subspaces,
                            time=time.time() - stamp)

    def _cycle(
            self,
            op: Callable[[T], T],
            residual: T,
            plan: CyclePlan[T]) -> tuple[T, float]:
        xp = namespace_of_arrays(residual)
        beta = norm(residual)
        if beta == 0.0:
            return xp.zeros_like(residual), 0.0

        basis = arnoldi(op, residual / beta, plan.subspace, plan.augment,
                        breakdown=self.breakdown)
        rot = plane_rotations(basis.hess, beta)
        idx = basis.size
        y = self.solver(rot.triangular[:idx,:idx], rot.rhs[:idx])
        update = xp.tensordot(y, basis.directions, axes=([0], [0]))
        return update, rot.residual

    def _tolerance(self, dtype: DType, xp: ArrayNamespace) -> float:
        limit = machine_eps(dtype, xp)
        if self.eps < limit:
            logger.warning("Tolerance is too small and it will be changed to eps.")
            return limit
        if self.eps >= 1.0:
            logger.warning("Tolerance is too large and it will be changed to 1-eps.")
            return 1.0 - limit
        return self.eps

    def _check_input(self, rhs: ArrayLike, guess: ArrayLike) -> None:
        if size(rhs) == 0:
            raise ConfigurationError("Vector b cannot be empty.")
        if guess.shape != rhs.shape:
            raise ConfigurationError("Dimension mismatch between b and initial guess x0.")
        if device(guess) != device(rhs):
            raise ConfigurationError("x0 and b must be on the same device.")
        if guess.dtype != rhs.dtype:
            raise ConfigurationError("x0 and b must have the same dtype.")

    def _check_config(self, size: int) -> None:
        pass

    def _fallback(self, size: int) -> Optional["RestartedSolver"]:
        return None

    @abstractmethod
    def _planner(self, size: int) -> RestartPlanner[T]: ...