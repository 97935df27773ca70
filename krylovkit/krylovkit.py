# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generic, Literal, Any, Type, TypeVar, Optional
import h5py

from .backend import ArrayNamespace, get_namespace
from .matrixleastsquares import MatrixLeastSquares
from .backsubstitution import BackSubstitution
from .lstsqsolver import LstsqSolver
from .pdcontroller import PDController
from .gmres import GMRES
from .pdgmres import PDGMRES
from .lgmres import LGMRES
from .linearsolver import LinearSolver
from .solverresult import SolverResult
from .io import write as _write
from .io import read as _read
from .options import ConvergenceOptions, ProjectionOptions, OptionType, Options, set_options, get_options

NDArray = TypeVar("NDArray")

class KrylovKit(Generic[NDArray]):

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        self.namespace = get_namespace(namespace)

        set_options(self.convergence())
        set_options(self.projection())

    #-------------------------------------------------------------------------------------------------
    # small solver wrapper

    def back_substitution(self) -> BackSubstitution:
        """
        Triangular solver for the projected problem, the default.
        """
        return BackSubstitution()

    def lstsq(self, rcond: None | float = None) -> LstsqSolver:
        """
        Dense least squares solver for the projected problem, robust for singular systems.
        """
        return LstsqSolver(rcond=rcond)

    def pd_controller(
            self, *,
            m_min: int = 1,
            m_max: None | int = None,
            step: int = 1,
            alpha_p: float = -3.0,
            alpha_d: float = 5.0,
            threshold: int = 1) -> PDController:
        """
        Proportional-derivative control law for the restart parameter.
        """
        return PDController(m_min=m_min, m_max=m_max, step=step,
                            alpha_p=alpha_p, alpha_d=alpha_d, threshold=threshold)

    #-------------------------------------------------------------------------------------------------
    # restarted solver wrapper

    def gmres(
            self, *,
            subspace: int = 10,
            nsteps: None | int = None,
            eps: None | float = None,
            ) -> GMRES:
        """
        GMRES(m) iterative linear solver.
        """
        conv, proj = self._convergence(), self._projection()
        return GMRES(nsteps=conv.nsteps if nsteps is None else nsteps,
                     subspace=subspace,
                     eps=conv.eps if eps is None else eps,
                     solver=proj.solver,
                     breakdown=proj.breakdown)

    def pd_gmres(
            self, *,
            subspace: None | int = None,
            m_min: int = 1,
            m_max: None | int = None,
            step: int = 1,
            alpha_p: float = -3.0,
            alpha_d: float = 5.0,
            threshold: int = 1,
            nsteps: None | int = None,
            eps: None | float = None,
            ) -> PDGMRES:
        """
        PD-GMRES(m) iterative linear solver with an adaptive restart parameter.
        """
        conv, proj = self._convergence(), self._projection()
        controller = self.pd_controller(m_min=m_min, m_max=m_max, step=step,
                                        alpha_p=alpha_p, alpha_d=alpha_d, threshold=threshold)
        return PDGMRES(nsteps=conv.nsteps if nsteps is None else nsteps,
                       subspace=subspace,
                       controller=controller,
                       eps=conv.eps if eps is None else eps,
                       solver=proj.solver,
                       breakdown=proj.breakdown)

    def lgmres(
            self, *,
            subspace: int = 10,
            augment: int = 3,
            nsteps: None | int = None,
            eps: None | float = None,
            ) -> LGMRES:
        """
        LGMRES(m, k) iterative linear solver, augmented with approximation error vectors.
        """
        conv, proj = self._convergence(), self._projection()
        return LGMRES(nsteps=conv.nsteps if nsteps is None else nsteps,
                      subspace=subspace,
                      augment=augment,
                      eps=conv.eps if eps is None else eps,
                      solver=proj.solver,
                      breakdown=proj.breakdown)

    def solve(
            self,
            mat: Any,
            rhs: Any,
            guess: Optional[Any] = None, *,
            method: Literal["lgmres", "pd_gmres", "gmres"] = "lgmres",
            **config: Any) -> SolverResult[NDArray]:
        """
        Solve the linear system mat x = rhs with one of the restarted solvers. The remaining keyword
        arguments configure the solver as in lgmres, pd_gmres or gmres.
        """
        xp = self.namespace
        solver: LinearSolver
        if method == "lgmres":
            solver = self.lgmres(**config)
        elif method == "pd_gmres":
            solver = self.pd_gmres(**config)
        elif method == "gmres":
            solver = self.gmres(**config)
        else:
            raise ValueError(f"Unknown method {method}.")
        if isinstance(mat, (list, tuple)):
            mat = xp.asarray(mat)
        rhs = xp.asarray(rhs)
        if guess is not None:
            guess = xp.asarray(guess)
        return solver(mat, rhs, guess)

    #-------------------------------------------------------------------------------------------------
    # io wrapper

    def write(self, group: h5py.Group, obj: SolverResult[NDArray]) -> None:
        """
        Write a solver result into a h5py group.
        """
        _write(group, obj)

    def read(self, group: h5py.Group, cls: Type[SolverResult]) -> SolverResult[NDArray]:
        """
        Read a solver result from a h5py group.
        """
        return _read(group, cls, self.namespace)

    #-------------------------------------------------------------------------------------------------
    # default options

    def convergence(
            self,
            eps: float = 1e-6,
            nsteps: int = 10) -> ConvergenceOptions:
        """
        Stopping criteria used by the solvers created afterwards.
        """
        return ConvergenceOptions(namespace=self.namespace, eps=eps, nsteps=nsteps)

    def projection(
            self,
            solver: MatrixLeastSquares = BackSubstitution(),
            breakdown: None | float = None) -> ProjectionOptions:
        """
        Small solver and breakdown threshold used by the solvers created afterwards.
        """
        return ProjectionOptions(namespace=self.namespace, solver=solver, breakdown=breakdown)

    def set_options(self, opts: Options) -> None:
        set_options(opts)

    def get_options(self, otype: OptionType) -> Options:
        return get_options(self.namespace, otype)

    def _convergence(self) -> ConvergenceOptions:
        try:
            return get_options(self.namespace, OptionType.CONVERGENCE)
        except KeyError:
            return self.convergence()

    def _projection(self) -> ProjectionOptions:
        try:
            return get_options(self.namespace, OptionType.PROJECTION)
        except KeyError:
            return self.projection()
