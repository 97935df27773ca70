# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generic, Hashable, Literal, Any, Self, TypeVar, overload
from enum import Enum
from copy import deepcopy
import threading

from .backend import ArrayNamespace
from .matrixleastsquares import MatrixLeastSquares
from .backsubstitution import BackSubstitution
from .utils import check_pos, check_non_neg, check_opt_pos

class OptionType(Enum):
    CONVERGENCE = 0
    PROJECTION = 1

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class ConvergenceOptions(Options):
    """
    Context manager for the stopping criteria of the restarted solvers.
    """

    #: Tolerance on the relative residual norm.
    eps: float
    #: Maximum number of restart cycles.
    nsteps: int

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            eps: float = 1e-6,
            nsteps: int = 10):
        check_non_neg("eps", eps)
        check_pos("nsteps", nsteps)
        self.eps = eps
        self.nsteps = nsteps
        super().__init__(namespace, OptionType.CONVERGENCE)

S = TypeVar("S", bound=MatrixLeastSquares)

class ProjectionOptions(Options, Generic[S]):
    """
    Context manager for the solution of the projected least squares problem of every cycle.
    """

    #: Solver for the small triangular system.
    solver: S
    #: Relative threshold below which a new Arnoldi vector counts as zero, None for the default.
    breakdown: None | float

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            solver: S = BackSubstitution(),
            breakdown: None | float = None):
        check_opt_pos("breakdown", breakdown)
        self.solver = deepcopy(solver)
        self.breakdown = breakdown
        super().__init__(namespace, OptionType.PROJECTION)

_opts: dict[Any, Options] = {}

def set_options(opts: Options) -> None:
    global _opts
    _opts[opts.key] = opts

@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.CONVERGENCE]) -> ConvergenceOptions: ...
@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.PROJECTION]) -> ProjectionOptions: ...
# implementation
def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")
