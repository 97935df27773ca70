# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of krylovkit."""

from .errors import ConfigurationError
from .solverresult import SolverResult
from .matrixleastsquares import MatrixLeastSquares
from .backsubstitution import BackSubstitution
from .lstsqsolver import LstsqSolver
from .linearsolver import LinearSolver

from .arnoldi import ArnoldiBasis
from .givensrotation import RotationResult
from .pdcontroller import PDController
from .errorhistory import ApproximationErrorHistory
from .iteratestate import IterateState

from .options import Options, ConvergenceOptions, ProjectionOptions, OptionType

from .gmres import GMRES
from .pdgmres import PDGMRES
from .lgmres import LGMRES
from .krylovkit import KrylovKit
