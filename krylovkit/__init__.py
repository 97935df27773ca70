# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging

from .krylovkit import KrylovKit
from .errors import ConfigurationError
from .solverresult import SolverResult

logging.getLogger(__name__).addHandler(logging.NullHandler())
