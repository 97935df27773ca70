# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

class ConfigurationError(ValueError):
    """
    Raised when a solver is configured inconsistently or the operator, right hand side and
    initial guess do not fit together. Raised before the first cycle starts.
    """
