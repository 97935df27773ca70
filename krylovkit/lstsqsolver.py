# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
from dataclasses import dataclass
import array_api_compat

from .backend import T, namespace_of_arrays
from .utils import check_non_neg

@dataclass
class LstsqSolver:
    """
    Dense least squares through the linalg extension of the array backend. Slower than back
    substitution, but it returns the minimum norm solution when the projected system is singular.
    """

    #: Cutoff for small singular values, None uses the backend default.
    rcond: None | float = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "rcond" and value is not None:
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__(self, A: T, b: T) -> T:
        if array_api_compat.is_cupy_array(A):
            import cupy as cp
            return cp.linalg.lstsq(A, b, rcond=self.rcond)[0] # type: ignore

        xp = namespace_of_arrays(A, b)
        if not hasattr(xp, "linalg") or not hasattr(xp.linalg, "lstsq"):
            raise NotImplementedError(
                f"Method linalg.lstsq is not implemented for backend {xp}.")
        return xp.linalg.lstsq(A, b, rcond=self.rcond)[0] # type: ignore
