# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generic
from dataclasses import dataclass
from copy import deepcopy
from math import sqrt

from .backend import T, namespace_of_arrays, device, shape

@dataclass(kw_only=True)
class RotationResult(Generic[T]):
    #: Rotated Hessenberg matrix, its first rows form the upper triangular factor R.
    triangular: T
    #: Rotated right hand side g, one entry longer than the number of columns.
    rhs: T
    #: Cosines of the applied rotations.
    cosines: list[float]
    #: Sines of the applied rotations.
    sines: list[float]

    @property
    def size(self) -> int:
        return len(self.cosines)

    @property
    def residual(self) -> float:
        """Norm of the least squares residual, the magnitude of the last entry of g."""
        return abs(float(self.rhs[self.size]))

def givens(val1: float, val2: float) -> tuple[float, float, float]:
    """Cosine, sine and length of the plane rotation that zeroes val2 against val1."""
    denom = sqrt(val1**2 + val2**2)
    if denom == 0.0:
        return 1.0, 0.0, 0.0
    else:
        return val1/denom, val2/denom, denom

def plane_rotations(hess: T, beta: float) -> RotationResult[T]:
    """
    QR factorization of an upper Hessenberg matrix of shape (s+1, s) by s Givens rotations.
    Each column first receives all previous rotations, then a new rotation eliminates its
    sub-diagonal entry. The same rotations act on g = (beta, 0, ..., 0). The input is not modified.
    """
    xp = namespace_of_arrays(hess)
    hess = deepcopy(hess)
    subspace = shape(hess)[1]
    g = xp.zeros(subspace+1, device=device(hess), dtype=hess.dtype)
    g[0] = beta
    cs: list[float] = []
    sn: list[float] = []

    for i in range(subspace):
        for j in range(i):
            tmp = cs[j] * hess[j,i] + sn[j] * hess[j+1,i]
            hess[j+1,i] = -sn[j] * hess[j,i] + cs[j] * hess[j+1,i]
            hess[j,i] = tmp

        c, s, denom = givens(float(hess[i,i]), float(hess[i+1,i]))
        cs.append(c)
        sn.append(s)
        hess[i,i] = denom
        hess[i+1,i] = 0.0

        g[i+1] = -s * g[i]
        g[i] = c * g[i]

    return RotationResult(triangular=hess, rhs=g, cosines=cs, sines=sn)
