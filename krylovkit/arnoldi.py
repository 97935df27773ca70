# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Generic, Sequence
from dataclasses import dataclass

from .backend import DType, Device, T, namespace_of_arrays, device, inner, norm, machine_eps

@dataclass(kw_only=True)
class ArnoldiBasis(Generic[T]):
    #: Orthonormal basis, one vector per row. Holds size+1 rows, the last one is zero after a breakdown.
    basis: T
    #: Upper Hessenberg matrix of shape (size+1, size) with A W = V H.
    hess: T
    #: Search directions W, one per row. Equal to the first size rows of basis without augmentation.
    directions: T
    #: Number of columns that were actually built.
    size: int
    #: True if the process stopped early because the new direction vanished.
    breakdown: bool

class ArnoldiData(Generic[T]):
    device: Device
    dtype: DType
    subspace: int
    basis: T
    directions: T
    hess: T

    def __init__(self, start: T, subspace: int) -> None:
        xp = namespace_of_arrays(start)
        self.device = device(start)
        self.dtype = start.dtype
        self.subspace = subspace
        self.basis = xp.zeros((subspace+1, *start.shape), device=self.device, dtype=self.dtype)
        self.directions = xp.zeros((subspace, *start.shape), device=self.device, dtype=self.dtype)
        self.hess = xp.zeros((subspace+1, subspace), device=self.device, dtype=self.dtype)
        self.basis[0,...] = start

    def truncate(self, size: int, breakdown: bool) -> ArnoldiBasis[T]:
        return ArnoldiBasis(basis=self.basis[:size+1,...],
                            hess=self.hess[:size+1,:size],
                            directions=self.directions[:size,...],
                            size=size,
                            breakdown=breakdown)

def arnoldi(
        mat: Callable[[T], T],
        start: T,
        subspace: int,
        augment: Sequence[T] = (), /,
        breakdown: float | None = None) -> ArnoldiBasis[T]:
    """
    Modified Gram-Schmidt Arnoldi process starting at the unit vector start.

    The first subspace columns come from repeated application of mat to the latest basis vector.
    The vectors in augment fill the following len(augment) columns, in the given order: each one
    is normalised, stored as a search direction and mat is applied to it instead of to a basis
    vector. Either way the product is orthogonalised against every accepted basis vector one
    after the other and the projections are stored in the Hessenberg matrix.

    If the orthogonalised vector is negligible compared to the product it came from, the
    subspace is invariant and the process stops there. The basis and Hessenberg matrix are cut
    to the columns built so far. An augmentation column whose image adds nothing to the basis
    is dropped instead of kept, since it does not make the subspace invariant. breakdown is that
    relative threshold and defaults to a hundred times the machine epsilon of the working dtype.
    """
    xp = namespace_of_arrays(start)
    total = subspace + len(augment)
    data = ArnoldiData(start, total)
    if breakdown is None:
        breakdown = 100 * machine_eps(data.dtype, xp)

    for idx in range(total):
        if idx < subspace:
            direction = data.basis[idx,...]
        else:
            direction = augment[idx-subspace]
            length = norm(direction)
            if length == 0.0:
                return data.truncate(idx, True)
            direction = direction / length
        data.directions[idx,...] = direction

        if _gram_schmidt(mat, data, direction, idx, breakdown):
            # dependent augmentation column
            if idx >= subspace:
                return data.truncate(idx, True)
            return data.truncate(idx+1, True)

    return data.truncate(total, False)

def _gram_schmidt(
        mat: Callable[[T], T],
        data: ArnoldiData[T],
        direction: T,
        idx: int,
        breakdown: float) -> bool:
    basis, hess = data.basis, data.hess
    vec = mat(direction)
    scale = norm(vec)
    for j in range(idx + 1):
        hess[j,idx] = inner(vec, basis[j,...])
        vec = vec - hess[j,idx] * basis[j,...]
    length = norm(vec)
    if length <= breakdown * scale:
        hess[idx+1,idx] = 0.0
        return True
    hess[idx+1,idx] = length
    basis[idx+1,...] = vec / length
    return False
