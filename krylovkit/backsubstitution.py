# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .backend import T, namespace_of_arrays, device, shape

class BackSubstitution:
    """
    Solves an upper triangular system Ry = g from the last row upwards. A zero pivot yields a
    zero coefficient, which leaves that direction unused.
    """

    def __call__(self, A: T, b: T) -> T:
        xp = namespace_of_arrays(A, b)
        rows = shape(A)[0]
        y = xp.zeros(rows, device=device(A), dtype=A.dtype)
        for i in range(rows-1, -1, -1):
            pivot = float(A[i,i])
            if pivot == 0.0:
                continue
            acc = b[i] - xp.sum(A[i,i+1:] * y[i+1:])
            y[i] = acc / pivot
        return y

    def __repr__(self) -> str:
        return "BackSubstitution()"
