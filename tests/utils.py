import numpy as np
import scipy.sparse
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def rand_data(xp, *shape: int, seed: int = 0):
    data = np.random.default_rng(seed).random(shape)
    if api.is_cupy_namespace(xp):
        return xp.asarray(data)
    elif api.is_torch_namespace(xp):
        return xp.asarray(data)
    else:
        return data

def unit_vector(xp, n: int, idx: int = 0):
    vec = xp.zeros(n, dtype=xp.float64)
    vec[idx] = 1.0
    return vec

def cyclic_shift(xp, n: int):
    """Permutation matrix with e_i -> e_{i+1} and e_n -> e_1."""
    return xp.asarray(np.roll(np.eye(n), 1, axis=0))

def tridiagonal(n: int, lower: float, diag: float, upper: float):
    """Sparse tridiagonal Toeplitz matrix in CSR format."""
    return scipy.sparse.diags([lower, diag, upper], [-1, 0, 1], shape=(n, n), format="csr")

def convection_diffusion(n: int, peclet: float, shift: float = 0.5):
    """Central difference convection-diffusion operator with a reaction term, nonsymmetric."""
    return tridiagonal(n, -1.0 - peclet, 2.0 + shift, -1.0 + peclet)
