# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any
import array_api_compat as api
from array_api_compat import to_device, device
from array_api_compat import size as _size

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType, T
from .errors import ConfigurationError


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except Exception as exc:
            raise TypeError("Provided object is not a recognized array or namespace.") from exc
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays(*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp  # type: ignore

def inner(vec1: ArrayLike, vec2: ArrayLike) -> float:
    """Euclidean inner product of two real arrays of equal shape."""
    xp = namespace_of_arrays(vec1, vec2)
    return float(xp.sum(vec1*vec2))

def norm(vec: ArrayLike) -> float:
    """Euclidean norm of an array, taken over all entries."""
    xp = namespace_of_arrays(vec)
    return float(xp.sqrt(xp.sum(vec*vec)))

def machine_eps(dtype: DType, xp: ArrayNamespace) -> float:
    return float(xp.finfo(dtype).eps)

def as_floating(array: T) -> T:
    """Real floating point view of the input, integers and booleans are promoted to float64."""
    xp = namespace_of_arrays(array)
    if xp.isdtype(array.dtype, "complex floating"):
        raise ConfigurationError("Complex systems are not supported.")
    if xp.isdtype(array.dtype, "real floating"):
        return array
    return xp.astype(array, xp.float64)
