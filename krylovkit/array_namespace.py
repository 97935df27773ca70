# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Static typing protocols for arrays following the Python array API standard."""

from typing import Any, Protocol, Sequence, TypeVar

Device = Any
DType = Any

class ArrayLike(Protocol):
    """Minimal array interface used by the solvers."""

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...
    @property
    def ndim(self) -> int: ...

    def __getitem__(self, key: Any, /) -> Any: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __add__(self, other: Any, /) -> Any: ...
    def __sub__(self, other: Any, /) -> Any: ...
    def __mul__(self, other: Any, /) -> Any: ...
    def __truediv__(self, other: Any, /) -> Any: ...
    def __float__(self) -> float: ...

T = TypeVar("T", bound=ArrayLike)

class ArrayNamespace(Protocol[T]):
    """Subset of an array API namespace used by the solvers."""

    float64: DType

    def asarray(self, obj: Any, /, *, dtype: DType = None, device: Device = None) -> T: ...
    def zeros(self, shape: int | Sequence[int], /, *, dtype: DType = None, device: Device = None) -> T: ...
    def zeros_like(self, x: T, /) -> T: ...
    def sum(self, x: T, /) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def astype(self, x: T, dtype: DType, /) -> T: ...
    def isdtype(self, dtype: DType, kind: Any, /) -> bool: ...
    def finfo(self, dtype: DType, /) -> Any: ...
    def tensordot(self, x1: T, x2: T, /, *, axes: Any = 2) -> T: ...
