# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Type
import h5py
import numpy as np

from .backend import ArrayNamespace, to_device
from .solverresult import SolverResult

def write(group: h5py.Group, obj: SolverResult) -> None:
    if isinstance(obj, SolverResult):
        group.attrs["converged"] = obj.converged
        group.attrs["cycles"] = obj.cycles
        group.attrs["time"] = obj.time
        group.create_dataset("array", data=np.asarray(to_device(obj.array, "cpu")))
        group.create_dataset("residuals", data=np.asarray(obj.residuals, dtype=np.float64))
        group.create_dataset("subspaces", data=np.asarray(obj.subspaces, dtype=np.int64))
    else:
        raise ValueError("Invalid object.")

def read(group: h5py.Group, cls: Type[SolverResult], xp: Optional[ArrayNamespace] = None) -> SolverResult:
    if cls == SolverResult:
        if xp is None:
            raise ValueError("Array namespace must be provided to read SolverResult.")
        return SolverResult(array=xp.asarray(np.asarray(get_dataset(group, "array"))),
                            converged=bool(get_attr(group, "converged")),
                            residuals=[float(val) for val in get_dataset(group, "residuals")],
                            cycles=int(get_attr(group, "cycles")),
                            subspaces=[int(val) for val in get_dataset(group, "subspaces")],
                            time=float(get_attr(group, "time")))

    raise ValueError("Invalid class.")

def get_attr(group: h5py.Group, name: str) -> Any:
    return group.attrs[name]

def get_dataset(group: h5py.Group, name: str) -> Any:
    dataset = group[name]
    assert isinstance(dataset, h5py.Dataset)
    return dataset[()]
