# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Generic, Sequence
from collections import deque
from copy import deepcopy

from .backend import T
from .utils import check_pos

def augmentation_split(cycles: int, capacity: int, subspace: int, size: int) -> tuple[int, int]:
    """
    Number of operator built and history built basis columns for a cycle that follows
    cycles completed ones. The total stays at subspace+capacity (at most size) and the history
    part grows with the number of available error vectors.
    """
    total = min(subspace + capacity, size)
    augment = min(cycles, capacity, total - 1)
    return total - augment, augment

class ApproximationErrorHistory(Generic[T]):
    """
    Bounded FIFO of the updates x_new - x_old of the last capacity cycles. Vectors are copied on
    the way in and out, so the stored entries never alias the iterate.
    """

    capacity: int
    _errors: deque[T]

    def __init__(self, capacity: int) -> None:
        check_pos("capacity", capacity)
        self.capacity = capacity
        self._errors = deque(maxlen=capacity)

    def append(self, error: T) -> None:
        """Store the update of a completed cycle, dropping the oldest one when full."""
        self._errors.append(deepcopy(error))

    def query(self) -> Sequence[T]:
        """Stored updates ordered from the newest to the oldest."""
        return [deepcopy(error) for error in reversed(self._errors)]

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ApproximationErrorHistory(capacity={self.capacity}, size={len(self)})"
