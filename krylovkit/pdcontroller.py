# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Sequence
from dataclasses import dataclass

from .errors import ConfigurationError
from .utils import check_pos, check_opt_pos, sign

@dataclass(kw_only=True)
class PDController:
    """
    Proportional-derivative law for the restart parameter m. With the residual norms
    :math:`r_{i-1}, r_{i-2}, r_{i-3}` of the last cycles the controller evaluates

    .. math::
        \\Delta m = \\mathrm{round}\\left(\\alpha_P \\left(\\frac{r_{i-1}}{r_{i-2}} - 1\\right)
                  + \\alpha_D \\left(\\frac{r_{i-1}}{r_{i-2}} - \\frac{r_{i-2}}{r_{i-3}}\\right)\\right)

    and moves m by one step in the direction of :math:`\\Delta m` if :math:`|\\Delta m|` reaches the
    threshold, otherwise m is kept. The derivative part is zero while fewer than three norms
    are known. The result is always clamped to [m_min, m_max].
    """

    #: Lower bound of the restart parameter.
    m_min: int = 1
    #: Upper bound of the restart parameter, None uses the problem size.
    m_max: None | int = None
    #: Amount by which m changes when the controller acts.
    step: int = 1
    #: Proportional gain.
    alpha_p: float = -3.0
    #: Derivative gain.
    alpha_d: float = 5.0
    #: Minimum magnitude of the rounded control signal that changes m.
    threshold: int = 1

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("m_min", "step", "threshold"):
            check_pos(name, value)
        elif name == "m_max":
            check_opt_pos(name, value)
        super().__setattr__(name, value)

    def bounds(self, size: int) -> tuple[int, int]:
        """Effective bounds for a system of the given size."""
        upper = size if self.m_max is None else self.m_max
        return self.m_min, upper

    def check(self, size: int, initial: int) -> None:
        lower, upper = self.bounds(size)
        if lower >= upper or upper > size:
            raise ConfigurationError(
                f"Bounds must satisfy 1 <= m_min < m_max <= n, got m_min={lower}, m_max={upper}, n={size}.")
        if not lower <= initial <= upper:
            raise ConfigurationError(
                f"Bounds must satisfy m_min <= m_initial <= m_max, got m_initial={initial}.")
        if self.step >= size:
            raise ConfigurationError(f"step must satisfy 0 < step < n, got {self.step}.")

    def signal(self, residuals: Sequence[float]) -> int:
        """Rounded control signal from the history of absolute residual norms."""
        if len(residuals) < 2:
            return 0
        ratio = residuals[-1] / residuals[-2]
        value = self.alpha_p * (ratio - 1.0)
        if len(residuals) >= 3:
            value += self.alpha_d * (ratio - residuals[-2] / residuals[-3])
        return round(value)

    def __call__(self, m: int, residuals: Sequence[float], size: int) -> int:
        """Restart parameter for the next cycle given the current one and the residual history."""
        lower, upper = self.bounds(size)
        delta = self.signal(residuals)
        if abs(delta) >= self.threshold:
            m = m + self.step * sign(delta)
        return min(max(m, lower), upper)
