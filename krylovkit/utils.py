# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .errors import ConfigurationError

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ConfigurationError(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ConfigurationError(f"{msg} must not be negative, got {value}")

def check_opt_pos(msg: str, value: None | int | float):
    if value is not None:
        check_pos(msg, value)

def sign(value: int | float) -> int:
    return (value > 0) - (value < 0)
