"""Numeric helpers shared by the field evaluators."""

from typing import Tuple
import numpy as np


def limit_value(value, lower: float, upper: float):
    """Clamp value (scalar or array) into [lower, upper]."""
    return np.clip(value, lower, upper)


def trans_fixed(value_a, value_b, ratio):
    """
    Fixed linear transition from value_a to value_b.

    Written as (1 - ratio) * a + ratio * b so that ratio == 0 returns
    exactly a and ratio == 1 returns exactly b.
    """
    return (1.0 - ratio) * value_a + ratio * value_b


def _as_float(name: str, value, requirement: str) -> float:
    try:
        value_f = float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be {requirement}, got {value!r}") from e
    if not np.isfinite(value_f):
        raise ValueError(f"{name} must be {requirement}, got {value!r}")
    return value_f


def check_finite(name: str, value) -> float:
    """Return value as float, raising ValueError unless it is a finite number."""
    return _as_float(name, value, "a finite number")


def check_positive(name: str, value) -> float:
    """Return value as float, raising ValueError unless finite and > 0."""
    value_f = _as_float(name, value, "a finite positive number")
    if value_f <= 0:
        raise ValueError(f"{name} must be a finite positive number, got {value!r}")
    return value_f


def check_non_negative(name: str, value) -> float:
    """Return value as float, raising ValueError unless finite and >= 0."""
    value_f = _as_float(name, value, "a finite non-negative number")
    if value_f < 0:
        raise ValueError(f"{name} must be a finite non-negative number, got {value!r}")
    return value_f


def check_point(name: str, value) -> Tuple[float, float, float]:
    """Return value as a tuple of 3 finite floats, raising ValueError otherwise."""
    try:
        point = tuple(float(c) for c in value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be 3 finite coordinates, got {value!r}") from e
    if len(point) != 3 or not all(np.isfinite(c) for c in point):
        raise ValueError(f"{name} must be 3 finite coordinates, got {value!r}")
    return point
