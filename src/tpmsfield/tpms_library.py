"""
TPMS (Triply Periodic Minimal Surfaces) Library

Implicit pattern definitions for TPMS lattice infill.
Every pattern maps a point (x, y, z) to a signed value:
- the surface is the zero level-set
- solid is value <= 0, void is value > 0

Patterns are parameterized by the unit cell size. The frequency scale is
k = 2*pi / unit_size for Gyroid and Schwarz Primitive, and k / 2 for
Schwarz Diamond and Lidinoid. The default unit_size of 1.0 gives the
classic unit-period formulas.

All evaluators use numpy ufuncs, so x, y, z may be floats or arrays.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union
import numpy as np

from .utils import check_positive


class TPMSType(str, Enum):
    """Supported TPMS lattice types"""
    GYROID = "G"  # Gyroid
    PRIMITIVE = "P"  # Schwarz Primitive
    DIAMOND = "D"  # Schwarz Diamond
    LIDINOID = "L"  # Lidinoid


class ImplicitField(Protocol):
    """Anything that can be evaluated at a point."""

    def evaluate(self, x, y, z):
        """Return the signed value at (x, y, z)."""
        ...


@dataclass(frozen=True)
class _PeriodicPattern(ABC):
    """Shared construction and frequency handling for the raw patterns."""
    unit_size: float = 1.0

    # Fraction of 2*pi / unit_size used as the frequency scale
    FREQUENCY_FACTOR = 1.0
    # Invariance of the formula under permutation of (x, y, z)
    PERMUTATION_SYMMETRY = "full"

    def __post_init__(self):
        object.__setattr__(self, "unit_size", check_positive("unit_size", self.unit_size))

    @property
    def frequency_scale(self) -> float:
        return self.FREQUENCY_FACTOR * (2.0 * np.pi) / self.unit_size

    @property
    def period(self) -> float:
        """Spatial period along each axis (same unit as unit_size)."""
        return (2.0 * np.pi) / self.frequency_scale

    @abstractmethod
    def evaluate(self, x, y, z):
        """Return the pattern value at (x, y, z)."""

    def __call__(self, x, y, z):
        return self.evaluate(x, y, z)


@dataclass(frozen=True)
class Gyroid(_PeriodicPattern):
    """
    Gyroid (G) pattern.

    sin(kx)cos(ky) + sin(ky)cos(kz) + sin(kz)cos(kx), k = 2*pi / unit_size
    """
    PERMUTATION_SYMMETRY = "cyclic"

    def evaluate(self, x, y, z):
        k = self.frequency_scale
        return (np.sin(k * x) * np.cos(k * y) +
                np.sin(k * y) * np.cos(k * z) +
                np.sin(k * z) * np.cos(k * x))


@dataclass(frozen=True)
class SchwarzPrimitive(_PeriodicPattern):
    """
    Schwarz Primitive (P) pattern.

    cos(kx) + cos(ky) + cos(kz), k = 2*pi / unit_size
    """

    def evaluate(self, x, y, z):
        k = self.frequency_scale
        return np.cos(k * x) + np.cos(k * y) + np.cos(k * z)


@dataclass(frozen=True)
class SchwarzDiamond(_PeriodicPattern):
    """
    Schwarz Diamond (D) pattern.

    cos(kx)cos(ky)cos(kz) - sin(kx)sin(ky)sin(kz), k = pi / unit_size
    """
    FREQUENCY_FACTOR = 0.5

    def evaluate(self, x, y, z):
        k = self.frequency_scale
        return (np.cos(k * x) * np.cos(k * y) * np.cos(k * z) -
                np.sin(k * x) * np.sin(k * y) * np.sin(k * z))


@dataclass(frozen=True)
class Lidinoid(_PeriodicPattern):
    """
    Lidinoid (L) pattern, k = pi / unit_size.

    0.5 * [sin(2kx)cos(ky)sin(kz) + sin(2ky)cos(kz)sin(kx) + sin(2kz)cos(kx)sin(ky)]
    - 0.5 * [cos(2kx)cos(2ky) + cos(2ky)cos(2kz) + cos(2kz)cos(2kx)]
    """
    FREQUENCY_FACTOR = 0.5
    PERMUTATION_SYMMETRY = "cyclic"

    def evaluate(self, x, y, z):
        k = self.frequency_scale
        sx, sy, sz = np.sin(k * x), np.sin(k * y), np.sin(k * z)
        cx, cy, cz = np.cos(k * x), np.cos(k * y), np.cos(k * z)
        c2x, c2y, c2z = np.cos(2 * k * x), np.cos(2 * k * y), np.cos(2 * k * z)
        return (0.5 * (np.sin(2 * k * x) * cy * sz +
                       np.sin(2 * k * y) * cz * sx +
                       np.sin(2 * k * z) * cx * sy) -
                0.5 * (c2x * c2y + c2y * c2z + c2z * c2x))


# Mapping from TPMS type to pattern class
TPMS_PATTERNS = {
    TPMSType.GYROID: Gyroid,
    TPMSType.PRIMITIVE: SchwarzPrimitive,
    TPMSType.DIAMOND: SchwarzDiamond,
    TPMSType.LIDINOID: Lidinoid,
}


def parse_tpms_type(tpms_type: Union[TPMSType, str]) -> TPMSType:
    """
    Resolve a TPMSType from a member, its value ("G") or its name ("gyroid").

    Raises
    ------
    ValueError
        If the name matches no supported pattern
    """
    if isinstance(tpms_type, TPMSType):
        return tpms_type
    key = str(tpms_type).strip()
    for member in TPMSType:
        if key.upper() == member.value or key.upper() == member.name:
            return member
    valid = ", ".join(f"{m.name} ({m.value})" for m in TPMSType)
    raise ValueError(f"Unknown TPMS type {tpms_type!r}; expected one of: {valid}")


def get_pattern(tpms_type: Union[TPMSType, str], unit_size: float = 1.0) -> ImplicitField:
    """Build the pattern for a TPMS type with the given unit cell size."""
    return TPMS_PATTERNS[parse_tpms_type(tpms_type)](unit_size=unit_size)
