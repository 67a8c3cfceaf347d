"""
Wall-thickened (split wall) TPMS shells.

Turns a zero-thickness pattern into a solid shell: the region within half
the wall thickness of the base surface becomes solid on both sides, with
the base surface itself left as a zero-thickness split down the middle.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union
import numpy as np

from .tpms_library import TPMSType, get_pattern, parse_tpms_type
from .utils import check_non_negative, check_point, check_positive


@dataclass(frozen=True)
class SplitWallField:
    """
    Shell of finite wall thickness around a TPMS surface.

    Parameters
    ----------
    unit_size : float
        Unit cell size (> 0), sets the frequency of the base pattern
    center : Tuple[float, float, float]
        Origin of the pattern's local frame
    wall_thickness : float
        Total shell thickness in field units (>= 0). Zero collapses the
        shell and leaves |base| (no solid).
    tpms_type : TPMSType or str
        Base pattern (Gyroid unless stated otherwise)
    """
    unit_size: float
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    wall_thickness: float = 0.0
    tpms_type: Union[TPMSType, str] = TPMSType.GYROID
    base: object = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        unit_size = check_positive("unit_size", self.unit_size)
        wall_thickness = check_non_negative("wall_thickness", self.wall_thickness)
        center = check_point("center", self.center)
        tpms_type = parse_tpms_type(self.tpms_type)
        object.__setattr__(self, "unit_size", unit_size)
        object.__setattr__(self, "wall_thickness", wall_thickness)
        object.__setattr__(self, "center", center)
        object.__setattr__(self, "tpms_type", tpms_type)
        object.__setattr__(self, "base", get_pattern(tpms_type, unit_size))

    @property
    def frequency_scale(self) -> float:
        return self.base.frequency_scale

    def evaluate(self, x, y, z):
        cx, cy, cz = self.center
        d = self.base.evaluate(x - cx, y - cy, z - cz)

        half_t = 0.5 * self.wall_thickness
        outer = np.maximum(d, np.abs(d) - half_t)
        inner = np.maximum(-d, np.abs(d) - half_t)
        return np.minimum(outer, inner)

    def __call__(self, x, y, z):
        return self.evaluate(x, y, z)


def SplitWallGyroid(unit_size: float,
                    center: Tuple[float, float, float] = (0.0, 0.0, 0.0),
                    wall_thickness: float = 0.0) -> SplitWallField:
    """Split wall shell around a Gyroid surface."""
    return SplitWallField(unit_size, center, wall_thickness, TPMSType.GYROID)
