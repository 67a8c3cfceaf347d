"""Implicit TPMS lattice fields for computational engineering geometry."""

from .tpms_library import (
    TPMSType,
    ImplicitField,
    Gyroid,
    SchwarzPrimitive,
    SchwarzDiamond,
    Lidinoid,
    TPMS_PATTERNS,
    get_pattern,
)
from .split_wall import SplitWallField, SplitWallGyroid
from .transition import TransitionField

__version__ = "0.1.0"
