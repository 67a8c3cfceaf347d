"""Linear transition between two TPMS patterns along the x axis."""

from dataclasses import dataclass, field

from .tpms_library import ImplicitField, SchwarzDiamond, SchwarzPrimitive
from .utils import check_finite, check_positive, limit_value, trans_fixed


@dataclass(frozen=True)
class TransitionField:
    """
    Blend of two fields with a ratio ramping linearly in x.

    The blend ratio is r = clamp((x - ramp_start) / ramp_span, 0, 1):
    the result is exactly pattern_low for x <= ramp_start, exactly
    pattern_high for x >= ramp_start + ramp_span, and linear in between.
    Defaults reproduce the Diamond -> Primitive transition over x in [-2, 3].
    """
    pattern_low: ImplicitField = field(default_factory=SchwarzDiamond)
    pattern_high: ImplicitField = field(default_factory=SchwarzPrimitive)
    ramp_start: float = -2.0
    ramp_span: float = 5.0

    def __post_init__(self):
        object.__setattr__(self, "ramp_start", check_finite("ramp_start", self.ramp_start))
        object.__setattr__(self, "ramp_span", check_positive("ramp_span", self.ramp_span))

    @property
    def ramp_end(self) -> float:
        return self.ramp_start + self.ramp_span

    def blend_ratio(self, x):
        """Share of pattern_high at coordinate x, in [0, 1]."""
        return limit_value((x - self.ramp_start) / self.ramp_span, 0.0, 1.0)

    def evaluate(self, x, y, z):
        d_low = self.pattern_low.evaluate(x, y, z)
        d_high = self.pattern_high.evaluate(x, y, z)
        return trans_fixed(d_low, d_high, self.blend_ratio(x))

    def __call__(self, x, y, z):
        return self.evaluate(x, y, z)
