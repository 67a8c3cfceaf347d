"""Configuration dataclasses describing TPMS fields."""

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Tuple, Union

from .tpms_library import TPMSType, get_pattern, parse_tpms_type
from .split_wall import SplitWallField
from .transition import TransitionField
from .utils import check_finite, check_non_negative, check_point, check_positive


@dataclass
class PatternConfig:
    """Raw TPMS pattern parameters."""
    tpms_type: Union[TPMSType, str] = TPMSType.GYROID
    unit_size: float = 1.0  # unit cell size, same unit as the sampled coordinates

    def __post_init__(self):
        """Validate pattern."""
        self.tpms_type = parse_tpms_type(self.tpms_type)
        self.unit_size = check_positive("unit_size", self.unit_size)


@dataclass
class SplitWallConfig:
    """Wall-thickened shell parameters."""
    unit_size: float
    center: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    wall_thickness: float = 0.0  # total shell thickness in field units
    tpms_type: Union[TPMSType, str] = TPMSType.GYROID

    def __post_init__(self):
        """Validate shell."""
        self.unit_size = check_positive("unit_size", self.unit_size)
        self.wall_thickness = check_non_negative("wall_thickness", self.wall_thickness)
        self.tpms_type = parse_tpms_type(self.tpms_type)
        self.center = check_point("center", self.center)


@dataclass
class TransitionConfig:
    """Transition between two raw patterns along x."""
    low: PatternConfig = field(default_factory=lambda: PatternConfig(TPMSType.DIAMOND))
    high: PatternConfig = field(default_factory=lambda: PatternConfig(TPMSType.PRIMITIVE))
    ramp_start: float = -2.0
    ramp_span: float = 5.0

    def __post_init__(self):
        """Validate ramp and nested patterns."""
        if isinstance(self.low, Mapping):
            self.low = _build_config(PatternConfig, self.low)
        if isinstance(self.high, Mapping):
            self.high = _build_config(PatternConfig, self.high)
        for name in ("low", "high"):
            value = getattr(self, name)
            if not isinstance(value, PatternConfig):
                raise ValueError(
                    f"{name} must be a PatternConfig or mapping, got {type(value).__name__}"
                )
        self.ramp_start = check_finite("ramp_start", self.ramp_start)
        self.ramp_span = check_positive("ramp_span", self.ramp_span)


FieldConfig = Union[PatternConfig, SplitWallConfig, TransitionConfig]

CONFIG_KINDS = {
    "pattern": PatternConfig,
    "split_wall": SplitWallConfig,
    "transition": TransitionConfig,
}


def _build_config(config_cls, values: Mapping[str, Any]):
    known = {f.name for f in fields(config_cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown keys for {config_cls.__name__}: {unknown}")
    try:
        return config_cls(**values)
    except TypeError as e:
        raise ValueError(f"Invalid {config_cls.__name__}: {e}") from e


def config_from_dict(values: Mapping[str, Any]) -> FieldConfig:
    """
    Build a field configuration from a plain mapping.

    Parameters
    ----------
    values : Mapping
        Must contain "kind" ("pattern", "split_wall" or "transition");
        remaining keys are the fields of the matching config class.
        For transitions, "low" and "high" may be nested mappings.

    Returns
    -------
    config : PatternConfig, SplitWallConfig or TransitionConfig

    Raises
    ------
    ValueError
        If the kind is missing or unknown, or the parameters are invalid
    """
    values = dict(values)
    kind = values.pop("kind", None)
    if kind not in CONFIG_KINDS:
        raise ValueError(
            f"Unknown field kind {kind!r}; expected one of: {', '.join(CONFIG_KINDS)}"
        )
    return _build_config(CONFIG_KINDS[kind], values)


def build_field(config: FieldConfig):
    """Construct the field described by a configuration."""
    if isinstance(config, PatternConfig):
        return get_pattern(config.tpms_type, config.unit_size)
    if isinstance(config, SplitWallConfig):
        return SplitWallField(
            unit_size=config.unit_size,
            center=config.center,
            wall_thickness=config.wall_thickness,
            tpms_type=config.tpms_type,
        )
    if isinstance(config, TransitionConfig):
        return TransitionField(
            pattern_low=build_field(config.low),
            pattern_high=build_field(config.high),
            ramp_start=config.ramp_start,
            ramp_span=config.ramp_span,
        )
    raise ValueError(f"Unsupported field config: {type(config).__name__}")
