"""Example: sample a Diamond -> Primitive transition and a split wall Gyroid."""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tpmsfield.config import config_from_dict, build_field
from tpmsfield.sampling import sample_grid, solid_fraction


def main():
    """Sample two fields and report their solid fractions."""

    # Default ramp: pure Diamond below x = -2, pure Primitive above x = 3
    transition = build_field(config_from_dict({"kind": "transition"}))

    # Gyroid shell, 10 mm cells, wall of 0.6 in field units
    shell = build_field(config_from_dict({
        "kind": "split_wall",
        "unit_size": 10.0,
        "center": (0.0, 0.0, 0.0),
        "wall_thickness": 0.6,
    }))

    bounds_transition = ((-4.0, 5.0), (0.0, 2.0), (0.0, 2.0))
    bounds_shell = ((0.0, 20.0), (0.0, 20.0), (0.0, 20.0))

    for name, field, bounds in [
        ("transition", transition, bounds_transition),
        ("split wall gyroid", shell, bounds_shell),
    ]:
        sample = sample_grid(field, bounds, resolution=60)
        print(f"{name}: grid {sample.values.shape}, "
              f"solid fraction = {solid_fraction(sample.values):.3f}")

    # Solid fraction across the transition, slice by slice in x
    sample = sample_grid(transition, bounds_transition, resolution=(10, 40, 40))
    print("\nx        solid fraction")
    for i in range(sample.x.shape[0]):
        print(f"{sample.x[i, 0, 0]:6.2f}   {solid_fraction(sample.values[i]):.3f}")


if __name__ == "__main__":
    main()
