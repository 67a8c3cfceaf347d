"""
Grid sampling of TPMS fields.

Evaluates a field over a regular 3D grid for a downstream voxelization
or meshing step, and classifies the samples into solid and void.
"""

from typing import NamedTuple, Sequence, Tuple, Union
import warnings
import numpy as np

from .tpms_library import ImplicitField


class GridSample(NamedTuple):
    """Field values on a regular grid (all arrays share one shape)."""
    x: np.ndarray  # x coordinates, indexing='ij'
    y: np.ndarray  # y coordinates
    z: np.ndarray  # z coordinates
    values: np.ndarray  # signed field values

    @property
    def spacing(self) -> Tuple[float, float, float]:
        """Grid step along x, y, z."""
        return (
            float(self.x[1, 0, 0] - self.x[0, 0, 0]),
            float(self.y[0, 1, 0] - self.y[0, 0, 0]),
            float(self.z[0, 0, 1] - self.z[0, 0, 0]),
        )


def _resolve_resolution(resolution: Union[int, Sequence[int]]) -> Tuple[int, int, int]:
    if np.isscalar(resolution):
        resolution = (resolution,) * 3
    try:
        counts = tuple(resolution)
    except TypeError as e:
        raise ValueError(f"resolution must be an int or 3 ints, got {resolution!r}") from e
    # bool is an int subclass but never a point count
    if len(counts) != 3 or not all(
        isinstance(n, (int, np.integer)) and not isinstance(n, bool) for n in counts
    ):
        raise ValueError(f"resolution must be an int or 3 ints, got {resolution!r}")
    counts = tuple(int(n) for n in counts)
    if any(n < 2 for n in counts):
        raise ValueError(f"resolution must be at least 2 per axis, got {counts}")
    return counts


def sample_grid(
    field: ImplicitField,
    bounds: Sequence[Tuple[float, float]],
    resolution: Union[int, Sequence[int]] = 50,
    max_points: int = 50_000_000,
) -> GridSample:
    """
    Evaluate a field on a regular grid.

    Parameters
    ----------
    field : ImplicitField
        Field to evaluate (any object with evaluate(x, y, z))
    bounds : sequence of 3 (min, max) pairs
        Extent of the grid along x, y, z
    resolution : int or 3 ints
        Grid points per axis (>= 2)
    max_points : int
        Upper limit on total grid points; larger grids are scaled down
        proportionally

    Returns
    -------
    sample : GridSample
        Coordinates and field values, shape (n_x, n_y, n_z)
    """
    if len(bounds) != 3:
        raise ValueError(f"bounds must give (min, max) for 3 axes, got {len(bounds)}")
    for lo, hi in bounds:
        if not (np.isfinite(lo) and np.isfinite(hi)) or hi <= lo:
            raise ValueError(f"Invalid axis bounds ({lo}, {hi})")

    n_x, n_y, n_z = _resolve_resolution(resolution)

    # Limit grid size to prevent memory exhaustion
    total_points = n_x * n_y * n_z
    if total_points > max_points:
        scale = (max_points / total_points) ** (1 / 3)
        n_x = max(2, int(n_x * scale))
        n_y = max(2, int(n_y * scale))
        n_z = max(2, int(n_z * scale))
        warnings.warn(
            f"Grid of {total_points} points exceeds max_points={max_points}; "
            f"resolution reduced to ({n_x}, {n_y}, {n_z})"
        )

    x = np.linspace(bounds[0][0], bounds[0][1], n_x)
    y = np.linspace(bounds[1][0], bounds[1][1], n_y)
    z = np.linspace(bounds[2][0], bounds[2][1], n_z)
    X, Y, Z = np.meshgrid(x, y, z, indexing='ij')

    values = np.asarray(field.evaluate(X, Y, Z), dtype=float)
    return GridSample(X, Y, Z, values)


def get_solid_mask(values: np.ndarray, level: float = 0.0) -> np.ndarray:
    """
    Get boolean mask for solid regions.

    Returns
    -------
    np.ndarray : Boolean mask (True = solid, False = void)
    """
    return np.asarray(values) <= level


def solid_fraction(values: np.ndarray, level: float = 0.0) -> float:
    """Fraction of samples classified as solid."""
    mask = get_solid_mask(values, level)
    return float(np.sum(mask) / mask.size)
