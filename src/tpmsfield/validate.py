"""Validation functions for periodicity and symmetry of TPMS fields."""

import numpy as np
from .tpms_library import ImplicitField


def _sample_points(n_samples: int, extent: float, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.uniform(-extent, extent, size=(3, n_samples))


def validate_periodicity(
    field: ImplicitField,
    period: float,
    n_samples: int = 64,
    tol: float = 1e-9,
    seed: int = 0,
) -> tuple[bool, float]:
    """
    Check f(p + period * e_i) == f(p) along each axis.

    Parameters
    ----------
    field : ImplicitField
        Field to check
    period : float
        Expected spatial period
    n_samples : int
        Number of random sample points
    tol : float
        Absolute tolerance
    seed : int
        Seed for the sample points

    Returns
    -------
    valid : bool
        True if the field repeats within tolerance
    error : float
        Largest absolute deviation found
    """
    x, y, z = _sample_points(n_samples, 2.0 * period, seed)
    base = field.evaluate(x, y, z)

    error = 0.0
    for shifted in (
        field.evaluate(x + period, y, z),
        field.evaluate(x, y + period, z),
        field.evaluate(x, y, z + period),
    ):
        error = max(error, float(np.max(np.abs(shifted - base))))

    return error <= tol, error


def validate_axis_symmetry(
    field: ImplicitField,
    mode: str = "full",
    n_samples: int = 64,
    extent: float = 2.0,
    tol: float = 1e-9,
    seed: int = 0,
) -> tuple[bool, float]:
    """
    Check invariance under permutation of (x, y, z).

    mode "cyclic" checks (y, z, x) and (z, x, y); mode "full" also checks
    the three transpositions.

    Returns
    -------
    valid : bool
        True if the field is invariant within tolerance
    error : float
        Largest absolute deviation found
    """
    if mode not in ("full", "cyclic"):
        raise ValueError(f"mode must be 'full' or 'cyclic', got {mode!r}")

    x, y, z = _sample_points(n_samples, extent, seed)
    base = field.evaluate(x, y, z)

    permutations = [(y, z, x), (z, x, y)]
    if mode == "full":
        permutations += [(y, x, z), (x, z, y), (z, y, x)]

    error = 0.0
    for px, py, pz in permutations:
        error = max(error, float(np.max(np.abs(field.evaluate(px, py, pz) - base))))

    return error <= tol, error


def validate_all(field: ImplicitField, tol: float = 1e-9) -> bool:
    """
    Run the checks a pattern declares and fail fast if any fail.

    Uses the field's `period` and `PERMUTATION_SYMMETRY` attributes when
    present; fields without them pass trivially.

    Raises
    ------
    ValueError
        If validation fails
    """
    period = getattr(field, "period", None)
    if period is not None:
        valid, error = validate_periodicity(field, period, tol=tol)
        if not valid:
            raise ValueError(f"Periodicity violated: max error = {error:.2e}")

    symmetry = getattr(field, "PERMUTATION_SYMMETRY", None)
    if symmetry is not None:
        valid, error = validate_axis_symmetry(field, symmetry, tol=tol)
        if not valid:
            raise ValueError(f"{symmetry} axis symmetry violated: max error = {error:.2e}")

    return True
