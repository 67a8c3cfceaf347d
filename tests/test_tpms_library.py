"""Tests for the raw TPMS patterns."""

import sys
import os
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tpmsfield.tpms_library import (
    TPMSType,
    Gyroid,
    SchwarzPrimitive,
    SchwarzDiamond,
    Lidinoid,
    TPMS_PATTERNS,
    get_pattern,
    parse_tpms_type,
    _PeriodicPattern,
)

ALL_PATTERNS = [Gyroid, SchwarzPrimitive, SchwarzDiamond, Lidinoid]


def test_gyroid_origin():
    """Gyroid vanishes at the origin."""
    assert abs(Gyroid(1.0).evaluate(0.0, 0.0, 0.0)) < 1e-6


def test_primitive_origin():
    """Schwarz Primitive is 3 at the origin."""
    assert abs(SchwarzPrimitive(1.0).evaluate(0.0, 0.0, 0.0) - 3.0) < 1e-6


def test_known_values():
    """Spot values at quarter and eighth cells."""
    lam = 10.0
    gyroid = Gyroid(lam)
    # sin(pi/4)cos(pi/4) = 0.5, three terms
    assert gyroid(lam / 8, lam / 8, lam / 8) == pytest.approx(1.5)
    # sin(pi/2)cos(pi/2) = 0
    assert gyroid(lam / 4, lam / 4, lam / 4) == pytest.approx(0.0, abs=1e-12)

    primitive = SchwarzPrimitive(lam)
    assert primitive(lam / 2, 0.0, 0.0) == pytest.approx(1.0)

    # Diamond runs at half frequency: k = pi / unit_size
    diamond = SchwarzDiamond(1.0)
    assert diamond(0.0, 0.0, 0.0) == pytest.approx(1.0)
    assert diamond(0.5, 0.5, 0.5) == pytest.approx(-1.0)

    # Lidinoid at the origin: first bracket 0, second bracket 3
    assert Lidinoid(1.0)(0.0, 0.0, 0.0) == pytest.approx(-1.5)


def test_lidinoid_formula():
    """Lidinoid matches the expanded formula at an arbitrary point."""
    x, y, z = 0.3, -0.7, 1.9
    s = np.pi
    expected = (0.5 * (np.sin(2 * s * x) * np.cos(s * y) * np.sin(s * z) +
                       np.sin(2 * s * y) * np.cos(s * z) * np.sin(s * x) +
                       np.sin(2 * s * z) * np.cos(s * x) * np.sin(s * y)) -
                0.5 * (np.cos(2 * s * x) * np.cos(2 * s * y) +
                       np.cos(2 * s * y) * np.cos(2 * s * z) +
                       np.cos(2 * s * z) * np.cos(2 * s * x)))
    assert Lidinoid()(x, y, z) == pytest.approx(expected)


def test_frequency_scale():
    """Frequency scale and period follow the pattern family."""
    assert Gyroid(2.0).frequency_scale == pytest.approx(np.pi)
    assert SchwarzPrimitive(2.0).frequency_scale == pytest.approx(np.pi)
    assert SchwarzDiamond(2.0).frequency_scale == pytest.approx(np.pi / 2)
    assert Lidinoid(2.0).frequency_scale == pytest.approx(np.pi / 2)

    assert Gyroid(2.0).period == pytest.approx(2.0)
    assert SchwarzDiamond(2.0).period == pytest.approx(4.0)


@pytest.mark.parametrize("pattern_cls", ALL_PATTERNS)
@pytest.mark.parametrize("unit_size", [1.0, 3.7])
def test_periodicity(pattern_cls, unit_size):
    """Each pattern repeats with its period along every axis."""
    pattern = pattern_cls(unit_size)
    p = pattern.period
    rng = np.random.default_rng(1)
    x, y, z = rng.uniform(-5, 5, size=(3, 20))

    base = pattern(x, y, z)
    np.testing.assert_allclose(pattern(x + p, y, z), base, atol=1e-9)
    np.testing.assert_allclose(pattern(x, y + p, z), base, atol=1e-9)
    np.testing.assert_allclose(pattern(x, y, z + p), base, atol=1e-9)


@pytest.mark.parametrize("pattern_cls", [SchwarzPrimitive, SchwarzDiamond])
def test_full_permutation_symmetry(pattern_cls):
    """Primitive and Diamond are invariant under any axis permutation."""
    pattern = pattern_cls(1.0)
    x, y, z = 0.13, 0.57, -0.91
    base = pattern(x, y, z)
    for px, py, pz in [(y, x, z), (x, z, y), (z, y, x), (y, z, x), (z, x, y)]:
        assert pattern(px, py, pz) == pytest.approx(base, abs=1e-12)


@pytest.mark.parametrize("pattern_cls", [Gyroid, Lidinoid])
def test_cyclic_permutation_symmetry(pattern_cls):
    """Gyroid and Lidinoid are invariant under cyclic permutation."""
    pattern = pattern_cls(1.0)
    x, y, z = 0.13, 0.57, -0.91
    base = pattern(x, y, z)
    assert pattern(y, z, x) == pytest.approx(base, abs=1e-12)
    assert pattern(z, x, y) == pytest.approx(base, abs=1e-12)


def test_gyroid_not_fully_symmetric():
    """Swapping two axes mirrors the Gyroid."""
    pattern = Gyroid(1.0)
    assert pattern(0.1, 0.2, 0.3) != pytest.approx(pattern(0.2, 0.1, 0.3))


@pytest.mark.parametrize("pattern_cls", ALL_PATTERNS)
def test_bounded(pattern_cls):
    """Values stay within the bound given by the term count."""
    rng = np.random.default_rng(2)
    x, y, z = rng.uniform(-10, 10, size=(3, 2000))
    assert np.all(np.abs(pattern_cls(1.0)(x, y, z)) <= 3.0 + 1e-12)


def test_array_and_scalar_agree():
    """Array evaluation matches point-by-point evaluation."""
    pattern = Lidinoid(2.5)
    x = np.array([0.0, 0.4, 1.3])
    y = np.array([0.2, -1.0, 2.2])
    z = np.array([1.1, 0.9, -0.3])
    values = pattern(x, y, z)
    for i in range(3):
        assert values[i] == pytest.approx(pattern(x[i], y[i], z[i]))


def test_nan_propagates():
    """Non-finite input propagates instead of raising."""
    assert np.isnan(Gyroid(1.0)(np.nan, 0.0, 0.0))


@pytest.mark.parametrize("unit_size", [0.0, -1.0, np.inf, np.nan])
def test_invalid_unit_size(unit_size):
    """Non-positive or non-finite unit size is rejected at construction."""
    with pytest.raises(ValueError):
        Gyroid(unit_size)


@pytest.mark.parametrize("unit_size", [None, "wide", [1.0]])
def test_malformed_unit_size(unit_size):
    """Unit sizes that are not numbers raise ValueError, not TypeError."""
    with pytest.raises(ValueError, match="unit_size"):
        Gyroid(unit_size)


def test_base_pattern_is_abstract():
    """The shared base has no formula and cannot be built."""
    with pytest.raises(TypeError):
        _PeriodicPattern()


def test_patterns_are_immutable():
    """Patterns cannot be mutated after construction."""
    pattern = SchwarzPrimitive(2.0)
    with pytest.raises(AttributeError):
        pattern.unit_size = 3.0


def test_get_pattern():
    """Registry lookup by enum, value and name."""
    assert isinstance(get_pattern(TPMSType.GYROID), Gyroid)
    assert isinstance(get_pattern("P", 2.0), SchwarzPrimitive)
    assert isinstance(get_pattern("diamond"), SchwarzDiamond)
    assert get_pattern("l", 4.0) == Lidinoid(4.0)
    assert set(TPMS_PATTERNS) == set(TPMSType)


def test_get_pattern_unknown():
    """Unknown pattern names list the valid choices."""
    with pytest.raises(ValueError, match="GYROID"):
        parse_tpms_type("neovius")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
