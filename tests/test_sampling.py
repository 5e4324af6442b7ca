import math

import pytest

from ashikhminlut import _sampling as sampling


SHININESS = [
    (1.0, 1.0),
    (10.0, 0.1),
    (0.1, 10.0),
    (100.0, 3.0),
]


def test_partial_phi_endpoints():
    assert sampling.partial_phi(0.0, 10.0, 0.1) == 0.0
    assert sampling.partial_phi(1.0, 10.0, 0.1) == math.pi / 2


@pytest.mark.parametrize('nu, nv', SHININESS)
def test_phi_range_and_monotonic(nu, nv):
    prev = -1.0
    for idx in range(512):
        value = sampling.phi(idx / 512, nu, nv)
        assert 0.0 <= value < 2 * math.pi
        assert value >= prev - 1e-12
        prev = value


@pytest.mark.parametrize('nu, nv', SHININESS)
@pytest.mark.parametrize('boundary', [0.25, 0.5, 0.75])
def test_phi_continuous_at_quadrants(nu, nv, boundary):
    eps = 1e-7
    below = sampling.phi(boundary - eps, nu, nv)
    above = sampling.phi(boundary + eps, nu, nv)
    assert below == pytest.approx(above, abs=1e-4)
    assert sampling.phi(boundary, nu, nv) == pytest.approx(boundary * 2 * math.pi, abs=1e-9)


def test_phi_wraps_at_one():
    assert sampling.phi(1.0, 10.0, 0.1) == 0.0


@pytest.mark.parametrize('nu, nv', SHININESS)
def test_phi_just_below_one_stays_in_range(nu, nv):
    value = sampling.phi(math.nextafter(1.0, 0.0), nu, nv)
    assert 0.0 <= value < 2 * math.pi


@pytest.mark.parametrize('shininess', [0.0, 1.0, 25.0])
def test_phi_isotropic_is_linear(shininess):
    for idx in range(64):
        u = idx / 64
        assert sampling.phi(u, shininess, shininess) == pytest.approx(2 * math.pi * u, abs=1e-9)


def test_exponent_isotropic_is_constant():
    for idx in range(16):
        azimuth = idx / 16 * 2 * math.pi
        assert sampling.directional_exponent(azimuth, 7.0, 7.0) == pytest.approx(7.0)


def test_exponent_anisotropic():
    along_u = sampling.directional_exponent(0.0, 10.0, 0.1)
    along_v = sampling.directional_exponent(math.pi / 2, 10.0, 0.1)
    assert along_u == pytest.approx(10.0)
    assert along_v == pytest.approx(0.1)
    assert along_u > along_v


def test_cos_theta_range_and_monotonic():
    assert sampling.cos_theta(0.0, 5.0, 5.0, 5.0) == 1.0

    prev = 1.0
    for idx in range(1, 512):
        value = sampling.cos_theta(idx / 512, 5.0, 5.0, 5.0)
        assert 0.0 < value <= 1.0
        assert value < prev
        prev = value


def test_cos_theta_anisotropic_falloff():
    v = 0.5
    along_u = sampling.cos_theta(v, sampling.directional_exponent(0.0, 10.0, 0.1), 10.0, 0.1)
    along_v = sampling.cos_theta(v, sampling.directional_exponent(math.pi / 2, 10.0, 0.1), 10.0, 0.1)
    assert along_u > along_v


@pytest.mark.parametrize('nu, nv', SHININESS)
def test_half_vector_is_unit(nu, nv):
    for xcoord in range(0, 32, 3):
        for ycoord in range(0, 32, 5):
            u, v = sampling.texel_coords(xcoord, ycoord, 32)
            hvec_x, hvec_y, hvec_z, pdf = sampling.sample_half_vector(u, v, nu, nv)
            assert hvec_x ** 2 + hvec_y ** 2 + hvec_z ** 2 == pytest.approx(1.0)
            assert hvec_z > 0.0
            assert 0.0 < pdf <= 1.0


def test_sample_at_origin_is_normal():
    assert sampling.sample_half_vector(0.0, 0.0, 1.0, 1.0) == (0.0, 0.0, 1.0, 1.0)


def test_texel_coords():
    assert sampling.texel_coords(0, 3, 4) == (0.0, 0.0)
    assert sampling.texel_coords(0, 0, 4) == (0.0, 0.75)
    assert sampling.texel_coords(3, 0, 4) == (0.75, 0.75)


def test_normalization_constant():
    assert sampling.normalization_constant(0.0, 0.0) == pytest.approx(1 / (2 * math.pi))
    assert sampling.normalization_constant(3.0, 15.0) == pytest.approx(8 / (2 * math.pi))


@pytest.mark.parametrize('nu, nv', [
    (-1.0, 1.0),
    (1.0, -1.0),
    (-5.0, -5.0),
    (float('nan'), 1.0),
])
def test_validate_shininess_rejects(nu, nv):
    with pytest.raises(sampling.InvalidShininessError, match='invalid shininess parameter'):
        sampling.validate_shininess(nu, nv)


def test_validate_shininess_accepts():
    sampling.validate_shininess(-0.5, 0.0)
