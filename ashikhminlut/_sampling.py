from __future__ import annotations
# pylint: disable=invalid-name

import math
from typing_extensions import (
    TypeAlias,
)

Vec2TupleType: TypeAlias = 'tuple[float, float]'
HalfVectorSampleType: TypeAlias = 'tuple[float, float, float, float]'


class InvalidShininessError(ValueError):
    pass


def validate_shininess(nu: float, nv: float) -> None:
    # Written as a negated comparison so NaN is rejected too
    if not nu > -1.0:
        raise InvalidShininessError(f'invalid shininess parameter nU={nu}, must be > -1')
    if not nv > -1.0:
        raise InvalidShininessError(f'invalid shininess parameter nV={nv}, must be > -1')


def partial_phi(x: float, nu: float, nv: float) -> float:
    '''Map x in [0, 1] to an azimuth in [0, pi/2] for the first quadrant'''
    if x == 1.0:
        # tan() diverges here
        return math.pi / 2.0

    coeff = math.sqrt((nu + 1.0) / (nv + 1.0))
    return math.atan(coeff * math.tan(math.pi * x / 2.0))


def phi(u: float, nu: float, nv: float) -> float:
    '''Map u in [0, 1) to an azimuth in [0, 2pi)

    The first-quadrant mapping is mirrored into the other three quadrants so
    that the bands glue together continuously at 0.25, 0.5 and 0.75.
    '''
    if u <= 0.25:
        return partial_phi(4.0 * u, nu, nv)
    if u < 0.5:
        return math.pi - partial_phi(2.0 - 4.0 * u, nu, nv)
    if u < 0.75:
        return math.pi + partial_phi(4.0 * u - 2.0, nu, nv)
    if u < 1.0:
        azimuth = 2.0 * math.pi - partial_phi(4.0 * (1.0 - u), nu, nv)
        # Rounding can land exactly on 2pi just below u == 1.0
        return azimuth if azimuth < 2.0 * math.pi else 0.0

    # u == 1.0 is 2pi, which wraps to 0
    return 0.0


def directional_exponent(azimuth: float, nu: float, nv: float) -> float:
    cosphi = math.cos(azimuth)
    sinphi = math.sin(azimuth)
    return nu * cosphi * cosphi + nv * sinphi * sinphi


def cos_theta(v: float, exponent: float, nu: float, nv: float) -> float: # pylint: disable=unused-argument
    return math.pow(1.0 - v, 1.0 / (exponent + 1.0))


def normalization_constant(nu: float, nv: float) -> float:
    '''Factor missing from the stored pdf

    Stored densities are cos(theta)^exponent only. Multiplying by this
    constant gives the true Ashikhmin-Shirley half-vector density, which can
    exceed 1 and so does not fit in an 8-bit channel.
    '''
    return math.sqrt((nu + 1.0) * (nv + 1.0)) / (2.0 * math.pi)


def texel_coords(xcoord: int, ycoord: int, size: int) -> Vec2TupleType:
    # u grows left to right, v grows bottom to top
    return (xcoord / size, (size - ycoord - 1) / size)


def sample_half_vector(u: float, v: float, nu: float, nv: float) -> HalfVectorSampleType:
    azimuth = phi(u, nu, nv)
    cosphi = math.cos(azimuth)
    sinphi = math.sin(azimuth)
    exponent = directional_exponent(azimuth, nu, nv)

    costheta = cos_theta(v, exponent, nu, nv)
    sintheta = math.sqrt(1.0 - costheta * costheta)

    hvec_x = sintheta * cosphi
    hvec_y = sintheta * sinphi
    hvec_z = costheta

    pdf = math.pow(costheta, exponent)

    return (hvec_x, hvec_y, hvec_z, pdf)
