"""
Spherical and ellipsoidal Mercator projections of latitude onto the map's y axis.

All northings are absolute meters from the equator on the WGS84 ellipsoid. Functions
accept either scalars or numpy arrays of latitudes (radians) / northings (meters).
"""

__all__ = [
    'eccentricity', 'ellipsoidal_mercator', 'inverse_ellipsoidal_mercator',
    'spherical_mercator',
]

import math

import numpy as np

from webmercator_dist._const import WGS84_A, WGS84_B


def eccentricity() -> float:
    """First eccentricity of the WGS84 ellipsoid"""
    return math.sqrt(1 - (WGS84_B ** 2) / (WGS84_A ** 2))


def spherical_mercator(lat):
    """
    Project a latitude using the spherical (Web Mercator) approximation.

    Args:
        lat:
            Latitude in radians, strictly within (-pi/2, pi/2)

    Returns:
        The northing in meters
    """
    return WGS84_A * np.log(np.tan(np.pi / 4 + lat / 2))


def ellipsoidal_mercator(lat):
    """
    Project a latitude using the ellipsoidal Mercator projection.

    Args:
        lat:
            Latitude in radians, strictly within (-pi/2, pi/2)

    Returns:
        The northing in meters
    """
    e = eccentricity()
    esin = e * np.sin(lat)
    f = ((1 - esin) / (1 + esin)) ** (e / 2)

    return WGS84_A * np.log(f * np.tan(np.pi / 4 + lat / 2))


def inverse_ellipsoidal_mercator(y):
    """
    Recover the geodetic latitude of an ellipsoidal Mercator northing.

    The conformal latitude is converted back to geodetic latitude using the series
    expansion in e^2 from Snyder (1987), truncated after the e^8 terms.

    Feeding a spherical northing through this function yields the latitude the
    ellipsoidal projection would assign to that northing.

    Args:
        y:
            Northing in meters

    Returns:
        The latitude in radians
    """
    e2 = eccentricity() ** 2
    e4 = e2 * e2
    e6 = e2 * e4
    e8 = e4 * e4

    chi = np.pi / 2 - 2 * np.arctan(np.exp(-y / WGS84_A))

    l2 = e2 / 2 + 5 * e4 / 24 + e6 / 12 + 13 * e8 / 360
    l4 = 7 * e4 / 48 + 29 * e6 / 240 + 811 * e8 / 11520
    l6 = 7 * e6 / 120 + 81 * e8 / 1120
    l8 = 4279 * e8 / 161280

    return (
        chi
        + l2 * np.sin(2 * chi)
        + l4 * np.sin(4 * chi)
        + l6 * np.sin(6 * chi)
        + l8 * np.sin(8 * chi)
    )
