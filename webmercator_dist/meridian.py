""" Meridian arc length on the WGS84 ellipsoid """

__all__ = ['meridian_distance', 'third_flattening']

import numpy as np

from webmercator_dist._const import WGS84_A, WGS84_B


def third_flattening() -> float:
    """Third flattening (n) of the WGS84 ellipsoid"""
    return (WGS84_A - WGS84_B) / (WGS84_A + WGS84_B)


def meridian_distance(lat):
    """
    Calculate the distance along the meridian from the equator to a latitude.

    Uses the series in powers of the third flattening (Helmert), truncated after the
    n^4 terms.

    Args:
        lat:
            Latitude in radians, within [0, pi/2]. Scalars and numpy arrays are
            both accepted.

    Returns:
        The signed arc length in meters
    """
    n = third_flattening()
    n2 = n * n
    n3 = n2 * n
    n4 = n2 * n2

    l0 = 1 + n2 / 4 + n4 / 64
    l2 = 3 * n / 2 - 3 * n3 / 16
    l4 = 15 * n2 / 16 - 15 * n4 / 64
    l6 = 35 * n3 / 48
    l8 = 315 * n4 / 512

    return ((WGS84_A + WGS84_B) / 2) * (
        l0 * lat
        - l2 * np.sin(2 * lat)
        + l4 * np.sin(4 * lat)
        - l6 * np.sin(6 * lat)
        + l8 * np.sin(8 * lat)
    )
