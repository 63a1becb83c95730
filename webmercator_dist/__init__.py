from webmercator_dist._version import __version__  # noqa: F401
from webmercator_dist.utils.logging import LOGGER
from webmercator_dist.meridian import meridian_distance
from webmercator_dist.projection import (
    ellipsoidal_mercator, inverse_ellipsoidal_mercator, spherical_mercator
)
from webmercator_dist.scan import DistortionSample, sample_distortion, scan_distortion

__all__ = [
    'DistortionSample',
    'ellipsoidal_mercator',
    'inverse_ellipsoidal_mercator',
    'meridian_distance',
    'sample_distortion',
    'scan_distortion',
    'spherical_mercator',
    'LOGGER',
]
