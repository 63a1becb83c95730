"""
Latitude scan comparing the spherical (Web Mercator) projection against the
ellipsoidal Mercator projection
"""

__all__ = [
    'DistortionSample', 'format_sample', 'iter_latitudes', 'sample_distortion',
    'scan_distortion', 'validate_increment',
]

from dataclasses import dataclass
import math
from typing import Iterator

from webmercator_dist._const import DEFAULT_INCREMENT_DEGREES, MAX_LATITUDE_DEGREES
from webmercator_dist.conversion import convert_to_km
from webmercator_dist.meridian import meridian_distance
from webmercator_dist.projection import (
    ellipsoidal_mercator, inverse_ellipsoidal_mercator, spherical_mercator
)
from webmercator_dist.utils.logging import LOGGER, warn_once


@dataclass(frozen=True)
class DistortionSample:
    """
    The distortion of the spherical projection at a single latitude.

    Attributes:
        latitude_degrees:
            The sampled latitude

        map_offset_meters:
            Difference between the spherical and ellipsoidal northings

        ground_error_meters:
            Meridian distance between the sampled latitude and the latitude the
            ellipsoidal projection assigns to the spherical northing
    """
    latitude_degrees: float
    map_offset_meters: float
    ground_error_meters: float

    @property
    def map_offset_km(self) -> float:
        return convert_to_km(self.map_offset_meters)

    @property
    def ground_error_km(self) -> float:
        return convert_to_km(self.ground_error_meters)


def validate_increment(increment: float) -> bool:
    """Whether an increment (degrees) lies within (0, 90]"""
    return 0.0 < increment <= MAX_LATITUDE_DEGREES


def sample_distortion(lat_deg: float) -> DistortionSample:
    """
    Compare both projections at one latitude.

    Args:
        lat_deg:
            The latitude, in degrees

    Returns:
        DistortionSample
    """
    if lat_deg >= MAX_LATITUDE_DEGREES:
        warn_once(
            'Mercator northings are singular at the pole; the pole sample is '
            'reported as computed. (this warning will not repeat)'
        )

    lat = math.radians(lat_deg)
    y_spherical = spherical_mercator(lat)
    y_ellipsoidal = ellipsoidal_mercator(lat)
    lat_equivalent = inverse_ellipsoidal_mercator(y_spherical)

    return DistortionSample(
        latitude_degrees=lat_deg,
        map_offset_meters=float(y_spherical - y_ellipsoidal),
        ground_error_meters=float(
            meridian_distance(lat_equivalent) - meridian_distance(lat)
        ),
    )


def iter_latitudes(increment: float = DEFAULT_INCREMENT_DEGREES) -> Iterator[float]:
    """
    Yields latitudes from the equator to the pole, inclusive.

    The latitude is a running sum of the increment, so the last value yielded is
    the final sum that does not exceed 90 degrees.

    Args:
        increment:
            The step, in degrees. Must lie within (0, 90]. Defaults to 1 degree.

    Returns:
        Iterator of latitudes in degrees
    """
    if not validate_increment(increment):
        raise ValueError(
            f'Increment should be in (0.0, {MAX_LATITUDE_DEGREES}], got {increment}'
        )

    lat_deg = 0.0
    while lat_deg <= MAX_LATITUDE_DEGREES:
        yield lat_deg
        lat_deg += increment


def scan_distortion(
    increment: float = DEFAULT_INCREMENT_DEGREES
) -> Iterator[DistortionSample]:
    """
    Samples the projection distortion from the equator to the pole.

    Args:
        increment:
            The latitude step, in degrees

    Returns:
        Iterator of DistortionSample, ordered by latitude
    """
    for lat_deg in iter_latitudes(increment):
        sample = sample_distortion(lat_deg)
        LOGGER.debug(
            'lat=%s map_offset=%s m ground_error=%s m',
            sample.latitude_degrees,
            sample.map_offset_meters,
            sample.ground_error_meters,
        )
        yield sample


def format_sample(sample: DistortionSample) -> str:
    """Render a sample as a single human-readable report line"""
    return (
        f'[{sample.latitude_degrees:05.2f}°] '
        f'map: {sample.map_offset_km:06.3f} km, '
        f'ground: {sample.ground_error_km:06.3f} km'
    )
