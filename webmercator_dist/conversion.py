"""
Module for unit conversions
"""
__all__ = ['convert_to_km']

METERS_PER_KM = 1000


def convert_to_km(distance: float) -> float:
    """
    Converts a distance in meters to kilometers.

    Args:
        distance (float): The distance, in meters.

    Returns:
        float: The distance in kilometers.
    """
    return distance / METERS_PER_KM
