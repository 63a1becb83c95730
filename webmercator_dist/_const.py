"""
Constants declarations for webmercator_dist
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.314245  # Semi-minor axis (meters)

# Latitude scan
DEFAULT_INCREMENT_DEGREES = 1.0
MAX_LATITUDE_DEGREES = 90.0
