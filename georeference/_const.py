"""
Constants declarations for georeference
"""

import math

# Smallest positive double; differences below it are exact equality
DOUBLE_EPSILON = math.ulp(0.0)

NAUTICAL_MILE = 1852.0  # meters

# Vincenty inverse iteration controls
VINCENTY_MAX_ITERATIONS = 100
VINCENTY_CONVERGENCE = 0.5e-13  # radians
VINCENTY_LIMIT_EPSILON = 1e-10  # radians

# Latitude delta (radians) under which a rhumb line is treated as parallel sailing
PARALLEL_SAILING_THRESHOLD = 0.0008

# Preset ellipsoids: (equatorial axis in meters, inverse flattening)
WGS84 = (6378137.0, 298.257223563)
GRS80 = (6378137.0, 298.257222101)
INTERNATIONAL_1924 = (6378388.0, 297.0)
CLARKE_1866 = (6378206.4, 294.9786982)
