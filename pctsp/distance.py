import math
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import MalformedInput

EARTH_RADIUS = 6371000  # metres


def great_circle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in metres between two (lat, lon) points given in degrees."""
    for lat, lon in ((lat1, lon1), (lat2, lon2)):
        if not (-90.0 <= lat <= 90.0) or not (-180.0 <= lon <= 180.0):
            raise MalformedInput(f'invalid coordinate ({lat}, {lon})')

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = phi2 - phi1
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + \
        math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS * c


def distance_matrix(coords: Sequence[Tuple[float, float]]) -> NDArray:
    n = len(coords)
    distances = np.zeros((n, n), dtype=np.float64)

    for i in range(n):
        for j in range(i+1, n):
            distances[i, j] = distances[j, i] = great_circle(
                coords[i][0], coords[i][1], coords[j][0], coords[j][1])

    return distances
