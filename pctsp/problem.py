import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from .distance import distance_matrix
from .errors import MalformedInput

DEPOT = 0


@dataclass(frozen=True)
class Location:
    lat: float
    lon: float
    prize: float


@dataclass
class Problem:
    locations: List[Location]
    distances: NDArray
    budget: float

    @property
    def size(self) -> int:
        return len(self.locations)

    @property
    def prizes(self) -> List[float]:
        return [loc.prize for loc in self.locations]

    @property
    def coordinates(self) -> List[Tuple[float, float]]:
        return [(loc.lat, loc.lon) for loc in self.locations]

    @classmethod
    def from_locations(cls, locations: List[Location], budget: float) -> 'Problem':
        return cls(
            locations=list(locations),
            distances=distance_matrix([(loc.lat, loc.lon) for loc in locations]),
            budget=budget,
        )

    def validate(self):
        n = self.size
        if n == 0:
            raise MalformedInput('problem has no depot')

        d = np.asarray(self.distances, dtype=np.float64)
        if d.shape != (n, n):
            raise MalformedInput(
                f'distance matrix has shape {d.shape}, expected {(n, n)}')
        if not np.all(np.isfinite(d)):
            raise MalformedInput('distance matrix contains non-finite values')
        if not np.allclose(d, d.T, rtol=0.0, atol=1e-9):
            raise MalformedInput('distance matrix is not symmetric')
        if np.any(np.diag(d) != 0.0):
            raise MalformedInput('distance matrix has a non-zero diagonal')
        if np.any(d < 0.0):
            raise MalformedInput('distance matrix has negative entries')

        for i, loc in enumerate(self.locations):
            if not (loc.prize >= 0.0):
                raise MalformedInput(f'location {i} has negative prize {loc.prize}')

        if not math.isfinite(self.budget) or self.budget < 0:
            raise MalformedInput(f'invalid budget {self.budget}')


def read_problem(path: str, budget: float) -> Problem:
    """Reads a table of `latitude, longitude, prize` rows. The first row is the depot."""
    try:
        table = np.loadtxt(path, delimiter=',', comments='#', ndmin=2)
    except ValueError as e:
        raise MalformedInput(f'cannot parse {path}: {e}') from e

    if table.shape[1] != 3:
        raise MalformedInput(
            f'{path}: expected 3 columns (lat, lon, prize), got {table.shape[1]}')

    locations = [
        Location(lat=float(lat), lon=float(lon), prize=float(prize))
        for lat, lon, prize in table
    ]
    return Problem.from_locations(locations, budget)
