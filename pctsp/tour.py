from typing import List, Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import MalformedSolutionState
from .problem import DEPOT


def extract_tour(sol: NDArray, tol: float = 1e-6) -> List[int]:
    """Converts a final edge selection into the visiting order [depot, ..., depot]."""
    sol = np.array(sol, dtype=np.float64)  # edges are consumed on a copy
    n = sol.shape[0]

    tour = [DEPOT]
    current = DEPOT
    for _ in range(n):
        nxt = None
        for j in range(n):
            if sol[current, j] >= 1 - tol:
                nxt = j
                break
        if nxt is None:
            if len(tour) == 1 and not np.any(sol >= 1 - tol):
                # Depot only, nothing selected.
                return [DEPOT, DEPOT]
            raise MalformedSolutionState(
                f'tour is stuck at location {current} after {len(tour)} stops: {tour}')

        sol[current, nxt] = sol[nxt, current] = 0.0
        tour.append(nxt)
        current = nxt
        if current == DEPOT:
            if np.any(sol >= 1 - tol):
                raise MalformedSolutionState(
                    f'selected edges remain outside the tour {tour}')
            return tour

    raise MalformedSolutionState(
        f'tour does not return to the depot within {n} steps: {tour}')


def tour_length(tour: Sequence[int], distances: NDArray) -> float:
    return float(sum(distances[a, b] for a, b in zip(tour, tour[1:])))


def tour_prize(tour: Sequence[int], prizes: Sequence[float]) -> float:
    return float(sum(prizes[i] for i in set(tour)))
