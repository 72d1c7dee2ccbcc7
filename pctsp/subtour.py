from dataclasses import dataclass
from typing import List

import numpy as np
from numpy.typing import NDArray

from .problem import DEPOT


@dataclass
class SubtourReport:
    members: NDArray  # bool, True iff in the depot's component
    count: int

    @property
    def nodes(self) -> List[int]:
        return [int(i) for i in np.flatnonzero(self.members)]

    def is_tour(self, total_visited: float) -> bool:
        return self.count == int(round(total_visited))


def find_subtour(sol: NDArray, tol: float = 1e-6) -> SubtourReport:
    """Finds the component of the selected edges that contains the depot.

    The walk always continues with the lowest-index unvisited neighbour, so the
    same candidate always yields the same report.
    """
    n = sol.shape[0]
    members = np.zeros(n, dtype=bool)
    members[DEPOT] = True
    count = 1

    current = DEPOT
    while True:
        found = None
        for j in range(n):
            if not members[j] and sol[current, j] >= 1 - tol:
                found = j
                break
        if found is None:
            break
        members[found] = True
        count += 1
        current = found

    return SubtourReport(members=members, count=count)
