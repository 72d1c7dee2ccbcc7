"""Small instances and a fake candidate shared by the test modules."""
import math
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .engine import Candidate
from .model import PCTSPModel
from .problem import Location, Problem


def unit_square(budget: float, prizes: Sequence[float] = (0, 5, 5, 5)) -> Problem:
    """Four locations on the corners of a unit square, visited in index order."""
    d = math.sqrt(2)
    distances = np.array([
        [0, 1, d, 1],
        [1, 0, 1, d],
        [d, 1, 0, 1],
        [1, d, 1, 0],
    ], dtype=np.float64)
    corners = [(0.0, 0.0), (0.0, 0.01), (0.01, 0.01), (0.01, 0.0)]
    return Problem(
        locations=[Location(lat, lon, p) for (lat, lon), p in zip(corners, prizes)],
        distances=distances,
        budget=budget,
    )


def selection(n: int, edges: Sequence[Tuple[int, int]]) -> np.ndarray:
    """Symmetric 0/1 edge matrix."""
    sol = np.zeros((n, n))
    for i, j in edges:
        sol[i, j] = sol[j, i] = 1.0
    return sol


def cycle(nodes: Sequence[int]) -> List[Tuple[int, int]]:
    return list(zip(nodes, list(nodes[1:]) + [nodes[0]]))


class FakeCandidate(Candidate):
    def __init__(self, model: PCTSPModel, sol: np.ndarray):
        n = model.size
        visits = [1.0 if sol[i].sum() > 0.5 else 0.0 for i in range(n)]
        self.values: Dict = {}
        for i in range(n):
            for j in range(n):
                self.values[model.x[i][j]] = float(sol[i, j])
            self.values[model.v[i]] = visits[i]
        self.values[model.n_visited] = sum(visits)
        self.lazy = []

    def value(self, var) -> float:
        return self.values[var]

    def add_lazy_constraint(self, expr, relation, rhs) -> None:
        self.lazy.append((expr, relation, rhs))
